"""graphwalk: generic graph traversal over capability protocols.

Algorithms are written once against narrow graph protocols and run on any
representation that provides them, whether a stored adjacency list or a graph
computed on the fly.
"""

__version__ = "0.1.0"

from graphwalk.algorithms import (
    DistanceRecorder,
    PredecessorRecorder,
    ShortestPaths,
    Visitor,
    VisitorChain,
    all_circuits,
    bfs_distances,
    breadth_first_search,
    chain,
    depth_first_search,
    dijkstra_shortest_paths,
    find_back_edge,
    has_cycle,
    hawick_circuits,
    level_schedule,
    make_visitor,
    reachable_from,
    schedule_groups,
    shortest_path,
    topological_sort,
    unique_circuits,
)
from graphwalk.exceptions import (
    CapabilityMissingError,
    ConstructionError,
    CycleDetectedError,
    GraphError,
    NegativeWeightError,
    StaleDescriptorError,
    StopTraversal,
)
from graphwalk.graph import (
    ArrayPropertyMap,
    AttributePropertyMap,
    BidirectionalStoredGraph,
    Directedness,
    FunctionPropertyMap,
    Graph,
    IdentityPropertyMap,
    ReadablePropertyMap,
    ReadWritePropertyMap,
    RecordFormat,
    RingEdge,
    RingGraph,
    StoredEdge,
    StoredGraph,
    SupportsAdjacency,
    SupportsAdjacencyMatrix,
    SupportsBidirectional,
    SupportsEdgeList,
    SupportsEdgeWeight,
    SupportsIncidence,
    SupportsVertexList,
    UndirectedStoredGraph,
    from_delimited_records,
    from_edge_list,
    get,
    put,
    ring_edge_weight,
    stored_graph,
)

__all__ = [
    "ArrayPropertyMap",
    "AttributePropertyMap",
    "BidirectionalStoredGraph",
    "CapabilityMissingError",
    "ConstructionError",
    "CycleDetectedError",
    "Directedness",
    "DistanceRecorder",
    "FunctionPropertyMap",
    "Graph",
    "GraphError",
    "IdentityPropertyMap",
    "NegativeWeightError",
    "PredecessorRecorder",
    "ReadWritePropertyMap",
    "ReadablePropertyMap",
    "RecordFormat",
    "RingEdge",
    "RingGraph",
    "ShortestPaths",
    "StaleDescriptorError",
    "StopTraversal",
    "StoredEdge",
    "StoredGraph",
    "SupportsAdjacency",
    "SupportsAdjacencyMatrix",
    "SupportsBidirectional",
    "SupportsEdgeList",
    "SupportsEdgeWeight",
    "SupportsIncidence",
    "SupportsVertexList",
    "UndirectedStoredGraph",
    "Visitor",
    "VisitorChain",
    "__version__",
    "all_circuits",
    "bfs_distances",
    "breadth_first_search",
    "chain",
    "depth_first_search",
    "dijkstra_shortest_paths",
    "find_back_edge",
    "from_delimited_records",
    "from_edge_list",
    "get",
    "has_cycle",
    "hawick_circuits",
    "level_schedule",
    "make_visitor",
    "put",
    "reachable_from",
    "ring_edge_weight",
    "schedule_groups",
    "shortest_path",
    "stored_graph",
    "topological_sort",
    "unique_circuits",
]
