"""Graph layer — capability protocols, representations and property maps."""

from graphwalk.graph._ring import RingGraph, ring_edge_weight
from graphwalk.graph._stored import (
    BidirectionalStoredGraph,
    StoredGraph,
    UndirectedStoredGraph,
    stored_graph,
)
from graphwalk.graph.builders import from_delimited_records, from_edge_list
from graphwalk.graph.property_maps import (
    ArrayPropertyMap,
    AttributePropertyMap,
    FunctionPropertyMap,
    IdentityPropertyMap,
    ReadablePropertyMap,
    ReadWritePropertyMap,
    get,
    put,
)
from graphwalk.graph.protocols import (
    Graph,
    SupportsAdjacency,
    SupportsAdjacencyMatrix,
    SupportsBidirectional,
    SupportsEdgeList,
    SupportsEdgeWeight,
    SupportsIncidence,
    SupportsVertexList,
    require,
)
from graphwalk.graph.types import Directedness, RecordFormat, RingEdge, StoredEdge, Vertex

__all__ = [
    "ArrayPropertyMap",
    "AttributePropertyMap",
    "BidirectionalStoredGraph",
    "Directedness",
    "FunctionPropertyMap",
    "Graph",
    "IdentityPropertyMap",
    "ReadWritePropertyMap",
    "ReadablePropertyMap",
    "RecordFormat",
    "RingEdge",
    "RingGraph",
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
    "Vertex",
    "from_delimited_records",
    "from_edge_list",
    "get",
    "put",
    "require",
    "ring_edge_weight",
    "stored_graph",
]
