"""Generic algorithms — written against the capability protocols only."""

from graphwalk.algorithms.bfs import bfs_distances, breadth_first_search, reachable_from
from graphwalk.algorithms.circuits import all_circuits, hawick_circuits, unique_circuits
from graphwalk.algorithms.dfs import (
    depth_first_search,
    find_back_edge,
    has_cycle,
    topological_sort,
)
from graphwalk.algorithms.dijkstra import ShortestPaths, dijkstra_shortest_paths, shortest_path
from graphwalk.algorithms.scheduling import level_schedule, schedule_groups
from graphwalk.algorithms.visitors import (
    DistanceRecorder,
    PredecessorRecorder,
    Visitor,
    VisitorChain,
    chain,
    make_visitor,
)

__all__ = [
    "DistanceRecorder",
    "PredecessorRecorder",
    "ShortestPaths",
    "Visitor",
    "VisitorChain",
    "all_circuits",
    "bfs_distances",
    "breadth_first_search",
    "chain",
    "depth_first_search",
    "dijkstra_shortest_paths",
    "find_back_edge",
    "has_cycle",
    "hawick_circuits",
    "level_schedule",
    "make_visitor",
    "reachable_from",
    "schedule_groups",
    "shortest_path",
    "topological_sort",
    "unique_circuits",
]
