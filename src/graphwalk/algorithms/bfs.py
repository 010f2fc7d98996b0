"""Breadth-first search and hop-distance labeling."""

from __future__ import annotations

import logging
import math
from collections import deque
from typing import TYPE_CHECKING, Any

import numpy

from graphwalk.algorithms._common import Color, check_vertex, prepare_result
from graphwalk.algorithms.visitors import DistanceRecorder, Visitor, chain, make_visitor
from graphwalk.graph.protocols import SupportsIncidence, SupportsVertexList, require

if TYPE_CHECKING:
    from graphwalk.graph.types import Vertex

logger = logging.getLogger(__name__)


def breadth_first_search(graph: Any, source: Vertex, *, visitor: Visitor | None = None) -> None:
    """Visit every vertex reachable from *source* in non-decreasing hop order.

    Requires ``SupportsVertexList`` and ``SupportsIncidence``.  Each vertex
    other than *source* that gets reached fires exactly one ``tree_edge``
    followed by ``discover_vertex``.
    """
    require(graph, SupportsVertexList, SupportsIncidence, algorithm="breadth_first_search")
    check_vertex(graph, source, "Source")
    vis = visitor if visitor is not None else Visitor()

    color = [Color.WHITE] * graph.num_vertices()
    for v in graph.vertices():
        vis.initialize_vertex(graph, v)

    vis.start_vertex(graph, source)
    color[source] = Color.GRAY
    vis.discover_vertex(graph, source)
    queue: deque[Vertex] = deque([source])

    while queue:
        u = queue.popleft()
        vis.examine_vertex(graph, u)
        for e in graph.out_edges(u):
            v = graph.target(e)
            vis.examine_edge(graph, e)
            if color[v] is Color.WHITE:
                vis.tree_edge(graph, e)
                color[v] = Color.GRAY
                vis.discover_vertex(graph, v)
                queue.append(v)
            else:
                vis.non_tree_edge(graph, e)
                if color[v] is Color.GRAY:
                    vis.gray_target(graph, e)
                else:
                    vis.black_target(graph, e)
        color[u] = Color.BLACK
        vis.finish_vertex(graph, u)


def bfs_distances(
    graph: Any,
    source: Vertex,
    *,
    distance: Any = None,
    visitor: Visitor | None = None,
) -> Any:
    """Label every vertex with its hop distance from *source*.

    Unreachable vertices stay at ``inf``.  When *distance* is omitted a
    numpy float array is allocated; a caller-supplied array (or writable
    property map) is reset to ``inf`` and filled in place; typed storage
    must be floating point or ``ValueError`` is raised.  Returns the
    distance array.
    """
    require(graph, SupportsVertexList, SupportsIncidence, algorithm="bfs_distances")
    check_vertex(graph, source, "Source")
    if distance is None:
        distance = numpy.full(graph.num_vertices(), numpy.inf)
    else:
        prepare_result(graph, distance, "distance", math.inf)

    distance[source] = 0
    breadth_first_search(graph, source, visitor=chain(DistanceRecorder(distance), visitor))
    return distance


def reachable_from(graph: Any, source: Vertex) -> list[Vertex]:
    """Vertices reachable from *source* (itself included), in discovery order."""
    found: list[Vertex] = []
    collect = make_visitor(discover_vertex=lambda _graph, v: found.append(v))
    breadth_first_search(graph, source, visitor=collect)
    logger.debug("%d of %d vertices reachable from %s", len(found), graph.num_vertices(), source)
    return found
