"""Single-source shortest paths over non-negative edge weights."""

from __future__ import annotations

import heapq
import itertools
import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import numpy

from graphwalk.algorithms._common import check_vertex, prepare_result
from graphwalk.algorithms.visitors import Visitor
from graphwalk.exceptions import NegativeWeightError
from graphwalk.graph.protocols import (
    SupportsEdgeWeight,
    SupportsIncidence,
    SupportsVertexList,
    require,
)

if TYPE_CHECKING:
    from graphwalk.graph.property_maps import ReadablePropertyMap
    from graphwalk.graph.types import Vertex

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, eq=False)
class ShortestPaths:
    """Result arrays of a shortest-path search.

    Attributes:
        source: The search origin.
        distance: Minimum path weight per vertex; ``inf`` when unreachable.
        predecessor: Previous vertex on a minimum path; the source maps to
            itself and unreachable vertices to ``None``.
    """

    source: Vertex
    distance: Any
    predecessor: Any


def dijkstra_shortest_paths(
    graph: Any,
    source: Vertex,
    *,
    weight: ReadablePropertyMap | None = None,
    distance: Any = None,
    predecessor: Any = None,
    visitor: Visitor | None = None,
) -> ShortestPaths:
    """Dijkstra's algorithm from *source*.

    Parameters
    ----------
    weight:
        Edge weight map.  Defaults to ``graph.edge_weight_map()``, which
        requires ``SupportsEdgeWeight``.
    distance, predecessor:
        Optional caller-owned arrays (or writable maps) with a slot per
        vertex, reset and filled in place.  Allocated when omitted: a
        numpy float array for distances, a list for predecessors.  Typed
        arrays must hold the reset values (floating point for
        *distance*, ``dtype=object`` for *predecessor*, which marks
        unreachable vertices with ``None``); otherwise ``ValueError``.

    Raises ``NegativeWeightError`` as soon as an edge with negative weight
    is examined.  Among vertices at equal tentative distance the one
    reached first is settled first.
    """
    require(graph, SupportsVertexList, SupportsIncidence, algorithm="dijkstra_shortest_paths")
    if weight is None:
        require(graph, SupportsEdgeWeight, algorithm="dijkstra_shortest_paths")
        weight = graph.edge_weight_map()
    check_vertex(graph, source, "Source")

    n = graph.num_vertices()
    if distance is None:
        distance = numpy.full(n, numpy.inf)
    else:
        prepare_result(graph, distance, "distance", math.inf)
    if predecessor is None:
        predecessor = [None] * n
    else:
        prepare_result(graph, predecessor, "predecessor", None)
    vis = visitor if visitor is not None else Visitor()

    for v in graph.vertices():
        vis.initialize_vertex(graph, v)
    distance[source] = 0
    predecessor[source] = source
    vis.discover_vertex(graph, source)

    settled = [False] * n
    tiebreak = itertools.count()
    heap: list[tuple[float, int, Vertex]] = [(0, next(tiebreak), source)]
    while heap:
        d, _, u = heapq.heappop(heap)
        if settled[u]:
            continue
        settled[u] = True
        vis.examine_vertex(graph, u)
        for e in graph.out_edges(u):
            v = graph.target(e)
            w = weight[e]
            vis.examine_edge(graph, e)
            if w < 0:
                msg = f"Edge {e!r} has negative weight {w}"
                raise NegativeWeightError(msg, edge=e, weight=w)
            candidate = d + w
            if candidate < distance[v]:
                undiscovered = distance[v] == math.inf
                distance[v] = candidate
                predecessor[v] = u
                vis.edge_relaxed(graph, e)
                if undiscovered:
                    vis.discover_vertex(graph, v)
                heapq.heappush(heap, (candidate, next(tiebreak), v))
            else:
                vis.edge_not_relaxed(graph, e)
        vis.finish_vertex(graph, u)

    logger.debug(
        "Dijkstra from %s settled %d of %d vertices", source, sum(settled), n
    )
    return ShortestPaths(source=source, distance=distance, predecessor=predecessor)


def shortest_path(result: ShortestPaths, target: Vertex) -> list[Vertex] | None:
    """Vertex path from the search source to *target*, or ``None`` if unreachable."""
    if result.predecessor[target] is None:
        return None
    path = [target]
    v = target
    while v != result.source:
        v = result.predecessor[v]
        path.append(v)
    return path[::-1]
