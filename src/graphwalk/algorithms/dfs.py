"""Depth-first search, cycle detection and topological sorting."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from graphwalk.algorithms._common import Color, check_vertex
from graphwalk.algorithms.visitors import Visitor, chain
from graphwalk.exceptions import CycleDetectedError
from graphwalk.graph.protocols import (
    SupportsIncidence,
    SupportsVertexList,
    require,
    require_directed,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

    from graphwalk.graph.types import Vertex

logger = logging.getLogger(__name__)


def depth_first_search(
    graph: Any,
    *,
    visitor: Visitor | None = None,
    root: Vertex | None = None,
) -> None:
    """Depth-first search over the whole graph.

    Trees are started from *root* first (if given), then from every still
    undiscovered vertex in index order.  The search is iterative, so deep
    graphs do not hit the recursion limit.

    Edge classification on directed graphs: ``tree_edge`` to a white
    target, ``back_edge`` to a gray one, and ``forward_edge`` or
    ``cross_edge`` to a black one depending on discovery order.  On
    undirected graphs the edge leading back to the parent is skipped once,
    edges to gray vertices are back edges, and edges to black vertices
    (already seen from the other side) fire nothing beyond
    ``examine_edge``.
    """
    require(graph, SupportsVertexList, SupportsIncidence, algorithm="depth_first_search")
    if root is not None:
        check_vertex(graph, root, "Root")
    vis = visitor if visitor is not None else Visitor()
    directed = graph.is_directed

    n = graph.num_vertices()
    color = [Color.WHITE] * n
    discovered_at = [0] * n
    clock = 0
    for v in graph.vertices():
        vis.initialize_vertex(graph, v)

    roots: list[Vertex] = list(graph.vertices())
    if root is not None:
        roots.insert(0, root)

    for start in roots:
        if color[start] is not Color.WHITE:
            continue
        vis.start_vertex(graph, start)
        color[start] = Color.GRAY
        discovered_at[start] = clock
        clock += 1
        vis.discover_vertex(graph, start)

        # Frame: [vertex, parent still to skip (undirected only), out-edge iterator]
        stack: list[list[Any]] = [[start, None, iter(graph.out_edges(start))]]
        while stack:
            frame = stack[-1]
            u: Vertex = frame[0]
            edges: Iterator[Any] = frame[2]
            descended = False
            for e in edges:
                v = graph.target(e)
                if frame[1] is not None and v == frame[1]:
                    frame[1] = None
                    continue
                vis.examine_edge(graph, e)
                state = color[v]
                if state is Color.WHITE:
                    vis.tree_edge(graph, e)
                    color[v] = Color.GRAY
                    discovered_at[v] = clock
                    clock += 1
                    vis.discover_vertex(graph, v)
                    stack.append([v, None if directed else u, iter(graph.out_edges(v))])
                    descended = True
                    break
                if state is Color.GRAY:
                    vis.back_edge(graph, e)
                elif directed:
                    if discovered_at[u] < discovered_at[v]:
                        vis.forward_edge(graph, e)
                    else:
                        vis.cross_edge(graph, e)
            if not descended:
                color[u] = Color.BLACK
                vis.finish_vertex(graph, u)
                stack.pop()


class _BackEdgeFound(Exception):  # noqa: N818
    def __init__(self, edge: Any) -> None:
        super().__init__(edge)
        self.edge = edge


class _BackEdgeTrap(Visitor):
    def back_edge(self, graph: Any, e: Any) -> None:
        raise _BackEdgeFound(e)


def find_back_edge(graph: Any) -> Any | None:
    """First back edge met by a full depth-first search, or ``None``.

    A back edge exists exactly when the graph has a cycle.
    """
    try:
        depth_first_search(graph, visitor=_BackEdgeTrap())
    except _BackEdgeFound as found:
        logger.debug("Cycle detected through back edge %r", found.edge)
        return found.edge
    return None


def has_cycle(graph: Any) -> bool:
    """Whether the graph contains a cycle."""
    return find_back_edge(graph) is not None


class _PostOrder(Visitor):
    def __init__(self) -> None:
        self.finished: list[Vertex] = []

    def back_edge(self, graph: Any, e: Any) -> None:
        msg = f"Graph has a cycle through edge {e!r}; no topological order exists"
        raise CycleDetectedError(msg, edge=e)

    def finish_vertex(self, graph: Any, v: Vertex) -> None:
        self.finished.append(v)


def topological_sort(graph: Any, *, visitor: Visitor | None = None) -> list[Vertex]:
    """Vertices ordered so that every edge ``(u, v)`` has ``u`` before ``v``.

    Depth-first post-order, reversed.  Raises ``CycleDetectedError`` on
    the first back edge; no partial order is returned.  Undirected graphs
    raise ``CapabilityMissingError``.
    """
    require(graph, SupportsVertexList, SupportsIncidence, algorithm="topological_sort")
    require_directed(graph, algorithm="topological_sort")
    post_order = _PostOrder()
    depth_first_search(graph, visitor=chain(post_order, visitor))
    order = post_order.finished[::-1]
    logger.debug("Topological order over %d vertices", len(order))
    return order
