"""Traversal visitors — caller-supplied callbacks fired at traversal events.

Every event method receives the graph first, then the vertex, edge or
circuit concerned.  The base class does nothing, so a visitor overrides
only the events it cares about.  Events run inline; raising
``StopTraversal`` (or anything else) from an event aborts the algorithm
and reaches the caller unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

    from graphwalk.graph.property_maps import ReadWritePropertyMap
    from graphwalk.graph.protocols import Graph
    from graphwalk.graph.types import Vertex


class Visitor:
    """No-op base visitor covering the events of every algorithm."""

    # Vertex events

    def initialize_vertex(self, graph: Graph, v: Vertex) -> None:
        """Invoked on every vertex before the search starts."""

    def start_vertex(self, graph: Graph, v: Vertex) -> None:
        """Invoked on the root of each search tree."""

    def discover_vertex(self, graph: Graph, v: Vertex) -> None:
        """Invoked when a vertex is first encountered."""

    def examine_vertex(self, graph: Graph, v: Vertex) -> None:
        """Invoked when a vertex is taken off the queue (BFS, Dijkstra)."""

    def finish_vertex(self, graph: Graph, v: Vertex) -> None:
        """Invoked after all out-edges of a vertex have been examined."""

    # Edge events

    def examine_edge(self, graph: Graph, e: Any) -> None:
        """Invoked on every out-edge of each examined vertex."""

    def tree_edge(self, graph: Graph, e: Any) -> None:
        """Invoked on an edge that discovers its target."""

    def non_tree_edge(self, graph: Graph, e: Any) -> None:
        """BFS: invoked on an edge whose target was already discovered."""

    def gray_target(self, graph: Graph, e: Any) -> None:
        """BFS: the target is discovered but not yet finished."""

    def black_target(self, graph: Graph, e: Any) -> None:
        """BFS: the target is finished."""

    def back_edge(self, graph: Graph, e: Any) -> None:
        """DFS: the target is an ancestor still on the search stack."""

    def forward_edge(self, graph: Graph, e: Any) -> None:
        """DFS (directed): the target is a finished descendant."""

    def cross_edge(self, graph: Graph, e: Any) -> None:
        """DFS (directed): the target is finished and not a descendant."""

    def edge_relaxed(self, graph: Graph, e: Any) -> None:
        """Dijkstra: the edge improved its target's tentative distance."""

    def edge_not_relaxed(self, graph: Graph, e: Any) -> None:
        """Dijkstra: the edge did not improve its target's distance."""

    # Circuit events

    def cycle(self, graph: Graph, circuit: tuple[Vertex, ...]) -> None:
        """Circuit enumeration: invoked once per reported circuit."""


_EVENTS = frozenset(
    name for name, value in vars(Visitor).items() if callable(value) and not name.startswith("_")
)


class VisitorChain(Visitor):
    """Forwards every event to several visitors, in the order given."""

    def __init__(self, *visitors: Visitor) -> None:
        self._visitors = tuple(visitors)
        for name in _EVENTS:
            setattr(self, name, _fan_out([getattr(v, name) for v in self._visitors]))

    @property
    def visitors(self) -> tuple[Visitor, ...]:
        """The chained visitors."""
        return self._visitors


def _fan_out(handlers: list[Callable[..., None]]) -> Callable[..., None]:
    def dispatch(graph: Graph, item: Any) -> None:
        for handler in handlers:
            handler(graph, item)

    return dispatch


def make_visitor(**callbacks: Callable[[Graph, Any], None]) -> Visitor:
    """Build a visitor from keyword callbacks named after events.

    Raises ``TypeError`` for a name that is not a visitor event.
    """
    unknown = sorted(set(callbacks) - _EVENTS)
    if unknown:
        msg = f"Unknown visitor event(s): {', '.join(unknown)}"
        raise TypeError(msg)
    visitor = Visitor()
    for name, fn in callbacks.items():
        setattr(visitor, name, fn)
    return visitor


def chain(*visitors: Visitor | None) -> Visitor:
    """Combine visitors, dropping ``None``; a single visitor is returned as is."""
    present = [v for v in visitors if v is not None]
    if not present:
        return Visitor()
    if len(present) == 1:
        return present[0]
    return VisitorChain(*present)


# ------------------------------------------------------------------
# Recording visitors
# ------------------------------------------------------------------


class DistanceRecorder(Visitor):
    """On each tree edge ``(u, v)`` sets ``distance[v] = distance[u] + 1``."""

    def __init__(self, distance: ReadWritePropertyMap) -> None:
        self.distance = distance

    def tree_edge(self, graph: Graph, e: Any) -> None:
        self.distance[graph.target(e)] = self.distance[graph.source(e)] + 1


class PredecessorRecorder(Visitor):
    """On each tree edge ``(u, v)`` sets ``predecessor[v] = u``."""

    def __init__(self, predecessor: ReadWritePropertyMap) -> None:
        self.predecessor = predecessor

    def tree_edge(self, graph: Graph, e: Any) -> None:
        self.predecessor[graph.target(e)] = graph.source(e)
