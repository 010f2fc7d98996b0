"""RingGraph — implicit undirected ring topology computed on demand."""

from __future__ import annotations

from typing import TYPE_CHECKING

from graphwalk.exceptions import ConstructionError, StaleDescriptorError
from graphwalk.graph.property_maps import FunctionPropertyMap, IdentityPropertyMap
from graphwalk.graph.types import RingEdge

if TYPE_CHECKING:
    from collections.abc import Iterator

    from graphwalk.graph.types import Vertex


def ring_edge_weight(edge: RingEdge) -> float:
    """Weight of a ring edge: the average of its endpoint indices."""
    return (edge.source + edge.target) / 2.0


class RingGraph:
    """Undirected graph whose *n* vertices form a ring.

    Vertex ``u`` is adjacent to ``u + 1`` and ``u - 1`` modulo *n*.  No
    edge is ever stored: every query is answered from *n* alone, and
    iteration state is just the vertex and an offset into ``(+1, -1)``.

    Degenerate sizes: with ``n == 1`` the only edge is the self-loop
    ``(0, 0)``; with ``n == 2`` the two vertices share one edge.  In both
    cases ``out_degree`` still reports 2 so that every vertex looks alike.

    Implements ``Graph``, ``SupportsVertexList``, ``SupportsEdgeList``,
    ``SupportsIncidence``, ``SupportsBidirectional``, ``SupportsAdjacency``,
    ``SupportsAdjacencyMatrix`` and ``SupportsEdgeWeight``.
    """

    __slots__ = ("_n",)

    is_directed = False

    def __init__(self, n: int) -> None:
        if n < 1:
            msg = f"A ring needs at least one vertex, got n={n}"
            raise ConstructionError(msg)
        self._n = n

    @property
    def n(self) -> int:
        """Number of vertices in the ring."""
        return self._n

    # ------------------------------------------------------------------
    # Core protocol
    # ------------------------------------------------------------------

    def source(self, edge: RingEdge) -> Vertex:
        """First vertex of the pair."""
        self._check_edge(edge)
        return edge.source

    def target(self, edge: RingEdge) -> Vertex:
        """Second vertex of the pair."""
        self._check_edge(edge)
        return edge.target

    def vertex_index_map(self) -> IdentityPropertyMap:
        """Vertex descriptors are already indices."""
        return IdentityPropertyMap()

    # ------------------------------------------------------------------
    # Vertex and edge enumeration
    # ------------------------------------------------------------------

    def num_vertices(self) -> int:
        """Number of vertices."""
        return self._n

    def vertices(self) -> range:
        """``0 .. n-1``."""
        return range(self._n)

    def num_edges(self) -> int:
        """One edge per vertex, except a 2-ring which has a single edge."""
        return 1 if self._n == 2 else self._n

    def edges(self) -> Iterator[RingEdge]:
        """The first incident edge of each vertex, in vertex order.

        For ``n == 2`` only vertex 0's edge is yielded.
        """
        last = 1 if self._n == 2 else self._n
        for u in range(last):
            yield next(self._incident(u))

    # ------------------------------------------------------------------
    # Incidence and adjacency
    # ------------------------------------------------------------------

    def out_edges(self, u: Vertex) -> Iterator[RingEdge]:
        """``(u, u+1)`` then ``(u, u-1)``, wrapping around the ring."""
        self._check_vertex(u)
        return self._incident(u)

    def out_degree(self, u: Vertex) -> int:
        """Always 2."""
        self._check_vertex(u)
        return 2

    def in_edges(self, u: Vertex) -> Iterator[RingEdge]:
        """Same as ``out_edges``: the ring is undirected."""
        return self.out_edges(u)

    def in_degree(self, u: Vertex) -> int:
        """Same as ``out_degree``."""
        return self.out_degree(u)

    def adjacent_vertices(self, u: Vertex) -> Iterator[Vertex]:
        """Targets of ``out_edges(u)``, in the same order."""
        return (e.target for e in self.out_edges(u))

    def edge(self, u: Vertex, v: Vertex) -> tuple[RingEdge | None, bool]:
        """``(RingEdge(u, v), True)`` when *u* and *v* are ring neighbours."""
        self._check_vertex(u)
        self._check_vertex(v)
        if self._adjacent(u, v):
            return RingEdge(u, v), True
        return None, False

    def _incident(self, u: Vertex) -> Iterator[RingEdge]:
        n = self._n
        # A 1-ring has only its self-loop; a 2-ring only the shared edge.
        offsets = (1, -1) if n > 2 else (1,)
        for offset in offsets:
            yield RingEdge(u, (u + offset) % n)

    def _adjacent(self, u: Vertex, v: Vertex) -> bool:
        n = self._n
        if abs(u - v) == 1:
            return True
        # Wraparound pair; also covers the 1-ring self-loop.
        return {u, v} == {0, n - 1}

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    def edge_weight_map(self) -> FunctionPropertyMap:
        """Computed weights, see ``ring_edge_weight``."""
        return FunctionPropertyMap(ring_edge_weight)

    def __repr__(self) -> str:
        return f"RingGraph(n={self._n})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RingGraph):
            return NotImplemented
        return self._n == other._n

    def __hash__(self) -> int:
        return hash((RingGraph, self._n))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _check_vertex(self, v: Vertex) -> None:
        if not 0 <= v < self._n:
            msg = f"Vertex {v!r} is not in {self!r}"
            raise StaleDescriptorError(msg)

    def _check_edge(self, edge: RingEdge) -> None:
        if not isinstance(edge, tuple) or len(edge) != 2:
            msg = f"{edge!r} is not a ring edge"
            raise StaleDescriptorError(msg)
        u, v = edge
        if not (0 <= u < self._n and 0 <= v < self._n and self._adjacent(u, v)):
            msg = f"Edge {edge!r} is not an edge of {self!r}"
            raise StaleDescriptorError(msg)
