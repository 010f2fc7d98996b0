"""StoredGraph — rustworkx-backed, append-only adjacency-list graph."""

from __future__ import annotations

import itertools
from typing import TYPE_CHECKING, Any

import rustworkx

from graphwalk.exceptions import StaleDescriptorError
from graphwalk.graph.property_maps import AttributePropertyMap, IdentityPropertyMap
from graphwalk.graph.types import Directedness, StoredEdge

if TYPE_CHECKING:
    from collections.abc import Iterator

    from graphwalk.graph.types import Vertex

_owner_tokens = itertools.count(1)


class StoredGraph:
    """Directed graph with vertices and edges stored in insertion order.

    Vertex and edge attributes live in payload dicts held by a
    ``rustworkx.PyDiGraph``; ordered per-vertex incidence lists of edge
    keys sit beside it so every traversal sees edges in the order they
    were added.  Vertices and edges are never removed.

    Implements ``Graph``, ``SupportsVertexList``, ``SupportsEdgeList``,
    ``SupportsIncidence``, ``SupportsAdjacency``,
    ``SupportsAdjacencyMatrix`` and ``SupportsEdgeWeight``.
    """

    is_directed = True
    directedness = Directedness.DIRECTED

    def __init__(self, num_vertices: int = 0, *, allow_parallel: bool = True) -> None:
        self._graph = self._new_backend()
        self._owner = next(_owner_tokens)
        self._allow_parallel = allow_parallel
        self._endpoints: list[tuple[int, int]] = []
        self._out: list[list[int]] = []
        self._pair_to_key: dict[tuple[int, int], int] = {}
        for _ in range(num_vertices):
            self.add_vertex()

    def _new_backend(self) -> rustworkx.PyDiGraph | rustworkx.PyGraph:
        return rustworkx.PyDiGraph()

    # ------------------------------------------------------------------
    # Mutation (append-only)
    # ------------------------------------------------------------------

    def add_vertex(self, **attrs: Any) -> Vertex:
        """Append a vertex carrying *attrs* and return its index."""
        idx = self._graph.add_node(dict(attrs))
        self._out.append([])
        return idx

    def add_edge(self, u: Vertex, v: Vertex, **attrs: Any) -> tuple[StoredEdge, bool]:
        """Append an edge from *u* to *v*.

        Returns ``(edge, inserted)``.  When parallel edges are disallowed
        and the pair is already connected, the existing edge is returned
        unchanged with ``inserted=False``.
        """
        self._check_vertex(u)
        self._check_vertex(v)
        pair = self._pair(u, v)
        if not self._allow_parallel:
            existing = self._pair_to_key.get(pair)
            if existing is not None:
                return StoredEdge(u, v, existing, self._owner), False

        key = self._graph.add_edge(u, v, dict(attrs))
        self._endpoints.append((u, v))
        self._record_incidence(u, v, key)
        if not self._allow_parallel:
            self._pair_to_key[pair] = key
        return StoredEdge(u, v, key, self._owner), True

    def _pair(self, u: Vertex, v: Vertex) -> tuple[int, int]:
        return (u, v)

    def _record_incidence(self, u: Vertex, v: Vertex, key: int) -> None:
        self._out[u].append(key)

    # ------------------------------------------------------------------
    # Core protocol
    # ------------------------------------------------------------------

    def source(self, edge: StoredEdge) -> Vertex:
        """Endpoint the edge was reached from."""
        self._check_edge(edge)
        return edge.source

    def target(self, edge: StoredEdge) -> Vertex:
        """Endpoint the edge leads to."""
        self._check_edge(edge)
        return edge.target

    def vertex_index_map(self) -> IdentityPropertyMap:
        """Vertex descriptors are already dense indices."""
        return IdentityPropertyMap()

    # ------------------------------------------------------------------
    # Vertex and edge enumeration
    # ------------------------------------------------------------------

    def num_vertices(self) -> int:
        """Number of vertices."""
        return self._graph.num_nodes()

    def vertices(self) -> range:
        """All vertices in index order."""
        return range(self._graph.num_nodes())

    def num_edges(self) -> int:
        """Number of edges (an undirected edge counts once)."""
        return self._graph.num_edges()

    def edges(self) -> Iterator[StoredEdge]:
        """Every edge once, in insertion order."""
        for key, (u, v) in enumerate(self._endpoints):
            yield StoredEdge(u, v, key, self._owner)

    # ------------------------------------------------------------------
    # Incidence and adjacency
    # ------------------------------------------------------------------

    def out_edges(self, u: Vertex) -> Iterator[StoredEdge]:
        """Edges leaving *u*, in insertion order."""
        self._check_vertex(u)
        return self._oriented(u, self._out[u])

    def out_degree(self, u: Vertex) -> int:
        """Number of edges leaving *u*."""
        self._check_vertex(u)
        return len(self._out[u])

    def adjacent_vertices(self, u: Vertex) -> Iterator[Vertex]:
        """Targets of ``out_edges(u)``, in the same order."""
        return (e.target for e in self.out_edges(u))

    def edge(self, u: Vertex, v: Vertex) -> tuple[StoredEdge | None, bool]:
        """First edge from *u* to *v*, as ``(edge, found)``."""
        for e in self.out_edges(u):
            if e.target == v:
                return e, True
        self._check_vertex(v)
        return None, False

    def _oriented(self, u: Vertex, keys: list[int]) -> Iterator[StoredEdge]:
        for key in keys:
            a, b = self._endpoints[key]
            yield StoredEdge(u, b if a == u else a, key, self._owner)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    def vertex_property(self, name: str, default: Any = None) -> AttributePropertyMap:
        """Read-write map over the vertex attribute *name*."""
        return AttributePropertyMap(self._vertex_payload, name, default)

    def edge_property(self, name: str, default: Any = None) -> AttributePropertyMap:
        """Read-write map over the edge attribute *name*."""
        return AttributePropertyMap(self._edge_payload, name, default)

    def edge_weight_map(self) -> AttributePropertyMap:
        """The ``weight`` edge attribute, 1.0 where unset."""
        return self.edge_property("weight", default=1.0)

    def find_vertex(self, name: str) -> Vertex | None:
        """First vertex whose ``name`` attribute equals *name*, or ``None``.

        A linear scan over all vertices; callers doing repeated lookups
        should keep their own name index.
        """
        for idx in self.vertices():
            if self._graph[idx].get("name") == name:
                return idx
        return None

    def _vertex_payload(self, v: Vertex) -> dict[str, Any]:
        self._check_vertex(v)
        return self._graph[v]

    def _edge_payload(self, edge: StoredEdge) -> dict[str, Any]:
        self._check_edge(edge)
        return self._graph.get_edge_data_by_index(edge.key)

    # ------------------------------------------------------------------
    # Graph-level
    # ------------------------------------------------------------------

    @property
    def backend(self) -> rustworkx.PyDiGraph | rustworkx.PyGraph:
        """The backing rustworkx graph.  Treat as read-only."""
        return self._graph

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(vertices={self.num_vertices()}, "
            f"edges={self.num_edges()})"
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _check_vertex(self, v: Vertex) -> None:
        if not 0 <= v < len(self._out):
            msg = f"Vertex {v!r} is not in {self!r}"
            raise StaleDescriptorError(msg)

    def _check_edge(self, edge: StoredEdge) -> None:
        if not isinstance(edge, StoredEdge) or edge.owner != self._owner:
            msg = f"Edge {edge!r} does not belong to {self!r}"
            raise StaleDescriptorError(msg)


class BidirectionalStoredGraph(StoredGraph):
    """Directed stored graph that also indexes in-edges.

    Adds ``SupportsBidirectional`` on top of ``StoredGraph``.
    """

    directedness = Directedness.BIDIRECTIONAL

    def __init__(self, num_vertices: int = 0, *, allow_parallel: bool = True) -> None:
        self._in: list[list[int]] = []
        super().__init__(num_vertices, allow_parallel=allow_parallel)

    def add_vertex(self, **attrs: Any) -> Vertex:
        """Append a vertex carrying *attrs* and return its index."""
        self._in.append([])
        return super().add_vertex(**attrs)

    def _record_incidence(self, u: Vertex, v: Vertex, key: int) -> None:
        self._out[u].append(key)
        self._in[v].append(key)

    def in_edges(self, u: Vertex) -> Iterator[StoredEdge]:
        """Edges entering *u*, in insertion order."""
        self._check_vertex(u)
        return (StoredEdge(*self._endpoints[key], key, self._owner) for key in self._in[u])

    def in_degree(self, u: Vertex) -> int:
        """Number of edges entering *u*."""
        self._check_vertex(u)
        return len(self._in[u])


class UndirectedStoredGraph(StoredGraph):
    """Undirected stored graph backed by ``rustworkx.PyGraph``.

    Each edge is listed in both endpoints' incidence lists; in-edges are
    the out-edges.  A self-loop is listed once.
    """

    is_directed = False
    directedness = Directedness.UNDIRECTED

    def _new_backend(self) -> rustworkx.PyGraph:
        return rustworkx.PyGraph()

    def _pair(self, u: Vertex, v: Vertex) -> tuple[int, int]:
        return (u, v) if u <= v else (v, u)

    def _record_incidence(self, u: Vertex, v: Vertex, key: int) -> None:
        self._out[u].append(key)
        if v != u:
            self._out[v].append(key)

    def in_edges(self, u: Vertex) -> Iterator[StoredEdge]:
        """Same as ``out_edges`` for an undirected graph."""
        return self.out_edges(u)

    def in_degree(self, u: Vertex) -> int:
        """Same as ``out_degree`` for an undirected graph."""
        return self.out_degree(u)


_BY_DIRECTEDNESS: dict[Directedness, type[StoredGraph]] = {
    Directedness.DIRECTED: StoredGraph,
    Directedness.BIDIRECTIONAL: BidirectionalStoredGraph,
    Directedness.UNDIRECTED: UndirectedStoredGraph,
}


def stored_graph(
    directedness: Directedness = Directedness.DIRECTED,
    num_vertices: int = 0,
    *,
    allow_parallel: bool = True,
) -> StoredGraph:
    """Create an empty stored graph of the requested directedness."""
    cls = _BY_DIRECTEDNESS[directedness]
    return cls(num_vertices, allow_parallel=allow_parallel)
