"""Graph protocols — runtime-checkable capability interfaces.

Split into a core protocol and narrow capability protocols so that a
representation implements only what it can do efficiently, and an
algorithm asks only for what it uses.  Capabilities are detected with
``isinstance()``; ``require()`` turns a missing capability into a
``CapabilityMissingError`` before an algorithm does any work.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from graphwalk.exceptions import CapabilityMissingError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from graphwalk.graph.property_maps import ReadablePropertyMap
    from graphwalk.graph.types import Vertex


@runtime_checkable
class Graph(Protocol):
    """Core graph interface: endpoint projection and direction.

    Every representation must implement this.
    """

    is_directed: bool

    def source(self, edge: Any) -> Vertex: ...
    def target(self, edge: Any) -> Vertex: ...
    def vertex_index_map(self) -> ReadablePropertyMap: ...


@runtime_checkable
class SupportsVertexList(Protocol):
    """Opt-in: enumerate vertices, each exactly once, restartable."""

    def num_vertices(self) -> int: ...
    def vertices(self) -> Iterable[Vertex]: ...


@runtime_checkable
class SupportsEdgeList(Protocol):
    """Opt-in: enumerate edges, each exactly once."""

    def num_edges(self) -> int: ...
    def edges(self) -> Iterator[Any]: ...


@runtime_checkable
class SupportsIncidence(Protocol):
    """Opt-in: out-edges of a vertex; ``out_degree(u) == len(out_edges(u))``."""

    def out_edges(self, u: Vertex) -> Iterator[Any]: ...
    def out_degree(self, u: Vertex) -> int: ...


@runtime_checkable
class SupportsBidirectional(Protocol):
    """Opt-in: in-edges of a vertex.  Undirected graphs return the out-edges."""

    def in_edges(self, u: Vertex) -> Iterator[Any]: ...
    def in_degree(self, u: Vertex) -> int: ...


@runtime_checkable
class SupportsAdjacency(Protocol):
    """Opt-in: targets of ``out_edges(u)``, in the same order."""

    def adjacent_vertices(self, u: Vertex) -> Iterator[Vertex]: ...


@runtime_checkable
class SupportsAdjacencyMatrix(Protocol):
    """Opt-in: direct edge lookup, consistent with ``out_edges`` membership."""

    def edge(self, u: Vertex, v: Vertex) -> tuple[Any, bool]: ...


@runtime_checkable
class SupportsEdgeWeight(Protocol):
    """Opt-in: a default edge weight property map."""

    def edge_weight_map(self) -> ReadablePropertyMap: ...


def require(graph: object, *capabilities: type, algorithm: str) -> None:
    """Raise ``CapabilityMissingError`` unless *graph* provides every capability."""
    missing = [cap.__name__ for cap in (Graph, *capabilities) if not isinstance(graph, cap)]
    if missing:
        msg = (
            f"{algorithm} requires {', '.join(missing)}; "
            f"{type(graph).__name__} does not provide it"
        )
        raise CapabilityMissingError(msg)


def require_directed(graph: Graph, *, algorithm: str) -> None:
    """Raise ``CapabilityMissingError`` if *graph* is undirected."""
    if not graph.is_directed:
        msg = f"{algorithm} requires a directed graph; {type(graph).__name__} is undirected"
        raise CapabilityMissingError(msg)
