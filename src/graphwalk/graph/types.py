"""Graph descriptor types — vertices, edges, and construction options."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple

type Vertex = int


class Directedness(Enum):
    """How a stored graph records each edge in its incidence lists."""

    DIRECTED = "directed"
    BIDIRECTIONAL = "bidirectional"
    UNDIRECTED = "undirected"


@dataclass(frozen=True, slots=True)
class StoredEdge:
    """Handle to one edge of a stored graph.

    Identity is the pair ``(key, owner)``: the same undirected edge seen
    from either endpoint compares equal even though ``source`` and
    ``target`` are swapped.

    Attributes:
        source: Endpoint the edge was reached from.
        target: The other endpoint.
        key: Stable edge index inside the owning graph.
        owner: Token of the graph instance that issued the handle.
    """

    source: Vertex = field(compare=False)
    target: Vertex = field(compare=False)
    key: int
    owner: int

    def __repr__(self) -> str:
        return f"StoredEdge({self.source} -> {self.target}, key={self.key})"


class RingEdge(NamedTuple):
    """Synthesized ring edge; equal iff both endpoints are equal."""

    source: Vertex
    target: Vertex


@dataclass(frozen=True, slots=True)
class RecordFormat:
    """Layout of ``actor;movie;co-actor`` style text records.

    Attributes:
        delimiter: Field separator.
        strip: Strip surrounding whitespace from lines and fields.
        skip_blank: Ignore empty lines instead of rejecting them.
        comment: Lines starting with this prefix are ignored.
    """

    delimiter: str = ";"
    strip: bool = True
    skip_blank: bool = True
    comment: str | None = None
