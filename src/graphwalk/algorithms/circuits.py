"""Elementary circuit enumeration (Hawick and James).

Circuits are found once per start vertex ``s`` among vertices with index
``>= s``, so each one is first produced in its smallest-index-first
rotation.  A vertex stays blocked while no path back to ``s`` is known
through it, and is unblocked, together with the vertices waiting on it,
as soon as one is.  The search is an explicit stack, so long circuits do
not hit the recursion limit.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING, Any

from graphwalk.graph.protocols import SupportsAdjacency, SupportsVertexList, require

if TYPE_CHECKING:
    from collections.abc import Callable

    from graphwalk.algorithms.visitors import Visitor
    from graphwalk.graph.types import Vertex

logger = logging.getLogger(__name__)

type Circuit = tuple[Vertex, ...]


class _Frame:
    __slots__ = ("neighbors", "pending", "unblock", "vertex")

    def __init__(self, vertex: Vertex, neighbors: list[Vertex]) -> None:
        self.vertex = vertex
        self.neighbors = neighbors
        self.pending = iter(neighbors)
        # Set once a circuit (or a length cut-off) was met below this vertex.
        self.unblock = False


class _CircuitSearch:
    """Blocking state for one enumeration call."""

    def __init__(
        self,
        graph: Any,
        emit: Callable[[Circuit], None],
        *,
        unique: bool,
        max_length: int | None,
    ) -> None:
        n = graph.num_vertices()
        self.graph = graph
        self.emit = emit
        self.unique = unique
        self.max_length = max_length
        self.blocked = [False] * n
        self.waiting: list[list[Vertex]] = [[] for _ in range(n)]

    def neighbors(self, v: Vertex, start: Vertex) -> list[Vertex]:
        adjacent = self.graph.adjacent_vertices(v)
        if self.unique:
            adjacent = dict.fromkeys(adjacent)
        return [w for w in adjacent if w >= start]

    def run_from(self, start: Vertex) -> None:
        path: list[Vertex] = [start]
        self.blocked[start] = True
        stack = [_Frame(start, self.neighbors(start, start))]
        while stack:
            frame = stack[-1]
            descended = False
            for w in frame.pending:
                if w == start:
                    self.emit(tuple(path))
                    frame.unblock = True
                elif self.blocked[w]:
                    continue
                elif self.max_length is not None and len(path) >= self.max_length:
                    frame.unblock = True
                else:
                    path.append(w)
                    self.blocked[w] = True
                    stack.append(_Frame(w, self.neighbors(w, start)))
                    descended = True
                    break
            if descended:
                continue

            v = frame.vertex
            if frame.unblock:
                self._unblock(v)
            else:
                for w in frame.neighbors:
                    if v not in self.waiting[w]:
                        self.waiting[w].append(v)
            path.pop()
            stack.pop()
            if stack and frame.unblock:
                stack[-1].unblock = True

    def reset(self) -> None:
        for v in range(len(self.blocked)):
            self.blocked[v] = False
            self.waiting[v].clear()

    def _unblock(self, u: Vertex) -> None:
        todo = [u]
        while todo:
            x = todo.pop()
            self.blocked[x] = False
            released, self.waiting[x] = self.waiting[x], []
            todo.extend(w for w in released if self.blocked[w])


def _rotations(circuit: Circuit) -> list[Circuit]:
    return [circuit[i:] + circuit[:i] for i in range(len(circuit))]


def hawick_circuits(
    graph: Any,
    visitor: Visitor | Callable[[Circuit], None],
    *,
    unique: bool = False,
    max_length: int | None = None,
) -> int:
    """Report every elementary circuit of *graph*; return how many were reported.

    Requires ``SupportsVertexList`` and ``SupportsAdjacency``.  Circuits are
    vertex tuples without the closing repeat of the first vertex; a
    self-loop is a 1-tuple.  *visitor* is either an object with a
    ``cycle(graph, circuit)`` method, such as a ``Visitor``, or a plain
    callable taking the circuit.

    Parameters
    ----------
    unique:
        ``False`` reports every rotation of every circuit, and circuits
        that differ only by parallel arcs separately.  ``True`` collapses
        parallel arcs and reports one rotation, smallest index first.
    max_length:
        Skip circuits with more than this many vertices.
    """
    require(graph, SupportsVertexList, SupportsAdjacency, algorithm="hawick_circuits")
    if max_length is not None and max_length < 1:
        msg = f"max_length must be >= 1, got {max_length}"
        raise ValueError(msg)

    if hasattr(visitor, "cycle"):
        report: Callable[[Circuit], None] = functools.partial(visitor.cycle, graph)
    else:
        report = visitor

    count = 0

    def emit(circuit: Circuit) -> None:
        nonlocal count
        for rotation in [circuit] if unique else _rotations(circuit):
            report(rotation)
            count += 1

    search = _CircuitSearch(graph, emit, unique=unique, max_length=max_length)
    for start in graph.vertices():
        search.run_from(start)
        search.reset()

    logger.debug(
        "Enumerated %d %s circuits over %d vertices",
        count,
        "unique" if unique else "all",
        graph.num_vertices(),
    )
    return count


def all_circuits(graph: Any, *, max_length: int | None = None) -> list[Circuit]:
    """Every circuit in every rotation, as a list."""
    found: list[Circuit] = []
    hawick_circuits(graph, found.append, max_length=max_length)
    return found


def unique_circuits(graph: Any, *, max_length: int | None = None) -> list[Circuit]:
    """One smallest-index-first rotation per circuit, as a list."""
    found: list[Circuit] = []
    hawick_circuits(graph, found.append, unique=True, max_length=max_length)
    return found
