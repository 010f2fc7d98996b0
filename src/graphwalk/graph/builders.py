"""Builders — stored graphs from edge lists and delimited text records.

Both builders consume already-opened streams (an iterable of pairs, an
iterable of lines); reading files is left to the caller.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from graphwalk.exceptions import ConstructionError
from graphwalk.graph._stored import stored_graph
from graphwalk.graph.types import Directedness, RecordFormat

if TYPE_CHECKING:
    from collections.abc import Iterable

    from graphwalk.graph._stored import StoredGraph
    from graphwalk.graph.types import Vertex

logger = logging.getLogger(__name__)


def from_edge_list(
    edges: Iterable[tuple[int, int]],
    num_vertices: int,
    *,
    directedness: Directedness = Directedness.DIRECTED,
    allow_parallel: bool = True,
    weights: Iterable[float] | None = None,
) -> StoredGraph:
    """Build a stored graph with *num_vertices* vertices and the given edges.

    Parameters
    ----------
    edges:
        ``(source, target)`` index pairs, added in order.
    weights:
        Optional per-edge weights aligned with *edges*, stored as the
        ``weight`` edge attribute.

    Raises ``ConstructionError`` for malformed pairs, endpoints outside
    ``[0, num_vertices)`` or a weight count that does not match.
    """
    if num_vertices < 0:
        msg = f"num_vertices must be >= 0, got {num_vertices}"
        raise ConstructionError(msg)
    pairs = list(edges)
    weight_list = list(weights) if weights is not None else None
    if weight_list is not None and len(weight_list) != len(pairs):
        msg = f"Got {len(weight_list)} weights for {len(pairs)} edges"
        raise ConstructionError(msg)

    graph = stored_graph(directedness, num_vertices, allow_parallel=allow_parallel)
    for i, pair in enumerate(pairs):
        try:
            u, v = pair
        except (TypeError, ValueError):
            msg = f"Edge #{i} is not a (source, target) pair: {pair!r}"
            raise ConstructionError(msg) from None
        for endpoint in (u, v):
            if not isinstance(endpoint, int) or not 0 <= endpoint < num_vertices:
                msg = f"Edge #{i} endpoint {endpoint!r} outside [0, {num_vertices})"
                raise ConstructionError(msg)
        if weight_list is None:
            graph.add_edge(u, v)
        else:
            graph.add_edge(u, v, weight=weight_list[i])

    logger.debug(
        "Built %s from edge list: %d vertices, %d edges",
        directedness.value,
        graph.num_vertices(),
        graph.num_edges(),
    )
    return graph


def from_delimited_records(
    lines: Iterable[str],
    *,
    record_format: RecordFormat | None = None,
    directedness: Directedness = Directedness.UNDIRECTED,
) -> tuple[StoredGraph, dict[str, Vertex]]:
    """Build a co-appearance graph from ``actor;movie;co-actor`` records.

    Each distinct name becomes one vertex (``name`` attribute).  Each
    distinct pair of names becomes one edge whose ``name`` attribute is
    the first movie that connected them.

    Returns ``(graph, name_to_vertex)``.  Raises ``ConstructionError``
    with ``line_number`` set when a record does not have three non-empty
    fields.
    """
    fmt = record_format or RecordFormat()
    graph = stored_graph(directedness, allow_parallel=False)
    names: dict[str, Vertex] = {}
    vertex_name = graph.vertex_property("name")
    edge_name = graph.edge_property("name")

    def lookup_or_insert(name: str) -> Vertex:
        v = names.get(name)
        if v is None:
            v = graph.add_vertex()
            vertex_name[v] = name
            names[name] = v
        return v

    records = 0
    for line_number, raw in enumerate(lines, start=1):
        line = raw.strip() if fmt.strip else raw.rstrip("\r\n")
        if not line:
            if fmt.skip_blank:
                continue
            msg = f"Line {line_number}: empty record"
            raise ConstructionError(msg, line_number=line_number)
        if fmt.comment is not None and line.startswith(fmt.comment):
            continue

        fields = line.split(fmt.delimiter)
        if fmt.strip:
            fields = [f.strip() for f in fields]
        if len(fields) != 3 or not all(fields):
            msg = (
                f"Line {line_number}: expected 'actor{fmt.delimiter}movie"
                f"{fmt.delimiter}actor', got {raw!r}"
            )
            raise ConstructionError(msg, line_number=line_number)

        actor, movie, co_actor = fields
        u = lookup_or_insert(actor)
        v = lookup_or_insert(co_actor)
        e, inserted = graph.add_edge(u, v)
        if inserted:
            edge_name[e] = movie
        records += 1

    logger.debug(
        "Built graph from %d records: %d vertices, %d edges",
        records,
        graph.num_vertices(),
        graph.num_edges(),
    )
    return graph, names
