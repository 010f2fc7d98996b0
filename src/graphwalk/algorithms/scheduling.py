"""Level scheduling — group DAG vertices that can be processed concurrently."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import numpy

from graphwalk.algorithms._common import prepare_result
from graphwalk.algorithms.dfs import topological_sort
from graphwalk.graph.protocols import (
    SupportsBidirectional,
    SupportsVertexList,
    require,
    require_directed,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from graphwalk.graph.types import Vertex

logger = logging.getLogger(__name__)


def level_schedule(
    graph: Any,
    order: Sequence[Vertex] | None = None,
    *,
    level: Any = None,
) -> Any:
    """Assign each vertex ``1 + max(level of its in-neighbours)``, or 0.

    Vertices that share a level cannot reach one another.  *order* must be
    a topological order of *graph* and defaults to
    ``topological_sort(graph)``.  Requires ``SupportsBidirectional``.

    When *level* is omitted a numpy int array is allocated; otherwise the
    caller's array is reset to 0 and filled in place.  Returns the array.
    """
    require(graph, SupportsVertexList, SupportsBidirectional, algorithm="level_schedule")
    require_directed(graph, algorithm="level_schedule")
    if order is None:
        order = topological_sort(graph)
    if level is None:
        level = numpy.zeros(graph.num_vertices(), dtype=numpy.int64)
    else:
        prepare_result(graph, level, "level", 0)

    for v in order:
        # Every in-neighbour precedes v in a topological order, so its level is final.
        preds = [level[graph.source(e)] for e in graph.in_edges(v)]
        level[v] = max(preds) + 1 if preds else 0
    return level


def schedule_groups(graph: Any, order: Sequence[Vertex] | None = None) -> list[list[Vertex]]:
    """Vertices grouped by level, lowest level first, index order within a group."""
    level = level_schedule(graph, order)
    groups: dict[int, list[Vertex]] = {}
    for v in graph.vertices():
        groups.setdefault(int(level[v]), []).append(v)
    result = [groups[k] for k in sorted(groups)]
    logger.debug("Scheduled %d vertices into %d levels", graph.num_vertices(), len(result))
    return result
