"""Shared helpers for the traversal algorithms."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import TYPE_CHECKING, Any

from graphwalk.exceptions import StaleDescriptorError
from graphwalk.graph.property_maps import require_writable

if TYPE_CHECKING:
    from graphwalk.graph.protocols import SupportsVertexList
    from graphwalk.graph.types import Vertex


class Color(IntEnum):
    """Search state of a vertex."""

    WHITE = 0  # undiscovered
    GRAY = 1  # discovered, not finished
    BLACK = 2  # finished


def check_vertex(graph: SupportsVertexList, v: Vertex, role: str) -> None:
    """Raise ``StaleDescriptorError`` unless *v* is a vertex of *graph*."""
    if not 0 <= v < graph.num_vertices():
        msg = f"{role} vertex {v!r} is not in {graph!r}"
        raise StaleDescriptorError(msg)


def prepare_result(
    graph: SupportsVertexList,
    array: Any,
    name: str,
    fill: Any,
) -> Any:
    """Validate a caller-supplied result array and reset it to *fill*.

    The array must be writable and, when it has a length, hold at least
    one slot per vertex.  Typed storage (a numpy array, or an
    ``ArrayPropertyMap`` over one) must be able to hold *fill*: ``None``
    needs an object array and ``inf`` a floating-point one.  Raises
    ``ValueError`` otherwise.
    """
    require_writable(array, name)
    n = graph.num_vertices()
    if hasattr(array, "__len__") and len(array) < n:
        msg = f"{name} has {len(array)} slots but the graph has {n} vertices"
        raise ValueError(msg)
    dtype = getattr(getattr(array, "storage", array), "dtype", None)
    if dtype is not None and not _can_hold(dtype.kind, fill):
        msg = f"{name} has dtype {dtype}, which cannot hold {fill!r}"
        raise ValueError(msg)
    for v in graph.vertices():
        array[v] = fill
    return array


def _can_hold(kind: str, fill: Any) -> bool:
    if fill is None:
        return kind == "O"
    if isinstance(fill, float) and math.isinf(fill):
        return kind in "fcO"
    return True
