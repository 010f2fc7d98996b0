"""Custom exception hierarchy for graphwalk."""

from __future__ import annotations

from typing import Any


class GraphError(Exception):
    """Base exception for all graphwalk errors."""


class ConstructionError(GraphError, ValueError):
    """Raised when a graph cannot be built from the given input.

    Attributes:
        line_number: 1-based line of the offending record, when parsing text.
    """

    def __init__(self, message: str, *, line_number: int | None = None) -> None:
        super().__init__(message)
        self.line_number = line_number


class CycleDetectedError(GraphError):
    """Raised when an ordering is requested for a graph that contains a cycle.

    Attributes:
        edge: The back edge that closed the cycle.
    """

    def __init__(self, message: str, *, edge: Any = None) -> None:
        super().__init__(message)
        self.edge = edge


class CapabilityMissingError(GraphError, TypeError):
    """Raised when a graph or property map lacks a capability an algorithm needs."""


class NegativeWeightError(GraphError, ValueError):
    """Raised when a shortest-path search meets an edge with negative weight."""

    def __init__(self, message: str, *, edge: Any = None, weight: float | None = None) -> None:
        super().__init__(message)
        self.edge = edge
        self.weight = weight


class StaleDescriptorError(GraphError, LookupError):
    """Raised when a vertex or edge descriptor does not belong to the graph."""


class StopTraversal(Exception):  # noqa: N818
    """Raised by a visitor to abort the running algorithm.

    Never caught by graphwalk: it reaches the caller unchanged, and any
    caller-owned result arrays hold whatever was computed before the stop.
    """
