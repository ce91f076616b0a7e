"""Error types raised by spgraph."""

from __future__ import annotations

from typing import Any


class SearchError(Exception):
    """Base class for spgraph errors."""


class InvalidEdgeWeight(SearchError, ValueError):
    """Raised when an edge is created with a negative, infinite or NaN cost.

    Attributes:
        cost: The rejected cost value.
    """

    def __init__(self, source: Any, target: Any, cost: Any) -> None:
        self.cost = cost
        super().__init__(
            f"Edge '{source}' -> '{target}' has invalid cost {cost!r}; "
            "costs must be finite, non-negative numbers."
        )


class StaleSearchState(SearchError, RuntimeError):
    """Raised when a search meets a node still carrying state from an earlier run.

    Reset the nodes with ``Node.reset()`` or
    ``spgraph.algorithms.spf.reset_search_state()`` before searching again.
    """

    def __init__(self, node: Any) -> None:
        self.node = node
        super().__init__(
            f"Node '{node.identifier}' carries search state from a previous run "
            f"(distance={node.distance}, visited={node.visited}); "
            "reset the graph before searching again."
        )
