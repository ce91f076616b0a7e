"""Base types and enums for shortest-path searches."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Union

#: Represents numeric cost in the graph (e.g. distance, latency, etc.).
Cost = Union[int, float]

#: Tentative distance of a node not yet reached by a search.
INF: float = math.inf


class PathStatus(IntEnum):
    """Outcome of a single start/end search."""

    #: Start and end are the same node.
    TRIVIAL = 1
    #: A path from start to end was found.
    FOUND = 2
    #: The frontier ran out before reaching the end node.
    UNREACHABLE = 3

    @classmethod
    def from_string(cls, value: str) -> "PathStatus":
        """Parse a string into a PathStatus enum value.

        Args:
            value: Case-insensitive string name (e.g., "found", "UNREACHABLE").

        Returns:
            The corresponding PathStatus enum member.

        Raises:
            ValueError: If the string doesn't match any enum member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid path status '{value}'. Valid values are: {valid}"
            ) from None
