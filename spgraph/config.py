"""Configuration classes for spgraph searches."""

from dataclasses import dataclass


@dataclass
class SearchConfig:
    """Knobs for edge validation, search preconditions and path traces."""

    # Accept negative edge costs (label-setting results are then unreliable)
    allow_negative_costs: bool = False

    # Fail fast when a search meets nodes left over from a previous search
    check_stale_state: bool = True

    # Path trace rendering: "(A, 0) -> (B, 1) -> x"
    trace_separator: str = " -> "
    trace_terminator: str = "x"

    def format_hop(self, identifier: object, distance: object) -> str:
        """Render a single ``(identifier, distance)`` trace element."""
        return f"({identifier}, {distance})"


# Global configuration instance
SEARCH_CONFIG = SearchConfig()
