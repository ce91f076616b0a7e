"""Shortest-path algorithms over ``Node`` graphs."""

from __future__ import annotations

from spgraph.algorithms.path_utils import (
    format_path,
    path_cost,
    print_path,
    reconstruct_path,
    resolve_path,
)
from spgraph.algorithms.spf import (
    Frontier,
    reachable_nodes,
    reset_search_state,
    shortest_path,
    spf,
    spf_costs,
)

__all__ = [
    "Frontier",
    "shortest_path",
    "spf",
    "spf_costs",
    "reachable_nodes",
    "reset_search_state",
    "reconstruct_path",
    "resolve_path",
    "path_cost",
    "format_path",
    "print_path",
]
