"""spgraph: label-setting shortest paths over mutable node graphs.

Build a graph out of ``Node`` objects, wire them with directed or undirected
edges, and ask for the cheapest path between two of them. Searches write their
state (distance, visited flag, predecessor) onto the nodes.

Primary API:
    Node, Edge - Graph model
    shortest_path() - Cheapest path as a list of nodes (empty if none)
    spf() - Same search with a typed PathResult (TRIVIAL/FOUND/UNREACHABLE)
    spf_costs() - Single-source costs without mutating nodes
    from_networkx() / to_networkx() - NetworkX conversion

Example:
    from spgraph import Node, shortest_path

    a, b, c = Node("A"), Node("B"), Node("C")
    a.add_directed_edge(b, 1)
    b.add_directed_edge(c, 2)
    a.add_directed_edge(c, 5)

    path = shortest_path(a, c)  # [A, B, C], c.distance == 3
"""

from __future__ import annotations

from spgraph import logging
from spgraph._version import __version__
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
from spgraph.config import SEARCH_CONFIG, SearchConfig
from spgraph.exceptions import InvalidEdgeWeight, SearchError, StaleSearchState
from spgraph.lib.nx import from_networkx, to_networkx
from spgraph.model.graph import Edge, Node
from spgraph.model.path import PathResult
from spgraph.types.base import INF, Cost, PathStatus

__all__ = [
    # Version
    "__version__",
    # Model
    "Node",
    "Edge",
    "PathResult",
    # Algorithms
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
    # Types
    "Cost",
    "INF",
    "PathStatus",
    # Configuration and errors
    "SearchConfig",
    "SEARCH_CONFIG",
    "SearchError",
    "InvalidEdgeWeight",
    "StaleSearchState",
    # Library integrations (NetworkX)
    "from_networkx",
    "to_networkx",
    # Utilities
    "logging",
]
