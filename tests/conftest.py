"""Sample graphs shared across the test suite.

Each fixture returns a dict mapping identifier -> Node with fresh search state.
"""

from __future__ import annotations

from typing import Dict

import pytest

from spgraph import logging as sp_logging
from spgraph.config import SEARCH_CONFIG
from spgraph.model.graph import Node


def make_nodes(*names: str) -> Dict[str, Node]:
    return {name: Node(name) for name in names}


@pytest.fixture(autouse=True)
def _restore_global_state():
    """Undo changes tests make to the global config and log level."""
    saved = vars(SEARCH_CONFIG).copy()
    yield
    vars(SEARCH_CONFIG).update(saved)
    sp_logging.disable_debug_logging()


@pytest.fixture
def triangle():
    # Cost:
    #        [1]       [2]
    #    A ──────► B ──────► C
    #    │                   ▲
    #    └───────────────────┘
    #             [5]
    nodes = make_nodes("A", "B", "C")
    nodes["A"].add_directed_edge(nodes["B"], 1)
    nodes["B"].add_directed_edge(nodes["C"], 2)
    nodes["A"].add_directed_edge(nodes["C"], 5)
    return nodes


@pytest.fixture
def square():
    # Cost:
    #        [1]       [1]
    #    A ──────► B ──────► C
    #    │                   ▲
    #    │ [2]           [2] │
    #    └──────► D ─────────┘
    nodes = make_nodes("A", "B", "C", "D")
    nodes["A"].add_directed_edge(nodes["B"], 1)
    nodes["B"].add_directed_edge(nodes["C"], 1)
    nodes["A"].add_directed_edge(nodes["D"], 2)
    nodes["D"].add_directed_edge(nodes["C"], 2)
    return nodes


@pytest.fixture
def square_ecmp():
    # Two equal-cost paths A->B->C and A->D->C; B enters the frontier first.
    nodes = make_nodes("A", "B", "C", "D")
    nodes["A"].add_directed_edge(nodes["B"], 1)
    nodes["A"].add_directed_edge(nodes["D"], 1)
    nodes["B"].add_directed_edge(nodes["C"], 1)
    nodes["D"].add_directed_edge(nodes["C"], 1)
    return nodes


@pytest.fixture
def decrease_key():
    # C is first reached through the expensive direct edge, then improved
    # twice while it waits in the frontier.
    #
    #    A ─[10]─► C
    #    A ─[1]──► B ─[5]─► C
    #    A ─[2]──► D ─[1]─► C ─[1]─► E
    nodes = make_nodes("A", "B", "C", "D", "E")
    nodes["A"].add_directed_edge(nodes["C"], 10)
    nodes["A"].add_directed_edge(nodes["B"], 1)
    nodes["A"].add_directed_edge(nodes["D"], 2)
    nodes["B"].add_directed_edge(nodes["C"], 5)
    nodes["D"].add_directed_edge(nodes["C"], 1)
    nodes["C"].add_directed_edge(nodes["E"], 1)
    return nodes


@pytest.fixture
def mesh():
    # Undirected weighted graph (costs in brackets) plus an isolated node Z.
    #
    #    A─[7]─B   A─[9]─C   A─[14]─F
    #    B─[10]─C  B─[15]─D  C─[11]─D
    #    C─[2]─F   D─[6]─E   E─[9]─F
    #
    # Shortest A->E is A-C-F-E with cost 20.
    nodes = make_nodes("A", "B", "C", "D", "E", "F", "Z")
    edges = [
        ("A", "B", 7),
        ("A", "C", 9),
        ("A", "F", 14),
        ("B", "C", 10),
        ("B", "D", 15),
        ("C", "D", 11),
        ("C", "F", 2),
        ("D", "E", 6),
        ("E", "F", 9),
    ]
    for u, v, cost in edges:
        nodes[u].add_undirected_edge(nodes[v], cost)
    return nodes
