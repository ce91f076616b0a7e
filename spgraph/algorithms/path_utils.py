from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence

from spgraph.config import SEARCH_CONFIG, SearchConfig
from spgraph.logging import get_logger
from spgraph.model.graph import Node
from spgraph.types.base import Cost

LOGGER = get_logger(__name__)


def reconstruct_path(end_node: Node) -> List[Node]:
    """
    Rebuild a path by following ``predecessor`` links back from ``end_node``.

    Args:
        end_node: Node the search finished on.

    Returns:
        Nodes from the search start to ``end_node`` inclusive.

    Raises:
        ValueError: If the predecessor chain loops back on itself.
    """
    path: List[Node] = []
    seen = set()
    current: Optional[Node] = end_node
    while current is not None:
        if current in seen:
            raise ValueError(
                f"Predecessor cycle detected at node '{current.identifier}'."
            )
        seen.add(current)
        path.append(current)
        current = current.predecessor
    path.reverse()
    return path


def resolve_path(
    src_node: Node,
    dst_node: Node,
    pred: Dict[Node, Optional[Node]],
) -> List[Node]:
    """
    Walk a predecessor map from ``dst_node`` back to ``src_node``.

    Args:
        src_node: Start node of the search that produced ``pred``.
        dst_node: Node to resolve a path to.
        pred: Predecessor map from ``spf_costs``.

    Returns:
        Nodes from ``src_node`` to ``dst_node`` inclusive, or an empty list if
        ``dst_node`` was not reached.

    Raises:
        ValueError: If the chain ends somewhere other than ``src_node`` or loops.
    """
    if dst_node not in pred:
        return []

    path: List[Node] = []
    seen = set()
    current: Optional[Node] = dst_node
    while current is not None:
        if current in seen:
            raise ValueError(
                f"Predecessor cycle detected at node '{current.identifier}'."
            )
        seen.add(current)
        path.append(current)
        current = pred[current]

    if path[-1] is not src_node:
        raise ValueError(
            f"Predecessor chain of '{dst_node.identifier}' does not lead back "
            f"to '{src_node.identifier}'."
        )
    path.reverse()
    return path


def path_cost(nodes: Sequence[Node]) -> Cost:
    """
    Sum the edge costs between consecutive nodes.

    Returns:
        Total cost; 0 for paths with fewer than two nodes.

    Raises:
        ValueError: If two consecutive nodes are not connected by an edge.
    """
    total: Cost = 0
    for src, dst in zip(nodes, nodes[1:]):
        edge = src.edge_to(dst)
        if edge is None:
            raise ValueError(f"No edge from '{src.identifier}' to '{dst.identifier}'.")
        total += edge.cost
    return total


def format_path(
    nodes: Iterable[Node],
    config: Optional[SearchConfig] = None,
) -> str:
    """Render nodes as a linked-list trace: ``(A, 0) -> (B, 1) -> x``."""
    config = config or SEARCH_CONFIG
    parts = [config.format_hop(node.identifier, node.distance) for node in nodes]
    parts.append(config.trace_terminator)
    return config.trace_separator.join(parts)


def print_path(
    nodes: Iterable[Node],
    config: Optional[SearchConfig] = None,
) -> None:
    """Write the trace of ``nodes`` to the spgraph log at INFO level."""
    LOGGER.info(format_path(nodes, config))
