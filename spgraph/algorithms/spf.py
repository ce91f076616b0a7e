"""Label-setting shortest path first (SPF) searches over ``Node`` graphs.

Two flavours are provided:

* ``shortest_path`` / ``spf`` run the search in place, writing ``distance``,
  ``visited`` and ``predecessor`` onto the nodes. Only one such search may be
  in flight per node set, and nodes must be reset between searches.
* ``spf_costs`` keeps all search state in dictionaries keyed by node and
  leaves the nodes untouched, so it can run repeatedly on a shared topology.

Edge costs are assumed non-negative; finalized nodes are never revisited.
"""

from __future__ import annotations

from collections import deque
from heapq import heappop, heappush
from itertools import count
from typing import Dict, Iterable, Iterator, List, Optional, Set, Tuple

from spgraph.algorithms.path_utils import reconstruct_path
from spgraph.config import SEARCH_CONFIG, SearchConfig
from spgraph.exceptions import StaleSearchState
from spgraph.logging import get_logger
from spgraph.model.graph import Node
from spgraph.model.path import PathResult
from spgraph.types.base import Cost

LOGGER = get_logger(__name__)


class Frontier:
    """
    Min-priority queue of reached but not yet finalized nodes.

    Entries are keyed by ``(distance, insertion sequence)`` so equal distances
    pop in the order nodes first entered the frontier. A node is inserted once;
    when its distance improves, ``refresh`` pushes a new entry under the same
    sequence number and the superseded entry is dropped lazily on ``pop``.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[Cost, int, Node]] = []
        self._keys: Dict[Node, Cost] = {}
        self._seq: Dict[Node, int] = {}
        self._counter = count()

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, node: Node) -> bool:
        return node in self._keys

    def __iter__(self) -> Iterator[Node]:
        """Iterate over the current members in insertion order."""
        return iter(list(self._keys))

    def push(self, node: Node) -> None:
        """Insert ``node`` keyed by its current distance.

        Raises:
            ValueError: If ``node`` is already in the frontier.
        """
        if node in self._keys:
            raise ValueError(f"Node '{node.identifier}' is already in the frontier.")
        seq = next(self._counter)
        self._seq[node] = seq
        self._keys[node] = node.distance
        heappush(self._heap, (node.distance, seq, node))

    def refresh(self, node: Node) -> None:
        """Re-key ``node`` if its distance dropped since it was last keyed."""
        if node.distance < self._keys[node]:
            self._keys[node] = node.distance
            heappush(self._heap, (node.distance, self._seq[node], node))

    def pop(self) -> Node:
        """Remove and return the member with the smallest distance.

        Raises:
            IndexError: If the frontier is empty.
        """
        while self._heap:
            distance, _, node = heappop(self._heap)
            if self._keys.get(node) != distance:
                # Superseded by a later refresh, or already popped
                continue
            del self._keys[node]
            return node
        raise IndexError("pop from an empty frontier")


def _check_neighbours(
    node: Node,
    frontier: Frontier,
    finalized: Set[Node],
) -> None:
    """Raise if a neighbour carries state not written by the current search."""
    for edge in node.edges:
        target = edge.target
        if target in finalized or target in frontier:
            continue
        if not target.is_fresh:
            raise StaleSearchState(target)


def _run_search(src_node: Node, dst_node: Node, config: SearchConfig) -> bool:
    """
    Expand nodes from ``src_node`` until ``dst_node`` is finalized.

    Returns:
        True if ``dst_node`` was reached, False if the frontier ran out.
    """
    if config.check_stale_state:
        for node in (src_node, dst_node):
            if not node.is_fresh:
                raise StaleSearchState(node)

    LOGGER.debug("SPF from '%s' to '%s'", src_node.identifier, dst_node.identifier)

    src_node.distance = 0
    frontier = Frontier()
    frontier.push(src_node)
    finalized: Set[Node] = set()

    while frontier:
        current = frontier.pop()
        current.visited = True
        finalized.add(current)
        LOGGER.debug(
            "Finalized '%s' at distance %s", current.identifier, current.distance
        )

        if current is dst_node:
            return True

        if config.check_stale_state:
            try:
                _check_neighbours(current, frontier, finalized)
            except StaleSearchState:
                # Leave the graph as it was before this search
                reset_search_state(finalized | set(frontier))
                raise

        for node in current.relax():
            frontier.push(node)
        for edge in current.edges:
            if edge.target in frontier:
                frontier.refresh(edge.target)

    LOGGER.debug(
        "'%s' is unreachable from '%s' (%d nodes finalized)",
        dst_node.identifier,
        src_node.identifier,
        len(finalized),
    )
    return False


def shortest_path(
    src_node: Node,
    dst_node: Node,
    config: Optional[SearchConfig] = None,
) -> List[Node]:
    """
    Find the minimum-cost path from ``src_node`` to ``dst_node``.

    Search state is written onto the nodes, so ``dst_node.distance`` holds the
    path cost afterwards.

    Args:
        src_node: Start of the search.
        dst_node: Node to reach.
        config: Search configuration; defaults to ``SEARCH_CONFIG``.

    Returns:
        Nodes from ``src_node`` to ``dst_node`` inclusive. Empty when the end
        is unreachable, and also when ``src_node is dst_node``; use ``spf`` to
        tell those two cases apart.

    Raises:
        StaleSearchState: If stale-state checks are on and the search meets a
            node that was not reset after a previous search.
    """
    if src_node is dst_node:
        return []
    if _run_search(src_node, dst_node, config or SEARCH_CONFIG):
        return reconstruct_path(dst_node)
    return []


def spf(
    src_node: Node,
    dst_node: Node,
    config: Optional[SearchConfig] = None,
) -> PathResult:
    """
    Find the minimum-cost path and report the outcome as a ``PathResult``.

    Same search as ``shortest_path``, but the three outcomes are distinct:
    TRIVIAL (``src_node is dst_node``, path ``(src_node,)``, cost 0, no state
    written), FOUND (path and ``dst_node.distance``) and UNREACHABLE.

    Raises:
        StaleSearchState: As for ``shortest_path``.
    """
    if src_node is dst_node:
        return PathResult.trivial(src_node)
    if _run_search(src_node, dst_node, config or SEARCH_CONFIG):
        return PathResult.found(reconstruct_path(dst_node), dst_node.distance)
    return PathResult.unreachable()


def spf_costs(
    src_node: Node,
    dst_node: Optional[Node] = None,
) -> Tuple[Dict[Node, Cost], Dict[Node, Optional[Node]]]:
    """
    Compute shortest path costs from ``src_node`` without touching node state.

    Args:
        src_node: Start of the search.
        dst_node: If given, stop as soon as this node is finalized.

    Returns:
        A tuple of (costs, pred):
          - costs: Maps each reached node to its cost from ``src_node``. Without
            ``dst_node`` these are final for every reachable node.
          - pred: Maps each reached node to its predecessor; ``src_node`` maps
            to None. Pass to ``resolve_path`` to extract a path.
    """
    costs: Dict[Node, Cost] = {src_node: 0}
    pred: Dict[Node, Optional[Node]] = {src_node: None}
    finalized: Set[Node] = set()
    seq = count()
    min_pq: List[Tuple[Cost, int, Node]] = [(0, next(seq), src_node)]

    while min_pq:
        current_cost, _, node = heappop(min_pq)
        if node in finalized:
            continue
        finalized.add(node)
        if node is dst_node:
            break

        for edge in node.edges:
            neighbour = edge.target
            if neighbour in finalized:
                continue
            new_cost = current_cost + edge.cost
            if neighbour not in costs or new_cost < costs[neighbour]:
                costs[neighbour] = new_cost
                pred[neighbour] = node
                heappush(min_pq, (new_cost, next(seq), neighbour))

    return costs, pred


def reachable_nodes(src_node: Node) -> List[Node]:
    """Return every node reachable from ``src_node`` (itself included), BFS order."""
    seen = {src_node}
    order = [src_node]
    queue = deque([src_node])
    while queue:
        node = queue.popleft()
        for edge in node.edges:
            if edge.target not in seen:
                seen.add(edge.target)
                order.append(edge.target)
                queue.append(edge.target)
    return order


def reset_search_state(nodes: Iterable[Node]) -> None:
    """Reset ``distance``, ``visited`` and ``predecessor`` on every node."""
    for node in nodes:
        node.reset()
