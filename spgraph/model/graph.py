"""Graph model: Node and Edge classes with in-place search state.

A graph is just a set of ``Node`` objects wired together by ``Edge`` values.
The caller owns every node; searches only read edges and update the three
search-state fields (``distance``, ``visited``, ``predecessor``) in place.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Hashable, List, Optional, Tuple

from spgraph import config as _config
from spgraph.exceptions import InvalidEdgeWeight
from spgraph.logging import get_logger
from spgraph.types.base import INF, Cost

LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class Edge:
    """Represents one directed, weighted connection to a target node.

    Attributes:
        cost (Cost): Non-negative weight of the edge.
        target (Node): Destination node. The edge does not own it.
        metadata (Any): Opaque caller data, carried for debugging only.
    """

    cost: Cost
    target: Node
    metadata: Any = None

    def __repr__(self) -> str:
        return f"Edge(cost={self.cost}, target={self.target.identifier!r})"


@dataclass(eq=False)
class Node:
    """Represents a vertex with its outgoing edges and search state.

    Nodes compare and hash by identity, so two nodes with the same
    identifier are still distinct vertices.

    Attributes:
        identifier (Hashable): Human-readable label, unique within a search.
        edges (List[Edge]): Outgoing edges, at most one per target.
        distance (Cost): Tentative cost from the search start.
        visited (bool): Whether the node has been finalized.
        predecessor (Optional[Node]): Node the current distance came from.
    """

    identifier: Hashable
    edges: List[Edge] = field(default_factory=list)
    distance: Cost = INF
    visited: bool = False
    predecessor: Optional[Node] = None

    def __repr__(self) -> str:
        return (
            f"Node({self.identifier!r}, distance={self.distance}, "
            f"visited={self.visited})"
        )

    #
    # Topology
    #
    def add_directed_edge(
        self,
        target: Node,
        cost: Cost,
        metadata: Any = None,
    ) -> Edge:
        """
        Add an edge from this node to ``target``, replacing any existing one.

        The replaced edge (matched by target identity) is removed and the new
        edge is appended at the end of ``edges``.

        Args:
            target: Destination node.
            cost: Edge weight.
            metadata: Optional opaque data attached to the edge.

        Returns:
            The newly created Edge.

        Raises:
            InvalidEdgeWeight: If ``cost`` is NaN or infinite, or negative while
                ``SEARCH_CONFIG.allow_negative_costs`` is off.
        """
        if not math.isfinite(cost):
            raise InvalidEdgeWeight(self.identifier, target.identifier, cost)
        if cost < 0:
            if not _config.SEARCH_CONFIG.allow_negative_costs:
                raise InvalidEdgeWeight(self.identifier, target.identifier, cost)
            LOGGER.warning(
                "Negative cost %s on edge '%s' -> '%s'; shortest paths may be wrong",
                cost,
                self.identifier,
                target.identifier,
            )

        for idx, edge in enumerate(self.edges):
            if edge.target is target:
                LOGGER.debug(
                    "Replacing edge '%s' -> '%s' (cost %s -> %s)",
                    self.identifier,
                    target.identifier,
                    edge.cost,
                    cost,
                )
                del self.edges[idx]
                break

        edge = Edge(cost=cost, target=target, metadata=metadata)
        self.edges.append(edge)
        return edge

    def add_undirected_edge(self, target: Node, cost: Cost) -> Tuple[Edge, Edge]:
        """
        Add a pair of directed edges with the same cost, one in each direction.

        Neither edge carries metadata; a previous reverse edge from ``target``
        is replaced along with its metadata.

        Returns:
            A tuple of (forward_edge, reverse_edge).
        """
        forward = self.add_directed_edge(target, cost)
        reverse = target.add_directed_edge(self, cost)
        return forward, reverse

    def edge_to(self, target: Node) -> Optional[Edge]:
        """Return the outgoing edge to ``target``, or None if there is none."""
        for edge in self.edges:
            if edge.target is target:
                return edge
        return None

    def neighbours(self) -> List[Node]:
        """Return the targets of the outgoing edges in edge order."""
        return [edge.target for edge in self.edges]

    #
    # Search state
    #
    @property
    def is_fresh(self) -> bool:
        """True when the node carries no state from a search."""
        return not self.visited and self.distance == INF and self.predecessor is None

    def reset(self) -> None:
        """Clear search state so the node can take part in a new search."""
        self.distance = INF
        self.visited = False
        self.predecessor = None

    def relax(self) -> List[Node]:
        """
        Update tentative distances of unvisited neighbours through this node.

        A neighbour whose distance improves gets this node as predecessor.
        Visited neighbours are never touched.

        Returns:
            Neighbours whose distance was infinite before this call, i.e. the
            nodes seen for the first time, in edge order.
        """
        first_touch: List[Node] = []
        for edge in self.edges:
            target = edge.target
            if target.visited:
                continue
            if target.distance == INF:
                first_touch.append(target)
            candidate = self.distance + edge.cost
            if candidate < target.distance:
                target.distance = candidate
                target.predecessor = self
        return first_touch
