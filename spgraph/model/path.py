from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Hashable, Iterator, List, Sequence, Tuple

from spgraph.model.graph import Edge, Node
from spgraph.types.base import INF, Cost, PathStatus


@dataclass(frozen=True)
class PathResult:
    """
    Represents the outcome of a start/end search.

    Attributes:
        status (PathStatus):
            TRIVIAL when start and end are the same node, FOUND when a path
            exists, UNREACHABLE when the frontier ran out first.
        nodes (Tuple[Node, ...]):
            Ordered nodes from start to end inclusive. ``(start,)`` for a
            trivial result and empty when unreachable.
        cost (Cost):
            Total cost of the path; 0 for trivial and infinity when unreachable.
    """

    status: PathStatus
    nodes: Tuple[Node, ...] = ()
    cost: Cost = INF

    @classmethod
    def trivial(cls, node: Node) -> PathResult:
        return cls(PathStatus.TRIVIAL, (node,), 0)

    @classmethod
    def found(cls, nodes: Sequence[Node], cost: Cost) -> PathResult:
        return cls(PathStatus.FOUND, tuple(nodes), cost)

    @classmethod
    def unreachable(cls) -> PathResult:
        return cls(PathStatus.UNREACHABLE)

    def __getitem__(self, idx: int) -> Node:
        return self.nodes[idx]

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    def __lt__(self, other: Any) -> bool:
        """Compare two results based on their cost."""
        if not isinstance(other, PathResult):
            return NotImplemented
        return self.cost < other.cost

    def __repr__(self) -> str:
        return (
            f"PathResult({self.status.name}, {list(self.identifiers)}, "
            f"cost={self.cost})"
        )

    @property
    def is_reachable(self) -> bool:
        """True for TRIVIAL and FOUND results."""
        return self.status is not PathStatus.UNREACHABLE

    @property
    def src_node(self) -> Node:
        """Return the first node in the path (the start node)."""
        return self.nodes[0]

    @property
    def dst_node(self) -> Node:
        """Return the last node in the path (the end node)."""
        return self.nodes[-1]

    @property
    def identifiers(self) -> Tuple[Hashable, ...]:
        """Identifiers of the path nodes in order."""
        return tuple(node.identifier for node in self.nodes)

    @property
    def edges(self) -> List[Edge]:
        """
        Return the edges traversed between consecutive path nodes.

        Raises:
            ValueError: If two consecutive nodes are not connected, which
                happens when the topology changed after the search.
        """
        hops: List[Edge] = []
        for src, dst in zip(self.nodes, self.nodes[1:]):
            edge = src.edge_to(dst)
            if edge is None:
                raise ValueError(
                    f"No edge from '{src.identifier}' to '{dst.identifier}'."
                )
            hops.append(edge)
        return hops
