"""NetworkX graph conversion utilities.

Converts between NetworkX graphs and spgraph's ``Node`` graphs so topologies
built or analysed with NetworkX can be searched with spgraph.

Example:
    >>> import networkx as nx
    >>> from spgraph import shortest_path
    >>> from spgraph.lib.nx import from_networkx, to_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", cost=1)
    >>> G.add_edge("B", "C", cost=2)
    >>>
    >>> nodes = from_networkx(G)
    >>> [n.identifier for n in shortest_path(nodes["A"], nodes["C"])]
    ['A', 'B', 'C']
    >>>
    >>> G_out = to_networkx(nodes.values())
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Hashable, Iterable, Tuple, Union

import networkx as nx

from spgraph.logging import get_logger
from spgraph.model.graph import Node
from spgraph.types.base import Cost

if TYPE_CHECKING:
    NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]
else:
    NxGraph = Any

LOGGER = get_logger(__name__)


def from_networkx(
    G: NxGraph,
    *,
    cost_attr: str = "cost",
    default_cost: Cost = 1,
) -> Dict[Hashable, Node]:
    """Build a ``Node`` graph from a NetworkX graph.

    Every NetworkX node becomes a ``Node`` whose identifier is the NetworkX
    node key. Undirected graphs get one directed edge in each direction.
    Between a pair of nodes only one edge is kept: for multigraphs, the
    cheapest of the parallel edges. Edge attributes other than ``cost_attr``
    are stored as the edge metadata dict.

    Args:
        G: NetworkX graph (DiGraph, MultiDiGraph, Graph, or MultiGraph)
        cost_attr: Edge attribute name for cost (default: "cost")
        default_cost: Cost value when attribute is missing or None (default: 1)

    Returns:
        Mapping from NetworkX node key to ``Node``, in ``G.nodes`` order.

    Raises:
        TypeError: If G is not a NetworkX graph
        ValueError: If graph has no nodes
        InvalidEdgeWeight: If an edge cost is negative, infinite or NaN
    """
    if not isinstance(G, (nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph)):
        raise TypeError(
            f"Expected NetworkX graph (DiGraph, MultiDiGraph, Graph, MultiGraph), "
            f"got {type(G).__name__}"
        )

    if G.number_of_nodes() == 0:
        raise ValueError("Graph has no nodes")

    nodes: Dict[Hashable, Node] = {name: Node(name) for name in G.nodes()}

    # Cheapest edge per ordered pair; later duplicates only win if cheaper
    best: Dict[Tuple[Hashable, Hashable], Tuple[Cost, Dict[str, Any]]] = {}

    def _offer(u: Hashable, v: Hashable, data: Dict[str, Any]) -> None:
        cost = data.get(cost_attr)
        if cost is None:
            cost = default_cost
        metadata = {k: val for k, val in data.items() if k != cost_attr}
        current = best.get((u, v))
        if current is None or cost < current[0]:
            best[(u, v)] = (cost, metadata)

    directed = G.is_directed()
    for u, v, data in G.edges(data=True):
        _offer(u, v, data)
        if not directed and u != v:
            _offer(v, u, data)

    for (u, v), (cost, metadata) in best.items():
        nodes[u].add_directed_edge(nodes[v], cost, metadata or None)

    LOGGER.debug(
        "Converted NetworkX graph: %d nodes, %d directed edges",
        len(nodes),
        len(best),
    )
    return nodes


def to_networkx(
    nodes: Iterable[Node],
    *,
    cost_attr: str = "cost",
) -> nx.DiGraph:
    """Export a ``Node`` graph to a NetworkX DiGraph.

    Node keys are the node identifiers. Edge targets outside ``nodes`` are
    added as well. Dict metadata is merged into the edge attributes; any other
    non-None metadata is stored under ``"metadata"``.

    Args:
        nodes: Nodes to export.
        cost_attr: Edge attribute name for cost (default: "cost")

    Returns:
        A new ``networkx.DiGraph``.
    """
    G = nx.DiGraph()
    for node in nodes:
        G.add_node(node.identifier)
        for edge in node.edges:
            attrs: Dict[str, Any] = {}
            if isinstance(edge.metadata, dict):
                attrs.update(edge.metadata)
            elif edge.metadata is not None:
                attrs["metadata"] = edge.metadata
            attrs[cost_attr] = edge.cost
            G.add_edge(node.identifier, edge.target.identifier, **attrs)
    return G
