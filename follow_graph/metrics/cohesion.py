"""
follow_graph/metrics/cohesion.py — Network density and clustering coefficient.

Density is the fraction of all possible connections that exist. The local
clustering coefficient of a node is the fraction of pairs of its neighbors
that are themselves connected ("are my friends friends with each other?").

Nodes with fewer than two neighbors have no neighbor pairs. They get 0.0 in
the per-node map but are left out of the network average entirely rather
than pulling it towards zero.
"""

import logging
from collections.abc import Sequence
from itertools import combinations

from follow_graph.graph.adjacency import Adjacency, build_adjacency, neighbors
from follow_graph.graph.models import GraphEdge, GraphNode

logger = logging.getLogger(__name__)


def network_density(node_count: int, edge_count: int) -> float:
    """
    Ratio of existing to possible undirected edges: m / (n(n-1)/2).

    Returns 0.0 when node_count <= 1.
    """
    if node_count <= 1:
        return 0.0
    possible = node_count * (node_count - 1) / 2
    return edge_count / possible


def _node_clustering(adj: Adjacency, node_id: str) -> float | None:
    nbrs = neighbors(adj, node_id)
    k = len(nbrs)
    if k < 2:
        return None
    links = sum(1 for a, b in combinations(nbrs, 2) if b in neighbors(adj, a))
    return links / (k * (k - 1) / 2)


def local_clustering(
    nodes: Sequence[GraphNode],
    edges: Sequence[GraphEdge],
) -> dict[str, float]:
    """
    Per-node clustering coefficient.

    Args:
        nodes: Node list.
        edges: Undirected edge list.

    Returns:
        clustering: Dict node_id → coefficient in [0, 1], in node-list order.
                    Nodes with degree < 2 get 0.0.
    """
    adj = build_adjacency(edges)
    result: dict[str, float] = {}
    for node in nodes:
        coefficient = _node_clustering(adj, node.id)
        result[node.id] = 0.0 if coefficient is None else coefficient
    return result


def average_clustering(
    nodes: Sequence[GraphNode],
    edges: Sequence[GraphEdge],
) -> float:
    """
    Mean local clustering coefficient over nodes with degree >= 2.

    Args:
        nodes: Node list.
        edges: Undirected edge list.

    Returns:
        average: Float in [0, 1]. 0.0 if no node has two or more neighbors.
    """
    if not nodes:
        return 0.0

    adj = build_adjacency(edges)
    coefficients = [
        c for c in (_node_clustering(adj, node.id) for node in nodes) if c is not None
    ]
    if not coefficients:
        return 0.0

    average = sum(coefficients) / len(coefficients)
    logger.debug(
        "Average clustering %.4f over %d qualifying nodes (of %d).",
        average,
        len(coefficients),
        len(nodes),
    )
    return average
