"""
follow_graph/metrics/pagerank.py — PageRank by fixed-length power iteration.

An account is important if important accounts are connected to it. Each
iteration redistributes every node's rank evenly over its neighbors, mixed
with a uniform teleport share:

    rank'(u) = (1 - d) / n + d × Σ_{v ∈ N(u)} rank(v) / deg(v)

The iteration count is fixed (no convergence test), which trades a little
precision for bounded, reproducible runtime. Updates are synchronous: every
rank' is computed from the previous iteration's snapshot.

Isolated accounts have nobody to pass their rank to. Their mass is spread
uniformly over all nodes each iteration so the ranks keep summing to 1.
"""

import logging
from collections.abc import Sequence

from follow_graph.config import DEFAULT_CONFIG
from follow_graph.graph.adjacency import build_adjacency, degree, neighbors
from follow_graph.graph.models import GraphEdge, GraphNode

logger = logging.getLogger(__name__)


def calculate_pagerank(
    nodes: Sequence[GraphNode],
    edges: Sequence[GraphEdge],
    damping: float = DEFAULT_CONFIG.pagerank_damping,
    iterations: int = DEFAULT_CONFIG.pagerank_iterations,
) -> dict[str, float]:
    """
    Compute PageRank for every node.

    Args:
        nodes:      Node list. n = len(nodes).
        edges:      Undirected edge list.
        damping:    Probability of following a connection (default 0.85).
        iterations: Number of power iterations (default 20).

    Returns:
        pagerank: Dict node_id → rank, in node-list order. Values are
                  non-negative and sum to ≈1. Empty input → empty dict.

    Notes:
        - On a connected graph without isolated nodes the dangling term is
          zero and the update is the plain undirected PageRank.
        - Edges to ids missing from the node list leak the rank sent along
          them (those ids hold no rank), so the sum drops below 1 on such
          malformed input.
    """
    n = len(nodes)
    if n == 0:
        return {}

    adj = build_adjacency(edges)
    degrees = {node.id: degree(adj, node.id) for node in nodes}
    teleport = (1.0 - damping) / n

    rank: dict[str, float] = {node.id: 1.0 / n for node in nodes}

    for _ in range(iterations):
        dangling = sum(rank[node_id] for node_id, k in degrees.items() if k == 0)
        base = teleport + damping * dangling / n

        new_rank: dict[str, float] = {}
        for node in nodes:
            total = 0.0
            for nbr in neighbors(adj, node.id):
                k = degrees.get(nbr, 0)
                if k > 0:
                    total += rank[nbr] / k
            new_rank[node.id] = base + damping * total
        rank = new_rank

    logger.debug(
        "PageRank: %d nodes, %d iterations, damping %.2f. Sum: %.6f.",
        n,
        iterations,
        damping,
        sum(rank.values()),
    )
    return rank
