"""
follow_graph/metrics/centrality.py — Degree and betweenness centrality.

Degree centrality is the share of the other accounts a node is directly
connected to. Betweenness centrality estimates how often a node sits on the
shortest paths between other accounts: the bridge-builders of the network.

Betweenness uses the dependency accumulation of Brandes' algorithm in a
simplified form: one BFS per source recording shortest-path counts and
predecessors, then a farthest-first sweep pushing dependency back to the
predecessors. The result is scaled by 2 / ((n-1)(n-2)), so values are twice
the usual normalized undirected betweenness and may exceed 1 for hubs.
"""

import logging
from collections import deque
from collections.abc import Sequence

from follow_graph.graph.adjacency import build_adjacency, degree, neighbors
from follow_graph.graph.models import GraphEdge, GraphNode

logger = logging.getLogger(__name__)


def degree_centrality(
    nodes: Sequence[GraphNode],
    edges: Sequence[GraphEdge],
) -> dict[str, float]:
    """
    Normalized degree for every node: degree / (n - 1).

    Args:
        nodes: Node list. n = len(nodes).
        edges: Undirected edge list. Self-loops and duplicates do not count.

    Returns:
        centrality: Dict node_id → value in [0, 1], in node-list order.
                    Every value is 0 when n <= 1.
    """
    n = len(nodes)
    if n <= 1:
        return {node.id: 0.0 for node in nodes}

    adj = build_adjacency(edges)
    return {node.id: degree(adj, node.id) / (n - 1) for node in nodes}


def betweenness_centrality(
    nodes: Sequence[GraphNode],
    edges: Sequence[GraphEdge],
) -> dict[str, float]:
    """
    Shortest-path betweenness for every node.

    Algorithm (O(V × E)):
        For each node s as source:
        1. BFS from s recording, per reached node w: dist[w], the number of
           shortest s→w paths paths[w], and pred[w], the neighbors one step
           closer to s that lie on those paths.
        2. Sweep reached nodes farthest first. Each predecessor v of w gains
           (paths[v] / paths[w]) × (1 + delta[w]); delta[w] (w != s) is
           added to w's running total.
        Finally multiply every total by 2 / ((n-1)(n-2)).

    Args:
        nodes: Node list. Every node is used as a BFS source.
        edges: Undirected edge list.

    Returns:
        centrality: Dict node_id → betweenness, in node-list order.
                    All zeros when n <= 2.

    Notes:
        - Disconnected graphs are fine: each BFS only reaches its own
          component, so unreachable pairs contribute nothing.
        - Edge endpoints missing from the node list are traversed (they can
          carry shortest paths) but get no entry in the result.
    """
    n = len(nodes)
    centrality: dict[str, float] = {node.id: 0.0 for node in nodes}
    if n <= 2:
        return centrality

    adj = build_adjacency(edges)

    for source in nodes:
        s = source.id
        dist: dict[str, int] = {s: 0}
        paths: dict[str, int] = {s: 1}
        pred: dict[str, list[str]] = {s: []}
        order: list[str] = []

        queue = deque([s])
        while queue:
            v = queue.popleft()
            order.append(v)
            next_dist = dist[v] + 1
            for w in neighbors(adj, v):
                if w not in dist:
                    dist[w] = next_dist
                    paths[w] = 0
                    pred[w] = []
                    queue.append(w)
                if dist[w] == next_dist:
                    paths[w] += paths[v]
                    pred[w].append(v)

        delta: dict[str, float] = dict.fromkeys(order, 0.0)
        for w in sorted(order, key=dist.__getitem__, reverse=True):
            if w == s:
                continue
            coeff = (1.0 + delta[w]) / paths[w]
            for v in pred[w]:
                delta[v] += paths[v] * coeff
            if w in centrality:
                centrality[w] += delta[w]

    scale = 2.0 / ((n - 1) * (n - 2))
    for node_id in centrality:
        centrality[node_id] *= scale

    logger.debug(
        "Betweenness computed for %d nodes. Max: %.4f.",
        n,
        max(centrality.values(), default=0.0),
    )
    return centrality
