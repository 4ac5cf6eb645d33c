"""
follow_graph/metrics/modularity.py — Modularity of a community partition.

Modularity compares the weight of edges falling inside communities with
what a random graph of the same degree sequence would place there:

    Q = (1 / 2m) Σ_ij [A_ij − k_i k_j / 2m] δ(c_i, c_j)
      = Σ_c [ L_c / m − (D_c / 2m)² ]

where m is the total edge weight, L_c the weight of edges inside community c
and D_c the summed (weighted) degree of its members. The second form is
what is computed: one pass over the edge list, no pairwise loop.

Q lies in [−1/2, 1]. A single community spanning the whole graph scores 0;
values above ~0.3 are usually read as real community structure.
"""

import logging
from collections import defaultdict
from collections.abc import Sequence

from follow_graph.config import DEFAULT_CONFIG
from follow_graph.graph.models import GraphEdge, GraphNode
from follow_graph.metrics.communities import Community, community_membership

logger = logging.getLogger(__name__)


def calculate_modularity(
    nodes: Sequence[GraphNode],
    edges: Sequence[GraphEdge],
    communities: Sequence[Community],
) -> float:
    """
    Score a partition of the graph with Newman modularity.

    Args:
        nodes:       Node list (kept for a uniform call shape; the score
                     depends only on edges and the partition).
        edges:       Undirected edge list. edge.weight is used when set,
                     otherwise 1.0. Self-loops are skipped.
        communities: The partition, e.g. from detect_communities().

    Returns:
        modularity: Float. 0.0 when there are no edges.

    Notes:
        - Parallel edges each contribute their weight, as in a multigraph.
        - An edge endpoint absent from every community is treated as its
          own singleton community.
    """
    membership = community_membership(communities)

    total_weight = 0.0
    internal: dict[str, float] = defaultdict(float)
    strength: dict[str, float] = defaultdict(float)

    for edge in edges:
        if edge.source == edge.target:
            continue
        weight = 1.0 if edge.weight is None else float(edge.weight)
        c_source = membership.get(edge.source, edge.source)
        c_target = membership.get(edge.target, edge.target)

        total_weight += weight
        strength[c_source] += weight
        strength[c_target] += weight
        if c_source == c_target:
            internal[c_source] += weight

    if total_weight == 0:
        return 0.0

    two_m = 2.0 * total_weight
    modularity = sum(
        internal[c] / total_weight - (strength[c] / two_m) ** 2
        for c in strength
    )

    logger.debug(
        "Modularity %.4f over %d communities (total edge weight %.1f).",
        modularity,
        len(communities),
        total_weight,
    )
    return modularity


def has_community_structure(
    modularity: float | None,
    threshold: float = DEFAULT_CONFIG.modularity_structure_threshold,
) -> bool:
    """True if modularity is set and above the structure threshold (default 0.3)."""
    return modularity is not None and modularity > threshold
