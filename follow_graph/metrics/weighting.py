"""
follow_graph/metrics/weighting.py — Structural edge weights.

Two accounts are more tightly connected the more of their connections they
share and the more alike their degrees are:

    weight(u, v) = 1 + |N(u) ∩ N(v)| + min(deg u, deg v) / max(deg u, deg v)

The ratio term is 0 when both degrees are 0. Weights feed modularity scoring
and renderers; they are derived, so any weight already on the edge is
replaced.
"""

import logging
from collections.abc import Sequence
from dataclasses import replace
from typing import Optional

from follow_graph.graph.adjacency import build_adjacency, common_neighbors, degree
from follow_graph.graph.models import GraphEdge, GraphNode

logger = logging.getLogger(__name__)


def weight_edges(
    edges: Sequence[GraphEdge],
    nodes: Optional[Sequence[GraphNode]] = None,
) -> list[GraphEdge]:
    """
    Return weighted copies of the edges.

    Args:
        edges: Undirected edge list. Not modified.
        nodes: Accepted for call-shape symmetry with the other metrics;
               degrees come from the edge list alone.

    Returns:
        weighted: New GraphEdge objects, one per non-self-loop input edge, in
                  input order, with 'weight' set and all other fields copied.
    """
    adj = build_adjacency(edges)
    weighted: list[GraphEdge] = []

    for edge in edges:
        if edge.source == edge.target:
            continue

        shared = len(common_neighbors(adj, edge.source, edge.target))
        deg_source = degree(adj, edge.source)
        deg_target = degree(adj, edge.target)
        high = max(deg_source, deg_target)
        ratio = min(deg_source, deg_target) / high if high > 0 else 0.0

        weighted.append(replace(edge, weight=1.0 + shared + ratio))

    logger.debug(
        "Weighted %d edges (%d self-loops dropped).",
        len(weighted),
        len(edges) - len(weighted),
    )
    return weighted
