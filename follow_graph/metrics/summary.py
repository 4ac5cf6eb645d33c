"""
follow_graph/metrics/summary.py — Single-call metric aggregation.

Runs the individual metric functions over one (nodes, edges) pair and
merges their output into the shapes downstream ranking and export code
consume:

    compute_graph_metrics()  → GraphMetrics   network-wide snapshot
    annotate_nodes()         → list[GraphNode] per-node fields filled in
    node_metrics_frame()     → pandas DataFrame, one row per node

There is no partial-failure mode: an exception in any metric propagates and
the whole aggregation fails.
"""

import logging
from collections.abc import Sequence
from dataclasses import asdict, dataclass, field, replace
from typing import Any, Optional

import pandas as pd

from follow_graph.config import DEFAULT_CONFIG, FollowGraphConfig
from follow_graph.graph.adjacency import (
    build_adjacency,
    degree,
    edge_count,
    unknown_endpoints,
)
from follow_graph.graph.models import GraphEdge, GraphNode
from follow_graph.metrics.centrality import betweenness_centrality, degree_centrality
from follow_graph.metrics.cohesion import (
    average_clustering,
    local_clustering,
    network_density,
)
from follow_graph.metrics.communities import community_membership, detect_communities
from follow_graph.metrics.modularity import calculate_modularity
from follow_graph.metrics.orbit import orbit_tier
from follow_graph.metrics.pagerank import calculate_pagerank

logger = logging.getLogger(__name__)

FRAME_COLUMNS = [
    "node",
    "handle",
    "degree",
    "degree_centrality",
    "betweenness_centrality",
    "pagerank",
    "pagerank_pct",
    "clustering",
    "cluster_id",
    "tier",
]


@dataclass
class RankedNode:
    """A node id with the score it was ranked by."""

    node: str
    value: float


@dataclass
class GraphMetrics:
    """
    Network-wide metric snapshot.

    Fields:
        density:            Distinct edges / possible edges (0.0–1.0).
        average_clustering: Mean clustering over nodes with degree >= 2.
        modularity:         Modularity of the detected communities, or None
                            when the graph has no communities or no edges.
        cluster_count:      Number of detected communities.
        top_degree:         Top-N nodes by degree centrality, descending.
        top_pagerank:       Top-N nodes by PageRank, descending.
    """

    density: float
    average_clustering: float
    modularity: Optional[float]
    cluster_count: int
    top_degree: list[RankedNode] = field(default_factory=list)
    top_pagerank: list[RankedNode] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def top_nodes(scores: dict[str, float], n: int) -> list[RankedNode]:
    """
    The n highest-scoring entries, descending.

    Ties keep the dict's insertion order (sorted() is stable under reverse).
    """
    ranked = sorted(scores.items(), key=lambda item: item[1], reverse=True)
    return [RankedNode(node=node, value=value) for node, value in ranked[:n]]


def compute_graph_metrics(
    nodes: Sequence[GraphNode],
    edges: Sequence[GraphEdge],
    config: FollowGraphConfig = DEFAULT_CONFIG,
) -> GraphMetrics:
    """
    Compute the network-wide metric snapshot.

    Algorithm:
        1. Detect communities (label propagation).
        2. Degree centrality and PageRank, once each.
        3. Density over the distinct undirected edge count.
        4. Average clustering coefficient.
        5. Modularity of the detected partition.
        6. Top-N nodes by degree centrality and by PageRank.

    Args:
        nodes:  Node list.
        edges:  Undirected edge list.
        config: FollowGraphConfig. Uses pagerank_damping, pagerank_iterations,
                label_propagation_max_iterations and top_n.

    Returns:
        GraphMetrics.

    Notes:
        - Self-loops and parallel edges are not counted towards density, so
          a simple graph never exceeds density 1.
        - modularity is None rather than 0.0 when the graph has no edges:
          a partition of an edgeless graph has no meaningful score.
    """
    adj = build_adjacency(edges, nodes)
    unknown_endpoints(adj, nodes)

    communities = detect_communities(
        nodes, edges, max_iterations=config.label_propagation_max_iterations
    )
    degree_scores = degree_centrality(nodes, edges)
    pagerank_scores = calculate_pagerank(
        nodes,
        edges,
        damping=config.pagerank_damping,
        iterations=config.pagerank_iterations,
    )

    distinct_edges = edge_count(adj)
    density = network_density(len(nodes), distinct_edges)
    clustering = average_clustering(nodes, edges)

    if communities and distinct_edges > 0:
        modularity: Optional[float] = calculate_modularity(nodes, edges, communities)
    else:
        modularity = None

    metrics = GraphMetrics(
        density=density,
        average_clustering=clustering,
        modularity=modularity,
        cluster_count=len(communities),
        top_degree=top_nodes(degree_scores, config.top_n),
        top_pagerank=top_nodes(pagerank_scores, config.top_n),
    )

    logger.info(
        "Graph metrics: %d nodes, %d edges, density %.4f, %d clusters, modularity %s.",
        len(nodes),
        distinct_edges,
        density,
        len(communities),
        "n/a" if modularity is None else f"{modularity:.4f}",
    )
    return metrics


def annotate_nodes(
    nodes: Sequence[GraphNode],
    edges: Sequence[GraphEdge],
    config: FollowGraphConfig = DEFAULT_CONFIG,
) -> list[GraphNode]:
    """
    Return copies of the nodes with every computed field filled in.

    Fields set: degree_centrality, betweenness_centrality, pagerank,
    cluster_id and tier (orbit tier of the node's degree in this graph).
    Handle, follower counts and layout coordinates are copied unchanged.
    The input nodes are not modified.

    Args:
        nodes:  Node list.
        edges:  Undirected edge list.
        config: FollowGraphConfig (PageRank, label propagation and orbit
                tier parameters).

    Returns:
        annotated: New GraphNode list in input order.
    """
    adj = build_adjacency(edges, nodes)

    degree_scores = degree_centrality(nodes, edges)
    betweenness_scores = betweenness_centrality(nodes, edges)
    pagerank_scores = calculate_pagerank(
        nodes,
        edges,
        damping=config.pagerank_damping,
        iterations=config.pagerank_iterations,
    )
    membership = community_membership(
        detect_communities(
            nodes, edges, max_iterations=config.label_propagation_max_iterations
        )
    )

    annotated = [
        replace(
            node,
            degree_centrality=degree_scores[node.id],
            betweenness_centrality=betweenness_scores[node.id],
            pagerank=pagerank_scores[node.id],
            cluster_id=membership[node.id],
            tier=orbit_tier(
                degree(adj, node.id),
                strong_threshold=config.orbit_strong_threshold,
                medium_threshold=config.orbit_medium_threshold,
            ),
        )
        for node in nodes
    ]

    logger.debug("Annotated %d nodes.", len(annotated))
    return annotated


def node_metrics_frame(
    nodes: Sequence[GraphNode],
    edges: Sequence[GraphEdge],
    config: FollowGraphConfig = DEFAULT_CONFIG,
) -> pd.DataFrame:
    """
    Per-node metric table for ranking and export consumers.

    Args:
        nodes:  Node list.
        edges:  Undirected edge list.
        config: FollowGraphConfig.

    Returns:
        df: pandas DataFrame with columns
                node, handle, degree, degree_centrality,
                betweenness_centrality, pagerank, pagerank_pct,
                clustering, cluster_id, tier
            One row per node, in input order. pagerank_pct is the
            percentile rank of the node's PageRank (pandas
            rank(pct=True) × 100, in (0, 100]).
            Empty input → empty DataFrame with those columns.
    """
    if not nodes:
        return pd.DataFrame(columns=FRAME_COLUMNS)

    adj = build_adjacency(edges, nodes)
    annotated = annotate_nodes(nodes, edges, config)
    clustering = local_clustering(nodes, edges)

    df = pd.DataFrame(
        [
            {
                "node": node.id,
                "handle": node.handle,
                "degree": degree(adj, node.id),
                "degree_centrality": node.degree_centrality,
                "betweenness_centrality": node.betweenness_centrality,
                "pagerank": node.pagerank,
                "clustering": clustering[node.id],
                "cluster_id": node.cluster_id,
                "tier": node.tier,
            }
            for node in annotated
        ]
    )
    df["pagerank_pct"] = df["pagerank"].rank(pct=True) * 100

    logger.debug(
        "Node metrics frame: %d rows. Mean PageRank: %.4f.",
        len(df),
        df["pagerank"].mean(),
    )
    return df[FRAME_COLUMNS]
