"""
follow_graph — Structural metrics for social-follow graphs.

Computes per-account centrality (degree, betweenness, PageRank), detects
communities, scores the network (density, clustering, modularity) and
buckets connection strength into orbit tiers. Inputs are plain node and
edge lists supplied by an account graph provider; there is no I/O and no
state kept between calls.

Usage:
    from follow_graph import GraphEdge, GraphNode, compute_graph_metrics

    nodes = [GraphNode("alice"), GraphNode("bob"), GraphNode("carol")]
    edges = [GraphEdge("alice", "bob"), GraphEdge("bob", "carol")]
    metrics = compute_graph_metrics(nodes, edges)
"""

from follow_graph.config import DEFAULT_CONFIG, FollowGraphConfig
from follow_graph.graph.adjacency import build_adjacency
from follow_graph.graph.builder import (
    edges_from_records,
    graph_from_frames,
    nodes_from_records,
)
from follow_graph.graph.models import GraphEdge, GraphNode
from follow_graph.metrics.centrality import betweenness_centrality, degree_centrality
from follow_graph.metrics.cohesion import (
    average_clustering,
    local_clustering,
    network_density,
)
from follow_graph.metrics.communities import (
    Community,
    community_membership,
    detect_communities,
)
from follow_graph.metrics.modularity import calculate_modularity, has_community_structure
from follow_graph.metrics.orbit import (
    OrbitDistribution,
    orbit_label,
    orbit_strength_distribution,
    orbit_tier,
)
from follow_graph.metrics.pagerank import calculate_pagerank
from follow_graph.metrics.summary import (
    GraphMetrics,
    RankedNode,
    annotate_nodes,
    compute_graph_metrics,
    node_metrics_frame,
)
from follow_graph.metrics.weighting import weight_edges

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONFIG",
    "FollowGraphConfig",
    "GraphNode",
    "GraphEdge",
    "Community",
    "GraphMetrics",
    "RankedNode",
    "OrbitDistribution",
    "build_adjacency",
    "nodes_from_records",
    "edges_from_records",
    "graph_from_frames",
    "degree_centrality",
    "betweenness_centrality",
    "calculate_pagerank",
    "detect_communities",
    "community_membership",
    "calculate_modularity",
    "has_community_structure",
    "network_density",
    "local_clustering",
    "average_clustering",
    "orbit_tier",
    "orbit_label",
    "orbit_strength_distribution",
    "weight_edges",
    "compute_graph_metrics",
    "annotate_nodes",
    "node_metrics_frame",
]
