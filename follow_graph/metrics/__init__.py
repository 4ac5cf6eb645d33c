"""
follow_graph.metrics — Graph metric computation.

Modules:
    centrality   — Degree and betweenness centrality.
    pagerank     — Fixed-iteration PageRank.
    communities  — Deterministic label propagation communities.
    modularity   — Modularity of a community partition.
    cohesion     — Network density and clustering coefficient.
    orbit        — Orbit tier classification and distribution.
    weighting    — Shared-neighbor / degree-ratio edge weights.
    summary      — GraphMetrics aggregation, node annotation, metrics DataFrame.

Every function takes (nodes, edges) and builds its own adjacency map; none
keeps state between calls. Tunable defaults live in follow_graph.config.
"""
