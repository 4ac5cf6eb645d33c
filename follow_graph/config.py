"""
follow_graph/config.py — All tunable parameters for the follow-graph engine.

No constant should be hardcoded in a metric module. Damping factors,
iteration bounds and tier boundaries live here so that calibration changes
are a single-file diff.

Metric functions take these values as plain keyword parameters (defaulting
to DEFAULT_CONFIG); the aggregator accepts a whole FollowGraphConfig.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FollowGraphConfig:
    """
    Immutable configuration for the follow-graph metric engine.

    Override by constructing a new FollowGraphConfig with the desired values.
    """

    # ── PageRank ──────────────────────────────────────────────────────────────
    pagerank_damping: float = 0.85
    # Probability of following a connection rather than teleporting.

    pagerank_iterations: int = 20
    # Fixed number of power iterations. There is no convergence check:
    # runtime is bounded and output is reproducible.

    # ── Community detection ───────────────────────────────────────────────────
    label_propagation_max_iterations: int = 30
    # Upper bound on label propagation passes. Detection stops earlier as
    # soon as a full pass changes no label.

    # ── Orbit tiers ───────────────────────────────────────────────────────────
    orbit_strong_threshold: int = 20
    # Connection counts strictly above this value are tier 0 ('strong').

    orbit_medium_threshold: int = 5
    # Connection counts in [medium, strong] are tier 1 ('medium');
    # anything below is tier 2 ('weak').

    # ── Summary ───────────────────────────────────────────────────────────────
    top_n: int = 5
    # Number of nodes reported in GraphMetrics.top_degree / top_pagerank.

    modularity_structure_threshold: float = 0.3
    # Modularity above this value is read as real community structure.
    # Convention only; never enforced by the engine.


# Shared default instance; metric signatures read their defaults from it.
DEFAULT_CONFIG = FollowGraphConfig()
