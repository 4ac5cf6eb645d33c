"""
follow_graph/metrics/orbit.py — Orbit tiers: coarse connection-strength buckets.

An account's "orbit" around another is bucketed from a raw connection count:

    Tier 0 'strong'  connections > 20
    Tier 1 'medium'  5 <= connections <= 20
    Tier 2 'weak'    connections < 5

Boundaries are configurable via FollowGraphConfig. Tiers carry no state;
they are recomputed from the count every time.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from follow_graph.config import DEFAULT_CONFIG
from follow_graph.graph.models import GraphNode

logger = logging.getLogger(__name__)

STRONG = 0
MEDIUM = 1
WEAK = 2

_TIER_LABELS = {STRONG: "strong", MEDIUM: "medium", WEAK: "weak"}


@dataclass
class OrbitDistribution:
    """
    Fraction of nodes in each orbit tier.

    Fields:
        strong:  Share of tier-0 nodes (0.0–1.0).
        medium:  Share of tier-1 nodes (0.0–1.0).
        weak:    Share of tier-2 nodes, including nodes with no tier set.
    """

    strong: float
    medium: float
    weak: float


def orbit_tier(
    connections: int,
    strong_threshold: int = DEFAULT_CONFIG.orbit_strong_threshold,
    medium_threshold: int = DEFAULT_CONFIG.orbit_medium_threshold,
) -> int:
    """
    Classify a connection count into tier 0 (strong), 1 (medium) or 2 (weak).

    Args:
        connections:      Raw connection count.
        strong_threshold: Counts strictly above this are strong (default 20).
        medium_threshold: Counts at or above this are medium (default 5).

    Returns:
        tier: 0, 1 or 2.
    """
    if connections > strong_threshold:
        return STRONG
    if connections >= medium_threshold:
        return MEDIUM
    return WEAK


def orbit_label(tier: int) -> str:
    """Human-readable tier name: 'strong', 'medium' or 'weak'."""
    return _TIER_LABELS.get(tier, "weak")


def orbit_strength_distribution(nodes: Sequence[GraphNode]) -> OrbitDistribution:
    """
    Share of nodes in each orbit tier.

    Args:
        nodes: Nodes with 'tier' set (e.g. by annotate_nodes()). A node
               without a tier counts as weak.

    Returns:
        OrbitDistribution with fractions summing to 1.0, or all zeros for an
        empty node list.
    """
    total = len(nodes)
    if total == 0:
        return OrbitDistribution(strong=0.0, medium=0.0, weak=0.0)

    strong = sum(1 for node in nodes if node.tier == STRONG)
    medium = sum(1 for node in nodes if node.tier == MEDIUM)
    weak = total - strong - medium

    logger.debug(
        "Orbit distribution over %d nodes: %d strong, %d medium, %d weak.",
        total,
        strong,
        medium,
        weak,
    )
    return OrbitDistribution(
        strong=strong / total,
        medium=medium / total,
        weak=weak / total,
    )
