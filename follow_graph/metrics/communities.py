"""
follow_graph/metrics/communities.py — Community detection by label propagation.

Every account starts in its own community, labelled with its own id. On each
pass every account adopts the label most common among its neighbors, until a
full pass changes nothing or the iteration bound is reached.

Textbook label propagation randomizes both the visiting order and the
tie-breaking. Here both are fixed so that the same input always yields the
same partition and the same 'cluster-N' ids:
    - nodes are visited in node-list order;
    - labels are read from the previous pass (synchronous update);
    - ties go to the lexicographically smallest label.

This is a fast heuristic, not modularity maximization. See modularity.py to
score the partition it returns.
"""

import logging
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

from follow_graph.config import DEFAULT_CONFIG
from follow_graph.graph.adjacency import build_adjacency, neighbors
from follow_graph.graph.models import GraphEdge, GraphNode

logger = logging.getLogger(__name__)

# Label propagation is meaningless below this many nodes.
MIN_NODES_FOR_PROPAGATION = 3


@dataclass
class Community:
    """
    One detected community.

    Fields:
        id:     Synthetic id 'cluster-N'; N follows the size-descending order.
        nodes:  Member node ids, sorted lexicographically.
        size:   Number of members.
        color:  Display color. Left unset by detection; renderers fill it in.
    """

    id: str
    nodes: list[str]
    size: int
    color: Optional[str] = None


def _most_common_label(counts: Counter) -> str:
    best_count = max(counts.values())
    return min(label for label, count in counts.items() if count == best_count)


def detect_communities(
    nodes: Sequence[GraphNode],
    edges: Sequence[GraphEdge],
    max_iterations: int = DEFAULT_CONFIG.label_propagation_max_iterations,
) -> list[Community]:
    """
    Partition the nodes into communities with deterministic label propagation.

    Algorithm (O(iterations × E)):
        1. Label every node with its own id.
        2. For each pass (at most max_iterations), for every node with at
           least one neighbor, count neighbor labels from the previous pass
           and take the most frequent, smallest label on ties.
        3. Stop as soon as a pass changes no label.
        4. Group nodes by final label, sort members, sort groups by size
           descending and assign ids cluster-0, cluster-1, ...

    Args:
        nodes:          Node list; also the fixed visiting order.
        edges:          Undirected edge list.
        max_iterations: Upper bound on passes (default 30).

    Returns:
        communities: Community list, largest first. Every input node belongs
                     to exactly one community. Graphs with fewer than 3 nodes
                     yield one singleton community per node.

    Notes:
        - Isolated nodes keep their own label and end up as singletons.
        - Groups of equal size keep the order in which their label first
          appears in the node list.
        - Synchronous updates can oscillate on bipartite-like structures
          (e.g. a path of three); the iteration bound ends such runs and the
          result is still deterministic.
    """
    if len(nodes) < MIN_NODES_FOR_PROPAGATION:
        return [
            Community(id=f"cluster-{i}", nodes=[node.id], size=1)
            for i, node in enumerate(nodes)
        ]

    adj = build_adjacency(edges)
    labels: dict[str, str] = {node.id: node.id for node in nodes}

    passes = 0
    for passes in range(1, max_iterations + 1):
        new_labels = dict(labels)
        changed = False

        for node in nodes:
            nbrs = neighbors(adj, node.id)
            if not nbrs:
                continue

            counts = Counter(labels.get(nbr, nbr) for nbr in nbrs)
            best = _most_common_label(counts)
            if best != labels[node.id]:
                new_labels[node.id] = best
                changed = True

        labels = new_labels
        if not changed:
            break

    groups: dict[str, list[str]] = {}
    for node in nodes:
        groups.setdefault(labels[node.id], []).append(node.id)

    ordered = sorted(groups.values(), key=len, reverse=True)
    communities = [
        Community(id=f"cluster-{i}", nodes=sorted(members), size=len(members))
        for i, members in enumerate(ordered)
    ]

    logger.debug(
        "Label propagation: %d communities from %d nodes after %d pass(es).",
        len(communities),
        len(nodes),
        passes,
    )
    return communities


def community_membership(communities: Sequence[Community]) -> dict[str, str]:
    """
    Invert a community list into node_id → community id.

    Args:
        communities: Output of detect_communities() (or any partition).

    Returns:
        membership: Dict node_id → Community.id.
    """
    return {
        node_id: community.id
        for community in communities
        for node_id in community.nodes
    }
