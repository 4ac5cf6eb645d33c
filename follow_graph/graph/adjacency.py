"""
follow_graph/graph/adjacency.py — Undirected adjacency map construction.

Every metric in this package runs over the same structure: a dict mapping
node id → set of neighbor ids. Sparse follow graphs make a dict-of-sets far
cheaper than a matrix, with O(1) neighbor lookup and O(degree) iteration.

Construction rules:
    - Edges are undirected: a ── b inserts b into adj[a] and a into adj[b].
    - Self-loops (source == target) are dropped.
    - Parallel edges collapse naturally in the neighbor set.
    - Edges referencing ids missing from the node list are added as-is.
      The engine does not validate node existence.

The resulting map is symmetric and loop-free.
"""

import logging
from collections.abc import Iterable
from typing import Optional

from follow_graph.graph.models import GraphEdge, GraphNode

logger = logging.getLogger(__name__)

Adjacency = dict[str, set[str]]

_EMPTY: frozenset = frozenset()


def build_adjacency(
    edges: Iterable[GraphEdge],
    nodes: Optional[Iterable[GraphNode]] = None,
) -> Adjacency:
    """
    Build the undirected adjacency map for an edge list.

    Args:
        edges: Connections between accounts. Direction is ignored.
        nodes: Optional node list. When given, every node receives an entry
               (empty for isolated nodes) so the map covers the full node set.

    Returns:
        adj: Dict mapping node id → set of neighbor ids.
    """
    adj: Adjacency = {}

    if nodes is not None:
        for node in nodes:
            adj.setdefault(node.id, set())

    for edge in edges:
        if edge.source == edge.target:
            continue
        adj.setdefault(edge.source, set()).add(edge.target)
        adj.setdefault(edge.target, set()).add(edge.source)

    return adj


def degree(adj: Adjacency, node: str) -> int:
    """Number of distinct neighbors of node (0 for unknown ids)."""
    return len(adj.get(node, _EMPTY))


def neighbors(adj: Adjacency, node: str) -> set[str] | frozenset:
    """Neighbor set of node. Unknown ids yield an empty set."""
    return adj.get(node, _EMPTY)


def common_neighbors(adj: Adjacency, a: str, b: str) -> set[str]:
    """Ids adjacent to both a and b."""
    return set(neighbors(adj, a)) & set(neighbors(adj, b))


def edge_count(adj: Adjacency) -> int:
    """Number of distinct undirected edges in a symmetric adjacency map."""
    return sum(len(nbrs) for nbrs in adj.values()) // 2


def unknown_endpoints(adj: Adjacency, nodes: Iterable[GraphNode]) -> set[str]:
    """
    Ids present in the adjacency map but absent from the node list.

    These come from edges that reference accounts the provider did not
    resolve. They are tolerated everywhere; callers may log them.
    """
    known = {node.id for node in nodes}
    missing = {n for n in adj if n not in known}
    if missing:
        logger.warning(
            "%d edge endpoint(s) are not in the node list (e.g. %s).",
            len(missing),
            sorted(missing)[0],
        )
    return missing
