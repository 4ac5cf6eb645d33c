"""
follow_graph/graph/models.py — Node and edge records of the follow graph.

The account graph provider resolves follower/following relationships into
these two shapes. Everything downstream treats them as read-only: metric
functions return new objects rather than writing onto the inputs.

Edges are undirected for every metric in this package. The edge 'type'
field ('follow', 'mutual', ...) is carried through untouched.
"""

from dataclasses import asdict, dataclass
from typing import Any, Optional

# camelCase keys used by upstream JSON payloads → dataclass field names.
_NODE_KEY_ALIASES = {
    "degreeCentrality": "degree_centrality",
    "betweennessCentrality": "betweenness_centrality",
    "clusterId": "cluster_id",
}


@dataclass
class GraphNode:
    """
    A single account in the follow graph.

    Fields:
        id:                      Account identifier (DID or handle). Identity key.
        handle:                  Display handle.
        followers:               Follower count reported by the provider.
        following:               Following count reported by the provider.
        degree_centrality:       Filled by annotate_nodes().
        betweenness_centrality:  Filled by annotate_nodes().
        pagerank:                Filled by annotate_nodes().
        cluster_id:              Community id ('cluster-N'), filled by annotate_nodes().
        tier:                    Orbit tier 0/1/2, filled by annotate_nodes().
        x, y:                    Layout coordinates. Carried for renderers,
                                 never computed here.
    """

    id: str
    handle: Optional[str] = None
    followers: Optional[int] = None
    following: Optional[int] = None
    degree_centrality: Optional[float] = None
    betweenness_centrality: Optional[float] = None
    pagerank: Optional[float] = None
    cluster_id: Optional[str] = None
    tier: Optional[int] = None
    x: Optional[float] = None
    y: Optional[float] = None

    @classmethod
    def from_dict(cls, record: dict[str, Any]) -> "GraphNode":
        """Build a node from a provider record, accepting camelCase keys."""
        if record.get("id") in (None, ""):
            raise ValueError(f"Node record has no 'id': {record!r}")
        fields = {}
        for key, value in record.items():
            name = _NODE_KEY_ALIASES.get(key, key)
            if name in cls.__dataclass_fields__:
                fields[name] = value
        fields["id"] = str(fields["id"])
        return cls(**fields)

    def to_dict(self) -> dict[str, Any]:
        """Plain dict of the set fields (None-valued fields omitted)."""
        return {k: v for k, v in asdict(self).items() if v is not None}


@dataclass
class GraphEdge:
    """
    A connection between two accounts.

    Fields:
        source:  Node id at one end.
        target:  Node id at the other end. source == target is a self-loop
                 and is ignored by every metric.
        weight:  Edge weight. Provided by the caller or computed by
                 weight_edges(); metrics that read it default to 1.0.
        type:    Free-form connection kind ('follow', 'mutual', ...).
    """

    source: str
    target: str
    weight: Optional[float] = None
    type: Optional[str] = None

    @property
    def is_self_loop(self) -> bool:
        return self.source == self.target

    @classmethod
    def from_dict(cls, record: dict[str, Any]) -> "GraphEdge":
        """Build an edge from a provider record."""
        source = record.get("source")
        target = record.get("target")
        if source in (None, "") or target in (None, ""):
            raise ValueError(f"Edge record needs 'source' and 'target': {record!r}")
        weight = record.get("weight")
        return cls(
            source=str(source),
            target=str(target),
            weight=float(weight) if weight is not None else None,
            type=record.get("type"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Plain dict of the set fields (None-valued fields omitted)."""
        return {k: v for k, v in asdict(self).items() if v is not None}
