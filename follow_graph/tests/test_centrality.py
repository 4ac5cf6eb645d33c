"""
follow_graph/tests/test_centrality.py — Tests for degree and betweenness centrality.

Tests verify:
- Degenerate inputs (empty, single node, two nodes) give zeros / 1.0.
- Known shapes: 4-cycle, star, path.
- Degree centrality lies in [0, 1] and matches networkx.
- Betweenness is exactly twice networkx's normalized undirected value.
- Isolated nodes and disconnected components are handled.
"""

import networkx as nx
import pytest

from follow_graph.graph.models import GraphEdge, GraphNode
from follow_graph.metrics.centrality import betweenness_centrality, degree_centrality


# ── Helpers ───────────────────────────────────────────────────────────────────

def make_graph(ids, pairs):
    return [GraphNode(i) for i in ids], [GraphEdge(s, t) for s, t in pairs]


# ── Degree centrality ─────────────────────────────────────────────────────────

def test_degree_empty_graph():
    assert degree_centrality([], []) == {}


def test_degree_single_node_is_zero():
    assert degree_centrality([GraphNode("only")], []) == {"only": 0.0}


def test_degree_two_nodes_one_edge():
    nodes, edges = make_graph(["a", "b"], [("a", "b")])
    assert degree_centrality(nodes, edges) == {"a": 1.0, "b": 1.0}


def test_degree_four_cycle_all_two_thirds(four_cycle):
    nodes, edges = four_cycle
    centrality = degree_centrality(nodes, edges)
    for value in centrality.values():
        assert value == pytest.approx(2 / 3)


def test_degree_star(star_graph):
    nodes, edges = star_graph
    k = len(nodes) - 1
    centrality = degree_centrality(nodes, edges)
    assert centrality["hub"] == pytest.approx(1.0)
    for node in nodes[1:]:
        assert centrality[node.id] == pytest.approx(1 / k)


def test_degree_ignores_self_loops_and_duplicates():
    nodes, edges = make_graph(["a", "b", "c"], [("a", "b"), ("b", "a"), ("a", "a")])
    centrality = degree_centrality(nodes, edges)
    assert centrality == {"a": 0.5, "b": 0.5, "c": 0.0}


def test_degree_keys_follow_node_order(synthetic_follow):
    nodes, edges = synthetic_follow
    assert list(degree_centrality(nodes, edges)) == [n.id for n in nodes]


def test_degree_bounds_and_networkx_agreement(synthetic_follow, to_networkx):
    nodes, edges = synthetic_follow
    centrality = degree_centrality(nodes, edges)
    expected = nx.degree_centrality(to_networkx(nodes, edges))
    for node_id, value in centrality.items():
        assert 0.0 <= value <= 1.0
        assert value == pytest.approx(expected[node_id], abs=1e-9)


# ── Betweenness centrality ───────────────────────────────────────────────────

def test_betweenness_empty_graph():
    assert betweenness_centrality([], []) == {}


def test_betweenness_single_node_is_zero():
    assert betweenness_centrality([GraphNode("only")], []) == {"only": 0.0}


def test_betweenness_two_nodes_is_zero():
    nodes, edges = make_graph(["a", "b"], [("a", "b")])
    assert betweenness_centrality(nodes, edges) == {"a": 0.0, "b": 0.0}


def test_betweenness_four_cycle_equal(four_cycle):
    """Each node carries half of one opposite pair in both directions → 1/3."""
    nodes, edges = four_cycle
    centrality = betweenness_centrality(nodes, edges)
    values = list(centrality.values())
    for value in values:
        assert value == pytest.approx(values[0])
    assert values[0] == pytest.approx(1 / 3)


def test_betweenness_star_hub_and_leaves(star_graph):
    """The hub lies on every leaf-to-leaf path; scaling puts it at 2.0."""
    nodes, edges = star_graph
    centrality = betweenness_centrality(nodes, edges)
    assert centrality["hub"] == pytest.approx(2.0)
    for node in nodes[1:]:
        assert centrality[node.id] == pytest.approx(0.0)


def test_betweenness_path_middle_node():
    nodes, edges = make_graph(["a", "b", "c"], [("a", "b"), ("b", "c")])
    centrality = betweenness_centrality(nodes, edges)
    assert centrality == pytest.approx({"a": 0.0, "b": 2.0, "c": 0.0})


def test_betweenness_bridge_endpoints_dominate(bridged_triangles):
    nodes, edges = bridged_triangles
    centrality = betweenness_centrality(nodes, edges)
    for other in ("A", "B", "E", "F"):
        assert centrality["C"] > centrality[other]
        assert centrality["D"] > centrality[other]
    assert centrality["C"] == pytest.approx(centrality["D"])


def test_betweenness_disconnected_components():
    nodes, edges = make_graph(
        ["a1", "a2", "a3", "b1", "b2", "b3", "lonely"],
        [("a1", "a2"), ("a2", "a3"), ("b1", "b2"), ("b2", "b3")],
    )
    centrality = betweenness_centrality(nodes, edges)
    assert centrality["a2"] == pytest.approx(centrality["b2"])
    assert centrality["a2"] > 0
    assert centrality["lonely"] == 0.0
    assert centrality["a1"] == 0.0


def test_betweenness_unknown_endpoint_not_reported():
    nodes = [GraphNode("a"), GraphNode("b"), GraphNode("c")]
    edges = [GraphEdge("a", "ghost"), GraphEdge("ghost", "b"), GraphEdge("b", "c")]
    centrality = betweenness_centrality(nodes, edges)
    assert set(centrality) == {"a", "b", "c"}


def test_betweenness_twice_networkx(synthetic_follow, to_networkx):
    nodes, edges = synthetic_follow
    centrality = betweenness_centrality(nodes, edges)
    expected = nx.betweenness_centrality(to_networkx(nodes, edges), normalized=True)
    for node_id, value in centrality.items():
        assert value >= 0.0
        assert value == pytest.approx(2 * expected[node_id], abs=1e-9)
