"""
follow_graph/tests/conftest.py — Shared pytest fixtures for the follow_graph test suite.

Hand-built topologies cover the documented known shapes; the synthetic
follow graph (SEED=41) gives every property test a deterministic, realistic
baseline.

Fixtures:
    bridged_triangles  — Two triangles {A,B,C} and {D,E,F} joined by C ── D.
    four_cycle         — A ── B ── C ── D ── A.
    star_graph         — 'hub' with 6 leaves.
    synthetic_follow   — ~150-account follow graph with community structure.
    to_networkx        — Callable converting (nodes, edges) to nx.Graph for
                         use as a reference oracle.
"""

import random

import networkx as nx
import numpy as np
import pytest

from follow_graph.graph.models import GraphEdge, GraphNode

SEED = 41

STAR_LEAVES = 6

# ── Synthetic data constants ─────────────────────────────────────────────────

N_GROUPS = 5
ACCOUNTS_PER_GROUP = 30
INTRA_FOLLOWS = (2, 7)
CROSS_FOLLOW_PROB = 0.15
N_ISOLATED = 4


def make_graph(
    ids: list[str],
    pairs: list[tuple[str, str]],
) -> tuple[list[GraphNode], list[GraphEdge]]:
    """Node and edge lists from ids and (source, target) pairs."""
    nodes = [GraphNode(id=i) for i in ids]
    edges = [GraphEdge(source=s, target=t) for s, t in pairs]
    return nodes, edges


def _build_synthetic_follow_graph() -> tuple[list[GraphNode], list[GraphEdge]]:
    """
    Construct a deterministic follow graph (SEED=41).

    Structure:
    - 5 interest groups of 30 accounts; within a group, each account follows
      a few others, biased towards popular accounts (preferential attachment).
    - Occasional follows across groups.
    - A handful of isolated accounts with no connections.
    - Some mutual follows (both directions present) and a few self-follows,
      which the engine must tolerate.
    """
    random.seed(SEED)
    np.random.seed(SEED)

    nodes: list[GraphNode] = []
    edges: list[GraphEdge] = []
    groups: list[list[str]] = []

    for g in range(N_GROUPS):
        members = [f"g{g}-user-{i:02d}" for i in range(ACCOUNTS_PER_GROUP)]
        groups.append(members)
        for handle in members:
            nodes.append(
                GraphNode(
                    id=f"did:plc:{handle}",
                    handle=f"{handle}.bsky.social",
                    followers=int(np.random.lognormal(mean=4.0, sigma=1.5)),
                    following=int(np.random.lognormal(mean=4.5, sigma=1.0)),
                )
            )

    for members in groups:
        ids = [f"did:plc:{m}" for m in members]
        popularity = np.ones(len(ids))
        for src_index, src in enumerate(ids):
            n_follows = random.randint(*INTRA_FOLLOWS)
            weights = popularity.copy()
            weights[src_index] = 0.0
            weights /= weights.sum()
            targets = np.random.choice(len(ids), size=n_follows, replace=False, p=weights)
            for t in targets:
                edges.append(GraphEdge(source=src, target=ids[t], type="follow"))
                popularity[t] += 1.0
                if random.random() < 0.3:
                    edges.append(GraphEdge(source=ids[t], target=src, type="mutual"))

    all_ids = [node.id for node in nodes]
    for src in all_ids:
        if random.random() < CROSS_FOLLOW_PROB:
            tgt = random.choice(all_ids)
            edges.append(GraphEdge(source=src, target=tgt, type="follow"))

    for _ in range(3):
        loop_id = random.choice(all_ids)
        edges.append(GraphEdge(source=loop_id, target=loop_id, type="follow"))

    for i in range(N_ISOLATED):
        nodes.append(GraphNode(id=f"did:plc:lurker-{i}", handle=f"lurker-{i}.bsky.social"))

    return nodes, edges


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def bridged_triangles() -> tuple[list[GraphNode], list[GraphEdge]]:
    return make_graph(
        ["A", "B", "C", "D", "E", "F"],
        [
            ("A", "B"), ("B", "C"), ("A", "C"),
            ("D", "E"), ("E", "F"), ("D", "F"),
            ("C", "D"),
        ],
    )


@pytest.fixture
def four_cycle() -> tuple[list[GraphNode], list[GraphEdge]]:
    return make_graph(
        ["A", "B", "C", "D"],
        [("A", "B"), ("B", "C"), ("C", "D"), ("D", "A")],
    )


@pytest.fixture
def star_graph() -> tuple[list[GraphNode], list[GraphEdge]]:
    leaves = [f"leaf-{i}" for i in range(STAR_LEAVES)]
    return make_graph(["hub"] + leaves, [("hub", leaf) for leaf in leaves])


@pytest.fixture(scope="session")
def synthetic_follow() -> tuple[list[GraphNode], list[GraphEdge]]:
    """
    Deterministic synthetic follow graph (SEED=41).

    Session-scoped: built once and reused. Tests must not mutate it.
    """
    return _build_synthetic_follow_graph()


@pytest.fixture(scope="session")
def to_networkx():
    """Convert (nodes, edges) to an undirected nx.Graph without self-loops."""

    def convert(nodes: list[GraphNode], edges: list[GraphEdge]) -> nx.Graph:
        G = nx.Graph()
        G.add_nodes_from(node.id for node in nodes)
        G.add_edges_from(
            (e.source, e.target) for e in edges if e.source != e.target
        )
        return G

    return convert
