"""
follow_graph/graph/builder.py — Node and edge lists from provider records.

The account graph provider hands over follower/following relationships as
plain records: JSON-like dicts, or pandas DataFrames when the lists were
exported in bulk. This module turns either form into the GraphNode /
GraphEdge lists every metric function takes.

Node records may use camelCase keys ('clusterId', 'degreeCentrality') as
produced by upstream JSON payloads; unknown keys are ignored.
"""

import logging
from collections.abc import Iterable
from typing import Any

import pandas as pd

from follow_graph.graph.models import GraphEdge, GraphNode

logger = logging.getLogger(__name__)


def nodes_from_records(records: Iterable[dict[str, Any]]) -> list[GraphNode]:
    """
    Convert node records to GraphNode objects.

    Args:
        records: Iterable of dicts. Each must carry a non-empty 'id'.

    Returns:
        nodes: GraphNode list in record order.

    Raises:
        ValueError: If a record has no 'id'.
    """
    nodes = [GraphNode.from_dict(record) for record in records]
    logger.debug("Built %d nodes from records.", len(nodes))
    return nodes


def edges_from_records(records: Iterable[dict[str, Any]]) -> list[GraphEdge]:
    """
    Convert edge records to GraphEdge objects.

    Args:
        records: Iterable of dicts with 'source' and 'target', and optionally
                 'weight' and 'type'.

    Returns:
        edges: GraphEdge list in record order. Self-loops are kept here;
               metrics drop them.

    Raises:
        ValueError: If a record lacks 'source' or 'target'.
    """
    edges = [GraphEdge.from_dict(record) for record in records]
    logger.debug("Built %d edges from records.", len(edges))
    return edges


def _frame_records(df: pd.DataFrame) -> list[dict[str, Any]]:
    # NaN in optional columns means "not provided".
    return [
        {k: (None if pd.isna(v) else v) for k, v in row.items()}
        for row in df.to_dict(orient="records")
    ]


def graph_from_frames(
    nodes_df: pd.DataFrame,
    edges_df: pd.DataFrame,
) -> tuple[list[GraphNode], list[GraphEdge]]:
    """
    Build node and edge lists from two DataFrames.

    Args:
        nodes_df: One row per account. Must have an 'id' column; 'handle',
                  'followers' and 'following' are picked up when present.
        edges_df: One row per connection. Must have 'source' and 'target'
                  columns; 'weight' and 'type' are optional.

    Returns:
        (nodes, edges) ready for the metric functions.

    Raises:
        ValueError: If a required column is missing or a row lacks an id.

    Notes:
        - Ids are coerced to str, so numeric account ids from CSV exports
          match between the two frames.
        - Integer counts that pandas upcast to float because of missing
          values are converted back to int.
    """
    if "id" not in nodes_df.columns:
        raise ValueError("nodes_df must have an 'id' column.")
    missing = {"source", "target"} - set(edges_df.columns)
    if missing:
        raise ValueError(f"edges_df is missing column(s): {sorted(missing)}")

    node_records = _frame_records(nodes_df)
    for record in node_records:
        for count_field in ("followers", "following"):
            value = record.get(count_field)
            if value is not None:
                record[count_field] = int(value)

    nodes = nodes_from_records(node_records)
    edges = edges_from_records(_frame_records(edges_df))

    logger.info(
        "Loaded follow graph from frames: %d nodes, %d edges.",
        len(nodes),
        len(edges),
    )
    return nodes, edges
