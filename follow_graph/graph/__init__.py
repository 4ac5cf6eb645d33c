"""
follow_graph.graph — Graph records and adjacency construction.

Modules:
    models     — GraphNode / GraphEdge dataclasses.
    adjacency  — Undirected dict-of-sets adjacency map and lookups.
    builder    — Node and edge lists from provider records or DataFrames.

No graph library is involved: the adjacency map is a plain dict of sets.
"""
