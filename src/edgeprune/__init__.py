"""
edgeprune
=========

Connectivity-preserving edge pruning for unweighted graphs.

This package provides:
- An in-memory graph model (integer node ids, neighbour-id sets)
- Breadth-first / depth-first traversals over caller-owned visit indexes
- Connectivity checks and connected-component splitting
- Spanning trees (one per component)
- Random removal of non-tree edges via reservoir sampling
- Edge-list CSV I/O, an autoincrement id index and a CLI pipeline
"""

__version__ = "0.1.0"

# Expose core API
from .graph import Edge, Graph, Node, canonical_edge
from .traversal import VisitIndex, bfs, dfs, dfs_edges, is_path_restricted
from .connectivity import connected_graphs, is_connected, number_connected_components
from .spanning_tree import SpanningTree, build_spanning_tree, spanning_forest
from .edge_pruner import eligible_edges, remove_random_edges, reservoir_sample
from .config import PruneConfig
from .edgelist import EdgeRecord, EdgeRecordError, EdgeRecordReader, EdgeRecordWriter, read_graph, write_edges
from .mapping import IdMapping, remap_files
from .egonets import egonets_to_csv, read_egonet

__all__ = [
    "Edge",
    "Graph",
    "Node",
    "canonical_edge",
    "VisitIndex",
    "bfs",
    "dfs",
    "dfs_edges",
    "is_path_restricted",
    "connected_graphs",
    "is_connected",
    "number_connected_components",
    "SpanningTree",
    "build_spanning_tree",
    "spanning_forest",
    "eligible_edges",
    "remove_random_edges",
    "reservoir_sample",
    "PruneConfig",
    "EdgeRecord",
    "EdgeRecordError",
    "EdgeRecordReader",
    "EdgeRecordWriter",
    "read_graph",
    "write_edges",
    "IdMapping",
    "remap_files",
    "egonets_to_csv",
    "read_egonet",
]
