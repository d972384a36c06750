# report.py

from typing import Any, Dict, Iterable

import networkx as nx
import numpy as np
import pandas as pd

from .graph import Graph
from .logger import get_logger

log = get_logger(__name__)

# ---------------------------------------------------------------------
# Graph statistics
# ---------------------------------------------------------------------

def graph_stats(graph: Graph) -> Dict[str, Any]:
    """Node/edge counts, connectivity, density and average degree."""
    G = graph.to_networkx()
    n = G.number_of_nodes()
    degrees = np.fromiter((len(node.neighbours) for node in graph.nodes.values()), dtype=float, count=n)
    if n == 0:
        connected = True
    elif G.is_directed():
        connected = nx.is_weakly_connected(G)
    else:
        connected = nx.is_connected(G)
    return {
        "nodes": n,
        "edges": G.number_of_edges(),
        "directed": G.is_directed(),
        "connected": connected,
        "density": nx.density(G) if n > 1 else 0.0,
        "average_degree": float(degrees.mean()) if n else 0.0,
    }


def report_graph_stats(graph: Graph, name: str = "Graph") -> None:
    """Logs basic graph statistics."""
    s = graph_stats(graph)
    log.info(f"{name} has {s['nodes']:,} nodes and {s['edges']:,} edges")
    log.info(f"Is connected? {s['connected']}")
    log.info(f"Density: {s['density']:.6f}")
    log.info(f"Average degree: {s['average_degree']:.2f}")


# ---------------------------------------------------------------------
# Per-component summary
# ---------------------------------------------------------------------

SUMMARY_COLUMNS = ["component", "nodes", "edges_before", "tree_edges", "eligible", "removed", "edges_after"]


def component_summary(results: Iterable[Any]) -> pd.DataFrame:
    """One row per ``ComponentResult``, ordered by component number."""
    rows = [
        {
            "component": r.index,
            "nodes": r.nodes,
            "edges_before": r.edges_before,
            "tree_edges": len(r.tree),
            "eligible": r.eligible,
            "removed": len(r.removed),
            "edges_after": r.graph.undirected_edge_count(),
        }
        for r in results
    ]
    df = pd.DataFrame(rows, columns=SUMMARY_COLUMNS)
    return df.sort_values("component").reset_index(drop=True)
