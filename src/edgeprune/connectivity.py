# connectivity.py
from __future__ import annotations

from typing import List

from .graph import Graph
from .logger import get_logger
from .traversal import VisitIndex, bfs

log = get_logger(__name__)


def is_connected(graph: Graph) -> bool:
    """True if one walk from an arbitrary node reaches every node (always True for <= 1 node)."""
    root = graph.any_node()
    if root is None:
        return True
    reached = sum(1 for _ in bfs(graph, root))
    return reached == graph.number_of_nodes()


def connected_graphs(graph: Graph) -> List[Graph]:
    """
    Split ``graph`` into its connected components.

    Each component is a new Graph holding copies of the visited nodes; their
    neighbour sets carry the induced edges along. Components are returned in
    the order they were discovered and partition the node set.
    """
    result: List[Graph] = []
    index = VisitIndex()

    for node_id in graph:
        if index.visited(node_id):
            continue
        component = Graph()
        for reached in bfs(graph, node_id, index):
            node = graph.nodes.get(reached)
            if node is not None:
                component.add_node(node.copy())
        result.append(component)

    log.debug("Found %d connected component(s) in %d nodes", len(result), graph.number_of_nodes())
    return result


def number_connected_components(graph: Graph) -> int:
    index = VisitIndex()
    count = 0
    for node_id in graph:
        if not index.visited(node_id):
            count += 1
            for _ in bfs(graph, node_id, index):
                pass
    return count
