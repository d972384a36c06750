"""
Spanning trees of unweighted graphs.

All edges weigh the same, so any spanning tree is a minimum one; the tree
is read off a single parent-tracking depth-first walk.
"""

from __future__ import annotations

from typing import FrozenSet, Iterable, Iterator, List, Set, Tuple

from .graph import Edge, Graph, canonical_edge
from .logger import get_logger
from .traversal import VisitIndex, dfs_edges

log = get_logger(__name__)


class SpanningTree:
    """
    Immutable set of undirected edges, stored in canonical (min, max) form.

    Membership does not depend on argument order: ``tree.has(3, 4)`` and
    ``tree.has(4, 3)`` agree.
    """

    __slots__ = ("_edges",)

    def __init__(self, edges: Iterable[Tuple[int, int]] = ()) -> None:
        self._edges: FrozenSet[Edge] = frozenset(canonical_edge(u, v) for u, v in edges)

    def has(self, u: int, v: int) -> bool:
        return canonical_edge(u, v) in self._edges

    def __contains__(self, edge: object) -> bool:
        try:
            u, v = edge  # type: ignore[misc]
        except (TypeError, ValueError):
            return False
        return self.has(u, v)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self._edges)

    def __len__(self) -> int:
        return len(self._edges)

    def __bool__(self) -> bool:
        return bool(self._edges)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SpanningTree):
            return NotImplemented
        return self._edges == other._edges

    def __hash__(self) -> int:
        return hash(self._edges)

    def edges(self) -> List[Edge]:
        return sorted(self._edges)

    def nodes(self) -> Set[int]:
        out: Set[int] = set()
        for u, v in self._edges:
            out.add(u)
            out.add(v)
        return out

    def __repr__(self) -> str:
        return f"SpanningTree({len(self._edges)} edges)"


def build_spanning_tree(graph: Graph) -> SpanningTree:
    """
    Spanning tree of the component containing an arbitrary root.

    Returns an empty tree for an empty graph. On a disconnected graph only
    the root's component is covered; use ``spanning_forest`` for all of them.
    """
    root = graph.any_node()
    if root is None:
        return SpanningTree()

    tree_edges = [(parent, child) for parent, child in dfs_edges(graph, root) if parent != child]
    tree = SpanningTree(tree_edges)
    log.debug("Spanning tree from root %d: %d edges", root, len(tree))
    return tree


def spanning_forest(graph: Graph) -> List[SpanningTree]:
    """One spanning tree per connected component, sharing a single visit index."""
    index = VisitIndex()
    forest: List[SpanningTree] = []
    for root in graph:
        if index.visited(root):
            continue
        forest.append(SpanningTree(
            (parent, child) for parent, child in dfs_edges(graph, root, index) if parent != child
        ))
    return forest
