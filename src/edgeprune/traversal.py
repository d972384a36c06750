"""
Generic graph walks.

Both walks are lazy sequences of visit events and know nothing about why
they are run. The caller owns the visited-state (a ``VisitIndex``), so one
index can be shared by several walks started from different roots.
"""

from __future__ import annotations

from collections import deque
from typing import Iterator, Optional, Set, Tuple

from .graph import Edge, Graph


class VisitIndex:
    """Visited-markers for traversals."""

    def __init__(self) -> None:
        self._seen: Set[int] = set()

    def visit(self, node_id: int) -> None:
        self._seen.add(node_id)

    def visited(self, node_id: int) -> bool:
        return node_id in self._seen

    def __len__(self) -> int:
        return len(self._seen)


def bfs(graph: Graph, root: int, index: Optional[VisitIndex] = None) -> Iterator[int]:
    """
    Breadth-first walk from ``root``, yielding node ids in level order.

    Neighbours are queued even if already visited; the visited check happens
    when a node is dequeued. Neighbour ids without a Node in ``graph`` are
    never followed.
    """
    index = index if index is not None else VisitIndex()
    todo = deque([root])
    while todo:
        node = todo.popleft()
        if index.visited(node):
            continue
        index.visit(node)
        yield node
        todo.extend(ngh for ngh in graph.neighbours(node) if ngh in graph)


def dfs_edges(graph: Graph, root: int, index: Optional[VisitIndex] = None) -> Iterator[Edge]:
    """
    Depth-first walk from ``root`` yielding ``(parent, node)`` for every newly
    visited node.

    The first event is ``(root, root)``; callers that collect parent edges
    must skip it.
    """
    index = index if index is not None else VisitIndex()
    todo = [(root, root)]
    while todo:
        node, parent = todo.pop()
        if index.visited(node):
            continue
        index.visit(node)
        yield Edge(parent, node)
        for ngh in graph.neighbours(node):
            if ngh in graph and not index.visited(ngh):
                todo.append((ngh, node))


def dfs(graph: Graph, root: int, index: Optional[VisitIndex] = None) -> Iterator[int]:
    """Depth-first visiting order (node ids only)."""
    for _, node in dfs_edges(graph, root, index):
        yield node


def is_path_restricted(graph: Graph, source: int, target: int, restriction: Tuple[int, int]) -> bool:
    """
    Is there a path from ``source`` to ``target`` that does not use the
    undirected edge ``restriction`` (in either direction)?
    """
    if source not in graph or target not in graph:
        return False
    a, b = restriction
    index = VisitIndex()
    todo = deque([source])
    while todo:
        node = todo.popleft()
        if node == target:
            return True
        if index.visited(node):
            continue
        index.visit(node)
        for ngh in graph.neighbours(node):
            if ngh not in graph:
                continue
            if (node == a and ngh == b) or (node == b and ngh == a):
                continue
            todo.append(ngh)
    return False
