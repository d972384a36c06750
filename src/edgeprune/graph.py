"""
edgeprune.graph
===============
In-memory node/edge storage for unweighted integer-labelled graphs.

Nodes are plain records (an id plus the set of neighbour ids), never live
references to other nodes, so copying a node into another graph is a cheap
value copy. An undirected edge u-v is stored as the two directed edges
(u, v) and (v, u).

Public classes
--------------
Node, Edge, Graph
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, FrozenSet, Iterable, Iterator, List, Optional, Set, Tuple, NamedTuple

import networkx as nx

if TYPE_CHECKING:
    from .spanning_tree import SpanningTree


class Edge(NamedTuple):
    """A directed edge (u -> v). Equality is structural."""
    u: int
    v: int

    def reversed(self) -> "Edge":
        return Edge(self.v, self.u)

    def canonical(self) -> "Edge":
        return canonical_edge(self.u, self.v)


def canonical_edge(u: int, v: int) -> Edge:
    """Direction-independent form of u-v: smaller id first."""
    return Edge(u, v) if u <= v else Edge(v, u)


@dataclass
class Node:
    id: int
    neighbours: Set[int] = field(default_factory=set)

    def copy(self) -> "Node":
        return Node(self.id, set(self.neighbours))


class Graph:
    """
    Mapping of node id -> Node.

    Every mutation goes through ``fetch`` so a neighbour id always has a
    Node of its own in the same graph. Queries about absent nodes or edges
    answer ``False`` / empty instead of raising.
    """

    def __init__(self) -> None:
        self.nodes: Dict[int, Node] = {}

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_edges(cls, edges: Iterable[Tuple[int, int]], directed: bool = False) -> "Graph":
        g = cls()
        for u, v in edges:
            if directed:
                g.add_directed_edge(u, v)
            else:
                g.add_edge(u, v)
        return g

    def fetch(self, node_id: int) -> Node:
        """Return the node with ``node_id``, creating it if needed."""
        node = self.nodes.get(node_id)
        if node is None:
            node = Node(node_id)
            self.nodes[node_id] = node
        return node

    def add_node(self, node: Node) -> None:
        """Store ``node`` as-is (replacing any node with the same id)."""
        self.nodes[node.id] = node

    def add_directed_edge(self, u: int, v: int) -> None:
        source = self.fetch(u)
        self.fetch(v)
        source.neighbours.add(v)

    def add_edge(self, u: int, v: int) -> None:
        """Add the undirected edge u-v. Idempotent."""
        self.add_directed_edge(u, v)
        self.add_directed_edge(v, u)

    def remove_edge(self, u: int, v: int) -> bool:
        """Remove u-v in both directions. Returns whether anything was removed."""
        removed = False
        for a, b in ((u, v), (v, u)):
            node = self.nodes.get(a)
            if node is not None and b in node.neighbours:
                node.neighbours.discard(b)
                removed = True
        return removed

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.nodes

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[int]:
        return iter(self.nodes)

    def neighbours(self, node_id: int) -> FrozenSet[int]:
        node = self.nodes.get(node_id)
        if node is None:
            return frozenset()
        return frozenset(node.neighbours)

    def has_edge(self, u: int, v: int) -> bool:
        node = self.nodes.get(u)
        return node is not None and v in node.neighbours

    def number_of_nodes(self) -> int:
        return len(self.nodes)

    def number_of_edges(self) -> int:
        """Number of stored directed edges."""
        return sum(len(node.neighbours) for node in self.nodes.values())

    def undirected_edge_count(self) -> int:
        """Number of distinct unordered pairs among the stored edges."""
        return len({canonical_edge(u, v) for u, v in self.edge_list()})

    def edge_list(self) -> List[Edge]:
        """Every stored directed edge exactly once (both directions for undirected edges)."""
        return [Edge(nid, to) for nid, node in self.nodes.items() for to in node.neighbours]

    def is_undirected(self) -> bool:
        for nid, node in self.nodes.items():
            for to in node.neighbours:
                if not self.has_edge(to, nid):
                    return False
        return True

    def any_node(self) -> Optional[int]:
        """An arbitrary node id, or None for an empty graph."""
        return next(iter(self.nodes), None)

    # ------------------------------------------------------------------
    # Analysis shortcuts
    # ------------------------------------------------------------------

    def is_connected(self) -> bool:
        from .connectivity import is_connected
        return is_connected(self)

    def connected_graphs(self) -> List["Graph"]:
        from .connectivity import connected_graphs
        return connected_graphs(self)

    def mst(self) -> "SpanningTree":
        from .spanning_tree import build_spanning_tree
        return build_spanning_tree(self)

    def remove_random_edges(
        self,
        n: int,
        protected: "SpanningTree",
        rng: Optional[random.Random] = None,
    ) -> List[Edge]:
        from .edge_pruner import remove_random_edges
        return remove_random_edges(self, n, protected, rng=rng)

    # ------------------------------------------------------------------
    # Interop
    # ------------------------------------------------------------------

    def copy(self) -> "Graph":
        g = Graph()
        for node in self.nodes.values():
            g.add_node(node.copy())
        return g

    def to_networkx(self) -> nx.Graph:
        """Export to NetworkX: ``nx.Graph`` when undirected, else ``nx.DiGraph``."""
        G = nx.Graph() if self.is_undirected() else nx.DiGraph()
        G.add_nodes_from(self.nodes)
        G.add_edges_from(self.edge_list())
        return G

    def __repr__(self) -> str:
        return f"Graph(nodes={self.number_of_nodes()}, directed_edges={self.number_of_edges()})"
