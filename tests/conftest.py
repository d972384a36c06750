"""Shared graph fixtures. Adjacency lists are indexed by node id."""

import pytest

from edgeprune.graph import Graph


def mkgraph(adjacency):
    g = Graph()
    for u, targets in enumerate(adjacency):
        for v in targets:
            g.add_edge(u, v)
    return g


# a tree: 0 -> {1, 2}, 1 -> 3, 2 -> 4
TRAVERSAL_TYPE = [
    [1, 2],  # 0
    [0, 3],  # 1
    [0, 4],  # 2
    [1],     # 3
    [2],     # 4
]

CYCLIC = [
    [1, 2],     # 0
    [0, 3, 4],  # 1
    [0, 4],     # 2
    [1],        # 3
    [2, 1],     # 4
]

THREE_CONNECTED_GRAPHS = [
    [1, 2],     # 0
    [0, 3, 2],  # 1
    [0, 1],     # 2
    [1],        # 3
    [5, 6],     # 4
    [4, 6],     # 5
    [5, 4],     # 6
    [8],        # 7
    [7],        # 8
]

CONNECTED_GRAPH = [
    [1, 2, 8],        # 0
    [0, 3, 2],        # 1
    [0, 1, 7, 8, 4],  # 2
    [1],              # 3
    [5, 6, 2],        # 4
    [4, 6],           # 5
    [5, 4],           # 6
    [8, 2],           # 7
    [7, 2, 0],        # 8
]


@pytest.fixture
def tree_graph():
    return mkgraph(TRAVERSAL_TYPE)


@pytest.fixture
def cyclic_graph():
    return mkgraph(CYCLIC)


@pytest.fixture
def three_components():
    return mkgraph(THREE_CONNECTED_GRAPHS)


@pytest.fixture
def connected_graph():
    return mkgraph(CONNECTED_GRAPH)
