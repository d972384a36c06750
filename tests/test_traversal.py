from edgeprune.graph import Edge, Graph, Node
from edgeprune.traversal import VisitIndex, bfs, dfs, dfs_edges, is_path_restricted

# child of each depth-1 node in the tree fixture
CHILD = {1: 3, 2: 4}


def test_bfs_visits_in_level_order(tree_graph):
    order = list(bfs(tree_graph, 0))

    assert order[0] == 0
    assert set(order[1:3]) == {1, 2}
    # the queue keeps the order of the first level for the second one
    assert order[3] == CHILD[order[1]]
    assert order[4] == CHILD[order[2]]


def test_dfs_finishes_a_branch_before_the_next(tree_graph):
    order = list(dfs(tree_graph, 0))

    assert order[0] == 0
    assert set(order[1::2]) == {1, 2}
    assert order[2] == CHILD[order[1]]
    assert order[4] == CHILD[order[3]]


def test_dfs_edges_reports_parents(tree_graph):
    expected_parent = {0: 0, 1: 0, 2: 0, 3: 1, 4: 2}
    events = list(dfs_edges(tree_graph, 0))

    assert events[0] == Edge(0, 0)
    assert len(events) == 5
    for parent, node in events:
        assert parent == expected_parent[node]


def test_traversals_never_revisit_on_cycles(cyclic_graph):
    for walk in (bfs, dfs):
        order = list(walk(cyclic_graph, 0))
        assert sorted(order) == [0, 1, 2, 3, 4]


def test_shared_index_skips_visited_nodes(three_components):
    index = VisitIndex()
    first = list(bfs(three_components, 0, index))
    assert sorted(first) == [0, 1, 2, 3]

    # starting inside an already visited component yields nothing
    assert list(bfs(three_components, 2, index)) == []
    assert sorted(bfs(three_components, 4, index)) == [4, 5, 6]
    assert len(index) == 7


def test_visit_index():
    index = VisitIndex()
    index.visit(1)
    index.visit(3)
    assert index.visited(1)
    assert not index.visited(4)


def test_walks_are_lazy(tree_graph):
    index = VisitIndex()
    walk = bfs(tree_graph, 0, index)
    assert next(walk) == 0
    assert len(index) == 1


def test_is_path_restricted(cyclic_graph):
    # 1-3 is the only way to reach 3
    assert not is_path_restricted(cyclic_graph, 1, 3, (1, 3))
    assert not is_path_restricted(cyclic_graph, 3, 1, (3, 1))
    # 0-1 lies on the cycle 0-1-4-2-0
    assert is_path_restricted(cyclic_graph, 0, 1, (0, 1))
    assert is_path_restricted(cyclic_graph, 0, 3, (1, 4))
    assert not is_path_restricted(cyclic_graph, 0, 99, (0, 1))


def test_walks_skip_ids_missing_from_the_graph():
    g = Graph()
    g.add_node(Node(1, {0, 2}))
    g.add_node(Node(2, {1}))

    assert sorted(bfs(g, 1)) == [1, 2]
    assert list(dfs_edges(g, 1)) == [Edge(1, 1), Edge(1, 2)]
    assert not is_path_restricted(g, 2, 0, (1, 2))
