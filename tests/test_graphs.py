import copy

import pytest

from algonotes.graphs import (
    Node,
    bfs_of_graph,
    can_finish,
    clone_graph,
    dfs_of_graph,
    find_center,
    has_cycle_bfs,
    has_cycle_dfs,
    is_bipartite,
    max_star_sum,
    num_islands,
    oranges_rotting,
    topo_sort_dfs,
    topo_sort_kahn,
    valid_path,
    valid_path as _valid_path,
)


def _build(adjacency):
    """Build nodes labelled 1..n from a 1-based adjacency list."""
    nodes = [Node(i + 1) for i in range(len(adjacency))]
    for node, neighbours in zip(nodes, adjacency):
        node.neighbors = [nodes[j - 1] for j in neighbours]
    return nodes


def _collect(start):
    seen = {}
    pending = [start]
    while pending:
        node = pending.pop()
        if id(node) in seen:
            continue
        seen[id(node)] = node
        pending.extend(node.neighbors)
    return list(seen.values())


def _shape(start):
    return sorted((n.val, [m.val for m in n.neighbors]) for n in _collect(start))


def _is_topological(order, adj):
    position = {v: i for i, v in enumerate(order)}
    return all(position[u] < position[v] for u, targets in enumerate(adj) for v in targets)


def test_clone_graph_copies_structure_without_sharing_nodes():
    nodes = _build([[2, 4], [1, 3], [2, 4], [1, 3]])
    cloned = clone_graph(nodes[0])
    assert _shape(cloned) == _shape(nodes[0])
    original_ids = {id(n) for n in nodes}
    assert all(id(n) not in original_ids for n in _collect(cloned))


def test_clone_graph_none_and_single_node():
    assert clone_graph(None) is None
    lone = Node(1)
    cloned = clone_graph(lone)
    assert cloned is not lone and cloned.val == 1 and cloned.neighbors == []


def test_clone_graph_self_loop():
    node = Node(7)
    node.neighbors.append(node)
    cloned = clone_graph(node)
    assert cloned.neighbors[0] is cloned


@pytest.mark.parametrize(
    "n, prerequisites, expected",
    [
        (2, [[1, 0]], True),
        (2, [[1, 0], [0, 1]], False),
        (3, [], True),
        (1, [[0, 0]], False),
    ],
)
def test_can_finish(n, prerequisites, expected):
    assert can_finish(n, prerequisites) is expected


def test_find_center():
    assert find_center([[1, 2], [2, 3], [4, 2]]) == 2
    assert find_center([[1, 2], [5, 1], [1, 3], [1, 4]]) == 1


def test_find_center_without_edges():
    assert find_center([]) == 0


def test_valid_path():
    assert valid_path(3, [[0, 1], [1, 2], [2, 0]], 0, 2) is True
    assert valid_path(6, [[0, 1], [0, 2], [3, 5], [5, 4], [4, 3]], 0, 5) is False


def test_valid_path_to_itself():
    assert _valid_path(1, [], 0, 0) is True


def test_is_bipartite():
    assert is_bipartite([[1, 3], [0, 2], [1, 3], [0, 2]]) is True
    assert is_bipartite([[1, 2, 3], [0, 2], [0, 1, 3], [0, 2]]) is False
    assert is_bipartite([]) is True


def test_max_star_sum_source_cases():
    vals = [1, 2, 3, 4, 10, -10, -20]
    edges = [[0, 1], [1, 2], [1, 3], [3, 4], [3, 5], [3, 6]]
    assert max_star_sum(vals, edges, 2) == 16
    assert max_star_sum([-5], [], 0) == -5


def test_max_star_sum_is_at_least_each_value():
    vals = [5, -3, 2]
    edges = [[0, 1], [1, 2]]
    assert max_star_sum(vals, edges, 2) >= max(vals)


def test_max_star_sum_empty_raises():
    with pytest.raises(ValueError):
        max_star_sum([], [], 1)


def test_num_islands():
    one = [
        ["1", "1", "1", "1", "0"],
        ["1", "1", "0", "1", "0"],
        ["1", "1", "0", "0", "0"],
        ["0", "0", "0", "0", "0"],
    ]
    three = [
        ["1", "1", "0", "0", "0"],
        ["1", "1", "0", "0", "0"],
        ["0", "0", "1", "0", "0"],
        ["0", "0", "0", "1", "1"],
    ]
    before = copy.deepcopy(three)
    assert num_islands(one) == 1
    assert num_islands(three) == 3
    assert three == before
    assert num_islands([]) == 0


def test_oranges_rotting():
    grid = [[2, 1, 1], [1, 1, 0], [0, 1, 1]]
    before = copy.deepcopy(grid)
    assert oranges_rotting(grid) == 4
    assert grid == before
    assert oranges_rotting([[2, 1, 1], [0, 1, 1], [1, 0, 1]]) == -1
    assert oranges_rotting([[0, 2]]) == 0


def test_bfs_and_dfs_order():
    adj = [[1, 2], [0, 3], [0, 4], [1], [2]]
    assert bfs_of_graph(adj) == [0, 1, 2, 3, 4]
    assert dfs_of_graph(adj) == [0, 1, 3, 2, 4]


def test_traversals_cover_only_reachable_vertices():
    adj = [[1], [0], [3], [2]]
    assert sorted(bfs_of_graph(adj)) == sorted(dfs_of_graph(adj)) == [0, 1]
    assert bfs_of_graph([]) == dfs_of_graph([]) == []


@pytest.mark.parametrize(
    "adj, expected",
    [
        ([[1], [0, 2], [1]], False),
        ([[1, 2], [0, 2], [0, 1]], True),
        ([[1], [0], [3, 4], [2, 4], [2, 3]], True),
        ([[], [], []], False),
    ],
)
def test_cycle_detection_agrees(adj, expected):
    assert has_cycle_bfs(adj) is expected
    assert has_cycle_dfs(adj) is expected


@pytest.mark.parametrize(
    "adj",
    [
        [[], [], [3], [1], [0, 1], [0, 2]],
        [[1, 2], [3], [3], []],
        [[], [0], [1]],
    ],
)
def test_topological_orders_are_valid(adj):
    for order in (topo_sort_dfs(adj), topo_sort_kahn(adj)):
        assert sorted(order) == list(range(len(adj)))
        assert _is_topological(order, adj)


def test_kahn_leaves_out_cycle():
    adj = [[1], [2], [1]]
    assert topo_sort_kahn(adj) == [0]