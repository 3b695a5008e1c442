import random

import pytest

from contestkit.hld import ColoredPathTree, HeavyLightTree


def _random_tree(rng, n):
    return [(v, rng.randint(1, v - 1)) for v in range(2, n + 1)]


def _path(n, edges, u, v):
    adj = {x: [] for x in range(1, n + 1)}
    for a, b in edges:
        adj[a].append(b)
        adj[b].append(a)
    parent = {1: 0}
    depth = {1: 0}
    order = [1]
    for x in order:
        for y in adj[x]:
            if y not in parent:
                parent[y] = x
                depth[y] = depth[x] + 1
                order.append(y)
    left, right = [], []
    while u != v:
        if depth[u] >= depth[v]:
            left.append(u)
            u = parent[u]
        else:
            right.append(v)
            v = parent[v]
    return left + [u] + right[::-1]


def test_count_worked_example():
    tree = HeavyLightTree(4, [(1, 2), (2, 3), (4, 1)], [4, 2, 1, 3])
    assert tree.path_max(3, 4) == 4
    assert tree.path_max(3, 3) == 1
    assert tree.path_max(3, 2) == 2
    assert tree.path_max(2, 3) == 2
    assert tree.path_sum(3, 4) == 10
    assert tree.path_sum(2, 1) == 6
    tree.update(1, 5)
    assert tree.path_max(3, 4) == 5
    tree.update(3, 6)
    assert tree.path_max(3, 4) == 6
    assert tree.path_max(2, 4) == 5
    assert tree.path_sum(3, 4) == 16


def test_colored_worked_example():
    tree = ColoredPathTree(
        5, [(1, 2), (1, 3), (3, 4), (3, 5)], [3, 2, 1, 3, 5], [1, 3, 2, 3, 1]
    )
    assert tree.path_sum(1, 5) == 8
    tree.change_color(3, 1)
    assert tree.path_sum(1, 5) == 9
    tree.change_weight(3, 3)
    assert tree.path_sum(1, 5) == 11
    assert tree.path_max(2, 4) == 3


def test_invalid_trees_rejected():
    with pytest.raises(ValueError):
        HeavyLightTree(3, [(1, 2)], [1, 2, 3])
    with pytest.raises(ValueError):
        HeavyLightTree(4, [(1, 2), (2, 1), (3, 4)], [1, 2, 3, 4])
    with pytest.raises(ValueError):
        HeavyLightTree(2, [(1, 2)], [1])


def test_vertex_out_of_range():
    tree = HeavyLightTree(2, [(1, 2)], [1, 2])
    with pytest.raises(IndexError):
        tree.path_sum(1, 3)
    with pytest.raises(IndexError):
        tree.update(0, 5)


@pytest.mark.parametrize("seed", range(5))
def test_random_paths_match_walk(seed):
    rng = random.Random(seed)
    n = rng.randint(1, 25)
    edges = _random_tree(rng, n)
    weights = [rng.randint(-20, 20) for _ in range(n)]
    tree = HeavyLightTree(n, edges, weights)
    for _ in range(40):
        if rng.random() < 0.3:
            node, value = rng.randint(1, n), rng.randint(-20, 20)
            tree.update(node, value)
            weights[node - 1] = value
        u, v = rng.randint(1, n), rng.randint(1, n)
        values = [weights[x - 1] for x in _path(n, edges, u, v)]
        assert tree.path_sum(u, v) == sum(values)
        assert tree.path_max(u, v) == max(values)


@pytest.mark.parametrize("seed", range(5))
def test_random_colored_paths_match_walk(seed):
    rng = random.Random(100 + seed)
    n = rng.randint(1, 25)
    edges = _random_tree(rng, n)
    weights = [rng.randint(1, 30) for _ in range(n)]
    colors = [rng.randint(1, 3) for _ in range(n)]
    tree = ColoredPathTree(n, edges, weights, colors)
    for _ in range(40):
        roll = rng.random()
        node = rng.randint(1, n)
        if roll < 0.2:
            colors[node - 1] = rng.randint(1, 3)
            tree.change_color(node, colors[node - 1])
        elif roll < 0.4:
            weights[node - 1] = rng.randint(1, 30)
            tree.change_weight(node, weights[node - 1])
        u, v = rng.randint(1, n), rng.randint(1, n)
        same = [weights[x - 1] for x in _path(n, edges, u, v) if colors[x - 1] == colors[u - 1]]
        assert tree.path_sum(u, v) == sum(same)
        assert tree.path_max(u, v) == max(same)