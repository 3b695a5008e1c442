import pytest

from contestkit.kth_shortest import kth_shortest_path
from contestkit.shortest_paths import dijkstra

UNDIRECTED = [(1, 2, 4), (2, 3, 1), (1, 3, 7), (3, 4, 2), (2, 4, 6), (4, 5, 3)]


def _both_ways(edges):
    return [(u, v, w) for u, v, w in edges] + [(v, u, w) for u, v, w in edges]


@pytest.mark.parametrize("target", [2, 3, 4, 5])
def test_first_path_is_shortest(target):
    expected = dijkstra(5, UNDIRECTED, 1)[target]
    assert kth_shortest_path(5, _both_ways(UNDIRECTED), 1, target, 1) == expected


def test_lengths_do_not_decrease_with_k():
    lengths = [kth_shortest_path(5, _both_ways(UNDIRECTED), 1, 5, k) for k in range(1, 8)]
    assert None not in lengths
    assert lengths == sorted(lengths)


def test_same_vertex_skips_empty_walk():
    edges = [(1, 2, 3), (2, 1, 4)]
    assert kth_shortest_path(2, edges, 1, 1, 1) == 3 + 4
    assert kth_shortest_path(2, edges, 1, 1, 2) == 2 * (3 + 4)


def test_unreachable_target():
    assert kth_shortest_path(3, [(1, 2, 1)], 1, 3, 1) is None


def test_acyclic_graph_runs_out_of_paths():
    edges = [(1, 2, 1), (2, 3, 1), (1, 3, 5)]
    first = kth_shortest_path(3, edges, 1, 3, 1)
    second = kth_shortest_path(3, edges, 1, 3, 2)
    assert first <= second
    assert kth_shortest_path(3, edges, 1, 3, 3) is None


def test_invalid_arguments():
    with pytest.raises(ValueError):
        kth_shortest_path(2, [(1, 2, 1)], 1, 2, 0)
    with pytest.raises(ValueError):
        kth_shortest_path(2, [(1, 2, -1)], 1, 2, 1)
    with pytest.raises(ValueError):
        kth_shortest_path(2, [(1, 2, 1)], 1, 3, 1)