import math
from itertools import combinations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from contestkit.flow import (
    FlowNetwork,
    GomoryHuCuts,
    bipartite_matching,
    expand_network,
    konig,
    max_flow,
)


def test_drainage_sample():
    edges = [(1, 2, 40), (1, 4, 20), (2, 4, 20), (2, 3, 30), (3, 4, 10)]
    assert max_flow(4, edges, 1, 4) == 50


def _brute_min_cut(n, edges):
    best = math.inf
    middle = list(range(2, n))
    for r in range(len(middle) + 1):
        for extra in combinations(middle, r):
            side = {1, *extra}
            value = sum(c for u, v, c in edges if u in side and v not in side)
            best = min(best, value)
    return best


@settings(max_examples=60, deadline=None)
@given(
    st.integers(2, 5).flatmap(
        lambda n: st.tuples(
            st.just(n),
            st.lists(st.tuples(st.integers(1, n), st.integers(1, n), st.integers(0, 9)), max_size=10),
        )
    )
)
def test_max_flow_equals_min_cut(data):
    n, edges = data
    assert max_flow(n, edges, 1, n) == _brute_min_cut(n, edges)


def test_no_path_gives_zero_flow():
    assert max_flow(3, [(2, 3, 5)], 1, 3) == 0


def test_add_edge_validation():
    net = FlowNetwork(3)
    with pytest.raises(ValueError):
        net.add_edge(0, 3, 1)
    with pytest.raises(ValueError):
        net.add_edge(0, 1, -1)


def test_source_equals_sink_rejected():
    net = FlowNetwork(2)
    net.add_edge(0, 1, 1)
    with pytest.raises(ValueError):
        net.max_flow(0, 0)


def test_min_cost_flow_uses_both_parallel_arcs():
    net = FlowNetwork(2)
    net.add_edge(0, 1, 1, 1)
    net.add_edge(0, 1, 1, 5)
    flow, cost = net.min_cost_flow(0, 1)
    assert flow == 1 + 1
    assert cost == 1 + 5


def test_min_cost_flow_reaches_max_flow():
    arcs = [(0, 1, 3, 2), (0, 2, 2, 1), (1, 3, 2, 1), (2, 3, 3, 4), (1, 2, 1, 1)]
    plain, priced = FlowNetwork(4), FlowNetwork(4)
    for u, v, c, w in arcs:
        plain.add_edge(u, v, c)
        priced.add_edge(u, v, c, w)
    flow, cost = priced.min_cost_flow(0, 3)
    assert flow == plain.max_flow(0, 3)
    assert cost >= flow


def test_bipartite_matching_complete():
    pairs = [(x, y) for x in (1, 2) for y in (1, 2, 3)]
    size, matches = bipartite_matching(2, 3, pairs)
    assert size == min(2, 3)
    assert None not in matches
    assert len(set(matches)) == len(matches)
    assert all((x, y) in pairs for x, y in enumerate(matches, start=1))


def test_bipartite_matching_empty():
    assert bipartite_matching(2, 2, []) == (0, [None, None])


def test_konig_even_cycle():
    n = 6
    edges = [(i, i % n + 1) for i in range(1, n + 1)]
    cover, independent = konig(n, edges)
    assert cover == n // 2
    assert cover + independent == n


def test_konig_rejects_odd_cycle():
    with pytest.raises(ValueError):
        konig(3, [(1, 2), (2, 3), (3, 1)])


def test_expand_network_sample():
    edges = [
        (1, 2, 5, 8), (2, 5, 9, 9), (5, 1, 6, 2), (5, 1, 1, 8),
        (1, 2, 8, 7), (2, 5, 4, 9), (1, 2, 1, 1), (1, 4, 2, 1),
    ]
    assert expand_network(5, edges, 2) == (13, 19)


def test_expand_network_without_extra_flow():
    edges = [(1, 2, 4, 3), (2, 3, 2, 5), (1, 3, 1, 7)]
    flow, cost = expand_network(3, edges, 0)
    assert flow == max_flow(3, [(u, v, c) for u, v, c, _ in edges], 1, 3)
    assert cost == 0


def test_gomory_hu_without_edges():
    assert GomoryHuCuts(5, []).count_pairs_at_most(0) == math.comb(5, 2)


def _pair_cut(n, edges, s, t):
    net = FlowNetwork(n + 1)
    for u, v, c in edges:
        net.add_edge(u, v, c)
        net.add_edge(v, u, c)
    return net.max_flow(s, t)


def test_gomory_hu_matches_pairwise_cuts():
    n = 5
    edges = [(1, 2, 3), (2, 3, 1), (3, 4, 2), (1, 4, 1), (2, 4, 2), (4, 5, 1)]
    cuts = GomoryHuCuts(n, edges)
    pair_values = [_pair_cut(n, edges, i, j) for i, j in combinations(range(1, n + 1), 2)]
    for limit in range(0, 10):
        assert cuts.count_pairs_at_most(limit) == sum(v <= limit for v in pair_values)