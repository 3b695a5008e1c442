import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from contestkit.connectivity import (
    articulation_points,
    biconnected_components,
    bridges,
    component_representatives,
)

SAMPLE = [(1, 2), (1, 3), (2, 3), (3, 4), (4, 5), (4, 6), (5, 6)]


def _count_components(n, edges, skip_vertex=None):
    parent = list(range(n + 1))

    def find(x):
        while parent[x] != x:
            parent[x] = parent[parent[x]]
            x = parent[x]
        return x

    for u, v in edges:
        if skip_vertex in (u, v):
            continue
        parent[find(u)] = find(v)
    return len({find(v) for v in range(1, n + 1) if v != skip_vertex})


@st.composite
def graphs(draw):
    n = draw(st.integers(2, 7))
    pairs = draw(
        st.lists(
            st.tuples(st.integers(1, n), st.integers(1, n)).filter(lambda e: e[0] != e[1]),
            max_size=10,
        )
    )
    return n, pairs


def test_sample_representatives():
    assert component_representatives(6, SAMPLE) == [1, 1, 1, 4, 5, 5, 5]


def test_sample_cut_points_and_bridges():
    assert articulation_points(6, SAMPLE) == [3, 4]
    assert bridges(6, SAMPLE) == [(3, 4)]


def test_sample_block_count():
    assert len(biconnected_components(6, SAMPLE)) == 3


def test_no_cut_point_when_graph_is_a_cycle():
    cycle = [(1, 2), (2, 3), (3, 4), (4, 1)]
    assert articulation_points(4, cycle) == []
    assert bridges(4, cycle) == []
    assert biconnected_components(4, cycle) == [[1, 2, 3, 4]]


def test_parallel_edges_are_not_bridges():
    assert bridges(2, [(1, 2), (1, 2)]) == []


def test_out_of_range_edge_rejected():
    with pytest.raises(ValueError):
        bridges(2, [(1, 3)])


@settings(max_examples=150)
@given(graphs())
def test_articulation_points_match_removal(graph):
    n, edges = graph
    before = _count_components(n, edges)
    expected = [v for v in range(1, n + 1) if _count_components(n, edges, skip_vertex=v) > before]
    assert articulation_points(n, edges) == expected


@settings(max_examples=150)
@given(graphs())
def test_bridges_match_removal(graph):
    n, edges = graph
    before = _count_components(n, edges)
    expected = set()
    for i, (u, v) in enumerate(edges):
        rest = edges[:i] + edges[i + 1:]
        if _count_components(n, rest) > before:
            expected.add((min(u, v), max(u, v)))
    assert set(bridges(n, edges)) == expected


@settings(max_examples=150)
@given(graphs())
def test_blocks_partition_edges(graph):
    n, edges = graph
    blocks = biconnected_components(n, edges)
    numbers = sorted(x for block in blocks for x in block)
    assert numbers == list(range(1, len(edges) + 1))
    singles = {edges[b[0] - 1] for b in blocks if len(b) == 1}
    assert {(min(u, v), max(u, v)) for u, v in singles} == set(bridges(n, edges))


@settings(max_examples=100)
@given(graphs())
def test_representative_is_smallest_in_block(graph):
    n, edges = graph
    reps = component_representatives(n, edges)
    for block in biconnected_components(n, edges):
        assert {reps[x - 1] for x in block} == {min(block)}