from itertools import product

from hypothesis import given
from hypothesis import strategies as st

from contestkit.traversal import has_topological_order, is_bipartite, topological_order


@st.composite
def graphs(draw):
    n = draw(st.integers(1, 7))
    edges = draw(
        st.lists(st.tuples(st.integers(1, n), st.integers(1, n)), max_size=12)
    )
    return n, edges


@given(graphs())
def test_bipartite_matches_colouring_search(graph):
    n, edges = graph
    colourable = any(
        all(col[u - 1] != col[v - 1] for u, v in edges)
        for col in product((0, 1), repeat=n)
    )
    assert is_bipartite(n, edges) == colourable


def test_odd_and_even_cycles():
    assert is_bipartite(3, [(1, 2), (2, 3), (3, 1)]) is False
    assert is_bipartite(4, [(1, 2), (2, 3), (3, 4), (4, 1)]) is True


@st.composite
def dags(draw):
    n = draw(st.integers(1, 8))
    perm = draw(st.permutations(range(1, n + 1)))
    pairs = [(i, j) for i in range(n) for j in range(i + 1, n)]
    chosen = draw(st.lists(st.sampled_from(pairs), max_size=15)) if pairs else []
    return n, [(perm[i], perm[j]) for i, j in chosen]


@given(dags())
def test_order_respects_edges(dag):
    n, edges = dag
    order = topological_order(n, edges)
    assert sorted(order) == list(range(1, n + 1))
    position = {v: i for i, v in enumerate(order)}
    assert all(position[u] < position[v] for u, v in edges)
    assert has_topological_order(n, edges)


@given(dags())
def test_back_edge_creates_cycle(dag):
    n, edges = dag
    if edges:
        u, v = edges[0]
        cyclic = edges + [(v, u)]
        assert topological_order(n, cyclic) is None
        assert not has_topological_order(n, cyclic)
    else:
        assert topological_order(n, [(1, 1)]) is None


def test_kahn_takes_sources_in_order():
    assert topological_order(3, [(3, 1)]) == [2, 3, 1]