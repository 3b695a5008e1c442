# contestkit

A library of classic algorithms and data structures from competitive
programming. It is plain Python with no third-party dependencies: every
function takes ordinary Python values (integers, lists, tuples of edges)
and returns results or raises exceptions.

## What is inside

**Number theory** (`contestkit.numtheory`, `contestkit.combinatorics`,
`contestkit.discrete_log`)
- `gcd`, `ext_gcd`, `mod_inverse`, `solve_linear_congruence`, `pow_mod`
- `is_prime` (trial division), `primes_up_to` (linear sieve),
  `phi_table`, `euler_phi`, `visible_lattice_points`
- `primitive_root`, `two_squares` (Fermat descent for primes `p ≡ 1 (mod 4)`)
- `frog_meeting_time`, `round_position`
- `binomial_mod` (Lucas' theorem), `heap_orderings`
- `discrete_log` (baby-step giant-step) and `discrete_log_general` for
  moduli that are not coprime to the base

**Numerics** (`contestkit.fft`, `contestkit.linalg`, `contestkit.simpson`)
- `fft` and `multiply` for polynomial multiplication
- `gauss_solve`, `sphere_center`, `ModMatrix` with fast powers and a
  determinant modulo a prime, `lcg_term`
- `adaptive_simpson` integration, `parabola_length`, `cable_sag`

**Strings** (`contestkit.kmp`, `contestkit.manacher`,
`contestkit.min_rotation`, `contestkit.trie`, `contestkit.aho_corasick`,
`contestkit.suffix_array`, `contestkit.suffix_automaton`,
`contestkit.expression`)
- `failure_table`, `optimized_failure_table`, `count_occurrences`
- `longest_palindrome_length` (Manacher), `minimal_rotation`
- `PrefixTrie`, `AhoCorasick`, `suffix_array`, `lcp_array`,
  `SuffixAutomaton`, `min_rotation_start`
- `evaluate` and `evaluate_truncated`, an infix evaluator with single-letter
  variables whose intermediate results are reduced modulo 10000

**Data structures** (`contestkit.binary_heap`, `contestkit.fenwick`,
`contestkit.segment_tree`, `contestkit.sparse_table`,
`contestkit.leftist_heap`, `contestkit.treap`,
`contestkit.size_balanced_tree`, `contestkit.lca`, `contestkit.hld`)
- `MinHeap` and `min_merge_cost`; `LeftistHeap` and `monkey_duels`
- `Treap` and `IslandNetwork`; `SizeBalancedTree` and `SalaryLedger`
- `FenwickTree`, `RangeFenwick`, `ToggleGrid`
- `SumSegmentTree`, `RangeAddSegmentTree`, `MaxSegmentTree`, `SparseTable`
- `WeightedTree` (binary-lifting LCA and distances),
  `HeavyLightTree`, `ColoredPathTree`

**Graphs** (`contestkit.traversal`, `contestkit.shortest_paths`,
`contestkit.flow`, `contestkit.kth_shortest`, `contestkit.scc`,
`contestkit.connectivity`, `contestkit.manhattan_mst`,
`contestkit.tree_divide`)
- `is_bipartite`, `topological_order`, `has_topological_order`
- `dijkstra`, `spfa` (raises `NegativeCycleError`), `floyd_warshall`
- `FlowNetwork` with Dinic max flow and min-cost flow, `max_flow`,
  `bipartite_matching`, `konig`, `expand_network`, `GomoryHuCuts`
- `kth_shortest_path` (A* over reverse distances)
- `strongly_connected_components`, `best_route_cash`
- `articulation_points`, `bridges`, `biconnected_components`,
  `component_representatives`
- `candidate_edges` and `mst_edge_for_components` for Manhattan minimum
  spanning trees, `count_close_pairs` by centroid decomposition

## A few examples

```python
from contestkit.numtheory import gcd, pow_mod, primes_up_to
from contestkit.fft import multiply

gcd(12, 18)              # 6
pow_mod(2, 10, 1000)     # 24
primes_up_to(20)         # [2, 3, 5, 7, 11, 13, 17, 19]
multiply([1, 2], [3, 4]) # [3, 10, 8]
```

```python
from contestkit.kmp import count_occurrences
from contestkit.aho_corasick import AhoCorasick

count_occurrences("aa", "aaaa")                      # 3
AhoCorasick(["she", "he", "hers"]).count_matches("ushers")  # 3
```

```python
from contestkit.shortest_paths import dijkstra, NegativeCycleError, spfa

edges = [(1, 2, 4), (2, 3, 1), (1, 3, 7)]
dijkstra(3, edges, 1)    # {1: 0, 2: 4, 3: 5}

try:
    spfa(2, [(1, 2, -1)], 1)   # edges are undirected, so this is a negative cycle
except NegativeCycleError:
    ...
```

```python
from contestkit.flow import FlowNetwork

net = FlowNetwork(4)
net.add_edge(1, 2, 10)
net.add_edge(2, 3, 5)
net.max_flow(1, 3)       # 5
```

Vertices in the graph functions are numbered the way each function's
docstring describes. Errors, such as a negative cycle or a query on an
empty structure, are raised as exceptions.

## What it does not do

- There is no command-line program: nothing reads problem input from
  standard input or prints answers. Call the functions from Python.
- Eulerian circuits and paths are not covered.