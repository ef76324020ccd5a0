# cpkit

Classic algorithms and data structures for contest-style programming, as a
plain Python library.

## Installation

```
pip install .
```

The only runtime dependency is `numpy`, used by the floating-point FFT
multipliers in `cpkit.fft`.

To run the test suite:

```
pip install ".[test]"
pytest
```

## Contents

### Graphs

- `cpkit.graph`: `Edge` (`frm`, `to`, `cost`), `Graph`, `UndirectedGraph` and
  `DirectedGraph`. Edges are stored by index, so parallel edges stay distinct.
  `add_edge` returns the edge id. `other(frm, edge_id)` gives the opposite
  endpoint. An optional predicate (`set_ignore`, `clear_ignore`, `is_ignore`)
  hides edges from the algorithms below.
- `cpkit.bipartite.build_bipartite(graph)`: gives a side, 0 or 1, for every
  vertex, or `None` if the graph is not bipartite.
- `cpkit.euler_tour.EulerTour`: `dfs(graph, root)` appends the tour to
  `euler`. Each tour ends with `-1`. `loc[u]` is the first position of `u`.
- `cpkit.eulerian.find_eulerian_path(graph)`: returns `(start, edge_ids)`,
  `(0, [])` for a graph with no edges, or `None` when no Eulerian path exists.
- `cpkit.centroid_tree.CentroidTree`: centroid decomposition.
  `build_tree(graph, root, apply)` fills `par` and `pe` and calls
  `apply(centroid, entry)` for each centroid before removing it.
- `cpkit.span_forest`:
  - `DfsSpanForest` finds cut points (`find_cutpoint`), bridges
    (`find_bridge`) and back-edge cycles (`find_cycle`). It also builds the
    bridge tree (`build_bridge_tree`) and the block-cut tree
    (`build_block_cut_tree`). Both return `(ids, count)`.
  - `BfsSpanForest` builds breadth-first spanning forests.

### Heaps and shortest paths

- `cpkit.radix_heap`: `RadixHeap`, a monotone min-heap for non-negative
  integer keys, with `push`, `pop`, `top` and `len`.
  `dijkstra_radix_heap(graph, source)` returns `(dist, pe)`.
- `cpkit.skew_heap`: `SkewHeapNode`, `merge`, `pop` and `find_root`.
  `dijkstra_skew_heap(graph, source)` returns `(dist, pe)`.

In both Dijkstra functions, vertices that cannot be reached have distance
`math.inf`.

### Range structures

- `cpkit.sparse_table`:
  - `SparseTable(values, combine)` has `query(lo, hi)`, which answers an
    idempotent combine over `[lo, hi)` in O(1).
  - `SparseTable` also has `fold(lo, hi)` and `blocks`/`reverse_blocks`,
    which work over O(log n) disjoint `Block`s.
  - `DisjointSparseTable(values, combine).query(lo, hi)` answers any
    associative combine over the inclusive range `[lo, hi]`.
- `cpkit.indexed_set.IndexedSet`: a set over `range(n)` on a 64-ary bitset
  tree, with `insert`, `erase`, `in`, `find_next`, `find_prev` and
  `iter_range`.
- `cpkit.line_container.LineContainer`: the convex hull trick.
  `add_line(a, b)` adds a line and `query(x)` evaluates at `x`, for the
  maximum or, with `maximum=False`, the minimum.
- `cpkit.link_cut_tree`: `LinkCutNode` with splay-tree operations.
  - Forest operations: `expose`, `link`, `link_root`, `cut`, `cut_root`,
    `cut_from_parent`, `make_lct_root`, `find_lct_root`, `same_comp`,
    `find_lca`, `is_ancestor`.
  - Implicit-sequence operations: `split`, `split_implicit`, `merge`,
    `insert`, `erase`, `find_implicit`, `find_pos`, `next_node`,
    `previous_node`, `size`, `build`, `dfs_implicit`.

### Polynomials

`cpkit.fft` provides these multipliers:

- `naive_multiply`
- `fft_complex_multiply`: integer results, rounded.
- `fft_complex_double_multiply`: float results.
- `fft_complex_mod_multiply(a, b, mod)`: exact modulo any `mod`, from split
  floating-point FFTs.
- `fft_numeric_multiply(a, b, mod)`: number-theoretic transform modulo a
  prime.

Matching power-series inverses use Newton iteration:

- `naive_inverse(a, mod)`
- `fft_complex_inverse(a)`: the constant term must be 1 or -1.
- `fft_complex_double_inverse(a)`
- `fft_complex_mod_inverse(a, mod)`
- `fft_numeric_inverse(a, mod)`

`primitive_root(mod)` returns the smallest primitive root of a prime.

### Strings

- `cpkit.manacher.Manacher`: palindrome radii for every centre, with
  `radius(index, odd)` and `is_palindrome(lo, hi)`.
- `cpkit.prefix_function`: `prefix_function`, `find_pos`, `count_prefix`,
  `compress_prefix` and `PrefixAutomaton` (`next_state(state, ch)`).
- `cpkit.prefix_tree.PrefixTree`: a trie that keeps prefix and end counts,
  with `insert`, `erase`, `find` and `count_prefix`.
- `cpkit.suffix_array`:
  - `suffix_array(s)` sorts suffixes by prefix doubling. `s` is a string or a
    sequence of non-negative integers.
  - `BurrowsWheeler(s, sa).find(t)` returns the range of suffix-array
    positions that match `t`.
  - `SuffixLcpArray(s, sa, want_rmq)` provides `find_lcp` and
    `count_distinct`.

## Example

```python
from cpkit.graph import UndirectedGraph
from cpkit.radix_heap import dijkstra_radix_heap
from cpkit.suffix_array import suffix_array

g = UndirectedGraph(3)
g.add_edge(0, 1, 4)
g.add_edge(1, 2, 1)
g.add_edge(0, 2, 7)
dist, parent_edge = dijkstra_radix_heap(g, 0)   # dist == [0, 4, 5]

sa = suffix_array([0, 1, 0])                     # [2, 0, 1]
```

## What it does not do

This is a library only. It has no command-line program and no fast
console input/output helpers. You read input and print results yourself.