"""Algorithms and data structures for contest-style programming."""

__version__ = "0.1.0"

__all__ = [
    "graph",
    "bipartite",
    "euler_tour",
    "eulerian",
    "centroid_tree",
    "radix_heap",
    "skew_heap",
    "span_forest",
    "line_container",
    "indexed_set",
    "sparse_table",
    "fft",
    "link_cut_tree",
    "manacher",
    "prefix_tree",
    "prefix_function",
    "suffix_array",
]