"""Skew heaps: meldable heaps with amortised logarithmic operations."""

from __future__ import annotations

import math
from typing import Any, Callable, Optional

from cpkit.graph import Graph

Comparator = Callable[["SkewHeapNode", "SkewHeapNode"], bool]


def _key_le(x: "SkewHeapNode", y: "SkewHeapNode") -> bool:
    return x.key <= y.key


class SkewHeapNode:
    """A heap node; ``children[0]`` and ``children[1]`` are its subtrees."""

    def __init__(self, key: Any = None) -> None:
        self.key = key
        self.children: list[Optional[SkewHeapNode]] = [None, None]
        self.par: Optional[SkewHeapNode] = None


def merge(
    x: Optional[SkewHeapNode],
    y: Optional[SkewHeapNode],
    comp: Comparator = _key_le,
) -> Optional[SkewHeapNode]:
    """Meld two heaps; ``comp(a, b)`` is true when ``a`` belongs above ``b``."""
    if x is None:
        return y
    if y is None:
        return x
    if not comp(x, y):
        x, y = y, x
    root = x
    path = []
    cur = x
    while True:
        path.append(cur)
        right = cur.children[1]
        if right is None:
            cur.children[1] = y
            break
        if not comp(right, y):
            right, y = y, right
        cur.children[1] = right
        cur = right
    for node in path:
        node.children[1].par = node
        node.children[0], node.children[1] = node.children[1], node.children[0]
    return root


def find_root(node: Optional[SkewHeapNode]) -> Optional[SkewHeapNode]:
    if node is None:
        return None
    while node.par is not None:
        node = node.par
    return node


def pop(node: Optional[SkewHeapNode], comp: Comparator = _key_le) -> Optional[SkewHeapNode]:
    """Return the heap left after removing its root ``node``."""
    if node is None:
        return None
    left, right = node.children
    for child in (left, right):
        if child is not None:
            child.par = None
    return merge(left, right, comp)


def dijkstra_skew_heap(graph: Graph, source: int) -> tuple[list[float], list[int]]:
    """Shortest distances from ``source`` over non-negative costs.

    Uses a skew heap with in-place decrease-key. Returns ``(dist, pe)`` with
    ``math.inf`` for unreachable vertices.
    """
    n = graph.n
    key: list[float] = [0] * n
    par = [-1] * n
    left = [-1] * n
    right = [-1] * n

    def meld(x: int, y: int) -> int:
        if x == -1:
            return y
        if y == -1:
            return x
        if key[x] > key[y]:
            x, y = y, x
        root = x
        path = []
        cur = x
        while True:
            path.append(cur)
            r = right[cur]
            if r == -1:
                right[cur] = y
                break
            if key[r] > key[y]:
                r, y = y, r
            right[cur] = r
            cur = r
        for node in path:
            par[right[node]] = node
            left[node], right[node] = right[node], left[node]
        return root

    dist: list[float] = [math.inf] * n
    pe = [-1] * n
    dist[source] = 0
    root = source
    while root != -1:
        cur = root
        cost = key[cur]
        root = meld(left[cur], right[cur])
        if root != -1:
            par[root] = -1
        if dist[cur] != cost:
            continue
        for eid in graph.adj[cur]:
            if graph.is_ignore(eid):
                continue
            e = graph.edges[eid]
            to = e.frm ^ e.to ^ cur
            nd = dist[cur] + e.cost
            if dist[to] == math.inf:
                dist[to] = nd
                pe[to] = eid
                key[to] = nd
                root = meld(root, to)
            elif nd < dist[to]:
                dist[to] = nd
                pe[to] = eid
                key[to] = nd
                p = par[to]
                if p == -1 or key[p] <= nd:
                    continue
                if left[p] == to:
                    left[p] = -1
                else:
                    right[p] = -1
                par[to] = -1
                root = meld(root, to)
    return dist, pe