"""Monotone radix heap and Dijkstra's algorithm on top of it."""

from __future__ import annotations

import math
from typing import Any

from cpkit.graph import Graph


class RadixHeap:
    """A min-heap for non-negative integer keys that never go below the last pop."""

    def __init__(self) -> None:
        self._buckets: list[list[tuple[int, Any]]] = [[]]
        self._size = 0
        self._last = 0

    def __len__(self) -> int:
        return self._size

    def _place(self, key: int, value: Any) -> None:
        idx = (key ^ self._last).bit_length()
        while len(self._buckets) <= idx:
            self._buckets.append([])
        self._buckets[idx].append((key, value))

    def push(self, key: int, value: Any = None) -> None:
        if key < self._last:
            raise ValueError(f"key {key} is below the last extracted key {self._last}")
        self._place(key, value)
        self._size += 1

    def _refill(self) -> None:
        if not self._size:
            raise IndexError("heap is empty")
        if self._buckets[0]:
            return
        idx = next(i for i, b in enumerate(self._buckets) if b)
        moved, self._buckets[idx] = self._buckets[idx], []
        self._last = min(k for k, _ in moved)
        for key, value in moved:
            self._place(key, value)

    def pop(self) -> tuple[int, Any]:
        """Remove and return a ``(key, value)`` pair with the smallest key."""
        self._refill()
        self._size -= 1
        return self._buckets[0].pop()

    def top(self) -> tuple[int, Any]:
        """Return a ``(key, value)`` pair with the smallest key."""
        self._refill()
        return self._buckets[0][-1]


def dijkstra_radix_heap(graph: Graph, source: int) -> tuple[list[float], list[int]]:
    """Shortest distances from ``source`` over non-negative integer costs.

    Returns ``(dist, pe)``: unreachable vertices have ``math.inf`` distance,
    and ``pe[v]`` is the id of the last edge on a shortest path to ``v``.
    """
    dist: list[float] = [math.inf] * graph.n
    pe = [-1] * graph.n
    heap = RadixHeap()
    dist[source] = 0
    heap.push(0, source)
    while heap:
        d, u = heap.pop()
        if dist[u] != d:
            continue
        for eid in graph.adj[u]:
            if graph.is_ignore(eid):
                continue
            e = graph.edges[eid]
            to = e.frm ^ e.to ^ u
            nd = d + e.cost
            if nd < dist[to]:
                dist[to] = nd
                pe[to] = eid
                heap.push(nd, to)
    return dist, pe