"""Depth-first and breadth-first spanning forests with bridge and cut analysis."""

from __future__ import annotations

from typing import Callable, Iterable, Optional, Union

from cpkit.graph import Graph

Start = Union[None, int, Iterable[int]]


class DfsSpanForest:
    """Depth-first spanning forest.

    ``par``/``pe`` give the tree parent and the edge to it (-1 at roots),
    ``order`` the visiting order, ``idx``/``end`` the position of a vertex and
    the last position of its subtree in ``order``, ``sz`` subtree sizes,
    ``root`` the tree root, ``depth`` the depth, and ``min_depth`` the smallest
    depth reachable from the subtree using one back edge.
    """

    def __init__(self, n: int = 0) -> None:
        self.clear()
        if n:
            self.init(n)

    def init(self, n: int) -> None:
        self.par = [-1] * n
        self.pe = [-1] * n
        self.order: list[int] = []
        self.idx = [-1] * n
        self.end = [-1] * n
        self.sz = [0] * n
        self.root = [-1] * n
        self.depth = [-1] * n
        self.min_depth = [-1] * n

    def clear(self) -> None:
        self.par: list[int] = []
        self.pe: list[int] = []
        self.order = []
        self.idx: list[int] = []
        self.end: list[int] = []
        self.sz: list[int] = []
        self.root: list[int] = []
        self.depth: list[int] = []
        self.min_depth: list[int] = []

    def _enter(self, v: int) -> None:
        self.idx[v] = len(self.order)
        self.order.append(v)
        self.sz[v] = 1
        self.min_depth[v] = self.depth[v]

    def _dfs_from(self, graph: Graph, s: int) -> None:
        self.depth[s] = 0
        self.root[s] = s
        self.pe[s] = -1
        self.par[s] = -1
        self._enter(s)
        stack = [(s, iter(graph.adj[s]))]
        while stack:
            v, edges = stack[-1]
            for eid in edges:
                if eid == self.pe[v] or graph.is_ignore(eid):
                    continue
                to = graph.other(v, eid)
                if self.root[to] == self.root[v]:
                    self.min_depth[v] = min(self.min_depth[v], self.depth[to])
                    continue
                self.depth[to] = self.depth[v] + 1
                self.pe[to] = eid
                self.par[to] = v
                self.root[to] = self.root[v] if self.root[v] != -1 else to
                self._enter(to)
                stack.append((to, iter(graph.adj[to])))
                break
            else:
                self.end[v] = len(self.order) - 1
                stack.pop()
                if stack:
                    p = stack[-1][0]
                    self.sz[p] += self.sz[v]
                    self.min_depth[p] = min(self.min_depth[p], self.min_depth[v])

    def dfs(self, graph: Graph, start: Start = None, clear_order: bool = False) -> None:
        """Grow the forest from ``start``: one vertex, several, or all unvisited."""
        fresh = not self.pe
        if fresh:
            self.init(graph.n)
        if start is None:
            for v in range(graph.n):
                if self.depth[v] == -1:
                    self._dfs_from(graph, v)
        elif isinstance(start, int):
            if not fresh and clear_order:
                self.order.clear()
            self._dfs_from(graph, start)
        else:
            for v in start:
                if self.depth[v] == -1:
                    self._dfs_from(graph, v)

    def is_back_edge(self, graph: Graph, edge_id: int, u: int) -> bool:
        v = graph.other(u, edge_id)
        return edge_id != self.pe[u] and self.is_ancestor(v, u)

    def is_span_edge(self, graph: Graph, edge_id: int, u: int) -> bool:
        return edge_id == self.pe[u] and graph.other(u, edge_id) == self.par[u]

    def is_ancestor(self, u: int, v: int) -> bool:
        """True if ``u`` is an ancestor of (or equal to) ``v``."""
        return (
            self.root[u] == self.root[v]
            and self.idx[u] <= self.idx[v]
            and self.end[v] <= self.end[u]
        )

    def find_cutpoint(self, graph: Graph) -> list[bool]:
        is_cut = [False] * graph.n
        children = [0] * graph.n
        for i in range(graph.n):
            p = self.par[i]
            if p != -1:
                children[p] += 1
                if self.min_depth[i] >= self.depth[p]:
                    is_cut[p] = True
        for i in range(graph.n):
            if self.par[i] == -1 and children[i] < 2:
                is_cut[i] = False
        return is_cut

    def find_bridge(self, graph: Graph) -> list[bool]:
        is_bridge = [False] * len(graph.edges)
        for i in range(graph.n):
            if self.par[i] != -1 and self.min_depth[i] == self.depth[i]:
                is_bridge[self.pe[i]] = True
        return is_bridge

    def find_cycle(self, graph: Graph, callback: Callable[[int, list[int]], bool]) -> None:
        """Call ``callback(top, edge_ids)`` for each back-edge cycle; stop on a false result."""
        for u in self.order:
            for eid in graph.adj[u]:
                if eid == self.pe[u]:
                    continue
                v = graph.other(u, eid)
                if not self.is_ancestor(v, u):
                    continue
                path = []
                us = u
                while us != v:
                    path.append(self.pe[us])
                    us = self.par[us]
                path.reverse()
                path.append(eid)
                if not callback(v, path):
                    return

    def build_bridge_tree(self, graph: Graph) -> tuple[list[int], int]:
        """Return ``(component of each vertex, component count)`` with bridges between components."""
        comp = [0] * graph.n
        cnt = 0
        for i in self.order:
            if self.par[i] == -1 or self.min_depth[i] == self.depth[i]:
                comp[i] = cnt
                cnt += 1
            else:
                comp[i] = comp[self.par[i]]
        return comp, cnt

    def build_block_cut_tree(self, graph: Graph) -> tuple[list[int], int]:
        """Return ``(block of each edge, block count)``; ignored edges get -1."""
        comp = [0] * graph.n
        cnt = 0
        for i in self.order:
            p = self.par[i]
            if p == -1:
                comp[i] = -1
            elif self.min_depth[i] >= self.depth[p]:
                comp[i] = cnt
                cnt += 1
            else:
                comp[i] = comp[p]
        res = [-1] * len(graph.edges)
        for i, e in enumerate(graph.edges):
            if graph.is_ignore(i):
                continue
            deeper = e.frm if self.depth[e.frm] > self.depth[e.to] else e.to
            res[i] = comp[deeper]
        return res, cnt


class BfsSpanForest:
    """Breadth-first spanning forest with ``par``, ``pe``, ``order``, ``idx``, ``root``, ``depth``.

    Each search start appears in ``order`` both when queued and when expanded.
    """

    def __init__(self, n: int = 0) -> None:
        self.clear()
        if n:
            self.init(n)

    def init(self, n: int) -> None:
        self.par = [-1] * n
        self.pe = [-1] * n
        self.order: list[int] = []
        self.idx = [-1] * n
        self.root = [-1] * n
        self.depth = [-1] * n

    def clear(self) -> None:
        self.par: list[int] = []
        self.pe: list[int] = []
        self.order = []
        self.idx: list[int] = []
        self.root: list[int] = []
        self.depth: list[int] = []

    def _run(self, graph: Graph, roots: Iterable[int], skip_seen: bool) -> None:
        queue = []
        for s in roots:
            if skip_seen and self.depth[s] != -1:
                continue
            self.depth[s] = 0
            self.root[s] = s
            self.par[s] = self.pe[s] = -1
            queue.append(s)
            self.order.append(s)
        for u in queue:
            self.idx[u] = len(self.order)
            self.order.append(u)
            for eid in graph.adj[u]:
                if graph.is_ignore(eid):
                    continue
                v = graph.other(u, eid)
                if self.depth[v] != -1:
                    continue
                self.depth[v] = self.depth[u] + 1
                self.par[v] = u
                self.pe[v] = eid
                self.root[v] = self.root[u] if self.root[u] != -1 else v
                queue.append(v)

    def bfs(self, graph: Graph, start: Start = None, clear_order: bool = False) -> None:
        """Search from ``start``: one vertex, several, or every unvisited vertex."""
        if start is None:
            if not self.pe:
                self.init(graph.n)
            for i in range(graph.n):
                if self.depth[i] == -1:
                    self._run(graph, [i], False)
            return
        if clear_order:
            self.order.clear()
        if not self.pe:
            self.init(graph.n)
        if isinstance(start, int):
            self._run(graph, [start], False)
        else:
            self._run(graph, start, True)

    def is_span_edge(self, graph: Graph, edge_id: int, u: int) -> bool:
        return edge_id == self.pe[u]