"""Centroid decomposition of a tree."""

from __future__ import annotations

from typing import Callable, Iterator, Optional

from cpkit.graph import Graph

ApplyFn = Callable[[int, int], None]


class CentroidTree:
    """Centroid decomposition state.

    After :meth:`build_tree`, ``par[u]`` is the parent centroid of ``u`` and
    ``pe[u]`` the original edge id through which ``u``'s component was
    reached. A vertex ``u`` counts as removed while ``was[u] == iter``;
    increase ``iter`` to decompose again.
    """

    def __init__(self, n: int, fill: int = -1) -> None:
        self.assign(n, fill)

    def assign(self, n: int, fill: int = -1) -> None:
        self.sz = [fill] * n
        self.pe = [fill] * n
        self.par = [fill] * n
        self.was = [fill] * n
        self.iter = 0

    def dfs(self, graph: Graph, cur: int, parent: int = -1) -> None:
        """Compute subtree sizes below ``cur`` among vertices not removed."""
        self.sz[cur] = 1
        stack = [(cur, parent, iter(graph.adj[cur]))]
        while stack:
            u, p, edges = stack[-1]
            for eid in edges:
                if graph.is_ignore(eid):
                    continue
                v = graph.other(u, eid)
                if v == p or self.was[v] == self.iter:
                    continue
                self.sz[v] = 1
                stack.append((v, u, iter(graph.adj[v])))
                break
            else:
                stack.pop()
                if stack:
                    self.sz[stack[-1][0]] += self.sz[u]

    def find_centroid(self, graph: Graph, start: int) -> int:
        """Walk from ``start`` towards the heavy side until a centroid is reached."""
        half = self.sz[start] >> 1
        u, came_by = start, -1
        while True:
            for eid in graph.adj[u]:
                if eid == came_by or graph.is_ignore(eid):
                    continue
                v = graph.other(u, eid)
                if self.was[v] == self.iter:
                    continue
                if self.sz[v] > half:
                    u, came_by = v, eid
                    break
            else:
                return u

    def _enter(
        self,
        graph: Graph,
        cur: int,
        parent: int,
        via: int,
        apply: Optional[ApplyFn],
    ) -> tuple[int, Iterator[int]]:
        self.dfs(graph, cur, parent)
        centroid = self.find_centroid(graph, cur)
        self.par[centroid] = parent
        self.pe[centroid] = via
        if apply is not None:
            apply(centroid, cur)
        self.was[centroid] = self.iter
        return centroid, iter(graph.adj[centroid])

    def build_tree(
        self, graph: Graph, root: int, apply: Optional[ApplyFn] = None
    ) -> None:
        """Decompose the component of ``root``.

        ``apply(centroid, entry)`` is called for each centroid before it is
        removed, where ``entry`` is the vertex its component was entered by.
        """
        if self.was[root] == self.iter:
            return
        stack = [self._enter(graph, root, -1, -1, apply)]
        while stack:
            centroid, edges = stack[-1]
            for eid in edges:
                if graph.is_ignore(eid):
                    continue
                nxt = graph.other(centroid, eid)
                if self.was[nxt] != self.iter:
                    stack.append(self._enter(graph, nxt, centroid, eid, apply))
                    break
            else:
                stack.pop()