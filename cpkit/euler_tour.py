"""Euler tour over tree edges, recording each node as edges are crossed."""

from __future__ import annotations

from cpkit.graph import Graph


class EulerTour:
    """Euler tour of a forest.

    ``euler`` lists the nodes visited as every edge is walked down and back up;
    each call to :meth:`dfs` ends its tour with ``-1``. ``loc[u]`` is the first
    position of ``u`` in ``euler``, or ``-1`` if unvisited.
    """

    def __init__(self, n: int) -> None:
        self.loc = [-1] * n
        self.euler: list[int] = []

    def dfs(self, graph: Graph, root: int) -> None:
        self.loc[root] = len(self.euler)
        self.euler.append(root)
        stack = [(root, iter(graph.adj[root]))]
        while stack:
            u, edges = stack[-1]
            for eid in edges:
                if graph.is_ignore(eid):
                    continue
                nxt = graph.other(u, eid)
                if self.loc[nxt] != -1:
                    continue
                self.loc[nxt] = len(self.euler)
                self.euler.append(nxt)
                stack.append((nxt, iter(graph.adj[nxt])))
                break
            else:
                stack.pop()
                if stack:
                    self.euler.append(stack[-1][0])
        self.euler.append(-1)