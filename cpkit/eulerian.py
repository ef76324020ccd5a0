"""Eulerian path search by Hierholzer's algorithm."""

from __future__ import annotations

from typing import Optional

from cpkit.graph import Graph


def find_eulerian_path(graph: Graph) -> Optional[tuple[int, list[int]]]:
    """Find a path using every edge exactly once.

    Returns ``(start, edge_ids)``, ``(0, [])`` when the graph has no edges, or
    None when no such path exists.
    """
    n = graph.n
    out_deg = [0] * n
    in_deg = [0] * n
    for e in graph.edges:
        out_deg[e.frm] += 1
        in_deg[e.to] += 1

    root = -1
    odd = 0
    for i in range(n):
        if (out_deg[i] + in_deg[i]) & 1:
            odd += 1
            if root == -1 or out_deg[i] - in_deg[i] > out_deg[root] - in_deg[root]:
                root = i
    if odd > 2:
        return None
    if root == -1:
        root = next((i for i in range(n) if out_deg[i] + in_deg[i]), -1)
        if root == -1:
            return 0, []

    m = len(graph.edges)
    used = [False] * m
    cursor = [0] * n
    balance = [0] * n
    ans = [0] * m
    stk = 0
    idx = m
    v = root
    while True:
        adj = graph.adj[v]
        advanced = False
        while cursor[v] < len(adj):
            x = adj[cursor[v]]
            cursor[v] += 1
            if used[x]:
                continue
            used[x] = True
            ans[stk] = x
            stk += 1
            balance[v] += 1
            v = graph.other(v, x)
            balance[v] -= 1
            advanced = True
            break
        if not advanced:
            if stk == 0:
                break
            stk -= 1
            x = ans[stk]
            idx -= 1
            ans[idx] = x
            v = graph.other(v, x)

    if idx != 0 or sum(abs(b) for b in balance) > 2:
        return None
    return root, ans