"""Two-colouring of a graph by breadth-first search."""

from __future__ import annotations

from typing import Optional

from cpkit.graph import Graph

_UNSEEN = 2


def build_bipartite(graph: Graph) -> Optional[list[int]]:
    """Return a side (0 or 1) for every vertex, or None if not bipartite."""
    side = [_UNSEEN] * graph.n
    for start in range(graph.n):
        if side[start] != _UNSEEN:
            continue
        side[start] = 0
        queue = [start]
        for node in queue:
            for eid in graph.adj[node]:
                if graph.is_ignore(eid):
                    continue
                v = graph.other(node, eid)
                if side[v] == _UNSEEN:
                    side[v] = side[node] ^ 1
                    queue.append(v)
                elif side[v] == side[node]:
                    return None
    return side