"""Edge-indexed graphs shared by the graph algorithms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

EdgePredicate = Callable[[int], bool]


@dataclass(slots=True)
class Edge:
    """An edge between two vertices, optionally weighted."""

    frm: int
    to: int
    cost: float = 0


class Graph:
    """A graph storing edges by index so parallel edges stay distinct.

    Each vertex's adjacency list holds edge ids. An optional predicate marks
    edges that algorithms should skip.
    """

    directed = False

    def __init__(self, n: int, ignore: Optional[EdgePredicate] = None) -> None:
        if n < 0:
            raise ValueError("vertex count must be non-negative")
        self.n = n
        self.adj: list[list[int]] = [[] for _ in range(n)]
        self.edges: list[Edge] = []
        self._ignore = ignore

    def add_edge(self, frm: int, to: int, cost: float = 0) -> int:
        """Add an edge and return its id."""
        for v in (frm, to):
            if not 0 <= v < self.n:
                raise IndexError(f"vertex {v} out of range")
        eid = len(self.edges)
        self.adj[frm].append(eid)
        if not self.directed:
            self.adj[to].append(eid)
        self.edges.append(Edge(frm, to, cost))
        return eid

    def other(self, frm: int, edge_id: int) -> int:
        """Return the endpoint of the edge opposite to ``frm``."""
        e = self.edges[edge_id]
        return frm ^ e.frm ^ e.to

    def is_ignore(self, edge_id: int) -> bool:
        return self._ignore is not None and bool(self._ignore(edge_id))

    def set_ignore(self, predicate: EdgePredicate) -> None:
        self._ignore = predicate

    def clear_ignore(self) -> None:
        self._ignore = None


class UndirectedGraph(Graph):
    """Each edge appears in the adjacency lists of both endpoints."""

    directed = False


class DirectedGraph(Graph):
    """Each edge appears only in the adjacency list of its tail."""

    directed = True