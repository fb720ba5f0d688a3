"""Undirected graph."""

from __future__ import annotations

from collections.abc import Hashable, Iterable

from graphtheory.core.graph.base import BaseGraph
from graphtheory.core.models import EdgeLike


class Graph(BaseGraph):
    """Undirected graph.

    ``(a, b)`` and ``(b, a)`` name the same edge: it is stored once, with its
    endpoints sorted, and each endpoint lists the other as adjacent.
    """

    __slots__ = ()

    _DIRECTED = False

    def __init__(self, vertices: Iterable[Hashable] = (), edges: Iterable[EdgeLike] = ()) -> None:
        super().__init__(vertices, edges, directed=False)

    def complement(self) -> Graph:
        """Graph on the same vertices joining every pair not joined here. O(V^2)."""
        vertices = self.get_vertices()
        edges = [
            (u, v)
            for i, u in enumerate(vertices)
            for v in vertices[i + 1 :]
            if not self.has_edge((u, v))
        ]
        return Graph(vertices, edges)

    def is_complete(self) -> bool:
        """Every vertex is adjacent to every other one. Self-loops don't count."""
        n = self.num_vertices - 1
        return all(
            len(set(self._adjacency[v]) - {v}) >= n for v in self._vertices
        )
