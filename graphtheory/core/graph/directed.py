"""Directed graph."""

from __future__ import annotations

from collections.abc import Hashable, Iterable

from graphtheory.core.exceptions import InvalidOperationError
from graphtheory.core.graph.base import BaseGraph
from graphtheory.core.models import EdgeLike


class DirectedGraph(BaseGraph):
    """Directed graph. ``(a, b)`` and ``(b, a)`` are distinct arcs."""

    __slots__ = ()

    _DIRECTED = True

    def __init__(self, vertices: Iterable[Hashable] = (), arcs: Iterable[EdgeLike] = ()) -> None:
        super().__init__(vertices, arcs, directed=True)

    def is_arc_undirected(self, arc: EdgeLike) -> bool:
        """Both (from, to) and (to, from) are arcs of the graph."""
        return self.has_edge(arc) and self.has_opposite_edge(arc)

    @classmethod
    def from_undirected(cls, graph: BaseGraph) -> DirectedGraph:
        """Each edge (a, b) becomes the arcs (a, b) and (b, a) with the same cost."""
        if graph.is_directed():
            raise InvalidOperationError(f"{graph!r} is already directed")

        directed = cls(graph.get_vertices(), graph.get_edges())
        for edge in graph.get_edges():
            directed.add_edge(edge.reversed())
        return directed
