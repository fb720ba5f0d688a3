"""Undirected tree grown edge by edge."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping
from typing import Any

from graphtheory.core.exceptions import InvalidOperationError, MalformedSnapshotError
from graphtheory.core.graph.base import BaseGraph, check_snapshot
from graphtheory.core.models import EdgeLike, to_edge_record


class Tree(BaseGraph):
    """Undirected tree.

    Vertices are created by add_edge(); every new edge must hang exactly one
    new vertex off the existing tree, so the graph stays connected and
    acyclic without a separate cycle search.
    """

    __slots__ = ()

    _DIRECTED = False

    def __init__(self, edges: Iterable[EdgeLike] = ()) -> None:
        super().__init__((), edges, directed=False)

    def add_vertex(self, v: Hashable) -> None:
        raise InvalidOperationError(
            "Cannot add an unconnected vertex to a Tree, call add_edge() instead, "
            "it creates the missing vertices"
        )

    def add_edge(self, edge: EdgeLike) -> None:
        e = to_edge_record(edge)
        if self.has_edge(e):
            return
        if e.is_loop:
            raise InvalidOperationError(f"A tree cannot hold the self-loop on {e.source!r}")

        if not self.is_empty():
            known = self.has_vertex(e.source), self.has_vertex(e.target)
            if all(known):
                raise InvalidOperationError(
                    f"Edge {e.source!r} - {e.target!r} would close a cycle in the tree"
                )
            if not any(known):
                raise InvalidOperationError(
                    f"Edge {e.source!r} - {e.target!r} is not connected to the tree"
                )

        self._insert_vertex(e.source)
        self._insert_vertex(e.target)
        super().add_edge(e)

    def remove_vertex(self, v: Hashable) -> None:
        """Remove a leaf. Inner vertices would split the tree."""
        self._require_vertex(v)
        if len(self._adjacency[v]) > 1:
            raise InvalidOperationError(f"Removing {v!r} would split the tree")
        super().remove_vertex(v)
        # Removing the last edge leaves a lone vertex, which a tree can't hold.
        if self.num_edges == 0:
            self.clear()

    def remove_edge(self, edge: EdgeLike) -> None:
        """Remove an edge hanging a leaf, and the leaf with it."""
        e = to_edge_record(edge)
        if not self.has_edge(e):
            return
        leaves = [v for v in (e.target, e.source) if len(self._adjacency[v]) == 1]
        if not leaves:
            raise InvalidOperationError(
                f"Removing {e.source!r} - {e.target!r} would split the tree"
            )
        self.remove_vertex(leaves[0])

    def clear_edges(self) -> None:
        """Without edges no vertex stays connected, so this empties the tree."""
        self.clear()

    @classmethod
    def from_snapshot(cls, snapshot: Mapping[str, Any]) -> Tree:
        data = check_snapshot(snapshot)
        if data["directed"]:
            raise MalformedSnapshotError("Snapshot describes a directed graph, not a Tree")
        tree = cls(data["edges"])
        if set(tree.get_vertices()) != set(data["vertices"]):
            raise MalformedSnapshotError("Snapshot lists vertices not connected by any edge")
        return tree
