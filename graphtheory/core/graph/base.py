"""Core graph container with adjacency list representation."""

from __future__ import annotations

import json
import logging
from collections.abc import Hashable, Iterable, Mapping
from typing import Any, ClassVar, TypeVar

from graphtheory.core.exceptions import (
    EdgeNotFoundError,
    InvalidOperationError,
    MalformedInputError,
    MalformedSnapshotError,
    VertexNotFoundError,
)
from graphtheory.core.models import Edge, EdgeLike, to_edge_record

logger = logging.getLogger(__name__)

G = TypeVar("G", bound="BaseGraph")

_SNAPSHOT_FIELDS = ("vertices", "edges", "directed")


def ordered_pair(a: Hashable, b: Hashable) -> tuple[Hashable, Hashable]:
    """Sort two labels so that (a, b) and (b, a) give the same pair.

    Labels without an order between them (``1`` and ``"a"``, or two
    frozensets where neither is a subset of the other) are ordered by type
    name, then by their string form.
    """
    try:
        if a == b or a < b:  # type: ignore[operator]
            return (a, b)
        if b < a:  # type: ignore[operator]
            return (b, a)
    except TypeError:
        pass
    return (a, b) if _fallback_key(a) <= _fallback_key(b) else (b, a)


def _fallback_key(v: Hashable) -> tuple[str, str, int]:
    # hash breaks ties between distinct labels with the same text
    return (type(v).__name__, str(v), hash(v))


class BaseGraph:
    """Vertex list, edge list and adjacency list shared by every graph kind.

    Directed and undirected graphs only differ in how an edge is
    canonicalized and whether adding it updates one or both adjacency lists;
    both are decided by the ``directed`` flag.
    """

    __slots__ = ("_directed", "_vertices", "_edges", "_edge_map", "_adjacency")

    # Value the snapshot "directed" flag must have to build this class.
    _DIRECTED: ClassVar[bool | None] = None

    def __init__(
        self,
        vertices: Iterable[Hashable] = (),
        edges: Iterable[EdgeLike] = (),
        directed: bool = False,
    ) -> None:
        self._reset(directed)
        for v in vertices:
            self.add_vertex(v)
        for edge in edges:
            self.add_edge(edge)

    def _reset(self, directed: bool) -> None:
        self._directed: bool = bool(directed)
        self._vertices: list[Hashable] = []
        self._edges: list[Edge] = []
        self._edge_map: dict[tuple[Hashable, Hashable], Edge] = {}
        self._adjacency: dict[Hashable, list[Hashable]] = {}

    def _canonical(self, source: Hashable, target: Hashable) -> tuple[Hashable, Hashable]:
        if self._directed:
            return source, target
        return ordered_pair(source, target)

    def _insert_vertex(self, v: Hashable) -> None:
        if v not in self._adjacency:
            self._vertices.append(v)
            self._adjacency[v] = []

    def _require_vertex(self, v: Hashable) -> None:
        if v not in self._adjacency:
            raise VertexNotFoundError(f"Vertex {v!r} not in graph")

    def to_edge(self, source: Hashable, target: Hashable, cost: float = 1) -> Edge:
        """Edge in the form it is stored under. O(1)."""
        s, t = self._canonical(source, target)
        return Edge(s, t, cost)

    # Queries

    def has_vertex(self, v: Hashable) -> bool:
        """O(1)."""
        return v in self._adjacency

    def has_edge(self, edge: EdgeLike) -> bool:
        """Check an edge/arc by its endpoints, ignoring cost. O(degree)."""
        e = to_edge_record(edge)
        if not self.has_vertex(e.source) or not self.has_vertex(e.target):
            return False
        s, t = self._canonical(e.source, e.target)
        return t in self._adjacency[s]

    def has_opposite_edge(self, edge: EdgeLike) -> bool:
        """Check whether the edge pointing the other way is present."""
        e = to_edge_record(edge)
        return self.has_edge(e.reversed())

    def has_negative_costs(self) -> bool:
        return any(e.cost < 0 for e in self._edges)

    def get_vertices(self) -> list[Hashable]:
        """Vertices in insertion order."""
        return list(self._vertices)

    def get_vertex(self, i: int) -> Hashable:
        """The i-th added vertex."""
        if not 0 <= i < len(self._vertices):
            raise VertexNotFoundError(f"No vertex at index {i} (graph has {len(self._vertices)})")
        return self._vertices[i]

    def get_edges(self) -> list[Edge]:
        """Edges in insertion order, canonical form."""
        return list(self._edges)

    def get_edge(self, i: int) -> Edge:
        """The i-th added edge."""
        if not 0 <= i < len(self._edges):
            raise EdgeNotFoundError(f"No edge at index {i} (graph has {len(self._edges)})")
        return self._edges[i]

    def get_adjacency_list(self) -> dict[Hashable, list[Hashable]]:
        return {v: list(neighbors) for v, neighbors in self._adjacency.items()}

    def get_adjacent_vertices(self, v: Hashable) -> list[Hashable]:
        """Vertices reachable from v in one hop."""
        self._require_vertex(v)
        return list(self._adjacency[v])

    def get_vertex_degree(self, v: Hashable) -> int:
        self._require_vertex(v)
        return len(self._adjacency[v])

    def get_cost(self, source: Hashable, target: Hashable) -> float:
        """Cost of the edge between source and target. O(1)."""
        edge = self._edge_map.get(self._canonical(source, target))
        if edge is None:
            raise EdgeNotFoundError(f"No such edge: {source!r} -> {target!r}")
        return edge.cost

    def is_directed(self) -> bool:
        return self._directed

    def is_empty(self) -> bool:
        return not self._vertices

    @property
    def num_vertices(self) -> int:
        return len(self._vertices)

    @property
    def num_edges(self) -> int:
        return len(self._edges)

    # Mutation

    def add_vertex(self, v: Hashable) -> None:
        """Add a vertex; no-op if already present."""
        self._insert_vertex(v)

    def remove_vertex(self, v: Hashable) -> None:
        """Remove a vertex together with every edge touching it."""
        self._require_vertex(v)
        incident = [e for e in self._edges if e.source == v or e.target == v]
        for edge in incident:
            self._delete_edge(edge)
        del self._adjacency[v]
        self._vertices.remove(v)
        logger.debug("Removed vertex %r and %d incident edges", v, len(incident))

    def add_edge(self, edge: EdgeLike) -> None:
        """Add an edge/arc; no-op if present.

        Both endpoints must already be vertices of the graph.
        """
        e = to_edge_record(edge)
        self._require_vertex(e.source)
        self._require_vertex(e.target)
        if self.has_edge(e):
            return

        stored = self.to_edge(e.source, e.target, e.cost)
        self._edges.append(stored)
        self._edge_map[(stored.source, stored.target)] = stored
        self._adjacency[stored.source].append(stored.target)
        if not self._directed and not stored.is_loop:
            self._adjacency[stored.target].append(stored.source)

    def remove_edge(self, edge: EdgeLike) -> None:
        """Remove an edge/arc matched by its endpoints; no-op if absent."""
        e = to_edge_record(edge)
        if not self.has_edge(e):
            return
        self._delete_edge(self._edge_map[self._canonical(e.source, e.target)])

    def _delete_edge(self, stored: Edge) -> None:
        del self._edge_map[(stored.source, stored.target)]
        self._edges.remove(stored)
        self._adjacency[stored.source].remove(stored.target)
        if not self._directed and not stored.is_loop:
            self._adjacency[stored.target].remove(stored.source)

    def clear_edges(self) -> None:
        """Remove all edges, keep the vertices."""
        self._edges = []
        self._edge_map = {}
        self._adjacency = {v: [] for v in self._vertices}

    def clear(self) -> None:
        """Remove all vertices and edges."""
        self._reset(self._directed)

    def clone(self: G) -> G:
        """Copy that shares no mutable state with this graph."""
        graph = type(self).__new__(type(self))
        graph._reset(self._directed)
        graph._vertices = list(self._vertices)
        graph._edges = list(self._edges)
        graph._edge_map = dict(self._edge_map)
        graph._adjacency = {v: list(neighbors) for v, neighbors in self._adjacency.items()}
        return graph

    # Structural snapshot

    def to_snapshot(self, include_adjacency_list: bool = False) -> dict[str, Any]:
        """Plain-data form: vertices, edges and the directed flag."""
        snapshot: dict[str, Any] = {
            "vertices": list(self._vertices),
            "edges": [e.to_dict() for e in self._edges],
            "directed": self._directed,
        }
        if include_adjacency_list:
            snapshot["adjacency_list"] = [
                [v, list(neighbors)] for v, neighbors in self._adjacency.items()
            ]
        return snapshot

    def to_json(self, include_adjacency_list: bool = False) -> str:
        return json.dumps(self.to_snapshot(include_adjacency_list))

    @classmethod
    def from_snapshot(cls: type[G], snapshot: Mapping[str, Any]) -> G:
        """Build a graph of this class from a structural snapshot."""
        if cls._DIRECTED is None:
            raise InvalidOperationError(
                f"{cls.__name__} has no fixed direction, use load_snapshot() instead"
            )
        data = check_snapshot(snapshot)
        if data["directed"] != cls._DIRECTED:
            kind = "directed" if data["directed"] else "undirected"
            raise MalformedSnapshotError(f"Snapshot describes a {kind} graph, not a {cls.__name__}")
        return cls(data["vertices"], data["edges"])  # type: ignore[call-arg]

    @classmethod
    def from_json(cls: type[G], text: str) -> G:
        return cls.from_snapshot(parse_snapshot_json(text))

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, v: object) -> bool:
        return v in self._adjacency

    def __repr__(self) -> str:
        return f"{type(self).__name__}(vertices={self.num_vertices}, edges={self.num_edges})"


def check_snapshot(snapshot: Any) -> dict[str, Any]:
    """Validate a structural snapshot and normalize its edges.

    Raises MalformedSnapshotError on a missing field, a field of the wrong
    type, an unhashable vertex or an edge whose endpoints are not listed.
    """
    if not isinstance(snapshot, Mapping):
        raise MalformedSnapshotError(f"Snapshot must be a mapping, got {type(snapshot).__name__}")

    missing = [name for name in _SNAPSHOT_FIELDS if name not in snapshot]
    if missing:
        raise MalformedSnapshotError(f"Snapshot is missing {', '.join(missing)}")

    vertices, edges, directed = (snapshot[name] for name in _SNAPSHOT_FIELDS)
    if not isinstance(vertices, (list, tuple)):
        raise MalformedSnapshotError("Snapshot 'vertices' must be a list")
    if not isinstance(edges, (list, tuple)):
        raise MalformedSnapshotError("Snapshot 'edges' must be a list")
    if not isinstance(directed, bool):
        raise MalformedSnapshotError("Snapshot 'directed' must be true or false")

    for v in vertices:
        try:
            hash(v)
        except TypeError as exc:
            raise MalformedSnapshotError(f"Vertex {v!r} is not hashable") from exc
    known = set(vertices)

    records = []
    for raw in edges:
        try:
            edge = to_edge_record(raw)
        except MalformedInputError as exc:
            raise MalformedSnapshotError(str(exc)) from exc
        for endpoint in (edge.source, edge.target):
            try:
                listed = endpoint in known
            except TypeError:
                listed = False
            if not listed:
                raise MalformedSnapshotError(f"Edge endpoint {endpoint!r} is not a listed vertex")
        records.append(edge)

    return {"vertices": list(vertices), "edges": records, "directed": directed}


def parse_snapshot_json(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedSnapshotError(f"Invalid JSON: {exc}") from exc
