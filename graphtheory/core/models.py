"""Data models for Graph Theory."""

from __future__ import annotations

import math
from collections.abc import Hashable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from numbers import Real
from typing import Any, Union

from graphtheory.core.exceptions import MalformedInputError

DEFAULT_COST = 1


class TraversalMethod(Enum):
    """Traversal strategies understood by the connected component dispatcher."""

    BFS = "bfs"
    DFS_ITERATIVE = "dfs-iterative"
    DFS_RECURSIVE = "dfs-recursive"


class ShortestPathMethod(Enum):
    """Shortest path algorithms understood by the dispatcher."""

    DIJKSTRA = "dijkstra"
    BELLMAN_FORD = "bellman-ford"
    AUTO = "auto"


@dataclass(frozen=True)
class Edge:
    """An edge in undirected graphs, an arc in directed ones."""

    source: Hashable
    target: Hashable
    cost: float = DEFAULT_COST

    @property
    def is_loop(self) -> bool:
        return self.source == self.target

    def reversed(self) -> Edge:
        """The same connection pointing the other way."""
        return Edge(self.target, self.source, self.cost)

    def to_dict(self) -> dict[str, Any]:
        return {"from": self.source, "to": self.target, "cost": self.cost}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Edge:
        """Create an Edge from a ``{"from", "to", "cost"?}`` mapping."""
        if "from" not in data or "to" not in data:
            raise MalformedInputError(f"Edge mapping needs 'from' and 'to' keys: {dict(data)!r}")
        return cls(data["from"], data["to"], _check_cost(data.get("cost")))


EdgeLike = Union[Edge, Mapping[str, Any], Sequence[Any]]


def to_edge_record(edge: EdgeLike) -> Edge:
    """Normalize any accepted edge shape to an Edge.

    Accepts an Edge, a mapping with ``from``/``to``/optional ``cost`` keys, or a
    positional ``(from, to)`` / ``(from, to, cost)`` sequence.
    """
    if isinstance(edge, Edge):
        return edge
    if isinstance(edge, Mapping):
        return Edge.from_dict(edge)
    if isinstance(edge, Sequence) and not isinstance(edge, (str, bytes)):
        if len(edge) == 2:
            return Edge(edge[0], edge[1])
        if len(edge) == 3:
            return Edge(edge[0], edge[1], _check_cost(edge[2]))
        raise MalformedInputError(f"Edge tuple must have 2 or 3 items, got {len(edge)}")
    raise MalformedInputError(f"Cannot interpret {edge!r} as an edge")


def _check_cost(cost: Any) -> float:
    if cost is None:
        return DEFAULT_COST
    if isinstance(cost, bool) or not isinstance(cost, Real):
        raise MalformedInputError(f"Edge cost must be a number, got {cost!r}")
    if math.isnan(cost):
        raise MalformedInputError("Edge cost must not be NaN")
    return cost
