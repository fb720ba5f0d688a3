"""Data models for graph algorithms."""

from __future__ import annotations

import math
from collections.abc import Hashable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Precedence:
    """Best known way to reach a vertex during a shortest path run."""

    predecessor: Hashable | None = None
    cost: float = math.inf

    @property
    def reached(self) -> bool:
        return self.cost != math.inf


@dataclass
class ShortestPath:
    """Cheapest path from the start vertex to ``target``.

    ``path`` is None when the target can't be reached, and ``[start]`` when
    the target is the start vertex itself.
    """

    target: Hashable
    cost: float
    path: list[Hashable] | None

    @property
    def reachable(self) -> bool:
        return self.path is not None

    def __len__(self) -> int:
        return len(self.path) if self.path is not None else 0

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.path or [])

    def __repr__(self) -> str:
        if self.path is None:
            return f"ShortestPath({self.target!r} unreachable)"
        hops = " -> ".join(str(v) for v in self.path)
        return f"ShortestPath({hops}, cost={self.cost})"
