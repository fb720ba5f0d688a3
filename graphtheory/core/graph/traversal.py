"""Graph traversal: BFS, iterative and recursive DFS."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable, Hashable
from typing import TYPE_CHECKING, Any

from graphtheory.core.exceptions import VertexNotFoundError
from graphtheory.core.models import TraversalMethod

if TYPE_CHECKING:
    from graphtheory.core.graph.base import BaseGraph

logger = logging.getLogger(__name__)

LabelKey = Callable[[Hashable], Any]


def _require_start(graph: BaseGraph, start: Hashable) -> None:
    if not graph.has_vertex(start):
        raise VertexNotFoundError(f"Start vertex {start!r} not in graph")


def _neighbors(graph: BaseGraph, v: Hashable, key: LabelKey | None) -> list[Hashable]:
    adjacent = graph.get_adjacent_vertices(v)
    if key is not None:
        adjacent.sort(key=key)
    return adjacent


def breadth_first_search(
    graph: BaseGraph, start: Hashable, key: LabelKey | None = None
) -> list[Hashable]:
    """Vertices reachable from start, in BFS discovery order. O(V + E).

    Neighbors are visited in adjacency order, or sorted by ``key`` when given.
    A vertex is marked when it is enqueued, so it is enqueued at most once.
    """
    _require_start(graph, start)

    visited: set[Hashable] = {start}
    queue: deque[Hashable] = deque([start])
    order: list[Hashable] = []

    while queue:
        current = queue.popleft()
        for neighbor in _neighbors(graph, current, key):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)
        order.append(current)

    return order


def depth_first_search_iterative(
    graph: BaseGraph, start: Hashable, key: LabelKey | None = None
) -> list[Hashable]:
    """Vertices reachable from start, in DFS order using an explicit stack. O(V + E).

    Every neighbor is pushed, visited or not; a vertex is emitted the first
    time it is popped. The last neighbor in order is explored first, so the
    result can differ from depth_first_search_recursive().
    """
    _require_start(graph, start)

    visited: set[Hashable] = set()
    stack: list[Hashable] = [start]
    order: list[Hashable] = []

    while stack:
        current = stack.pop()
        if current in visited:
            continue
        visited.add(current)
        order.append(current)
        stack.extend(_neighbors(graph, current, key))

    return order


def depth_first_search_recursive(
    graph: BaseGraph, start: Hashable, key: LabelKey | None = None
) -> list[Hashable]:
    """Vertices reachable from start, in recursive DFS order. O(V + E).

    Recursion depth grows with the longest simple path explored, so very deep
    graphs can hit Python's recursion limit; use the iterative variant there.
    """
    _require_start(graph, start)

    visited: set[Hashable] = set()
    order: list[Hashable] = []

    def dfs(vertex: Hashable) -> None:
        visited.add(vertex)
        order.append(vertex)
        for neighbor in _neighbors(graph, vertex, key):
            if neighbor not in visited:
                dfs(neighbor)

    dfs(start)
    return order


def connected_component(
    graph: BaseGraph,
    start: Hashable,
    method: TraversalMethod = TraversalMethod.DFS_RECURSIVE,
    key: LabelKey | None = None,
) -> list[Hashable]:
    """Vertices reachable from start, found with the chosen traversal.

    Anything other than BFS or DFS_ITERATIVE uses the recursive DFS.
    """
    logger.debug("Connected component of %r using %s", start, method)
    if method is TraversalMethod.BFS:
        return breadth_first_search(graph, start, key)
    if method is TraversalMethod.DFS_ITERATIVE:
        return depth_first_search_iterative(graph, start, key)
    return depth_first_search_recursive(graph, start, key)
