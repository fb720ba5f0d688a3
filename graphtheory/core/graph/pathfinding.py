"""Shortest path algorithms: Dijkstra, Bellman-Ford, path reconstruction."""

from __future__ import annotations

import logging
import math
from collections.abc import Hashable
from typing import TYPE_CHECKING

from graphtheory.core.exceptions import (
    NegativeCycleError,
    NegativeEdgeError,
    UnsupportedMethodError,
    VertexNotFoundError,
)
from graphtheory.core.graph.models import Precedence, ShortestPath
from graphtheory.core.models import ShortestPathMethod

if TYPE_CHECKING:
    from graphtheory.core.graph.base import BaseGraph

logger = logging.getLogger(__name__)

PrecedenceMap = dict[Hashable, Precedence]


def shortest_paths(
    graph: BaseGraph,
    start: Hashable,
    end: Hashable | None = None,
    method: ShortestPathMethod | str = ShortestPathMethod.AUTO,
) -> PrecedenceMap:
    """Run the selected shortest path algorithm from start.

    AUTO uses Bellman-Ford when the graph has a negative cost and Dijkstra
    otherwise. ``end`` lets Dijkstra stop as soon as that vertex is settled.
    """
    method = _resolve_method(method)
    if method is ShortestPathMethod.AUTO:
        method = (
            ShortestPathMethod.BELLMAN_FORD
            if graph.has_negative_costs()
            else ShortestPathMethod.DIJKSTRA
        )
        logger.debug("Selected %s for %r", method.value, graph)

    if method is ShortestPathMethod.DIJKSTRA:
        return dijkstra(graph, start, end)
    return bellman_ford(graph, start)


def dijkstra(graph: BaseGraph, start: Hashable, end: Hashable | None = None) -> PrecedenceMap:
    """Dijkstra's algorithm, array relaxation variant. O(V^2).

    Ties on the minimum cost go to the vertex added to the graph first.
    Raises NegativeEdgeError if any edge has a negative cost.
    """
    _require_vertex(graph, start)
    if end is not None:
        _require_vertex(graph, end)
    if graph.has_negative_costs():
        raise NegativeEdgeError(
            "Negative edge encountered, Dijkstra can't handle it: use Bellman-Ford instead"
        )

    precedence: PrecedenceMap = {v: Precedence() for v in graph.get_vertices()}
    precedence[start] = Precedence(None, 0)
    # dict keeps insertion order, min() keeps the first minimum
    unsettled = dict.fromkeys(graph.get_vertices())

    while unsettled:
        current = min(unsettled, key=lambda v: precedence[v].cost)
        if precedence[current].cost == math.inf:
            break
        del unsettled[current]
        if current == end:
            break

        for neighbor in graph.get_adjacent_vertices(current):
            if neighbor not in unsettled:
                continue
            cost = precedence[current].cost + graph.get_cost(current, neighbor)
            if cost < precedence[neighbor].cost:
                precedence[neighbor] = Precedence(current, cost)

    logger.debug("Dijkstra from %r settled %d vertices", start, len(precedence) - len(unsettled))
    return precedence


def bellman_ford(graph: BaseGraph, start: Hashable) -> PrecedenceMap:
    """Bellman-Ford: relax every edge |V| - 1 times. O(V * E).

    Undirected edges are relaxed both ways, so any negative undirected edge
    reachable from start forms a negative cycle.
    Raises NegativeCycleError when a negative cycle is reachable from start.
    """
    _require_vertex(graph, start)

    arcs = []
    for edge in graph.get_edges():
        arcs.append((edge.source, edge.target, edge.cost))
        if not graph.is_directed() and not edge.is_loop:
            arcs.append((edge.target, edge.source, edge.cost))

    precedence: PrecedenceMap = {v: Precedence() for v in graph.get_vertices()}
    precedence[start] = Precedence(None, 0)

    for _ in range(graph.num_vertices - 1):
        changed = False
        for u, v, cost in arcs:
            candidate = precedence[u].cost + cost
            if candidate < precedence[v].cost:
                precedence[v] = Precedence(u, candidate)
                changed = True
        if not changed:
            break

    for u, v, cost in arcs:
        if precedence[u].cost + cost < precedence[v].cost:
            raise NegativeCycleError(
                f"Negative cycle through {u!r} -> {v!r} reachable from {start!r}"
            )

    return precedence


def path_to(precedence: PrecedenceMap, target: Hashable) -> list[Hashable] | None:
    """Reconstruct the path to target from a precedence map.

    Returns None if target wasn't reached, ``[start]`` if target is the start.
    """
    if target not in precedence:
        raise VertexNotFoundError(f"Vertex {target!r} not in precedence map")
    if not precedence[target].reached:
        return None

    path = [target]
    current = precedence[target].predecessor
    while current is not None:
        path.append(current)
        current = precedence[current].predecessor
    path.reverse()
    return path


def to_shortest_paths(precedence: PrecedenceMap) -> dict[Hashable, ShortestPath]:
    """Cost and path for every vertex of a precedence map."""
    return {
        v: ShortestPath(target=v, cost=entry.cost, path=path_to(precedence, v))
        for v, entry in precedence.items()
    }


def shortest_path(
    graph: BaseGraph,
    start: Hashable,
    end: Hashable,
    method: ShortestPathMethod | str = ShortestPathMethod.AUTO,
) -> ShortestPath:
    """Cheapest path from start to end."""
    _require_vertex(graph, end)
    precedence = shortest_paths(graph, start, end, method)
    return ShortestPath(target=end, cost=precedence[end].cost, path=path_to(precedence, end))


def all_shortest_paths(
    graph: BaseGraph,
    start: Hashable,
    method: ShortestPathMethod | str = ShortestPathMethod.AUTO,
) -> dict[Hashable, ShortestPath]:
    """Cheapest path from start to every vertex of the graph."""
    return to_shortest_paths(shortest_paths(graph, start, method=method))


def _resolve_method(method: ShortestPathMethod | str) -> ShortestPathMethod:
    if isinstance(method, ShortestPathMethod):
        return method
    try:
        return ShortestPathMethod(method)
    except ValueError as exc:
        raise UnsupportedMethodError(f"Unknown shortest path method: {method!r}") from exc


def _require_vertex(graph: BaseGraph, v: Hashable) -> None:
    if not graph.has_vertex(v):
        raise VertexNotFoundError(f"Vertex {v!r} not in graph")
