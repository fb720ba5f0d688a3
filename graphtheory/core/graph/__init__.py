"""
Graph data structures and algorithms.

Data Structures:
    - Graph: Undirected graph, edges stored once in sorted form
    - DirectedGraph: Directed graph, (a, b) and (b, a) are distinct arcs
    - Tree: Undirected tree grown one edge at a time
    - Precedence / ShortestPath: Shortest path results

Algorithms:
    - traversal: BFS, iterative DFS, recursive DFS, connected_component
    - pathfinding: Dijkstra, Bellman-Ford, method dispatch, path reconstruction
"""

from graphtheory.core.graph.base import BaseGraph
from graphtheory.core.graph.directed import DirectedGraph
from graphtheory.core.graph.models import Precedence, ShortestPath
from graphtheory.core.graph.pathfinding import (
    all_shortest_paths,
    bellman_ford,
    dijkstra,
    path_to,
    shortest_path,
    shortest_paths,
    to_shortest_paths,
)
from graphtheory.core.graph.traversal import (
    breadth_first_search,
    connected_component,
    depth_first_search_iterative,
    depth_first_search_recursive,
)
from graphtheory.core.graph.tree import Tree
from graphtheory.core.graph.undirected import Graph

__all__ = [
    "BaseGraph",
    "DirectedGraph",
    "Graph",
    "Precedence",
    "ShortestPath",
    "Tree",
    "all_shortest_paths",
    "bellman_ford",
    "breadth_first_search",
    "connected_component",
    "depth_first_search_iterative",
    "depth_first_search_recursive",
    "dijkstra",
    "path_to",
    "shortest_path",
    "shortest_paths",
    "to_shortest_paths",
]
