"""
Graph Theory: graph data structures with traversal and shortest path algorithms.

Graph Theory models undirected and directed graphs over any hashable labels, enabling you to:
- Build and edit graphs vertex by vertex and edge by edge
- Traverse them breadth-first or depth-first
- Find cheapest paths with Dijkstra or Bellman-Ford

Usage:
    from graphtheory.core.graph import Graph, shortest_path

    graph = Graph(["A", "B", "C", "D"], [("A", "B", 1), ("B", "C", 2), ("A", "C", 4), ("C", "D", 1)])
    result = shortest_path(graph, "A", "D")
    print(result.cost, result.path)  # 4 ['A', 'B', 'C', 'D']
"""

__version__ = "0.1.0"
