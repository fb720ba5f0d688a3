"""Graph Theory custom exceptions."""


class GraphError(Exception):
    """Base exception for graph errors."""


class NotFoundError(GraphError):
    """Requested vertex, edge or index does not exist."""


class VertexNotFoundError(NotFoundError):
    """Vertex not found in the graph."""


class EdgeNotFoundError(NotFoundError):
    """Edge or arc not found in the graph."""


class InvalidOperationError(GraphError):
    """Operation is not allowed on this kind of graph."""


class UnsupportedMethodError(GraphError):
    """Requested algorithm is not available."""


class AlgorithmPreconditionError(GraphError):
    """Graph does not satisfy the algorithm's requirements."""


class NegativeEdgeError(AlgorithmPreconditionError):
    """Dijkstra was given a graph with a negative cost."""


class NegativeCycleError(AlgorithmPreconditionError):
    """A negative-cost cycle is reachable from the start vertex."""


class MalformedInputError(GraphError):
    """Input could not be turned into graph data."""


class MalformedSnapshotError(MalformedInputError):
    """Structural snapshot is missing fields or has the wrong shape."""
