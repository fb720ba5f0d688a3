"""
Core module: data models, exceptions, graphs and snapshots.

Models (models.py):
    - Edge: A connection between two vertex labels with a cost (default 1)
    - to_edge_record: Normalizes Edge / mapping / tuple input to an Edge
    - TraversalMethod/ShortestPathMethod: Enums for algorithm selection

Exceptions (exceptions.py):
    - GraphError: Base exception for all graph errors
    - VertexNotFoundError/EdgeNotFoundError: Requested item doesn't exist
    - InvalidOperationError: Call not allowed on this kind of graph
    - NegativeEdgeError/NegativeCycleError: Algorithm preconditions
    - MalformedSnapshotError: Snapshot input missing structural fields

Snapshots (snapshot.py):
    - load_snapshot: Build the right graph class from a snapshot dict
    - read_graph/write_graph: JSON snapshot files
"""

from graphtheory.core.exceptions import (
    AlgorithmPreconditionError,
    EdgeNotFoundError,
    GraphError,
    InvalidOperationError,
    MalformedInputError,
    MalformedSnapshotError,
    NegativeCycleError,
    NegativeEdgeError,
    NotFoundError,
    UnsupportedMethodError,
    VertexNotFoundError,
)
from graphtheory.core.models import Edge, ShortestPathMethod, TraversalMethod, to_edge_record
from graphtheory.core.snapshot import load_snapshot, loads, read_graph, write_graph

__all__ = [
    # Models
    "Edge",
    "ShortestPathMethod",
    "TraversalMethod",
    "to_edge_record",
    # Exceptions
    "GraphError",
    "NotFoundError",
    "VertexNotFoundError",
    "EdgeNotFoundError",
    "InvalidOperationError",
    "UnsupportedMethodError",
    "AlgorithmPreconditionError",
    "NegativeEdgeError",
    "NegativeCycleError",
    "MalformedInputError",
    "MalformedSnapshotError",
    # Snapshots
    "load_snapshot",
    "loads",
    "read_graph",
    "write_graph",
]
