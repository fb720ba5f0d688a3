"""Tests for error handling paths."""

import pytest

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
from graphtheory.core.graph import BaseGraph, DirectedGraph, Graph


@pytest.fixture
def graph() -> Graph:
    return Graph(["A", "B"], [("A", "B", 2)])


class TestHierarchy:
    """Every library error can be caught as GraphError."""

    @pytest.mark.parametrize(
        "error",
        [
            VertexNotFoundError,
            EdgeNotFoundError,
            InvalidOperationError,
            UnsupportedMethodError,
            NegativeEdgeError,
            NegativeCycleError,
            MalformedSnapshotError,
        ],
    )
    def test_base_class(self, error: type) -> None:
        assert issubclass(error, GraphError)

    def test_not_found_family(self) -> None:
        assert issubclass(VertexNotFoundError, NotFoundError)
        assert issubclass(EdgeNotFoundError, NotFoundError)

    def test_precondition_family(self) -> None:
        assert issubclass(NegativeEdgeError, AlgorithmPreconditionError)
        assert issubclass(NegativeCycleError, AlgorithmPreconditionError)

    def test_malformed_family(self) -> None:
        assert issubclass(MalformedSnapshotError, MalformedInputError)


class TestFailedMutations:
    """Failed mutations leave the graph untouched."""

    def test_add_edge_unknown_endpoint(self, graph: Graph) -> None:
        with pytest.raises(VertexNotFoundError) as exc_info:
            graph.add_edge(("A", "Z"))

        assert "'Z'" in str(exc_info.value)
        assert graph.num_edges == 1
        assert graph.get_adjacent_vertices("A") == ["B"]

    def test_add_edge_malformed(self, graph: Graph) -> None:
        with pytest.raises(MalformedInputError):
            graph.add_edge(("A", "B", "cheap"))
        assert graph.get_cost("A", "B") == 2

    def test_constructor_unknown_endpoint(self) -> None:
        with pytest.raises(VertexNotFoundError):
            DirectedGraph(["A"], [("A", "B")])

    def test_remove_missing_vertex(self, graph: Graph) -> None:
        with pytest.raises(VertexNotFoundError):
            graph.remove_vertex("Z")
        assert graph.get_vertices() == ["A", "B"]


class TestBaseGraph:
    """Tests for the shared base class used directly."""

    def test_directed_flag(self) -> None:
        graph = BaseGraph([1, 2], [(2, 1)], directed=True)
        assert graph.is_directed()
        assert not graph.has_edge((1, 2))

    def test_from_snapshot_needs_concrete_class(self, graph: Graph) -> None:
        with pytest.raises(InvalidOperationError):
            BaseGraph.from_snapshot(graph.to_snapshot())

    def test_degree_of_missing_vertex(self) -> None:
        with pytest.raises(VertexNotFoundError):
            BaseGraph().get_vertex_degree("A")

    def test_cost_after_removal(self, graph: Graph) -> None:
        graph.remove_edge(("B", "A"))
        with pytest.raises(EdgeNotFoundError):
            graph.get_cost("A", "B")
