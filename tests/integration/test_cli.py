"""Integration tests for the command line interface."""

import json
import tempfile
from pathlib import Path

import pytest
from typer.testing import CliRunner

from graphtheory.cli import app
from graphtheory.core.graph import DirectedGraph, Graph
from graphtheory.core.snapshot import read_graph, write_graph

runner = CliRunner()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as td:
        yield Path(td)


@pytest.fixture
def weighted_file(temp_dir: Path) -> Path:
    """Write A-B (1), B-C (2), A-C (4), C-D (1) plus an isolated E."""
    graph = Graph(
        ["A", "B", "C", "D", "E"],
        [("A", "B", 1), ("B", "C", 2), ("A", "C", 4), ("C", "D", 1)],
    )
    path = temp_dir / "weighted.json"
    write_graph(graph, path)
    return path


@pytest.fixture
def numbered_file(temp_dir: Path) -> Path:
    """Write a directed graph with integer labels and a negative arc."""
    graph = DirectedGraph([1, 2, 3], [(1, 2, 4), (1, 3, 2), (3, 2, -3)])
    path = temp_dir / "numbered.json"
    write_graph(graph, path)
    return path


class TestInfo:
    """Tests for the info command."""

    def test_json(self, weighted_file: Path) -> None:
        result = runner.invoke(app, ["info", str(weighted_file), "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["vertices"] == 5
        assert data["edges"] == 4
        assert data["directed"] is False
        assert data["complete"] is False
        assert data["degrees"]["C"] == 3

    def test_text(self, numbered_file: Path) -> None:
        result = runner.invoke(app, ["info", str(numbered_file)])

        assert result.exit_code == 0
        assert "Directed graph" in result.stdout
        assert "Has negative costs" in result.stdout

    def test_missing_file(self, temp_dir: Path) -> None:
        result = runner.invoke(app, ["info", str(temp_dir / "nope.json")])
        assert result.exit_code != 0

    def test_malformed_file(self, temp_dir: Path) -> None:
        path = temp_dir / "bad.json"
        path.write_text(json.dumps({"vertices": []}))

        result = runner.invoke(app, ["info", str(path)])

        assert result.exit_code == 1
        assert "missing" in result.output


class TestTraverse:
    """Tests for the traverse command."""

    def test_bfs_json(self, weighted_file: Path) -> None:
        result = runner.invoke(app, ["traverse", str(weighted_file), "A", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["method"] == "bfs"
        assert data["order"] == ["A", "B", "C", "D"]

    def test_dfs_iterative(self, weighted_file: Path) -> None:
        result = runner.invoke(
            app, ["traverse", str(weighted_file), "A", "--method", "dfs-iterative", "--json"]
        )

        assert result.exit_code == 0
        assert json.loads(result.stdout)["order"] == ["A", "C", "D", "B"]

    def test_integer_labels(self, numbered_file: Path) -> None:
        result = runner.invoke(app, ["traverse", str(numbered_file), "1", "--sorted", "--json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["order"] == [1, 2, 3]

    def test_text(self, weighted_file: Path) -> None:
        result = runner.invoke(app, ["traverse", str(weighted_file), "E"])

        assert result.exit_code == 0
        assert "Reached 1 of 5 vertices" in result.stdout

    def test_unknown_start(self, weighted_file: Path) -> None:
        result = runner.invoke(app, ["traverse", str(weighted_file), "Z"])

        assert result.exit_code == 1
        assert "not in graph" in result.output


class TestPath:
    """Tests for the path and paths commands."""

    def test_cheapest_path(self, weighted_file: Path) -> None:
        result = runner.invoke(app, ["path", str(weighted_file), "A", "D", "--json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {
            "target": "D",
            "cost": 4,
            "path": ["A", "B", "C", "D"],
        }

    def test_unreachable(self, weighted_file: Path) -> None:
        result = runner.invoke(app, ["path", str(weighted_file), "A", "E", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["cost"] is None
        assert data["path"] is None

    def test_unreachable_text(self, weighted_file: Path) -> None:
        result = runner.invoke(app, ["path", str(weighted_file), "A", "E"])

        assert result.exit_code == 0
        assert "unreachable" in result.stdout

    def test_auto_handles_negative(self, numbered_file: Path) -> None:
        result = runner.invoke(app, ["path", str(numbered_file), "1", "2", "--json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["path"] == [1, 3, 2]

    def test_dijkstra_refuses_negative(self, numbered_file: Path) -> None:
        result = runner.invoke(
            app, ["path", str(numbered_file), "1", "2", "--method", "dijkstra"]
        )

        assert result.exit_code == 1
        assert "Bellman-Ford" in result.output

    def test_all_paths(self, weighted_file: Path) -> None:
        result = runner.invoke(app, ["paths", str(weighted_file), "D", "--json"])

        assert result.exit_code == 0
        by_target = {entry["target"]: entry for entry in json.loads(result.stdout)}
        assert by_target["A"]["cost"] == 4
        assert by_target["D"]["path"] == ["D"]
        assert by_target["E"]["path"] is None

    def test_verbose(self, weighted_file: Path) -> None:
        result = runner.invoke(app, ["--verbose", "path", str(weighted_file), "A", "D"])
        assert result.exit_code == 0


class TestComplement:
    """Tests for the complement command."""

    def test_stdout(self, temp_dir: Path) -> None:
        path = temp_dir / "path.json"
        write_graph(Graph([1, 2, 3], [(1, 2), (2, 3)]), path)

        result = runner.invoke(app, ["complement", str(path)])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["edges"] == [{"from": 1, "to": 3, "cost": 1}]

    def test_output_file(self, weighted_file: Path, temp_dir: Path) -> None:
        output = temp_dir / "complement.json"

        result = runner.invoke(app, ["complement", str(weighted_file), "--output", str(output)])

        assert result.exit_code == 0
        complement = read_graph(output)
        assert complement.num_edges == 10 - 4

    def test_directed_rejected(self, numbered_file: Path) -> None:
        result = runner.invoke(app, ["complement", str(numbered_file)])

        assert result.exit_code == 1
        assert "undirected" in result.output
