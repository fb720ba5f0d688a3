"""Load and save graphs as structural snapshots."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from graphtheory.core.exceptions import MalformedSnapshotError
from graphtheory.core.graph.base import BaseGraph, check_snapshot, parse_snapshot_json
from graphtheory.core.graph.directed import DirectedGraph
from graphtheory.core.graph.undirected import Graph


def load_snapshot(snapshot: Mapping[str, Any]) -> Graph | DirectedGraph:
    """Build a Graph or DirectedGraph, whichever the snapshot's flag names."""
    data = check_snapshot(snapshot)
    cls = DirectedGraph if data["directed"] else Graph
    return cls.from_snapshot(snapshot)


def loads(text: str) -> Graph | DirectedGraph:
    return load_snapshot(parse_snapshot_json(text))


def read_graph(path: Path) -> Graph | DirectedGraph:
    """Read a graph from a JSON snapshot file."""
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedSnapshotError(f"Cannot read {path}: {exc}") from exc
    return loads(text)


def write_graph(graph: BaseGraph, path: Path, include_adjacency_list: bool = False) -> None:
    """Write a graph to a JSON snapshot file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(graph.to_snapshot(include_adjacency_list), indent=2) + "\n",
        encoding="utf-8",
    )
