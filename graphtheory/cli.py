"""CLI entry point for Graph Theory."""

import json
import logging
import math
from collections.abc import Hashable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from graphtheory.core.exceptions import GraphError, InvalidOperationError, VertexNotFoundError
from graphtheory.core.graph import BaseGraph, Graph, ShortestPath
from graphtheory.core.models import ShortestPathMethod, TraversalMethod
from graphtheory.core.snapshot import read_graph, write_graph

app = typer.Typer(
    name="graphtheory",
    help="Graph traversal and shortest paths on JSON graph snapshots.",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)

GraphFile = Annotated[
    Path,
    typer.Argument(help="JSON snapshot file", exists=True, dir_okay=False, readable=True),
]
OutputJson = Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")]


@contextmanager
def report_errors() -> Iterator[None]:
    """Print graph errors and exit with status 1."""
    try:
        yield
    except GraphError as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}", soft_wrap=True)
        raise typer.Exit(code=1) from exc


def resolve_vertex(graph: BaseGraph, raw: str) -> Hashable:
    """Find the vertex a command line argument refers to."""
    if raw in graph:
        return raw
    for v in graph.get_vertices():
        if str(v) == raw:
            return v
    raise VertexNotFoundError(f"Vertex {raw!r} not in graph")


def label_key(v: Hashable) -> tuple[int, Any]:
    """Numbers first in numeric order, then everything else by text."""
    if isinstance(v, (int, float)) and not isinstance(v, bool):
        return (0, v)
    return (1, str(v))


def json_cost(cost: float) -> float | None:
    return None if cost == math.inf else cost


def format_path(result: ShortestPath) -> str:
    if result.path is None:
        return "[dim]unreachable[/]"
    hops = " -> ".join(f"[cyan]{escape(str(v))}[/]" for v in result.path)
    return f"{hops} [dim](cost {result.cost})[/]"


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log algorithm steps to stderr")
    ] = False,
) -> None:
    """Graph traversal and shortest paths on JSON graph snapshots."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=err_console, show_path=False)],
        )


@app.command()
def info(file: GraphFile, output_json: OutputJson = False) -> None:
    """Show vertex/edge counts, degrees and properties of a graph."""
    with report_errors():
        graph = read_graph(file)

        result: dict[str, Any] = {
            "vertices": graph.num_vertices,
            "edges": graph.num_edges,
            "directed": graph.is_directed(),
            "negative_costs": graph.has_negative_costs(),
            "complete": graph.is_complete() if isinstance(graph, Graph) else None,
            "degrees": {str(v): graph.get_vertex_degree(v) for v in graph.get_vertices()},
        }

        if output_json:
            print(json.dumps(result))
            return

        kind = "Directed" if result["directed"] else "Undirected"
        console.print(f"[bold]{kind} graph[/] [dim]{file.name}[/]")
        console.print(f"  Vertices: {result['vertices']}")
        console.print(f"  Edges: {result['edges']}")
        if result["negative_costs"]:
            console.print("  [yellow]Has negative costs[/]")
        if result["complete"]:
            console.print("  [green]Complete[/]")
        for v in graph.get_vertices():
            console.print(f"    [cyan]{escape(str(v))}[/] degree {graph.get_vertex_degree(v)}")


@app.command()
def traverse(
    file: GraphFile,
    start: Annotated[str, typer.Argument(help="Vertex to start from")],
    method: Annotated[
        TraversalMethod, typer.Option("--method", "-m", help="Traversal algorithm")
    ] = TraversalMethod.BFS,
    sort_labels: Annotated[
        bool, typer.Option("--sorted", "-s", help="Visit neighbors in label order")
    ] = False,
    output_json: OutputJson = False,
) -> None:
    """List the vertices reachable from START in traversal order."""
    from graphtheory.core.graph.traversal import connected_component

    with report_errors():
        graph = read_graph(file)
        origin = resolve_vertex(graph, start)
        order = connected_component(
            graph, origin, method=method, key=label_key if sort_labels else None
        )

        if output_json:
            print(json.dumps({"start": origin, "method": method.value, "order": order}))
            return

        console.print(f"[bold]{method.value}[/] from [cyan]{escape(str(origin))}[/]")
        for position, v in enumerate(order, start=1):
            console.print(f"  {position:>3}. {escape(str(v))}")
        console.print(f"\n[dim]Reached {len(order)} of {graph.num_vertices} vertices[/]")


@app.command()
def path(
    file: GraphFile,
    start: Annotated[str, typer.Argument(help="Vertex to start from")],
    end: Annotated[str, typer.Argument(help="Vertex to reach")],
    method: Annotated[
        ShortestPathMethod, typer.Option("--method", "-m", help="Shortest path algorithm")
    ] = ShortestPathMethod.AUTO,
    output_json: OutputJson = False,
) -> None:
    """Find the cheapest path from START to END."""
    from graphtheory.core.graph.pathfinding import shortest_path

    with report_errors():
        graph = read_graph(file)
        result = shortest_path(
            graph, resolve_vertex(graph, start), resolve_vertex(graph, end), method
        )

        if output_json:
            print(
                json.dumps(
                    {"target": result.target, "cost": json_cost(result.cost), "path": result.path}
                )
            )
            return

        console.print(format_path(result))


@app.command()
def paths(
    file: GraphFile,
    start: Annotated[str, typer.Argument(help="Vertex to start from")],
    method: Annotated[
        ShortestPathMethod, typer.Option("--method", "-m", help="Shortest path algorithm")
    ] = ShortestPathMethod.AUTO,
    output_json: OutputJson = False,
) -> None:
    """Find the cheapest path from START to every vertex."""
    from graphtheory.core.graph.pathfinding import all_shortest_paths

    with report_errors():
        graph = read_graph(file)
        origin = resolve_vertex(graph, start)
        results = all_shortest_paths(graph, origin, method)

        if output_json:
            print(
                json.dumps(
                    [
                        {"target": r.target, "cost": json_cost(r.cost), "path": r.path}
                        for r in results.values()
                    ]
                )
            )
            return

        console.print(f"[bold]Shortest paths from [cyan]{escape(str(origin))}[/cyan][/]")
        for v, result in results.items():
            console.print(f"  {escape(str(v))}: {format_path(result)}")


@app.command()
def complement(
    file: GraphFile,
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Write the snapshot to this file")
    ] = None,
) -> None:
    """Build the complement of an undirected graph."""
    with report_errors():
        graph = read_graph(file)
        if not isinstance(graph, Graph):
            raise InvalidOperationError("Complement is only defined for undirected graphs")
        result = graph.complement()

        if output is None:
            print(result.to_json())
            return

        write_graph(result, output)
        console.print(f"[green]Wrote[/green] {result.num_edges} edges to {output}")


if __name__ == "__main__":
    app()
