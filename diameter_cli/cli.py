"""Typer-based CLI for computing graph diameters from edge-list files."""

from __future__ import annotations

import logging
import statistics
import time
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from . import __version__
from .cli_config import config_app
from .config_manager import load_config
from .errors import EdgeListError, UnknownNodeError
from .graph import Graph
from .reader import load_graph

logger = logging.getLogger(__name__)

console = Console()

app = typer.Typer(
    help="📐 Diameter CLI — exact diameter of undirected, unweighted graphs.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.add_typer(config_app, name="config")

EDGES_ARG = typer.Argument(
    ...,
    exists=True,
    file_okay=True,
    dir_okay=False,
    readable=True,
    help="Edge-list file: one 'name name' pair per line.",
)


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        typer.echo(f"Diameter CLI v{__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    level_name = "DEBUG" if verbose else load_config()["log_level"]
    logging.basicConfig(format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    logging.getLogger("diameter_cli").setLevel(getattr(logging, level_name, logging.WARNING))


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging."),
):
    """Diameter CLI: longest shortest path of a graph given as an edge list."""
    _configure_logging(verbose)


def _load(path: Path) -> Graph:
    try:
        return load_graph(path)
    except EdgeListError as exc:
        typer.echo(f"❌ {exc}", err=True)
        raise typer.Exit(code=1)


def _workers(workers: Optional[int]) -> int:
    return workers if workers is not None else int(load_config()["workers"])


@app.command("compute")
def compute(
    path: Path = EDGES_ARG,
    workers: Optional[int] = typer.Option(
        None, "--workers", "-w", min=1, help="Parallel BFS workers (default from config)."
    ),
):
    """Print the diameter of the graph."""
    graph = _load(path)
    typer.echo(graph.diameter(workers=_workers(workers)))


@app.command("stats")
def stats(
    path: Path = EDGES_ARG,
    workers: Optional[int] = typer.Option(None, "--workers", "-w", min=1, help="Parallel BFS workers."),
):
    """Show node, edge and component counts alongside the diameter."""
    graph = _load(path)
    started = time.perf_counter()
    value = graph.diameter(workers=_workers(workers))
    elapsed = time.perf_counter() - started

    table = Table(title=f"Graph: {path.name}")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("Nodes", str(graph.node_count))
    table.add_row("Edges", str(graph.edge_count))
    table.add_row("Components", str(graph.component_count()))
    table.add_row("Diameter", str(value))
    table.add_row("Seconds", f"{elapsed:.3f}")
    console.print(table)


@app.command("eccentricity")
def eccentricity(
    path: Path = EDGES_ARG,
    name: str = typer.Argument(..., help="Node name."),
):
    """Print the eccentricity of one node within its component."""
    graph = _load(path)
    try:
        typer.echo(graph.eccentricity(name))
    except UnknownNodeError as exc:
        typer.echo(f"❌ {exc}", err=True)
        raise typer.Exit(code=1)


@app.command("bench")
def bench(
    path: Path = EDGES_ARG,
    runs: int = typer.Option(3, "--runs", "-n", min=1, max=1000, help="Number of timed runs."),
    expect: Optional[int] = typer.Option(None, "--expect", help="Fail unless every run returns this diameter."),
    workers: Optional[int] = typer.Option(None, "--workers", "-w", min=1, help="Parallel BFS workers."),
):
    """Time repeated diameter computations on one graph."""
    graph = _load(path)
    n_workers = _workers(workers)
    timings: List[float] = []
    value = 0
    for run in range(runs):
        started = time.perf_counter()
        value = graph.diameter(workers=n_workers)
        timings.append(time.perf_counter() - started)
        logger.debug("Run %d: diameter=%d in %.3fs", run + 1, value, timings[-1])
        if expect is not None and value != expect:
            typer.echo(f"❌ Expected diameter {expect}, got {value}", err=True)
            raise typer.Exit(code=1)

    table = Table(title=f"Benchmark: {path.name} ({graph.node_count} nodes, {runs} runs)")
    table.add_column("Diameter", justify="right")
    table.add_column("Min s", justify="right")
    table.add_column("Mean s", justify="right")
    table.add_column("Max s", justify="right")
    table.add_row(
        str(value),
        f"{min(timings):.4f}",
        f"{statistics.mean(timings):.4f}",
        f"{max(timings):.4f}",
    )
    console.print(table)


if __name__ == "__main__":
    app()
