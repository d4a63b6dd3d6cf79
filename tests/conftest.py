"""Pytest configuration and fixtures for diameter CLI tests."""

import shutil
import tempfile
from pathlib import Path
from typing import Callable, Generator, List, Tuple

import pytest

from diameter_cli.graph import Graph


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    tmp = Path(tempfile.mkdtemp())
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture(autouse=True)
def temp_config_home(temp_dir: Path, monkeypatch) -> Path:
    """Point the config file at a temporary home so tests never touch ~/.diameter."""
    home = temp_dir / "home"
    monkeypatch.setattr("diameter_cli.config.BASE_DIR", home)
    monkeypatch.setattr("diameter_cli.config.CONFIG_FILE", home / "config.toml")
    return home


@pytest.fixture
def fixtures_dir() -> Path:
    """Get path to the edge-list fixture files."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def build_graph() -> Callable[[List[Tuple[str, str]]], Graph]:
    """Build a Graph by adding each edge in order."""

    def _build(edges: List[Tuple[str, str]]) -> Graph:
        graph = Graph()
        for a, b in edges:
            graph.add_edge(a, b)
        return graph

    return _build


@pytest.fixture
def write_edges(temp_dir: Path) -> Callable[[str], Path]:
    """Write raw edge-list text to a temporary file and return its path."""

    def _write(text: str, name: str = "edges.txt") -> Path:
        path = temp_dir / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
