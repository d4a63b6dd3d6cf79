"""Edge-list reader: one whitespace-separated ``name name`` pair per line."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional, Tuple, Union

from .errors import EdgeListError
from .graph import Graph

logger = logging.getLogger(__name__)

EdgePair = Tuple[str, str]


def parse_edge_line(line: str, line_no: int = 0, source: str = "<input>") -> Optional[EdgePair]:
    """Parse one edge record.

    Blank lines yield ``None``.  A line with exactly two fields is always an
    edge, even when a name starts with ``#``.  Any other line starting with
    ``#`` is a comment and yields ``None``.

    Raises:
        EdgeListError: if a non-comment line does not hold exactly two fields.
    """
    fields = line.split()
    if len(fields) == 2:
        return fields[0], fields[1]
    if not fields or fields[0].startswith("#"):
        return None
    raise EdgeListError(source, line_no, line)


def iter_edges(lines: Iterable[str], source: str = "<input>") -> Iterator[EdgePair]:
    for line_no, line in enumerate(lines, 1):
        edge = parse_edge_line(line, line_no, source)
        if edge is not None:
            yield edge


def read_edges(path: Path) -> Iterator[EdgePair]:
    """Yield edge pairs from a UTF-8 text file, streaming line by line."""
    with open(path, "r", encoding="utf-8") as f:
        try:
            yield from iter_edges(f, source=str(path))
        except UnicodeDecodeError as exc:
            raise EdgeListError(str(path), 0, "", reason=f"not valid UTF-8 ({exc.reason})") from exc


def load_graph(source: Union[Path, str, Iterable[str]]) -> Graph:
    """Build a :class:`Graph` from a file path or an iterable of lines."""
    graph = Graph()
    if isinstance(source, (str, Path)):
        edges = graph.add_edges(read_edges(Path(source)))
        logger.info("Loaded %d edges from %s", edges, source)
    else:
        graph.add_edges(iter_edges(source))
    return graph
