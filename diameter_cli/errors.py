"""Exception types raised by the graph core and the edge-list reader."""

from __future__ import annotations

from typing import Optional


class DiameterError(Exception):
    """Base class for all errors raised by diameter_cli."""


class InvalidNodeIDError(DiameterError, ValueError):
    """Raised when a node id is negative, not an int, or was never allocated."""

    def __init__(self, node_id: object, allocated: int) -> None:
        self.node_id = node_id
        self.allocated = allocated
        super().__init__(
            f"Invalid node id {node_id!r}: expected an int in [0, {allocated})"
        )


class UnknownNodeError(DiameterError, KeyError):
    """Raised when a node name has never been added to the graph."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown node '{self.name}'"


class EdgeListError(DiameterError, ValueError):
    """A malformed edge list: a record without two fields, or undecodable text."""

    def __init__(self, source: str, line_no: int, line: str, reason: Optional[str] = None) -> None:
        self.source = source
        self.line_no = line_no
        self.line = line
        if reason is None:
            reason = f"expected 2 fields per edge, got {len(line.split())}: {line.strip()!r}"
        self.reason = reason
        location = f"{source}:{line_no}" if line_no else source
        super().__init__(f"{location}: {reason}")
