"""Core data models shared by the graph and the BFS engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Set


@dataclass
class Node:
    node_id: int
    adj: Set[int] = field(default_factory=set)

    def add(self, other_id: int) -> None:
        self.adj.add(other_id)


@dataclass
class BFSResult:
    """Working state of one breadth-first traversal.

    ``depths`` maps every discovered node id to its hop distance from the
    starting node; ``last`` is the last node dequeued, which sits at the maximum
    depth because BFS dequeues in non-decreasing depth order.
    """

    depths: Dict[int, int]
    last: int

    @property
    def eccentricity(self) -> int:
        return self.depths[self.last]

    @property
    def reached(self) -> int:
        return len(self.depths)
