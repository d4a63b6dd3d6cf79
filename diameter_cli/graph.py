"""Undirected, unweighted graph built from named edges."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Tuple

from . import bfs
from .errors import InvalidNodeIDError, UnknownNodeError
from .models import Node
from .symbols import SymbolTable

logger = logging.getLogger(__name__)


class Graph:
    """Owns the symbol table and the node arena indexed by node id.

    Nodes refer to their neighbours by id only.  Adding the same edge twice
    has no effect.  An edge from a name to itself is stored as a
    self-adjacency; it never shortens a path, so it does not change the
    diameter.

    Not thread-safe: callers that mutate from several threads must hold
    their own lock, and must not mutate while :meth:`diameter` runs.
    """

    def __init__(self) -> None:
        self.symbols = SymbolTable()
        self.nodes: Dict[int, Node] = {}

    # ------------------------------------------------------------------
    # Insert
    # ------------------------------------------------------------------

    def add_edge(self, name_a: str, name_b: str) -> None:
        a = self.symbols.get_or_create_id(name_a)
        b = self.symbols.get_or_create_id(name_b)
        self._link(a, b)

    def add_edge_ids(self, a: int, b: int) -> None:
        """Link two ids already allocated by :attr:`symbols`.

        Raises:
            InvalidNodeIDError: if either id is negative, not an int, or
                unknown to the symbol table.  Nothing is modified.
        """
        for node_id in (a, b):
            if not self.symbols.is_allocated(node_id):
                raise InvalidNodeIDError(node_id, len(self.symbols))
        self._link(a, b)

    def add_edges(self, pairs: Iterable[Tuple[str, str]]) -> int:
        count = 0
        for name_a, name_b in pairs:
            self.add_edge(name_a, name_b)
            count += 1
        logger.debug(
            "Added %d edge records; graph has %d nodes", count, len(self.nodes)
        )
        return count

    def _get(self, node_id: int) -> Node:
        node = self.nodes.get(node_id)
        if node is None:
            node = Node(node_id=node_id)
            self.nodes[node_id] = node
        return node

    def _link(self, a: int, b: int) -> None:
        self._get(a).add(b)
        self._get(b).add(a)

    # ------------------------------------------------------------------
    # Query
    # ------------------------------------------------------------------

    def diameter(self, workers: int = 1) -> int:
        """Length in hops of the longest shortest path in the graph.

        Returns 0 for an empty graph.  For a disconnected graph this is the
        largest diameter among its components.
        """
        return bfs.diameter(self.nodes, workers=workers)

    def eccentricity(self, name: str) -> int:
        return bfs.eccentricity(self.nodes, self._require(name))

    def distances(self, name: str) -> Dict[str, int]:
        """Hop distance from ``name`` to every node in its component."""
        result = bfs.bfs(self.nodes, self._require(name))
        return {self.symbols.name_of(i): depth for i, depth in result.depths.items()}

    def component_count(self) -> int:
        return bfs.components(self.nodes)

    def neighbors(self, name: str) -> List[str]:
        node = self.nodes[self._require(name)]
        return sorted(self.symbols.name_of(i) for i in node.adj)

    def _require(self, name: str) -> int:
        node_id = self.symbols.get_id(name)
        if node_id is None or node_id not in self.nodes:
            raise UnknownNodeError(name)
        return node_id

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        # each undirected edge appears in both adjacency sets, a self-loop in one
        total = 0
        for node_id, node in self.nodes.items():
            total += sum(1 for other in node.adj if other >= node_id)
        return total

    def __len__(self) -> int:
        return len(self.nodes)

    def __contains__(self, name: object) -> bool:
        node_id = self.symbols.get_id(name) if isinstance(name, str) else None
        return node_id is not None and node_id in self.nodes
