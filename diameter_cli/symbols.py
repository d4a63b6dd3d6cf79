"""Symbol table mapping external node names to dense integer ids."""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional

from .errors import InvalidNodeIDError


class SymbolTable:
    """Assign ids ``0, 1, 2, ...`` to names in first-seen order.

    Ids are never reused or reassigned and the table never shrinks, so a
    long-lived process that keeps discovering new names grows without bound.
    """

    def __init__(self) -> None:
        self._ids: Dict[str, int] = {}
        self._names: List[str] = []

    def get_or_create_id(self, name: str) -> int:
        node_id = self._ids.get(name)
        if node_id is None:
            node_id = len(self._ids)
            self._ids[name] = node_id
            self._names.append(name)
        return node_id

    def get_id(self, name: str) -> Optional[int]:
        return self._ids.get(name)

    def name_of(self, node_id: int) -> str:
        if not self.is_allocated(node_id):
            raise InvalidNodeIDError(node_id, len(self._names))
        return self._names[node_id]

    def is_allocated(self, node_id: object) -> bool:
        # bool is an int subclass but never a valid id
        if not isinstance(node_id, int) or isinstance(node_id, bool):
            return False
        return 0 <= node_id < len(self._names)

    def __len__(self) -> int:
        return len(self._ids)

    def __contains__(self, name: object) -> bool:
        return name in self._ids

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)
