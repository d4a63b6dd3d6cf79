"""Exact diameter of undirected, unweighted graphs built from named edges."""

from .errors import DiameterError, EdgeListError, InvalidNodeIDError, UnknownNodeError
from .graph import Graph
from .symbols import SymbolTable

__version__ = "1.0.0"

__all__ = [
    "DiameterError",
    "EdgeListError",
    "Graph",
    "InvalidNodeIDError",
    "SymbolTable",
    "UnknownNodeError",
    "__version__",
]
