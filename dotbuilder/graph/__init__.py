"""Graph subpackage containing the DOT entity model and serializer."""

from .container import BaseGraph, Graph, RenderContext, Subgraph
from .ids import DEFAULT_ALLOCATOR, IdAllocator
from .model import Cell, Edge, LabelCell, Node, Record, UnattachedCellError

__all__ = [
    "BaseGraph",
    "Cell",
    "DEFAULT_ALLOCATOR",
    "Edge",
    "Graph",
    "IdAllocator",
    "LabelCell",
    "Node",
    "Record",
    "RenderContext",
    "Subgraph",
    "UnattachedCellError",
]
