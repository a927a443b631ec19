"""dotbuilder package initialization.

This module exposes the factory functions used by external callers to build
Graphviz DOT documents.
"""

from .api import DotBuilder, cell, edge, graph, labelCell, label_cell, node, record, subgraph

__all__ = [
    "DotBuilder",
    "cell",
    "edge",
    "graph",
    "labelCell",
    "label_cell",
    "node",
    "record",
    "subgraph",
]
