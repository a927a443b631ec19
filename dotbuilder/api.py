"""Public construction surface for dotbuilder."""
from __future__ import annotations

from typing import Optional

from dotbuilder.graph.container import Graph, Subgraph
from dotbuilder.graph.ids import IdAllocator
from dotbuilder.graph.model import Cell, CellLike, Edge, Endpoint, LabelCell, Node, Record


class DotBuilder:
    """Factory facade bound to a single :class:`IdAllocator`.

    Documents built through separate builders draw identifiers from separate
    counters, which keeps their output independent of each other.
    """

    def __init__(self, allocator: Optional[IdAllocator] = None) -> None:
        self.allocator = allocator or IdAllocator()

    def node(self, label: object) -> Node:
        return Node(label, allocator=self.allocator)

    def edge(self, source: Endpoint, *targets: Endpoint) -> Edge:
        return Edge(source, *targets)

    def record(self, *cells: CellLike) -> Record:
        return Record(*cells, allocator=self.allocator)

    def cell(self, *cells: CellLike) -> Cell:
        return Cell(*cells, allocator=self.allocator)

    def label_cell(self, label: object) -> LabelCell:
        return LabelCell(label, allocator=self.allocator)

    def graph(self, label: object = "") -> Graph:
        return Graph(label, allocator=self.allocator)

    def subgraph(self, label: object = "") -> Subgraph:
        return Subgraph(label, allocator=self.allocator)


def node(label: object, *, allocator: Optional[IdAllocator] = None) -> Node:
    """Create a :class:`Node` labelled ``label``."""

    return Node(label, allocator=allocator)


def edge(source: Endpoint, *targets: Endpoint) -> Edge:
    """Create an :class:`Edge` from ``source`` through every target in order."""

    return Edge(source, *targets)


def record(*cells: CellLike, allocator: Optional[IdAllocator] = None) -> Record:
    """Create a :class:`Record` whose label is built from ``cells``."""

    return Record(*cells, allocator=allocator)


def cell(*cells: CellLike, allocator: Optional[IdAllocator] = None) -> Cell:
    """Create a :class:`Cell` partition grouping ``cells``."""

    return Cell(*cells, allocator=allocator)


def label_cell(label: object, *, allocator: Optional[IdAllocator] = None) -> LabelCell:
    """Create a :class:`LabelCell` leaf field."""

    return LabelCell(label, allocator=allocator)


def graph(label: object = "", *, allocator: Optional[IdAllocator] = None) -> Graph:
    """Create a root :class:`Graph` document."""

    return Graph(label, allocator=allocator)


def subgraph(label: object = "", *, allocator: Optional[IdAllocator] = None) -> Subgraph:
    """Create a :class:`Subgraph` with its invisible anchor node."""

    return Subgraph(label, allocator=allocator)


labelCell = label_cell


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
