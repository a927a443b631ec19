"""Export of networkx graphs as DOT documents."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Optional

import networkx as nx

from dotbuilder.graph.container import Graph
from dotbuilder.graph.ids import IdAllocator
from dotbuilder.graph.model import Edge, Node

LOGGER = logging.getLogger(__name__)


@dataclass
class GraphExporter:
    """Serialize a networkx graph to DOT text.

    Directed graphs render as ``digraph`` and undirected ones as ``graph``.
    Graphs that cannot hold parallel edges are marked ``strict``.
    Each conversion draws ids from a fresh allocator unless one is given.
    """

    graph: nx.Graph
    allocator: Optional[IdAllocator] = None

    def to_document(self, label: object = "") -> Graph:
        """Build a :class:`Graph` mirroring ``graph``'s nodes, edges and data."""

        allocator = self.allocator or IdAllocator()
        graph_attributes = dict(self.graph.graph)
        graph_label = graph_attributes.pop("label", "")
        document = Graph(label or graph_label, allocator=allocator).set_params(
            is_oriented=self.graph.is_directed(),
            is_strict=not self.graph.is_multigraph(),
        )
        document.set_attributes(graph_attributes)

        nodes: dict = {}
        for key, data in self.graph.nodes(data=True):
            attributes = dict(data)
            node = Node(attributes.pop("label", key), allocator=allocator)
            nodes[key] = node.set_attributes(attributes)
            document.add(node)

        for source, target, data in self.graph.edges(data=True):
            document.add(Edge(nodes[source], nodes[target]).set_attributes(data))

        LOGGER.debug(
            "Converted networkx graph with %d nodes and %d edges",
            self.graph.number_of_nodes(),
            self.graph.number_of_edges(),
        )
        return document

    def export(self, *, format: Literal["dot"] = "dot", label: object = "") -> str:
        """Export the graph to the requested ``format``."""

        if format == "dot":
            return self.to_document(label).serialize()
        raise ValueError(f"Unsupported export format: {format}")

    def write(self, path: str | Path, *, format: Literal["dot"] = "dot", label: object = "") -> Path:
        """Write the export to ``path`` and return it as a :class:`Path`."""

        target = Path(path)
        target.write_text(self.export(format=format, label=label) + "\n", encoding="utf-8")
        return target
