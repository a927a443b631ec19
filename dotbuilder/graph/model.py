"""Leaf entities of a DOT document: nodes, edges and record label cells."""
from __future__ import annotations

import logging
from typing import Iterable, Mapping, Optional, Union

from dotbuilder.config import strict_ports

from .attributes import AttributeSet, format_attributes
from .ids import IdAllocator, allocate

LOGGER = logging.getLogger(__name__)

PARAM_ALIASES: Mapping[str, str] = {
    "isOriented": "is_oriented",
    "isStrict": "is_strict",
    "isCluster": "is_cluster",
}


def normalize_params(params: Optional[Mapping[str, object]], extra: Mapping[str, object]) -> dict:
    """Merge ``params`` and ``extra`` into one dict with canonical key names."""

    merged: dict = {}
    for source in (params or {}, extra):
        for key, value in source.items():
            merged[PARAM_ALIASES.get(key, key)] = value
    return merged


class UnattachedCellError(RuntimeError):
    """Raised when a cell port address is read before the cell is attached."""


class Entity:
    """Shared attribute bookkeeping for every renderable entity."""

    def __init__(self) -> None:
        self.attributes: dict = {}

    def set_attributes(self, attributes: Optional[AttributeSet] = None, **extra: object) -> "Entity":
        """Merge ``attributes`` (and keyword ``extra``) into the entity; last write wins."""

        self.attributes.update(attributes or {})
        self.attributes.update(extra)
        return self

    def serialize(self) -> str:  # pragma: no cover - interface
        raise NotImplementedError

    def __str__(self) -> str:
        return self.serialize()


class Node(Entity):
    """A plain DOT node."""

    def __init__(self, label: object, *, allocator: Optional[IdAllocator] = None) -> None:
        super().__init__()
        self.id = allocate(allocator)
        self.label = label

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"{self.__class__.__name__}(id={self.id!r}, label={self.label!r})"

    def serialize(self) -> str:
        block = format_attributes({**self.attributes, "label": self.label})
        return f"{self.id} {block}" if block else str(self.id)


class _PortField:
    """Record label field addressable as ``"<node_id>:<cell_id>"``."""

    def __init__(self, allocator: Optional[IdAllocator]) -> None:
        self.cell_id = allocate(allocator)
        self.node_id: Optional[int] = None

    @property
    def id(self) -> str:
        if self.node_id is None:
            message = (
                f"Cell {self.cell_id} should be added to a Record or to another Cell "
                "before its port address is used"
            )
            if strict_ports():
                raise UnattachedCellError(message)
            LOGGER.warning(message)
        return f"{self.node_id}:{self.cell_id}"

    def set_node_id(self, node_id: Optional[int]) -> None:
        self.node_id = node_id

    def serialize(self) -> str:  # pragma: no cover - interface
        raise NotImplementedError

    def __str__(self) -> str:
        return self.serialize()


class LabelCell(_PortField):
    """A leaf field of a record label."""

    def __init__(self, label: object, *, allocator: Optional[IdAllocator] = None) -> None:
        super().__init__(allocator)
        self.label = label

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"{self.__class__.__name__}(cell_id={self.cell_id!r}, label={self.label!r})"

    def serialize(self) -> str:
        return f"<{self.cell_id}> {self.label}"


CellLike = Union[LabelCell, "Cell"]


def compose_label(cells: Iterable[CellLike]) -> str:
    """Join rendered ``cells`` into one record label partition.

    Several cells are wrapped as ``{a|b}``, a single cell renders as itself,
    and no cells give an empty label.
    """

    rendered = [cell.serialize() for cell in cells]
    if len(rendered) > 1:
        return "{" + "|".join(rendered) + "}"
    return rendered[0] if rendered else ""


class Cell(_PortField):
    """A partition of a record label holding nested cells."""

    def __init__(self, *cells: CellLike, allocator: Optional[IdAllocator] = None) -> None:
        super().__init__(allocator)
        self.cells: list[CellLike] = []
        self.add(*cells)

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"{self.__class__.__name__}(cell_id={self.cell_id!r}, cells={len(self.cells)})"

    def set_node_id(self, node_id: Optional[int]) -> None:
        self.node_id = node_id
        for cell in self.cells:
            cell.set_node_id(node_id)

    def add(self, *cells: CellLike) -> "Cell":
        """Append ``cells``, attaching them to this cell's record if known."""

        for cell in cells:
            cell.set_node_id(self.node_id)
        self.cells.extend(cells)
        return self

    def serialize(self) -> str:
        if not self.cells:
            # empty field still exposes the cell's own port
            return f"<{self.cell_id}> "
        return compose_label(self.cells)


class Record(Entity):
    """A node with ``shape=record`` whose label is built from cells."""

    def __init__(self, *cells: CellLike, allocator: Optional[IdAllocator] = None) -> None:
        super().__init__()
        self.id = allocate(allocator)
        self.cells: list[CellLike] = []
        self.add(*cells)

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"{self.__class__.__name__}(id={self.id!r}, cells={len(self.cells)})"

    def add(self, *cells: CellLike) -> "Record":
        """Append ``cells`` and attach them (and their descendants) to this record."""

        for cell in cells:
            cell.set_node_id(self.id)
        self.cells.extend(cells)
        return self

    @property
    def label(self) -> str:
        return compose_label(self.cells)

    def serialize(self) -> str:
        attributes = {**self.attributes, "label": self.label, "shape": "record"}
        return f"{self.id} {format_attributes(attributes)}"


Endpoint = Union[Node, Record, LabelCell, Cell]


class Edge(Entity):
    """An edge, or a chain of edges when given more than two endpoints."""

    def __init__(self, source: Endpoint, *targets: Endpoint) -> None:
        if not targets:
            raise TypeError("Edge requires at least one target endpoint")
        super().__init__()
        self.endpoints: list[Endpoint] = [source, *targets]
        self.params: dict = {"is_oriented": True}

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"{self.__class__.__name__}(endpoints={len(self.endpoints)})"

    def set_params(self, params: Optional[Mapping[str, object]] = None, **extra: object) -> "Edge":
        """Merge ``params`` into the edge parameters; last write wins."""

        self.params.update(normalize_params(params, extra))
        return self

    def serialize(self, oriented: Optional[bool] = None) -> str:
        """Render the edge statement.

        ``oriented`` is supplied by the enclosing container; without it the
        edge falls back to its own ``is_oriented`` parameter.
        """

        if oriented is None:
            oriented = bool(self.params.get("is_oriented"))
        separator = " -> " if oriented else " -- "
        chain = separator.join(f'"{endpoint.id}"' for endpoint in self.endpoints)
        block = format_attributes(self.attributes)
        return f"{chain} {block}" if block else chain


__all__ = [
    "Cell",
    "Edge",
    "Endpoint",
    "Entity",
    "LabelCell",
    "Node",
    "PARAM_ALIASES",
    "Record",
    "UnattachedCellError",
    "compose_label",
    "normalize_params",
]
