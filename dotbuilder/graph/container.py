"""Graph containers and the recursive DOT serializer."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Mapping, Optional, Union

from dotbuilder.config import indent_width

from .attributes import STATEMENT_KINDS, format_attribute_list, format_typed
from .ids import IdAllocator, allocate
from .model import Edge, Entity, Node, Record, normalize_params

ANCHOR_ATTRIBUTES: Mapping[str, object] = {
    "fontsize": 0,
    "style": "invis",
    "area": 0,
    "margin": "0,0",
    "fixedsize": True,
    "width": 0,
    "height": 0,
}


@dataclass(frozen=True)
class RenderContext:
    """Read-only state threaded through one serialization pass."""

    oriented: bool = False
    indent: str = "  "
    level: int = 0

    def nested(self) -> "RenderContext":
        return replace(self, level=self.level + 1)

    @property
    def padding(self) -> str:
        return self.indent * self.level


Item = Union[Node, Edge, Record, "BaseGraph"]


class BaseGraph(Entity):
    """Ordered collection of items plus container-level attributes and params.

    Recognised params are ``is_oriented``, ``is_strict``, ``is_cluster`` and the
    default attribute maps ``graph``, ``node`` and ``edge``.  Orientation is
    decided by the outermost container being serialized and handed down to
    nested subgraphs and edges without touching their stored state.
    """

    def __init__(self, label: object = "", *, allocator: Optional[IdAllocator] = None) -> None:
        super().__init__()
        self._allocator = allocator
        self._id = allocate(allocator)
        self.label = label
        self.items: list[Item] = []
        self.params: dict = {}

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"{self.__class__.__name__}(id={self.id!r}, items={len(self.items)})"

    @property
    def id(self) -> Union[int, str]:
        return self._id

    def set_label(self, label: object) -> "BaseGraph":
        self.label = label
        return self

    def add(self, *items: Item) -> "BaseGraph":
        """Append ``items`` in order. Containment cycles are not checked."""

        self.items.extend(items)
        return self

    def set_params(self, params: Optional[Mapping[str, object]] = None, **extra: object) -> "BaseGraph":
        """Merge ``params`` into the container parameters; last write wins."""

        self.params.update(normalize_params(params, extra))
        return self

    def serialize(self, indent_level: int = 0) -> str:
        """Render this container and everything it holds as DOT text.

        ``indent_level`` indents the whole block, header line included.
        """

        context = RenderContext(
            oriented=bool(self.params.get("is_oriented")),
            indent=" " * indent_width(),
            level=indent_level,
        )
        return context.padding + self.render(context)

    def header(self, context: RenderContext) -> str:  # pragma: no cover - interface
        raise NotImplementedError

    def render(self, context: RenderContext) -> str:
        inner = context.nested()
        statements = []

        own = format_attribute_list({**self.attributes, "label": self.label})
        if own:
            statements.append(own)
        for kind in STATEMENT_KINDS:
            typed = format_typed(kind, self.params.get(kind))
            if typed:
                statements.append(typed)
        statements.extend(_render_item(item, inner) for item in self.items)

        body = "".join(f"{inner.padding}{statement};\n" for statement in statements)
        return f"{self.header(context)} {{\n{body}{context.padding}}}"


def _render_item(item: Item, context: RenderContext) -> str:
    if isinstance(item, BaseGraph):
        return item.render(context)
    if isinstance(item, Edge):
        return item.serialize(oriented=context.oriented)
    return item.serialize()


class Graph(BaseGraph):
    """Document root rendered as ``[strict] digraph|graph "<id>" { ... }``."""

    def header(self, context: RenderContext) -> str:
        keyword = "digraph" if context.oriented else "graph"
        prefix = "strict " if self.params.get("is_strict") else ""
        return f'{prefix}{keyword} "{self.id}"'


class Subgraph(BaseGraph):
    """Nested container rendered as ``subgraph "<id>" { ... }``.

    An invisible zero-size :attr:`anchor` node is always the first item so edges
    can attach to the subgraph even when it holds nothing else.
    """

    def __init__(self, label: object = "", *, allocator: Optional[IdAllocator] = None) -> None:
        super().__init__(label, allocator=allocator)
        self.anchor = Node(" ", allocator=self._allocator).set_attributes(ANCHOR_ATTRIBUTES)
        self.add(self.anchor)

    @property
    def id(self) -> str:
        prefix = "cluster" if self.params.get("is_cluster") else ""
        return f"{prefix}{self._id}"

    def header(self, context: RenderContext) -> str:
        return f'subgraph "{self.id}"'


__all__ = ["ANCHOR_ATTRIBUTES", "BaseGraph", "Graph", "Item", "RenderContext", "Subgraph"]
