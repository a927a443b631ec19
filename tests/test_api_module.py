"""Tests for the public factory surface in :mod:`dotbuilder.api`."""

from __future__ import annotations

import dotbuilder as dot
from dotbuilder.api import DotBuilder
from dotbuilder.graph import Cell, Edge, Graph, LabelCell, Node, Record, Subgraph


def test_factories_return_entities():
    assert isinstance(dot.node("n"), Node)
    assert isinstance(dot.label_cell("c"), LabelCell)
    assert isinstance(dot.cell(), Cell)
    assert isinstance(dot.record(), Record)
    assert isinstance(dot.graph(), Graph)
    assert isinstance(dot.subgraph(), Subgraph)
    assert isinstance(dot.edge(dot.node("a"), dot.node("b")), Edge)
    assert dot.labelCell is dot.label_cell


def test_default_factories_share_identifier_space():
    created = [
        dot.node("a").id,
        dot.record().id,
        dot.label_cell("c").cell_id,
        dot.cell().cell_id,
        dot.graph().id,
        int(dot.subgraph().id),
    ]
    assert len(set(created)) == len(created)


def test_hello_world_scenario():
    hello = dot.node("hello")
    world = dot.node("world")
    document = dot.graph().set_params({"isOriented": True}).add(hello, world, dot.edge(hello, world))

    text = str(document)
    lines = text.splitlines()

    assert lines[0] == f'digraph "{document.id}" {{'
    assert lines[1:4] == [
        f'  {hello.id} [label = "hello"];',
        f'  {world.id} [label = "world"];',
        f'  "{hello.id}" -> "{world.id}";',
    ]
    assert lines[-1] == "}"


def test_cluster_via_factories():
    sub = dot.subgraph().set_params(isCluster=True)
    document = dot.graph().add(sub)
    assert sub.id.startswith("cluster")
    assert f'subgraph "{sub.id}" {{' in document.serialize()


def test_builder_owns_its_allocator():
    first = DotBuilder()
    second = DotBuilder()

    hello = first.node("hello")
    world = first.node("world")
    document = first.graph().set_params(is_oriented=True).add(hello, world, first.edge(hello, world))

    assert second.node("other").id == 0
    assert document.serialize() == (
        'digraph "2" {\n'
        '  0 [label = "hello"];\n'
        '  1 [label = "world"];\n'
        '  "0" -> "1";\n'
        "}"
    )


def test_builder_record_and_subgraph():
    builder = DotBuilder()
    name = builder.label_cell("name")
    row = builder.record(builder.cell(name, builder.label_cell("type")))
    sub = builder.subgraph("group").add(row)
    document = builder.graph().add(sub)

    rendered = document.serialize()

    assert name.id == f"{row.id}:{name.cell_id}"
    assert 'subgraph "4" {' in rendered
    assert '    3 [label = "{<0> name|<1> type}"; shape = "record"];\n' in rendered
