"""Flattener tests."""

from __future__ import annotations

from struct_catalog.catalog_tree import CatalogNode, FieldDescriptor, flatten


def _node(name: str = "", type_: str = "str") -> CatalogNode:
    return CatalogNode(descriptor=FieldDescriptor(name=name, type=type_))


def test_leaf_root_emits_its_own_descriptor() -> None:
    root = _node(type_="int")

    assert flatten(root, []) == [FieldDescriptor(name="", type="int")]


def test_names_are_dot_joined_below_named_nodes() -> None:
    root = _node()
    outer = root.add_child(FieldDescriptor(name="outer", type="Outer"))
    inner = outer.add_child(FieldDescriptor(name="inner", type="Inner"))
    inner.add_child(FieldDescriptor(name="leaf", type="int"))
    root.add_child(FieldDescriptor(name="sibling", type="str"))

    fields = flatten(root, [])

    assert [field.name for field in fields] == ["outer.inner.leaf", "sibling"]


def test_descriptions_concatenate_only_when_both_present() -> None:
    root = _node()
    parent = root.add_child(FieldDescriptor(name="z", type="Z", description="D1"))
    parent.add_child(FieldDescriptor(name="e", type="int", description="D2"))
    parent.add_child(FieldDescriptor(name="f", type="int"))
    plain = root.add_child(FieldDescriptor(name="y", type="Y"))
    plain.add_child(FieldDescriptor(name="g", type="int", description="D3"))

    fields = flatten(root, [])

    assert [(field.name, field.description) for field in fields] == [
        ("z.e", "D1. D2"),
        ("z.f", ""),
        ("y.g", "D3"),
    ]


def test_descriptions_accumulate_across_levels() -> None:
    root = _node()
    top = root.add_child(FieldDescriptor(name="a", type="A", description="Top"))
    middle = top.add_child(FieldDescriptor(name="b", type="B", description="Middle"))
    middle.add_child(FieldDescriptor(name="c", type="int", description="Leaf", default="1"))

    assert flatten(root, []) == [
        FieldDescriptor(name="a.b.c", type="int", description="Top. Middle. Leaf", default="1")
    ]


def test_unnamed_intermediate_node_does_not_prefix() -> None:
    root = _node()
    anonymous = root.add_child(FieldDescriptor(name="", type="Anon"))
    anonymous.add_child(FieldDescriptor(name="x", type="int"))

    assert [field.name for field in flatten(root, [])] == ["x"]


def test_flatten_appends_to_the_given_accumulator() -> None:
    existing = FieldDescriptor(name="earlier", type="int")
    accumulator = [existing]
    root = _node()
    root.add_child(FieldDescriptor(name="x", type="int"))

    result = flatten(root, accumulator)

    assert result is accumulator
    assert [field.name for field in accumulator] == ["earlier", "x"]
