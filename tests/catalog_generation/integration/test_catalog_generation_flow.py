"""End-to-end catalog generation tests."""

from __future__ import annotations

import json
import uuid
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Annotated, Generic, TypeVar

import pytest
from struct_catalog import (
    FieldDescriptor,
    TypeAliasRegistry,
    catalog_field,
    generate_catalog,
    get_meta,
)
from struct_catalog.catalog_generation import generate_catalog_from_settings
from struct_catalog.catalog_tree import TreeDepthError
from struct_catalog.configuration import CatalogSettings


@dataclass
class Reading:
    e: int
    f: bool = catalog_field(default_literal="false", description="Some type F")
    g: datetime = catalog_field(default_factory=datetime.now)


@dataclass
class Batch:
    code: str = catalog_field(wire_name="c")
    d: uuid.UUID = catalog_field(default_factory=uuid.uuid4)
    z: Reading = catalog_field(default_factory=lambda: Reading(e=0))
    s: list[str] = catalog_field(
        default_factory=list, default_literal="['a', 'b']", description="A slice of string"
    )
    t: list[Reading] = catalog_field(default_factory=list, description="A slice of structures")


@dataclass
class Documented:
    d: Annotated[uuid.UUID, "doc"]
    g: Annotated[datetime, "doc"]


T = TypeVar("T")


@dataclass
class Box(Generic[T]):
    item: T
    n: int


@dataclass
class Holder:
    box: Box[int]


@dataclass
class Empty:
    pass


@dataclass
class WithMarker:
    marker: Empty
    amount: Decimal


def test_nested_type_produces_declaration_ordered_leaf_catalog() -> None:
    fields = generate_catalog(Batch)

    assert fields == [
        FieldDescriptor(name="c", type="str"),
        FieldDescriptor(name="d", type="uuid"),
        FieldDescriptor(name="z.e", type="int"),
        FieldDescriptor(name="z.f", type="bool", description="Some type F", default="false"),
        FieldDescriptor(name="z.g", type="timestamp"),
        FieldDescriptor(
            name="[]s",
            type="list[str]",
            description="A slice of string",
            default="['a', 'b']",
        ),
        FieldDescriptor(name="[]t.e", type="int"),
        FieldDescriptor(
            name="[]t.f",
            type="bool",
            description="A slice of structures. Some type F",
            default="false",
        ),
        FieldDescriptor(name="[]t.g", type="timestamp"),
    ]


def test_get_meta_emits_json_with_optional_keys_omitted() -> None:
    catalog = json.loads(get_meta(Reading))

    assert catalog == [
        {"name": "e", "type": "int"},
        {"name": "f", "type": "bool", "description": "Some type F", "default": "false"},
        {"name": "g", "type": "timestamp"},
    ]


def test_get_meta_is_idempotent() -> None:
    assert get_meta(Batch) == get_meta(Batch)


def test_concurrent_invocations_do_not_interfere() -> None:
    expected = get_meta(Batch)

    with ThreadPoolExecutor(max_workers=4) as executor:
        results = list(executor.map(get_meta, [Batch, Reading] * 8))

    assert results[::2] == [expected] * 8
    assert results[1::2] == [get_meta(Reading)] * 8


def test_scalar_root_emits_one_unnamed_descriptor() -> None:
    assert generate_catalog(int) == [FieldDescriptor(name="", type="int")]


def test_sequence_root_is_named_after_its_type() -> None:
    fields = generate_catalog(list[Reading])

    prefix = f"list[{__name__}.Reading]"
    assert [field.name for field in fields] == [f"{prefix}.e", f"{prefix}.f", f"{prefix}.g"]


def test_zero_field_composite_is_emitted_as_a_leaf() -> None:
    fields = generate_catalog(WithMarker)

    assert fields == [
        FieldDescriptor(name="marker", type=f"{__name__}.Empty"),
        FieldDescriptor(name="amount", type="decimal.Decimal"),
    ]


def test_custom_registry_aliases_and_opaque_types() -> None:
    registry = TypeAliasRegistry(
        aliases={Decimal: "decimal", Reading: "reading"}, opaque_types=[Reading]
    )

    catalog = json.loads(get_meta(WithMarker, registry=registry, indent=2))
    batch = generate_catalog(Batch, registry=registry)

    assert catalog[1] == {"name": "amount", "type": "decimal"}
    assert FieldDescriptor(name="z", type="reading") in batch
    assert [field.name for field in batch if field.name.startswith("[]t")] == ["[]t"]


def test_settings_drive_depth_limit() -> None:
    with pytest.raises(TreeDepthError):
        generate_catalog_from_settings(Batch, CatalogSettings(max_depth=1))

    fields = generate_catalog_from_settings(Batch, CatalogSettings.defaults())
    assert len(fields) == 9


def test_annotated_fields_keep_their_aliases() -> None:
    assert generate_catalog(Documented) == [
        FieldDescriptor(name="d", type="uuid"),
        FieldDescriptor(name="g", type="timestamp"),
    ]


def test_parametrized_generic_dataclass_fields_are_expanded() -> None:
    assert generate_catalog(Holder) == [
        FieldDescriptor(name="box.item", type="int"),
        FieldDescriptor(name="box.n", type="int"),
    ]
