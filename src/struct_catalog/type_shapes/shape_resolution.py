"""Classification of type annotations into catalog shapes."""

from __future__ import annotations

import collections.abc
import dataclasses
import logging
from collections.abc import Mapping
from types import NoneType, UnionType
from typing import Annotated, Any, TypeVar, Union, get_args, get_origin, get_type_hints

from struct_catalog.type_aliases import TypeAliasRegistry, canonical_type_name

from .field_tags import DEFAULT_KEY, DESCRIPTION_KEY, WIRE_NAME_KEY
from .shape_models import FieldSpec, ShapeKind, TypeShape

_LOGGER = logging.getLogger(__name__)

_SEQUENCE_ORIGINS = frozenset(
    {
        list,
        tuple,
        set,
        frozenset,
        collections.abc.Sequence,
        collections.abc.MutableSequence,
        collections.abc.Set,
        collections.abc.MutableSet,
        collections.abc.Collection,
        collections.abc.Iterable,
    }
)

_NOT_A_SEQUENCE = object()


class ShapeError(Exception):
    """Raised when a type cannot be classified or carries invalid field metadata."""


class ShapeResolver:
    """Classify annotations once and serve cached shapes afterwards."""

    def __init__(self, registry: TypeAliasRegistry | None = None) -> None:
        self._registry = registry or TypeAliasRegistry()
        self._cache: dict[Any, TypeShape] = {}

    @property
    def registry(self) -> TypeAliasRegistry:
        return self._registry

    def label_for(self, annotation: Any) -> str:
        return self._registry.label_for(annotation)

    def resolve(self, annotation: Any) -> TypeShape:
        """Return the shape of ``annotation``."""
        try:
            cached = self._cache.get(annotation)
        except TypeError:
            return self._classify(annotation)
        if cached is None:
            cached = self._classify(annotation)
            self._cache[annotation] = cached
        return cached

    def _classify(self, annotation: Any) -> TypeShape:
        label = self._registry.label_for(annotation)
        target = _dispatch_target(annotation)

        if self._registry.is_opaque(target):
            return TypeShape(kind=ShapeKind.OPAQUE, label=label)

        composite = _dataclass_origin(target)
        if composite is not None:
            fields = _composite_fields(composite, _type_bindings(composite, target))
            _LOGGER.debug("Resolved composite %s with %d fields", label, len(fields))
            return TypeShape(kind=ShapeKind.COMPOSITE, label=label, fields=fields)

        element = _sequence_element(target)
        if element is not _NOT_A_SEQUENCE:
            return TypeShape(kind=ShapeKind.SEQUENCE, label=label, element=element)

        return TypeShape(kind=ShapeKind.SCALAR, label=label)


def _dispatch_target(annotation: Any) -> Any:
    """Strip ``Annotated`` wrappers and single-member optionals."""
    while True:
        origin = get_origin(annotation)
        if origin is Annotated:
            annotation = get_args(annotation)[0]
            continue
        if origin is Union or origin is UnionType:
            members = [arg for arg in get_args(annotation) if arg is not NoneType]
            if len(members) == 1:
                annotation = members[0]
                continue
        return annotation


def _sequence_element(tp: Any) -> Any:
    try:
        if tp in _SEQUENCE_ORIGINS:
            return Any
    except TypeError:
        return _NOT_A_SEQUENCE

    if get_origin(tp) not in _SEQUENCE_ORIGINS:
        return _NOT_A_SEQUENCE
    args = get_args(tp)
    if get_origin(tp) is tuple:
        # Only homogeneous tuples are sequences; fixed-shape tuples stay scalar.
        if len(args) == 2 and args[1] is Ellipsis:
            return args[0]
        return _NOT_A_SEQUENCE
    return args[0] if args else Any


def _dataclass_origin(target: Any) -> type | None:
    """Return the dataclass behind ``target``, including parametrized generics."""
    for candidate in (target, get_origin(target)):
        if isinstance(candidate, type) and dataclasses.is_dataclass(candidate):
            return candidate
    return None


def _type_bindings(cls: type, target: Any) -> dict[Any, Any]:
    if target is cls:
        return {}
    return dict(zip(getattr(cls, "__parameters__", ()), get_args(target), strict=False))


def _bind_type_arguments(annotation: Any, bindings: Mapping[Any, Any]) -> Any:
    if not bindings or isinstance(annotation, type):
        return annotation
    if isinstance(annotation, TypeVar):
        return bindings.get(annotation, annotation)
    parameters = getattr(annotation, "__parameters__", ())
    if not parameters:
        return annotation
    return annotation[tuple(bindings.get(parameter, parameter) for parameter in parameters)]


def _composite_fields(cls: type, bindings: Mapping[Any, Any]) -> tuple[FieldSpec, ...]:
    try:
        hints = get_type_hints(cls, include_extras=True)
    except (NameError, TypeError) as exc:
        raise ShapeError(
            f"Cannot resolve field annotations of {canonical_type_name(cls)}: {exc}"
        ) from exc

    specs: list[FieldSpec] = []
    for field in dataclasses.fields(cls):
        location = f"{canonical_type_name(cls)}.{field.name}"
        specs.append(
            FieldSpec(
                identifier=field.name,
                wire_name=_wire_name(field.metadata, location),
                annotation=_bind_type_arguments(hints.get(field.name, field.type), bindings),
                description=_metadata_text(field.metadata, DESCRIPTION_KEY, location),
                default=_metadata_text(field.metadata, DEFAULT_KEY, location),
            )
        )
    return tuple(specs)


def _wire_name(metadata: Mapping[str, Any], location: str) -> str:
    # JSON-tag style values ("e,omitempty") keep only the name part.
    raw = _metadata_text(metadata, WIRE_NAME_KEY, location)
    return raw.split(",", 1)[0].strip()


def _metadata_text(metadata: Mapping[str, Any], key: str, location: str) -> str:
    value = metadata.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ShapeError(f"{location}: metadata '{key}' must be a string.")
    return value
