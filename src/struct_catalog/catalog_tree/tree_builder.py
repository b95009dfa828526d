"""Recursive structural walk that builds the catalog tree."""

from __future__ import annotations

import dataclasses
import logging
from typing import Any

from struct_catalog.type_shapes import FieldSpec, ShapeKind, ShapeResolver

from .tree_models import CatalogNode, FieldDescriptor

_LOGGER = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 32

SEQUENCE_NAME_PREFIX = "[]"


class TreeDepthError(Exception):
    """Raised when a type nests deeper than the configured limit."""


def build_tree(
    node: CatalogNode,
    annotation: Any,
    resolver: ShapeResolver,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> None:
    """Expand ``annotation`` into children of ``node``.

    Composite fields become child nodes in declaration order. A sequence
    renames ``node`` and expands its element type into the same node. Scalar
    and opaque types leave ``node`` as a leaf.

    Raises:
      TreeDepthError: If expansion exceeds ``max_depth`` levels, which is how
        self-referential types surface.
    """
    _build(node, annotation, resolver, depth=0, max_depth=max_depth)


def _build(
    node: CatalogNode,
    annotation: Any,
    resolver: ShapeResolver,
    *,
    depth: int,
    max_depth: int,
) -> None:
    if depth > max_depth:
        raise TreeDepthError(
            f"Type nesting exceeds max depth {max_depth} at "
            f"'{node.descriptor.name or node.descriptor.type}'."
        )

    shape = resolver.resolve(annotation)
    if shape.kind is ShapeKind.COMPOSITE:
        for spec in shape.fields:
            child = node.add_child(_field_descriptor(spec, resolver))
            _build(child, spec.annotation, resolver, depth=depth + 1, max_depth=max_depth)
        return

    if shape.kind is ShapeKind.SEQUENCE:
        current = node.descriptor
        name = f"{SEQUENCE_NAME_PREFIX}{current.name}" if current.name else shape.label
        node.descriptor = dataclasses.replace(current, name=name)
        _LOGGER.debug("Expanding sequence %s as %s", shape.label, name)
        _build(node, shape.element, resolver, depth=depth + 1, max_depth=max_depth)


def _field_descriptor(spec: FieldSpec, resolver: ShapeResolver) -> FieldDescriptor:
    return FieldDescriptor(
        name=spec.catalog_name,
        type=resolver.label_for(spec.annotation),
        description=spec.description,
        default=spec.default,
    )
