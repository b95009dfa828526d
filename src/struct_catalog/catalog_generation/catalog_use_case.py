"""Catalog generation use-case service."""

from __future__ import annotations

import logging
from typing import Any

from struct_catalog.catalog_emission import encode_catalog
from struct_catalog.catalog_tree import (
    DEFAULT_MAX_DEPTH,
    CatalogNode,
    FieldDescriptor,
    build_tree,
    flatten,
)
from struct_catalog.configuration.runtime_settings import CatalogSettings
from struct_catalog.type_aliases import TypeAliasRegistry
from struct_catalog.type_shapes import ShapeResolver

_LOGGER = logging.getLogger(__name__)


def generate_catalog(
    root_type: Any,
    *,
    registry: TypeAliasRegistry | None = None,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> list[FieldDescriptor]:
    """Build and flatten the field tree of ``root_type``.

    Every call works on its own tree and accumulator, so calls never observe
    each other's results.
    """
    resolver = ShapeResolver(registry)
    root = CatalogNode(descriptor=FieldDescriptor(name="", type=resolver.label_for(root_type)))
    build_tree(root, root_type, resolver, max_depth=max_depth)
    fields = flatten(root, [])
    _LOGGER.debug("Generated catalog for %s with %d fields", root.descriptor.type, len(fields))
    return fields


def get_meta(
    root_type: Any,
    *,
    registry: TypeAliasRegistry | None = None,
    max_depth: int = DEFAULT_MAX_DEPTH,
    indent: int | None = None,
) -> str:
    """Return the JSON catalog text describing the leaf fields of ``root_type``.

    Raises:
      CatalogEncodingError: If the catalog cannot be serialized.
      TreeDepthError: If ``root_type`` nests deeper than ``max_depth``.
      ShapeError: If a field declares invalid metadata.
    """
    fields = generate_catalog(root_type, registry=registry, max_depth=max_depth)
    return encode_catalog(fields, indent=indent)


def generate_catalog_from_settings(
    root_type: Any, settings: CatalogSettings
) -> list[FieldDescriptor]:
    """Generate a catalog using aliases and limits from loaded settings."""
    registry = TypeAliasRegistry(
        aliases=settings.type_aliases, opaque_types=settings.opaque_types
    )
    return generate_catalog(root_type, registry=registry, max_depth=settings.max_depth)
