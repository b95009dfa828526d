"""Flat field catalogs for nested dataclass types."""

from .catalog_generation import generate_catalog, get_meta
from .catalog_tree import FieldDescriptor
from .type_aliases import TypeAliasRegistry
from .type_shapes import catalog_field

__all__ = [
    "FieldDescriptor",
    "TypeAliasRegistry",
    "catalog_field",
    "generate_catalog",
    "get_meta",
]
