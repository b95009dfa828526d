"""Type alias exports."""

from .alias_registry import DEFAULT_OPAQUE_TYPES, DEFAULT_TYPE_ALIASES, TypeAliasRegistry
from .type_names import canonical_type_name, strip_annotated

__all__ = [
    "DEFAULT_OPAQUE_TYPES",
    "DEFAULT_TYPE_ALIASES",
    "TypeAliasRegistry",
    "canonical_type_name",
    "strip_annotated",
]
