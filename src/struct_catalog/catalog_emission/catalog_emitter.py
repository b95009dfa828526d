"""JSON encoding of catalog field descriptors."""

from __future__ import annotations

import json
from collections.abc import Sequence

from struct_catalog.catalog_tree.tree_models import FieldDescriptor


class CatalogEncodingError(Exception):
    """Raised when a catalog cannot be serialized."""


def to_catalog_entries(fields: Sequence[FieldDescriptor]) -> list[dict[str, str]]:
    """Return one JSON-ready mapping per field; empty description/default are omitted."""
    entries: list[dict[str, str]] = []
    for field in fields:
        entry = {"name": field.name, "type": field.type}
        if field.description:
            entry["description"] = field.description
        if field.default:
            entry["default"] = field.default
        entries.append(entry)
    return entries


def encode_catalog(fields: Sequence[FieldDescriptor], *, indent: int | None = None) -> str:
    """Serialize ``fields`` as a JSON array.

    Raises:
      CatalogEncodingError: If a descriptor holds a value JSON cannot encode.
    """
    try:
        return json.dumps(to_catalog_entries(fields), indent=indent, ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        raise CatalogEncodingError(f"Failed to encode catalog: {exc}") from exc
