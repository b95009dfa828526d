"""Field metadata keys understood by the catalog."""

from __future__ import annotations

import dataclasses
from typing import Any

WIRE_NAME_KEY = "name"
DESCRIPTION_KEY = "description"
DEFAULT_KEY = "default"


def catalog_field(
    *,
    wire_name: str = "",
    description: str = "",
    default_literal: str = "",
    **field_kwargs: Any,
) -> Any:
    """Return a ``dataclasses.field`` carrying catalog metadata.

    Args:
      wire_name: Externally visible field name used for catalog paths.
      description: Human-readable description of the field.
      default_literal: Declared default, recorded verbatim and never evaluated.
      field_kwargs: Passed through to ``dataclasses.field`` (``default``,
        ``default_factory``, ``metadata`` ...).

    Returns:
      The dataclass field specifier.
    """
    metadata = dict(field_kwargs.pop("metadata", None) or {})
    if wire_name:
        metadata[WIRE_NAME_KEY] = wire_name
    if description:
        metadata[DESCRIPTION_KEY] = description
    if default_literal:
        metadata[DEFAULT_KEY] = default_literal
    return dataclasses.field(metadata=metadata, **field_kwargs)
