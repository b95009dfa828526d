"""Configuration domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from struct_catalog.catalog_tree import DEFAULT_MAX_DEPTH


@dataclass(frozen=True)
class CatalogSettings:
    """Normalized catalog generation settings.

    ``type_aliases`` and ``opaque_types`` hold resolved type objects and are
    merged over the built-in registry defaults.
    """

    path: Path | None = None
    max_depth: int = DEFAULT_MAX_DEPTH
    indent: int | None = None
    type_aliases: Mapping[Any, str] = field(default_factory=dict)
    opaque_types: frozenset[Any] = frozenset()

    @classmethod
    def defaults(cls) -> CatalogSettings:
        return cls()
