"""Display labels for well-known opaque types."""

from __future__ import annotations

import uuid
from collections.abc import Iterable, Mapping
from datetime import datetime
from types import MappingProxyType
from typing import Any

from .type_names import canonical_type_name, strip_annotated

DEFAULT_TYPE_ALIASES: Mapping[Any, str] = MappingProxyType(
    {
        uuid.UUID: "uuid",
        datetime: "timestamp",
    }
)

DEFAULT_OPAQUE_TYPES: frozenset[Any] = frozenset({datetime})


class TypeAliasRegistry:
    """Static lookup of short type labels and of types never expanded into fields."""

    def __init__(
        self,
        aliases: Mapping[Any, str] | None = None,
        opaque_types: Iterable[Any] | None = None,
    ) -> None:
        merged = dict(DEFAULT_TYPE_ALIASES)
        merged.update(aliases or {})
        self._aliases: Mapping[Any, str] = MappingProxyType(merged)
        self._opaque_types = DEFAULT_OPAQUE_TYPES | frozenset(opaque_types or ())

    @property
    def aliases(self) -> Mapping[Any, str]:
        return self._aliases

    @property
    def opaque_types(self) -> frozenset[Any]:
        return self._opaque_types

    def lookup(self, tp: Any) -> tuple[str, bool]:
        """Return ``(label, True)`` for an aliased type and ``("", False)`` otherwise."""
        try:
            label = self._aliases.get(strip_annotated(tp))
        except TypeError:
            return "", False
        if label is None:
            return "", False
        return label, True

    def is_opaque(self, tp: Any) -> bool:
        try:
            return strip_annotated(tp) in self._opaque_types
        except TypeError:
            return False

    def label_for(self, tp: Any) -> str:
        """Return the alias label for ``tp``, falling back to its canonical name."""
        label, found = self.lookup(tp)
        return label if found else canonical_type_name(tp)
