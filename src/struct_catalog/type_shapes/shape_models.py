"""Type shape entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ShapeKind(str, Enum):
    """Structural kinds the tree builder dispatches on."""

    SCALAR = "scalar"
    COMPOSITE = "composite"
    SEQUENCE = "sequence"
    OPAQUE = "opaque"


@dataclass(frozen=True)
class FieldSpec:
    """One declared field of a composite type."""

    identifier: str
    wire_name: str
    annotation: Any
    description: str = ""
    default: str = ""

    @property
    def catalog_name(self) -> str:
        return self.wire_name or self.identifier


@dataclass(frozen=True)
class TypeShape:
    """Classified view of a type annotation.

    ``fields`` is populated for composites only and ``element`` holds the
    element annotation of a sequence.
    """

    kind: ShapeKind
    label: str
    fields: tuple[FieldSpec, ...] = ()
    element: Any = None
