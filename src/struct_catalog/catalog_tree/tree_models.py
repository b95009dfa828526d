"""Catalog tree entities."""

from __future__ import annotations

import weakref
from dataclasses import dataclass, field


@dataclass(frozen=True)
class FieldDescriptor:
    """One leaf field of a catalog."""

    name: str
    type: str
    description: str = ""
    default: str = ""


@dataclass(eq=False)
class CatalogNode:
    """Transient tree node mirroring one field of the analyzed type.

    The parent link is a weak back-reference used only to tell the root apart;
    children are owned by their parent.
    """

    descriptor: FieldDescriptor
    children: list[CatalogNode] = field(default_factory=list)
    _parent: weakref.ref[CatalogNode] | None = field(default=None, repr=False)

    @property
    def parent(self) -> CatalogNode | None:
        return self._parent() if self._parent is not None else None

    @property
    def is_root(self) -> bool:
        return self._parent is None

    def add_child(self, descriptor: FieldDescriptor) -> CatalogNode:
        child = CatalogNode(descriptor=descriptor, _parent=weakref.ref(self))
        self.children.append(child)
        return child
