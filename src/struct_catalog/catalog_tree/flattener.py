"""Tree-to-list reduction of the catalog tree."""

from __future__ import annotations

import dataclasses

from .tree_models import CatalogNode, FieldDescriptor

PATH_SEPARATOR = "."
DESCRIPTION_SEPARATOR = ". "


def flatten(node: CatalogNode, accumulator: list[FieldDescriptor]) -> list[FieldDescriptor]:
    """Append the leaf descriptors under ``node`` to ``accumulator`` in declaration order.

    Children inherit their ancestors' names as a dotted prefix and their
    ancestors' descriptions as a ``". "``-joined prefix. Empty names and
    descriptions are never joined.
    """
    if not node.children:
        accumulator.append(node.descriptor)
        return accumulator

    parent = node.descriptor
    for child in node.children:
        inherited = child.descriptor
        if parent.name:
            inherited = dataclasses.replace(
                inherited, name=f"{parent.name}{PATH_SEPARATOR}{inherited.name}"
            )
        if parent.description and inherited.description:
            inherited = dataclasses.replace(
                inherited,
                description=f"{parent.description}{DESCRIPTION_SEPARATOR}{inherited.description}",
            )
        child.descriptor = inherited
        flatten(child, accumulator)
    return accumulator
