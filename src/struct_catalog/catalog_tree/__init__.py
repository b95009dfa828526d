"""Catalog tree exports."""

from .flattener import flatten
from .tree_builder import DEFAULT_MAX_DEPTH, TreeDepthError, build_tree
from .tree_models import CatalogNode, FieldDescriptor

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "CatalogNode",
    "FieldDescriptor",
    "TreeDepthError",
    "build_tree",
    "flatten",
]
