"""Catalog generation exports."""

from .catalog_use_case import generate_catalog, generate_catalog_from_settings, get_meta

__all__ = [
    "generate_catalog",
    "generate_catalog_from_settings",
    "get_meta",
]
