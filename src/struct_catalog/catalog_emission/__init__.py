"""Catalog emission exports."""

from .catalog_emitter import CatalogEncodingError, encode_catalog, to_catalog_entries

__all__ = [
    "CatalogEncodingError",
    "encode_catalog",
    "to_catalog_entries",
]
