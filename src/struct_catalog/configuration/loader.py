"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from struct_catalog.catalog_tree import DEFAULT_MAX_DEPTH
from struct_catalog.type_shapes import ShapeError, load_type_reference

from .runtime_settings import CatalogSettings


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> CatalogSettings:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    max_depth, indent = _parse_catalog_section(parsed.get("catalog"))
    return CatalogSettings(
        path=path,
        max_depth=max_depth,
        indent=indent,
        type_aliases=_parse_type_aliases(parsed.get("type_aliases")),
        opaque_types=_parse_opaque_types(parsed.get("opaque_types")),
    )


def _parse_catalog_section(value: Any) -> tuple[int, int | None]:
    if value is None:
        return DEFAULT_MAX_DEPTH, None
    section = _require_mapping(value, "catalog")
    max_depth = _require_positive_int(
        section.get("max_depth", DEFAULT_MAX_DEPTH), "catalog.max_depth"
    )
    indent_raw = section.get("indent")
    indent = None if indent_raw is None else _require_positive_int(indent_raw, "catalog.indent")
    return max_depth, indent


def _parse_type_aliases(value: Any) -> dict[Any, str]:
    if value is None:
        return {}
    section = _require_mapping(value, "type_aliases")
    aliases: dict[Any, str] = {}
    for reference, label in section.items():
        if not isinstance(reference, str):
            raise ConfigurationError("type_aliases keys must be 'module:Type' strings.")
        target = _resolve_reference(reference, "type_aliases")
        aliases[target] = _require_non_empty_string(label, f"type_aliases['{reference}']")
    return aliases


def _parse_opaque_types(value: Any) -> frozenset[Any]:
    if value is None:
        return frozenset()
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise ConfigurationError("opaque_types must be a list of 'module:Type' strings.")
    resolved = []
    for item in value:
        reference = _require_non_empty_string(item, "opaque_types entries")
        resolved.append(_resolve_reference(reference, "opaque_types"))
    return frozenset(resolved)


def _resolve_reference(reference: str, section_name: str) -> Any:
    try:
        return load_type_reference(reference)
    except ShapeError as exc:
        raise ConfigurationError(f"{section_name}: {exc}") from exc


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
