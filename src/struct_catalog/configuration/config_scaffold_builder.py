"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "struct-catalog.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration template for struct-catalog.
# Every section is optional; remove what you do not need.

catalog:
  # Maximum nesting depth before a type is rejected as self-referential.
  max_depth: 32
  # Indentation of the emitted JSON. Remove for compact output.
  indent: 2

# Extra display labels, keyed by "module:Type" references.
# uuid:UUID -> uuid and datetime:datetime -> timestamp are always registered.
type_aliases:
  # "decimal:Decimal": decimal

# Types emitted as a single field and never expanded, as "module:Type" references.
# datetime:datetime is always opaque.
opaque_types:
  # - "datetime:date"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
