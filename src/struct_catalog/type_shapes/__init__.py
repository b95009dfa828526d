"""Type shape exports."""

from .field_tags import DEFAULT_KEY, DESCRIPTION_KEY, WIRE_NAME_KEY, catalog_field
from .shape_models import FieldSpec, ShapeKind, TypeShape
from .shape_resolution import ShapeError, ShapeResolver
from .type_references import load_type_reference

__all__ = [
    "DEFAULT_KEY",
    "DESCRIPTION_KEY",
    "WIRE_NAME_KEY",
    "FieldSpec",
    "ShapeError",
    "ShapeKind",
    "ShapeResolver",
    "TypeShape",
    "catalog_field",
    "load_type_reference",
]
