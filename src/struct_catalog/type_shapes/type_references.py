"""Resolution of ``module:Qualified.Name`` type references."""

from __future__ import annotations

import importlib
from typing import Any

from .shape_resolution import ShapeError


def load_type_reference(reference: str) -> Any:
    """Import the object named by ``reference``.

    Args:
      reference: ``package.module:Name`` or ``package.module:Outer.Inner``.

    Returns:
      The referenced object, normally a class.

    Raises:
      ShapeError: If the reference is malformed, the module cannot be imported
        or the attribute path does not exist.
    """
    module_name, separator, qualname = reference.strip().partition(":")
    if not separator or not module_name or not qualname:
        raise ShapeError(f"Type reference must look like 'module:Name': {reference!r}")

    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise ShapeError(f"Cannot import module '{module_name}': {exc}") from exc

    for attribute in qualname.split("."):
        try:
            target = getattr(target, attribute)
        except AttributeError as exc:
            raise ShapeError(f"'{qualname}' not found in module '{module_name}'.") from exc
    return target
