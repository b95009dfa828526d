"""Canonical display names for type annotations."""

from __future__ import annotations

from types import NoneType, UnionType
from typing import Annotated, Any, ForwardRef, Literal, Union, get_args, get_origin


def canonical_type_name(tp: Any) -> str:
    """Return a stable, human-readable name for a type annotation.

    Builtins keep their bare name (``int``), other classes are module-qualified
    (``uuid.UUID``), generics render their arguments (``list[str]``) and unions
    are joined with ``|``. ``typing`` aliases normalize to their runtime origin,
    so ``typing.List[int]`` and ``list[int]`` share one name.
    """
    if tp is Any:
        return "Any"
    if tp is None or tp is NoneType:
        return "None"
    if tp is Ellipsis:
        return "..."
    if isinstance(tp, str):
        return tp
    if isinstance(tp, ForwardRef):
        return tp.__forward_arg__

    tp = strip_annotated(tp)
    origin = get_origin(tp)
    if origin is Union or origin is UnionType:
        return " | ".join(canonical_type_name(arg) for arg in get_args(tp))
    if origin is Literal:
        return f"Literal[{', '.join(repr(arg) for arg in get_args(tp))}]"
    if origin is not None:
        base = canonical_type_name(origin)
        args = get_args(tp)
        if not args:
            return base
        return f"{base}[{', '.join(canonical_type_name(arg) for arg in args)}]"

    if isinstance(tp, type):
        if tp.__module__ == "builtins":
            return tp.__qualname__
        return f"{tp.__module__}.{tp.__qualname__}"
    return repr(tp)


def strip_annotated(tp: Any) -> Any:
    """Return the type wrapped by any number of ``Annotated`` layers."""
    while get_origin(tp) is Annotated:
        tp = get_args(tp)[0]
    return tp

