"""Resolve ``module:Name`` references to conversion target types."""

from __future__ import annotations

import importlib
from decimal import Decimal
from typing import Any
from uuid import UUID

from value_converter.exceptions import TypeResolutionError

PRIMITIVE_SHORTHANDS: dict[str, type[Any]] = {
    "int": int,
    "float": float,
    "bool": bool,
    "str": str,
    "decimal": Decimal,
    "uuid": UUID,
}


def resolve_type(reference: str) -> type[Any]:
    """Import the type named by *reference*.

    *reference* is either a primitive shorthand (``int``, ``decimal``, …)
    or ``package.module:QualifiedName``.

    Raises
    ------
    TypeResolutionError
        If the module cannot be imported or the attribute is missing or
        is not a class.
    """
    shorthand = PRIMITIVE_SHORTHANDS.get(reference.strip().lower())
    if shorthand is not None:
        return shorthand

    module_name, sep, qualname = reference.partition(":")
    if not sep or not module_name or not qualname:
        raise TypeResolutionError(
            f"Invalid type reference: {reference!r}",
            hint="Use 'package.module:Name', e.g. 'http:HTTPStatus'.",
        )

    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise TypeResolutionError(f"Cannot import module {module_name!r}: {exc}") from exc

    for part in qualname.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise TypeResolutionError(
                f"Module {module_name!r} has no attribute {qualname!r}",
            ) from exc

    if not isinstance(obj, type):
        raise TypeResolutionError(f"{reference!r} does not name a class")
    return obj
