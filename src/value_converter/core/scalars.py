"""Closed set of primitive parsers, selected by exact type.

Every function in this module is a **pure** transformation of a
non-empty string into an :class:`~value_converter.core.models.Option`.
Malformed input is reported as absence, never raised.

Supported kinds: ``int``, ``float``, ``bool``, ``str``,
``decimal.Decimal`` and ``uuid.UUID``.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from types import MappingProxyType
from typing import Any
from uuid import UUID

from value_converter.core.models import NOTHING, Option
from value_converter.core.protocols import ScalarParser
from value_converter.exceptions import UnsupportedScalarTypeError

_INT_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)
_HEX_RE = re.compile(r"(?:0x|&h)([0-9a-f]+)", re.ASCII | re.IGNORECASE)


# ---------------------------------------------------------------------------
# Individual parsers
# ---------------------------------------------------------------------------

def parse_code(text: str) -> Option[int]:
    """Parse a signed decimal integer (no hex, no underscores)."""
    stripped = text.strip()
    if not _INT_RE.fullmatch(stripped):
        return NOTHING
    try:
        return Option.some(int(stripped))
    except ValueError:
        # numeral longer than the interpreter's int digit limit
        return NOTHING


def parse_int(text: str) -> Option[int]:
    """Parse a decimal or hexadecimal integer.

    Accepts an optional sign followed by ASCII digits, or a hex literal
    prefixed with ``0x`` / ``&H``.  Surrounding whitespace is ignored;
    digit-group underscores are not accepted.
    """
    code = parse_code(text)
    if code:
        return code
    match = _HEX_RE.fullmatch(text.strip())
    if match:
        return Option.some(int(match.group(1), 16))
    return NOTHING


def parse_float(text: str) -> Option[float]:
    stripped = text.strip()
    if "_" in stripped:
        return NOTHING
    try:
        return Option.some(float(stripped))
    except ValueError:
        return NOTHING


def parse_bool(text: str) -> Option[bool]:
    """Parse ``true`` / ``false`` case-insensitively."""
    folded = text.strip().casefold()
    if folded == "true":
        return Option.some(True)
    if folded == "false":
        return Option.some(False)
    return NOTHING


def parse_str(text: str) -> Option[str]:
    return Option.some(text)


def parse_decimal(text: str) -> Option[Decimal]:
    stripped = text.strip()
    if "_" in stripped:
        return NOTHING
    try:
        return Option.some(Decimal(stripped))
    except InvalidOperation:
        return NOTHING


def parse_uuid(text: str) -> Option[UUID]:
    try:
        return Option.some(UUID(text.strip()))
    except ValueError:
        return NOTHING


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

PRIMITIVE_PARSERS: Mapping[type, ScalarParser] = MappingProxyType(
    {
        int: parse_int,
        float: parse_float,
        bool: parse_bool,
        str: parse_str,
        Decimal: parse_decimal,
        UUID: parse_uuid,
    }
)


def is_primitive(target: object) -> bool:
    """Return ``True`` when *target* is exactly one of the supported kinds."""
    return isinstance(target, type) and target in PRIMITIVE_PARSERS


def primitive_parser(target: type[Any]) -> ScalarParser:
    """Return the parser registered for *target*.

    Lookup is by exact type: ``bool`` is not treated as ``int`` and
    user subclasses of primitives are rejected.

    Raises
    ------
    UnsupportedScalarTypeError
        If *target* is not a supported primitive kind.
    """
    if not is_primitive(target):
        name = getattr(target, "__qualname__", None) or repr(target)
        supported = ", ".join(t.__name__ for t in PRIMITIVE_PARSERS)
        raise UnsupportedScalarTypeError(
            f"Cannot parse text into {name}",
            hint=f"Use an enum.Enum subclass or one of: {supported}.",
        )
    return PRIMITIVE_PARSERS[target]
