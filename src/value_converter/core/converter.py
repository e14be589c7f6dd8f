"""Core conversion service: parse, format and fall back.

:class:`ValueConverter` binds one target type and exposes the conversion
operations.  The module-level functions are thin wrappers that build a
converter per call, for call sites that prefer a functional style.

Guarantees
----------
* Pure functions of their explicit inputs, with no I/O, no shared mutable
  state, safe to call from any number of threads.
* Malformed or unmapped data never raises; it becomes absence or the
  caller's default.
* Only :class:`~value_converter.exceptions.UsageError` subclasses (and
  :class:`~value_converter.exceptions.UnnamedValueError` from
  :func:`format_scalar`) escape.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Generic, TypeVar

from value_converter.core.bounded import NameTable, is_bounded, name_table
from value_converter.core.models import (
    DEFAULT_OPTIONS,
    NOTHING,
    MemberEntry,
    Option,
    ParseOptions,
    as_option,
)
from value_converter.core.protocols import ScalarParser
from value_converter.core.scalars import primitive_parser
from value_converter.exceptions import (
    InvalidArgumentError,
    NotIntegerCodedError,
    UnnamedValueError,
    not_bounded,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ValueConverter(Generic[T]):
    """Converter bound to a single target type.

    Parameters
    ----------
    target:
        An :class:`enum.Enum` subclass (bounded type) or one of the
        supported primitive kinds (``int``, ``float``, ``bool``, ``str``,
        ``Decimal``, ``UUID``).  Only :meth:`try_parse` is available for
        primitive kinds; every other operation requires a bounded type.
    options:
        Parsing knobs for bounded types.  Defaults to
        :data:`~value_converter.core.models.DEFAULT_OPTIONS`.

    Raises
    ------
    UnsupportedScalarTypeError
        If *target* is neither an enum nor a supported primitive.
    """

    def __init__(self, target: type[T], options: ParseOptions | None = None) -> None:
        self._target: type[T] = target
        self._options: ParseOptions = options or DEFAULT_OPTIONS
        self._table: NameTable | None = None
        self._parser: ScalarParser | None = None
        if is_bounded(target):
            self._table = name_table(target)
        else:
            self._parser = primitive_parser(target)

    @classmethod
    def bounded(cls, target: type[T], options: ParseOptions | None = None) -> ValueConverter[T]:
        """Build a converter, requiring *target* to be an enum.

        Raises
        ------
        NotBoundedTypeError
            If *target* is not an :class:`enum.Enum` subclass.
        """
        if not is_bounded(target):
            raise not_bounded(target)
        return cls(target, options)

    def __repr__(self) -> str:
        return f"ValueConverter({self._target.__qualname__})"

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def target(self) -> type[T]:
        return self._target

    @property
    def options(self) -> ParseOptions:
        return self._options

    @property
    def is_bounded(self) -> bool:
        return self._table is not None

    def members(self) -> tuple[MemberEntry, ...]:
        """Declared members in declaration order (aliases folded in)."""
        return self._bounded().entries

    # ------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------

    def try_parse(self, text: str | None) -> Option[T]:
        """Interpret *text* as a value of the target type.

        ``None`` and ``""`` are absent.  Text that names no declared
        member (for enums) or is not a valid literal (for primitives) is
        absent as well; it is never an error.

        Raises
        ------
        InvalidArgumentError
            If *text* is neither a string nor ``None``.
        """
        if text is None:
            return NOTHING
        if not isinstance(text, str):
            raise InvalidArgumentError(
                f"Expected text to parse, got {type(text).__name__}",
                hint="Use parse_int() for integer codes.",
            )
        if not text:
            return NOTHING

        result: Option[Any]
        if self._parser is not None:
            result = self._parser(text)
        else:
            member = self._bounded().lookup(text, self._options)
            result = NOTHING if member is None else Option.some(member)

        if not result:
            logger.debug("No %s value for %r", self._target.__qualname__, text)
        return result

    def format(self, value: T) -> str:
        """Return the canonical declared name of *value*.

        Raises
        ------
        NotBoundedTypeError
            If the target type is not an enum.
        InvalidArgumentError
            If *value* is not a member of the target type.
        UnnamedValueError
            If *value* is a flag combination that was never declared.
        """
        table = self._bounded()
        if not isinstance(value, table.bounded_type):
            raise InvalidArgumentError(
                f"{value!r} is not a member of {self._target.__qualname__}",
            )
        name = table.name_of(value)
        if name is None:
            raise UnnamedValueError(
                f"{value!r} has no declared name in {self._target.__qualname__}",
                hint="Declare the combination as a member to give it a name.",
            )
        return name

    # ------------------------------------------------------------------
    # Composite operations
    # ------------------------------------------------------------------

    def format_optional(self, value: Option[T] | T | None, default: Any = None) -> Any:
        """Canonical name of a present *value*, else *default* verbatim."""
        table = self._bounded()
        option = as_option(value)
        if not option:
            return default
        name = table.name_of(option.value)
        if name is None:
            logger.debug("No canonical name for %r, using default", option.value)
            return default
        return name

    def parse_optional(
        self,
        value: Option[T] | T | None,
        default: Option[T] | T | None = NOTHING,
    ) -> Option[T]:
        """Normalise *value* to its canonical member, else *default*.

        A present value is round-tripped through its canonical name, so
        raw integer codes and aliases come back as the declared member.
        """
        table = self._bounded()
        option = as_option(value)
        if not option:
            return as_option(default)
        name = table.name_of(option.value)
        if name is None:
            return as_option(default)
        parsed = self.try_parse(name)
        return parsed if parsed else as_option(default)

    def parse_int(self, code: int, default: Option[T] | T | None = NOTHING) -> Option[T]:
        """Member whose integer code is *code*, else *default*.

        Raises
        ------
        InvalidArgumentError
            If *code* is not an ``int`` (``bool`` is rejected).
        """
        table = self._bounded()
        if not isinstance(code, int) or isinstance(code, bool):
            raise InvalidArgumentError(
                f"Expected an integer code, got {type(code).__name__}",
                hint="Use try_parse() for text.",
            )
        member = table.member_for_code(code)
        if member is None:
            logger.debug("%d is not a %s code", code, self._target.__qualname__)
            return as_option(default)
        return Option.some(member)  # type: ignore[arg-type]

    def to_int(
        self,
        value: Option[T] | T | None,
        default: Option[T] | T | None = NOTHING,
    ) -> Option[int]:
        """Integer code of *value*, else the code of *default*, else absent.

        A present member yields its own integer value, including flag
        combinations that were never declared, and *default* is not
        consulted.  A present raw integer counts only when it is a declared
        code; otherwise the code of *default* is used.
        *default*, when present, must itself be a member of the target type.

        Raises
        ------
        NotIntegerCodedError
            If some member of the target type has a non-integer value.
        InvalidArgumentError
            If *value* or *default* is a member of some other enum, or
            *default* is present but not a member of the target type.
        """
        table = self._bounded()
        if not table.integer_coded:
            raise NotIntegerCodedError(
                f"{self._target.__qualname__} has members without integer codes",
                hint="Integer codes exist only when every member value is an int.",
            )
        option = as_option(value)
        fallback = as_option(default)
        if fallback and not isinstance(fallback.value, table.bounded_type):
            raise InvalidArgumentError(
                f"Default {fallback.value!r} is not a member of {self._target.__qualname__}",
            )
        if isinstance(option.value, Enum) and not isinstance(option.value, table.bounded_type):
            raise InvalidArgumentError(
                f"{option.value!r} is not a member of {self._target.__qualname__}",
            )

        if option:
            # members (declared or flag combinations) carry their own int value
            if isinstance(option.value, table.bounded_type):
                return Option.some(int(option.value.value))
            name = table.name_of(option.value)
            code = table.code_of(name) if name is not None else None
            if code is not None:
                return Option.some(code)
        if fallback:
            return Option.some(int(fallback.value.value))
        return NOTHING

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _bounded(self) -> NameTable:
        if self._table is None:
            raise not_bounded(self._target)
        return self._table


# ---------------------------------------------------------------------------
# Functional API
# ---------------------------------------------------------------------------

def try_parse_scalar(
    text: str | None,
    target: type[T],
    *,
    options: ParseOptions | None = None,
) -> Option[T]:
    """Interpret *text* as a value of *target*; absent on any failure."""
    return ValueConverter(target, options).try_parse(text)


def format_scalar(value: Enum) -> str:
    """Canonical declared name of the enum member *value*.

    Raises
    ------
    NotBoundedTypeError
        If *value* is not an enum member.
    """
    if not isinstance(value, Enum):
        raise not_bounded(type(value))
    return ValueConverter(type(value)).format(value)


def format_optional(
    value: Option[T] | T | None,
    target: type[T],
    default: Any = None,
) -> Any:
    """Canonical name of a present *value*, else *default* unchanged."""
    return ValueConverter.bounded(target).format_optional(value, default)


def parse_optional_to_optional(
    value: Option[T] | T | None,
    target: type[T],
    default: Option[T] | T | None = NOTHING,
) -> Option[T]:
    return ValueConverter.bounded(target).parse_optional(value, default)


def parse_int_to_optional(
    code: int,
    target: type[T],
    default: Option[T] | T | None = NOTHING,
) -> Option[T]:
    return ValueConverter.bounded(target).parse_int(code, default)


def parse_optional_to_int(
    value: Option[T] | T | None,
    target: type[T],
    default: Option[T] | T | None = NOTHING,
) -> Option[int]:
    return ValueConverter.bounded(target).to_int(value, default)
