"""Domain models for value-converter.

All models are **frozen** dataclasses: immutable value objects created
at call sites and discarded after use.  They carry zero I/O and no
dependencies on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

from value_converter.exceptions import InvalidArgumentError

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Optional value container
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True, repr=False)
class Option(Generic[T]):
    """A value that is either present (``Some``) or absent (``Nothing``).

    Absence is a first-class state rather than a ``None`` sentinel, so a
    present option can never wrap ``None``.  Build instances with
    :meth:`some`, :meth:`none` or :meth:`of` rather than the constructor.
    """

    value: T | None = None
    """The wrapped value, or ``None`` when absent."""

    present: bool = False
    """Whether a value is carried."""

    def __post_init__(self) -> None:
        if self.present and self.value is None:
            raise InvalidArgumentError(
                "A present Option cannot wrap None",
                hint="Use Option.none() or Option.of(value) for possibly-missing values.",
            )
        if not self.present and self.value is not None:
            raise InvalidArgumentError("An absent Option cannot carry a value")

    # -- constructors -------------------------------------------------------

    @classmethod
    def some(cls, value: T) -> Option[T]:
        return cls(value, True)

    @classmethod
    def none(cls) -> Option[T]:
        return NOTHING  # type: ignore[return-value]

    @classmethod
    def of(cls, value: T | None) -> Option[T]:
        """Wrap a plain Python value, mapping ``None`` to absence."""
        if value is None:
            return NOTHING  # type: ignore[return-value]
        return cls(value, True)

    # -- accessors ----------------------------------------------------------

    def is_some(self) -> bool:
        return self.present

    def is_none(self) -> bool:
        return not self.present

    def unwrap(self) -> T:
        """Return the wrapped value.

        Raises
        ------
        InvalidArgumentError
            If the option is absent.
        """
        if not self.present:
            raise InvalidArgumentError(
                "unwrap() called on an absent Option",
                hint="Check is_some() first or use unwrap_or(default).",
            )
        return self.value  # type: ignore[return-value]

    def unwrap_or(self, default: Any) -> Any:
        return self.value if self.present else default

    def to_optional(self) -> T | None:
        """Return the value, or ``None`` when absent."""
        return self.value

    def __bool__(self) -> bool:
        return self.present

    def __repr__(self) -> str:
        if self.present:
            return f"Some({self.value!r})"
        return "Nothing"


NOTHING: Option[Any] = Option()
"""Shared absent option.  Safe to share because options are immutable."""


def as_option(value: Any) -> Option[Any]:
    """Coerce *value* to an :class:`Option`.

    Options pass through unchanged; ``None`` becomes :data:`NOTHING`;
    anything else is wrapped as present.
    """
    if isinstance(value, Option):
        return value
    return Option.of(value)


# ---------------------------------------------------------------------------
# Parse configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParseOptions:
    """Per-call knobs for parsing text into a bounded type."""

    ignore_case: bool = False
    """Match member names (and string values) case-insensitively."""

    accept_codes: bool = True
    """Accept a numeral when it is the code of a declared member."""

    match_values: bool = True
    """Accept the declared string value of a member (``str``-valued enums)."""


DEFAULT_OPTIONS = ParseOptions()


# ---------------------------------------------------------------------------
# Name table entry
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class MemberEntry:
    """One declared member of a bounded type."""

    name: str
    """Canonical declared name."""

    member: Enum
    """The enum member itself."""

    code: int | None
    """Integer code, or ``None`` when the member's value is not an ``int``."""

    aliases: tuple[str, ...] = ()
    """Additional declared names bound to the same member."""
