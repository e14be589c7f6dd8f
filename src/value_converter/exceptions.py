"""Custom exception hierarchy for value-converter.

Only *usage* faults are raised as exceptions.  Malformed or unmapped
*data* (a bad numeral, an unknown member name, an out-of-range code) is
never an exception: it degrades to absence or to the caller's default.

Hierarchy
---------
ValueConverterError
├── UsageError
│   ├── NotBoundedTypeError
│   ├── UnsupportedScalarTypeError
│   ├── NotIntegerCodedError
│   └── InvalidArgumentError
├── UnnamedValueError
├── TypeResolutionError
└── MissingDependencyError
"""

from __future__ import annotations


class ValueConverterError(Exception):
    """Base exception for all value-converter errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Usage (programmer) faults ----------------------------------------------

class UsageError(ValueConverterError):
    """Raised when an operation is invoked with the wrong kind of argument.

    These indicate a call site that must be fixed; the converter never
    absorbs them into a default.
    """


class NotBoundedTypeError(UsageError):
    """Raised when a bounded-only operation receives a non-enum type."""


class UnsupportedScalarTypeError(UsageError):
    """Raised when a parse target is neither an enum nor a supported primitive."""


class NotIntegerCodedError(UsageError):
    """Raised when an integer-code operation targets an enum without int values."""


class InvalidArgumentError(UsageError):
    """Raised when an argument has the wrong shape for the operation."""


# --- Formatting -------------------------------------------------------------

class UnnamedValueError(ValueConverterError):
    """Raised when a value of a bounded type has no declared canonical name.

    Only reachable for :class:`enum.Flag` combinations that were never
    declared as members themselves.
    """


# --- CLI type resolution ----------------------------------------------------

class TypeResolutionError(ValueConverterError):
    """Raised when a ``module:Name`` type reference cannot be imported."""


class MissingDependencyError(ValueConverterError):
    """Raised when an optional CLI dependency (Rich) is not installed."""


def not_bounded(target: object) -> NotBoundedTypeError:
    """Build the standard error for a non-enum type parameter."""
    name = getattr(target, "__qualname__", None) or repr(target)
    return NotBoundedTypeError(
        f"{name} is not an enumerated type",
        hint="Pass an enum.Enum subclass (Enum, IntEnum, StrEnum, Flag).",
    )
