"""value-converter: safe conversion between text, integer codes and enums.

Parsing never raises on malformed data: it yields an absent
:class:`~value_converter.core.models.Option` or the caller's default.
Only usage faults (e.g. a non-enum type where an enum is required)
raise :class:`~value_converter.exceptions.UsageError`.
"""

import logging

from value_converter.core import (
    DEFAULT_OPTIONS,
    NOTHING,
    MemberEntry,
    Option,
    ParseOptions,
    ValueConverter,
    format_optional,
    format_scalar,
    parse_int_to_optional,
    parse_optional_to_int,
    parse_optional_to_optional,
    try_parse_scalar,
)
from value_converter.exceptions import (
    InvalidArgumentError,
    NotBoundedTypeError,
    NotIntegerCodedError,
    UnnamedValueError,
    UnsupportedScalarTypeError,
    UsageError,
    ValueConverterError,
)
from value_converter.version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "DEFAULT_OPTIONS",
    "NOTHING",
    "InvalidArgumentError",
    "MemberEntry",
    "NotBoundedTypeError",
    "NotIntegerCodedError",
    "Option",
    "ParseOptions",
    "UnnamedValueError",
    "UnsupportedScalarTypeError",
    "UsageError",
    "ValueConverter",
    "ValueConverterError",
    "__version__",
    "format_optional",
    "format_scalar",
    "parse_int_to_optional",
    "parse_optional_to_int",
    "parse_optional_to_optional",
    "try_parse_scalar",
]
