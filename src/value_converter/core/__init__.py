"""Core layer: pure conversion logic and value types.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
* Malformed data degrades to absence; only usage faults raise.
"""

from value_converter.core.bounded import NameTable, is_bounded, name_table
from value_converter.core.converter import (
    ValueConverter,
    format_optional,
    format_scalar,
    parse_int_to_optional,
    parse_optional_to_int,
    parse_optional_to_optional,
    try_parse_scalar,
)
from value_converter.core.models import (
    DEFAULT_OPTIONS,
    NOTHING,
    MemberEntry,
    Option,
    ParseOptions,
    as_option,
)
from value_converter.core.protocols import ScalarParser
from value_converter.core.scalars import PRIMITIVE_PARSERS, is_primitive, primitive_parser

__all__: list[str] = [
    "DEFAULT_OPTIONS",
    "NOTHING",
    "MemberEntry",
    "NameTable",
    "Option",
    "PRIMITIVE_PARSERS",
    "ParseOptions",
    "ScalarParser",
    "ValueConverter",
    "as_option",
    "format_optional",
    "format_scalar",
    "is_bounded",
    "is_primitive",
    "name_table",
    "parse_int_to_optional",
    "parse_optional_to_int",
    "parse_optional_to_optional",
    "primitive_parser",
    "try_parse_scalar",
]
