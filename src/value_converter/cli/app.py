"""CLI application entry point and command routing for value-converter.

This module is the **sole error boundary** of the command-line tool.
It catches :class:`~value_converter.exceptions.ValueConverterError`,
``KeyboardInterrupt`` and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Commands
--------
* ``value-converter describe TYPE``: list declared members
* ``value-converter parse TYPE TEXT``: text to canonical value
* ``value-converter code TYPE N``: integer code to member name
* ``value-converter --version``

Converted values are written to stdout; diagnostics go to stderr.
"""

from __future__ import annotations

import argparse
import sys
from typing import Any

from value_converter.cli import exit_codes
from value_converter.cli.console import configure_logging, console
from value_converter.exceptions import InvalidArgumentError, ValueConverterError
from value_converter.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser with its sub-commands."""
    parser = argparse.ArgumentParser(
        prog="value-converter",
        description="Inspect and exercise enum/scalar conversions.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log conversion details to stderr.",
    )
    sub = parser.add_subparsers(dest="command")

    describe = sub.add_parser("describe", help="List the declared members of an enum.")
    describe.add_argument("type", help="'package.module:Name' of an enum.")

    parse = sub.add_parser("parse", help="Convert text to a value of TYPE.")
    parse.add_argument("type", help="'package.module:Name' or int/float/bool/str/decimal/uuid.")
    parse.add_argument("text", help="Text to convert.")
    parse.add_argument("--default", default=None, help="Printed when TEXT does not convert.")
    parse.add_argument("--ignore-case", action="store_true", help="Match names case-insensitively.")
    parse.add_argument("--no-codes", action="store_true", help="Reject numeric member codes.")
    parse.add_argument("--no-values", action="store_true", help="Reject declared string values.")

    code = sub.add_parser("code", help="Convert an integer code to a member name.")
    code.add_argument("type", help="'package.module:Name' of an int-valued enum.")
    code.add_argument("code", type=int, help="Integer code.")
    code.add_argument("--default", default=None, help="Member name used when CODE is unmapped.")
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _emit(result: Any) -> int:
    """Write *result* to stdout, or report absence."""
    if result is None:
        console.print("[yellow]No value.[/yellow]")
        return exit_codes.NO_VALUE
    print(result)
    return exit_codes.SUCCESS


def _handle_describe(args: argparse.Namespace) -> int:
    from value_converter.cli.describe import run_describe
    from value_converter.cli.loader import resolve_type

    return run_describe(resolve_type(args.type))


def _handle_parse(args: argparse.Namespace) -> int:
    from value_converter.cli.loader import resolve_type
    from value_converter.core.converter import ValueConverter
    from value_converter.core.models import ParseOptions

    options = ParseOptions(
        ignore_case=args.ignore_case,
        accept_codes=not args.no_codes,
        match_values=not args.no_values,
    )
    converter: ValueConverter[Any] = ValueConverter(resolve_type(args.type), options)
    parsed = converter.try_parse(args.text)

    if converter.is_bounded:
        return _emit(converter.format_optional(parsed, args.default))
    return _emit(parsed.unwrap_or(args.default))


def _handle_code(args: argparse.Namespace) -> int:
    from value_converter.cli.loader import resolve_type
    from value_converter.core.converter import ValueConverter

    converter: ValueConverter[Any] = ValueConverter.bounded(resolve_type(args.type))
    fallback = converter.try_parse(args.default)
    if args.default is not None and not fallback:
        raise InvalidArgumentError(
            f"--default {args.default!r} is not a member of {converter.target.__qualname__}",
            hint="Pass a declared member name, or run 'value-converter describe TYPE'.",
        )
    return _emit(converter.format_optional(converter.parse_int(args.code, fallback)))


_HANDLERS = {
    "describe": _handle_describe,
    "parse": _handle_parse,
    "code": _handle_code,
}


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the value-converter CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    configure_logging(args.verbose)
    return _HANDLERS[args.command](args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Wraps :func:`main` and guarantees the process never exits with a raw
    stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except ValueConverterError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
