"""``value-converter describe``: render the name table of a bounded type.

This module lives in the CLI layer.  It collects rows from the core
:class:`~value_converter.core.converter.ValueConverter` and renders them
as a Rich table, or as plain text when Rich is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from value_converter.cli import exit_codes
from value_converter.cli.console import console
from value_converter.core.converter import ValueConverter


# ---------------------------------------------------------------------------
# Row collection
# ---------------------------------------------------------------------------

def member_rows(target: type[Any]) -> list[tuple[str, str, str, str]]:
    """Return ``(name, code, value, aliases)`` rows for *target*.

    Raises
    ------
    NotBoundedTypeError
        If *target* is not an enum.
    """
    converter = ValueConverter.bounded(target)
    rows: list[tuple[str, str, str, str]] = []
    for entry in converter.members():
        code = "" if entry.code is None else str(entry.code)
        rows.append((entry.name, code, repr(entry.member.value), ", ".join(entry.aliases)))
    return rows


def _print_plain_table(title: str, rows: list[tuple[str, str, str, str]]) -> None:
    """Render the member table without Rich."""
    print(f"\n{title}", file=sys.stderr)
    print("=" * 64, file=sys.stderr)
    print(f"{'Name':<20} {'Code':<8} {'Value':<20} {'Aliases':<14}", file=sys.stderr)
    print("-" * 64, file=sys.stderr)
    for name, code, value, aliases in rows:
        print(f"{name:<20} {code:<8} {value:<20} {aliases:<14}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_describe(target: type[Any]) -> int:
    """Render every declared member of *target*.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS`; :data:`exit_codes.NO_VALUE` when the
        enum declares no members.
    """
    rows = member_rows(target)
    title = f"{target.__module__}.{target.__qualname__}"

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_table(title, rows)
    else:
        table = Table(
            title=title,
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Name", style="bold", min_width=12)
        table.add_column("Code", justify="right")
        table.add_column("Value")
        table.add_column("Aliases", style="dim")
        for row in rows:
            table.add_row(*row)

        console.print()
        console.print(table)
        console.print()

    if not rows:
        console.print("[yellow]No members declared.[/yellow]")
        return exit_codes.NO_VALUE
    return exit_codes.SUCCESS
