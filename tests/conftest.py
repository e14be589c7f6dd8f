"""Shared pytest fixtures and configuration for the value-converter test suite.

Guidelines
----------
* Core tests must be pure: no I/O, no shared state.
* CLI tests go through ``main(argv)`` and capture output with ``capsys``.
* Sample enums live in each test module so every file reads on its own.
"""

from __future__ import annotations

import pytest

from value_converter.core import bounded


@pytest.fixture(autouse=True)
def _fresh_name_tables() -> None:
    """Drop memoised name tables so enums redefined per test are rebuilt."""
    bounded._build.cache_clear()
