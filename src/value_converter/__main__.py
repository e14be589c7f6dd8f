"""Allow ``python -m value_converter`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m value_converter`` behaves identically to the
``value-converter`` console script.
"""

from __future__ import annotations

from value_converter.cli.app import cli

if __name__ == "__main__":
    cli()
