"""Protocols (interfaces) consumed by the core layer."""

from __future__ import annotations

from typing import Any, Protocol

from value_converter.core.models import Option


class ScalarParser(Protocol):
    """Contract for a single primitive-kind parser.

    Any callable taking non-empty text and returning an :class:`Option`
    satisfies this protocol structurally.  Implementations must report
    malformed input as absence and never raise for it.
    """

    def __call__(self, text: str) -> Option[Any]:
        ...  # pragma: no cover
