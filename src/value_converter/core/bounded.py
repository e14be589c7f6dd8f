"""Name tables for bounded (enumerated) types.

A :class:`NameTable` is the explicit bijection between the declared
members of an :class:`enum.Enum` subclass, their canonical names and
their integer codes.  It is built once per enum class and never mutated,
so lookups need no runtime type inspection beyond the initial build.

Lookup order for text (see :meth:`NameTable.lookup`):

1. **Name**: canonical name or alias.
2. **Code**: a decimal numeral, accepted only when it is the code of a
   declared member.
3. **Value**: the declared value of a ``str``-valued member.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any

from value_converter.core.models import DEFAULT_OPTIONS, MemberEntry, ParseOptions
from value_converter.core.scalars import parse_code
from value_converter.exceptions import not_bounded

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class NameTable:
    """Immutable member/name/code tables for one enum class."""

    bounded_type: type[Enum]
    entries: tuple[MemberEntry, ...]
    by_name: Mapping[str, Enum]
    by_folded_name: Mapping[str, Enum]
    by_code: Mapping[int, Enum]
    by_value: Mapping[str, Enum]
    by_folded_value: Mapping[str, Enum]
    names: Mapping[Enum, str]

    @property
    def integer_coded(self) -> bool:
        """``True`` when every declared member has an integer code."""
        return all(entry.code is not None for entry in self.entries)

    # ------------------------------------------------------------------
    # Text → member
    # ------------------------------------------------------------------

    def lookup(self, text: str, options: ParseOptions = DEFAULT_OPTIONS) -> Enum | None:
        """Resolve *text* to a declared member, or ``None``."""
        key = text.strip()
        if not key:
            return None

        member = self.by_name.get(key)
        if member is None and options.ignore_case:
            member = self.by_folded_name.get(key.casefold())
        if member is not None:
            return member

        if options.accept_codes and self.by_code:
            code = parse_code(key)
            if code:
                member = self.by_code.get(code.unwrap())
                if member is not None:
                    return member

        if options.match_values and self.by_value:
            member = self.by_value.get(key)
            if member is None and options.ignore_case:
                member = self.by_folded_value.get(key.casefold())

        return member

    # ------------------------------------------------------------------
    # Member → name / code
    # ------------------------------------------------------------------

    def name_of(self, value: Any) -> str | None:
        """Canonical name of *value*, or ``None`` if it has none.

        *value* may be a member of the bounded type or, for
        integer-valued members, the raw integer code.  Members of other
        enums and undeclared :class:`enum.Flag` combinations have no name.
        """
        if isinstance(value, self.bounded_type):
            return self.names.get(value)
        if isinstance(value, Enum):
            return None
        if isinstance(value, int) and not isinstance(value, bool):
            member = self.by_code.get(value)
            if member is not None:
                return self.names[member]
        return None

    def member_for_code(self, code: int) -> Enum | None:
        return self.by_code.get(code)

    def code_of(self, name: str) -> int | None:
        """Integer code of the member declared as *name*."""
        member = self.by_name.get(name)
        if member is None:
            return None
        return _code_of(member)


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

def _code_of(member: Enum) -> int | None:
    value = member.value
    if isinstance(value, int) and not isinstance(value, bool):
        return int(value)
    return None


def _is_bounded(target: object) -> bool:
    return isinstance(target, type) and issubclass(target, Enum)


@functools.lru_cache(maxsize=None)
def _build(target: type[Enum]) -> NameTable:
    canonical: list[Enum] = []
    aliases: dict[Enum, list[str]] = {}
    by_name: dict[str, Enum] = {}
    by_folded_name: dict[str, Enum] = {}

    for name, member in target.__members__.items():
        by_name[name] = member
        by_folded_name.setdefault(name.casefold(), member)
        if member.name == name:
            canonical.append(member)
        else:
            aliases.setdefault(member, []).append(name)

    entries = tuple(
        MemberEntry(
            name=member.name,
            member=member,
            code=_code_of(member),
            aliases=tuple(aliases.get(member, ())),
        )
        for member in canonical
    )

    by_code: dict[int, Enum] = {}
    by_value: dict[str, Enum] = {}
    by_folded_value: dict[str, Enum] = {}
    for entry in entries:
        if entry.code is not None:
            by_code.setdefault(entry.code, entry.member)
        value = entry.member.value
        if isinstance(value, str):
            by_value.setdefault(value, entry.member)
            by_folded_value.setdefault(value.casefold(), entry.member)

    logger.debug("Built name table for %s (%d members)", target.__qualname__, len(entries))
    return NameTable(
        bounded_type=target,
        entries=entries,
        by_name=MappingProxyType(by_name),
        by_folded_name=MappingProxyType(by_folded_name),
        by_code=MappingProxyType(by_code),
        by_value=MappingProxyType(by_value),
        by_folded_value=MappingProxyType(by_folded_value),
        names=MappingProxyType({entry.member: entry.name for entry in entries}),
    )


def is_bounded(target: object) -> bool:
    """Return ``True`` when *target* is an :class:`enum.Enum` subclass."""
    return _is_bounded(target)


def name_table(target: Any) -> NameTable:
    """Return the (memoised) name table for *target*.

    Raises
    ------
    NotBoundedTypeError
        If *target* is not an :class:`enum.Enum` subclass.
    """
    if not _is_bounded(target):
        raise not_bounded(target)
    return _build(target)
