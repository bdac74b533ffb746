"""Multi-candidate and case-insensitive string comparisons."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Sequence

from .casing import to_upper_invariant


class StringComparison(Enum):
    """How two strings are compared."""

    ORDINAL = "ordinal"
    ORDINAL_IGNORE_CASE = "ordinal_ignore_case"


def _normalize(value: str, comparison: StringComparison) -> str:
    if comparison is StringComparison.ORDINAL_IGNORE_CASE:
        return to_upper_invariant(value)
    return value


def equals_ignore_case(value: str, other: str) -> bool:
    return to_upper_invariant(value) == to_upper_invariant(other)


def starts_with_ignore_case(value: str, prefix: str) -> bool:
    return to_upper_invariant(value).startswith(to_upper_invariant(prefix))


def ends_with_ignore_case(value: str, suffix: str) -> bool:
    return to_upper_invariant(value).endswith(to_upper_invariant(suffix))


def equals_any(
    value: str | None,
    candidates: Iterable[str | None] | None,
    comparison: StringComparison = StringComparison.ORDINAL,
) -> bool:
    if candidates is None:
        return False
    if value is None:
        return any(candidate is None for candidate in candidates)
    target = _normalize(value, comparison)
    return any(candidate is not None and _normalize(candidate, comparison) == target for candidate in candidates)


def starts_with_any(
    value: str | None,
    prefixes: Iterable[str | None],
    comparison: StringComparison = StringComparison.ORDINAL,
) -> bool:
    """True when ``value`` starts with any non-empty prefix."""
    if not value:
        return False
    target = _normalize(value, comparison)
    return any(prefix and target.startswith(_normalize(prefix, comparison)) for prefix in prefixes)


def ends_with_any(
    value: str | None,
    suffixes: Iterable[str | None],
    comparison: StringComparison = StringComparison.ORDINAL,
) -> bool:
    """True when ``value`` ends with any non-empty suffix."""
    if not value:
        return False
    target = _normalize(value, comparison)
    return any(suffix and target.endswith(_normalize(suffix, comparison)) for suffix in suffixes)


def contains_any(
    value: str,
    candidates: Sequence[str],
    comparison: StringComparison = StringComparison.ORDINAL,
) -> bool:
    target = _normalize(value, comparison)
    return any(_normalize(candidate, comparison) in target for candidate in candidates)


def contains_any_char(value: str | None, characters: Iterable[str] | None) -> bool:
    if not value or not characters:
        return False
    wanted = set(characters)
    return any(c in wanted for c in value)
