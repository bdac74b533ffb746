"""Case folding, title casing and snake_case conversion."""

from __future__ import annotations

from typing import Callable, Final

from .buffers import scratch_buffer

_ASCII_SPAN: Final = ord("z") - ord("a")
_UPPER_A: Final = ord("A")
_LOWER_A: Final = ord("a")


def _is_ascii_upper(c: str) -> bool:
    return 0 <= ord(c) - _UPPER_A <= _ASCII_SPAN


def _is_ascii_lower(c: str) -> bool:
    return 0 <= ord(c) - _LOWER_A <= _ASCII_SPAN


def fold_lower(c: str) -> str:
    """Lower-fold one character, keeping it when the mapping is not 1:1."""
    if _is_ascii_upper(c):
        return chr(ord(c) | 0x20)
    if c < "\x80":
        return c
    lowered = c.lower()
    return lowered if len(lowered) == 1 else c


def fold_upper(c: str) -> str:
    """Upper-fold one character, keeping it when the mapping is not 1:1."""
    if _is_ascii_lower(c):
        return chr(ord(c) ^ 0x20)
    if c < "\x80":
        return c
    uppered = c.upper()
    return uppered if len(uppered) == 1 else c


def to_lower_first(value: str | None) -> str | None:
    return _fold_first(value, fold_lower)


def to_upper_first(value: str | None) -> str | None:
    return _fold_first(value, fold_upper)


def _fold_first(value: str | None, fold: Callable[[str], str]) -> str | None:
    if not value:
        return value
    first = value[0]
    folded = fold(first)
    if folded == first:
        return value

    length = len(value)
    if length == 1:
        return folded
    with scratch_buffer(length) as buffer:
        buffer[0] = folded
        buffer.write(1, value[1:])
        return buffer.getvalue()


def to_lower_invariant(value: str) -> str:
    """Lower-fold every character; returns ``value`` itself when nothing changes."""
    return _fold_all(value, fold_lower)


def to_upper_invariant(value: str) -> str:
    """Upper-fold every character; returns ``value`` itself when nothing changes."""
    return _fold_all(value, fold_upper)


def _fold_all(value: str, fold: Callable[[str], str]) -> str:
    if not value:
        return value
    start = _first_change(value, fold)
    if start < 0:
        return value

    with scratch_buffer(len(value)) as buffer:
        buffer.write(0, value[:start])
        for i in range(start, len(value)):
            buffer[i] = fold(value[i])
        return buffer.getvalue()


def _first_change(value: str, fold: Callable[[str], str]) -> int:
    for i, c in enumerate(value):
        if fold(c) != c:
            return i
    return -1


def to_lower_ordinal(value: str) -> str:
    """Lower-fold ASCII ``A-Z`` only. Non-ASCII letters are left as they are."""
    return _fold_ascii(value, _is_ascii_upper)


def to_upper_ordinal(value: str) -> str:
    """Upper-fold ASCII ``a-z`` only. Non-ASCII letters are left as they are."""
    return _fold_ascii(value, _is_ascii_lower)


def _fold_ascii(value: str, needs_flip: Callable[[str], bool]) -> str:
    if not value:
        return value
    start = next((i for i, c in enumerate(value) if needs_flip(c)), -1)
    if start < 0:
        return value

    with scratch_buffer(len(value)) as buffer:
        buffer.write(0, value[:start])
        for i in range(start, len(value)):
            c = value[i]
            buffer[i] = chr(ord(c) ^ 0x20) if needs_flip(c) else c
        return buffer.getvalue()


def to_title_case_by_spaces(value: str) -> str:
    """Capitalize the first character of every whitespace-delimited word.

    The remaining characters of each word are lower-folded and whitespace is
    copied through, so the result always has the length of the input.
    """
    if not value or value.isspace():
        return value

    with scratch_buffer(len(value)) as buffer:
        new_word = True
        for i, c in enumerate(value):
            if c.isspace():
                new_word = True
                buffer[i] = c
            elif new_word:
                buffer[i] = fold_upper(c)
                new_word = False
            else:
                buffer[i] = fold_lower(c)
        return buffer.getvalue()


def to_snake_case_from_pascal(value: str) -> str:
    """Convert ``PascalCase`` to ``snake_case``.

    Every ASCII capital after the first character gets its own underscore, so
    acronyms are split letter by letter: ``XMLHttpRequest`` becomes
    ``x_m_l_http_request``.
    """
    if not value:
        return value

    underscores = sum(1 for c in value[1:] if _is_ascii_upper(c))
    if underscores == 0:
        return to_lower_invariant(value)

    with scratch_buffer(len(value) + underscores) as buffer:
        w = 0
        for i, c in enumerate(value):
            if i > 0 and _is_ascii_upper(c):
                buffer[w] = "_"
                w += 1
            buffer[w] = fold_lower(c)
            w += 1
        return buffer.getvalue()
