"""Character filtering, substitution and trimming."""

from __future__ import annotations

from typing import Callable, Final, Iterable

from .buffers import scratch_buffer

DEFAULT_TRIM_CHARACTERS: Final = frozenset(" \t\r\n")


def _is_ascii_digit(c: str) -> bool:
    return "0" <= c <= "9"


def _keep_where(value: str | None, keep: Callable[[str], bool]) -> str | None:
    if not value:
        return value

    with scratch_buffer(len(value)) as buffer:
        idx = 0
        for c in value:
            if keep(c):
                buffer[idx] = c
                idx += 1
        if idx == len(value):
            return value
        if idx == 0:
            return ""
        return buffer.getvalue(idx)


def remove_non_digits(value: str | None) -> str | None:
    """Keep ASCII digits only."""
    return _keep_where(value, _is_ascii_digit)


def remove_whitespace(value: str | None) -> str | None:
    return _keep_where(value, lambda c: not c.isspace())


def remove_all_char(value: str | None, remove_char: str) -> str | None:
    return _keep_where(value, lambda c: c != remove_char)


def remove_dashes(value: str | None) -> str | None:
    return remove_all_char(value, "-")


def _substitute(value: str, match: Callable[[str], bool], replacement: str) -> str:
    if not value:
        return value
    start = next((i for i, c in enumerate(value) if match(c)), -1)
    if start < 0:
        return value

    with scratch_buffer(len(value)) as buffer:
        buffer.write(0, value[:start])
        for i in range(start, len(value)):
            c = value[i]
            buffer[i] = replacement if match(c) else c
        return buffer.getvalue()


def replace_periods_with_dashes(value: str) -> str:
    return _substitute(value, lambda c: c == ".", "-")


def replace_whitespace_with_dashes(value: str) -> str:
    """Replace each whitespace character with a dash, one for one."""
    return _substitute(value, str.isspace, "-")


def remove_first_crlf(value: str) -> str:
    """Collapse the first ``\\r\\n`` into ``\\n``.

    Only the first occurrence is touched; later line breaks are copied as
    they are.
    """
    index = value.find("\r\n")
    if index < 0:
        return value

    with scratch_buffer(len(value) - 1) as buffer:
        buffer.write(0, value[:index])
        buffer.write(index, value[index + 1 :])
        return buffer.getvalue()


def trim_with_custom_character_set(
    value: str,
    trim_chars: Iterable[str] = DEFAULT_TRIM_CHARACTERS,
) -> str:
    """Strip any of ``trim_chars`` from both ends of ``value``."""
    if not value:
        return value
    members = trim_chars if isinstance(trim_chars, (set, frozenset)) else frozenset(trim_chars)

    start = 0
    end = len(value) - 1
    while start <= end and value[start] in members:
        start += 1
    if start > end:
        return ""
    while value[end] in members:
        end -= 1

    if start == 0 and end == len(value) - 1:
        return value
    return value[start : end + 1]


def truncate(value: str | None, length: int) -> str:
    if not value or length <= 0:
        return ""
    if length >= len(value):
        return value
    return value[:length]


def remove_leading_char(value: str | None, char: str) -> str | None:
    if not value or value[0] != char:
        return value
    return value[1:]


def remove_trailing_char(value: str | None, char: str) -> str | None:
    if not value or value[-1] != char:
        return value
    return value[:-1]


def to_short_zip_code(value: str) -> str:
    """``"12345-6789"`` -> ``"12345"``."""
    index = value.find("-")
    return value if index < 0 else value[:index]
