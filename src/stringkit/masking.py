"""Masking and character shuffling."""

from __future__ import annotations

import random
import secrets
from typing import Callable, Final

from .buffers import CharBuffer, scratch_buffer

_MASK_CHAR: Final = "*"
_FULL_MASK_MAX_LENGTH: Final = 6
_MAX_VISIBLE: Final = 13
_VISIBLE_TAIL: Final = 3


def mask(value: str | None) -> str:
    """Hide all but the last few characters of ``value`` behind asterisks.

    Values of six characters or fewer are masked entirely. Longer values keep
    a visible tail of ``len - max(0, len - 3)`` characters, capped at 13.
    """
    if not value:
        return ""

    length = len(value)
    if length <= _FULL_MASK_MAX_LENGTH:
        return _MASK_CHAR * length

    mask_length = max(0, length - _VISIBLE_TAIL)
    visible_length = min(_MAX_VISIBLE, length - mask_length)

    with scratch_buffer(length) as buffer:
        buffer.fill(0, mask_length, _MASK_CHAR)
        buffer.write(mask_length, value[mask_length : mask_length + visible_length])
        return buffer.getvalue()


def shuffle(value: str, rng: random.Random | None = None) -> str:
    """Return the characters of ``value`` in a random order (Fisher-Yates).

    Not suitable for secrets; see :func:`secure_shuffle`.
    """
    source = random if rng is None else rng
    return _shuffled(value, source.randrange)


def secure_shuffle(value: str) -> str:
    """Like :func:`shuffle`, drawing indices from the OS CSPRNG."""
    return _shuffled(value, secrets.randbelow)


def _shuffled(value: str, randbelow: Callable[[int], int]) -> str:
    if not value:
        return value

    with scratch_buffer(len(value)) as buffer:
        buffer.write(0, value)
        _fisher_yates(buffer, randbelow)
        return buffer.getvalue()


def _fisher_yates(buffer: CharBuffer, randbelow: Callable[[int], int]) -> None:
    n = len(buffer)
    while n > 1:
        n -= 1
        k = randbelow(n + 1)
        buffer.swap(n, k)
