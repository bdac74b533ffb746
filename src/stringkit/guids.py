"""GUID validation and integer extraction."""

from __future__ import annotations

import re
from typing import Final
import uuid

from .errors import GuidFormatError

_HYPHENATED: Final = r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"

# Accepted layouts: 32 digits, hyphenated, {hyphenated}, (hyphenated)
_GUID_RE: Final = re.compile(rf"[0-9a-fA-F]{{32}}|{_HYPHENATED}|\{{{_HYPHENATED}\}}|\({_HYPHENATED}\)")
_HYPHENATED_RE: Final = re.compile(_HYPHENATED)


def _parse(value: str | None) -> uuid.UUID | None:
    if value is None:
        return None
    text = value.strip()
    if not _GUID_RE.fullmatch(text):
        return None
    return uuid.UUID(text.strip("{}()"))


def is_valid_guid(value: str | None) -> bool:
    """True for any well-formed GUID, including the all-zero one."""
    return _parse(value) is not None


def is_valid_populated_guid(value: str | None) -> bool:
    parsed = _parse(value)
    return parsed is not None and parsed.int != 0


def is_valid_nullable_guid(value: str | None) -> bool:
    """Like :func:`is_valid_guid`, but None counts as valid."""
    return value is None or is_valid_guid(value)


def is_valid_populated_nullable_guid(value: str | None) -> bool:
    return value is None or is_valid_populated_guid(value)


def to_int_from_guid(value: str) -> int:
    """Derive a stable non-negative 32-bit integer from a hyphenated GUID.

    The first four bytes of the GUID's little-endian layout are read as a
    signed 32-bit integer and masked to ``0x7FFFFFFF``.

    Raises:
        GuidFormatError: ``value`` is not exactly ``xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx``.
    """
    if value is None or not _HYPHENATED_RE.fullmatch(value):
        raise GuidFormatError("Invalid GUID format. Expected a GUID in 'D' format.")
    guid = uuid.UUID(value)
    extracted = int.from_bytes(guid.bytes_le[:4], "little", signed=True)
    return extracted & 0x7FFFFFFF
