"""UTF-8 and Base64 conversions."""

from __future__ import annotations

import base64
import binascii
import io

from .errors import InvalidFormatError


def to_bytes(value: str | None) -> bytes:
    if not value:
        return b""
    return value.encode("utf-8")


def to_bytes_from_base64(value: str | None) -> bytes:
    """Decode Base64 text; raises :class:`InvalidFormatError` on malformed input."""
    if not value:
        return b""
    # Whitespace inside the payload is allowed and ignored
    compact = "".join(value.split())
    try:
        return base64.b64decode(compact, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidFormatError(f"Invalid Base64 string: {exc}") from exc


def to_string_from_base64(value: str | None) -> str:
    """Decode Base64 text and read the bytes as UTF-8.

    Invalid UTF-8 sequences become U+FFFD rather than raising.
    """
    return to_bytes_from_base64(value).decode("utf-8", errors="replace")


def to_memory_stream(value: str | None) -> io.BytesIO:
    """Wrap the UTF-8 bytes of ``value`` in a stream positioned at the start."""
    return io.BytesIO(to_bytes(value))
