"""US phone number display and sanitizing."""

from __future__ import annotations

from typing import Final

from .buffers import scratch_buffer
from .errors import PhoneNumberFormatError
from .guards import throw_if_null_or_whitespace

_DISPLAY_LENGTH: Final = 14


def _digit_offset(value: str | None) -> int:
    length = len(value) if value is not None else 0
    offset = -1
    if length == 10:
        offset = 0
    elif length == 11 and value[0] == "1":
        offset = 1
    elif length == 12 and value.startswith("+1"):
        offset = 2
    if offset < 0 or not all("0" <= c <= "9" for c in value[offset:]):
        raise PhoneNumberFormatError(
            "Invalid phone number format. Expected formats: 8887737326, 18887737326, or +18887737326"
        )
    return offset


def to_display_phone_number(value: str) -> str:
    """Format ``8887737326``, ``18887737326`` or ``+18887737326`` as ``(888) 773-7326``.

    Raises:
        PhoneNumberFormatError: the input has any other shape.
    """
    offset = _digit_offset(value)

    with scratch_buffer(_DISPLAY_LENGTH) as buffer:
        buffer[0] = "("
        buffer.write(1, value[offset : offset + 3])
        buffer[4] = ")"
        buffer[5] = " "
        buffer.write(6, value[offset + 3 : offset + 6])
        buffer[9] = "-"
        buffer.write(10, value[offset + 6 : offset + 10])
        return buffer.getvalue()


def sanitize_phone_number(value: str) -> str:
    """Keep digits, plus a ``+`` when it is the first character written."""
    throw_if_null_or_whitespace(value, "value")

    with scratch_buffer(len(value)) as buffer:
        index = 0
        for c in value:
            if "0" <= c <= "9" or (c == "+" and index == 0):
                buffer[index] = c
                index += 1
        return buffer.getvalue(index)


def to_tel_format(value: str, country_code: int = 1) -> str:
    """``"123-456-7890"`` -> ``"tel:+11234567890"``."""
    return f"tel:+{country_code}{sanitize_phone_number(value)}"


def to_sms_format(value: str, country_code: int = 1) -> str:
    return f"sms:+{country_code}{sanitize_phone_number(value)}"


def to_mail_to_format(email: str) -> str:
    return f"mailto:{email}"
