"""Numeric, boolean and date parsing wrappers.

The parsers here are soft: malformed numbers and dates come back as None (or
0 for :func:`to_int`) rather than raising. :func:`to_bool` is the exception,
matching the strict boolean conversion callers expect.
"""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from functools import lru_cache
import logging
import re
from typing import Final

from .culture import EN_US_CULTURE, INVARIANT_CULTURE, CultureInfo
from .errors import InvalidFormatError

_LOGGER = logging.getLogger(__name__)

_INT32_MIN: Final = -(2**31)
_INT32_MAX: Final = 2**31 - 1

_INTEGER_RE: Final = re.compile(r"[+-]?[0-9]+")


@lru_cache(maxsize=None)
def _decimal_pattern(culture: CultureInfo) -> re.Pattern[str]:
    signs = re.escape(culture.positive_sign) + "|" + re.escape(culture.negative_sign)
    point = re.escape(culture.decimal_separator)
    return re.compile(rf"(?P<sign>{signs})?(?P<number>[0-9]+(?:{point}[0-9]*)?|{point}[0-9]+)")


def _normalize_decimal(value: str | None, culture: CultureInfo) -> str | None:
    text = value.strip() if value else ""
    if not text:
        return None
    match = _decimal_pattern(culture).fullmatch(text)
    if match is None:
        _LOGGER.debug("Rejected %r as a %s decimal", text, culture.name)
        return None
    sign = "-" if match.group("sign") == culture.negative_sign else ""
    return sign + match.group("number").replace(culture.decimal_separator, ".")


def to_double(value: str | None, culture: CultureInfo = EN_US_CULTURE) -> float | None:
    """Parse a plain decimal number (optional sign, optional decimal point)."""
    normalized = _normalize_decimal(value, culture)
    if normalized is None:
        return None
    return float(normalized)


def to_decimal(value: str | None, culture: CultureInfo = EN_US_CULTURE) -> Decimal | None:
    normalized = _normalize_decimal(value, culture)
    if normalized is None:
        return None
    try:
        return Decimal(normalized)
    except InvalidOperation:
        return None


def to_int(value: str | None) -> int:
    """Parse a 32-bit integer; returns 0 for anything malformed or out of range."""
    text = value.strip() if value else ""
    if not _INTEGER_RE.fullmatch(text):
        return 0
    result = int(text)
    if not _INT32_MIN <= result <= _INT32_MAX:
        return 0
    return result


def to_bool(value: str | None) -> bool:
    """Parse ``"true"``/``"false"`` (any case, surrounding whitespace ignored).

    None is False. Any other text raises :class:`InvalidFormatError`.
    """
    if value is None:
        return False
    text = value.strip().strip("\x00").lower()
    if text == "true":
        return True
    if text == "false":
        return False
    raise InvalidFormatError(f"String was not recognized as a valid boolean: {value!r}")


def _parse_datetime(value: str, culture: CultureInfo) -> datetime | None:
    text = value.strip()
    if not text:
        return None
    for fmt in culture.date_formats:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    # fromisoformat only accepts a "Z" designator from Python 3.11
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        _LOGGER.debug("Rejected %r as a %s date", text, culture.name)
        return None


def to_date_time(value: str | None, culture: CultureInfo = INVARIANT_CULTURE) -> datetime | None:
    """Parse a month-first or ISO 8601 date as local time.

    ``"03/22/2019"`` parses, ``"22/05/2019"`` does not. Text without an offset
    is taken to be local time; text with one is converted to local time.
    """
    if value is None:
        return None
    parsed = _parse_datetime(value, culture)
    if parsed is None:
        return None
    return parsed.astimezone()


def to_utc_date_time(value: str | None, culture: CultureInfo = INVARIANT_CULTURE) -> datetime | None:
    """Parse a date and express it in UTC. Text without an offset is taken as UTC."""
    if value is None:
        return None
    parsed = _parse_datetime(value, culture)
    if parsed is None:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def is_numeric(value: str | None) -> bool:
    """True for a non-empty run of ASCII digits."""
    if not value:
        return False
    return all("0" <= c <= "9" for c in value)


def is_alpha_numeric(value: str | None) -> bool:
    if not value or value.isspace():
        return False
    return all(c.isalpha() or c.isdecimal() for c in value)
