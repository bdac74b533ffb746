"""Immutable culture settings used by the parsing helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .errors import InvalidInputError

_MONTH_FIRST_DATE_FORMATS: Final = (
    "%m/%d/%Y",
    "%m/%d/%Y %H:%M",
    "%m/%d/%Y %H:%M:%S",
    "%m/%d/%Y %I:%M %p",
    "%m/%d/%Y %I:%M:%S %p",
    "%Y/%m/%d",
    "%Y-%m-%d",
)


@dataclass(frozen=True)
class CultureInfo:
    name: str
    decimal_separator: str = "."
    negative_sign: str = "-"
    positive_sign: str = "+"
    date_formats: tuple[str, ...] = _MONTH_FIRST_DATE_FORMATS


INVARIANT_CULTURE: Final = CultureInfo(name="invariant")
EN_US_CULTURE: Final = CultureInfo(name="en-US")

_CULTURES: Final = {
    "": INVARIANT_CULTURE,
    "invariant": INVARIANT_CULTURE,
    "en-us": EN_US_CULTURE,
}


def get_culture(name: str) -> CultureInfo:
    try:
        return _CULTURES[name.strip().lower()]
    except KeyError:
        raise InvalidInputError(f"Unsupported culture: {name!r}") from None
