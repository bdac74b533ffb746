"""Case-insensitive enum parsing."""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
import logging
from typing import Mapping, TypeVar

from .errors import InvalidInputError, MissingValueError

_LOGGER = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


@lru_cache(maxsize=None)
def _member_table(enum_type: type[Enum]) -> Mapping[str, Enum]:
    table = {name.lower(): member for name, member in enum_type.__members__.items()}
    _LOGGER.debug("Built name table for %s with %d entries", enum_type.__name__, len(table))
    return table


def _lookup(value: str, enum_type: type[E]) -> E | None:
    text = value.strip()
    member = _member_table(enum_type).get(text.lower())
    if member is not None:
        return member
    try:
        return enum_type(int(text))
    except ValueError:
        return None


def to_enum(value: str | None, enum_type: type[E]) -> E:
    """Parse a member name (any case) or integer value of ``enum_type``.

    Raises:
        MissingValueError: ``value`` is None.
        InvalidInputError: ``value`` is empty or names no member.
    """
    if value is None:
        raise MissingValueError(f"None was attempted to convert to enum of type {enum_type.__name__}")
    if not value:
        raise InvalidInputError(f"Empty string was attempted to convert to enum of type {enum_type.__name__}")
    member = _lookup(value, enum_type)
    if member is None:
        raise InvalidInputError(f"{value!r} is not a member of {enum_type.__name__}")
    return member


def try_to_enum(value: str | None, enum_type: type[E]) -> E | None:
    if not value:
        return None
    return _lookup(value, enum_type)
