"""Null, empty and whitespace predicates and argument guards."""

from __future__ import annotations

from .errors import InvalidInputError, MissingValueError


def is_null_or_empty(value: str | None) -> bool:
    return value is None or len(value) == 0


def is_empty(value: str | None) -> bool:
    """True only for ``""``; None is not empty."""
    return value is not None and len(value) == 0


def has_content(value: str | None) -> bool:
    return not is_null_or_empty(value)


def is_whitespace(value: str | None) -> bool:
    """True when every character is whitespace (vacuously true for ``""`` and None)."""
    if not value:
        return True
    return value.isspace()


def is_null_or_whitespace(value: str | None) -> bool:
    return is_null_or_empty(value) or is_whitespace(value)


def throw_if_null_or_empty(value: str | None, name: str | None = None) -> None:
    """Raise unless ``value`` holds at least one character.

    Raises:
        MissingValueError: ``value`` is None.
        InvalidInputError: ``value`` is ``""``.
    """
    label = name or "value"
    if value is None:
        raise MissingValueError(f"{label}: string cannot be None")
    if len(value) == 0:
        raise InvalidInputError(f"{label}: string cannot be empty")


def throw_if_null_or_whitespace(value: str | None, name: str | None = None) -> None:
    throw_if_null_or_empty(value, name)
    if value.isspace():
        raise InvalidInputError(f"{name or 'value'}: string cannot be whitespace")
