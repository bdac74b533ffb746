"""Error taxonomy for string transforms."""

from __future__ import annotations


class StringKitError(Exception):
    """Base class for stringkit failures."""


class InvalidInputError(StringKitError, ValueError):
    """Raised when an argument is absent, empty or otherwise unusable."""


class MissingValueError(InvalidInputError):
    """Raised when a required string is None."""


class InvalidFormatError(InvalidInputError):
    """Raised when text does not match the shape a parser expects."""


class GuidFormatError(InvalidFormatError):
    """Raised when text is not a GUID in the accepted layout."""


class PhoneNumberFormatError(InvalidFormatError):
    """Raised when a phone number has an unsupported digit layout."""
