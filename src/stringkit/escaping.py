"""URL escaping, template-injection escaping and slugs."""

from __future__ import annotations

import re
from typing import Final, Iterator
from urllib.parse import quote, unquote

from .buffers import scratch_buffer
from .casing import to_lower_invariant

# Whitespace runs become a single dash
_SPACES_RE: Final = re.compile(r"\s+")
# Everything outside ASCII alphanumerics, dash and underscore
_INVALID_SLUG_CHARS_RE: Final = re.compile(r"[^a-z0-9\-_]", re.ASCII)
# Runs of two or more separators keep their last character
_DUPLICATE_SEPARATORS_RE: Final = re.compile(r"[-_]*([-_])")

_TEMPLATE_REPLACEMENTS: Final = {
    '"': "'",
    "\\": "/",
    "\r": " ",
    "\n": " ",
}


def escape_for_url(value: str | None) -> str | None:
    """Percent-encode ``value`` as UTF-8, leaving only RFC 3986 unreserved characters."""
    if value is None:
        return None
    return quote(value, safe="")


def unescape_for_url(value: str | None) -> str | None:
    if value is None:
        return None
    return unquote(value)


def _template_units(value: str) -> Iterator[str]:
    i = 0
    length = len(value)
    while i < length:
        c = value[i]
        if c in "{}" and i + 1 < length and value[i + 1] == c:
            i += 2
            continue
        yield _TEMPLATE_REPLACEMENTS.get(c, c)
        i += 1


def escape_for_template_injection(value: str | None) -> str:
    """Neutralize text before it is embedded in a ``{{ ... }}`` template.

    Removes ``{{`` and ``}}`` pairs, turns double quotes into single quotes,
    backslashes into forward slashes, and CR/LF into spaces. Leading and
    trailing whitespace of the result is dropped; interior runs are kept.
    """
    if not value or value.isspace():
        return ""

    # Measure first so the output is written once, already trimmed.
    start = -1
    end = 0
    count = 0
    for unit in _template_units(value):
        if not unit.isspace():
            if start < 0:
                start = count
            end = count + 1
        count += 1
    if start < 0:
        return ""

    with scratch_buffer(end - start) as buffer:
        for position, unit in enumerate(_template_units(value)):
            if position >= end:
                break
            if position >= start:
                buffer[position - start] = unit
        return buffer.getvalue()


def slugify(value: str | None) -> str | None:
    """Build a URL slug: lowercase ASCII alphanumerics joined by single separators."""
    if not value:
        return value

    value = to_lower_invariant(value)
    value = _SPACES_RE.sub("-", value)
    value = _INVALID_SLUG_CHARS_RE.sub("", value)
    value = value.strip("-_")
    return _DUPLICATE_SEPARATORS_RE.sub(r"\1", value)
