"""File names and extensions."""

from __future__ import annotations

import posixpath
from urllib.parse import urlsplit

from .casing import to_lower_invariant
from .guards import throw_if_null_or_empty


def to_file_extension(file_name: str) -> str:
    """Lowercase extension of ``file_name`` without the dot, or ``""``.

    ``"archive.tar.gz"`` -> ``"gz"``; ``"hiddenfile."`` -> ``""``.
    """
    throw_if_null_or_empty(file_name, "file_name")

    base = file_name.replace("\\", "/").rsplit("/", 1)[-1]
    dot = base.rfind(".")
    if dot < 0 or dot == len(base) - 1:
        return ""
    return to_lower_invariant(base[dot + 1 :])


def to_file_name_from_uri(uri: str) -> str | None:
    """Last path segment of an absolute URI; None when ``uri`` is not absolute."""
    try:
        parts = urlsplit(uri)
    except ValueError:
        return None
    if not parts.scheme or not (parts.netloc or parts.path):
        return None
    return posixpath.basename(parts.path)
