"""Composite ``{partitionKey}:{documentId}`` identifiers."""

from __future__ import annotations

from typing import Final

from .guards import throw_if_null_or_empty

ID_SEPARATOR: Final = ":"


def split_composite_id(value: str) -> tuple[str, str]:
    """Split a composite id into ``(partition_key, document_id)``.

    The document id is whatever follows the last colon; the partition key may
    itself contain colons (``"a:b:c"`` -> ``("a:b", "c")``). An id without a
    colon is both its own partition key and document id.

    Raises:
        MissingValueError: ``value`` is None.
        InvalidInputError: ``value`` is empty.
    """
    throw_if_null_or_empty(value, "value")

    index = value.rfind(ID_SEPARATOR)
    if index < 0:
        return value, value
    return value[:index], value[index + 1 :]


def add_document_suffix(partition_key: str, document_id: str) -> str:
    return "".join((partition_key, ID_SEPARATOR, document_id))


def add_partition_prefix(document_id: str, partition_key: str) -> str:
    return "".join((partition_key, ID_SEPARATOR, document_id))


def to_ids(value: str | None) -> list[str] | None:
    """Split on every colon. Use :func:`split_composite_id` for partition keys."""
    if not value:
        return None
    return value.split(ID_SEPARATOR)


def from_comma_separated_to_list(value: str | None) -> list[str]:
    """Split on commas, skipping empty segments. Spaces are kept as-is."""
    if not value:
        return []
    return [part for part in value.split(",") if part]
