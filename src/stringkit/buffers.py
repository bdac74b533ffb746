"""Scratch buffer sizing and pooled buffer reuse.

Short outputs are written into a call-local buffer. Outputs longer than
``STACKALLOC_THRESHOLD`` borrow a buffer from a shared, lock-protected pool
that is returned before the transform returns, whatever the exit path.
"""

from __future__ import annotations

from contextlib import contextmanager
import logging
import threading
from typing import TYPE_CHECKING, Final, Iterator

if TYPE_CHECKING:
    from .config import BufferConfig

_LOGGER = logging.getLogger(__name__)

STACKALLOC_THRESHOLD: Final = 128

_MIN_BUCKET_CAPACITY: Final = 16


class CharBuffer:
    """Writable view of exactly ``length`` character slots."""

    __slots__ = ("_data", "_length")

    def __init__(self, data: list[str], length: int) -> None:
        if length > len(data):
            raise ValueError(f"View length {length} exceeds buffer capacity {len(data)}")
        self._data = data
        self._length = length

    def __len__(self) -> int:
        return self._length

    def __getitem__(self, index: int) -> str:
        return self._data[self._check(index)]

    def __setitem__(self, index: int, char: str) -> None:
        self._data[self._check(index)] = char

    def write(self, index: int, text: str) -> int:
        """Copy ``text`` into the view starting at ``index``; returns the next index."""
        end = index + len(text)
        if index < 0 or end > self._length:
            raise IndexError(f"Write of {len(text)} slot(s) at {index} exceeds view length {self._length}")
        self._data[index:end] = text
        return end

    def fill(self, start: int, stop: int, char: str) -> None:
        if start < 0 or stop > self._length or start > stop:
            raise IndexError(f"Fill range {start}:{stop} outside view length {self._length}")
        self._data[start:stop] = char * (stop - start)

    def swap(self, i: int, j: int) -> None:
        i, j = self._check(i), self._check(j)
        data = self._data
        data[i], data[j] = data[j], data[i]

    def getvalue(self, length: int | None = None) -> str:
        """Build the output string from the first ``length`` slots (all by default)."""
        if length is None:
            length = self._length
        elif not 0 <= length <= self._length:
            raise IndexError(f"Length {length} outside view length {self._length}")
        return "".join(self._data[:length])

    def _check(self, index: int) -> int:
        if not 0 <= index < self._length:
            raise IndexError(f"Index {index} outside view length {self._length}")
        return index


class CharBufferPool:
    """Thread-safe pool of reusable character buffers.

    Buffers are grouped into power-of-two capacity buckets. A bucket keeps at
    most ``max_buffers_per_bucket`` idle buffers; anything beyond that, or any
    buffer larger than ``max_buffer_length``, is dropped on release.
    """

    def __init__(self, max_buffers_per_bucket: int = 8, max_buffer_length: int = 1 << 20) -> None:
        if max_buffers_per_bucket < 0:
            raise ValueError("max_buffers_per_bucket cannot be negative")
        if max_buffer_length <= 0:
            raise ValueError("max_buffer_length must be positive")
        self.max_buffers_per_bucket = max_buffers_per_bucket
        self.max_buffer_length = max_buffer_length
        self._buckets: dict[int, list[list[str]]] = {}
        self._leased: set[int] = set()
        self._lock = threading.Lock()
        self.rented = 0
        self.released = 0

    @property
    def outstanding(self) -> int:
        with self._lock:
            return len(self._leased)

    def rent(self, minimum_length: int) -> list[str]:
        if minimum_length < 0:
            raise ValueError("minimum_length cannot be negative")
        capacity = _bucket_capacity(minimum_length)
        with self._lock:
            bucket = self._buckets.get(capacity)
            buffer = bucket.pop() if bucket else None
            if buffer is None:
                buffer = [""] * capacity
            self._leased.add(id(buffer))
            self.rented += 1
        return buffer

    def release(self, buffer: list[str]) -> None:
        capacity = len(buffer)
        with self._lock:
            try:
                self._leased.remove(id(buffer))
            except KeyError:
                raise ValueError("Buffer was not rented from this pool") from None
            self.released += 1
            if capacity > self.max_buffer_length:
                _LOGGER.debug("Dropping oversized buffer of capacity %d", capacity)
                return
            bucket = self._buckets.setdefault(capacity, [])
            if len(bucket) >= self.max_buffers_per_bucket:
                _LOGGER.debug("Bucket %d full; dropping released buffer", capacity)
                return
            bucket.append(buffer)

    def idle_count(self) -> int:
        with self._lock:
            return sum(len(bucket) for bucket in self._buckets.values())


def _bucket_capacity(length: int) -> int:
    capacity = _MIN_BUCKET_CAPACITY
    while capacity < length:
        capacity <<= 1
    return capacity


_shared_pool = CharBufferPool()


def shared_pool() -> CharBufferPool:
    return _shared_pool


def configure_shared_pool(config: BufferConfig) -> CharBufferPool:
    """Replace the process-wide pool with one sized from ``config``."""
    global _shared_pool
    _shared_pool = CharBufferPool(
        max_buffers_per_bucket=config.max_buffers_per_bucket,
        max_buffer_length=config.max_buffer_length,
    )
    _LOGGER.debug(
        "Configured shared buffer pool: max_buffers_per_bucket=%d, max_buffer_length=%d",
        config.max_buffers_per_bucket,
        config.max_buffer_length,
    )
    return _shared_pool


@contextmanager
def scratch_buffer(length: int, pool: CharBufferPool | None = None) -> Iterator[CharBuffer]:
    """Yield a writable buffer of exactly ``length`` slots.

    Lengths up to ``STACKALLOC_THRESHOLD`` use a call-local list. Longer
    lengths borrow from ``pool`` (the shared pool by default) and give the
    buffer back on exit, including when the body raises.
    """
    if length < 0:
        raise ValueError("length cannot be negative")
    if length <= STACKALLOC_THRESHOLD:
        yield CharBuffer([""] * length, length)
        return

    if pool is None:
        pool = _shared_pool
    rented = pool.rent(length)
    try:
        yield CharBuffer(rented, length)
    finally:
        pool.release(rented)
