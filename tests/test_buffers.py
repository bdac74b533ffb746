"""Tests for buffers module."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
import logging

import pytest
from stringkit import buffers
from stringkit.buffers import (
    STACKALLOC_THRESHOLD,
    CharBuffer,
    CharBufferPool,
    configure_shared_pool,
    scratch_buffer,
    shared_pool,
)
from stringkit.casing import to_upper_invariant
from stringkit.config import BufferConfig


# =============================================================================
# Tests for scratch_buffer allocation policy
# =============================================================================


class TestScratchBuffer:
    """Tests for the inline-versus-pooled sizing policy."""

    def test_short_length_does_not_touch_pool(self) -> None:
        pool = CharBufferPool()
        with scratch_buffer(10, pool) as buffer:
            assert len(buffer) == 10
        assert pool.rented == 0
        assert pool.released == 0

    def test_threshold_length_stays_inline(self) -> None:
        pool = CharBufferPool()
        with scratch_buffer(STACKALLOC_THRESHOLD, pool):
            pass
        assert pool.rented == 0

    def test_long_length_rents_and_releases(self) -> None:
        pool = CharBufferPool()
        with scratch_buffer(STACKALLOC_THRESHOLD + 1, pool) as buffer:
            assert len(buffer) == STACKALLOC_THRESHOLD + 1
            assert pool.outstanding == 1
        assert pool.outstanding == 0
        assert pool.rented == 1
        assert pool.released == 1
        assert pool.idle_count() == 1

    def test_buffer_released_when_body_raises(self) -> None:
        pool = CharBufferPool()
        with pytest.raises(RuntimeError, match="boom"):
            with scratch_buffer(500, pool):
                raise RuntimeError("boom")
        assert pool.outstanding == 0
        assert pool.released == 1

    def test_buffer_released_on_early_return(self) -> None:
        pool = CharBufferPool()

        def first_slot() -> str:
            with scratch_buffer(300, pool) as buffer:
                buffer[0] = "x"
                return buffer.getvalue(1)

        assert first_slot() == "x"
        assert pool.outstanding == 0

    def test_negative_length_rejected(self) -> None:
        with pytest.raises(ValueError):
            with scratch_buffer(-1):
                pass

    def test_zero_length_gives_empty_value(self) -> None:
        with scratch_buffer(0) as buffer:
            assert buffer.getvalue() == ""

    def test_transform_on_long_input_returns_pool_to_rest(self) -> None:
        pool = shared_pool()
        before = pool.outstanding
        assert to_upper_invariant("a" * 1000) == "A" * 1000
        assert pool.outstanding == before


# =============================================================================
# Tests for CharBufferPool
# =============================================================================


class TestCharBufferPool:
    """Tests for bucketing, reuse and retention limits."""

    def test_rented_capacity_covers_request(self) -> None:
        pool = CharBufferPool()
        buffer = pool.rent(200)
        assert len(buffer) >= 200
        pool.release(buffer)

    def test_released_buffer_is_reused_for_same_bucket(self) -> None:
        pool = CharBufferPool()
        first = pool.rent(200)
        pool.release(first)
        second = pool.rent(150)
        assert second is first
        pool.release(second)

    def test_full_bucket_drops_extra_buffers(self, caplog: pytest.LogCaptureFixture) -> None:
        pool = CharBufferPool(max_buffers_per_bucket=1)
        a = pool.rent(200)
        b = pool.rent(200)
        with caplog.at_level(logging.DEBUG, logger="stringkit.buffers"):
            pool.release(a)
            pool.release(b)
        assert pool.idle_count() == 1
        assert "dropping released buffer" in caplog.text

    def test_oversized_buffers_are_not_retained(self) -> None:
        pool = CharBufferPool(max_buffer_length=64)
        buffer = pool.rent(100)
        pool.release(buffer)
        assert pool.idle_count() == 0
        assert pool.outstanding == 0

    def test_release_of_foreign_buffer_raises(self) -> None:
        pool = CharBufferPool()
        with pytest.raises(ValueError, match="not rented"):
            pool.release([""] * 32)

    def test_double_release_raises(self) -> None:
        pool = CharBufferPool()
        buffer = pool.rent(40)
        pool.release(buffer)
        with pytest.raises(ValueError):
            pool.release(buffer)

    def test_invalid_limits_rejected(self) -> None:
        with pytest.raises(ValueError):
            CharBufferPool(max_buffers_per_bucket=-1)
        with pytest.raises(ValueError):
            CharBufferPool(max_buffer_length=0)

    def test_concurrent_callers_never_share_buffers(self) -> None:
        pool = CharBufferPool(max_buffers_per_bucket=4)

        def work(i: int) -> bool:
            text = chr(ord("a") + i % 26) * 300
            with scratch_buffer(len(text), pool) as buffer:
                buffer.write(0, text)
                return buffer.getvalue() == text

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(work, range(400)))

        assert all(results)
        assert pool.outstanding == 0
        assert pool.rented == pool.released == 400


def test_configure_shared_pool_replaces_process_pool(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(buffers, "_shared_pool", buffers._shared_pool)
    pool = configure_shared_pool(BufferConfig(max_buffers_per_bucket=2, max_buffer_length=4096))
    assert shared_pool() is pool
    assert pool.max_buffers_per_bucket == 2
    assert pool.max_buffer_length == 4096


# =============================================================================
# Tests for CharBuffer
# =============================================================================


class TestCharBuffer:
    """Tests for the bounded write view."""

    def test_view_hides_spare_capacity(self) -> None:
        buffer = CharBuffer(["z"] * 32, 3)
        buffer.write(0, "abc")
        assert buffer.getvalue() == "abc"

    def test_write_past_view_raises(self) -> None:
        buffer = CharBuffer([""] * 32, 3)
        with pytest.raises(IndexError):
            buffer.write(1, "abc")

    def test_index_past_view_raises(self) -> None:
        buffer = CharBuffer([""] * 32, 3)
        with pytest.raises(IndexError):
            buffer[3] = "x"

    def test_fill_and_swap(self) -> None:
        buffer = CharBuffer([""] * 4, 4)
        buffer.fill(0, 3, "*")
        buffer[3] = "x"
        buffer.swap(0, 3)
        assert buffer.getvalue() == "x***"

    def test_getvalue_prefix(self) -> None:
        buffer = CharBuffer(list("hello"), 5)
        assert buffer.getvalue(2) == "he"
        with pytest.raises(IndexError):
            buffer.getvalue(6)

    def test_view_longer_than_storage_rejected(self) -> None:
        with pytest.raises(ValueError):
            CharBuffer([""] * 2, 3)
