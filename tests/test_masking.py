"""Tests for masking module."""

from __future__ import annotations

import random
import secrets

import pytest
from stringkit.masking import mask, secure_shuffle, shuffle


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, ""),
        ("", ""),
        ("1", "*"),
        ("12345", "*****"),
        ("123456", "******"),
        ("1234567", "****567"),
        ("ThisIsALongString", "**************ing"),
    ],
)
def test_mask(value: str | None, expected: str) -> None:
    assert mask(value) == expected


@pytest.mark.parametrize("length", [1, 6, 7, 20, 128, 129, 500])
def test_mask_preserves_length(length: int) -> None:
    assert len(mask("x" * length)) == length


def test_mask_long_value() -> None:
    assert mask("secret" * 50) == "*" * 297 + "ret"


def test_mask_visible_tail_stays_three_characters() -> None:
    value = "abcdefghijklmnopqrst" * 10
    masked = mask(value)
    assert masked[-3:] == value[-3:]
    assert masked[:-3] == "*" * 197


# =============================================================================
# Tests for shuffling
# =============================================================================


class TestShuffle:
    """Tests for shuffle and secure_shuffle."""

    @pytest.mark.parametrize("value", ["", "a", "hello world", "aabbcc", "x" * 50 + "y" * 200])
    def test_shuffle_keeps_characters(self, value: str) -> None:
        assert sorted(shuffle(value)) == sorted(value)
        assert sorted(secure_shuffle(value)) == sorted(value)

    def test_seeded_rng_is_reproducible(self) -> None:
        value = "the quick brown fox"
        assert shuffle(value, random.Random(42)) == shuffle(value, random.Random(42))

    def test_empty_returned(self) -> None:
        assert shuffle("") == ""
        assert secure_shuffle("") == ""

    def test_secure_shuffle_draws_from_secrets(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(secrets, "randbelow", lambda n: 0)
        # With every draw returning 0: swap(2, 0) gives "cba", swap(1, 0) gives "bca"
        assert secure_shuffle("abc") == "bca"
