"""Tests for numerics module."""

from __future__ import annotations

from datetime import timezone
from decimal import Decimal

import pytest
from stringkit.culture import CultureInfo
from stringkit.errors import InvalidFormatError
from stringkit.numerics import (
    is_alpha_numeric,
    is_numeric,
    to_bool,
    to_date_time,
    to_decimal,
    to_double,
    to_int,
    to_utc_date_time,
)

_DE_DE = CultureInfo(name="de-DE", decimal_separator=",")


# =============================================================================
# Tests for number parsing
# =============================================================================


class TestDecimalParsing:
    """Tests for to_double and to_decimal."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("2.5", 2.5),
            (" -3.75 ", -3.75),
            ("+4", 4.0),
            (".5", 0.5),
            ("5.", 5.0),
            ("1,000", None),
            ("1e5", None),
            ("abc", None),
            ("", None),
            (None, None),
        ],
    )
    def test_to_double(self, value: str | None, expected: float | None) -> None:
        assert to_double(value) == expected

    def test_to_decimal_keeps_precision(self) -> None:
        assert to_decimal("2.50") == Decimal("2.50")
        assert to_decimal("0.1") + to_decimal("0.2") == Decimal("0.3")
        assert to_decimal("two") is None

    def test_culture_decimal_separator(self) -> None:
        assert to_double("2,5", _DE_DE) == 2.5
        assert to_double("2.5", _DE_DE) is None


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("123", 123),
        ("-456", -456),
        ("+7", 7),
        ("   789   ", 789),
        ("0", 0),
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
        ("2147483648", 0),
        ("9999999999", 0),
        ("123abc", 0),
        ("12.5", 0),
        ("", 0),
        (None, 0),
    ],
)
def test_to_int(value: str | None, expected: int) -> None:
    assert to_int(value) == expected


class TestToBool:
    """Tests for to_bool."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(None, False), ("true", True), ("True", True), (" FALSE ", False), ("false", False)],
    )
    def test_parses(self, value: str | None, expected: bool) -> None:
        assert to_bool(value) is expected

    @pytest.mark.parametrize("value", ["yes", "1", ""])
    def test_unrecognized_raises(self, value: str) -> None:
        with pytest.raises(InvalidFormatError):
            to_bool(value)


# =============================================================================
# Tests for date parsing
# =============================================================================


class TestDates:
    """Tests for to_date_time and to_utc_date_time."""

    @pytest.mark.parametrize("value", ["03/22/2019", "3/22/2019", "2019-03-22"])
    def test_month_first_and_iso_dates(self, value: str) -> None:
        result = to_date_time(value)
        assert result is not None
        assert (result.year, result.month, result.day) == (2019, 3, 22)
        assert result.tzinfo is not None

    def test_day_first_rejected(self) -> None:
        assert to_date_time("22/05/2019") is None

    def test_none_and_garbage(self) -> None:
        assert to_date_time(None) is None
        assert to_date_time("not a date") is None
        assert to_utc_date_time("") is None

    def test_utc_converts_offset(self) -> None:
        result = to_utc_date_time("2019-03-22T10:00:00+02:00")
        assert result is not None
        assert result.tzinfo == timezone.utc
        assert result.hour == 8

    @pytest.mark.parametrize("value", ["2019-03-22T10:00:00Z", "2019-03-22T10:00:00z"])
    def test_zulu_suffix(self, value: str) -> None:
        result = to_utc_date_time(value)
        assert result is not None
        assert result.tzinfo == timezone.utc
        assert (result.day, result.hour) == (22, 10)
        assert to_date_time(value) == result

    def test_utc_treats_naive_as_utc(self) -> None:
        result = to_utc_date_time("03/22/2019 14:30")
        assert result is not None
        assert result.tzinfo == timezone.utc
        assert (result.day, result.hour, result.minute) == (22, 14, 30)


# =============================================================================
# Tests for character-class predicates
# =============================================================================


@pytest.mark.parametrize(
    ("value", "expected"),
    [("123", True), ("12a", False), ("", False), (None, False), ("١٢٣", False)],
)
def test_is_numeric(value: str | None, expected: bool) -> None:
    assert is_numeric(value) is expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [("abc123", True), ("Ünï1", True), ("abc 123", False), ("  ", False), ("", False), (None, False)],
)
def test_is_alpha_numeric(value: str | None, expected: bool) -> None:
    assert is_alpha_numeric(value) is expected
