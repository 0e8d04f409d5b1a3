"""
Unit tests for the field classifiers (seqtext.classify).

Covers the finite-number pattern (including the NaN/Infinity/overflow
rejections that plain ``float()`` would accept) and ISO date/time
conversion to UTC, including explicit offsets.
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from seqtext.classify import (
    is_finite_number,
    is_iso_datetime,
    parse_finite_number,
    parse_iso_datetime,
)


def _utc(*args: int) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


class TestFiniteNumber:
    """Tests for is_finite_number() / parse_finite_number()."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("0", 0.0),
            ("42", 42.0),
            ("-1.5", -1.5),
            ("+3", 3.0),
            ("3.", 3.0),
            (".5", 0.5),
            ("1e3", 1000.0),
            ("2.5E-2", 0.025),
            ("-7e+1", -70.0),
        ],
    )
    def test_accepts_plain_numbers(self, text, expected):
        assert is_finite_number(text)
        assert parse_finite_number(text) == pytest.approx(expected)

    @pytest.mark.parametrize(
        "text",
        ["NaN", "nan", "Infinity", "-Infinity", "inf", "1e999", "-1e400"],
    )
    def test_rejects_non_finite(self, text):
        """Values float() would accept but which are not finite."""
        assert parse_finite_number(text) is None
        assert not is_finite_number(text)

    @pytest.mark.parametrize(
        "text",
        ["", " ", "abc", "1,000", "1_000", " 5", "5 ", "0x10", "1e", "e5", ".", "+", "--1", "1.2.3"],
    )
    def test_rejects_malformed(self, text):
        assert parse_finite_number(text) is None

    def test_rejects_non_ascii_digits(self):
        """Arabic-Indic digits pass str.isdigit() but are not ASCII numbers."""
        assert not is_finite_number("١٢")

    def test_returns_float_for_integers(self):
        assert isinstance(parse_finite_number("7"), float)


class TestIsoDatetime:
    """Tests for is_iso_datetime() / parse_iso_datetime()."""

    def test_date_only_is_midnight_utc(self):
        assert parse_iso_datetime("2024-01-01") == _utc(2024, 1, 1)

    def test_time_without_designator_is_utc(self):
        assert parse_iso_datetime("2024-03-05T14:30") == _utc(2024, 3, 5, 14, 30)

    def test_space_separator(self):
        assert parse_iso_datetime("2024-03-05 14:30:15") == _utc(2024, 3, 5, 14, 30, 15)

    def test_z_designator(self):
        assert parse_iso_datetime("2024-03-05T14:30:15Z") == _utc(2024, 3, 5, 14, 30, 15)

    def test_fractional_seconds_padded_to_millis(self):
        value = parse_iso_datetime("2024-03-05T14:30:15.5Z")
        assert value == _utc(2024, 3, 5, 14, 30, 15, 500_000)
        value = parse_iso_datetime("2024-03-05T14:30:15.123")
        assert value == _utc(2024, 3, 5, 14, 30, 15, 123_000)

    def test_positive_offset_subtracted(self):
        """Wall time 10:00 at +02:00 is 08:00 UTC."""
        assert parse_iso_datetime("2024-01-01T10:00:00+02:00") == _utc(2024, 1, 1, 8)

    def test_negative_offset_added(self):
        assert parse_iso_datetime("2024-01-01T10:00:00-05:30") == _utc(2024, 1, 1, 15, 30)

    def test_offset_crosses_day_boundary(self):
        assert parse_iso_datetime("2024-01-01T01:00+03:00") == _utc(2023, 12, 31, 22)

    @pytest.mark.parametrize(
        "text",
        [
            "0001-01-01T00:30+01:00",     # would land before year 1
            "9999-12-31T23:00-02:00",     # would land after year 9999
        ],
    )
    def test_offset_out_of_datetime_range(self, text):
        assert parse_iso_datetime(text) is None
        assert not is_iso_datetime(text)

    def test_offset_at_range_edge(self):
        assert parse_iso_datetime("0001-01-01T01:00+01:00") == _utc(1, 1, 1)

    def test_result_is_utc_aware(self):
        value = parse_iso_datetime("2024-06-01T12:00:00+09:00")
        assert value is not None
        assert value.tzinfo is timezone.utc

    @pytest.mark.parametrize(
        "text",
        [
            "2024-02-30",          # no such day
            "2023-02-29",          # not a leap year
            "2024-13-01",          # month out of range
            "2024-01-01T24:00",    # hour out of range
            "2024-01-01T12:60",    # minute out of range
            "0000-01-01",          # year below datetime range
        ],
    )
    def test_invalid_calendar_values_fail(self, text):
        assert parse_iso_datetime(text) is None
        assert not is_iso_datetime(text)

    @pytest.mark.parametrize(
        "text",
        [
            "2024-1-1",
            "2024/01/01",
            "20240101",
            "2024-01-01T",
            "2024-01-01T10",
            "2024-01-01T10:00:00.1234",
            "2024-01-01Z",
            "2024-01-01T10:00+0200",
            "2024-01-01\t10:00",
            " 2024-01-01",
            "Time",
        ],
    )
    def test_malformed_strings_fail(self, text):
        assert parse_iso_datetime(text) is None

    def test_leap_day_accepted(self):
        assert parse_iso_datetime("2024-02-29") == _utc(2024, 2, 29)

    def test_numbers_are_not_dates(self):
        assert not is_iso_datetime("2024")
        assert not is_iso_datetime("1.5")
