"""Tests for calendar-date normalization, formatting and arithmetic."""

import time
from datetime import date, datetime, timezone

import pandas as pd
import pytest

from rentlib.dates import (
    InvalidDateFormat,
    add_months,
    calculate_end_date,
    format_date,
    format_date_to_iso,
    parse_date,
    to_date,
)


class TestToDate:
    @pytest.mark.parametrize(
        "value",
        [
            "2024-03-10",
            "20240310",
            "10/03/2024",
            "2024-03-10T00:00:00.000Z",
            "2024-03-10T23:59:59-03:00",
            "2024-03-10 15:00",
            "  2024-03-10  ",
            date(2024, 3, 10),
            datetime(2024, 3, 10, 23, 30),
            datetime(2024, 3, 10, 0, 30, tzinfo=timezone.utc),
            pd.Timestamp("2024-03-10 23:30"),
        ],
    )
    def test_accepts_date_like_values(self, value):
        assert to_date(value) == date(2024, 3, 10)

    def test_datetime_is_reduced_to_plain_date(self):
        result = to_date(datetime(2024, 3, 10, 12, 0))
        assert type(result) is date

    @pytest.mark.parametrize(
        "value",
        ["", "   ", "not a date", "2024-02-30", "2024-13-01", "31/02/2024", "2024", "2024-03", None],
    )
    def test_rejects_malformed_values(self, value):
        with pytest.raises(InvalidDateFormat):
            to_date(value)

    def test_rejects_missing_timestamp(self):
        with pytest.raises(InvalidDateFormat):
            to_date(pd.NaT)

    def test_invalid_date_format_is_a_value_error(self):
        with pytest.raises(ValueError) as excinfo:
            to_date("garbage")
        assert excinfo.value.value == "garbage"
        assert "garbage" in str(excinfo.value)

    def test_rejects_unsupported_types(self):
        with pytest.raises(TypeError):
            to_date(20240310)


class TestFormatDate:
    def test_brazilian_day_month_year(self):
        assert format_date("2024-03-10") == "10/03/2024"
        assert format_date(date(2024, 12, 1)) == "01/12/2024"

    @pytest.mark.parametrize("value", [None, "", "  ", pd.NaT])
    def test_missing_values_render_empty(self, value):
        assert format_date(value) == ""

    def test_malformed_value_raises(self):
        with pytest.raises(InvalidDateFormat):
            format_date("10-03")

    @pytest.mark.skipif(not hasattr(time, "tzset"), reason="requires time.tzset")
    @pytest.mark.parametrize(
        "zone", ["UTC", "America/Sao_Paulo", "Pacific/Kiritimati", "Pacific/Pago_Pago", "Asia/Tokyo"]
    )
    def test_independent_of_process_time_zone(self, monkeypatch, zone):
        monkeypatch.setenv("TZ", zone)
        time.tzset()
        try:
            assert format_date("2024-03-10") == "10/03/2024"
            assert format_date("2024-03-10T00:00:00.000Z") == "10/03/2024"
            assert format_date_to_iso("2024-03-10T23:59:59Z") == "2024-03-10"
            assert calculate_end_date("2024-03-10", 1) == "2024-04-10"
        finally:
            monkeypatch.undo()
            time.tzset()


class TestIsoFormatting:
    @pytest.mark.parametrize(
        "iso", ["2024-01-01", "2024-02-29", "2023-12-31", "1999-07-04"]
    )
    def test_iso_strings_are_stable(self, iso):
        assert format_date_to_iso(iso) == iso
        assert format_date_to_iso(format_date_to_iso(iso)) == iso

    def test_other_inputs(self):
        assert format_date_to_iso("10/03/2024") == "2024-03-10"
        assert format_date_to_iso(datetime(2024, 3, 10, 15)) == "2024-03-10"

    def test_parse_brazilian_date(self):
        assert parse_date("10/03/2024") == "2024-03-10"
        assert parse_date("") == ""

    def test_parse_rejects_iso_input(self):
        with pytest.raises(InvalidDateFormat):
            parse_date("2024-03-10")


class TestMonthArithmetic:
    def test_one_year_later_same_day(self):
        assert calculate_end_date("2024-01-15", 12) == "2025-01-15"

    def test_month_overflow_is_clamped(self):
        assert calculate_end_date("2024-01-31", 1) == "2024-02-29"
        assert calculate_end_date("2023-01-31", 1) == "2023-02-28"
        assert calculate_end_date("2024-03-31", 1) == "2024-04-30"

    def test_crosses_year_boundary(self):
        assert calculate_end_date("2024-11-30", 3) == "2025-02-28"

    def test_add_months_accepts_negative_offsets(self):
        assert add_months("2024-03-31", -1) == date(2024, 2, 29)

    def test_zero_months(self):
        assert add_months(date(2024, 5, 5), 0) == date(2024, 5, 5)
