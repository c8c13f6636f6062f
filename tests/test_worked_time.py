import pytest

from timesheet.service.worked_time import (
    calculate_worked_minutes,
    calculate_worked_time,
    entry_worked_minutes,
    format_minutes,
    format_total_minutes,
    is_valid_time,
    normalize_time,
    parse_time,
)


class TestParseTime:
    @pytest.mark.parametrize(
        "time_str, expected",
        [
            ("00:00", 0),
            ("09:00", 540),
            ("9:05", 545),
            ("23:59", 1439),
        ],
    )
    def test_valid_times(self, time_str, expected):
        assert parse_time(time_str) == expected

    @pytest.mark.parametrize(
        "time_str",
        ["", "25:61", "24:00", "12:60", "0900", "ab:cd", "12:5", "-1:00", "12:00:00"],
    )
    def test_invalid_times_give_zero(self, time_str):
        assert parse_time(time_str) == 0


class TestCalculateWorkedTime:
    def test_full_day_with_break(self):
        assert calculate_worked_time("09:00", "17:30", "00:30") == "08:00"

    def test_negative_is_clamped(self):
        assert calculate_worked_time("09:00", "08:00", "00:00") == "00:00"

    def test_overnight_shift_is_not_wrapped(self):
        assert calculate_worked_time("22:00", "06:00", "00:00") == "00:00"

    def test_break_longer_than_shift(self):
        assert calculate_worked_time("09:00", "10:00", "02:00") == "00:00"

    def test_missing_break_counts_as_zero(self):
        assert calculate_worked_time("09:00", "12:15", "") == "03:15"

    def test_monotonic_in_end_time(self):
        previous = -1
        for end_minutes in range(0, 24 * 60, 7):
            end_time = format_minutes(end_minutes)
            worked = calculate_worked_minutes("08:00", end_time, "00:45")
            assert worked >= previous
            previous = worked


class TestFormatting:
    def test_format_minutes_pads_hours(self):
        assert format_minutes(65) == "01:05"
        assert format_minutes(0) == "00:00"

    def test_format_minutes_does_not_clamp_hours(self):
        assert format_minutes(25 * 60) == "25:00"

    def test_format_total_minutes_leaves_hours_unpadded(self):
        assert format_total_minutes(65) == "1:05"
        assert format_total_minutes(0) == "0:00"
        assert format_total_minutes(2370) == "39:30"

    def test_normalize_time(self):
        assert normalize_time("9:05") == "09:05"
        assert normalize_time("17:30") == "17:30"


class TestValidation:
    @pytest.mark.parametrize("time_str", ["00:00", "9:00", "23:59", "07:30"])
    def test_valid(self, time_str):
        assert is_valid_time(time_str)

    @pytest.mark.parametrize("time_str", ["", "24:00", "12:60", "12:5", "noon"])
    def test_invalid(self, time_str):
        assert not is_valid_time(time_str)


def test_entry_worked_minutes_ignores_entries_without_end(make_entry):
    entry = make_entry("2025-07-01", start_time="09:00", end_time="", break_duration="")
    assert entry_worked_minutes(entry) == 0


def test_entry_worked_minutes(make_entry):
    entry = make_entry("2025-07-01", "08:30", "17:00", "00:45")
    assert entry_worked_minutes(entry) == 465
