import pendulum
import pytest
import typer

from timesheet.terminal.parse import parse_date, parse_time_option, resolve_date_bounds
from timesheet.time import today_local


class TestParseDate:
    def test_none(self):
        assert parse_date(None) is None

    def test_iso_date(self):
        assert parse_date("2025-07-01") == pendulum.date(2025, 7, 1)

    @pytest.mark.parametrize(
        "date_param, offset",
        [("today", 0), ("t", 0), ("yesterday", -1), ("y", -1), ("o", 1), ("-3", -3), ("2", 2)],
    )
    def test_relative(self, date_param, offset):
        assert parse_date(date_param) == today_local().add(days=offset)

    @pytest.mark.parametrize("date_param", ["2025-13-01", "01/07/2025", "someday"])
    def test_invalid(self, date_param):
        with pytest.raises(typer.BadParameter):
            parse_date(date_param)


def test_parse_time_option():
    assert parse_time_option("9:00") == "9:00"
    assert parse_time_option(None) is None
    with pytest.raises(typer.BadParameter):
        parse_time_option("9.00")


class TestResolveDateBounds:
    def test_explicit(self):
        assert resolve_date_bounds("2025-07-01", "2025-07-07", None) == (
            pendulum.date(2025, 7, 1),
            pendulum.date(2025, 7, 7),
        )

    def test_open_ended(self):
        assert resolve_date_bounds("2025-07-01", None, None) == (
            pendulum.date(2025, 7, 1),
            None,
        )

    def test_named_range_wins(self):
        start, end = resolve_date_bounds("2025-07-01", None, "today")
        assert start == end == today_local()

    def test_unknown_range(self):
        with pytest.raises(typer.BadParameter, match="Unknown range"):
            resolve_date_bounds(None, None, "forever")
