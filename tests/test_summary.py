import pendulum
import pytest

from timesheet.repository.fixture import load_fixture_time_entries
from timesheet.service.date_range import (
    normalize_date_range,
    range_end_date,
    range_start_date,
)
from timesheet.service.reconcile import reconcile_for_table
from timesheet.service.summary import (
    PREDEFINED_RANGES,
    get_predefined_range,
    summarize_entries,
    summarize_predefined_ranges,
)
from timesheet.service.time_entry import filter_time_entries

WEDNESDAY = pendulum.date(2025, 7, 9)


@pytest.fixture
def user_entries():
    return filter_time_entries(load_fixture_time_entries(), {"user_id": "u1"})


def _bounds(date_range):
    return (
        range_start_date(date_range).to_date_string(),
        range_end_date(date_range).to_date_string(),
    )


class TestGetPredefinedRange:
    def test_today(self):
        assert _bounds(get_predefined_range("today", WEDNESDAY)) == (
            "2025-07-09",
            "2025-07-09",
        )

    def test_this_week_runs_sunday_to_saturday(self):
        assert _bounds(get_predefined_range("this_week", WEDNESDAY)) == (
            "2025-07-06",
            "2025-07-12",
        )

    def test_this_week_on_a_sunday(self):
        assert _bounds(get_predefined_range("this_week", pendulum.date(2025, 7, 6))) == (
            "2025-07-06",
            "2025-07-12",
        )

    def test_this_week_on_a_saturday(self):
        assert _bounds(get_predefined_range("this_week", pendulum.date(2025, 7, 12))) == (
            "2025-07-06",
            "2025-07-12",
        )

    def test_this_month(self):
        assert _bounds(get_predefined_range("this_month", WEDNESDAY)) == (
            "2025-07-01",
            "2025-07-31",
        )

    def test_last_30_days_covers_31_days(self):
        assert _bounds(get_predefined_range("last_30_days", WEDNESDAY)) == (
            "2025-06-09",
            "2025-07-09",
        )

    def test_range_covers_whole_days(self):
        date_range = get_predefined_range("today", WEDNESDAY)
        assert date_range["start"].hour == 0
        assert date_range["end"].hour == 23
        assert date_range["end"].minute == 59

    def test_unknown_range(self):
        with pytest.raises(ValueError):
            get_predefined_range("next_year", WEDNESDAY)  # type: ignore[arg-type]


class TestSummarizeEntries:
    def test_this_week(self, user_entries):
        summary = summarize_entries(
            user_entries, get_predefined_range("this_week", WEDNESDAY)
        )

        assert summary == {
            "entries": 5,
            "total_minutes": 495 + 480 + 450 + 525 + 420,
            "total_hours": "39:30",
        }

    def test_placeholders_are_not_counted(self, user_entries):
        date_range = normalize_date_range(
            pendulum.date(2025, 7, 6), pendulum.date(2025, 7, 12)
        )
        reconciled = reconcile_for_table(user_entries, date_range)

        assert len(reconciled) == 7
        assert summarize_entries(reconciled) == summarize_entries(
            user_entries, date_range
        )

    def test_entries_without_times_count_but_add_nothing(self, make_entry):
        entries = [
            make_entry("2025-07-01", "09:00", "10:30", "00:00"),
            make_entry("2025-07-02", "09:00", "", ""),
        ]

        assert summarize_entries(entries) == {
            "entries": 2,
            "total_minutes": 90,
            "total_hours": "1:30",
        }

    def test_no_entries(self):
        assert summarize_entries([]) == {
            "entries": 0,
            "total_minutes": 0,
            "total_hours": "0:00",
        }

    def test_repeatable(self, user_entries):
        date_range = get_predefined_range("this_month", WEDNESDAY)
        assert summarize_entries(user_entries, date_range) == summarize_entries(
            user_entries, date_range
        )


def test_summarize_predefined_ranges(user_entries):
    summaries = summarize_predefined_ranges(user_entries, WEDNESDAY)

    assert list(summaries) == PREDEFINED_RANGES
    assert summaries["today"]["entries"] == 1
    assert summaries["today"]["total_hours"] == "7:30"
    assert summaries["this_week"]["total_hours"] == "39:30"
    assert summaries["this_month"]["entries"] == 20
    assert summaries["last_30_days"]["entries"] == 7
