import pendulum
import pytest

from timesheet.service.time_entry import (
    TimeEntryValidationError,
    create_time_entry,
    filter_time_entries,
    paginate_time_entries,
    validate_time_entry,
)


class TestValidateTimeEntry:
    def test_valid(self):
        assert validate_time_entry("9:00", "17:30", "00:30")

    @pytest.mark.parametrize(
        "start_time, end_time, break_duration, message",
        [
            ("", "17:00", "00:00", "Start time is required"),
            ("09:00", "", "00:00", "End time is required"),
            ("09:00", "17:00", "", "Break duration is required"),
            ("9am", "17:00", "00:00", "Start time must be in HH:MM format"),
            ("09:00", "24:00", "00:00", "End time must be in HH:MM format"),
            ("09:00", "17:00", "0:5", "Break duration must be in HH:MM format"),
        ],
    )
    def test_invalid_fields(self, start_time, end_time, break_duration, message):
        with pytest.raises(TimeEntryValidationError, match=message):
            validate_time_entry(start_time, end_time, break_duration)

    @pytest.mark.parametrize("end_time", ["09:00", "08:59"])
    def test_end_must_be_after_start(self, end_time):
        with pytest.raises(TimeEntryValidationError, match="must be after start"):
            validate_time_entry("09:00", end_time, "00:00")


def test_create_time_entry_normalizes_times():
    entry = create_time_entry("u1", pendulum.date(2025, 8, 1), "9:00", "17:00", "0:30")

    assert entry["id"] == ""
    assert entry["user_id"] == "u1"
    assert entry["date"] == pendulum.date(2025, 8, 1)
    assert entry["start_time"] == "09:00"
    assert entry["end_time"] == "17:00"
    assert entry["break_duration"] == "00:30"
    assert entry["created"] == entry["updated"]


def test_create_time_entry_rejects_invalid():
    with pytest.raises(TimeEntryValidationError):
        create_time_entry("u1", pendulum.date(2025, 8, 1), "17:00", "09:00", "00:00")


class TestFilterTimeEntries:
    def test_sorted_by_date(self, make_entry):
        entries = [make_entry("2025-07-03"), make_entry("2025-07-01")]

        filtered = filter_time_entries(entries)

        assert [entry["id"] for entry in filtered] == [
            "entry-2025-07-01",
            "entry-2025-07-03",
        ]

    def test_by_user(self, make_entry):
        entries = [
            make_entry("2025-07-01", user_id="u1"),
            make_entry("2025-07-02", user_id="u2"),
        ]

        filtered = filter_time_entries(entries, {"user_id": "u2"})

        assert [entry["user_id"] for entry in filtered] == ["u2"]

    def test_date_bounds_are_inclusive(self, make_entry):
        entries = [make_entry(f"2025-07-0{day}") for day in range(1, 6)]

        filtered = filter_time_entries(
            entries,
            {"start_date": pendulum.date(2025, 7, 2), "end_date": pendulum.date(2025, 7, 4)},
        )

        assert [entry["date"].day for entry in filtered] == [2, 3, 4]


class TestPaginateTimeEntries:
    def test_pages(self, make_entry):
        entries = [make_entry(f"2025-07-{day:02d}") for day in range(1, 26)]

        page = paginate_time_entries(entries, page=3, page_size=10)

        assert page["total"] == 25
        assert page["page"] == 3
        assert page["page_size"] == 10
        assert [entry["date"].day for entry in page["data"]] == [21, 22, 23, 24, 25]

    def test_past_the_end(self, make_entry):
        page = paginate_time_entries([make_entry("2025-07-01")], page=2, page_size=10)

        assert page["data"] == []
        assert page["total"] == 1

    @pytest.mark.parametrize("page, page_size", [(0, 10), (1, 0)])
    def test_invalid(self, page, page_size):
        with pytest.raises(ValueError):
            paginate_time_entries([], page, page_size)
