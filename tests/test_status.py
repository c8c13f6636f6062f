import pendulum

from timesheet.model.status import EntryStatus
from timesheet.service.status import (
    get_entry_status,
    get_status_breakdown,
    is_placeholder_entry,
    is_weekend_day,
)
from timesheet.template.time_entry import get_placeholder_entry


def test_full_day_is_complete(make_entry):
    assert get_entry_status(make_entry("2025-07-01", "09:00", "17:30", "00:30")) == (
        EntryStatus.COMPLETE
    )


def test_partial_day_is_in_progress(make_entry):
    assert get_entry_status(make_entry("2025-07-02", "08:30", "17:00", "00:45")) == (
        EntryStatus.IN_PROGRESS
    )


def test_less_than_an_hour_is_pending(make_entry):
    assert get_entry_status(make_entry("2025-07-02", "09:00", "09:45", "00:00")) == (
        EntryStatus.PENDING
    )


def test_missing_end_time_is_pending(make_entry):
    assert get_entry_status(make_entry("2025-07-02", "09:00", "", "")) == (
        EntryStatus.PENDING
    )


def test_placeholders_have_no_entry():
    date = pendulum.date(2025, 7, 5)
    assert get_entry_status(None) == EntryStatus.NO_ENTRY
    assert get_entry_status(get_placeholder_entry(date)) == EntryStatus.NO_ENTRY
    assert get_entry_status(get_placeholder_entry(date, weekend=True)) == (
        EntryStatus.NO_ENTRY
    )


def test_placeholder_detection(make_entry):
    date = pendulum.date(2025, 7, 5)
    assert is_placeholder_entry(get_placeholder_entry(date))
    assert is_placeholder_entry(get_placeholder_entry(date, weekend=True))
    assert is_placeholder_entry(make_entry("2025-07-05", user_id="placeholder"))
    assert not is_placeholder_entry(make_entry("2025-07-05"))


def test_status_labels():
    assert [str(status) for status in EntryStatus] == [
        "Complete",
        "In Progress",
        "Pending",
        "No Entry",
    ]


def test_is_weekend_day():
    assert not is_weekend_day(pendulum.date(2025, 7, 4))
    assert is_weekend_day(pendulum.date(2025, 7, 5))
    assert is_weekend_day(pendulum.date(2025, 7, 6))
    assert not is_weekend_day(pendulum.date(2025, 7, 7))


def test_status_breakdown_counts_every_status(make_entry):
    entries = [
        make_entry("2025-07-01", "09:00", "17:30", "00:30"),
        make_entry("2025-07-02", "09:00", "12:00", "00:00"),
        get_placeholder_entry(pendulum.date(2025, 7, 5), weekend=True),
    ]

    assert get_status_breakdown(entries) == {
        EntryStatus.COMPLETE: 1,
        EntryStatus.IN_PROGRESS: 1,
        EntryStatus.PENDING: 0,
        EntryStatus.NO_ENTRY: 1,
    }


def test_status_breakdown_of_nothing():
    assert get_status_breakdown([]) == {status: 0 for status in EntryStatus}
