from typing import Callable, Optional

import pendulum
import pytest

from timesheet import configuration
from timesheet.model.time_entry import TimeEntry
from timesheet.repository import time_entry as time_entry_repository
from timesheet.repository.configuration import CONFIGURATION_REPO
from timesheet.repository.session import SESSION_REPO
from timesheet.repository.time_entry import TIME_ENTRY_REPO
from timesheet.view import state as view_state

EntryFactory = Callable[..., TimeEntry]


def _make_entry(
    date: str,
    start_time: str = "09:00",
    end_time: str = "17:00",
    break_duration: str = "00:30",
    id: Optional[str] = None,
    user_id: str = "u1",
) -> TimeEntry:
    created = pendulum.datetime(2025, 7, 1, 18, tz="UTC")
    return {
        "id": id if id is not None else f"entry-{date}",
        "user_id": user_id,
        "date": pendulum.parse(date, exact=True),  # type: ignore[typeddict-item]
        "start_time": start_time,
        "end_time": end_time,
        "break_duration": break_duration,
        "created": created,
        "updated": created,
    }


@pytest.fixture
def make_entry() -> EntryFactory:
    return _make_entry


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """Point configuration and data files at tmp_path and reset cached repositories."""
    config_path = tmp_path / "config"
    data_path = tmp_path / "data"
    config_path.mkdir()

    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", data_path)
    monkeypatch.setattr(
        configuration, "DATA_TIME_ENTRIES_DIR", data_path / "time_entries"
    )
    monkeypatch.setattr(configuration, "DATA_SESSION_PATH", data_path / "session.yaml")

    monkeypatch.setattr(CONFIGURATION_REPO, "_config", None)
    monkeypatch.setattr(CONFIGURATION_REPO, "is_dirty", False)
    monkeypatch.setattr(SESSION_REPO, "_session", None)
    monkeypatch.setattr(SESSION_REPO, "is_dirty", False)
    monkeypatch.setattr(TIME_ENTRY_REPO, "_entries", None)
    monkeypatch.setattr(TIME_ENTRY_REPO, "is_dirty", False)
    monkeypatch.setattr(TIME_ENTRY_REPO, "_dirty_ids", set())
    monkeypatch.setattr(TIME_ENTRY_REPO, "_deleted_ids", set())
    monkeypatch.setattr(time_entry_repository, "_memory_store", None)

    view_state.set_show_header(True)
    return tmp_path
