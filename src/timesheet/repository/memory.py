# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

import pendulum

from timesheet import time
from timesheet.logger import get_logger
from timesheet.model.entity_id import EntityId, generate_entity_id
from timesheet.model.time_entry import TimeEntry
from timesheet.repository.fixture import load_fixture_time_entries
from timesheet.repository.store import TimeEntryNotFoundError, TimeEntryStore

logger = get_logger(__name__)


class InMemoryTimeEntryStore(TimeEntryStore):
    """Keeps entries in a list for the lifetime of the process."""

    def __init__(self, entries: Optional[list[TimeEntry]] = None) -> None:
        self._entries: list[TimeEntry] = deepcopy(entries) if entries else []

    @classmethod
    def from_fixture(cls) -> "InMemoryTimeEntryStore":
        entries = load_fixture_time_entries()
        logger.info("seeded in-memory store", entries=len(entries))
        return cls(entries)

    def __find(self, id: EntityId) -> TimeEntry:
        for entry in self._entries:
            if entry["id"] == id:
                return entry
        raise TimeEntryNotFoundError(id)

    def list_entries(self) -> list[TimeEntry]:
        return deepcopy(self._entries)

    def get_entry(self, id: EntityId) -> TimeEntry:
        return deepcopy(self.__find(id))

    def create_entry(self, entry: TimeEntry) -> EntityId:
        new_entry = deepcopy(entry)
        if not new_entry["id"]:
            new_entry["id"] = generate_entity_id()
        self._entries.append(new_entry)
        logger.info("created time entry", id=new_entry["id"], user_id=entry["user_id"])
        return new_entry["id"]

    def update_entry(
        self,
        id: EntityId,
        date: Optional[pendulum.Date] = None,
        start_time: Optional[str] = None,
        end_time: Optional[str] = None,
        break_duration: Optional[str] = None,
    ) -> TimeEntry:
        entry = self.__find(id)
        entry["updated"] = time.now_utc()
        if date is not None:
            entry["date"] = date
        if start_time is not None:
            entry["start_time"] = start_time
        if end_time is not None:
            entry["end_time"] = end_time
        if break_duration is not None:
            entry["break_duration"] = break_duration
        logger.info("updated time entry", id=id)
        return deepcopy(entry)

    def delete_entry(self, id: EntityId) -> None:
        entry = self.__find(id)
        self._entries.remove(entry)
        logger.info("deleted time entry", id=id)
