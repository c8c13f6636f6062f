# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

import pendulum
from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from timesheet import configuration, time
from timesheet.logger import get_logger
from timesheet.model.entity_id import EntityId, generate_entity_id
from timesheet.model.time_entry import TimeEntry
from timesheet.repository.configuration import CONFIGURATION_REPO
from timesheet.repository.memory import InMemoryTimeEntryStore
from timesheet.repository.serialize import (
    convert_time_entry_for_deserialization,
    convert_time_entry_for_serialization,
)
from timesheet.repository.store import TimeEntryNotFoundError, TimeEntryStore

logger = get_logger(__name__)


class TimeEntryRepository(TimeEntryStore):
    """One YAML file per entry under the data directory, written on flush."""

    def __init__(self) -> None:
        self._entries: Optional[list[TimeEntry]] = None
        self.is_dirty = False
        self._dirty_ids: set[str] = set()
        self._deleted_ids: set[str] = set()

    @property
    def entries(self) -> list[TimeEntry]:
        if self._entries is None:
            self.__load_data()
        if self._entries is None:
            raise ValueError()
        return self._entries

    def __load_data(self) -> None:
        self._entries = []
        for file_path in sorted(configuration.DATA_TIME_ENTRIES_DIR.iterdir()):
            if file_path.suffix != ".yaml":
                continue
            raw_entry = load(file_path.read_text(), Loader=Loader)
            if raw_entry is not None:
                self._entries.append(convert_time_entry_for_deserialization(raw_entry))

    def __save_data(self) -> None:
        # Write dirty entities
        for entry in self.entries:
            if entry["id"] in self._dirty_ids:
                file_path = configuration.DATA_TIME_ENTRIES_DIR / f"{entry['id']}.yaml"
                file_path.write_text(
                    dump(convert_time_entry_for_serialization(entry), Dumper=Dumper)
                )

        # Remove deleted entity files
        for entity_id in self._deleted_ids:
            file_path = configuration.DATA_TIME_ENTRIES_DIR / f"{entity_id}.yaml"
            if file_path.exists():
                file_path.unlink()

        self._dirty_ids.clear()
        self._deleted_ids.clear()

    def flush(self) -> bool:
        if self._entries is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def __find(self, id: EntityId) -> TimeEntry:
        for entry in self.entries:
            if entry["id"] == id:
                return entry
        raise TimeEntryNotFoundError(id)

    def import_entries(self, entries: list[TimeEntry]) -> None:
        """Store entries keeping their ids, e.g. when seeding from the fixture."""
        self.is_dirty = True
        for entry in entries:
            self.entries.append(deepcopy(entry))
            self._dirty_ids.add(entry["id"])
        logger.info("imported time entries", entries=len(entries))

    def list_entries(self) -> list[TimeEntry]:
        return deepcopy(self.entries)

    def get_entry(self, id: EntityId) -> TimeEntry:
        return deepcopy(self.__find(id))

    def create_entry(self, entry: TimeEntry) -> EntityId:
        self.is_dirty = True

        new_entry = deepcopy(entry)
        if not new_entry["id"]:
            new_entry["id"] = generate_entity_id()

        self.entries.append(new_entry)
        self._dirty_ids.add(new_entry["id"])
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

        self.is_dirty = True
        self._dirty_ids.add(id)

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

        self.is_dirty = True
        self.entries.remove(entry)
        self._dirty_ids.discard(id)
        self._deleted_ids.add(id)
        logger.info("deleted time entry", id=id)


TIME_ENTRY_REPO = TimeEntryRepository()

_memory_store: Optional[InMemoryTimeEntryStore] = None


def get_time_entry_store() -> TimeEntryStore:
    """Return the store selected by the "storage" configuration setting."""
    global _memory_store

    if CONFIGURATION_REPO.get_config()["storage"] == "memory":
        if _memory_store is None:
            _memory_store = InMemoryTimeEntryStore.from_fixture()
        return _memory_store
    return TIME_ENTRY_REPO
