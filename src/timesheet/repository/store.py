# SPDX-License-Identifier: MIT

from abc import ABC, abstractmethod
from typing import Optional

import pendulum

from timesheet.model.entity_id import EntityId
from timesheet.model.time_entry import TimeEntry


class TimeEntryNotFoundError(Exception):
    """Raised when no stored entry has the requested id."""

    def __init__(self, id: EntityId) -> None:
        super().__init__(f"Time entry not found: {id}")
        self.id = id


class TimeEntryStore(ABC):
    @abstractmethod
    def list_entries(self) -> list[TimeEntry]: ...

    @abstractmethod
    def get_entry(self, id: EntityId) -> TimeEntry: ...

    @abstractmethod
    def create_entry(self, entry: TimeEntry) -> EntityId: ...

    @abstractmethod
    def update_entry(
        self,
        id: EntityId,
        date: Optional[pendulum.Date] = None,
        start_time: Optional[str] = None,
        end_time: Optional[str] = None,
        break_duration: Optional[str] = None,
    ) -> TimeEntry: ...

    @abstractmethod
    def delete_entry(self, id: EntityId) -> None: ...

    def flush(self) -> bool:
        return False

    def resolve_entry_id(
        self, id_prefix: str, user_id: Optional[str] = None
    ) -> EntityId:
        """
        Find the single entry whose id equals or starts with id_prefix.

        With user_id only that user's entries are candidates.
        """
        ids = [
            entry["id"]
            for entry in self.list_entries()
            if user_id is None or entry["user_id"] == user_id
        ]
        if id_prefix in ids:
            return id_prefix
        matches = [id for id in ids if id.startswith(id_prefix)]
        if len(matches) != 1:
            raise TimeEntryNotFoundError(id_prefix)
        return matches[0]
