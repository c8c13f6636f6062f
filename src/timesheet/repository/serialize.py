# SPDX-License-Identifier: MIT

from typing import Any, cast

from timesheet import time
from timesheet.model.time_entry import TimeEntry


def convert_time_entry_for_serialization(entry: TimeEntry) -> dict[str, Any]:
    serializable_entry = cast(dict[str, Any], dict(entry))
    serializable_entry["date"] = time.date_to_iso_str(entry["date"])
    serializable_entry["created"] = time.datetime_to_iso_str(entry["created"])
    serializable_entry["updated"] = time.datetime_to_iso_str(entry["updated"])
    return serializable_entry


def convert_time_entry_for_deserialization(entry: dict[str, Any]) -> TimeEntry:
    deserializable_entry = dict(entry)
    deserializable_entry["id"] = str(deserializable_entry["id"])
    deserializable_entry["date"] = time.date_from_str(str(deserializable_entry["date"]))
    deserializable_entry["created"] = time.datetime_from_str(
        str(deserializable_entry["created"])
    )
    deserializable_entry["updated"] = time.datetime_from_str(
        str(deserializable_entry["updated"])
    )
    for field in ("start_time", "end_time", "break_duration"):
        deserializable_entry[field] = deserializable_entry.get(field) or ""
    return cast(TimeEntry, deserializable_entry)
