# SPDX-License-Identifier: MIT

from enum import StrEnum


class EntryStatus(StrEnum):
    COMPLETE = "Complete"
    IN_PROGRESS = "In Progress"
    PENDING = "Pending"
    NO_ENTRY = "No Entry"
