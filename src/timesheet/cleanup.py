# SPDX-License-Identifier: MIT

import atexit

from timesheet.repository.configuration import CONFIGURATION_REPO
from timesheet.repository.session import SESSION_REPO
from timesheet.repository.time_entry import TIME_ENTRY_REPO


def flush_and_sync() -> None:
    CONFIGURATION_REPO.flush()
    SESSION_REPO.flush()
    TIME_ENTRY_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush_and_sync)
