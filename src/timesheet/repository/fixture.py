# SPDX-License-Identifier: MIT

from pathlib import Path

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from timesheet.model.time_entry import TimeEntry
from timesheet.model.user import Account
from timesheet.repository.serialize import convert_time_entry_for_deserialization

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"
TIME_ENTRIES_FIXTURE_PATH = FIXTURES_PATH / "time_entries.yaml"
ACCOUNTS_FIXTURE_PATH = FIXTURES_PATH / "accounts.yaml"


def load_fixture_time_entries() -> list[TimeEntry]:
    raw = load(TIME_ENTRIES_FIXTURE_PATH.read_text(), Loader=Loader)
    return [
        convert_time_entry_for_deserialization(raw_entry)
        for raw_entry in raw["time_entries"]
    ]


def load_fixture_accounts() -> list[Account]:
    raw = load(ACCOUNTS_FIXTURE_PATH.read_text(), Loader=Loader)
    return raw["accounts"]
