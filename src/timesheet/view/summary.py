# SPDX-License-Identifier: MIT

from pathlib import Path

from rich import box
from rich.console import Console
from rich.table import Table

from timesheet.model.date_range import PredefinedRange
from timesheet.model.report import EntrySummary, ExportSummary
from timesheet.model.status import EntryStatus
from timesheet.model.user import User
from timesheet.view.header import header

RANGE_LABELS: dict[PredefinedRange, str] = {
    "today": "Today",
    "this_week": "This Week",
    "this_month": "This Month",
    "last_30_days": "Last 30 Days",
}


def summary_cards_view(
    user: User, summaries: dict[PredefinedRange, EntrySummary]
) -> None:
    header(user, "summary")

    summary_table = Table(box=box.SIMPLE)
    summary_table.add_column("range")
    summary_table.add_column("entries", justify="right")
    summary_table.add_column("worked", justify="right")

    for name, summary in summaries.items():
        summary_table.add_row(
            RANGE_LABELS[name], str(summary["entries"]), summary["total_hours"]
        )

    console = Console()
    console.print(summary_table)


def export_summary_view(user: User, summary: ExportSummary, path: Path) -> None:
    header(user, "export")

    summary_table = Table(box=box.SIMPLE)
    summary_table.add_column("property")
    summary_table.add_column("value")

    summary_table.add_row("file", str(path))
    summary_table.add_row("total entries", str(summary["total_entries"]))
    summary_table.add_row("total hours worked", summary["total_hours"])
    summary_table.add_row(
        "average hours/day", f"{summary['average_hours_per_day']} hours"
    )
    for status in EntryStatus:
        summary_table.add_row(str(status), str(summary["status_counts"][status]))

    console = Console()
    console.print(summary_table)


def users_view(user: User, users: list[User]) -> None:
    header(user, "employees")

    users_table = Table(box=box.SIMPLE)
    users_table.add_column("id")
    users_table.add_column("name")
    users_table.add_column("email")

    for employee in users:
        users_table.add_row(employee["id"], employee["name"], employee["email"])

    console = Console()
    console.print(users_table)
