# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from timesheet.model.time_entry import TimeEntry
from timesheet.model.user import User
from timesheet.repository.store import TimeEntryNotFoundError, TimeEntryStore
from timesheet.repository.time_entry import get_time_entry_store
from timesheet.service.auth import AccessDeniedError, require_access
from timesheet.service.date_range import normalize_date_range
from timesheet.service.reconcile import reconcile_for_table
from timesheet.service.summary import summarize_entries
from timesheet.service.time_entry import (
    DEFAULT_PAGE_SIZE,
    TimeEntryValidationError,
    create_time_entry,
    filter_time_entries,
    paginate_time_entries,
    validate_time_entry,
)
from timesheet.service.worked_time import normalize_time
from timesheet.terminal.auth import get_current_user
from timesheet.terminal.custom_typer import SessionAwareTyperGroup
from timesheet.terminal.parse import parse_date, parse_time_option, resolve_date_bounds
from timesheet.time import today_local
from timesheet.view.time_entry import single_time_entry_view, time_entries_view

app = typer.Typer(cls=SessionAwareTyperGroup, no_args_is_help=True)


def _get_accessible_entry(store: TimeEntryStore, user: User, id: str) -> TimeEntry:
    # Employees resolve ids among their own entries only
    owner_id = None if user["role"] == "employer" else user["id"]
    try:
        entry = store.get_entry(store.resolve_entry_id(id, owner_id))
        require_access(user, entry)
    except (TimeEntryNotFoundError, AccessDeniedError) as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)
    return entry


def resolve_user_id(user: User, user_id: Optional[str]) -> str:
    if user_id is None or user_id == user["id"]:
        return user["id"]
    if user["role"] != "employer":
        typer.echo("Only employers can work with another user's entries.")
        raise typer.Exit(1)
    return user_id


def show_time_entries(
    user: User,
    owner_id: str,
    start: Optional[str] = None,
    end: Optional[str] = None,
    range_name: Optional[str] = None,
    page: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> None:
    """Render the entries table for one owner, with placeholders when bounded."""
    start_date, end_date = resolve_date_bounds(start, end, range_name)
    store = get_time_entry_store()

    entries = filter_time_entries(
        store.list_entries(),
        {"user_id": owner_id, "start_date": start_date, "end_date": end_date},
    )
    rows = entries
    if start_date is not None and end_date is not None:
        rows = reconcile_for_table(entries, normalize_date_range(start_date, end_date))

    try:
        entries_page = paginate_time_entries(rows, page, page_size)
    except ValueError as e:
        raise typer.BadParameter(str(e))

    time_entries_view(
        user,
        f"time entries for {owner_id}",
        entries_page,
        summarize_entries(rows),
    )


@app.command("add, a", no_args_is_help=True)
def add(
    start_time: Annotated[
        str, typer.Option("--start", "-s", help="HH:mm", callback=parse_time_option)
    ],
    end_time: Annotated[
        str, typer.Option("--end", "-e", help="HH:mm", callback=parse_time_option)
    ],
    break_duration: Annotated[
        str, typer.Option("--break", "-b", help="HH:mm", callback=parse_time_option)
    ] = "00:00",
    date: Annotated[
        Optional[str],
        typer.Option("--date", "-d", help="YYYY-MM-DD, day offset, today, yesterday"),
    ] = None,
    user_id: Annotated[
        Optional[str], typer.Option("--user", "-u", help="Employers only")
    ] = None,
) -> None:
    """Add a time entry."""
    user = get_current_user()
    owner_id = resolve_user_id(user, user_id)
    entry_date = parse_date(date) or today_local()

    try:
        entry = create_time_entry(
            owner_id, entry_date, start_time, end_time, break_duration
        )
    except TimeEntryValidationError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)

    store = get_time_entry_store()
    id = store.create_entry(entry)
    single_time_entry_view(user, store.get_entry(id))


@app.command("modify, m", no_args_is_help=True)
def modify(
    id: str,
    start_time: Annotated[
        Optional[str],
        typer.Option("--start", "-s", help="HH:mm", callback=parse_time_option),
    ] = None,
    end_time: Annotated[
        Optional[str],
        typer.Option("--end", "-e", help="HH:mm", callback=parse_time_option),
    ] = None,
    break_duration: Annotated[
        Optional[str],
        typer.Option("--break", "-b", help="HH:mm", callback=parse_time_option),
    ] = None,
    date: Annotated[Optional[str], typer.Option("--date", "-d")] = None,
) -> None:
    """Modify a time entry."""
    user = get_current_user()
    store = get_time_entry_store()
    entry = _get_accessible_entry(store, user, id)

    new_start = start_time if start_time is not None else entry["start_time"]
    new_end = end_time if end_time is not None else entry["end_time"]
    new_break = break_duration if break_duration is not None else entry["break_duration"]
    try:
        validate_time_entry(new_start, new_end, new_break)
    except TimeEntryValidationError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)

    updated = store.update_entry(
        entry["id"],
        date=parse_date(date),
        start_time=normalize_time(new_start),
        end_time=normalize_time(new_end),
        break_duration=normalize_time(new_break),
    )
    single_time_entry_view(user, updated)


@app.command("delete, d", no_args_is_help=True)
def delete(
    id: str,
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Skip confirmation")] = False,
) -> None:
    """Delete a time entry."""
    user = get_current_user()
    store = get_time_entry_store()
    entry = _get_accessible_entry(store, user, id)

    if not yes:
        typer.confirm("Are you sure you want to delete this time entry?", abort=True)

    store.delete_entry(entry["id"])
    typer.echo("Time entry deleted successfully")


@app.command("show, s", no_args_is_help=True)
def show(id: str) -> None:
    """Show a single time entry."""
    user = get_current_user()
    store = get_time_entry_store()
    entry = _get_accessible_entry(store, user, id)
    single_time_entry_view(user, entry)


@app.command("list, l")
def list_entries(
    start: Annotated[Optional[str], typer.Option("--start", "-s")] = None,
    end: Annotated[Optional[str], typer.Option("--end", "-e")] = None,
    range_name: Annotated[
        Optional[str],
        typer.Option(
            "--range", "-r", help="today, this_week, this_month, last_30_days"
        ),
    ] = None,
    page: Annotated[int, typer.Option("--page", "-p")] = 1,
    page_size: Annotated[int, typer.Option("--page-size", "-ps")] = DEFAULT_PAGE_SIZE,
    user_id: Annotated[
        Optional[str], typer.Option("--user", "-u", help="Employers only")
    ] = None,
) -> None:
    """List time entries; days without an entry are shown when both bounds are set."""
    user = get_current_user()
    show_time_entries(
        user,
        resolve_user_id(user, user_id),
        start,
        end,
        range_name,
        page,
        page_size,
    )
