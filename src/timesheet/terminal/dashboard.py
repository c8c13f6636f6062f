# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from timesheet.repository.user import USER_REPO
from timesheet.service.time_entry import DEFAULT_PAGE_SIZE
from timesheet.terminal.auth import require_employer
from timesheet.terminal.custom_typer import SessionAwareTyperGroup
from timesheet.terminal.entry import show_time_entries
from timesheet.view.summary import users_view

app = typer.Typer(cls=SessionAwareTyperGroup, no_args_is_help=True)


@app.command("users, u")
def users() -> None:
    """List employees."""
    employer = require_employer()
    users_view(employer, USER_REPO.get_employees())


@app.command("entries, e", no_args_is_help=True)
def entries(
    user_id: str,
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
) -> None:
    """Browse one employee's time entries."""
    employer = require_employer()
    if USER_REPO.get_user(user_id) is None:
        typer.echo(f"Unknown user: {user_id}")
        raise typer.Exit(1)
    show_time_entries(employer, user_id, start, end, range_name, page, page_size)
