# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from timesheet.terminal import auth, configuration, dashboard, entry, report
from timesheet.terminal.custom_typer import SessionAwareTyperGroup
from timesheet.view import state as view_state

app = typer.Typer(
    cls=SessionAwareTyperGroup,
    help="Timesheet - Track daily work hours in the CLI",
    no_args_is_help=True,
)
app.add_typer(auth.app, name="auth, au")
app.add_typer(entry.app, name="entry, e")
app.add_typer(report.app, name="report, r")
app.add_typer(dashboard.app, name="dashboard, d")
app.add_typer(configuration.app, name="config, c")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
) -> None:
    """
    Timesheet - Track daily work hours in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()
