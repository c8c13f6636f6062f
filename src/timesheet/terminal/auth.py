# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from timesheet.model.user import User
from timesheet.repository.session import SESSION_REPO
from timesheet.repository.user import USER_REPO
from timesheet.service.auth import AuthenticationError, authenticate
from timesheet.terminal.custom_typer import SessionAwareTyperGroup

app = typer.Typer(cls=SessionAwareTyperGroup, no_args_is_help=True)

ERROR_MESSAGES = {
    "invalid_email": "No account exists for that email.",
    "invalid_password": "Incorrect password.",
}


def get_current_user() -> User:
    """Return the signed in user or exit with an error."""
    user_id = SESSION_REPO.get_user_id()
    user = USER_REPO.get_user(user_id) if user_id is not None else None
    if user is None:
        typer.echo("Not signed in. Run: timesheet auth login EMAIL")
        raise typer.Exit(1)
    return user


def require_employer() -> User:
    user = get_current_user()
    if user["role"] != "employer":
        typer.echo("Only employers can use the dashboard.")
        raise typer.Exit(1)
    return user


@app.command("login, li", no_args_is_help=True)
def login(
    email: str,
    password: Annotated[
        str,
        typer.Option("--password", "-p", prompt=True, hide_input=True),
    ],
) -> None:
    """Sign in with an email and password."""
    try:
        user = authenticate(email, password, USER_REPO.get_accounts())
    except AuthenticationError as e:
        typer.echo(ERROR_MESSAGES.get(e.error_code, f"Login failed: {e.error_code}"))
        raise typer.Exit(1)

    SESSION_REPO.set_user_id(user["id"])
    typer.echo(f"Signed in as {user['name']} ({user['role']})")


@app.command("logout, lo")
def logout() -> None:
    """Sign out."""
    SESSION_REPO.set_user_id(None)
    typer.echo("Signed out")


@app.command("whoami, w")
def whoami() -> None:
    """Show the signed in user."""
    user = get_current_user()
    typer.echo(f"{user['name']} <{user['email']}> ({user['role']})")
