# SPDX-License-Identifier: MIT

import re
from typing import Optional

import click
import typer
import typer.core
from rich.console import Console
from rich.padding import Padding

from timesheet.repository.session import SESSION_REPO
from timesheet.repository.user import USER_REPO

console = Console()


def _show_signed_in_user(ctx: click.Context) -> None:
    """Show the signed in user once per invocation when help is printed"""
    if hasattr(ctx, "_user_shown") and ctx._user_shown:
        return

    current: Optional[click.Context] = ctx
    while current is not None:
        current._user_shown = True  # type: ignore[attr-defined]
        current = current.parent

    user_id = SESSION_REPO.get_user_id()
    user = USER_REPO.get_user(user_id) if user_id is not None else None
    label = user["name"] if user is not None else "not signed in"

    console.print()
    console.print(
        Padding(f"[bold plum1]Signed in: {label}[/bold plum1]", (0, 0, 0, 1))
    )


class AliasedTyperGroup(typer.core.TyperGroup):
    """Custom TyperGroup that supports comma-separated command aliases"""

    _CMD_SPLIT_P = re.compile(r" ?, ?")

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        """Override to resolve aliases to the full command name"""
        cmd_name = self._group_cmd_name(cmd_name)
        return super().get_command(ctx, cmd_name)

    def _group_cmd_name(self, default_name: str) -> str:
        """Find the full command name if default_name is an alias"""
        for cmd in self.commands.values():
            name = cmd.name
            if name and default_name in self._CMD_SPLIT_P.split(name):
                return name
        return default_name


class SessionAwareTyperGroup(AliasedTyperGroup):
    """Aliased group that prints the signed in user above its help text"""

    def list_commands(self, ctx: click.Context) -> list[str]:
        desired_order = [
            "auth, au",
            "entry, e",
            "report, r",
            "dashboard, d",
            "config, c",
        ]

        result = [name for name in desired_order if name in self.commands]
        for cmd_name in self.commands.keys():
            if cmd_name not in result:
                result.append(cmd_name)
        return result

    def format_help(
        self, ctx: click.Context, formatter: click.formatting.HelpFormatter
    ) -> None:
        _show_signed_in_user(ctx)
        super().format_help(ctx, formatter)
