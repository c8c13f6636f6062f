# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from timesheet import configuration
from timesheet.repository.configuration import CONFIGURATION_REPO
from timesheet.terminal.custom_typer import SessionAwareTyperGroup

app = typer.Typer(cls=SessionAwareTyperGroup, no_args_is_help=True)


def _enabled(value: bool) -> str:
    return "✓ Enabled" if value else "✗ Disabled"


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("show_header", _enabled(config["show_header"]))
    table.add_row("storage", config["storage"])
    table.add_row("seed_fixture", _enabled(config["seed_fixture"]))
    table.add_row("log_level", config["log_level"])
    table.add_row("log_json", _enabled(config["log_json"]))
    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row("export_path", config["export_path"] or "None")
    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))

    console.print(table)


@app.command("set, s", no_args_is_help=True)
def set_config(
    show_header: Annotated[
        Optional[bool], typer.Option("--show-header/--hide-header")
    ] = None,
    storage: Annotated[
        Optional[str], typer.Option("--storage", help="file or memory")
    ] = None,
    seed_fixture: Annotated[
        Optional[bool], typer.Option("--seed-fixture/--no-seed-fixture")
    ] = None,
    log_level: Annotated[Optional[str], typer.Option("--log-level")] = None,
    log_json: Annotated[Optional[bool], typer.Option("--log-json/--log-console")] = None,
    data_path: Annotated[Optional[str], typer.Option("--data-path")] = None,
    remove_data_path: Annotated[bool, typer.Option("--remove-data-path")] = False,
    export_path: Annotated[Optional[str], typer.Option("--export-path")] = None,
    remove_export_path: Annotated[bool, typer.Option("--remove-export-path")] = False,
) -> None:
    """Change configuration settings."""
    if storage is not None and storage not in ("file", "memory"):
        typer.echo(f"Invalid storage: {storage}. Valid options: file, memory")
        raise typer.Exit(1)
    if log_level is not None and log_level.upper() not in (
        "DEBUG",
        "INFO",
        "WARNING",
        "ERROR",
        "CRITICAL",
    ):
        typer.echo(f"Invalid log level: {log_level}")
        raise typer.Exit(1)

    CONFIGURATION_REPO.update_config(
        show_header=show_header,
        storage=storage,  # type: ignore[arg-type]
        seed_fixture=seed_fixture,
        log_level=log_level,
        log_json=log_json,
        data_path=data_path,
        remove_data_path=remove_data_path,
        export_path=export_path,
        remove_export_path=remove_export_path,
    )
    typer.echo("Configuration updated")
