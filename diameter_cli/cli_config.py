"""CLI commands for viewing and editing ~/.diameter/config.toml."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from . import config
from .config_manager import load_config, save_config, validate_setting

console = Console()

config_app = typer.Typer(
    help="⚙️  Configuration — default workers and log level.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@config_app.command("show")
def show_config():
    """Show the effective configuration."""
    settings = load_config()
    table = Table(title=f"Config ({config.CONFIG_FILE})")
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    for key, value in settings.items():
        table.add_row(key, str(value))
    console.print(table)


@config_app.command("set")
def set_config(
    key: str = typer.Argument(..., help="Setting name: workers or log_level."),
    value: str = typer.Argument(..., help="New value."),
):
    """Persist one setting.

    Example:
      diameter config set workers 4
      diameter config set log_level info
    """
    try:
        parsed = validate_setting(key, value)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    save_config(**{key: parsed})
    typer.echo(f"Set {key} = {parsed}")
