"""Shared helpers for streaklog commands."""

from pathlib import Path
from typing import Any, NoReturn

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from streaklog.config import get_db_path, load_config
from streaklog.db.store import DataStore

# Console for rich output
console = Console()


def get_config() -> dict[str, Any]:
    """Config loaded by the root command, or a fresh load outside a CLI run."""
    ctx = click.get_current_context(silent=True)
    if ctx is not None and ctx.find_root().obj:
        return ctx.find_root().obj.get("config", {})
    return load_config()


def get_data_store() -> DataStore:
    """Get the data store for the current invocation."""
    ctx = click.get_current_context(silent=True)
    db_path = None
    if ctx is not None and ctx.find_root().obj:
        db_path = ctx.find_root().obj.get("db_path")
    return DataStore(Path(db_path) if db_path else get_db_path(get_config()))


def fail(title: str, error: Exception) -> NoReturn:
    """Print an error panel and exit with status 1."""
    console.print(Panel(
        f"[red]{title}[/red]\n\n{escape(str(error))}",
        title="[bold red]Error[/bold red]",
        border_style="red",
    ))
    raise SystemExit(1)
