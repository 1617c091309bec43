"""Data commands for streaklog CLI.

Handles JSON export and import, and resetting the journal.
"""

from pathlib import Path
from typing import Optional

import click
from rich.markup import escape

from streaklog.cli.context import console, fail, get_config, get_data_store
from streaklog.config import get_export_filename
from streaklog.errors import StreakLogError


@click.command("export")
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path), required=False)
def export_entries(path: Optional[Path]) -> None:
    """Export all entries to a JSON file.

    PATH defaults to retention-journal-export.json in the current
    directory (configurable under [export] filename).
    """
    path = path or Path.cwd() / get_export_filename(get_config())
    try:
        count = get_data_store().export_to_file(path)
    except OSError as e:
        fail("Export failed:", e)

    console.print(f"[green]✓ Exported {count} entries to {escape(str(path))}[/green]")


@click.command("import")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def import_entries(path: Path) -> None:
    """Replace all entries with those in a JSON export.

    The file must contain an object with an "entries" array. Nothing
    is changed if any entry in it is invalid.
    """
    try:
        count = get_data_store().import_from_file(path)
    except StreakLogError as e:
        fail("Import failed:", e)

    console.print(f"[green]✓ Imported {count} entries from {escape(str(path))}[/green]")


@click.command("reset")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation.")
def reset(yes: bool) -> None:
    """Delete all entries. This cannot be undone."""
    if not yes:
        click.confirm("Reset all local data? This cannot be undone.", abort=True)

    removed = get_data_store().reset()
    console.print(f"[green]✓ Removed {removed} entries[/green]")
