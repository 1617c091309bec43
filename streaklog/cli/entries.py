"""Entry commands for streaklog CLI.

Handles writing, editing, listing and deleting journal entries.
"""

from datetime import date, datetime
from typing import Optional

import click
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from streaklog.cli.context import console, fail, get_data_store
from streaklog.core.feed import ALL_TYPES, filter_entries
from streaklog.errors import StreakLogError
from streaklog.models import DayType, JournalEntry

DAY_TYPE_CHOICES = [day_type.value for day_type in DayType]

TYPE_STYLES = {
    DayType.CLEAN: "green",
    DayType.URGE: "yellow",
    DayType.SLIP: "red",
}


def build_entry(existing: Optional[JournalEntry], **changes) -> JournalEntry:
    """Apply option values to an existing entry, or to a fresh one.

    Options left as None keep the existing value (or the model default).

    Raises:
        InvalidEntry: If the result does not validate.
    """
    record = existing.model_dump() if existing is not None else {}
    record.update({key: value for key, value in changes.items() if value is not None})
    record.setdefault("date", date.today())
    record["updated_at"] = datetime.now()
    return JournalEntry.from_record(record)


@click.command("log")
@click.option("--date", "day", default=None, help="Day of the entry, YYYY-MM-DD (default: today).")
@click.option(
    "--type", "day_type",
    type=click.Choice(DAY_TYPE_CHOICES),
    default=None,
    help="How the day went (default: clean).",
)
@click.option("--energy", type=click.IntRange(1, 10), default=None, help="Energy 1-10 (default: 6).")
@click.option("--mood", type=click.IntRange(1, 10), default=None, help="Mood 1-10 (default: 6).")
@click.option("--headline", default=None, help="Short title for the day.")
@click.option("--facts", default=None, help="What happened.")
@click.option("--analysis", default=None, help="Why it happened.")
@click.option("--action", default=None, help="What you will do next.")
@click.option("--id", "entry_id", default=None, help="Edit the entry with this ID instead of adding one.")
def log_entry(
    day: Optional[str],
    day_type: Optional[str],
    energy: Optional[int],
    mood: Optional[int],
    headline: Optional[str],
    facts: Optional[str],
    analysis: Optional[str],
    action: Optional[str],
    entry_id: Optional[str],
) -> None:
    """Add a journal entry, or edit one with --id.

    \b
    Examples:
      streaklog log --type clean --headline "Went for a run"
      streaklog log --date 2024-01-05 --type urge --mood 4
      streaklog log --id 3f2a... --type slip
    """
    store = get_data_store()

    existing = None
    if entry_id:
        existing = store.get_entry(entry_id)
        if existing is None:
            console.print(f"[yellow]No entry with ID {escape(entry_id)}[/yellow]")
            raise SystemExit(1)

    try:
        entry = build_entry(
            existing,
            date=day,
            day_type=day_type,
            energy=energy,
            mood=mood,
            headline=headline.strip() if headline is not None else None,
            facts=facts.strip() if facts is not None else None,
            analysis=analysis.strip() if analysis is not None else None,
            action=action.strip() if action is not None else None,
        )
    except StreakLogError as e:
        fail("Could not save entry:", e)

    store.upsert_entry(entry)
    verb = "Updated" if existing else "Logged"
    console.print(f"[green]✓ {verb} {entry.day_type.value} day {entry.day_key}[/green] [dim]({escape(entry.id)})[/dim]")


@click.command("note")
@click.argument("headline")
@click.option("--date", "day", default=None, help="Day of the note, YYYY-MM-DD (default: today).")
def quick_note(headline: str, day: Optional[str]) -> None:
    """Add a quick clean-day note.

    HEADLINE is the note text. Energy and mood are set to 6.

    \b
    Examples:
      streaklog note "Felt steady today"
    """
    headline = headline.strip()
    if not headline:
        console.print("[yellow]Nothing to note[/yellow]")
        return

    try:
        entry = build_entry(None, date=day, day_type=DayType.CLEAN, headline=headline)
    except StreakLogError as e:
        fail("Could not save note:", e)

    get_data_store().upsert_entry(entry)
    console.print(f"[green]✓ Noted {entry.day_key}[/green] [dim]({escape(entry.id)})[/dim]")


@click.command("feed")
@click.option("--search", "-s", "query", default="", help="Only entries whose text contains this.")
@click.option(
    "--type", "day_type",
    type=click.Choice([ALL_TYPES] + DAY_TYPE_CHOICES),
    default=ALL_TYPES,
    help="Only entries of this day type.",
)
@click.option(
    "--since",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Only entries on or after this day (YYYY-MM-DD).",
)
@click.option("--limit", "-n", type=click.IntRange(min=0), default=None, help="Show at most this many entries.")
def feed(query: str, day_type: str, since: Optional[datetime], limit: Optional[int]) -> None:
    """List journal entries, newest first.

    \b
    Examples:
      streaklog feed
      streaklog feed --search gym
      streaklog feed --type slip -n 5
      streaklog feed --since 2024-01-01
    """
    from_date = since.date() if since is not None else None
    entries = filter_entries(
        get_data_store().get_entries(from_date=from_date), query=query, day_type=day_type
    )
    if limit is not None:
        entries = entries[:limit]

    if not entries:
        console.print(Panel(
            "[dim]No entries yet. Write your first log with [cyan]streaklog log[/cyan].[/dim]",
            title="[bold]Journal[/bold]",
            border_style="dim",
        ))
        return

    table = Table(
        title="Journal",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Date", style="dim")
    table.add_column("Type", justify="center")
    table.add_column("Headline", style="bold")
    table.add_column("Energy", justify="right")
    table.add_column("Mood", justify="right")
    table.add_column("ID", style="dim")

    for entry in entries:
        style = TYPE_STYLES[entry.day_type]
        table.add_row(
            entry.day_key,
            f"[{style}]{entry.day_type.value}[/{style}]",
            escape(entry.headline) or "[dim](No headline)[/dim]",
            f"{entry.energy}/10",
            f"{entry.mood}/10",
            escape(entry.id),
        )

    console.print(table)
    console.print(f"\n[dim]Total: {len(entries)} entries[/dim]")


@click.command("delete")
@click.argument("entry_id")
def delete_entry(entry_id: str) -> None:
    """Delete the entry with ID ENTRY_ID."""
    if get_data_store().delete_entry(entry_id):
        console.print(f"[green]✓ Deleted entry {escape(entry_id)}[/green]")
    else:
        console.print(f"[yellow]No entry with ID {escape(entry_id)}[/yellow]")
