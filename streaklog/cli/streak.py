"""Streak dashboard command for streaklog CLI."""

from datetime import date
from typing import Optional

import click
from rich.panel import Panel
from rich.table import Table

from streaklog.cli.context import console, fail, get_config, get_data_store
from streaklog.config import get_milestones
from streaklog.core.dates import parse_day_key
from streaklog.core.milestones import next_milestone
from streaklog.core.summary import summarize
from streaklog.errors import StreakLogError

STAGE_STYLES = {1: "white", 2: "cyan", 3: "green", 4: "magenta", 5: "bold yellow"}


def _parse_today(value: Optional[str]) -> date:
    if value is None:
        return date.today()
    try:
        return parse_day_key(value)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--today")


@click.command("streak")
@click.option("--today", "today_key", default=None, help="Treat this day (YYYY-MM-DD) as today.")
def streak(today_key: Optional[str]) -> None:
    """Show current and best streak, stage and milestones.

    \b
    Examples:
      streaklog streak
      streaklog streak --today 2024-01-07
    """
    today = _parse_today(today_key)
    milestones = get_milestones(get_config())

    try:
        summary = summarize(get_data_store().get_entries(), today, milestones)
    except StreakLogError as e:
        fail("Could not compute streak:", e)

    stage_style = STAGE_STYLES[summary.stage.tier]
    console.print(Panel(
        f"Current streak: [bold green]{summary.streak.current}[/bold green] days\n"
        f"Best streak:    [bold]{summary.streak.best}[/bold] days\n"
        f"Entries:        {summary.total_entries}\n\n"
        f"Stage: [{stage_style}]{summary.stage.name}[/{stage_style}]",
        title=f"[bold]Streak as of {today.isoformat()}[/bold]",
        border_style="green" if summary.streak.current else "dim",
    ))

    table = Table(
        title="Milestones",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Milestone")
    table.add_column("Status", justify="right")

    for status in summary.milestones:
        if status.unlocked:
            table.add_row(f"[green]{status.label}[/green]", "[green]Unlocked[/green]")
        else:
            table.add_row(status.label, f"[dim]{status.remaining} days to go[/dim]")

    console.print(table)

    upcoming = next_milestone(summary.milestones)
    if upcoming is not None:
        console.print(f"\n[dim]Next: {upcoming.label} in {upcoming.remaining} days[/dim]")
