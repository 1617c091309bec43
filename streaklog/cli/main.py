"""Main CLI entry point for streaklog.

This module provides the main click group and lazy loading
of command modules to keep startup fast.
"""

from pathlib import Path
from typing import Optional

import click

from streaklog.config import get_db_path, load_config
from streaklog.logging_setup import configure_logging


class LazyGroup(click.Group):
    """A click Group that lazily loads commands.

    Command modules are only imported when one of their
    commands is actually invoked.
    """

    def __init__(self, *args, lazy_subcommands: dict[str, str] | None = None, **kwargs):
        """Initialize the lazy group.

        Args:
            lazy_subcommands: Mapping of command names to module paths.
        """
        super().__init__(*args, **kwargs)
        self._lazy_subcommands = lazy_subcommands or {}

    def list_commands(self, ctx: click.Context) -> list[str]:
        """List all available commands."""
        base = super().list_commands(ctx)
        lazy = list(self._lazy_subcommands.keys())
        return sorted(set(base + lazy))

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        """Get a command by name, lazily loading if needed."""
        if cmd_name in self.commands:
            return self.commands[cmd_name]

        if cmd_name in self._lazy_subcommands:
            return self._lazy_load(cmd_name)

        return None

    def _lazy_load(self, cmd_name: str) -> click.Command:
        """Lazily load a command from its module path."""
        import importlib

        module_path = self._lazy_subcommands[cmd_name]
        module = importlib.import_module(module_path)

        # Commands are found by click name, which may differ from the
        # attribute name (e.g. "import" is a keyword)
        cmd = None
        for attr_name in dir(module):
            attr = getattr(module, attr_name)
            if isinstance(attr, click.Command) and attr.name == cmd_name:
                cmd = attr
                break

        if cmd is None:
            raise click.ClickException(f"Could not find command '{cmd_name}' in {module_path}")

        self.add_command(cmd)
        return cmd


LAZY_SUBCOMMANDS = {
    # Writing
    "log": "streaklog.cli.entries",
    "note": "streaklog.cli.entries",
    "delete": "streaklog.cli.entries",
    # Reading
    "feed": "streaklog.cli.entries",
    "streak": "streaklog.cli.streak",
    # Data
    "export": "streaklog.cli.data",
    "import": "streaklog.cli.data",
    "reset": "streaklog.cli.data",
}


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(cls=LazyGroup, lazy_subcommands=LAZY_SUBCOMMANDS, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="streaklog")
@click.option(
    "--db", "db_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Journal database file (default: from config, or ~/.config/streaklog/streaklog.db).",
)
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging.")
@click.pass_context
def cli(ctx: click.Context, db_path: Optional[Path], verbose: bool) -> None:
    """streaklog - a daily journal that keeps your streak.

    Log each day as clean, urge or slip. Consecutive non-slip days
    build your streak; a slip or a missed day starts it over.

    \b
    Quick Start:
      streaklog log --type clean --headline "Good day"
      streaklog note "Quick thought"
      streaklog streak
    """
    configure_logging(verbose)
    config = load_config()

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["db_path"] = db_path or get_db_path(config)


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
