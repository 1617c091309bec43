"""Log handler wiring for the CLI."""

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(verbose: bool = False) -> None:
    """Send streaklog logs to stderr through rich.

    WARNING and above by default, everything with ``verbose``.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=verbose,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger("streaklog")
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
