"""Configuration loading for streaklog.

Settings live in ``config.toml`` under the streaklog home directory
(``~/.config/streaklog`` unless ``STREAKLOG_HOME`` is set).
"""

import logging
import os
from pathlib import Path
from typing import Any, Optional

import toml
from pydantic import ValidationError

from streaklog.core.milestones import MILESTONES
from streaklog.models import Milestone

logger = logging.getLogger(__name__)

DEFAULT_EXPORT_FILENAME = "retention-journal-export.json"


def get_home() -> Path:
    """Directory holding the config file and the default database."""
    override = os.environ.get("STREAKLOG_HOME")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "streaklog"


def get_config_path() -> Path:
    """Path of the TOML config file."""
    return get_home() / "config.toml"


def load_config(config_path: Optional[Path] = None) -> dict[str, Any]:
    """Load the TOML config.

    A missing file yields an empty config. An unreadable or invalid file
    is logged and also yields an empty config.
    """
    config_path = config_path or get_config_path()
    if not config_path.exists():
        return {}

    try:
        return toml.load(config_path)
    except (toml.TomlDecodeError, OSError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", config_path, exc)
        return {}


def _section(config: dict[str, Any], name: str) -> dict[str, Any]:
    """A TOML table from the config, or an empty one if it is not a table."""
    section = config.get(name, {})
    if not isinstance(section, dict):
        logger.warning("Ignoring config [%s]: expected a table, got %r", name, section)
        return {}
    return section


def get_db_path(config: dict[str, Any]) -> Path:
    """Database file from ``[storage] db_path``, or the default location."""
    db_path = _section(config, "storage").get("db_path")
    if db_path:
        return Path(db_path).expanduser()
    return get_home() / "streaklog.db"


def get_export_filename(config: dict[str, Any]) -> str:
    """Default file name for ``export``."""
    filename = _section(config, "export").get("filename")
    if not isinstance(filename, str) or not filename:
        return DEFAULT_EXPORT_FILENAME
    return filename


def get_milestones(config: dict[str, Any]) -> tuple[Milestone, ...]:
    """Milestone ladder from ``[[milestones]]``, sorted by days.

    Falls back to the built-in ladder when none are configured or the
    configured ones are invalid.
    """
    raw = config.get("milestones")
    if not raw:
        return MILESTONES
    if not isinstance(raw, list):
        logger.warning("Ignoring milestones in config: expected a list, got %r", raw)
        return MILESTONES

    try:
        milestones = [Milestone.model_validate(item) for item in raw]
    except ValidationError as exc:
        logger.warning("Ignoring invalid milestones in config: %s", exc)
        return MILESTONES

    return tuple(sorted(milestones, key=lambda milestone: milestone.days))
