"""Tests for the streaklog command line.

**Feature: streak-journal**
"""

import json
from datetime import date, timedelta
from pathlib import Path

import pytest
from click.testing import CliRunner

from streaklog.cli.main import LAZY_SUBCOMMANDS, cli
from streaklog.db.store import DataStore
from streaklog.models import DayType, JournalEntry


@pytest.fixture
def db_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setenv("STREAKLOG_HOME", str(tmp_path / "home"))
    return tmp_path / "journal.db"


@pytest.fixture
def run(db_path: Path):
    runner = CliRunner()

    def _run(*args: str, **kwargs):
        return runner.invoke(cli, ["--db", str(db_path), *args], **kwargs)

    return _run


class TestCommandDiscovery:
    """Every lazy subcommand resolves to a click command."""

    @pytest.mark.parametrize("name", sorted(LAZY_SUBCOMMANDS))
    def test_help(self, run, name: str):
        result = run(name, "--help")
        assert result.exit_code == 0, result.output

    def test_root_help_lists_commands(self, run):
        result = run("--help")
        assert result.exit_code == 0
        for name in LAZY_SUBCOMMANDS:
            assert name in result.output


class TestWritingEntries:
    """log and note write entries; log --id edits one."""

    def test_log_and_feed(self, run, db_path: Path):
        result = run("log", "--date", "2024-01-05", "--type", "urge", "--headline", "Gym")
        assert result.exit_code == 0, result.output
        assert "Logged urge day 2024-01-05" in result.output

        entries = DataStore(db_path).get_entries()
        assert len(entries) == 1
        assert entries[0].day_type is DayType.URGE

        feed = run("feed")
        assert feed.exit_code == 0
        assert "Gym" in feed.output
        assert "Total: 1 entries" in feed.output

    def test_log_defaults_to_today(self, run, db_path: Path):
        assert run("log").exit_code == 0
        assert DataStore(db_path).get_entries()[0].date == date.today()

    def test_log_rejects_bad_date(self, run, db_path: Path):
        result = run("log", "--date", "2024-02-30")
        assert result.exit_code == 1
        assert "Could not save entry" in result.output
        assert DataStore(db_path).count_entries() == 0

    def test_edit_keeps_unspecified_fields(self, run, db_path: Path):
        store = DataStore(db_path)
        store.upsert_entry(JournalEntry(id="e1", date=date(2024, 1, 5), headline="Keep me", mood=9))

        result = run("log", "--id", "e1", "--type", "slip")
        assert result.exit_code == 0, result.output
        assert "Updated slip day" in result.output

        edited = store.get_entry("e1")
        assert edited.day_type is DayType.SLIP
        assert edited.headline == "Keep me"
        assert edited.mood == 9
        assert store.count_entries() == 1

    def test_edit_unknown_id(self, run):
        result = run("log", "--id", "missing")
        assert result.exit_code == 1
        assert "No entry with ID missing" in result.output

    def test_quick_note(self, run, db_path: Path):
        result = run("note", "Felt steady", "--date", "2024-01-05")
        assert result.exit_code == 0, result.output
        entry = DataStore(db_path).get_entries()[0]
        assert entry.headline == "Felt steady"
        assert entry.day_type is DayType.CLEAN
        assert (entry.energy, entry.mood) == (6, 6)

    def test_delete(self, run, db_path: Path):
        DataStore(db_path).upsert_entry(JournalEntry(id="e1", date=date(2024, 1, 5)))
        assert "Deleted entry e1" in run("delete", "e1").output
        assert "No entry with ID e1" in run("delete", "e1").output


class TestFeedCommand:
    """feed filters by text and type."""

    def test_empty_feed(self, run):
        result = run("feed")
        assert result.exit_code == 0
        assert "No entries yet" in result.output

    def test_filters(self, run, db_path: Path):
        store = DataStore(db_path)
        store.upsert_entry(JournalEntry(date=date(2024, 1, 1), headline="Morning run"))
        store.upsert_entry(JournalEntry(date=date(2024, 1, 2), headline="Rough", day_type=DayType.SLIP))

        by_text = run("feed", "--search", "RUN")
        assert "Morning run" in by_text.output
        assert "Rough" not in by_text.output

        by_type = run("feed", "--type", "slip")
        assert "Rough" in by_type.output
        assert "Morning run" not in by_type.output

    def test_markup_in_headline_is_literal(self, run, db_path: Path):
        DataStore(db_path).upsert_entry(JournalEntry(date=date(2024, 1, 1), headline="[bold]x"))
        assert "[bold]x" in run("feed").output

    def test_since(self, run, db_path: Path):
        store = DataStore(db_path)
        store.upsert_entry(JournalEntry(date=date(2024, 1, 1), headline="Older day"))
        store.upsert_entry(JournalEntry(date=date(2024, 1, 2), headline="Newer day"))

        result = run("feed", "--since", "2024-01-02")
        assert result.exit_code == 0, result.output
        assert "Newer day" in result.output
        assert "Older day" not in result.output
        assert "Total: 1 entries" in result.output

    def test_since_rejects_bad_day(self, run):
        assert run("feed", "--since", "last week").exit_code == 2

    def test_limit(self, run, db_path: Path):
        store = DataStore(db_path)
        for day in (1, 2, 3):
            store.upsert_entry(JournalEntry(date=date(2024, 1, day)))

        assert "Total: 2 entries" in run("feed", "-n", "2").output
        assert run("feed", "--limit", "-1").exit_code == 2


class TestStreakCommand:
    """streak shows current, best, stage and milestones."""

    def test_worked_example(self, run, db_path: Path):
        store = DataStore(db_path)
        for day in (1, 2, 3, 5, 6, 7):
            store.upsert_entry(JournalEntry(date=date(2024, 1, day)))

        result = run("streak", "--today", "2024-01-07")
        assert result.exit_code == 0, result.output
        assert "Current streak: 3 days" in result.output
        assert "Best streak:    3 days" in result.output
        assert "Entries:        6" in result.output
        assert "Starting (0+)" in result.output
        assert "Unlocked" in result.output
        assert "4 days to go" in result.output

    def test_stage_two(self, run, db_path: Path):
        store = DataStore(db_path)
        today = date(2024, 3, 1)
        for offset in range(14):
            store.upsert_entry(JournalEntry(date=today - timedelta(days=offset)))

        result = run("streak", "--today", today.isoformat())
        assert "Current streak: 14 days" in result.output
        assert "Building (14+)" in result.output

    def test_empty_journal(self, run):
        result = run("streak")
        assert result.exit_code == 0
        assert "Current streak: 0 days" in result.output

    def test_bad_today(self, run):
        result = run("streak", "--today", "tomorrow")
        assert result.exit_code == 2


class TestDataCommands:
    """export, import and reset."""

    def test_export_import_round_trip(self, run, db_path: Path, tmp_path: Path):
        store = DataStore(db_path)
        store.upsert_entry(JournalEntry(id="e1", date=date(2024, 1, 5), headline="One"))
        export_path = tmp_path / "out.json"

        result = run("export", str(export_path))
        assert result.exit_code == 0, result.output
        document = json.loads(export_path.read_text(encoding="utf-8"))
        assert document["entries"][0]["id"] == "e1"

        store.reset()
        result = run("import", str(export_path))
        assert result.exit_code == 0, result.output
        assert "Imported 1 entries" in result.output
        assert store.get_entry("e1").headline == "One"

    def test_export_default_filename(self, run, db_path: Path):
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["--db", str(db_path), "export"])
            assert result.exit_code == 0, result.output
            assert Path("retention-journal-export.json").exists()

    def test_import_rejects_document_without_entries(self, run, db_path: Path, tmp_path: Path):
        DataStore(db_path).upsert_entry(JournalEntry(id="keep", date=date(2024, 1, 5)))
        bad = tmp_path / "bad.json"
        bad.write_text(json.dumps({"items": []}), encoding="utf-8")

        result = run("import", str(bad))
        assert result.exit_code == 1
        assert "Import failed" in result.output
        assert DataStore(db_path).get_entry("keep") is not None

    def test_reset_needs_confirmation(self, run, db_path: Path):
        DataStore(db_path).upsert_entry(JournalEntry(date=date(2024, 1, 5)))

        declined = run("reset", input="n\n")
        assert declined.exit_code == 1
        assert DataStore(db_path).count_entries() == 1

        confirmed = run("reset", "--yes")
        assert confirmed.exit_code == 0
        assert "Removed 1 entries" in confirmed.output
        assert DataStore(db_path).count_entries() == 0

    def test_export_to_missing_directory(self, run, db_path: Path, tmp_path: Path):
        DataStore(db_path).upsert_entry(JournalEntry(date=date(2024, 1, 5)))

        result = run("export", str(tmp_path / "nope" / "out.json"))
        assert result.exit_code == 1
        assert "Export failed" in result.output
        assert not isinstance(result.exception, FileNotFoundError)

    def test_import_rejects_file_that_is_not_utf8(self, run, db_path: Path, tmp_path: Path):
        DataStore(db_path).upsert_entry(JournalEntry(id="keep", date=date(2024, 1, 5)))
        bad = tmp_path / "binary.json"
        bad.write_bytes(b'{"entries": ["\xff\xfe"]}')

        result = run("import", str(bad))
        assert result.exit_code == 1
        assert "Import failed" in result.output
        assert DataStore(db_path).get_entry("keep") is not None
