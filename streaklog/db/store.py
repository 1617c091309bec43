"""SQLite data store for streaklog."""

import json
import logging
import sqlite3
from collections.abc import Iterable
from datetime import date, datetime
from pathlib import Path
from typing import Any, Optional

from streaklog.errors import InvalidDocument
from streaklog.models import DayType, JournalEntry

logger = logging.getLogger(__name__)

_ENTRY_COLUMNS = (
    "id, date, day_type, energy, mood, headline, facts, analysis, action, updated_at"
)


class DataStore:
    """SQLite-based entry store for streaklog."""

    def __init__(self, db_path: Path):
        """Initialize the data store.

        Args:
            db_path: Path to the SQLite database file.
        """
        self.db_path = Path(db_path)
        self._ensure_db_dir()
        self._init_schema()

    def _ensure_db_dir(self) -> None:
        """Ensure the database directory exists."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

    def _get_connection(self) -> sqlite3.Connection:
        """Get a database connection."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _init_schema(self) -> None:
        """Initialize database schema on first run."""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS entries (
                    id TEXT PRIMARY KEY,
                    date TEXT NOT NULL,
                    day_type TEXT NOT NULL,
                    energy INTEGER NOT NULL,
                    mood INTEGER NOT NULL,
                    headline TEXT NOT NULL DEFAULT '',
                    facts TEXT NOT NULL DEFAULT '',
                    analysis TEXT NOT NULL DEFAULT '',
                    action TEXT NOT NULL DEFAULT '',
                    updated_at TEXT NOT NULL
                )
            """)
            cursor.execute(
                "CREATE INDEX IF NOT EXISTS idx_entries_date ON entries(date)"
            )
            conn.commit()
        finally:
            conn.close()

    @staticmethod
    def _row_to_entry(row: sqlite3.Row) -> JournalEntry:
        return JournalEntry(
            id=row["id"],
            date=date.fromisoformat(row["date"]),
            day_type=DayType(row["day_type"]),
            energy=row["energy"],
            mood=row["mood"],
            headline=row["headline"],
            facts=row["facts"],
            analysis=row["analysis"],
            action=row["action"],
            updated_at=datetime.fromisoformat(row["updated_at"]),
        )

    @staticmethod
    def _entry_params(entry: JournalEntry) -> tuple:
        return (
            entry.id,
            entry.day_key,
            entry.day_type.value,
            entry.energy,
            entry.mood,
            entry.headline,
            entry.facts,
            entry.analysis,
            entry.action,
            entry.updated_at.isoformat(),
        )

    # ==================== Entries ====================

    def upsert_entry(self, entry: JournalEntry) -> None:
        """Insert an entry, or replace the entry with the same id.

        Args:
            entry: Journal entry to save.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                f"""
                INSERT OR REPLACE INTO entries ({_ENTRY_COLUMNS})
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                self._entry_params(entry),
            )
            conn.commit()
        finally:
            conn.close()

    def get_entry(self, entry_id: str) -> Optional[JournalEntry]:
        """Get an entry by ID.

        Args:
            entry_id: Entry ID.

        Returns:
            JournalEntry if found, None otherwise.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                f"SELECT {_ENTRY_COLUMNS} FROM entries WHERE id = ?",
                (entry_id,),
            )
            row = cursor.fetchone()
            if row:
                return self._row_to_entry(row)
            return None
        finally:
            conn.close()

    def get_entries(self, from_date: Optional[date] = None) -> list[JournalEntry]:
        """Get journal entries, newest day first.

        Args:
            from_date: Optional start date filter.

        Returns:
            List of journal entries.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            if from_date:
                cursor.execute(
                    f"""
                    SELECT {_ENTRY_COLUMNS}
                    FROM entries
                    WHERE date >= ?
                    ORDER BY date DESC, updated_at DESC
                    """,
                    (from_date.isoformat(),),
                )
            else:
                cursor.execute(
                    f"""
                    SELECT {_ENTRY_COLUMNS}
                    FROM entries
                    ORDER BY date DESC, updated_at DESC
                    """
                )
            return [self._row_to_entry(row) for row in cursor.fetchall()]
        finally:
            conn.close()

    def delete_entry(self, entry_id: str) -> bool:
        """Delete an entry.

        Args:
            entry_id: ID of the entry to delete.

        Returns:
            True if an entry was removed.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM entries WHERE id = ?", (entry_id,))
            conn.commit()
            return cursor.rowcount > 0
        finally:
            conn.close()

    def count_entries(self) -> int:
        """Number of stored entries."""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("SELECT COUNT(*) as count FROM entries")
            return cursor.fetchone()["count"]
        finally:
            conn.close()

    def reset(self) -> int:
        """Delete every entry.

        Returns:
            Number of entries removed.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM entries")
            conn.commit()
            removed = cursor.rowcount
        finally:
            conn.close()
        logger.info("Reset journal, removed %d entries", removed)
        return removed

    # ==================== Export / Import ====================

    def export_document(self) -> dict[str, Any]:
        """All entries as a JSON-ready ``{"entries": [...]}`` document."""
        return {"entries": [entry.to_record() for entry in self.get_entries()]}

    def import_document(self, document: Any) -> int:
        """Replace all entries with those in ``document``.

        Every record is validated before anything is written, so a bad
        document leaves the store unchanged.

        Args:
            document: Parsed document with an ``entries`` list.

        Returns:
            Number of entries imported.

        Raises:
            InvalidDocument: If the document has no ``entries`` list.
            InvalidEntry: If any record in it is malformed.
        """
        if not isinstance(document, dict) or not isinstance(document.get("entries"), list):
            raise InvalidDocument("Invalid file format: expected an 'entries' array")

        entries = [JournalEntry.from_record(record) for record in document["entries"]]
        self._replace_all(entries)
        logger.info("Imported %d entries into %s", len(entries), self.db_path)
        return len(entries)

    def _replace_all(self, entries: Iterable[JournalEntry]) -> None:
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM entries")
            cursor.executemany(
                f"""
                INSERT OR REPLACE INTO entries ({_ENTRY_COLUMNS})
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                [self._entry_params(entry) for entry in entries],
            )
            conn.commit()
        except sqlite3.Error:
            conn.rollback()
            raise
        finally:
            conn.close()

    def export_to_file(self, path: Path) -> int:
        """Write the export document to ``path``.

        Returns:
            Number of entries written.
        """
        document = self.export_document()
        path = Path(path)
        path.write_text(json.dumps(document, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
        return len(document["entries"])

    def import_from_file(self, path: Path) -> int:
        """Read a JSON export from ``path`` and replace all entries with it.

        Raises:
            InvalidDocument: If the file is not JSON or lacks ``entries``.
            InvalidEntry: If any record is malformed.
        """
        try:
            document = json.loads(Path(path).read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise InvalidDocument(f"Invalid file format: {exc}") from exc
        return self.import_document(document)
