"""History repository — bounded, most-recent-first list of generated prompts.

Loading, saving and appending are best-effort: a storage failure is logged
and the caller carries on without history rather than losing the prompt.
Every operation holds the database lock, so concurrent tool calls never
interleave on the shared connection.
"""

from __future__ import annotations

import logging
import sqlite3
from datetime import datetime, timezone
from typing import Iterable

from promptforge.core.storage.database import DatabaseError, HistoryDatabase
from promptforge.core.storage.models import HistoryEntry

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 20

_COLUMNS = "id, input, output, framework, tone, created_at"


class RepositoryError(Exception):
    """Raised when repository operations fail."""


class HistoryRepository:
    """CRUD repository for the prompt history.

    Usage::

        db = HistoryDatabase(":memory:")
        db.initialize()
        repo = HistoryRepository(db)

        entry = repo.add_entry("Write a haiku", prompt_text, "rtf", "casual")
        recent = repo.load_history()
    """

    def __init__(self, database: HistoryDatabase, limit: int = DEFAULT_HISTORY_LIMIT) -> None:
        if limit < 1:
            raise RepositoryError(f"History limit must be at least 1, got {limit}")
        self._db = database
        self.limit = limit

    @staticmethod
    def _row_to_entry(row: sqlite3.Row) -> HistoryEntry:
        return HistoryEntry(
            id=row["id"],
            input=row["input"],
            output=row["output"],
            framework=row["framework"],
            tone=row["tone"],
            created_at=row["created_at"],
        )

    # ------------------------------------------------------------------
    # Best-effort list operations
    # ------------------------------------------------------------------

    def load_history(self) -> list[HistoryEntry]:
        """Return stored entries, newest first. Empty on storage failure."""
        try:
            with self._db.lock:
                rows = self._db.connection.execute(
                    f"SELECT {_COLUMNS} FROM prompt_history ORDER BY id DESC LIMIT ?",
                    (self.limit,),
                ).fetchall()
        except (sqlite3.Error, DatabaseError) as exc:
            logger.warning("Could not load prompt history: %s", exc)
            return []
        return [self._row_to_entry(row) for row in rows]

    def save_history(self, entries: Iterable[HistoryEntry]) -> None:
        """Replace the stored history with ``entries`` (newest first), keeping the cap."""
        kept = list(entries)[: self.limit]
        try:
            with self._db.lock:
                conn = self._db.connection
                with conn:
                    conn.execute("DELETE FROM prompt_history")
                    conn.executemany(
                        f"INSERT OR REPLACE INTO prompt_history ({_COLUMNS}) "
                        "VALUES (?, ?, ?, ?, ?, ?)",
                        [
                            (e.id, e.input, e.output, e.framework, e.tone, e.created_at)
                            for e in kept
                        ],
                    )
        except (sqlite3.Error, DatabaseError) as exc:
            logger.warning("Could not save prompt history: %s", exc)

    def add_entry(
        self,
        user_input: str,
        output: str,
        framework: str,
        tone: str,
        *,
        now: datetime | None = None,
    ) -> HistoryEntry | None:
        """Insert an entry at the head and evict anything past the cap.

        The id is the creation time in milliseconds, bumped past the newest
        stored id so ordering stays strict. Returns None on storage failure.
        """
        created = now or datetime.now(timezone.utc)
        try:
            with self._db.lock:
                conn = self._db.connection
                with conn:
                    newest = conn.execute("SELECT MAX(id) FROM prompt_history").fetchone()[0]
                    entry_id = int(created.timestamp() * 1000)
                    if newest is not None and entry_id <= newest:
                        entry_id = newest + 1

                    entry = HistoryEntry(
                        id=entry_id,
                        input=user_input,
                        output=output,
                        framework=framework,
                        tone=tone,
                        created_at=created.isoformat(),
                    )
                    conn.execute(
                        f"INSERT INTO prompt_history ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?)",
                        (entry.id, entry.input, entry.output, entry.framework, entry.tone,
                         entry.created_at),
                    )
                    evicted = conn.execute(
                        """DELETE FROM prompt_history WHERE id NOT IN (
                               SELECT id FROM prompt_history ORDER BY id DESC LIMIT ?
                           )""",
                        (self.limit,),
                    ).rowcount
        except (sqlite3.Error, DatabaseError) as exc:
            logger.warning("Could not record prompt history entry: %s", exc)
            return None

        if evicted:
            logger.debug("Evicted %d history entries past limit %d", evicted, self.limit)
        return entry

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get_entry(self, entry_id: int) -> HistoryEntry | None:
        """Retrieve an entry by ID, or None if not found."""
        with self._db.lock:
            row = self._db.connection.execute(
                f"SELECT {_COLUMNS} FROM prompt_history WHERE id = ?", (entry_id,)
            ).fetchone()
        if row is None:
            return None
        return self._row_to_entry(row)

    def count_entries(self) -> int:
        with self._db.lock:
            row = self._db.connection.execute("SELECT COUNT(*) FROM prompt_history").fetchone()
        return row[0]

    def clear_history(self) -> int:
        """Delete every entry. Returns the number of rows removed."""
        with self._db.lock:
            conn = self._db.connection
            with conn:
                deleted = conn.execute("DELETE FROM prompt_history").rowcount
        logger.info("Cleared %d history entries", deleted)
        return deleted
