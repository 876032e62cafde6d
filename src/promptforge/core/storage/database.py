"""SQLite store behind the prompt history.

One connection per store, shared across threads (FastMCP runs sync tools in a
worker thread); callers hold ``lock`` around anything that touches it.
Schema changes are an ordered list of migrations keyed by version; opening
a store applies whatever it has not seen yet.
"""

from __future__ import annotations

import logging
import sqlite3
import threading
from pathlib import Path

logger = logging.getLogger(__name__)

MEMORY_PATH = ":memory:"

# ---------------------------------------------------------------------------
# Migrations
# ---------------------------------------------------------------------------

# id is the creation time in epoch milliseconds, so ORDER BY id is newest-first
# when descending.
_HISTORY_TABLE = """
CREATE TABLE IF NOT EXISTS prompt_history (
    id          INTEGER PRIMARY KEY,
    input       TEXT NOT NULL,
    output      TEXT NOT NULL,
    framework   TEXT NOT NULL,
    tone        TEXT NOT NULL,
    created_at  TEXT NOT NULL
);
CREATE INDEX IF NOT EXISTS idx_history_created ON prompt_history(created_at);
"""

_VERSION_TABLE = """
CREATE TABLE IF NOT EXISTS schema_version (
    version    INTEGER NOT NULL,
    applied_at TEXT NOT NULL DEFAULT (datetime('now'))
);
"""

MIGRATIONS: tuple[tuple[int, str], ...] = (
    (1, _HISTORY_TABLE),
)

SCHEMA_VERSION = MIGRATIONS[-1][0]


class DatabaseError(Exception):
    """Raised when the history store is used before it is open."""


class HistoryDatabase:
    """Owns the SQLite connection for the prompt history.

    ``db_path`` may be a file path (``~`` is expanded, parent directories are
    created) or ``":memory:"``, which tests use.

    Usage::

        with HistoryDatabase("~/.promptforge/history.db") as db:
            db.connection.execute("SELECT COUNT(*) FROM prompt_history")
    """

    def __init__(self, db_path: str = MEMORY_PATH) -> None:
        self.db_path = db_path
        self._conn: sqlite3.Connection | None = None
        # Serializes use of the shared connection across worker threads.
        self.lock = threading.RLock()

    @property
    def connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise DatabaseError(f"History store {self.db_path!r} is not initialized")
        return self._conn

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    def initialize(self) -> None:
        """Open the connection and bring the schema up to date. Idempotent."""
        if self._conn is not None:
            return
        self._conn = self._connect()
        applied = self._migrate()
        logger.info(
            "History store ready: %s (schema v%d, %d migration(s) applied)",
            self.db_path,
            SCHEMA_VERSION,
            applied,
        )

    def _connect(self) -> sqlite3.Connection:
        target = self.db_path
        if target != MEMORY_PATH:
            db_file = Path(target).expanduser()
            db_file.parent.mkdir(parents=True, exist_ok=True)
            target = str(db_file)

        conn = sqlite3.connect(target, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA journal_mode=WAL")
        return conn

    def _migrate(self) -> int:
        """Apply pending migrations in version order; return how many ran."""
        conn = self.connection
        conn.executescript(_VERSION_TABLE)
        current = self.get_schema_version()

        pending = [(version, ddl) for version, ddl in MIGRATIONS if version > current]
        for version, ddl in pending:
            conn.executescript(ddl)
            conn.execute("INSERT INTO schema_version (version) VALUES (?)", (version,))
            conn.commit()
            logger.debug("Applied history schema v%d", version)
        return len(pending)

    def get_schema_version(self) -> int:
        row = self.connection.execute("SELECT MAX(version) FROM schema_version").fetchone()
        return row[0] if row[0] is not None else 0

    def close(self) -> None:
        with self.lock:
            if self._conn is None:
                return
            self._conn.close()
            self._conn = None
        logger.info("History store closed: %s", self.db_path)

    def __enter__(self) -> HistoryDatabase:
        self.initialize()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
