"""Tests for HistoryDatabase — schema creation, versioning, lifecycle."""

from __future__ import annotations

import pytest

from promptforge.core.storage.database import (
    MIGRATIONS,
    SCHEMA_VERSION,
    DatabaseError,
    HistoryDatabase,
)


class TestInitialization:
    def test_in_memory_initialize(self):
        db = HistoryDatabase(":memory:")
        db.initialize()
        assert db.connection is not None
        db.close()

    def test_double_initialize_is_idempotent(self):
        db = HistoryDatabase(":memory:")
        db.initialize()
        conn1 = db.connection
        db.initialize()
        assert db.connection is conn1
        db.close()

    def test_connection_before_init_raises(self):
        db = HistoryDatabase(":memory:")
        with pytest.raises(DatabaseError, match="not initialized"):
            _ = db.connection

    def test_context_manager(self):
        with HistoryDatabase(":memory:") as db:
            assert db.is_open
        assert not db.is_open
        with pytest.raises(DatabaseError):
            _ = db.connection

    def test_file_database_creates_parent_dirs(self, tmp_path):
        path = tmp_path / "nested" / "dir" / "history.db"
        with HistoryDatabase(str(path)):
            pass
        assert path.exists()


class TestSchema:
    def test_schema_version_recorded(self):
        with HistoryDatabase(":memory:") as db:
            assert db.get_schema_version() == SCHEMA_VERSION

    def test_tables_created(self):
        with HistoryDatabase(":memory:") as db:
            cursor = db.connection.execute(
                "SELECT name FROM sqlite_master WHERE type='table' AND name NOT LIKE 'sqlite_%'"
            )
            tables = {row[0] for row in cursor.fetchall()}
        assert {"prompt_history", "schema_version"} <= tables

    def test_reopen_does_not_duplicate_version(self, tmp_path):
        path = str(tmp_path / "history.db")
        with HistoryDatabase(path):
            pass
        with HistoryDatabase(path) as db:
            rows = db.connection.execute("SELECT COUNT(*) FROM schema_version").fetchone()
            assert rows[0] == 1

    def test_migrations_are_ordered(self):
        versions = [version for version, _ in MIGRATIONS]
        assert versions == sorted(set(versions))
        assert SCHEMA_VERSION == versions[-1]
