"""Tests for database connection and schema management."""

import pytest
from pathlib import Path

from socialhub.db.connection import DatabaseConnection


@pytest.fixture
def db_path(tmp_path):
    """Provide a temporary database path."""
    return str(tmp_path / "sub" / "test.db")


class TestDatabaseConnection:
    """Tests for DatabaseConnection."""

    def test_connect_creates_file(self, db_path):
        """After connecting, the db file and its directory should exist."""
        conn = DatabaseConnection(db_path)
        assert Path(db_path).exists()
        conn.close()

    @pytest.mark.parametrize("table", [
        "users", "follows", "bookmarks", "posts", "post_likes",
        "comments", "conversations", "messages", "conversation_messages",
    ])
    def test_schema_tables(self, db_path, table):
        """Every table should be queryable after init."""
        conn = DatabaseConnection(db_path)
        result = conn.conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()
        assert result[0] == 0
        conn.close()

    def test_schema_indexes_exist(self, db_path):
        """Expected indexes should exist."""
        conn = DatabaseConnection(db_path)
        result = conn.conn.execute(
            "SELECT index_name FROM duckdb_indexes()"
        ).fetchall()
        index_names = [r[0] for r in result]
        assert "idx_conversations_pair" in index_names
        assert "idx_posts_author" in index_names
        conn.close()

    def test_init_schema_idempotent(self, db_path):
        """Calling _init_schema again should not raise."""
        conn = DatabaseConnection(db_path)
        conn._init_schema()
        conn.close()

    def test_in_memory(self):
        """':memory:' works without touching the filesystem."""
        with DatabaseConnection(":memory:") as conn:
            assert conn.conn.execute("SELECT COUNT(*) FROM users").fetchone()[0] == 0

    def test_close(self, db_path):
        """After close, connection should not be usable."""
        conn = DatabaseConnection(db_path)
        conn.close()
        with pytest.raises(Exception):
            conn.conn.execute("SELECT 1")
