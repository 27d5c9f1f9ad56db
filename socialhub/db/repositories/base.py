"""Base repository class."""

from contextlib import contextmanager
from typing import Any, List, Optional

import duckdb
from ...errors import StorageError
from ...utils.clock import to_db_param
from ...utils.logger import get_app_logger


class BaseRepository:
    """Base class for all repositories."""

    def __init__(self, conn: duckdb.DuckDBPyConnection):
        """
        Initialize repository with database connection.

        Args:
            conn: DuckDB connection instance
        """
        self.conn = conn
        self.logger = get_app_logger()

    def _execute(self, sql: str, params: Optional[List[Any]] = None) -> duckdb.DuckDBPyConnection:
        """
        Run a statement, translating driver failures into StorageError.

        Aware datetime parameters are stored as naive UTC.

        Raises:
            StorageError: The database rejected or failed the statement
        """
        try:
            if params is None:
                return self.conn.execute(sql)
            return self.conn.execute(sql, [to_db_param(p) for p in params])
        except duckdb.Error as e:
            self.logger.error(f"Database operation failed: {e}")
            raise StorageError("Database operation failed") from e

    @contextmanager
    def transaction(self):
        """Run the enclosed statements atomically on the shared connection."""
        self._execute("BEGIN TRANSACTION")
        try:
            yield self
        except Exception:
            try:
                self.conn.execute("ROLLBACK")
            except duckdb.Error as e:
                self.logger.error(f"Rollback failed: {e}")
            raise
        self._execute("COMMIT")
