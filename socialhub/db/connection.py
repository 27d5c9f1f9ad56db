"""Database connection and schema management."""

import duckdb
from typing import Optional
from pathlib import Path
from ..utils.logger import get_app_logger


class DatabaseConnection:
    """DuckDB connection manager."""

    def __init__(self, db_path: str = "./data/socialhub.db"):
        """
        Initialize database connection.

        Args:
            db_path: Path to DuckDB database file (``:memory:`` for an in-process database)
        """
        self.db_path = db_path
        self.logger = get_app_logger()
        self.conn: Optional[duckdb.DuckDBPyConnection] = None

        if db_path != ":memory:":
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)

        self._connect()
        self._init_schema()

    def _connect(self):
        """Connect to DuckDB database."""
        try:
            self.conn = duckdb.connect(self.db_path)
            self.logger.info(f"Connected to DuckDB at {self.db_path}")
        except Exception as e:
            self.logger.error(f"Failed to connect to DuckDB: {e}")
            raise

    def _init_schema(self):
        """Initialize database schema."""
        try:
            self.conn.execute("""
                CREATE TABLE IF NOT EXISTS users (
                    id VARCHAR PRIMARY KEY,
                    username VARCHAR NOT NULL UNIQUE,
                    email VARCHAR NOT NULL UNIQUE,
                    password_hash VARCHAR NOT NULL,
                    profile_picture VARCHAR DEFAULT '',
                    bio VARCHAR DEFAULT '',
                    gender VARCHAR,
                    is_first_login BOOLEAN DEFAULT TRUE,
                    created_at TIMESTAMP NOT NULL,
                    updated_at TIMESTAMP NOT NULL
                )
            """)

            # follower -> followee edges
            self.conn.execute("""
                CREATE TABLE IF NOT EXISTS follows (
                    follower_id VARCHAR NOT NULL,
                    followee_id VARCHAR NOT NULL,
                    created_at TIMESTAMP NOT NULL,
                    PRIMARY KEY (follower_id, followee_id)
                )
            """)

            self.conn.execute("""
                CREATE TABLE IF NOT EXISTS bookmarks (
                    user_id VARCHAR NOT NULL,
                    post_id VARCHAR NOT NULL,
                    created_at TIMESTAMP NOT NULL,
                    PRIMARY KEY (user_id, post_id)
                )
            """)

            self.conn.execute("""
                CREATE TABLE IF NOT EXISTS posts (
                    id VARCHAR PRIMARY KEY,
                    author_id VARCHAR NOT NULL,
                    caption VARCHAR DEFAULT '',
                    media_url VARCHAR NOT NULL,
                    media_public_id VARCHAR NOT NULL,
                    media_type VARCHAR NOT NULL,
                    created_at TIMESTAMP NOT NULL
                )
            """)

            # Liker set: the primary key makes add/remove idempotent
            self.conn.execute("""
                CREATE TABLE IF NOT EXISTS post_likes (
                    post_id VARCHAR NOT NULL,
                    user_id VARCHAR NOT NULL,
                    created_at TIMESTAMP NOT NULL,
                    PRIMARY KEY (post_id, user_id)
                )
            """)

            self.conn.execute("""
                CREATE TABLE IF NOT EXISTS comments (
                    id VARCHAR PRIMARY KEY,
                    post_id VARCHAR NOT NULL,
                    author_id VARCHAR NOT NULL,
                    text VARCHAR NOT NULL,
                    created_at TIMESTAMP NOT NULL
                )
            """)

            # participant_low < participant_high, so the pair is unordered
            self.conn.execute("""
                CREATE TABLE IF NOT EXISTS conversations (
                    id VARCHAR PRIMARY KEY,
                    participant_low VARCHAR NOT NULL,
                    participant_high VARCHAR NOT NULL,
                    created_at TIMESTAMP NOT NULL
                )
            """)

            self.conn.execute("""
                CREATE TABLE IF NOT EXISTS messages (
                    id VARCHAR PRIMARY KEY,
                    sender_id VARCHAR NOT NULL,
                    receiver_id VARCHAR NOT NULL,
                    text VARCHAR NOT NULL,
                    created_at TIMESTAMP NOT NULL
                )
            """)

            self.conn.execute("""
                CREATE TABLE IF NOT EXISTS conversation_messages (
                    conversation_id VARCHAR NOT NULL,
                    message_id VARCHAR NOT NULL,
                    position INTEGER NOT NULL,
                    PRIMARY KEY (conversation_id, position)
                )
            """)

            # At most one conversation per participant pair
            self.conn.execute("""
                CREATE UNIQUE INDEX IF NOT EXISTS idx_conversations_pair
                ON conversations(participant_low, participant_high)
            """)

            self.conn.execute("CREATE INDEX IF NOT EXISTS idx_posts_author ON posts(author_id)")
            self.conn.execute("CREATE INDEX IF NOT EXISTS idx_comments_post ON comments(post_id)")
            self.conn.execute("CREATE INDEX IF NOT EXISTS idx_follows_followee ON follows(followee_id)")

            self.logger.info("Database schema initialized successfully")

        except Exception as e:
            self.logger.error(f"Failed to initialize database schema: {e}")
            raise

    def close(self):
        """Close database connection."""
        if self.conn:
            self.conn.close()
            self.logger.info("Database connection closed")

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
