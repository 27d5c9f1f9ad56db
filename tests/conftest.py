"""Shared pytest fixtures."""

import uuid
from typing import Any, Dict, List, Optional, Tuple

import pytest

from socialhub.config import Settings
from socialhub.db import (
    DatabaseConnection,
    UserRepository,
    PostRepository,
    CommentRepository,
    ConversationRepository,
    MessageRepository,
)
from socialhub.db.database_models import UserDO, PostDO
from socialhub.realtime import PresenceRegistry, EventEmitter
from socialhub.utils.security import hash_password


class FakeSocketServer:
    """Records emits instead of sending them. Set ``fail_for`` to make emits to a sid raise."""

    def __init__(self):
        self.emitted: List[Tuple[str, Dict[str, Any], Optional[str]]] = []
        self.fail_for: set = set()

    async def emit(self, event: str, data: Dict[str, Any], to: Optional[str] = None):
        if to in self.fail_for:
            raise ConnectionError(f"transport closed for {to}")
        self.emitted.append((event, data, to))

    def events_to(self, sid: str) -> List[Tuple[str, Dict[str, Any]]]:
        return [(event, data) for event, data, target in self.emitted if target == sid]


@pytest.fixture
def test_settings(tmp_path):
    """Settings pointing at a throwaway database with cheap password hashing."""
    return Settings(
        database_path=str(tmp_path / "socialhub.db"),
        jwt_secret="test-secret",
        password_hash_time_cost=1,
        password_hash_memory_cost=64,
        log_level="WARNING",
        log_file=str(tmp_path / "app.log"),
    )


@pytest.fixture
def db(test_settings):
    """Fresh DuckDB database per test."""
    conn = DatabaseConnection(test_settings.database_path)
    yield conn
    conn.close()


@pytest.fixture
def user_repo(db):
    return UserRepository(db.conn)


@pytest.fixture
def post_repo(db):
    return PostRepository(db.conn)


@pytest.fixture
def comment_repo(db):
    return CommentRepository(db.conn)


@pytest.fixture
def conversation_repo(db):
    return ConversationRepository(db.conn)


@pytest.fixture
def message_repo(db):
    return MessageRepository(db.conn)


@pytest.fixture
def registry():
    return PresenceRegistry()


@pytest.fixture
def fake_server():
    return FakeSocketServer()


@pytest.fixture
def emitter(registry, fake_server):
    return EventEmitter(registry, fake_server)


@pytest.fixture
def make_user(user_repo):
    """Factory that inserts a user and returns the UserDO."""
    def _make(username: str, password: str = "secret123") -> UserDO:
        user = UserDO(
            id=str(uuid.uuid4()),
            username=username,
            email=f"{username}@example.com",
            password_hash=hash_password(password, time_cost=1, memory_cost=64),
        )
        return user_repo.create(user)
    return _make


@pytest.fixture
def make_post(post_repo):
    """Factory that inserts an image post for ``author`` and returns the PostDO."""
    def _make(author: UserDO, caption: str = "hello") -> PostDO:
        post = PostDO(
            id=str(uuid.uuid4()),
            author_id=author.id,
            media_url="https://cdn.example.com/p.jpg",
            media_public_id="p",
            media_type="image",
            caption=caption,
        )
        return post_repo.create(post)
    return _make
