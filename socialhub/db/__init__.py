"""Database package - connection, models, and repositories."""

from .connection import DatabaseConnection
from .repositories.user import UserRepository
from .repositories.post import PostRepository, CommentRepository
from .repositories.conversation import ConversationRepository
from .repositories.message import MessageRepository

__all__ = [
    "DatabaseConnection",
    "UserRepository",
    "PostRepository",
    "CommentRepository",
    "ConversationRepository",
    "MessageRepository",
]
