"""Repository layer for data access."""

from .user import UserRepository
from .post import PostRepository, CommentRepository
from .conversation import ConversationRepository
from .message import MessageRepository

__all__ = [
    "UserRepository",
    "PostRepository",
    "CommentRepository",
    "ConversationRepository",
    "MessageRepository",
]
