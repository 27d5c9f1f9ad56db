"""Services package."""

from .message_service import MessageService
from .post_service import PostService
from .user_service import UserService

__all__ = ["MessageService", "PostService", "UserService"]
