"""API v1 package."""

from .users import router as users_router
from .posts import router as posts_router
from .messages import router as messages_router

__all__ = ["users_router", "posts_router", "messages_router"]
