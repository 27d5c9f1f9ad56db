"""Database models (Data Objects) - map to database tables."""

from .user import UserDO, UserSummaryDO
from .post import PostDO, CommentDO
from .conversation import ConversationDO, participant_pair
from .message import MessageDO

__all__ = [
    "UserDO",
    "UserSummaryDO",
    "PostDO",
    "CommentDO",
    "ConversationDO",
    "MessageDO",
    "participant_pair",
]
