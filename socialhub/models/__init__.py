"""Pydantic models for API request/response."""

from .common import UserSummary, StatusResponse
from .user import (
    RegisterRequest,
    LoginRequest,
    EditProfileRequest,
    UserResponse,
    ProfileResponse,
    ProfileEnvelope,
    LoginResponse,
    UserListResponse,
)
from .post import (
    MediaModel,
    CreatePostRequest,
    CreateCommentRequest,
    CommentResponse,
    PostResponse,
    PostEnvelope,
    PostListResponse,
    CommentEnvelope,
    CommentListResponse,
    BookmarkResponse,
)
from .message import (
    SendMessageRequest,
    MessageResponse,
    SendMessageResponse,
    ConversationMessagesResponse,
)
from .notification import NotificationEvent, UserDetails

__all__ = [
    "UserSummary",
    "StatusResponse",
    "RegisterRequest",
    "LoginRequest",
    "EditProfileRequest",
    "UserResponse",
    "ProfileResponse",
    "ProfileEnvelope",
    "LoginResponse",
    "UserListResponse",
    "MediaModel",
    "CreatePostRequest",
    "CreateCommentRequest",
    "CommentResponse",
    "PostResponse",
    "PostEnvelope",
    "PostListResponse",
    "CommentEnvelope",
    "CommentListResponse",
    "BookmarkResponse",
    "SendMessageRequest",
    "MessageResponse",
    "SendMessageResponse",
    "ConversationMessagesResponse",
    "NotificationEvent",
    "UserDetails",
]
