"""Dependency providers for the v1 routers."""

from typing import Optional
from fastapi import Depends, HTTPException, Request

from ...db import (
    DatabaseConnection,
    UserRepository,
    PostRepository,
    CommentRepository,
    ConversationRepository,
    MessageRepository,
)
from ...errors import AuthenticationError
from ...realtime.emitter import EventEmitter
from ...services import MessageService, PostService, UserService
from ...utils.security import decode_access_token


# Set by main.py (or a test fixture) at startup
db_conn: Optional[DatabaseConnection] = None
emitter: Optional[EventEmitter] = None
settings = None


def _require_db() -> DatabaseConnection:
    if db_conn is None:
        raise HTTPException(status_code=500, detail="Database not initialized")
    return db_conn


def _require_emitter() -> EventEmitter:
    if emitter is None:
        raise HTTPException(status_code=500, detail="Realtime layer not initialized")
    return emitter


def get_settings():
    if settings is None:
        raise HTTPException(status_code=500, detail="Settings not initialized")
    return settings


def get_user_repo() -> UserRepository:
    """Dependency to get user repository."""
    return UserRepository(_require_db().conn)


def get_post_repo() -> PostRepository:
    """Dependency to get post repository."""
    return PostRepository(_require_db().conn)


def get_comment_repo() -> CommentRepository:
    """Dependency to get comment repository."""
    return CommentRepository(_require_db().conn)


def get_user_service(
    users: UserRepository = Depends(get_user_repo),
    app_settings=Depends(get_settings)
) -> UserService:
    return UserService(users, app_settings)


def get_post_service(
    posts: PostRepository = Depends(get_post_repo),
    comments: CommentRepository = Depends(get_comment_repo),
    users: UserRepository = Depends(get_user_repo)
) -> PostService:
    return PostService(posts, comments, users, _require_emitter())


def get_message_service() -> MessageService:
    conn = _require_db().conn
    return MessageService(
        ConversationRepository(conn),
        MessageRepository(conn),
        _require_emitter()
    )


def get_current_user_id(request: Request, app_settings=Depends(get_settings)) -> str:
    """
    Resolve the caller from the auth cookie or a Bearer header.

    Raises:
        AuthenticationError: No token, or the token does not validate
    """
    token = request.cookies.get(app_settings.auth_cookie_name)
    if not token:
        header = request.headers.get("authorization", "")
        scheme, _, credentials = header.partition(" ")
        if scheme.lower() == "bearer" and credentials:
            token = credentials.strip()

    if not token:
        raise AuthenticationError("User not authenticated")
    return decode_access_token(token, app_settings)
