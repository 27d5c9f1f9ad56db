"""Socket.IO server for the frontend.

Clients connect with ``socket.io-client`` and pass their access token as
``query.token`` (or ``auth.token``). When ``allow_user_id_handshake`` is
enabled, a bare ``query.userId`` is accepted too, for clients that predate
token handshakes.
"""

from typing import Any, Optional
from urllib.parse import parse_qs

import socketio

from .lifecycle import ConnectionLifecycle
from ..errors import AuthenticationError, TokenExpiredError
from ..utils.logger import get_app_logger
from ..utils.security import decode_access_token, is_valid_identity


def _query_params(environ: Any) -> dict:
    """Parse the handshake query string from an ASGI scope or WSGI environ."""
    scope = environ
    if isinstance(environ, dict) and "asgi.scope" in environ:
        inner = environ.get("asgi.scope")
        if isinstance(inner, dict):
            scope = inner

    query_string = ""
    if isinstance(scope, dict) and "query_string" in scope:
        query_string = scope.get("query_string", b"")
    elif isinstance(scope, dict) and "QUERY_STRING" in scope:
        query_string = scope.get("QUERY_STRING", "")

    if isinstance(query_string, (bytes, bytearray)):
        query_string = query_string.decode(errors="ignore")

    return parse_qs(str(query_string))


def resolve_handshake_identity(environ: Any, auth: Any, settings) -> Optional[str]:
    """
    Work out which user a handshake belongs to.

    Args:
        environ: Handshake environ / ASGI scope
        auth: Socket.IO ``auth`` payload, if the client sent one
        settings: Application settings

    Returns:
        The user ID, or None when no identity was offered

    Raises:
        AuthenticationError: A token was offered but did not validate
    """
    params = _query_params(environ)

    token = params.get("token", [None])[0]
    if not token and isinstance(auth, dict):
        auth_token = auth.get("token")
        if isinstance(auth_token, str) and auth_token:
            token = auth_token

    if token:
        return decode_access_token(token, settings)

    if settings.allow_user_id_handshake:
        user_id = params.get("userId", [None])[0]
        if is_valid_identity(user_id):
            return user_id

    return None


def create_socket_server(lifecycle: ConnectionLifecycle, settings) -> socketio.AsyncServer:
    """
    Build the Socket.IO server and wire its events to ``lifecycle``.

    Args:
        lifecycle: Connection lifecycle owning presence updates
        settings: Application settings

    Returns:
        socketio.AsyncServer ready to be wrapped in ``socketio.ASGIApp``
    """
    logger = get_app_logger()
    sio = socketio.AsyncServer(
        async_mode="asgi",
        cors_allowed_origins=settings.get_cors_origins(),
        logger=False,
        engineio_logger=False,
    )

    @sio.event
    async def connect(sid: str, environ: dict, auth: Any = None):
        try:
            user_id = resolve_handshake_identity(environ, auth, settings)
        except TokenExpiredError as exc:
            raise socketio.exceptions.ConnectionRefusedError("jwt_expired") from exc
        except AuthenticationError as exc:
            raise socketio.exceptions.ConnectionRefusedError("unauthorized") from exc

        if user_id is None:
            logger.info(f"Rejected unauthenticated handshake {sid}")
            raise socketio.exceptions.ConnectionRefusedError("unauthorized")

        await sio.save_session(sid, {"user_id": user_id})
        lifecycle.on_connect(sid, user_id)

    @sio.event
    async def disconnect(sid: str, *args):
        lifecycle.on_disconnect(sid)

    return sio
