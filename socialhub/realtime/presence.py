"""Presence registry: which live connection, if any, belongs to each user.

One entry per user. A second connect from the same user overwrites the first
(last connection wins); the superseded connection stays open but is no longer
reachable through ``lookup``. Multi-device fan-out would replace the single
value with a set of connection IDs.

The registry only stores connection IDs. Closing connections is the
transport's job.
"""

import threading
from typing import Dict, List, Optional

from ..utils.logger import get_app_logger


class PresenceRegistry:
    """Process-local map of user ID -> connection ID."""

    def __init__(self):
        self.logger = get_app_logger()
        self._lock = threading.Lock()
        self._connection_by_user: Dict[str, str] = {}
        self._user_by_connection: Dict[str, str] = {}

    def register_connection(self, user_id: str, connection_id: str) -> Optional[str]:
        """
        Record ``connection_id`` as the live connection for ``user_id``.

        Args:
            user_id: User identity from the handshake
            connection_id: Transport-assigned connection ID

        Returns:
            The connection ID this one superseded, if any
        """
        with self._lock:
            previous = self._connection_by_user.get(user_id)
            self._connection_by_user[user_id] = connection_id
            self._user_by_connection[connection_id] = user_id

        if previous is not None and previous != connection_id:
            self.logger.info(f"User {user_id} reconnected: {previous} superseded by {connection_id}")
        return previous if previous != connection_id else None

    def unregister_connection(self, connection_id: str) -> Optional[str]:
        """
        Drop the entry whose connection is ``connection_id``.

        Unknown or superseded connection IDs are a no-op, so a stale
        disconnect never clears a newer mapping.

        Returns:
            The user whose presence was removed, or None
        """
        with self._lock:
            user_id = self._user_by_connection.pop(connection_id, None)
            if user_id is None or self._connection_by_user.get(user_id) != connection_id:
                return None
            del self._connection_by_user[user_id]
        return user_id

    def lookup(self, user_id: str) -> Optional[str]:
        """Live connection ID for ``user_id``; None means offline or unknown."""
        with self._lock:
            return self._connection_by_user.get(user_id)

    def online_users(self) -> List[str]:
        """Snapshot of user IDs with a live connection."""
        with self._lock:
            return list(self._connection_by_user)

    def clear(self) -> None:
        with self._lock:
            self._connection_by_user.clear()
            self._user_by_connection.clear()

    def __contains__(self, user_id: str) -> bool:
        return self.lookup(user_id) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._connection_by_user)
