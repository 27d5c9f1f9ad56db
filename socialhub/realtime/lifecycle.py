"""Connection lifecycle: the only path by which the transport mutates presence."""

from typing import Optional

from .presence import PresenceRegistry
from ..utils.logger import get_app_logger


class ConnectionLifecycle:
    """Translate transport connect/disconnect into presence updates."""

    def __init__(self, registry: PresenceRegistry):
        self.registry = registry
        self.logger = get_app_logger()

    def on_connect(self, connection_id: str, user_id: str) -> None:
        """
        Associate a freshly handshaken connection with its user.

        Args:
            connection_id: Transport-assigned connection ID
            user_id: Identity established at handshake
        """
        self.registry.register_connection(user_id, connection_id)
        self.logger.info(f"User {user_id} connected ({connection_id}); {len(self.registry)} online")

    def on_disconnect(self, connection_id: str) -> Optional[str]:
        """
        Forget a closed connection.

        Returns:
            The user that went offline, or None if the connection was
            unknown or already superseded
        """
        user_id = self.registry.unregister_connection(connection_id)
        if user_id:
            self.logger.info(f"User {user_id} disconnected ({connection_id}); {len(self.registry)} online")
        else:
            self.logger.debug(f"Disconnect of untracked connection {connection_id}")
        return user_id
