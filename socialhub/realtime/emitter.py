"""Best-effort event delivery to a user's live connection."""

from enum import Enum
from typing import Any, Dict

from .presence import PresenceRegistry
from ..utils.logger import get_app_logger


NEW_MESSAGE_EVENT = "newMessage"
NOTIFICATION_EVENT = "notification"


class DeliveryOutcome(str, Enum):
    """Result of a single push attempt."""

    DELIVERED = "delivered"
    # Recipient offline: a normal outcome, not an error
    MISS = "miss"
    # The transport raised while pushing; already swallowed
    FAILED = "failed"


class EventEmitter:
    """
    Push named events to users through the presence registry.

    Delivery is at-most-once: no acknowledgement is awaited and nothing is
    queued or retried. ``emit_to_user`` never raises, so callers can push
    after committing a write without risking their own response.
    """

    def __init__(self, registry: PresenceRegistry, server):
        """
        Args:
            registry: Presence registry to resolve users through
            server: Transport with ``async emit(event, data, to=connection_id)``
                (a ``socketio.AsyncServer``)
        """
        self.registry = registry
        self.server = server
        self.logger = get_app_logger()

    async def emit_to_user(self, user_id: str, event: str, payload: Dict[str, Any]) -> DeliveryOutcome:
        """
        Push ``(event, payload)`` to ``user_id`` if they are online.

        Args:
            user_id: Target user
            event: Event name on the wire
            payload: JSON-serializable payload

        Returns:
            DeliveryOutcome
        """
        connection_id = self.registry.lookup(user_id)
        if connection_id is None:
            self.logger.debug(f"{event} for {user_id} dropped: user offline")
            return DeliveryOutcome.MISS

        try:
            await self.server.emit(event, payload, to=connection_id)
        except Exception as e:
            self.logger.warning(f"Failed to push {event} to {user_id} ({connection_id}): {e}")
            return DeliveryOutcome.FAILED

        self.logger.debug(f"Pushed {event} to {user_id} ({connection_id})")
        return DeliveryOutcome.DELIVERED
