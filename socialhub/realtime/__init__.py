"""Realtime layer: presence tracking and best-effort event delivery."""

from .presence import PresenceRegistry
from .emitter import EventEmitter, DeliveryOutcome, NEW_MESSAGE_EVENT, NOTIFICATION_EVENT
from .lifecycle import ConnectionLifecycle
from .server import create_socket_server

__all__ = [
    "PresenceRegistry",
    "EventEmitter",
    "DeliveryOutcome",
    "NEW_MESSAGE_EVENT",
    "NOTIFICATION_EVENT",
    "ConnectionLifecycle",
    "create_socket_server",
]
