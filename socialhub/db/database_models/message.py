"""Message database model."""

from dataclasses import dataclass, field
from datetime import datetime

from ...utils.clock import utc_now


@dataclass(frozen=True)
class MessageDO:
    """Message data object - maps to messages table. Never mutated."""

    id: str
    sender_id: str
    receiver_id: str
    text: str
    created_at: datetime = field(default_factory=utc_now)
