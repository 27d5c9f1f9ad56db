"""Conversation database model."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Tuple

from ...utils.clock import utc_now


def participant_pair(user_a: str, user_b: str) -> Tuple[str, str]:
    """Canonical (low, high) ordering of an unordered participant pair."""
    return (user_a, user_b) if user_a <= user_b else (user_b, user_a)


@dataclass
class ConversationDO:
    """Conversation data object - maps to conversations table."""

    id: str
    participant_low: str
    participant_high: str
    created_at: datetime = field(default_factory=utc_now)

    @property
    def participants(self) -> Tuple[str, str]:
        return (self.participant_low, self.participant_high)
