"""Message repository for database operations."""

from typing import Optional
from .base import BaseRepository
from ..database_models.message import MessageDO
from ...utils.clock import as_utc


class MessageRepository(BaseRepository):
    """Repository for immutable direct messages."""

    def create(self, message: MessageDO) -> MessageDO:
        """
        Persist a new message.

        Args:
            message: MessageDO instance

        Returns:
            The persisted message
        """
        self._execute("""
            INSERT INTO messages (id, sender_id, receiver_id, text, created_at)
            VALUES (?, ?, ?, ?, ?)
        """, [
            message.id,
            message.sender_id,
            message.receiver_id,
            message.text,
            message.created_at
        ])
        self.logger.debug(f"Added message {message.id} from {message.sender_id} to {message.receiver_id}")
        return message

    def get(self, message_id: str) -> Optional[MessageDO]:
        """Get message by ID, or None."""
        row = self._execute("""
            SELECT id, sender_id, receiver_id, text, created_at
            FROM messages
            WHERE id = ?
        """, [message_id]).fetchone()

        if not row:
            return None
        return MessageDO(
            id=row[0],
            sender_id=row[1],
            receiver_id=row[2],
            text=row[3],
            created_at=as_utc(row[4])
        )
