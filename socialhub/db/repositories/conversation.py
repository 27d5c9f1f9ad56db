"""Conversation repository for database operations."""

import uuid
from typing import Optional, List

import duckdb
from .base import BaseRepository
from ..database_models.conversation import ConversationDO, participant_pair
from ..database_models.message import MessageDO
from ...errors import StorageError
from ...utils.clock import as_utc, to_db_param


class ConversationRepository(BaseRepository):
    """Repository for two-party conversations and their message sequences."""

    def find_by_participants(self, user_a: str, user_b: str) -> Optional[ConversationDO]:
        """
        Find the conversation for an unordered participant pair.

        Args:
            user_a: One participant
            user_b: The other participant

        Returns:
            ConversationDO instance or None
        """
        low, high = participant_pair(user_a, user_b)
        row = self._execute("""
            SELECT id, participant_low, participant_high, created_at
            FROM conversations
            WHERE participant_low = ? AND participant_high = ?
        """, [low, high]).fetchone()

        if not row:
            return None
        return ConversationDO(
            id=row[0],
            participant_low=row[1],
            participant_high=row[2],
            created_at=as_utc(row[3])
        )

    def create(self, conversation: ConversationDO) -> bool:
        """
        Create a new conversation record.

        Args:
            conversation: ConversationDO instance

        Returns:
            True if created, False if the pair already has a conversation

        Raises:
            StorageError: Any other database failure
        """
        try:
            self.conn.execute("""
                INSERT INTO conversations (id, participant_low, participant_high, created_at)
                VALUES (?, ?, ?, ?)
            """, [
                conversation.id,
                conversation.participant_low,
                conversation.participant_high,
                to_db_param(conversation.created_at)
            ])
        except duckdb.ConstraintException as e:
            self.logger.info(f"Conversation for {conversation.participants} already exists: {e}")
            return False
        except duckdb.Error as e:
            self.logger.error(f"Failed to create conversation: {e}")
            raise StorageError("Failed to create conversation") from e

        self.logger.info(f"Created conversation record: {conversation.id}")
        return True

    def find_or_create(self, user_a: str, user_b: str) -> ConversationDO:
        """
        Get the pair's conversation, creating it on first use.

        A create that loses to a concurrent one falls back to re-reading the
        winner, so callers always see the single record for the pair.
        """
        existing = self.find_by_participants(user_a, user_b)
        if existing:
            return existing

        low, high = participant_pair(user_a, user_b)
        conversation = ConversationDO(
            id=str(uuid.uuid4()),
            participant_low=low,
            participant_high=high
        )
        if self.create(conversation):
            return conversation

        existing = self.find_by_participants(user_a, user_b)
        if existing is None:
            raise StorageError("Conversation creation conflicted but no record was found")
        return existing

    def append_message(self, conversation_id: str, message_id: str) -> int:
        """
        Append a message reference to the end of the conversation.

        Returns:
            Zero-based position of the appended reference
        """
        row = self._execute("""
            SELECT COALESCE(MAX(position) + 1, 0)
            FROM conversation_messages
            WHERE conversation_id = ?
        """, [conversation_id]).fetchone()
        position = row[0]

        self._execute("""
            INSERT INTO conversation_messages (conversation_id, message_id, position)
            VALUES (?, ?, ?)
        """, [conversation_id, message_id, position])
        return position

    def list_message_ids(self, conversation_id: str) -> List[str]:
        """Message IDs in insertion order."""
        rows = self._execute("""
            SELECT message_id FROM conversation_messages
            WHERE conversation_id = ?
            ORDER BY position
        """, [conversation_id]).fetchall()
        return [row[0] for row in rows]

    def list_messages(self, conversation_id: str, limit: Optional[int] = None) -> List[MessageDO]:
        """
        Get messages for a conversation.

        Args:
            conversation_id: Conversation ID
            limit: Keep only the most recent N messages

        Returns:
            List of MessageDO instances (chronological order)
        """
        rows = self._execute("""
            SELECT m.id, m.sender_id, m.receiver_id, m.text, m.created_at
            FROM conversation_messages cm
            JOIN messages m ON m.id = cm.message_id
            WHERE cm.conversation_id = ?
            ORDER BY cm.position
        """, [conversation_id]).fetchall()

        messages = [
            MessageDO(
                id=row[0],
                sender_id=row[1],
                receiver_id=row[2],
                text=row[3],
                created_at=as_utc(row[4])
            )
            for row in rows
        ]
        if limit is not None:
            messages = messages[-limit:] if limit > 0 else []
        return messages

    def count(self) -> int:
        row = self._execute("SELECT COUNT(*) FROM conversations").fetchone()
        return row[0]
