"""Direct messaging: persist first, then notify both parties."""

import uuid
from typing import List

from ..db.database_models import MessageDO
from ..db.repositories import ConversationRepository, MessageRepository
from ..errors import ValidationError
from ..realtime.emitter import EventEmitter
from ..realtime.events import publish_new_message
from ..utils.logger import get_app_logger
from ..utils.security import is_valid_identity


class MessageService:
    """Send messages between two users and read a pair's history."""

    def __init__(
        self,
        conversations: ConversationRepository,
        messages: MessageRepository,
        emitter: EventEmitter
    ):
        self.conversations = conversations
        self.messages = messages
        self.emitter = emitter
        self.logger = get_app_logger()

    @staticmethod
    def _validate_pair(sender_id: str, receiver_id: str) -> None:
        if not is_valid_identity(sender_id) or not is_valid_identity(receiver_id):
            raise ValidationError("Invalid sender or receiver ID")

    async def send_message(self, sender_id: str, receiver_id: str, text: str) -> MessageDO:
        """
        Persist a message in the pair's conversation and push it out.

        The conversation lookup/creation and the message write both finish
        before any push. A StorageError from either propagates and nothing is
        emitted. Push outcomes never affect the return value.

        Args:
            sender_id: Sending user
            receiver_id: Receiving user (existence is not checked)
            text: Message text

        Returns:
            The persisted MessageDO

        Raises:
            ValidationError: Malformed identity or empty text
            StorageError: Persistence failed
        """
        self._validate_pair(sender_id, receiver_id)
        if not text or not text.strip():
            raise ValidationError("Message text is required")

        conversation = self.conversations.find_or_create(sender_id, receiver_id)

        message = MessageDO(
            id=str(uuid.uuid4()),
            sender_id=sender_id,
            receiver_id=receiver_id,
            text=text
        )
        with self.messages.transaction():
            self.messages.create(message)
            self.conversations.append_message(conversation.id, message.id)

        self.logger.info(f"Message {message.id} stored in conversation {conversation.id}")

        outcomes = await publish_new_message(self.emitter, message)
        self.logger.debug(f"newMessage {message.id} outcomes: {[o.value for o in outcomes]}")
        return message

    def get_messages(self, user_id: str, other_id: str) -> List[MessageDO]:
        """
        Messages exchanged between two users, oldest first.

        Returns:
            An empty list when the pair has never talked
        """
        self._validate_pair(user_id, other_id)
        conversation = self.conversations.find_by_participants(user_id, other_id)
        if conversation is None:
            return []
        return self.conversations.list_messages(conversation.id)
