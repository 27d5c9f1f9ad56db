"""Message API models."""

from datetime import datetime
from typing import List
from pydantic import BaseModel, Field


class SendMessageRequest(BaseModel):
    """Request model for sending a direct message."""

    text_message: str = Field(description="Message text", max_length=5000)


class MessageResponse(BaseModel):
    """A persisted direct message. Also the ``newMessage`` event payload."""

    id: str = Field(description="Message ID")
    sender_id: str = Field(description="Sender user ID")
    receiver_id: str = Field(description="Receiver user ID")
    text: str = Field(description="Message text")
    created_at: datetime = Field(description="Creation timestamp")


class SendMessageResponse(BaseModel):
    success: bool = True
    new_message: MessageResponse


class ConversationMessagesResponse(BaseModel):
    """Response model for a conversation's history."""

    success: bool = True
    messages: List[MessageResponse] = Field(description="Messages in chronological order")
