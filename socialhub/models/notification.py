"""Notification event model (ephemeral, never persisted)."""

from datetime import datetime
from typing import Literal, Optional
from pydantic import BaseModel, Field

from ..utils.clock import utc_now


class UserDetails(BaseModel):
    """Actor display info carried inside a notification."""

    username: str
    profile_picture: str = ""


class NotificationEvent(BaseModel):
    """Payload of the ``notification`` event."""

    type: Literal["like", "dislike", "message"] = Field(description="Activity kind")
    user_id: str = Field(description="Actor user ID")
    user_details: UserDetails = Field(description="Actor display info")
    target_user_id: str = Field(description="User the notification is for")
    post_id: Optional[str] = Field(None, description="Target object ID")
    created_at: datetime = Field(default_factory=utc_now, description="Event timestamp")
    message: str = Field(description="Human-readable summary")
