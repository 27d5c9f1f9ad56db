"""Shared API models."""

from pydantic import BaseModel


class UserSummary(BaseModel):
    """Display info embedded in posts, comments, and notifications."""

    id: str
    username: str
    profile_picture: str = ""


class StatusResponse(BaseModel):
    """Generic success envelope."""

    success: bool = True
    message: str
