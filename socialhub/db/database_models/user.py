"""User database model."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ...utils.clock import utc_now


@dataclass
class UserDO:
    """User data object - maps to users table."""

    id: str
    username: str
    email: str
    password_hash: str
    profile_picture: str = ""
    bio: str = ""
    gender: Optional[str] = None
    is_first_login: bool = True
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)


@dataclass
class UserSummaryDO:
    """Public display info for a user (no credentials)."""

    id: str
    username: str
    profile_picture: str = ""
