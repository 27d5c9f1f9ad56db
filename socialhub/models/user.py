"""User API models."""

import re
from datetime import datetime
from typing import Optional, List, Literal
from pydantic import BaseModel, Field, field_validator

from .post import PostResponse


# Username pattern: letters, digits, dots, underscores, 3-30 chars
USERNAME_PATTERN = re.compile(r'^[a-zA-Z0-9._]{3,30}$')
EMAIL_PATTERN = re.compile(r'^[^@\s]+@[^@\s]+\.[^@\s]+$')


class RegisterRequest(BaseModel):
    """Request model for creating an account."""

    username: str = Field(description="Unique username")
    email: str = Field(description="Unique email address")
    password: str = Field(description="Plain-text password", min_length=6, max_length=128)

    @field_validator('username')
    @classmethod
    def validate_username(cls, v):
        """Validate username format."""
        if not USERNAME_PATTERN.match(v):
            raise ValueError(
                f"Invalid username '{v}'. Must be 3-30 characters of "
                "letters, digits, dots, or underscores."
            )
        return v

    @field_validator('email')
    @classmethod
    def validate_email(cls, v):
        """Validate and normalize email."""
        v = v.strip().lower()
        if not EMAIL_PATTERN.match(v):
            raise ValueError(f"Invalid email '{v}'")
        return v


class LoginRequest(BaseModel):
    """Request model for logging in."""

    email: str = Field(description="Account email")
    password: str = Field(description="Plain-text password", min_length=1)

    @field_validator('email')
    @classmethod
    def normalize_email(cls, v):
        return v.strip().lower()


class EditProfileRequest(BaseModel):
    """Request model for editing the caller's profile."""

    bio: Optional[str] = Field(None, description="New bio", max_length=500)
    gender: Optional[Literal["male", "female"]] = Field(None, description="Gender")
    profile_picture: Optional[str] = Field(None, description="URL of an already-hosted picture")


class UserResponse(BaseModel):
    """Response model for a user profile."""

    id: str = Field(description="User ID")
    username: str = Field(description="Username")
    email: str = Field(description="Email address")
    profile_picture: str = Field(default="", description="Profile picture URL")
    bio: str = Field(default="", description="Bio")
    gender: Optional[str] = Field(None, description="Gender")
    is_first_login: bool = Field(default=True, description="Whether onboarding is still pending")
    followers: List[str] = Field(default_factory=list, description="IDs of followers")
    following: List[str] = Field(default_factory=list, description="IDs of followed users")
    created_at: datetime = Field(description="Creation timestamp")


class ProfileResponse(UserResponse):
    """User profile with posts and bookmarks expanded."""

    posts: List[PostResponse] = Field(default_factory=list, description="Own posts, newest first")
    bookmarks: List[PostResponse] = Field(default_factory=list, description="Bookmarked posts")


class LoginResponse(BaseModel):
    """Response model for a successful login."""

    success: bool = True
    message: str
    token: str = Field(description="Access token (also set as a cookie)")
    user: ProfileResponse


class UserListResponse(BaseModel):
    """Response model for listing users."""

    success: bool = True
    users: List[UserResponse]


class ProfileEnvelope(BaseModel):
    """Response wrapper around a single profile."""

    success: bool = True
    message: Optional[str] = None
    user: ProfileResponse
