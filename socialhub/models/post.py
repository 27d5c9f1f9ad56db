"""Post and comment API models."""

from datetime import datetime
from typing import List, Literal
from pydantic import BaseModel, Field

from .common import UserSummary


class MediaModel(BaseModel):
    """Reference to an already-hosted image or video."""

    url: str = Field(description="Public media URL", min_length=1)
    public_id: str = Field(default="", description="Storage provider's media ID")
    type: Literal["image", "video"] = Field(description="Media kind")


class CreatePostRequest(BaseModel):
    """Request model for creating a post."""

    caption: str = Field(default="", description="Post caption", max_length=2200)
    media: MediaModel


class CreateCommentRequest(BaseModel):
    """Request model for commenting on a post."""

    text: str = Field(description="Comment text", max_length=2200)


class CommentResponse(BaseModel):
    """Response model for a comment."""

    id: str
    post_id: str
    text: str
    author: UserSummary
    created_at: datetime


class PostResponse(BaseModel):
    """Response model for a post."""

    id: str = Field(description="Post ID")
    caption: str = Field(default="", description="Caption")
    media: MediaModel
    author: UserSummary
    likes: List[str] = Field(default_factory=list, description="IDs of users who liked the post")
    comments: List[CommentResponse] = Field(default_factory=list, description="Comments, newest first")
    created_at: datetime = Field(description="Creation timestamp")


class PostEnvelope(BaseModel):
    success: bool = True
    message: str
    post: PostResponse


class PostListResponse(BaseModel):
    """Response model for listing posts."""

    success: bool = True
    posts: List[PostResponse]


class CommentEnvelope(BaseModel):
    success: bool = True
    message: str
    comment: CommentResponse


class CommentListResponse(BaseModel):
    success: bool = True
    comments: List[CommentResponse]


class BookmarkResponse(BaseModel):
    """Response model for a bookmark toggle."""

    success: bool = True
    message: str
    is_bookmarked: bool = Field(description="Bookmark state after the toggle")
