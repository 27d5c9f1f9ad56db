"""Post and comment database models."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List

from ...utils.clock import utc_now


@dataclass
class PostDO:
    """Post data object - maps to posts table, with its liker set."""

    id: str
    author_id: str
    media_url: str
    media_public_id: str
    media_type: str
    caption: str = ""
    created_at: datetime = field(default_factory=utc_now)
    likes: List[str] = field(default_factory=list)


@dataclass
class CommentDO:
    """Comment data object - maps to comments table."""

    id: str
    post_id: str
    author_id: str
    text: str
    created_at: datetime = field(default_factory=utc_now)
