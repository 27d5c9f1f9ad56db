"""Convert data objects into API response models."""

from dataclasses import asdict
from typing import Dict, List

from ...db import UserRepository, PostRepository, CommentRepository
from ...db.database_models import UserDO, PostDO, CommentDO, MessageDO
from ...models import (
    UserSummary,
    UserResponse,
    ProfileResponse,
    MediaModel,
    PostResponse,
    CommentResponse,
    MessageResponse,
)


class Presenter:
    """Builds nested responses, caching author lookups for one request."""

    def __init__(self, users: UserRepository, comments: CommentRepository = None):
        self.users = users
        self.comments = comments
        self._summaries: Dict[str, UserSummary] = {}

    def summary(self, user_id: str) -> UserSummary:
        if user_id not in self._summaries:
            found = self.users.get_summary(user_id)
            self._summaries[user_id] = (
                UserSummary(id=found.id, username=found.username, profile_picture=found.profile_picture)
                if found else UserSummary(id=user_id, username="[deleted]")
            )
        return self._summaries[user_id]

    def user(self, user: UserDO) -> UserResponse:
        return UserResponse(
            id=user.id,
            username=user.username,
            email=user.email,
            profile_picture=user.profile_picture,
            bio=user.bio,
            gender=user.gender,
            is_first_login=user.is_first_login,
            followers=self.users.list_followers(user.id),
            following=self.users.list_following(user.id),
            created_at=user.created_at
        )

    def profile(self, user: UserDO, posts: PostRepository) -> ProfileResponse:
        base = self.user(user)
        return ProfileResponse(
            **base.model_dump(),
            posts=[self.post(p) for p in posts.list_by_author(user.id)],
            bookmarks=[self.post(p) for p in posts.list_by_ids(self.users.list_bookmarks(user.id))]
        )

    def comment(self, comment: CommentDO) -> CommentResponse:
        return CommentResponse(
            id=comment.id,
            post_id=comment.post_id,
            text=comment.text,
            author=self.summary(comment.author_id),
            created_at=comment.created_at
        )

    def post(self, post: PostDO) -> PostResponse:
        comments: List[CommentResponse] = []
        if self.comments is not None:
            comments = [self.comment(c) for c in self.comments.list_by_post(post.id)]
        return PostResponse(
            id=post.id,
            caption=post.caption,
            media=MediaModel(url=post.media_url, public_id=post.media_public_id, type=post.media_type),
            author=self.summary(post.author_id),
            likes=post.likes,
            comments=comments,
            created_at=post.created_at
        )


def message_response(message: MessageDO) -> MessageResponse:
    return MessageResponse(**asdict(message))
