"""Posts, comments, likes, and bookmarks."""

import uuid
from typing import List, Optional

from ..db.database_models import PostDO, CommentDO, UserSummaryDO
from ..db.repositories import PostRepository, CommentRepository, UserRepository
from ..errors import ValidationError, NotFoundError, ConflictError, PermissionDeniedError
from ..realtime.emitter import EventEmitter, DeliveryOutcome
from ..realtime.events import build_notification, publish_notification
from ..utils.logger import get_app_logger
from ..utils.security import is_valid_identity


class PostService:
    """Post CRUD plus the like/dislike notification flow."""

    def __init__(
        self,
        posts: PostRepository,
        comments: CommentRepository,
        users: UserRepository,
        emitter: EventEmitter
    ):
        self.posts = posts
        self.comments = comments
        self.users = users
        self.emitter = emitter
        self.logger = get_app_logger()

    def _require_post(self, post_id: str) -> PostDO:
        if not is_valid_identity(post_id):
            raise ValidationError("Invalid post ID")
        post = self.posts.get(post_id)
        if post is None:
            raise NotFoundError("Post not found")
        return post

    def _require_actor(self, user_id: str) -> UserSummaryDO:
        summary = self.users.get_summary(user_id)
        if summary is None:
            raise NotFoundError("User not found")
        return summary

    # === Posts ===

    def create_post(
        self,
        author_id: str,
        media_url: str,
        media_type: str,
        caption: str = "",
        media_public_id: str = ""
    ) -> PostDO:
        """Create a post pointing at already-hosted media."""
        self._require_actor(author_id)
        if media_type not in ("image", "video"):
            raise ValidationError("Media must be an image or a video")
        if not media_url:
            raise ValidationError("Media (image or video) is required")

        post = PostDO(
            id=str(uuid.uuid4()),
            author_id=author_id,
            caption=caption or "",
            media_url=media_url,
            media_public_id=media_public_id or "",
            media_type=media_type
        )
        return self.posts.create(post)

    def list_posts(self) -> List[PostDO]:
        return self.posts.list_all()

    def list_user_posts(self, author_id: str) -> List[PostDO]:
        return self.posts.list_by_author(author_id)

    def delete_post(self, user_id: str, post_id: str) -> None:
        """
        Delete a post the caller authored.

        Raises:
            NotFoundError: No such post
            PermissionDeniedError: Caller is not the author
        """
        post = self._require_post(post_id)
        if post.author_id != user_id:
            raise PermissionDeniedError("Unauthorized")
        self.posts.delete(post_id)

    # === Likes ===

    async def like_post(self, actor_id: str, post_id: str) -> Optional[DeliveryOutcome]:
        """
        Add the actor to the post's liker set and notify the author.

        Returns:
            Delivery outcome of the notification, or None for a self-like

        Raises:
            NotFoundError: Post or actor missing
            ConflictError: Actor already likes the post
        """
        post = self._require_post(post_id)
        actor = self._require_actor(actor_id)

        if not self.posts.update_like_set(post_id, actor_id, add=True):
            raise ConflictError("Post already liked")

        return await self._notify_owner("like", actor, post)

    async def dislike_post(self, actor_id: str, post_id: str) -> Optional[DeliveryOutcome]:
        """
        Remove the actor from the post's liker set and notify the author.

        Removing a like that was never there still succeeds.

        Returns:
            Delivery outcome of the notification, or None for a self-dislike
        """
        post = self._require_post(post_id)
        actor = self._require_actor(actor_id)

        self.posts.update_like_set(post_id, actor_id, add=False)

        return await self._notify_owner("dislike", actor, post)

    async def _notify_owner(self, kind: str, actor: UserSummaryDO, post: PostDO) -> Optional[DeliveryOutcome]:
        # Self-actions never notify
        if actor.id == post.author_id:
            return None
        notification = build_notification(kind, actor, post.author_id, post_id=post.id)
        return await publish_notification(self.emitter, notification)

    # === Comments ===

    def add_comment(self, author_id: str, post_id: str, text: str) -> CommentDO:
        if not text or not text.strip():
            raise ValidationError("Text is required")
        self._require_post(post_id)
        self._require_actor(author_id)

        comment = CommentDO(
            id=str(uuid.uuid4()),
            post_id=post_id,
            author_id=author_id,
            text=text
        )
        return self.comments.create(comment)

    def list_comments(self, post_id: str) -> List[CommentDO]:
        self._require_post(post_id)
        return self.comments.list_by_post(post_id)

    # === Bookmarks ===

    def toggle_bookmark(self, user_id: str, post_id: str) -> bool:
        """
        Flip the caller's bookmark on a post.

        Returns:
            True if the post is bookmarked after the call
        """
        self._require_post(post_id)
        self._require_actor(user_id)

        if self.users.is_bookmarked(user_id, post_id):
            self.users.remove_bookmark(user_id, post_id)
            return False

        self.users.add_bookmark(user_id, post_id)
        return True
