"""Post and comment repositories for database operations."""

from typing import Optional, List
from .base import BaseRepository
from ..database_models.post import PostDO, CommentDO
from ...utils.clock import as_utc, utc_now


_POST_COLUMNS = "id, author_id, caption, media_url, media_public_id, media_type, created_at"


class PostRepository(BaseRepository):
    """Repository for posts and their liker sets."""

    def _likes_for(self, post_id: str) -> List[str]:
        rows = self._execute("""
            SELECT user_id FROM post_likes WHERE post_id = ? ORDER BY created_at
        """, [post_id]).fetchall()
        return [row[0] for row in rows]

    def _row_to_post(self, row) -> PostDO:
        return PostDO(
            id=row[0],
            author_id=row[1],
            caption=row[2] or "",
            media_url=row[3],
            media_public_id=row[4],
            media_type=row[5],
            created_at=as_utc(row[6]),
            likes=self._likes_for(row[0])
        )

    def create(self, post: PostDO) -> PostDO:
        """
        Create a new post record.

        Args:
            post: PostDO instance

        Returns:
            The persisted post
        """
        self._execute(f"""
            INSERT INTO posts ({_POST_COLUMNS})
            VALUES (?, ?, ?, ?, ?, ?, ?)
        """, [
            post.id,
            post.author_id,
            post.caption,
            post.media_url,
            post.media_public_id,
            post.media_type,
            post.created_at
        ])
        self.logger.info(f"Created post record: {post.id}")
        return post

    def get(self, post_id: str) -> Optional[PostDO]:
        """Get post by ID (with likers), or None."""
        row = self._execute(
            f"SELECT {_POST_COLUMNS} FROM posts WHERE id = ?", [post_id]
        ).fetchone()
        return self._row_to_post(row) if row else None

    def list_all(self) -> List[PostDO]:
        """List all posts, newest first."""
        rows = self._execute(
            f"SELECT {_POST_COLUMNS} FROM posts ORDER BY created_at DESC"
        ).fetchall()
        return [self._row_to_post(row) for row in rows]

    def list_by_author(self, author_id: str) -> List[PostDO]:
        """List one author's posts, newest first."""
        rows = self._execute(f"""
            SELECT {_POST_COLUMNS} FROM posts
            WHERE author_id = ?
            ORDER BY created_at DESC
        """, [author_id]).fetchall()
        return [self._row_to_post(row) for row in rows]

    def list_by_ids(self, post_ids: List[str]) -> List[PostDO]:
        """Fetch posts in the order of ``post_ids``, skipping missing ones."""
        posts = []
        for post_id in post_ids:
            post = self.get(post_id)
            if post:
                posts.append(post)
        return posts

    def has_liked(self, post_id: str, user_id: str) -> bool:
        row = self._execute("""
            SELECT 1 FROM post_likes WHERE post_id = ? AND user_id = ? LIMIT 1
        """, [post_id, user_id]).fetchone()
        return row is not None

    def update_like_set(self, post_id: str, user_id: str, add: bool) -> bool:
        """
        Add or remove ``user_id`` in the post's liker set.

        Args:
            post_id: Post ID
            user_id: Actor ID
            add: True to like, False to remove the like

        Returns:
            True if the set changed, False if it already had that state
        """
        changed = self.has_liked(post_id, user_id) != add
        if changed and add:
            self._execute("""
                INSERT INTO post_likes (post_id, user_id, created_at)
                VALUES (?, ?, ?)
                ON CONFLICT DO NOTHING
            """, [post_id, user_id, utc_now()])
        elif changed:
            self._execute("""
                DELETE FROM post_likes WHERE post_id = ? AND user_id = ?
            """, [post_id, user_id])

        self.logger.debug(
            f"Like set for post {post_id}: {'add' if add else 'remove'} {user_id} (changed={changed})"
        )
        return changed

    def delete(self, post_id: str) -> bool:
        """
        Delete a post together with its likes, comments, and bookmarks.

        Returns:
            True if the post existed
        """
        exists = self._execute(
            "SELECT 1 FROM posts WHERE id = ?", [post_id]
        ).fetchone() is not None
        if not exists:
            return False

        with self.transaction():
            self._execute("DELETE FROM post_likes WHERE post_id = ?", [post_id])
            self._execute("DELETE FROM comments WHERE post_id = ?", [post_id])
            self._execute("DELETE FROM bookmarks WHERE post_id = ?", [post_id])
            self._execute("DELETE FROM posts WHERE id = ?", [post_id])

        self.logger.info(f"Deleted post record: {post_id}")
        return True


class CommentRepository(BaseRepository):
    """Repository for comments on posts."""

    def create(self, comment: CommentDO) -> CommentDO:
        self._execute("""
            INSERT INTO comments (id, post_id, author_id, text, created_at)
            VALUES (?, ?, ?, ?, ?)
        """, [
            comment.id,
            comment.post_id,
            comment.author_id,
            comment.text,
            comment.created_at
        ])
        self.logger.debug(f"Added comment {comment.id} to post {comment.post_id}")
        return comment

    def list_by_post(self, post_id: str) -> List[CommentDO]:
        """Comments on a post, newest first."""
        rows = self._execute("""
            SELECT id, post_id, author_id, text, created_at
            FROM comments
            WHERE post_id = ?
            ORDER BY created_at DESC
        """, [post_id]).fetchall()
        return [
            CommentDO(
                id=row[0],
                post_id=row[1],
                author_id=row[2],
                text=row[3],
                created_at=as_utc(row[4])
            )
            for row in rows
        ]
