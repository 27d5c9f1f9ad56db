"""User repository for database operations."""

from typing import Optional, List, Dict, Any
from .base import BaseRepository
from ..database_models.user import UserDO, UserSummaryDO
from ...utils.clock import as_utc, utc_now


_USER_COLUMNS = """
    id, username, email, password_hash, profile_picture, bio, gender,
    is_first_login, created_at, updated_at
"""

# Fields a profile edit may touch
_UPDATABLE_FIELDS = ("profile_picture", "bio", "gender", "is_first_login")


def _row_to_user(row) -> UserDO:
    return UserDO(
        id=row[0],
        username=row[1],
        email=row[2],
        password_hash=row[3],
        profile_picture=row[4] or "",
        bio=row[5] or "",
        gender=row[6],
        is_first_login=bool(row[7]),
        created_at=as_utc(row[8]),
        updated_at=as_utc(row[9])
    )


class UserRepository(BaseRepository):
    """Repository for users, their follow edges, and bookmarks."""

    def create(self, user: UserDO) -> UserDO:
        """
        Create a new user record.

        Args:
            user: UserDO instance

        Returns:
            The persisted user
        """
        self._execute(f"""
            INSERT INTO users ({_USER_COLUMNS})
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
        """, [
            user.id,
            user.username,
            user.email,
            user.password_hash,
            user.profile_picture,
            user.bio,
            user.gender,
            user.is_first_login,
            user.created_at,
            user.updated_at
        ])
        self.logger.info(f"Created user record: {user.id}")
        return user

    def get(self, user_id: str) -> Optional[UserDO]:
        """Get user by ID, or None."""
        row = self._execute(
            f"SELECT {_USER_COLUMNS} FROM users WHERE id = ?", [user_id]
        ).fetchone()
        return _row_to_user(row) if row else None

    def get_by_email(self, email: str) -> Optional[UserDO]:
        """Get user by email, or None."""
        row = self._execute(
            f"SELECT {_USER_COLUMNS} FROM users WHERE email = ?", [email]
        ).fetchone()
        return _row_to_user(row) if row else None

    def get_by_username(self, username: str) -> Optional[UserDO]:
        """Get user by username, or None."""
        row = self._execute(
            f"SELECT {_USER_COLUMNS} FROM users WHERE username = ?", [username]
        ).fetchone()
        return _row_to_user(row) if row else None

    def get_summary(self, user_id: str) -> Optional[UserSummaryDO]:
        """Get the public display info for a user, or None."""
        row = self._execute(
            "SELECT id, username, profile_picture FROM users WHERE id = ?", [user_id]
        ).fetchone()
        if not row:
            return None
        return UserSummaryDO(id=row[0], username=row[1], profile_picture=row[2] or "")

    def list_except(self, user_id: str) -> List[UserDO]:
        """List every user other than ``user_id``, newest first."""
        rows = self._execute(f"""
            SELECT {_USER_COLUMNS} FROM users
            WHERE id != ?
            ORDER BY created_at DESC
        """, [user_id]).fetchall()
        return [_row_to_user(row) for row in rows]

    def update(self, user_id: str, updates: Dict[str, Any]) -> bool:
        """
        Update profile fields.

        Args:
            user_id: User ID
            updates: Dictionary of fields to update (unknown keys are ignored)

        Returns:
            True if a row was touched, False if the user does not exist
        """
        if self.get(user_id) is None:
            return False

        set_clauses = []
        params = []

        for name in _UPDATABLE_FIELDS:
            if name in updates:
                set_clauses.append(f"{name} = ?")
                params.append(updates[name])

        if not set_clauses:
            return True

        set_clauses.append("updated_at = ?")
        params.append(utc_now())
        params.append(user_id)

        self._execute(f"UPDATE users SET {', '.join(set_clauses)} WHERE id = ?", params)
        return True

    # === Follow edges ===

    def is_following(self, follower_id: str, followee_id: str) -> bool:
        row = self._execute("""
            SELECT 1 FROM follows WHERE follower_id = ? AND followee_id = ? LIMIT 1
        """, [follower_id, followee_id]).fetchone()
        return row is not None

    def follow(self, follower_id: str, followee_id: str) -> None:
        self._execute("""
            INSERT INTO follows (follower_id, followee_id, created_at)
            VALUES (?, ?, ?)
            ON CONFLICT DO NOTHING
        """, [follower_id, followee_id, utc_now()])

    def unfollow(self, follower_id: str, followee_id: str) -> None:
        self._execute("""
            DELETE FROM follows WHERE follower_id = ? AND followee_id = ?
        """, [follower_id, followee_id])

    def list_followers(self, user_id: str) -> List[str]:
        """IDs of users following ``user_id``."""
        rows = self._execute("""
            SELECT follower_id FROM follows WHERE followee_id = ? ORDER BY created_at
        """, [user_id]).fetchall()
        return [row[0] for row in rows]

    def list_following(self, user_id: str) -> List[str]:
        """IDs of users ``user_id`` follows."""
        rows = self._execute("""
            SELECT followee_id FROM follows WHERE follower_id = ? ORDER BY created_at
        """, [user_id]).fetchall()
        return [row[0] for row in rows]

    # === Bookmarks ===

    def is_bookmarked(self, user_id: str, post_id: str) -> bool:
        row = self._execute("""
            SELECT 1 FROM bookmarks WHERE user_id = ? AND post_id = ? LIMIT 1
        """, [user_id, post_id]).fetchone()
        return row is not None

    def add_bookmark(self, user_id: str, post_id: str) -> None:
        self._execute("""
            INSERT INTO bookmarks (user_id, post_id, created_at)
            VALUES (?, ?, ?)
            ON CONFLICT DO NOTHING
        """, [user_id, post_id, utc_now()])

    def remove_bookmark(self, user_id: str, post_id: str) -> None:
        self._execute("""
            DELETE FROM bookmarks WHERE user_id = ? AND post_id = ?
        """, [user_id, post_id])

    def list_bookmarks(self, user_id: str) -> List[str]:
        """Bookmarked post IDs, oldest bookmark first."""
        rows = self._execute("""
            SELECT post_id FROM bookmarks WHERE user_id = ? ORDER BY created_at
        """, [user_id]).fetchall()
        return [row[0] for row in rows]
