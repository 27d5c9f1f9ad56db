"""Accounts, profiles, and the follow graph."""

import uuid
from typing import List, Optional, Tuple

from fastapi.concurrency import run_in_threadpool

from ..db.database_models import UserDO
from ..db.repositories import UserRepository
from ..errors import ValidationError, NotFoundError, ConflictError, AuthenticationError
from ..utils.logger import get_app_logger
from ..utils.security import (
    hash_password,
    verify_password,
    create_access_token,
    is_valid_identity,
)


class UserService:
    """Registration, login, and profile operations."""

    def __init__(self, users: UserRepository, settings):
        self.users = users
        self.settings = settings
        self.logger = get_app_logger()

    def _require_user(self, user_id: str) -> UserDO:
        if not is_valid_identity(user_id):
            raise ValidationError("Invalid or missing user ID")
        user = self.users.get(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user

    async def register(self, username: str, email: str, password: str) -> UserDO:
        """
        Create an account.

        Hashing runs in the threadpool so the event loop keeps serving
        realtime pushes meanwhile.

        Raises:
            ConflictError: Email or username already taken
        """
        if self.users.get_by_email(email):
            raise ConflictError("Email already in use. Try a different one.")
        if self.users.get_by_username(username):
            raise ConflictError("Username already in use. Try a different one.")

        user = UserDO(
            id=str(uuid.uuid4()),
            username=username,
            email=email,
            password_hash=await run_in_threadpool(
                hash_password,
                password,
                time_cost=self.settings.password_hash_time_cost,
                memory_cost=self.settings.password_hash_memory_cost
            )
        )
        self.users.create(user)
        self.logger.info(f"Registered user {user.username} ({user.id})")
        return user

    async def login(self, email: str, password: str) -> Tuple[UserDO, str]:
        """
        Check credentials and issue an access token.

        Returns:
            (user, token)

        Raises:
            AuthenticationError: Unknown email or wrong password
        """
        user = self.users.get_by_email(email)
        if user is None or not await run_in_threadpool(verify_password, password, user.password_hash):
            raise AuthenticationError("Incorrect Email or Password")
        return user, create_access_token(user.id, self.settings)

    def get_profile(self, user_id: str) -> UserDO:
        return self._require_user(user_id)

    def edit_profile(
        self,
        user_id: str,
        bio: Optional[str] = None,
        gender: Optional[str] = None,
        profile_picture: Optional[str] = None
    ) -> UserDO:
        """Update the given fields; editing a profile also ends first-login onboarding."""
        user = self._require_user(user_id)

        updates = {}
        if bio:
            updates["bio"] = bio
        if gender:
            updates["gender"] = gender
        if profile_picture:
            updates["profile_picture"] = profile_picture
        if user.is_first_login:
            updates["is_first_login"] = False

        self.users.update(user_id, updates)
        return self.users.get(user_id)

    def disable_first_login(self, user_id: str) -> UserDO:
        self._require_user(user_id)
        self.users.update(user_id, {"is_first_login": False})
        return self.users.get(user_id)

    def suggested_users(self, user_id: str) -> List[UserDO]:
        return self.users.list_except(user_id)

    def follow_or_unfollow(self, actor_id: str, target_id: str) -> bool:
        """
        Toggle whether ``actor_id`` follows ``target_id``.

        Returns:
            True if the actor follows the target after the call

        Raises:
            ValidationError: Malformed IDs or a self-follow
            NotFoundError: Either user missing
        """
        actor_id = (actor_id or "").strip()
        target_id = (target_id or "").strip()
        if not is_valid_identity(actor_id) or not is_valid_identity(target_id):
            raise ValidationError("Invalid user ID")
        if actor_id == target_id:
            raise ValidationError("You can't follow or unfollow yourself")

        self._require_user(actor_id)
        self._require_user(target_id)

        with self.users.transaction():
            if self.users.is_following(actor_id, target_id):
                self.users.unfollow(actor_id, target_id)
                following = False
            else:
                self.users.follow(actor_id, target_id)
                following = True

        self.logger.info(f"{actor_id} {'followed' if following else 'unfollowed'} {target_id}")
        return following
