"""Password hashing and access tokens."""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError

from ..errors import AuthenticationError, TokenExpiredError


# Stored hashes are self-describing ($argon2id$v=19$m=...,t=...,p=...$salt$hash),
# so verification needs no settings.
_verifier = PasswordHasher()


def hash_password(
    password: str,
    time_cost: int = 3,
    memory_cost: int = 65536,
    parallelism: int = 4
) -> str:
    """
    Hash a password with argon2id.

    Args:
        password: Plain-text password
        time_cost: Argon2 passes over memory
        memory_cost: Memory in KiB
        parallelism: Lanes

    Returns:
        Encoded PHC-format hash
    """
    hasher = PasswordHasher(time_cost=time_cost, memory_cost=memory_cost, parallelism=parallelism)
    return hasher.hash(password)


def verify_password(password: str, encoded: str) -> bool:
    """Check a plain-text password against a stored hash; malformed hashes never match."""
    try:
        return _verifier.verify(encoded, password)
    except (VerificationError, InvalidHashError):
        return False


def create_access_token(user_id: str, settings) -> str:
    """
    Issue a signed access token for a user.

    Args:
        user_id: User identity placed in the ``user_id`` claim
        settings: Application settings (secret, algorithm, lifetime)

    Returns:
        Encoded JWT
    """
    now = datetime.now(timezone.utc)
    payload = {
        "user_id": user_id,
        "iat": now,
        "exp": now + timedelta(hours=settings.jwt_expire_hours),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, settings) -> str:
    """
    Validate an access token and return the user identity it carries.

    Raises:
        TokenExpiredError: Token past its expiry
        AuthenticationError: Token tampered or missing the claim
    """
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except jwt.ExpiredSignatureError as e:
        raise TokenExpiredError("Token expired") from e
    except jwt.InvalidTokenError as e:
        raise AuthenticationError("Invalid token") from e

    user_id = payload.get("user_id")
    if not isinstance(user_id, str) or not is_valid_identity(user_id):
        raise AuthenticationError("Invalid token")
    return user_id


def is_valid_identity(value: Optional[str]) -> bool:
    """Whether ``value`` is a well-formed user/post identity (a UUID string)."""
    if not value or not isinstance(value, str):
        return False
    try:
        uuid.UUID(value)
    except ValueError:
        return False
    return True
