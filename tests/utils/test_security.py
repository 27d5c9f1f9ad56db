"""Tests for password hashing and access tokens."""

import uuid
from datetime import datetime, timedelta, timezone

import jwt
import pytest

from socialhub.errors import AuthenticationError, TokenExpiredError
from socialhub.utils.security import (
    hash_password,
    verify_password,
    create_access_token,
    decode_access_token,
    is_valid_identity,
)


class TestPasswordHashing:
    """SUT: hash_password / verify_password"""

    def test_format(self):
        """Hashes are argon2id strings carrying their own cost parameters."""
        encoded = hash_password("secret123", time_cost=1, memory_cost=64, parallelism=1)
        assert encoded.startswith("$argon2id$")
        assert "m=64,t=1,p=1" in encoded
        assert "secret123" not in encoded

    def test_verify_roundtrip(self):
        encoded = hash_password("secret123", time_cost=1, memory_cost=64)
        assert verify_password("secret123", encoded)
        assert not verify_password("wrong", encoded)

    def test_verify_ignores_current_cost(self):
        """A hash made with other costs still verifies."""
        encoded = hash_password("secret123", time_cost=2, memory_cost=128, parallelism=2)
        assert verify_password("secret123", encoded)

    def test_random_salt(self):
        """Two hashes of the same password differ."""
        assert hash_password("pw", time_cost=1, memory_cost=64) != hash_password("pw", time_cost=1, memory_cost=64)

    def test_verify_garbage(self):
        """Malformed stored hashes never verify."""
        assert not verify_password("pw", "not-a-hash")
        assert not verify_password("pw", "pbkdf2_sha256$1000$salt$hash")


class TestAccessTokens:
    """SUT: create_access_token / decode_access_token"""

    def test_roundtrip(self, test_settings):
        user_id = str(uuid.uuid4())
        token = create_access_token(user_id, test_settings)
        assert decode_access_token(token, test_settings) == user_id

    def test_wrong_secret(self, test_settings):
        """A token signed with another secret is rejected."""
        token = create_access_token(str(uuid.uuid4()), test_settings)
        other = test_settings.model_copy(update={"jwt_secret": "other"})
        with pytest.raises(AuthenticationError, match="Invalid token") as exc_info:
            decode_access_token(token, other)
        assert not isinstance(exc_info.value, TokenExpiredError)

    def test_expired(self, test_settings):
        """Expired tokens raise the dedicated subclass."""
        past = datetime.now(timezone.utc) - timedelta(hours=1)
        token = jwt.encode(
            {"user_id": str(uuid.uuid4()), "iat": past - timedelta(hours=1), "exp": past},
            test_settings.jwt_secret,
            algorithm=test_settings.jwt_algorithm
        )
        with pytest.raises(TokenExpiredError, match="Token expired") as exc_info:
            decode_access_token(token, test_settings)
        assert isinstance(exc_info.value, AuthenticationError)

    def test_missing_claim(self, test_settings):
        """A valid signature without a user_id claim is still rejected."""
        token = jwt.encode({"sub": "x"}, test_settings.jwt_secret, algorithm=test_settings.jwt_algorithm)
        with pytest.raises(AuthenticationError):
            decode_access_token(token, test_settings)


class TestIsValidIdentity:
    """SUT: is_valid_identity"""

    def test_uuid(self):
        assert is_valid_identity(str(uuid.uuid4()))

    @pytest.mark.parametrize("value", [None, "", "undefined", "123", "not-a-uuid"])
    def test_rejects(self, value):
        assert not is_valid_identity(value)
