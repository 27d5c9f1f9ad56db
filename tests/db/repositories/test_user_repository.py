"""Tests for UserRepository."""

import uuid

import pytest

from socialhub.db.database_models import UserDO
from socialhub.errors import StorageError


class TestUserRepositoryCRUD:
    """SUT: UserRepository create/get/update"""

    def test_create_and_get(self, user_repo, make_user):
        user = make_user("alice")
        fetched = user_repo.get(user.id)
        assert fetched.username == "alice"
        assert fetched.email == "alice@example.com"
        assert fetched.is_first_login is True

    def test_get_missing(self, user_repo):
        assert user_repo.get(str(uuid.uuid4())) is None

    def test_lookup_by_email_and_username(self, user_repo, make_user):
        user = make_user("bob")
        assert user_repo.get_by_email("bob@example.com").id == user.id
        assert user_repo.get_by_username("bob").id == user.id
        assert user_repo.get_by_email("nobody@example.com") is None

    def test_duplicate_email_is_storage_error(self, user_repo, make_user):
        """The UNIQUE constraint surfaces as StorageError."""
        make_user("carol")
        dup = UserDO(id=str(uuid.uuid4()), username="carol2", email="carol@example.com", password_hash="x")
        with pytest.raises(StorageError):
            user_repo.create(dup)

    def test_summary(self, user_repo, make_user):
        user = make_user("dave")
        summary = user_repo.get_summary(user.id)
        assert summary.id == user.id
        assert summary.username == "dave"
        assert summary.profile_picture == ""

    def test_update_fields(self, user_repo, make_user):
        user = make_user("erin")
        assert user_repo.update(user.id, {"bio": "hi", "gender": "female", "is_first_login": False})
        fetched = user_repo.get(user.id)
        assert fetched.bio == "hi"
        assert fetched.gender == "female"
        assert fetched.is_first_login is False

    def test_update_ignores_unknown_fields(self, user_repo, make_user):
        """Only profile fields are writable."""
        user = make_user("frank")
        user_repo.update(user.id, {"email": "hacked@example.com"})
        assert user_repo.get(user.id).email == "frank@example.com"

    def test_update_missing_user(self, user_repo):
        assert user_repo.update(str(uuid.uuid4()), {"bio": "x"}) is False

    def test_list_except(self, user_repo, make_user):
        me = make_user("me")
        make_user("other1")
        make_user("other2")
        others = user_repo.list_except(me.id)
        assert {u.username for u in others} == {"other1", "other2"}


class TestFollowEdges:
    """SUT: UserRepository follow/unfollow"""

    def test_follow_and_list(self, user_repo, make_user):
        a, b = make_user("a_user"), make_user("b_user")
        user_repo.follow(a.id, b.id)
        assert user_repo.is_following(a.id, b.id)
        assert not user_repo.is_following(b.id, a.id)
        assert user_repo.list_following(a.id) == [b.id]
        assert user_repo.list_followers(b.id) == [a.id]

    def test_follow_twice_is_idempotent(self, user_repo, make_user):
        a, b = make_user("a_user"), make_user("b_user")
        user_repo.follow(a.id, b.id)
        user_repo.follow(a.id, b.id)
        assert user_repo.list_followers(b.id) == [a.id]

    def test_unfollow(self, user_repo, make_user):
        a, b = make_user("a_user"), make_user("b_user")
        user_repo.follow(a.id, b.id)
        user_repo.unfollow(a.id, b.id)
        assert not user_repo.is_following(a.id, b.id)


class TestBookmarks:
    """SUT: UserRepository bookmarks"""

    def test_add_remove(self, user_repo, make_user):
        user = make_user("reader")
        post_id = str(uuid.uuid4())
        user_repo.add_bookmark(user.id, post_id)
        assert user_repo.is_bookmarked(user.id, post_id)
        assert user_repo.list_bookmarks(user.id) == [post_id]
        user_repo.remove_bookmark(user.id, post_id)
        assert user_repo.list_bookmarks(user.id) == []
