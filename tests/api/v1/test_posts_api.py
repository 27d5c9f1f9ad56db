"""Post API integration tests."""

import uuid

from httpx import AsyncClient


async def _add_post(client: AsyncClient, headers, caption: str = "hello") -> dict:
    response = await client.post(
        "/api/v1/post/addpost",
        json={"caption": caption, "media": {"url": "https://cdn.example.com/a.jpg", "type": "image"}},
        headers=headers
    )
    assert response.status_code == 201, response.text
    return response.json()["post"]


class TestPostCRUD:
    """Post CRUD endpoint tests."""

    async def test_add_and_list(self, client: AsyncClient, signup):
        alice_id, alice = await signup("alice")
        post = await _add_post(client, alice)
        assert post["author"]["id"] == alice_id
        assert post["author"]["username"] == "alice"

        response = await client.get("/api/v1/post/all", headers=alice)
        assert [p["id"] for p in response.json()["posts"]] == [post["id"]]

        response = await client.get("/api/v1/post/userpost/all", headers=alice)
        assert [p["id"] for p in response.json()["posts"]] == [post["id"]]

    async def test_add_post_bad_media_type(self, client: AsyncClient, signup):
        _, alice = await signup("alice")
        response = await client.post(
            "/api/v1/post/addpost",
            json={"media": {"url": "https://cdn.example.com/a.gif", "type": "gif"}},
            headers=alice
        )
        assert response.status_code == 422

    async def test_delete_own(self, client: AsyncClient, signup):
        _, alice = await signup("alice")
        post = await _add_post(client, alice)
        response = await client.delete(f"/api/v1/post/delete/{post['id']}", headers=alice)
        assert response.status_code == 200
        assert (await client.get("/api/v1/post/all", headers=alice)).json()["posts"] == []

    async def test_delete_others_forbidden(self, client: AsyncClient, signup):
        _, alice = await signup("alice")
        _, bob = await signup("bob")
        post = await _add_post(client, alice)
        response = await client.delete(f"/api/v1/post/delete/{post['id']}", headers=bob)
        assert response.status_code == 403
        assert response.json()["detail"] == "Unauthorized"

    async def test_missing_post(self, client: AsyncClient, signup):
        _, alice = await signup("alice")
        response = await client.get(f"/api/v1/post/{uuid.uuid4()}/like", headers=alice)
        assert response.status_code == 404


class TestLikes:
    """Like/dislike endpoint tests."""

    async def test_like_notifies_author(self, client: AsyncClient, signup, registry, fake_server):
        alice_id, alice = await signup("alice")
        bob_id, bob = await signup("bob")
        post = await _add_post(client, alice)
        registry.register_connection(alice_id, "c-alice")

        response = await client.get(f"/api/v1/post/{post['id']}/like", headers=bob)

        assert response.status_code == 200
        (event, payload), = fake_server.events_to("c-alice")
        assert event == "notification"
        assert payload["type"] == "like"
        assert payload["user_id"] == bob_id

        posts = (await client.get("/api/v1/post/all", headers=bob)).json()["posts"]
        assert posts[0]["likes"] == [bob_id]

    async def test_like_twice(self, client: AsyncClient, signup):
        _, alice = await signup("alice")
        _, bob = await signup("bob")
        post = await _add_post(client, alice)
        await client.get(f"/api/v1/post/{post['id']}/like", headers=bob)
        response = await client.get(f"/api/v1/post/{post['id']}/like", headers=bob)
        assert response.status_code == 400
        assert response.json()["detail"] == "Post already liked"

    async def test_dislike(self, client: AsyncClient, signup, registry, fake_server):
        alice_id, alice = await signup("alice")
        _, bob = await signup("bob")
        post = await _add_post(client, alice)
        await client.get(f"/api/v1/post/{post['id']}/like", headers=bob)
        registry.register_connection(alice_id, "c-alice")

        response = await client.get(f"/api/v1/post/{post['id']}/dislike", headers=bob)

        assert response.status_code == 200
        (_, payload), = fake_server.events_to("c-alice")
        assert payload["type"] == "dislike"


class TestCommentsAndBookmarks:
    """Comment and bookmark endpoint tests."""

    async def test_comment_flow(self, client: AsyncClient, signup):
        _, alice = await signup("alice")
        _, bob = await signup("bob")
        post = await _add_post(client, alice)

        response = await client.post(f"/api/v1/post/{post['id']}/comment", json={"text": "nice"}, headers=bob)
        assert response.status_code == 201
        assert response.json()["comment"]["author"]["username"] == "bob"

        for method in ("GET", "POST"):
            response = await client.request(method, f"/api/v1/post/{post['id']}/comment/all", headers=alice)
            assert [c["text"] for c in response.json()["comments"]] == ["nice"]

    async def test_empty_comment(self, client: AsyncClient, signup):
        _, alice = await signup("alice")
        post = await _add_post(client, alice)
        response = await client.post(f"/api/v1/post/{post['id']}/comment", json={"text": ""}, headers=alice)
        assert response.status_code == 400
        assert response.json()["detail"] == "Text is required"

    async def test_bookmark_toggle(self, client: AsyncClient, signup):
        alice_id, alice = await signup("alice")
        post = await _add_post(client, alice)

        response = await client.get(f"/api/v1/post/{post['id']}/bookmark", headers=alice)
        assert response.json()["is_bookmarked"] is True
        profile = (await client.get(f"/api/v1/user/{alice_id}/profile", headers=alice)).json()["user"]
        assert [p["id"] for p in profile["bookmarks"]] == [post["id"]]

        response = await client.get(f"/api/v1/post/{post['id']}/bookmark", headers=alice)
        assert response.json()["is_bookmarked"] is False
