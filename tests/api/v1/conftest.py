"""Pytest fixtures for API testing."""

import pytest
from httpx import AsyncClient, ASGITransport
from fastapi import FastAPI

from socialhub.api import register_exception_handlers
from socialhub.api.v1 import deps, users_router, posts_router, messages_router


@pytest.fixture(scope="function")
async def client(db, emitter, test_settings):
    """Create async HTTP client with a fresh database for each test."""
    # Inject dependencies into routers
    deps.db_conn = db
    deps.emitter = emitter
    deps.settings = test_settings

    # Create a test app without lifespan (to avoid conflicts)
    test_app = FastAPI(title="SocialHub Test")
    register_exception_handlers(test_app)
    test_app.include_router(users_router)
    test_app.include_router(posts_router)
    test_app.include_router(messages_router)

    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    deps.db_conn = None
    deps.emitter = None
    deps.settings = None


@pytest.fixture
def signup(client):
    """
    Register and log in a user through the API.

    Returns an async factory yielding ``(user_id, auth_headers)``. Cookies are
    cleared after each login so several users can act from one client.
    """
    async def _signup(username: str, password: str = "secret123"):
        email = f"{username}@example.com"
        response = await client.post(
            "/api/v1/user/register",
            json={"username": username, "email": email, "password": password}
        )
        assert response.status_code == 201, response.text

        response = await client.post(
            "/api/v1/user/login",
            json={"email": email, "password": password}
        )
        assert response.status_code == 200, response.text
        client.cookies.clear()

        data = response.json()
        return data["user"]["id"], {"Authorization": f"Bearer {data['token']}"}
    return _signup
