"""Service test fixtures — isolated app per test + httpx async client.

Invariants:
    - Every test gets a fresh app from create_app() (fresh TodoStore)
    - The text-generation client is a MockGenerationClient, never the real SDK
    - auth_headers carries a token issued by the same app under test

Design Decisions:
    - ASGITransport without lifespan: services are wired in create_app,
      so no startup hook is required for requests to work
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.config import Settings
from app.main import create_app
from tests.services.mock_anthropic import MockGenerationClient

TEST_API_KEY = "test-api-key"
TEST_JWT_SECRET = "test-jwt-secret-0123456789abcdefghij"


@pytest.fixture
def settings():
    return Settings(
        api_key=TEST_API_KEY,
        jwt_secret=TEST_JWT_SECRET,
        jwt_expires_in_seconds=3600,
        anthropic_api_key="sk-ant-test-fake-key",
        cors_origins=["http://localhost:5173"],
        log_format="text",
    )


@pytest.fixture
def generation_client():
    """Configure with generation_client._responses.extend([...]) per test."""
    return MockGenerationClient([])


@pytest.fixture
def app(settings, generation_client):
    return create_app(settings=settings, generation_client=generation_client)


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def auth_headers(client):
    res = await client.post("/api/v1/auth/token", json={"apiKey": TEST_API_KEY})
    assert res.status_code == 200
    return {"Authorization": f"Bearer {res.json()['access_token']}"}
