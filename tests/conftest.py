"""
Shared fixtures: an app backed by in-memory SQLite and a raw DB session.
"""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from config.settings import Settings
from database.session import build_engine, build_session_factory, init_db
from main import create_app

TEST_SECRET = "test-secret"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        jwt_secret=TEST_SECRET,
        database_url="sqlite+aiosqlite://",
        bcrypt_rounds=10,
    )


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def session():
    engine = build_engine("sqlite+aiosqlite://")
    await init_db(engine)
    factory = build_session_factory(engine)
    async with factory() as db:
        yield db
    await engine.dispose()


@pytest.fixture
def signup_and_login(client):
    """Return a helper that registers a user and yields its Authorization header."""

    def _signup_and_login(username: str, password: str) -> dict:
        resp = client.post("/signup", json={"username": username, "password": password})
        assert resp.status_code == 200, resp.text
        resp = client.post("/login", json={"username": username, "password": password})
        assert resp.status_code == 200, resp.text
        return {"Authorization": f"Bearer {resp.json()['token']}"}

    return _signup_and_login
