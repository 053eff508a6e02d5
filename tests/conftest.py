"""
Shared fixtures: an in-memory SQLite app per test and an async session
for service-level tests.
"""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from config.settings import Settings
from database.session import build_engine, build_session_factory, create_tables
from main import create_app

TEST_SECRET = "test-secret"


@pytest.fixture()
def settings():
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        jwt_secret=TEST_SECRET,
        bcrypt_rounds=4,
        share_token_bytes=8,
        _env_file=None,
    )


@pytest.fixture()
def app(settings):
    return create_app(settings)


@pytest.fixture()
def client(app):
    with TestClient(app) as c:
        yield c


@pytest_asyncio.fixture()
async def session(settings):
    engine = build_engine(settings)
    await create_tables(engine)
    factory = build_session_factory(engine)
    async with factory() as s:
        yield s
    await engine.dispose()


def _signup_and_signin(client, username, password):
    resp = client.post("/api/v1/signup", json={"username": username, "password": password})
    assert resp.status_code == 200, resp.text
    resp = client.post("/api/v1/signin", json={"username": username, "password": password})
    assert resp.status_code == 200, resp.text
    return {"Authorization": resp.json()["token"]}


@pytest.fixture()
def register(client):
    """Register + sign in; return headers carrying the raw token."""

    def _register(username="alice", password="password1"):
        return _signup_and_signin(client, username, password)

    return _register


@pytest.fixture()
def auth_headers(register):
    return register()
