"""
Tests for share-link minting, revocation and public resolution.
"""

import uuid
from types import SimpleNamespace

import pytest
from unittest.mock import AsyncMock, patch

from core import share_service
from core.errors import NotFound
from database.helpers import create_content, create_share_link, create_user

ARTICLE = {"link": "https://x.com/a", "title": "T", "type": "article"}


def _share(client, headers, value):
    return client.post("/api/v1/brain/share", json={"share": value}, headers=headers)


class TestShareRoutes:
    def test_enable_mints_token(self, client, auth_headers, settings):
        resp = _share(client, auth_headers, True)
        assert resp.status_code == 201
        body = resp.json()
        assert body["message"] == "Link created"
        assert len(body["hash"]) == settings.share_token_bytes * 2
        int(body["hash"], 16)

    def test_enable_twice_returns_same_token(self, client, auth_headers):
        first = _share(client, auth_headers, True)
        second = _share(client, auth_headers, True)
        assert second.status_code == 200
        assert second.json()["message"] == "Link already exists"
        assert second.json()["hash"] == first.json()["hash"]

    def test_string_true_enables(self, client, auth_headers):
        resp = _share(client, auth_headers, "true")
        assert resp.status_code == 201

    @pytest.mark.parametrize("value", [None, 1, "yes", " TRUE ", "True", 0])
    def test_only_true_enables(self, client, auth_headers, value):
        token = _share(client, auth_headers, True).json()["hash"]

        resp = _share(client, auth_headers, value)
        assert resp.status_code == 200
        assert resp.json() == {"message": "Removed link"}
        assert client.get(f"/api/v1/brain/{token}").status_code == 404

    def test_disable_then_enable_rotates(self, client, auth_headers):
        first = _share(client, auth_headers, True).json()["hash"]

        resp = _share(client, auth_headers, False)
        assert resp.status_code == 200
        assert resp.json() == {"message": "Removed link"}

        second = _share(client, auth_headers, True).json()["hash"]
        assert second != first

    def test_disable_without_link_is_ok(self, client, auth_headers):
        resp = _share(client, auth_headers, False)
        assert resp.status_code == 200

    def test_resolve_returns_owner_content(self, client, register):
        alice = register("alice")
        bob = register("bob")
        client.post("/api/v1/content", json=ARTICLE, headers=alice)
        client.post("/api/v1/content", json=dict(ARTICLE, title="Other"), headers=bob)
        token = _share(client, alice, True).json()["hash"]

        resp = client.get(f"/api/v1/brain/{token}")
        assert resp.status_code == 200
        body = resp.json()
        assert body["username"] == "alice"
        assert [c["title"] for c in body["content"]] == ["T"]
        assert body["content"][0]["tags"] == []

    def test_resolve_unknown_token(self, client):
        resp = client.get("/api/v1/brain/deadbeef")
        assert resp.status_code == 404
        assert resp.json() == {"message": "Invalid link"}

    def test_resolve_revoked_token(self, client, auth_headers):
        token = _share(client, auth_headers, True).json()["hash"]
        _share(client, auth_headers, False)

        resp = client.get(f"/api/v1/brain/{token}")
        assert resp.status_code == 404


class TestShareService:
    def test_generate_share_token(self):
        token = share_service.generate_share_token(16)
        assert len(token) == 32
        assert token != share_service.generate_share_token(16)

    @pytest.mark.asyncio
    async def test_set_share_idempotent(self, session):
        user = await create_user(session, "gina", "hash")
        first = await share_service.set_share(session, str(user.user_id), True)
        second = await share_service.set_share(session, str(user.user_id), True)
        assert first.created and not second.created
        assert first.token == second.token

        off = await share_service.set_share(session, str(user.user_id), False)
        assert off.token is None

    @pytest.mark.asyncio
    async def test_lost_race_returns_existing_token(self, session):
        user = await create_user(session, "gina", "hash")
        first = await share_service.enable_share(session, str(user.user_id))
        await session.commit()

        lookup = AsyncMock(side_effect=[None, SimpleNamespace(token=first.token)])
        with patch("core.share_service.get_share_link_for_user", new=lookup):
            result = await share_service.enable_share(session, str(user.user_id))

        assert result.token == first.token
        assert result.created is False

    @pytest.mark.asyncio
    async def test_resolve(self, session):
        user = await create_user(session, "hank", "hash")
        await create_content(session, user.user_id, "https://example.com/a", "Audio", "audio")
        await create_share_link(session, user.user_id, "abc123")

        brain = await share_service.resolve_share(session, "abc123")
        assert brain.username == "hank"
        assert [c.title for c in brain.content] == ["Audio"]

    @pytest.mark.asyncio
    async def test_resolve_unknown(self, session):
        with pytest.raises(NotFound):
            await share_service.resolve_share(session, "missing")

    @pytest.mark.asyncio
    async def test_resolve_orphaned_link(self, session):
        # SQLite does not enforce the foreign key, so a dangling owner is possible.
        await create_share_link(session, uuid.uuid4(), "orphan")

        with pytest.raises(NotFound) as exc_info:
            await share_service.resolve_share(session, "orphan")
        assert exc_info.value.message == "User not found"
