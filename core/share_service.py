"""
Share links: mint / revoke a public token and resolve it to a read-only
view of the owner's content.
"""

from __future__ import annotations

import logging
import secrets
from typing import Any, List, Optional

from pydantic import BaseModel, Field
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from core.errors import InternalError, NotFound
from database.helpers import (
    create_share_link,
    delete_share_link_for_user,
    get_share_link_by_token,
    get_share_link_for_user,
    get_user_by_id,
    list_content_for_user,
)

logger = logging.getLogger(__name__)


class ShareResult(BaseModel):
    token: Optional[str] = None
    created: bool = False


class SharedBrain(BaseModel):
    username: str
    content: List[Any] = Field(default_factory=list)  # ORM ``Content`` rows


def generate_share_token(num_bytes: int = 16) -> str:
    """Hex-encoded random token of ``num_bytes`` bytes."""
    return secrets.token_hex(num_bytes)


async def enable_share(
    session: AsyncSession,
    owner_id: str,
    token_bytes: int = 16,
) -> ShareResult:
    """
    Return the owner's share token, minting one if none exists.

    An existing token is returned unchanged; it is never rotated here.
    """
    existing = await get_share_link_for_user(session, owner_id)
    if existing is not None:
        return ShareResult(token=existing.token, created=False)

    token = generate_share_token(token_bytes)
    try:
        await create_share_link(session, owner_id, token)
    except IntegrityError:
        # A concurrent request created the link first; hand back theirs.
        await session.rollback()
        existing = await get_share_link_for_user(session, owner_id)
        if existing is None:
            raise InternalError("Failed to create link")
        return ShareResult(token=existing.token, created=False)

    logger.info("Share link created for %s", owner_id)
    return ShareResult(token=token, created=True)


async def disable_share(session: AsyncSession, owner_id: str) -> None:
    """Revoke the owner's share link. No-op when there is none."""
    removed = await delete_share_link_for_user(session, owner_id)
    if removed:
        logger.info("Share link removed for %s", owner_id)


async def set_share(
    session: AsyncSession,
    owner_id: str,
    enable: bool,
    token_bytes: int = 16,
) -> ShareResult:
    if enable:
        return await enable_share(session, owner_id, token_bytes=token_bytes)
    await disable_share(session, owner_id)
    return ShareResult(token=None)


async def resolve_share(session: AsyncSession, token: str) -> SharedBrain:
    """Public lookup: token -> owner's username and content. No auth."""
    link = await get_share_link_by_token(session, token)
    if link is None:
        raise NotFound("Invalid link")

    user = await get_user_by_id(session, link.user_id)
    if user is None:
        logger.warning("Share link %s points at missing user %s", link.link_id, link.user_id)
        raise NotFound("User not found")

    content = await list_content_for_user(session, link.user_id)
    return SharedBrain(username=user.username, content=content)
