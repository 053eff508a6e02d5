"""
Database helper functions: the store adapter for users, content and
share links.

Every content / link query is scoped by ``user_id``; references are
resolved eagerly (``joinedload`` / ``selectinload``) because lazy loading
is not available on an async session.
"""

from __future__ import annotations

import logging
import uuid
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload, selectinload

from database.models import Content, ShareLink, User

logger = logging.getLogger(__name__)


def to_uuid(value: str | uuid.UUID) -> uuid.UUID:
    """Coerce to ``UUID``; raises ``ValueError`` on malformed strings."""
    return uuid.UUID(value) if isinstance(value, str) else value


# ── Users ────────────────────────────────────────────────────────────


async def get_user_by_username(session: AsyncSession, username: str) -> Optional[User]:
    result = await session.execute(select(User).where(User.username == username))
    return result.scalar_one_or_none()


async def get_user_by_id(session: AsyncSession, user_id: str | uuid.UUID) -> Optional[User]:
    result = await session.execute(select(User).where(User.user_id == to_uuid(user_id)))
    return result.scalar_one_or_none()


async def create_user(session: AsyncSession, username: str, password_hash: str) -> User:
    """Insert a user; a duplicate username raises ``IntegrityError`` on flush."""
    user = User(user_id=uuid.uuid4(), username=username, password_hash=password_hash)
    session.add(user)
    await session.flush()
    return user


# ── Content ──────────────────────────────────────────────────────────


async def create_content(
    session: AsyncSession,
    user_id: str | uuid.UUID,
    link: str,
    title: str,
    content_type: str,
) -> Content:
    content = Content(
        content_id=uuid.uuid4(),
        user_id=to_uuid(user_id),
        link=link,
        title=title,
        type=content_type,
        tags=[],
    )
    session.add(content)
    await session.flush()
    return content


async def list_content_for_user(
    session: AsyncSession,
    user_id: str | uuid.UUID,
) -> List[Content]:
    """All content owned by ``user_id`` with owner and tags resolved, oldest first."""
    result = await session.execute(
        select(Content)
        .where(Content.user_id == to_uuid(user_id))
        .options(joinedload(Content.user), selectinload(Content.tags))
        .order_by(Content.created_at.asc())
    )
    return list(result.scalars().unique().all())


async def delete_content_for_user(
    session: AsyncSession,
    user_id: str | uuid.UUID,
    content_id: str | uuid.UUID,
) -> bool:
    """
    Delete the row matching both ``content_id`` and ``user_id`` in one
    statement. Returns ``False`` when nothing matched.
    """
    result = await session.execute(
        delete(Content)
        .where(
            Content.content_id == to_uuid(content_id),
            Content.user_id == to_uuid(user_id),
        )
    )
    return (result.rowcount or 0) > 0


# ── Share links ──────────────────────────────────────────────────────


async def get_share_link_for_user(
    session: AsyncSession,
    user_id: str | uuid.UUID,
) -> Optional[ShareLink]:
    result = await session.execute(
        select(ShareLink).where(ShareLink.user_id == to_uuid(user_id))
    )
    return result.scalar_one_or_none()


async def get_share_link_by_token(session: AsyncSession, token: str) -> Optional[ShareLink]:
    result = await session.execute(select(ShareLink).where(ShareLink.token == token))
    return result.scalar_one_or_none()


async def create_share_link(
    session: AsyncSession,
    user_id: str | uuid.UUID,
    token: str,
) -> ShareLink:
    """Insert a share link; a second link for the same user fails on flush."""
    link = ShareLink(link_id=uuid.uuid4(), user_id=to_uuid(user_id), token=token)
    session.add(link)
    await session.flush()
    return link


async def delete_share_link_for_user(
    session: AsyncSession,
    user_id: str | uuid.UUID,
) -> int:
    """Remove the user's share link, if any. Returns rows deleted."""
    result = await session.execute(
        delete(ShareLink).where(ShareLink.user_id == to_uuid(user_id))
    )
    return result.rowcount or 0
