"""
Content operations scoped to the authenticated owner.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from core.errors import NotFound
from database.helpers import (
    create_content,
    delete_content_for_user,
    list_content_for_user,
)
from database.models import Content

logger = logging.getLogger(__name__)


async def add_content(
    session: AsyncSession,
    owner_id: str,
    link: str,
    title: str,
    content_type: str,
    tags: Optional[List[str]] = None,
) -> Content:
    """
    Persist a content row owned by ``owner_id``.

    ``tags`` is accepted but not stored: new content always starts with an
    empty tag list.
    """
    if tags:
        logger.debug("Discarding %d submitted tag(s) for %s", len(tags), owner_id)
    content = await create_content(session, owner_id, link, title, content_type)
    logger.info("Content %s created by %s", content.content_id, owner_id)
    return content


async def list_content(session: AsyncSession, owner_id: str) -> List[Content]:
    return await list_content_for_user(session, owner_id)


async def remove_content(session: AsyncSession, owner_id: str, content_id: str) -> None:
    """Delete by (id, owner). Someone else's id is indistinguishable from a missing one."""
    try:
        deleted = await delete_content_for_user(session, owner_id, content_id)
    except ValueError:
        # Not a UUID, so it cannot name any row.
        deleted = False
    if not deleted:
        raise NotFound("Content not found")
    logger.info("Content %s deleted by %s", content_id, owner_id)
