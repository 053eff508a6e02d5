"""
REST API routes: content CRUD and brain sharing.

Route prefix: /api/v1
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from auth.dependencies import db_session, get_current_user_id, get_settings
from config.settings import Settings
from core import content_service, share_service
from utils.schemas import (
    ContentCreateRequest,
    ContentDeleteRequest,
    ContentItem,
    ContentListResponse,
    MessageResponse,
    SharedBrainResponse,
    ShareRequest,
    ShareResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


# ── Content ────────────────────────────────────────────────────────────


@router.post(
    "/content",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["content"],
)
async def create_content(
    req: ContentCreateRequest,
    session: AsyncSession = Depends(db_session),
    user_id: str = Depends(get_current_user_id),
) -> Dict[str, Any]:
    await content_service.add_content(
        session,
        user_id,
        link=req.link,
        title=req.title,
        content_type=req.type,
        tags=req.tags,
    )
    return {"message": "Content successfully created"}


@router.get("/content", response_model=ContentListResponse, tags=["content"])
async def get_content(
    session: AsyncSession = Depends(db_session),
    user_id: str = Depends(get_current_user_id),
) -> Dict[str, Any]:
    """All content saved by the caller (empty list when none)."""
    rows = await content_service.list_content(session, user_id)
    return {"content": [ContentItem.from_row(row) for row in rows]}


@router.delete("/content", response_model=MessageResponse, tags=["content"])
async def delete_content(
    req: ContentDeleteRequest,
    session: AsyncSession = Depends(db_session),
    user_id: str = Depends(get_current_user_id),
) -> Dict[str, Any]:
    await content_service.remove_content(session, user_id, req.contentID)
    return {"message": "Content deleted"}


# ── Sharing ────────────────────────────────────────────────────────────


@router.post(
    "/brain/share",
    response_model=ShareResponse,
    response_model_exclude_none=True,
    tags=["share"],
)
async def share_brain(
    req: ShareRequest,
    response: Response,
    session: AsyncSession = Depends(db_session),
    user_id: str = Depends(get_current_user_id),
    settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    """
    Enable (``share: true``) or revoke sharing for the caller.

    A newly minted link answers 201; an existing one is returned as-is
    with 200.
    """
    result = await share_service.set_share(
        session, user_id, req.share, token_bytes=settings.share_token_bytes,
    )
    if not req.share:
        return {"message": "Removed link"}
    if result.created:
        response.status_code = status.HTTP_201_CREATED
        return {"hash": result.token, "message": "Link created"}
    return {"hash": result.token, "message": "Link already exists"}


@router.get("/brain/{share_link}", response_model=SharedBrainResponse, tags=["share"])
async def get_shared_brain(
    share_link: str,
    session: AsyncSession = Depends(db_session),
) -> Dict[str, Any]:
    """Public, unauthenticated view of another user's content."""
    brain = await share_service.resolve_share(session, share_link)
    return {
        "content": [ContentItem.from_row(row) for row in brain.content],
        "username": brain.username,
    }
