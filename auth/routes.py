"""
Auth API routes: signup, signin.

Route prefix: /api/v1
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from auth import service
from auth.dependencies import db_session, get_settings
from config.settings import Settings
from utils.schemas import Credentials, MessageResponse, TokenResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/signup", response_model=MessageResponse)
async def signup(
    req: Credentials,
    session: AsyncSession = Depends(db_session),
    settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    """Register a new user. Sign in afterwards to obtain a token."""
    await service.signup(session, settings, req.username, req.password)
    return {"message": "User signed up"}


@router.post("/signin", response_model=TokenResponse)
async def signin(
    req: Credentials,
    session: AsyncSession = Depends(db_session),
    settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    """Exchange username + password for a bearer token."""
    token = await service.signin(session, settings, req.username, req.password)
    return {"token": token}
