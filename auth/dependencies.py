"""
FastAPI dependencies for authentication.

Provides ``db_session``, ``get_settings`` and ``get_current_user_id``
dependencies that are used across all protected routes.
"""

from __future__ import annotations

import logging
import uuid
from typing import AsyncGenerator, Optional

from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from auth.jwt import InvalidToken, verify_token
from config.settings import Settings
from core.errors import Forbidden, InternalError, Unauthorized
from database.session import get_db_session

logger = logging.getLogger(__name__)

_BEARER_SCHEME = "bearer"


def _is_uuid(value: str) -> bool:
    try:
        uuid.UUID(value)
    except ValueError:
        return False
    return True


async def db_session(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[AsyncSession, None]:
    """Yield a DB session for route handlers."""
    yield session


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def extract_token(authorization: Optional[str]) -> Optional[str]:
    """
    Pull the token out of an ``Authorization`` header value.

    The raw value is the token; a ``Bearer `` scheme prefix is stripped
    when present.
    """
    if not authorization:
        return None
    parts = authorization.split(None, 1)
    if not parts:
        return None
    if parts[0].lower() == _BEARER_SCHEME:
        return parts[1].strip() if len(parts) > 1 else None
    return authorization.strip()


async def get_current_user_id(
    authorization: Optional[str] = Header(None, alias="Authorization"),
    settings: Settings = Depends(get_settings),
) -> str:
    """
    Verify the token from the Authorization header and return the
    authenticated ``user_id`` (UUID string).

    403 when no token is sent, 401 when it does not verify or carries no
    id, 500 for anything else going wrong during verification.
    """
    token = extract_token(authorization)
    if token is None:
        raise Forbidden("You are not signed in")

    try:
        user_id = verify_token(token, settings.jwt_secret)
    except InvalidToken as exc:
        logger.debug("Rejected token: %s", exc)
        raise Unauthorized("Invalid token")
    except Exception:
        logger.exception("Token verification failed unexpectedly")
        raise InternalError()

    if not user_id or not _is_uuid(user_id):
        raise Unauthorized("Invalid token")
    return user_id
