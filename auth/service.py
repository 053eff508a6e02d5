"""
Signup / signin logic, independent of the HTTP layer.
"""

from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from auth.jwt import create_token
from auth.password import hash_password, verify_password
from config.settings import Settings
from core.errors import Conflict, Unauthorized
from database.helpers import create_user, get_user_by_username

logger = logging.getLogger(__name__)

_BAD_CREDENTIALS = "Invalid username or password"


async def signup(
    session: AsyncSession,
    settings: Settings,
    username: str,
    password: str,
) -> None:
    """Create a user. No token is issued; the caller signs in separately."""
    if await get_user_by_username(session, username) is not None:
        raise Conflict("User already exists")

    password_hash = hash_password(password, rounds=settings.bcrypt_rounds)
    try:
        user = await create_user(session, username, password_hash)
    except IntegrityError:
        # Lost a race with a concurrent signup for the same name.
        await session.rollback()
        raise Conflict("User already exists")

    logger.info("Registered user %s (%s)", username, user.user_id)


async def signin(
    session: AsyncSession,
    settings: Settings,
    username: str,
    password: str,
) -> str:
    """Return a signed token, or raise ``Unauthorized`` for any bad credential."""
    user = await get_user_by_username(session, username)

    if user is None or not verify_password(password, user.password_hash):
        raise Unauthorized(_BAD_CREDENTIALS)

    token = create_token(
        str(user.user_id),
        settings.jwt_secret,
        expiry_seconds=settings.jwt_expiry_seconds,
    )
    logger.info("Login: %s (%s)", user.username, user.user_id)
    return token
