"""
JWT-style token creation and verification.

Tokens are base64-encoded JSON payloads signed with HMAC-SHA256.
The payload carries the user ``id`` and, only when an expiry is
configured, an ``exp`` timestamp.
"""

from __future__ import annotations

import binascii
import hashlib
import hmac
import json
import time
from base64 import b64decode, b64encode
from typing import Optional


class InvalidToken(ValueError):
    """Raised for any token that fails decoding or signature checks."""


def _sign(raw: bytes, secret: str) -> str:
    return hmac.new(secret.encode(), raw, hashlib.sha256).hexdigest()


def create_token(user_id: str, secret: str, expiry_seconds: int = 0) -> str:
    """Create a signed token containing ``id`` (and ``exp`` if expiring)."""
    payload = {"id": user_id}
    if expiry_seconds > 0:
        payload["exp"] = int(time.time()) + expiry_seconds
    raw = json.dumps(payload).encode()
    return b64encode(raw).decode() + "." + _sign(raw, secret)


def verify_token(token: str, secret: str) -> Optional[str]:
    """
    Verify token and return the embedded user id.

    Returns ``None`` when the signature is valid but the payload has no
    ``id``. Raises ``InvalidToken`` on bad format, bad signature or
    expiry.
    """
    parts = token.split(".", 1)
    if len(parts) != 2:
        raise InvalidToken("bad format")
    try:
        raw = b64decode(parts[0], validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidToken("bad encoding") from exc
    if not hmac.compare_digest(parts[1].encode(), _sign(raw, secret).encode()):
        raise InvalidToken("bad signature")
    try:
        payload = json.loads(raw)
    except ValueError as exc:
        raise InvalidToken("bad payload") from exc
    if not isinstance(payload, dict):
        raise InvalidToken("bad payload")
    exp = payload.get("exp")
    if exp is not None and exp < time.time():
        raise InvalidToken("token expired")
    user_id = payload.get("id")
    return str(user_id) if user_id else None
