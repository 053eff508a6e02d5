"""
Password hashing and verification.

Passwords are SHA-256 digested and base64-encoded before bcrypt sees
them, so every input reaches bcrypt as 44 ASCII bytes: multi-byte
passwords never hit bcrypt's 72-byte limit and NUL bytes cannot
truncate the secret.
"""

from __future__ import annotations

import base64
import hashlib

import bcrypt


def _prehash(password: str) -> bytes:
    return base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest())


def hash_password(password: str, rounds: int = 12) -> str:
    """Hash a password with bcrypt (auto-salted, ``rounds`` work factor)."""
    return bcrypt.hashpw(_prehash(password), bcrypt.gensalt(rounds=rounds)).decode()


def verify_password(password: str, password_hash: str) -> bool:
    """Check ``password`` against a hash made by ``hash_password``."""
    try:
        return bcrypt.checkpw(_prehash(password), password_hash.encode())
    except ValueError:
        # Stored value is not a bcrypt hash.
        return False
