"""
Service-level error taxonomy.

Services raise these; ``api.errors`` turns them into JSON responses with
the matching status code.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional


class ServiceError(Exception):
    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message}


class ValidationError(ServiceError):
    """Malformed input. Carries the per-field issues."""

    status_code = 400
    default_message = "Invalid inputs"

    def __init__(
        self,
        message: Optional[str] = None,
        errors: Optional[List[Dict[str, Any]]] = None,
    ) -> None:
        super().__init__(message)
        self.errors = errors or []

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message, "errors": self.errors}


class Unauthorized(ServiceError):
    status_code = 401
    default_message = "Invalid token"


class Forbidden(ServiceError):
    status_code = 403
    default_message = "You are not signed in"


class NotFound(ServiceError):
    status_code = 404
    default_message = "Not found"


class Conflict(ServiceError):
    status_code = 409
    default_message = "Already exists"


class InternalError(ServiceError):
    pass
