"""
Pydantic schemas for requests and responses.
"""

from __future__ import annotations

from typing import Any, List, Literal, Optional

from pydantic import AnyUrl, BaseModel, Field, TypeAdapter, field_validator

from database.models import Content

ContentType = Literal["image", "video", "article", "audio"]

_url_adapter = TypeAdapter(AnyUrl)


# ═══════════════════════════════════════════════════════════════════════════════
# Auth
# ═══════════════════════════════════════════════════════════════════════════════


class Credentials(BaseModel):
    username: str = Field(..., min_length=3, max_length=10)
    password: str = Field(..., min_length=8, max_length=20)


class TokenResponse(BaseModel):
    token: str


class MessageResponse(BaseModel):
    message: str


# ═══════════════════════════════════════════════════════════════════════════════
# Content
# ═══════════════════════════════════════════════════════════════════════════════


class ContentCreateRequest(BaseModel):
    link: str
    title: str = Field(..., min_length=1, max_length=100)
    type: ContentType
    # Accepted for compatibility; never persisted.
    tags: Optional[List[str]] = None

    @field_validator("link")
    @classmethod
    def _link_is_url(cls, value: str) -> str:
        # Validate the URL but keep the submitted spelling.
        _url_adapter.validate_python(value)
        return value


class ContentDeleteRequest(BaseModel):
    contentID: str


class ContentOwner(BaseModel):
    id: str
    username: str


class ContentItem(BaseModel):
    id: str
    link: str
    type: str
    title: str
    tags: List[str] = Field(default_factory=list)
    user: ContentOwner

    @classmethod
    def from_row(cls, row: Content) -> "ContentItem":
        return cls(
            id=str(row.content_id),
            link=row.link,
            type=row.type,
            title=row.title,
            tags=[tag.title for tag in row.tags],
            user=ContentOwner(id=str(row.user.user_id), username=row.user.username),
        )


class ContentListResponse(BaseModel):
    content: List[ContentItem] = Field(default_factory=list)


# ═══════════════════════════════════════════════════════════════════════════════
# Sharing
# ═══════════════════════════════════════════════════════════════════════════════


class ShareRequest(BaseModel):
    share: Any = False

    @field_validator("share")
    @classmethod
    def _coerce_share(cls, value: Any) -> bool:
        # Only ``true`` / ``"true"`` enable; anything else, null included, disables.
        return value is True or value == "true"


class ShareResponse(BaseModel):
    message: str
    hash: Optional[str] = None


class SharedBrainResponse(BaseModel):
    content: List[ContentItem] = Field(default_factory=list)
    username: str
