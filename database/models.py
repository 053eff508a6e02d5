"""
SQLAlchemy ORM models for users, saved content, tags and share links.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    String,
    Table,
    Text,
    Uuid,
)
from sqlalchemy.orm import DeclarativeBase, relationship

CONTENT_TYPES = ("image", "video", "article", "audio")


class Base(DeclarativeBase):
    pass


content_tags = Table(
    "content_tags",
    Base.metadata,
    Column("content_id", Uuid, ForeignKey("content.content_id", ondelete="CASCADE"), primary_key=True),
    Column("tag_id", Uuid, ForeignKey("tags.tag_id", ondelete="CASCADE"), primary_key=True),
)


class User(Base):
    __tablename__ = "users"

    user_id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    username = Column(String(10), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    contents = relationship("Content", back_populates="user", cascade="all, delete-orphan")
    share_link = relationship("ShareLink", back_populates="user", uselist=False, cascade="all, delete-orphan")


class Tag(Base):
    __tablename__ = "tags"

    tag_id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    title = Column(String(64), unique=True, nullable=False)


class Content(Base):
    __tablename__ = "content"

    content_id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False, index=True)
    link = Column(Text, nullable=False)
    type = Column(String(16), nullable=False)
    title = Column(String(100), nullable=False)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    user = relationship("User", back_populates="contents")
    tags = relationship("Tag", secondary=content_tags, order_by="Tag.title")


class ShareLink(Base):
    __tablename__ = "share_links"

    link_id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    token = Column(String(128), unique=True, nullable=False)
    # One link per user, enforced by the store as well as by find-before-create.
    user_id = Column(Uuid, ForeignKey("users.user_id", ondelete="CASCADE"), unique=True, nullable=False)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    user = relationship("User", back_populates="share_link")
