"""SQLAlchemy ORM models."""
import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from contenthub.infrastructure.database.base import Base


def generate_uuid() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Account(Base):
    __tablename__ = "accounts"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    username = Column(String(50), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(20), default="user")
    is_active = Column(Boolean, default=True)
    email = Column(String(100), unique=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
    last_login_at = Column(DateTime(timezone=True))

    contents = relationship("Content", back_populates="owner", cascade="all, delete-orphan")
    assets = relationship("Asset", back_populates="owner", cascade="all, delete-orphan")


class Content(Base):
    __tablename__ = "contents"
    __table_args__ = (UniqueConstraint("subject_slug", "slug", name="uq_contents_subject_slug_slug"),)

    id = Column(String(36), primary_key=True, default=generate_uuid)
    owner_id = Column(String(36), ForeignKey("accounts.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    slug = Column(String(255), nullable=False, index=True)
    subject = Column(String(150), nullable=False)
    subject_slug = Column(String(150), nullable=False, index=True)
    kind = Column(String(20), nullable=False, default="CODE")
    markup = Column(Text, nullable=False, default="")
    styles = Column(Text, nullable=False, default="")
    script = Column(Text, nullable=False, default="")
    file_url = Column(String(1024))
    file_name = Column(String(255))
    file_size = Column(Integer)
    mime_type = Column(String(100))
    storage_path = Column(String(1024))
    description = Column(Text)
    views = Column(Integer, nullable=False, default=0)
    is_published = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=utcnow)

    owner = relationship("Account", back_populates="contents")


class Asset(Base):
    __tablename__ = "assets"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    owner_id = Column(String(36), ForeignKey("accounts.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    slug = Column(String(255), nullable=False)
    url = Column(String(1024), nullable=False)
    mime_type = Column(String(100))
    size_bytes = Column(Integer, nullable=False)
    checksum_sha256 = Column(String(64), nullable=False)
    folder = Column(String(100), nullable=False, default="general")
    storage_path = Column(String(1024), nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    owner = relationship("Account", back_populates="assets")
