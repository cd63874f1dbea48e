"""Pydantic schemas used across the project."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from contenthub.rendering import ContentKind


class RegisterRequest(BaseModel):
    username: str = Field(..., min_length=3, max_length=50)
    password: str = Field(..., min_length=6)
    email: Optional[str] = Field(default=None, max_length=100)


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=3, max_length=50)
    password: str = Field(..., min_length=6)


class AccountResponse(BaseModel):
    id: str
    username: str
    role: str
    email: Optional[str] = None
    is_active: bool
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    account: AccountResponse


class SourceBundlePayload(BaseModel):
    """The three editor buffers; missing fields mean empty."""

    html_code: Optional[str] = None
    css_code: Optional[str] = None
    js_code: Optional[str] = None


class ContentCreate(SourceBundlePayload):
    title: str = ""
    subject: str = ""
    description: Optional[str] = None
    is_published: bool = True


class ContentUpdate(SourceBundlePayload):
    title: Optional[str] = None
    subject: Optional[str] = None
    description: Optional[str] = None
    is_published: Optional[bool] = None


class ContentResponse(BaseModel):
    id: str
    owner_id: str
    owner_username: Optional[str] = None
    title: str
    slug: str
    subject: str
    subject_slug: str
    kind: ContentKind
    html_code: str = ""
    css_code: str = ""
    js_code: str = ""
    file_url: Optional[str] = None
    file_name: Optional[str] = None
    file_size: Optional[int] = None
    mime_type: Optional[str] = None
    description: Optional[str] = None
    views: int = 0
    is_published: bool
    path: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, content) -> "ContentResponse":
        return cls(
            id=content.id,
            owner_id=content.owner_id,
            owner_username=content.owner_username,
            title=content.title,
            slug=content.slug,
            subject=content.subject,
            subject_slug=content.subject_slug,
            kind=content.kind,
            html_code=content.markup,
            css_code=content.styles,
            js_code=content.script,
            file_url=content.file_url,
            file_name=content.file_name,
            file_size=content.file_size,
            mime_type=content.mime_type,
            description=content.description,
            views=content.views,
            is_published=content.is_published,
            path=content.path,
            created_at=content.created_at,
            updated_at=content.updated_at,
        )


class ContentListResponse(BaseModel):
    total: int
    contents: list[ContentResponse]


class SubjectResponse(BaseModel):
    name: str
    slug: str
    count: int
    views: int

    model_config = ConfigDict(from_attributes=True)


class AssetResponse(BaseModel):
    id: str
    name: str
    slug: str
    url: str
    mime_type: Optional[str] = None
    size_bytes: int
    checksum_sha256: str
    folder: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class AssetListResponse(BaseModel):
    assets: list[AssetResponse]


class AdminStatsResponse(BaseModel):
    total_accounts: int
    total_contents: int
    total_views: int
    published_count: int
    draft_count: int
    recent_contents: list[ContentResponse]
    top_contents: list[ContentResponse]
    subjects: list[SubjectResponse]


class MessageResponse(BaseModel):
    message: str
