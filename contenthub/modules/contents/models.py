"""Domain models for published projects and documents."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from contenthub.rendering import ContentKind, SourceBundle


@dataclass(slots=True)
class Content:
    id: str
    owner_id: str
    title: str
    slug: str
    subject: str
    subject_slug: str
    kind: ContentKind
    markup: str = ""
    styles: str = ""
    script: str = ""
    file_url: Optional[str] = None
    file_name: Optional[str] = None
    file_size: Optional[int] = None
    mime_type: Optional[str] = None
    storage_path: Optional[str] = field(default=None, repr=False)
    description: Optional[str] = None
    views: int = 0
    is_published: bool = True
    owner_username: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def bundle(self) -> SourceBundle:
        return SourceBundle.of(self.markup, self.styles, self.script)

    @property
    def path(self) -> str:
        return f"/{self.subject_slug}/{self.slug}"


@dataclass(slots=True)
class ContentCreateInput:
    title: str
    subject: str
    markup: Optional[str] = None
    styles: Optional[str] = None
    script: Optional[str] = None
    is_published: bool = True
    description: Optional[str] = None


@dataclass(slots=True)
class ContentUpdateInput:
    title: Optional[str] = None
    subject: Optional[str] = None
    markup: Optional[str] = None
    styles: Optional[str] = None
    script: Optional[str] = None
    is_published: Optional[bool] = None
    description: Optional[str] = None


@dataclass(slots=True)
class SubjectSummary:
    name: str
    slug: str
    count: int
    views: int


@dataclass(slots=True)
class ContentStats:
    total_accounts: int
    total_contents: int
    total_views: int
    published_count: int
    draft_count: int
    recent_contents: list[Content]
    top_contents: list[Content]
    subjects: list[SubjectSummary]
