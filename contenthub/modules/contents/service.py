"""Application service for code projects and uploaded documents."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import partial
from typing import Optional

from fastapi import UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from contenthub.infrastructure.database.repositories.content_repository import SqlContentRepository
from contenthub.infrastructure.storage import MediaStorage, sanitize_filename
from contenthub.modules.accounts.models import Account
from contenthub.modules.assets.service import guess_mime_type
from contenthub.rendering import ContentKind

from .exceptions import ContentNotFoundError, ContentPermissionError, ContentValidationError
from .models import Content, ContentCreateInput, ContentStats, ContentUpdateInput, SubjectSummary
from .repository import ContentRepository
from .slugs import disambiguate, slugify, slugify_subject

logger = logging.getLogger(__name__)

DOCUMENT_NAMESPACE = "documents"
DOCUMENT_KINDS = (ContentKind.PDF, ContentKind.DOCUMENT, ContentKind.IMAGE)


def _require_text(value: Optional[str], field_name: str) -> str:
    text = (value or "").strip()
    if not text:
        raise ContentValidationError(f"{field_name} is required")
    return text


@dataclass(slots=True)
class ContentService:
    repository: ContentRepository
    storage: Optional[MediaStorage] = None
    max_document_bytes: int = 50 * 1024 * 1024

    @classmethod
    def with_session(
        cls,
        session: AsyncSession,
        storage: Optional[MediaStorage] = None,
        max_document_bytes: int = 50 * 1024 * 1024,
    ) -> "ContentService":
        return cls(SqlContentRepository(session), storage, max_document_bytes)

    async def _unique_slug(self, subject_slug: str, slug: str, exclude_id: str | None = None) -> str:
        if await self.repository.slug_exists(subject_slug, slug, exclude_id=exclude_id):
            return disambiguate(slug)
        return slug

    async def create_content(self, owner_id: str, payload: ContentCreateInput) -> Content:
        title = _require_text(payload.title, "title")
        subject = _require_text(payload.subject, "subject")
        subject_slug = slugify_subject(subject)
        slug = await self._unique_slug(subject_slug, slugify(title))

        content = await self.repository.create(
            owner_id=owner_id,
            title=title,
            slug=slug,
            subject=subject,
            subject_slug=subject_slug,
            kind=ContentKind.CODE.value,
            markup=payload.markup or "",
            styles=payload.styles or "",
            script=payload.script or "",
            description=payload.description,
            is_published=payload.is_published,
        )
        logger.info("Created content %s at %s", content.id, content.path)
        return content

    async def create_document(
        self,
        owner_id: str,
        upload: UploadFile,
        *,
        title: str,
        subject: str,
        description: Optional[str] = None,
        is_published: bool = True,
    ) -> Content:
        if self.storage is None:
            raise RuntimeError("document uploads need a media storage")
        title = _require_text(title, "title")
        subject = _require_text(subject, "subject")
        file_name = sanitize_filename(upload.filename)
        if not file_name:
            raise ContentValidationError("file name is required")

        mime_type = guess_mime_type(file_name, upload.content_type)
        subject_slug = slugify_subject(subject)
        slug = await self._unique_slug(subject_slug, slugify(title))
        stored = await self.storage.save_upload(
            upload,
            namespace=DOCUMENT_NAMESPACE,
            owner_id=owner_id,
            file_name=file_name,
            max_bytes=self.max_document_bytes,
        )

        try:
            content = await self.repository.create(
                owner_id=owner_id,
                title=title,
                slug=slug,
                subject=subject,
                subject_slug=subject_slug,
                kind=ContentKind.for_mime_type(mime_type).value,
                file_url=stored.url,
                file_name=file_name,
                file_size=stored.size_bytes,
                mime_type=mime_type,
                storage_path=str(stored.path),
                description=description,
                is_published=is_published,
            )
        except Exception:
            self.storage.delete(stored.path)
            raise
        logger.info("Uploaded %s document %s at %s", content.kind.value, content.id, content.path)
        return content

    async def get_content(self, content_id: str) -> Content:
        content = await self.repository.get_by_id(content_id)
        if content is None:
            raise ContentNotFoundError(content_id)
        return content

    async def get_published(self, subject_slug: str, slug: str) -> Content | None:
        return await self.repository.get_by_slugs(subject_slug, slug, published_only=True)

    async def list_published(self, subject_slug: str | None = None, owner_id: str | None = None) -> list[Content]:
        return list(
            await self.repository.list_contents(
                published_only=True,
                subject_slug=subject_slug,
                owner_id=owner_id,
            )
        )

    async def list_for_owner(self, owner_id: str, *, documents_only: bool = False) -> list[Content]:
        kinds = DOCUMENT_KINDS if documents_only else None
        return list(await self.repository.list_contents(owner_id=owner_id, kinds=kinds))

    async def list_all(self) -> list[Content]:
        return list(await self.repository.list_contents())

    async def list_subjects(self) -> list[SubjectSummary]:
        return await self.repository.subject_summaries(published_only=True)

    async def update_content(self, content_id: str, actor: Account, payload: ContentUpdateInput) -> Content:
        current = await self.get_content(content_id)
        self._ensure_can_edit(current, actor)

        values: dict[str, object] = {}
        title = (payload.title or "").strip() or current.title
        subject = (payload.subject or "").strip() or current.subject
        subject_slug = slugify_subject(subject)
        if title != current.title:
            values["title"] = title
        if subject != current.subject:
            values["subject"] = subject
            values["subject_slug"] = subject_slug
        # the stored slug may carry a clash suffix; keep it unless the route inputs moved
        if slugify(title) != slugify(current.title) or subject_slug != current.subject_slug:
            values["slug"] = await self._unique_slug(subject_slug, slugify(title), exclude_id=current.id)
        for field_name in ("markup", "styles", "script", "description", "is_published"):
            value = getattr(payload, field_name)
            if value is not None:
                values[field_name] = value

        if not values:
            return current
        updated = await self.repository.update(content_id, **values)
        logger.info("Updated content %s (%s)", content_id, ", ".join(sorted(values)))
        return updated

    async def delete_content(self, content_id: str, actor: Account) -> None:
        content = await self.get_content(content_id)
        self._ensure_can_edit(content, actor)
        await self.repository.delete(content_id)
        if content.storage_path and self.storage is not None:
            self.repository.after_commit(partial(self.storage.delete, content.storage_path))
        logger.info("Deleted content %s", content_id)

    async def record_view(self, content: Content) -> Content:
        await self.repository.increment_views(content.id)
        content.views += 1
        return content

    @staticmethod
    def _ensure_can_edit(content: Content, actor: Account) -> None:
        if content.owner_id != actor.id and not actor.is_admin():
            raise ContentPermissionError(content.id)

    async def collect_stats(self, total_accounts: int) -> ContentStats:
        total_contents = await self.repository.count()
        published = await self.repository.count(published=True)
        return ContentStats(
            total_accounts=total_accounts,
            total_contents=total_contents,
            total_views=await self.repository.total_views(),
            published_count=published,
            draft_count=max(total_contents - published, 0),
            recent_contents=list(await self.repository.list_contents(limit=5)),
            top_contents=list(await self.repository.list_contents(order_by_views=True, limit=5)),
            subjects=await self.repository.subject_summaries(),
        )
