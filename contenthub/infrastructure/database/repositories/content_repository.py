"""SQLAlchemy implementation of the content repository."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Sequence

from sqlalchemy import delete, event, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from contenthub.db.models import Content as ContentModel
from contenthub.modules.contents.exceptions import ContentNotFoundError
from contenthub.modules.contents.models import Content, SubjectSummary
from contenthub.rendering import ContentKind


class SqlContentRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    def _select(self):
        return select(ContentModel).options(selectinload(ContentModel.owner))

    async def create(self, **values: Any) -> Content:
        model = ContentModel(**values)
        self._session.add(model)
        await self._session.flush()
        return await self._reload(model.id)

    async def get_by_id(self, content_id: str) -> Content | None:
        stmt = self._select().where(ContentModel.id == content_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def get_by_slugs(self, subject_slug: str, slug: str, *, published_only: bool = True) -> Content | None:
        stmt = self._select().where(
            ContentModel.subject_slug == subject_slug,
            ContentModel.slug == slug,
        )
        if published_only:
            stmt = stmt.where(ContentModel.is_published.is_(True))
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def slug_exists(self, subject_slug: str, slug: str, *, exclude_id: str | None = None) -> bool:
        stmt = select(func.count()).select_from(ContentModel).where(
            ContentModel.subject_slug == subject_slug,
            ContentModel.slug == slug,
        )
        if exclude_id is not None:
            stmt = stmt.where(ContentModel.id != exclude_id)
        result = await self._session.execute(stmt)
        return result.scalar_one() > 0

    async def list_contents(
        self,
        *,
        published_only: bool = False,
        subject_slug: str | None = None,
        owner_id: str | None = None,
        kinds: Iterable[ContentKind] | None = None,
        order_by_views: bool = False,
        limit: int | None = None,
    ) -> Sequence[Content]:
        stmt = self._select()
        if published_only:
            stmt = stmt.where(ContentModel.is_published.is_(True))
        if subject_slug:
            stmt = stmt.where(ContentModel.subject_slug == subject_slug)
        if owner_id:
            stmt = stmt.where(ContentModel.owner_id == owner_id)
        if kinds is not None:
            stmt = stmt.where(ContentModel.kind.in_([kind.value for kind in kinds]))
        if order_by_views:
            stmt = stmt.order_by(ContentModel.views.desc(), ContentModel.created_at.desc())
        else:
            stmt = stmt.order_by(ContentModel.created_at.desc())
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def update(self, content_id: str, **values: Any) -> Content:
        stmt = select(ContentModel).where(ContentModel.id == content_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        if model is None:
            raise ContentNotFoundError(content_id)
        for key, value in values.items():
            setattr(model, key, value)
        await self._session.flush()
        return await self._reload(content_id)

    async def increment_views(self, content_id: str) -> None:
        stmt = (
            update(ContentModel)
            .where(ContentModel.id == content_id)
            .values(views=ContentModel.views + 1)
        )
        await self._session.execute(stmt)

    async def delete(self, content_id: str) -> None:
        await self._session.execute(delete(ContentModel).where(ContentModel.id == content_id))

    def after_commit(self, callback: Callable[[], None]) -> None:
        event.listen(self._session.sync_session, "after_commit", lambda session: callback(), once=True)

    async def count(self, *, published: bool | None = None) -> int:
        stmt = select(func.count()).select_from(ContentModel)
        if published is not None:
            stmt = stmt.where(ContentModel.is_published.is_(published))
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def total_views(self) -> int:
        result = await self._session.execute(select(func.coalesce(func.sum(ContentModel.views), 0)))
        return int(result.scalar_one())

    async def subject_summaries(self, *, published_only: bool = False) -> list[SubjectSummary]:
        stmt = select(
            ContentModel.subject_slug,
            func.min(ContentModel.subject),
            func.count(ContentModel.id),
            func.coalesce(func.sum(ContentModel.views), 0),
        ).group_by(ContentModel.subject_slug)
        if published_only:
            stmt = stmt.where(ContentModel.is_published.is_(True))
        result = await self._session.execute(stmt.order_by(ContentModel.subject_slug))
        return [
            SubjectSummary(name=name, slug=slug, count=count, views=int(views))
            for slug, name, count, views in result.all()
        ]

    async def _reload(self, content_id: str) -> Content:
        # populate_existing refreshes the identity-mapped instance after flush
        stmt = self._select().where(ContentModel.id == content_id).execution_options(populate_existing=True)
        result = await self._session.execute(stmt)
        return self._to_domain(result.scalar_one())

    @staticmethod
    def _to_domain(model: ContentModel) -> Content:
        return Content(
            id=str(model.id),
            owner_id=model.owner_id,
            title=model.title,
            slug=model.slug,
            subject=model.subject,
            subject_slug=model.subject_slug,
            kind=ContentKind(model.kind),
            markup=model.markup or "",
            styles=model.styles or "",
            script=model.script or "",
            file_url=model.file_url,
            file_name=model.file_name,
            file_size=model.file_size,
            mime_type=model.mime_type,
            storage_path=model.storage_path,
            description=model.description,
            views=model.views or 0,
            is_published=bool(model.is_published),
            owner_username=model.owner.username if model.owner is not None else None,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
