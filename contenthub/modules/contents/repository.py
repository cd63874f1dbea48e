"""Repository protocol for content persistence."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Protocol, Sequence

from contenthub.rendering import ContentKind

from .models import Content, SubjectSummary


class ContentRepository(Protocol):
    async def create(self, **values: Any) -> Content:
        ...

    async def get_by_id(self, content_id: str) -> Content | None:
        ...

    async def get_by_slugs(self, subject_slug: str, slug: str, *, published_only: bool = True) -> Content | None:
        ...

    async def slug_exists(self, subject_slug: str, slug: str, *, exclude_id: str | None = None) -> bool:
        ...

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
        ...

    async def update(self, content_id: str, **values: Any) -> Content:
        ...

    async def increment_views(self, content_id: str) -> None:
        ...

    async def delete(self, content_id: str) -> None:
        ...

    def after_commit(self, callback: Callable[[], None]) -> None:
        ...

    async def count(self, *, published: bool | None = None) -> int:
        ...

    async def total_views(self) -> int:
        ...

    async def subject_summaries(self, *, published_only: bool = False) -> list[SubjectSummary]:
        ...
