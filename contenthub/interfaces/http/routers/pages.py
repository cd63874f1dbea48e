"""Server-rendered listing and public content pages."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, assert_never

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse
from sqlalchemy.ext.asyncio import AsyncSession

from contenthub.interfaces.http.deps import (
    get_asset_service,
    get_content_service,
    get_db_session,
    get_renderer,
)
from contenthub.modules.assets import AssetService
from contenthub.modules.contents import Content, ContentService
from contenthub.rendering import AssetRef, ContentKind, DocumentRenderer, RenderedDocument

logger = logging.getLogger(__name__)

router = APIRouter()


@dataclass(slots=True)
class ContentCard:
    content: Content
    document: Optional[RenderedDocument] = None


class _AssetSnapshots:
    """Per-request cache of each owner's asset list."""

    def __init__(self, service: AssetService) -> None:
        self._service = service
        self._refs: dict[str, list[AssetRef]] = {}

    async def for_owner(self, owner_id: str) -> list[AssetRef]:
        if owner_id not in self._refs:
            self._refs[owner_id] = await self._service.asset_refs(owner_id)
        return self._refs[owner_id]


def _templates(request: Request):
    return request.app.state.templates


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def index_page(
    request: Request,
    subject: Optional[str] = None,
    content_service: ContentService = Depends(get_content_service),
    asset_service: AssetService = Depends(get_asset_service),
    renderer: DocumentRenderer = Depends(get_renderer),
):
    snapshots = _AssetSnapshots(asset_service)
    cards: list[ContentCard] = []
    for content in await content_service.list_published(subject_slug=subject):
        card = ContentCard(content=content)
        if content.kind is ContentKind.CODE and not content.bundle.is_empty():
            card.document = renderer.card(content.bundle, await snapshots.for_owner(content.owner_id))
        cards.append(card)

    return _templates(request).TemplateResponse(
        request,
        "index.html",
        {
            "cards": cards,
            "subjects": await content_service.list_subjects(),
            "active_subject": subject,
        },
    )


@router.get("/{subject_slug}/{slug}", response_class=HTMLResponse, include_in_schema=False)
async def content_page(
    request: Request,
    subject_slug: str,
    slug: str,
    content_service: ContentService = Depends(get_content_service),
    asset_service: AssetService = Depends(get_asset_service),
    renderer: DocumentRenderer = Depends(get_renderer),
    db: AsyncSession = Depends(get_db_session),
):
    content = await content_service.get_published(subject_slug, slug)
    if content is None:
        return _templates(request).TemplateResponse(
            request,
            "not_found.html",
            {},
            status_code=status.HTTP_404_NOT_FOUND,
        )

    await content_service.record_view(content)
    await db.commit()
    logger.debug("Serving %s (%s, %d views)", content.path, content.kind.value, content.views)

    document: Optional[RenderedDocument] = None
    kind = content.kind
    if kind is ContentKind.CODE:
        # the owner's asset list is fetched fresh for every page view
        assets = await asset_service.asset_refs(content.owner_id)
        document = renderer.publish(content.bundle, assets, title=content.title)
        viewer = "sandbox"
    elif kind is ContentKind.PDF:
        viewer = "pdf"
    elif kind is ContentKind.IMAGE:
        viewer = "image"
    elif kind is ContentKind.DOCUMENT:
        viewer = "download"
    else:
        assert_never(kind)

    return _templates(request).TemplateResponse(
        request,
        "content.html",
        {"content": content, "document": document, "viewer": viewer},
    )
