"""Content CRUD, subject listing and the author preview endpoint."""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import HTMLResponse
from sqlalchemy.ext.asyncio import AsyncSession

from contenthub.interfaces.http.deps import (
    get_asset_service,
    get_content_service,
    get_current_account,
    get_db_session,
    get_renderer,
)
from contenthub.modules.accounts import Account
from contenthub.modules.assets import AssetService
from contenthub.modules.contents import (
    ContentCreateInput,
    ContentNotFoundError,
    ContentPermissionError,
    ContentService,
    ContentUpdateInput,
    ContentValidationError,
)
from contenthub.rendering import DocumentRenderer, SourceBundle
from contenthub.schemas import (
    ContentCreate,
    ContentListResponse,
    ContentResponse,
    ContentUpdate,
    MessageResponse,
    SourceBundlePayload,
    SubjectResponse,
)

router = APIRouter()


def _list_response(contents) -> ContentListResponse:
    return ContentListResponse(
        total=len(contents),
        contents=[ContentResponse.from_domain(content) for content in contents],
    )


@router.get("/contents", response_model=ContentListResponse)
async def list_published_contents(
    subject_slug: Optional[str] = None,
    owner_id: Optional[str] = None,
    service: ContentService = Depends(get_content_service),
) -> ContentListResponse:
    return _list_response(await service.list_published(subject_slug=subject_slug, owner_id=owner_id))


@router.post("/contents", response_model=ContentResponse, status_code=status.HTTP_201_CREATED)
async def create_content(
    payload: ContentCreate,
    account: Account = Depends(get_current_account),
    service: ContentService = Depends(get_content_service),
    db: AsyncSession = Depends(get_db_session),
) -> ContentResponse:
    try:
        content = await service.create_content(
            account.id,
            ContentCreateInput(
                title=payload.title,
                subject=payload.subject,
                markup=payload.html_code,
                styles=payload.css_code,
                script=payload.js_code,
                description=payload.description,
                is_published=payload.is_published,
            ),
        )
    except ContentValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    await db.commit()
    return ContentResponse.from_domain(content)


@router.get("/contents/mine", response_model=ContentListResponse)
async def list_my_contents(
    account: Account = Depends(get_current_account),
    service: ContentService = Depends(get_content_service),
) -> ContentListResponse:
    return _list_response(await service.list_for_owner(account.id))


@router.get("/contents/slug/{subject_slug}/{slug}", response_model=ContentResponse)
async def get_content_by_slug(
    subject_slug: str,
    slug: str,
    service: ContentService = Depends(get_content_service),
) -> ContentResponse:
    content = await service.get_published(subject_slug, slug)
    if content is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Content not found")
    return ContentResponse.from_domain(content)


@router.get("/contents/{content_id}", response_model=ContentResponse)
async def get_content(
    content_id: str,
    service: ContentService = Depends(get_content_service),
) -> ContentResponse:
    try:
        content = await service.get_content(content_id)
    except ContentNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Content not found") from exc
    return ContentResponse.from_domain(content)


@router.put("/contents/{content_id}", response_model=ContentResponse)
async def update_content(
    content_id: str,
    payload: ContentUpdate,
    account: Account = Depends(get_current_account),
    service: ContentService = Depends(get_content_service),
    db: AsyncSession = Depends(get_db_session),
) -> ContentResponse:
    try:
        content = await service.update_content(
            content_id,
            account,
            ContentUpdateInput(
                title=payload.title,
                subject=payload.subject,
                markup=payload.html_code,
                styles=payload.css_code,
                script=payload.js_code,
                description=payload.description,
                is_published=payload.is_published,
            ),
        )
    except ContentNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Content not found") from exc
    except ContentPermissionError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden") from exc
    await db.commit()
    return ContentResponse.from_domain(content)


@router.delete("/contents/{content_id}", response_model=MessageResponse)
async def delete_content(
    content_id: str,
    account: Account = Depends(get_current_account),
    service: ContentService = Depends(get_content_service),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    try:
        await service.delete_content(content_id, account)
    except ContentNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Content not found") from exc
    except ContentPermissionError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden") from exc
    await db.commit()
    return MessageResponse(message="Content deleted")


@router.get("/subjects", response_model=list[SubjectResponse])
async def list_subjects(service: ContentService = Depends(get_content_service)) -> list[SubjectResponse]:
    return [SubjectResponse.model_validate(subject) for subject in await service.list_subjects()]


@router.post("/preview", response_class=HTMLResponse)
async def preview_document(
    payload: SourceBundlePayload,
    account: Account = Depends(get_current_account),
    asset_service: AssetService = Depends(get_asset_service),
    renderer: DocumentRenderer = Depends(get_renderer),
) -> HTMLResponse:
    bundle = SourceBundle.of(payload.html_code, payload.css_code, payload.js_code)
    rendered = renderer.preview(bundle, await asset_service.asset_refs(account.id))
    return HTMLResponse(rendered.html, headers={"X-Sandbox-Flags": rendered.sandbox.attribute})
