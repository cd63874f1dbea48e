"""PDF, image and other file uploads published as content."""
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession

from contenthub.infrastructure.storage import EmptyUploadError, UploadTooLargeError
from contenthub.interfaces.http.deps import get_content_service, get_current_account, get_db_session
from contenthub.modules.accounts import Account
from contenthub.modules.contents import ContentService, ContentValidationError
from contenthub.schemas import ContentListResponse, ContentResponse

router = APIRouter()


@router.get("", response_model=ContentListResponse)
async def list_documents(
    account: Account = Depends(get_current_account),
    service: ContentService = Depends(get_content_service),
) -> ContentListResponse:
    documents = await service.list_for_owner(account.id, documents_only=True)
    return ContentListResponse(
        total=len(documents),
        contents=[ContentResponse.from_domain(document) for document in documents],
    )


@router.post("", response_model=ContentResponse, status_code=status.HTTP_201_CREATED)
async def upload_document(
    file: UploadFile = File(...),
    title: str = Form(...),
    subject: str = Form(...),
    description: Optional[str] = Form(None),
    is_published: bool = Form(True),
    account: Account = Depends(get_current_account),
    service: ContentService = Depends(get_content_service),
    db: AsyncSession = Depends(get_db_session),
) -> ContentResponse:
    try:
        document = await service.create_document(
            account.id,
            file,
            title=title,
            subject=subject,
            description=description,
            is_published=is_published,
        )
    except (ContentValidationError, EmptyUploadError) as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except UploadTooLargeError as exc:
        raise HTTPException(status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail=str(exc)) from exc
    await db.commit()
    return ContentResponse.from_domain(document)
