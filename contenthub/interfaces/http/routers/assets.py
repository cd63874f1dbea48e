"""Upload, list and delete the current account's assets."""
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession

from contenthub.infrastructure.storage import EmptyUploadError, UploadTooLargeError
from contenthub.interfaces.http.deps import get_asset_service, get_current_account, get_db_session
from contenthub.modules.accounts import Account
from contenthub.modules.assets import AssetNotFoundError, AssetPermissionError, AssetService
from contenthub.schemas import AssetListResponse, AssetResponse, MessageResponse

router = APIRouter()


@router.get("", response_model=AssetListResponse)
async def list_assets(
    folder: Optional[str] = None,
    account: Account = Depends(get_current_account),
    service: AssetService = Depends(get_asset_service),
) -> AssetListResponse:
    assets = await service.list_assets(account.id, folder=folder)
    return AssetListResponse(assets=[AssetResponse.model_validate(asset) for asset in assets])


@router.post("", response_model=AssetResponse, status_code=status.HTTP_201_CREATED)
async def upload_asset(
    file: UploadFile = File(...),
    folder: str = Form("general"),
    account: Account = Depends(get_current_account),
    service: AssetService = Depends(get_asset_service),
    db: AsyncSession = Depends(get_db_session),
) -> AssetResponse:
    try:
        asset = await service.store_upload(account.id, file, folder)
    except EmptyUploadError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except UploadTooLargeError as exc:
        raise HTTPException(status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail=str(exc)) from exc
    await db.commit()
    return AssetResponse.model_validate(asset)


@router.delete("/{asset_id}", response_model=MessageResponse)
async def delete_asset(
    asset_id: str,
    account: Account = Depends(get_current_account),
    service: AssetService = Depends(get_asset_service),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    try:
        await service.delete_asset(asset_id, account.id)
    except AssetNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Asset not found") from exc
    except AssetPermissionError as exc:
        # other owners' assets are reported as missing
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Asset not found") from exc
    await db.commit()
    return MessageResponse(message="Asset deleted")
