"""Domain service providers bound to the request's database session."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from contenthub.core.container import ApplicationContainer
from contenthub.modules.accounts import AccountService
from contenthub.modules.assets import AssetService
from contenthub.modules.contents import ContentService

from .container import get_container, get_db_session


def get_account_service(db: AsyncSession = Depends(get_db_session)) -> AccountService:
    return AccountService.with_session(db)


def get_asset_service(
    db: AsyncSession = Depends(get_db_session),
    container: ApplicationContainer = Depends(get_container),
) -> AssetService:
    return AssetService.with_session(db, container.storage, container.settings.storage.max_asset_bytes)


def get_content_service(
    db: AsyncSession = Depends(get_db_session),
    container: ApplicationContainer = Depends(get_container),
) -> ContentService:
    return ContentService.with_session(db, container.storage, container.settings.storage.max_document_bytes)
