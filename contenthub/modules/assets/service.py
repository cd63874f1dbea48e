"""Asset service handling upload storage and per-owner lookup."""

from __future__ import annotations

import logging
import mimetypes
import re
from dataclasses import dataclass
from functools import partial

from fastapi import UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from contenthub.infrastructure.database.repositories.asset_repository import SqlAssetRepository
from contenthub.infrastructure.storage import MediaStorage, sanitize_filename
from contenthub.rendering import AssetRef

from .exceptions import AssetNotFoundError, AssetPermissionError
from .models import Asset
from .repository import AssetRepository

logger = logging.getLogger(__name__)

ASSET_NAMESPACE = "assets"
DEFAULT_FOLDER = "general"


def asset_slug(file_name: str) -> str:
    slug = re.sub(r"[^a-z0-9.]+", "-", file_name.lower())
    slug = re.sub(r"-*\.-*", ".", slug)
    return slug.strip("-")


def guess_mime_type(file_name: str, declared: str | None = None) -> str:
    guessed, _ = mimetypes.guess_type(file_name)
    return guessed or declared or "application/octet-stream"


@dataclass(slots=True)
class AssetService:
    repository: AssetRepository
    storage: MediaStorage
    max_bytes: int

    @classmethod
    def with_session(cls, session: AsyncSession, storage: MediaStorage, max_bytes: int) -> "AssetService":
        return cls(SqlAssetRepository(session), storage, max_bytes)

    async def store_upload(self, owner_id: str, upload: UploadFile, folder: str | None = None) -> Asset:
        file_name = sanitize_filename(upload.filename) or "asset"
        stored = await self.storage.save_upload(
            upload,
            namespace=ASSET_NAMESPACE,
            owner_id=owner_id,
            file_name=file_name,
            max_bytes=self.max_bytes,
        )
        try:
            asset = await self.repository.create(
                owner_id=owner_id,
                name=file_name,
                slug=asset_slug(file_name),
                url=stored.url,
                mime_type=guess_mime_type(file_name, upload.content_type),
                size_bytes=stored.size_bytes,
                checksum_sha256=stored.checksum_sha256,
                folder=(folder or "").strip() or DEFAULT_FOLDER,
                storage_path=str(stored.path),
            )
        except Exception:
            self.storage.delete(stored.path)
            raise
        logger.info("Stored asset %s (%d bytes) for %s", asset.name, asset.size_bytes, owner_id)
        return asset

    async def list_assets(self, owner_id: str, folder: str | None = None) -> list[Asset]:
        return list(await self.repository.list_by_owner(owner_id, folder=folder))

    async def asset_refs(self, owner_id: str) -> list[AssetRef]:
        """Snapshot of an owner's assets for resolution, oldest first.

        When two uploads share a name the later one comes last and wins.
        """
        assets = await self.repository.list_by_owner(owner_id, newest_first=False)
        return [asset.to_ref() for asset in assets]

    async def delete_asset(self, asset_id: str, owner_id: str) -> None:
        asset = await self.repository.get_by_id(asset_id)
        if asset is None:
            raise AssetNotFoundError(asset_id)
        if asset.owner_id != owner_id:
            raise AssetPermissionError(asset_id)
        await self.repository.delete(asset_id)
        self.repository.after_commit(partial(self.storage.delete, asset.storage_path))
        logger.info("Deleted asset %s for %s", asset.name, owner_id)
