"""SQLAlchemy implementation of the asset repository."""

from __future__ import annotations

from typing import Callable, Sequence

from sqlalchemy import delete, event, select
from sqlalchemy.ext.asyncio import AsyncSession

from contenthub.db.models import Asset as AssetModel
from contenthub.modules.assets.models import Asset


class SqlAssetRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(
        self,
        *,
        owner_id: str,
        name: str,
        slug: str,
        url: str,
        mime_type: str | None,
        size_bytes: int,
        checksum_sha256: str,
        folder: str,
        storage_path: str,
    ) -> Asset:
        model = AssetModel(
            owner_id=owner_id,
            name=name,
            slug=slug,
            url=url,
            mime_type=mime_type,
            size_bytes=size_bytes,
            checksum_sha256=checksum_sha256,
            folder=folder,
            storage_path=storage_path,
        )
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_domain(model)

    async def get_by_id(self, asset_id: str) -> Asset | None:
        stmt = select(AssetModel).where(AssetModel.id == asset_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def list_by_owner(
        self,
        owner_id: str,
        *,
        folder: str | None = None,
        newest_first: bool = True,
    ) -> Sequence[Asset]:
        stmt = select(AssetModel).where(AssetModel.owner_id == owner_id)
        if folder:
            stmt = stmt.where(AssetModel.folder == folder)
        if newest_first:
            stmt = stmt.order_by(AssetModel.created_at.desc(), AssetModel.id.desc())
        else:
            stmt = stmt.order_by(AssetModel.created_at.asc(), AssetModel.id.asc())
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def delete(self, asset_id: str) -> None:
        await self._session.execute(delete(AssetModel).where(AssetModel.id == asset_id))

    def after_commit(self, callback: Callable[[], None]) -> None:
        """Run `callback` once the surrounding transaction commits."""
        event.listen(self._session.sync_session, "after_commit", lambda session: callback(), once=True)

    @staticmethod
    def _to_domain(model: AssetModel) -> Asset:
        return Asset(
            id=str(model.id),
            owner_id=model.owner_id,
            name=model.name,
            slug=model.slug,
            url=model.url,
            mime_type=model.mime_type,
            size_bytes=model.size_bytes,
            checksum_sha256=model.checksum_sha256,
            folder=model.folder,
            storage_path=model.storage_path,
            created_at=model.created_at,
        )
