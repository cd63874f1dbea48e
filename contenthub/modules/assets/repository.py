"""Repository protocol for asset persistence."""

from __future__ import annotations

from typing import Callable, Protocol, Sequence

from .models import Asset


class AssetRepository(Protocol):
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
        ...

    async def get_by_id(self, asset_id: str) -> Asset | None:
        ...

    async def list_by_owner(self, owner_id: str, *, folder: str | None = None, newest_first: bool = True) -> Sequence[Asset]:
        ...

    async def delete(self, asset_id: str) -> None:
        ...

    def after_commit(self, callback: Callable[[], None]) -> None:
        ...
