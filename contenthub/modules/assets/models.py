"""Domain models for uploaded assets."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from contenthub.rendering import AssetRef


@dataclass(slots=True)
class Asset:
    id: str
    owner_id: str
    name: str
    slug: str
    url: str
    mime_type: Optional[str]
    size_bytes: int
    checksum_sha256: str
    folder: str
    storage_path: str
    created_at: datetime

    def to_ref(self) -> AssetRef:
        return AssetRef(name=self.name, url=self.url)
