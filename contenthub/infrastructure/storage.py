"""Local disk storage for uploaded media, served publicly under ``/media``."""

from __future__ import annotations

import hashlib
import logging
import os
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from fastapi import UploadFile

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024


class StorageError(Exception):
    """Base class for upload storage failures."""


class EmptyUploadError(StorageError):
    pass


class UploadTooLargeError(StorageError):
    def __init__(self, limit: int) -> None:
        super().__init__(f"upload exceeds {limit} bytes")
        self.limit = limit


@dataclass(slots=True)
class StoredFile:
    path: Path
    url: str
    size_bytes: int
    checksum_sha256: str


def sanitize_filename(filename: str | None) -> str | None:
    if not filename:
        return None
    name = os.path.basename(filename.replace("\\", "/"))
    return name.replace("\0", "").strip() or None


class MediaStorage:
    def __init__(self, root: Path, base_url: str) -> None:
        self.root = root
        self.base_url = base_url.rstrip("/")

    def ensure_root(self) -> None:
        self.root.mkdir(parents=True, exist_ok=True)

    def url_for(self, path: Path) -> str:
        relative = PurePosixPath(*path.relative_to(self.root).parts)
        return f"{self.base_url}/{relative}"

    async def save_upload(
        self,
        upload: UploadFile,
        *,
        namespace: str,
        owner_id: str,
        file_name: str,
        max_bytes: int,
    ) -> StoredFile:
        storage_dir = self.root / namespace / owner_id
        storage_dir.mkdir(parents=True, exist_ok=True)
        target_path = storage_dir / f"{os.urandom(16).hex()}{Path(file_name).suffix.lower()}"

        hasher = hashlib.sha256()
        total_size = 0
        try:
            with target_path.open("wb") as buffer:
                while True:
                    chunk = await upload.read(CHUNK_SIZE)
                    if not chunk:
                        break
                    total_size += len(chunk)
                    if total_size > max_bytes:
                        raise UploadTooLargeError(max_bytes)
                    buffer.write(chunk)
                    hasher.update(chunk)
        except UploadTooLargeError:
            target_path.unlink(missing_ok=True)
            logger.warning("Rejected upload %s for %s: larger than %d bytes", file_name, owner_id, max_bytes)
            raise
        finally:
            await upload.close()

        if total_size == 0:
            target_path.unlink(missing_ok=True)
            raise EmptyUploadError("uploaded file is empty")

        return StoredFile(
            path=target_path,
            url=self.url_for(target_path),
            size_bytes=total_size,
            checksum_sha256=hasher.hexdigest(),
        )

    def delete(self, path: str | Path) -> None:
        Path(path).unlink(missing_ok=True)


__all__ = [
    "EmptyUploadError",
    "MediaStorage",
    "StorageError",
    "StoredFile",
    "UploadTooLargeError",
    "sanitize_filename",
]
