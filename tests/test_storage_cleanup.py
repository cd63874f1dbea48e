import asyncio
import io

import pytest
from fastapi import UploadFile

from contenthub.infrastructure.storage import MediaStorage
from contenthub.modules.assets import AssetService
from contenthub.modules.contents import ContentService


class FailingAssetRepository:
    async def create(self, **values):
        raise RuntimeError("insert failed")


class FailingContentRepository:
    async def slug_exists(self, subject_slug, slug, *, exclude_id=None):
        return False

    async def create(self, **values):
        raise RuntimeError("insert failed")


class RecordingAssetRepository:
    def __init__(self, asset):
        self.asset = asset
        self.deleted = []
        self.callbacks = []

    async def get_by_id(self, asset_id):
        return self.asset

    async def delete(self, asset_id):
        self.deleted.append(asset_id)

    def after_commit(self, callback):
        self.callbacks.append(callback)


def stored_files(root):
    return [path for path in root.rglob("*") if path.is_file()]


@pytest.fixture
def storage(tmp_path):
    media = MediaStorage(tmp_path / "media", "http://testserver/media")
    media.ensure_root()
    return media


def test_asset_file_is_removed_when_insert_fails(storage):
    service = AssetService(FailingAssetRepository(), storage, max_bytes=1024)
    upload = UploadFile(io.BytesIO(b"image"), filename="pic.png")

    with pytest.raises(RuntimeError):
        asyncio.run(service.store_upload("owner-1", upload))

    assert stored_files(storage.root) == []


def test_document_file_is_removed_when_insert_fails(storage):
    service = ContentService(FailingContentRepository(), storage, max_document_bytes=1024)
    upload = UploadFile(io.BytesIO(b"%PDF-1.4"), filename="notes.pdf")

    with pytest.raises(RuntimeError):
        asyncio.run(service.create_document("owner-1", upload, title="Notes", subject="Physics"))

    assert stored_files(storage.root) == []


def test_asset_file_outlives_an_uncommitted_delete(storage):
    upload = UploadFile(io.BytesIO(b"image"), filename="pic.png")
    stored = asyncio.run(
        storage.save_upload(upload, namespace="assets", owner_id="owner-1", file_name="pic.png", max_bytes=1024)
    )

    class StoredAsset:
        id = "asset-1"
        owner_id = "owner-1"
        name = "pic.png"
        storage_path = str(stored.path)

    repository = RecordingAssetRepository(StoredAsset())
    service = AssetService(repository, storage, max_bytes=1024)

    asyncio.run(service.delete_asset("asset-1", "owner-1"))

    assert repository.deleted == ["asset-1"]
    assert stored.path.exists()

    for callback in repository.callbacks:
        callback()
    assert not stored.path.exists()
