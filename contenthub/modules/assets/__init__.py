"""Uploaded asset domain exports."""

from .exceptions import AssetError, AssetNotFoundError, AssetPermissionError
from .models import Asset
from .service import AssetService, asset_slug, guess_mime_type

__all__ = [
    "Asset",
    "AssetError",
    "AssetNotFoundError",
    "AssetPermissionError",
    "AssetService",
    "asset_slug",
    "guess_mime_type",
]
