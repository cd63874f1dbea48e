"""Reusable FastAPI dependencies."""

from .account import get_current_account, get_current_admin
from .container import get_container, get_db_session, get_renderer, get_settings
from .services import get_account_service, get_asset_service, get_content_service

__all__ = [
    "get_account_service",
    "get_asset_service",
    "get_container",
    "get_content_service",
    "get_current_account",
    "get_current_admin",
    "get_db_session",
    "get_renderer",
    "get_settings",
]
