"""Access to the per-application container from request handlers."""

from collections.abc import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from contenthub.core.config import Settings
from contenthub.core.container import ApplicationContainer
from contenthub.rendering import DocumentRenderer


def get_container(request: Request) -> ApplicationContainer:
    return request.app.state.container


def get_settings(container: ApplicationContainer = Depends(get_container)) -> Settings:
    return container.settings


def get_renderer(container: ApplicationContainer = Depends(get_container)) -> DocumentRenderer:
    return container.renderer


async def get_db_session(
    container: ApplicationContainer = Depends(get_container),
) -> AsyncGenerator[AsyncSession, None]:
    async with container.database.session() as session:
        yield session
