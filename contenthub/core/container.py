"""Dependency container wiring the core services for one application instance."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from contenthub.core.config import Settings
from contenthub.infrastructure.database import Database
from contenthub.infrastructure.storage import MediaStorage
from contenthub.rendering import DocumentRenderer

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    database: Database
    storage: MediaStorage
    renderer: DocumentRenderer

    @classmethod
    def build(cls, settings: Settings) -> "ApplicationContainer":
        return cls(
            settings=settings,
            database=Database(settings),
            storage=MediaStorage(settings.media_root, settings.media_base_url),
            renderer=DocumentRenderer(),
        )

    async def startup(self) -> None:
        self.storage.ensure_root()
        await self.database.init_models()
        logger.info("%s started (%s)", self.settings.project_name, self.settings.environment)

    async def shutdown(self) -> None:
        await self.database.dispose()


__all__ = ["ApplicationContainer"]
