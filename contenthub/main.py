from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from contenthub import __version__
from contenthub.api import create_api_router
from contenthub.core.config import Settings, load_settings
from contenthub.core.container import ApplicationContainer
from contenthub.core.logging_config import configure_logging
from contenthub.interfaces.http.routers import pages


@asynccontextmanager
async def lifespan(app: FastAPI):
    container: ApplicationContainer = app.state.container
    await container.startup()
    try:
        yield
    finally:
        await container.shutdown()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or load_settings()
    configure_logging("DEBUG" if settings.debug else settings.log_level)

    container = ApplicationContainer.build(settings)
    # the media directory must exist before StaticFiles is mounted on it
    container.storage.ensure_root()

    app = FastAPI(
        title=settings.project_name,
        description="Sandboxed HTML/CSS/JS projects and documents",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.container = container
    app.state.templates = Jinja2Templates(directory=str(settings.template_dir))

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(create_api_router(settings.api_prefix))
    app.mount("/media", StaticFiles(directory=str(container.storage.root)), name="media")
    app.include_router(pages.router)

    return app
