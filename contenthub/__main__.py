"""Run the service with uvicorn: ``python -m contenthub``."""

import uvicorn

from contenthub.core.config import load_settings
from contenthub.main import create_app


def main() -> None:
    settings = load_settings()
    if settings.server.reload:
        uvicorn.run(
            "contenthub.main:create_app",
            factory=True,
            host=settings.server.host,
            port=settings.server.port,
            reload=True,
        )
        return
    uvicorn.run(create_app(settings), host=settings.server.host, port=settings.server.port)


if __name__ == "__main__":
    main()
