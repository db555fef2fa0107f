import logging
import sys
from typing import Iterable

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from chill.api.routes import build_static_handlers, router
from chill.core.categories import load_media_directories
from chill.core.config import settings
from chill.core.errors import ChillError, ConfigError
from chill.core.logging import setup_logging
from chill.models.media import CategoryConfig

logger = logging.getLogger(__name__)

__version__ = "1.0.0"

ASCII_BANNER = r"""
     _   _ _ _ 
 ___| |_|_| | |
|  _|   | | | |
|___|_|_|_|_|_|""" + f"v{__version__}\n"


async def chill_error_handler(request: Request, exc: ChillError) -> PlainTextResponse:
    """
    Turn request-level failures into a plain-text response carrying the raw error text.
    """
    logger.error("Request %s failed: %s", request.url.path, exc)
    return PlainTextResponse(str(exc), status_code=exc.status_code)


def create_app(categories: Iterable[CategoryConfig]) -> FastAPI:
    """
    Build the application around an immutable list of categories.
    """
    app = FastAPI(title="Chill Media Player", version=__version__, docs_url=None, redoc_url=None, openapi_url=None)

    # Configuration is fixed for the lifetime of the app
    app.state.categories = tuple(categories)
    app.state.static_handlers = build_static_handlers(app.state.categories)

    app.add_exception_handler(ChillError, chill_error_handler)

    # Catch-all route: media files, otherwise the listing page
    app.include_router(router)
    return app


def main() -> None:
    """
    Load config.cfg from the working directory and run the server.
    Exits with status 1 if the configuration cannot be loaded.
    """
    setup_logging(settings.LOG_LEVEL)

    try:
        categories = load_media_directories(settings.CONFIG_FILE)
    except (OSError, UnicodeDecodeError, ConfigError) as e:
        logger.error("Failed to load media configurations: %s", e)
        sys.exit(1)

    app = create_app(categories)

    print(ASCII_BANNER + f"http://localhost:{settings.PORT}")
    # uvicorn exits with a non-zero status when the port cannot be bound
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
