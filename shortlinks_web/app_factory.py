"""FastAPI application factory."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api import api_router
from .web import web_router
from .errors import http_exception_handler
from .middleware.headers import SecurityHeadersMiddleware
from .middleware.logging import LoggingMiddleware


def create_app(
    directory,
    config,
    lifespan=None,
    logger: logging.Logger = None,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        directory: ShortLinkDirectory the routes read and write
        config: Configuration instance
        lifespan: Optional lifespan context manager
        logger: Optional logger stored on app state

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="Short Links",
        description="Maps long URLs to short random keys and redirects them back",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
        lifespan=lifespan,
    )

    # Routes reach shared objects through app state, never module globals
    app.state.directory = directory
    app.state.config = config
    app.state.logger = logger or logging.getLogger("shortlinks")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    # Added last runs first: requests are logged before headers are hardened
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(LoggingMiddleware)

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    app.include_router(api_router, prefix="/api", tags=["API"])
    app.include_router(web_router, tags=["Web"])

    return app
