"""
Main entrypoint for the User Registry API.

This module assembles the FastAPI application, sets up logging,
middleware and exception handlers, creates the in-memory stores and
includes the versioned router.  ``create_app`` builds and configures
the app, which is then instantiated at module import time as ``app``
so it can be served directly, e.g.::

    uvicorn user_registry_api.app.main:app --port 7000

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .services.photo_store import PhotoStore
from .services.user_registry import UserRegistry


logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    registry: Optional[UserRegistry] = None,
    photo_store: Optional[PhotoStore] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the settings read from the
        environment.
    registry : Optional[UserRegistry]
        User store to serve.  When omitted a new registry is created
        and, if ``settings.seed_users`` is set, filled with the demo
        users.
    photo_store : Optional[PhotoStore]
        Photo store to serve.  A new empty one is created if omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that the setup below
    # can safely log messages.
    setup_logging(settings.log_level, settings.log_file or None)

    if registry is None:
        registry = UserRegistry(
            page_size=settings.page_size,
            legacy_total_pages=settings.legacy_total_pages,
        )
        if settings.seed_users:
            registry.seed()

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.user_registry = registry
    app.state.photo_store = photo_store if photo_store is not None else PhotoStore()

    app.add_middleware(GZipMiddleware, minimum_size=settings.gzip_minimum_size)
    _register_exception_handlers(app)
    app.include_router(v1_router, prefix=settings.api_prefix)

    logger.info(
        "%s %s ready with %d users",
        settings.project_name,
        settings.api_version,
        len(registry),
    )
    return app


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def logging_http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            logger.warning("Not found: %s %s (%s)", request.method, request.url.path, exc.detail)
        return await http_exception_handler(request, exc)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unhandled exception on %s %s",
            request.method,
            request.url.path,
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": str(exc) if app.state.settings.debug else "Internal Server Error"},
        )


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
