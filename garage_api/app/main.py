"""
Main entrypoint for the Garage Records API.

This module assembles the FastAPI application, sets up logging, builds
the record store and includes the versioned router.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn garage_api.app.main:app --reload

Every error response has the shape ``{"error": "<message>"}``.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.v1.router import router as v1_router
from .core.config import Settings, settings
from .core.logging_config import setup_logging
from .core.store import GarageStore, build_store

logger = logging.getLogger(__name__)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Reached only when the body is absent or is not valid JSON; field
    # level checks happen in the service layer.
    logger.warning("Rejected request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid input: Ensure the request body is a valid JSON object."},
    )


def create_app(app_settings: Optional[Settings] = None, store: Optional[GarageStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use; defaults to the module level ``settings``.
    store : Optional[GarageStore]
        Record store to inject into the services.  When omitted one is
        built from ``app_settings.storage_backend``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    # Initialise logging before anything else so that store
    # construction below can log.
    setup_logging(app_settings.log_level, app_settings.log_file)

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        debug=app_settings.debug,
    )
    app.state.settings = app_settings
    app.state.store = store if store is not None else build_store(app_settings)

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.include_router(v1_router, prefix=app_settings.api_prefix)

    @app.get("/healthz", response_model=dict)
    async def health() -> dict:
        """Health check used by orchestrators and load balancers."""
        return {"status": "healthy"}

    logger.info(
        "%s %s started with %s storage",
        app_settings.project_name,
        app_settings.api_version,
        app_settings.storage_backend,
    )
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
