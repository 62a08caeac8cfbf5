# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the IP1 Gallery web app.
# It configures the FastAPI application with the database connection,
# static files, route groups and exception handlers.
#
# Startup order:
#   1. Settings resolve NODE_ENV and the MongoDB connection string
#   2. The lifespan starts the connection attempt as a background task
#   3. Static files, JSON handling and the route groups are registered
#   4. uvicorn binds PORT (see app/server.py)
#
# The server does not wait for the database unless DB_WAIT_ON_STARTUP is
# set; /health/ready reports when the connection is up.
#
# Usage:
#   uvicorn app.main:app --port 5000
#   ip1-gallery
# =============================================================================

import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app import __version__
from app.config import Settings, settings
from app.exceptions import (
    DATABASE_ERRORS,
    GalleryException,
    database_exception_handler,
    gallery_exception_handler,
    validation_exception_handler,
)
from app.routers import ROUTE_GROUPS
from app.static import add_public_assets
from lib.mongo_client import MongoConnection

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    - Startup: Create the MongoDB handle and start connecting
    - Shutdown: Stop a pending attempt and close the client
    """
    app_settings: Settings = app.state.settings

    # Startup
    logger.info(f"Starting IP1 Gallery in {app_settings.NODE_ENV} mode")

    mongo = MongoConnection(
        app_settings.mongo_uri,
        app_settings.MONGO_DB,
        server_selection_timeout_ms=app_settings.MONGO_SERVER_SELECTION_TIMEOUT_MS,
    )
    app.state.mongo = mongo

    connect_task = asyncio.create_task(mongo.connect())
    if app_settings.DB_WAIT_ON_STARTUP:
        # connect() logs failures itself and never raises
        await connect_task

    yield

    # Shutdown
    logger.info("Shutting down IP1 Gallery")

    if not connect_task.done():
        connect_task.cancel()
        try:
            await connect_task
        except asyncio.CancelledError:
            pass

    await mongo.close()


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        app_settings: Settings to use; defaults to the environment-loaded ones

    Returns:
        The configured application
    """
    app_settings = app_settings or settings

    app = FastAPI(
        title="IP1 Gallery",
        description="Image gallery backed by MongoDB Atlas.",
        version=__version__,
        lifespan=lifespan,
        openapi_tags=[
            {"name": "Site", "description": "Gallery listing and uploads"},
            {"name": "Image", "description": "Single image view, rename and delete"},
            {"name": "Health", "description": "API health and readiness checks"},
        ],
    )
    app.state.settings = app_settings

    # =========================================================================
    # Static Files
    # =========================================================================
    # Registered before the routers so existing files win over routes

    add_public_assets(app, app_settings.PUBLIC_DIR)

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    app.add_exception_handler(GalleryException, gallery_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    for error_type in DATABASE_ERRORS:
        app.add_exception_handler(error_type, database_exception_handler)

    @app.exception_handler(Exception)
    async def handle_general_exception(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.exception(f"Unexpected error: {exc}")
        return JSONResponse(
            status_code=500,
            content={
                "detail": "An unexpected error occurred",
                "code": "INTERNAL_ERROR",
            }
        )

    # =========================================================================
    # Route Groups
    # =========================================================================

    for prefix, router in ROUTE_GROUPS:
        app.include_router(router, prefix=prefix)

    return app


app = create_app()
