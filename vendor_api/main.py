"""Vendor Intake API — FastAPI application factory."""


import logging
import sys
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from vendor_api.core.config import Settings, settings as default_settings
from vendor_api.core.exceptions import StartupError, register_exception_handlers
from vendor_api.db.mongo import bootstrap
from vendor_api.middleware.request_log import RequestLogMiddleware
from vendor_api.routers.vendor import router as vendor_router
from vendor_api.schemas.common import HealthResponse

logger = logging.getLogger(__name__)


def _configure_logging(settings: Settings) -> None:
    """Set up structured logging for the application."""
    level = logging.DEBUG if settings.is_development else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    # Quiet noisy libraries
    logging.getLogger("pymongo").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


def _lifespan(settings: Settings, collection: Any):
    """Connect once before serving; abort startup if the store is unusable.

    When ``collection`` is given it is used as-is and no connection is made.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.settings = settings
        if collection is not None:
            app.state.vendor_collection = collection
            yield
            return

        result = await bootstrap(settings)
        if not result.ok:
            logger.critical("Startup failed: %s", result.error)
            raise StartupError(result.error)

        app.state.vendor_collection = result.collection
        try:
            yield
        finally:
            result.client.close()
            logger.info("MongoDB client closed")

    return lifespan


def create_app(settings: Settings | None = None, collection: Any = None) -> FastAPI:
    settings = settings or default_settings
    _configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        lifespan=_lifespan(settings, collection),
    )

    # --- CORS ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["POST", "OPTIONS"],
        allow_headers=["*"],
    )

    # --- Request logging ---
    app.add_middleware(RequestLogMiddleware)

    # --- Global exception handlers ---
    register_exception_handlers(app)

    # --- Vendor routes (/api/vendor) ---
    app.include_router(vendor_router)

    # --- Health check ---
    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health():
        return HealthResponse(app=settings.app_name, env=settings.app_env)

    return app


app = create_app()
