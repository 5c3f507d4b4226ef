"""
==============================================================================
Inventory Management System - Application Entry Point
==============================================================================

FastAPI application with:
- Product registration and partial updates
- Procurement with expected delivery dates
- Low stock notices and inventory statistics

Usage:
------
    # Development
    uvicorn stockroom.main:app --reload

    # Or
    python -m stockroom.main

==============================================================================
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from stockroom import __version__
from stockroom.api.router import api_router
from stockroom.catalog import Catalog
from stockroom.config import Settings, get_settings
from stockroom.core.exceptions import register_exception_handlers
from stockroom.services import CatalogManager


# ============================================================================
# LOGGING SETUP
# ============================================================================

settings = get_settings()

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)

logger = logging.getLogger(__name__)


# ============================================================================
# APPLICATION FACTORY
# ============================================================================

class Application:
    """
    FastAPI application factory and manager.

    Handles application lifecycle including:
    - Catalog creation on startup
    - Middleware configuration
    - Router registration
    - Exception handler setup
    """

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize the application."""
        self._settings = settings or get_settings()
        self._app = self._create_app()

    def _create_app(self) -> FastAPI:
        """Create and configure the FastAPI application."""
        app = FastAPI(
            title=self._settings.app_name,
            version=__version__,
            description="Product catalog, procurement and stock statistics",
            lifespan=self._lifespan,
            docs_url="/docs",
            redoc_url="/redoc",
        )

        self._configure_middleware(app)
        register_exception_handlers(app)
        app.include_router(api_router)

        return app

    @asynccontextmanager
    async def _lifespan(self, app: FastAPI):
        """Application lifespan manager."""
        self._startup(app)
        yield
        self._shutdown(app)

    def _startup(self, app: FastAPI) -> None:
        """Create a fresh catalog for this run."""
        logger.info("=" * 60)
        logger.info(f"🚀 Starting {self._settings.app_name}")
        logger.info("=" * 60)

        catalog = Catalog(
            low_stock_threshold=self._settings.low_stock_threshold,
            delivery_lead_days=self._settings.delivery_lead_days,
        )
        manager = CatalogManager(catalog)

        if self._settings.seed_demo_products:
            manager.seed_demo_products()

        app.state.catalog_manager = manager

        logger.info(f"✅ {self._settings.app_name} ready with {len(catalog)} products")
        logger.info(f"📖 API Docs: http://{self._settings.host}:{self._settings.port}/docs")

    def _shutdown(self, app: FastAPI) -> None:
        """Drop the in-memory catalog."""
        logger.info("🛑 Shutting down...")
        app.state.catalog_manager = None
        logger.info("✅ Shutdown complete")

    def _configure_middleware(self, app: FastAPI) -> None:
        """Configure application middleware."""
        app.add_middleware(
            CORSMiddleware,
            allow_origins=self._settings.cors_origins_list,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @property
    def app(self) -> FastAPI:
        """Get the FastAPI application instance."""
        return self._app


# ============================================================================
# APPLICATION INSTANCE
# ============================================================================

application = Application()
app = application.app


# ============================================================================
# ENTRY POINT
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "stockroom.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info"
    )
