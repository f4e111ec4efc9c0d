#!/usr/bin/env python3
"""
Breach Engine - Breach Disclosure API Server
Serves breach-disclosure records aggregated from HHS, Maine and Texas
"""

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging
from datetime import datetime, timezone
from typing import Optional

from breach_db.orchestration import BreachSourceManager, ResultCache
from breach_db.orchestration.envelope import isoformat_utc
from breach_engine.api.routes import breach_data
from breach_engine.core.config import settings
from breach_engine.core.logging_config import setup_logging

# Setup logging
setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)
logger = logging.getLogger(__name__)


def create_app(source_manager: Optional[BreachSourceManager] = None,
               result_cache: Optional[ResultCache] = None) -> FastAPI:
    """
    Create the FastAPI application

    Args:
        source_manager: Orchestrator to use (default: built from settings)
        result_cache: Result cache to use (default: empty cache with CACHE_TTL)
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan management"""
        logger.info("Starting Breach Engine...")

        app.state.source_manager = source_manager or BreachSourceManager.from_settings(settings)
        app.state.result_cache = result_cache or ResultCache(ttl_seconds=settings.CACHE_TTL)

        logger.info(f"Server running on port {settings.PORT}")
        logger.info(f"API endpoint: http://localhost:{settings.PORT}/api/breach-data")
        logger.info(f"Health check: http://localhost:{settings.PORT}/health")

        yield

        logger.info("Shutting down Breach Engine...")

    app = FastAPI(
        title="Breach Engine API",
        description="Aggregated breach disclosure records from public sources",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        lifespan=lifespan
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(
        breach_data.router,
        prefix="/api",
        tags=["breach-data"]
    )

    # Root endpoint
    @app.get("/")
    async def root():
        """Service information"""
        return {
            "message": "Breach Engine API",
            "version": "1.0.0",
            "endpoints": ["/api/breach-data", "/health"],
        }

    @app.get("/health")
    async def health_check():
        """Liveness check, independent of the scrapers"""
        return {
            "status": "ok",
            "timestamp": isoformat_utc(datetime.now(timezone.utc)),
        }

    return app


app = create_app()


def run() -> None:
    uvicorn.run(
        "breach_engine.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level="info"
    )


if __name__ == "__main__":
    run()
