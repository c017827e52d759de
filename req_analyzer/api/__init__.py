"""
FastAPI application factory and API package.

Run with:
    uvicorn req_analyzer.api:app --reload --port 8000

Or via main.py:
    python -m req_analyzer --serve
"""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from req_analyzer.config import get_settings
from req_analyzer.api.routes import analysis_router, session_router, health_router

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Application factory — create and configure the FastAPI instance."""
    settings = get_settings()

    application = FastAPI(
        title="Requirement Analyzer API",
        description="Rule-based conversion of business requirements into technical design documents",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(health_router, tags=["Health"])
    application.include_router(analysis_router, prefix="/api/analysis", tags=["Analysis"])
    application.include_router(session_router, prefix="/api/sessions", tags=["Sessions"])

    logger.info(f"Created {settings.app_name} API")
    return application


# Module-level instance for `uvicorn req_analyzer.api:app`
app = create_app()
