"""Disposal API - FastAPI application entry point."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from disposal.presentation.http.controllers import (
    disposal_router,
    health_router,
    legacy_router,
)
from disposal.presentation.http.errors import register_exception_handlers
from disposal.setup.config import get_settings
from disposal.setup.dependencies import close_clients
from disposal.setup.logging import setup_logging

logger = logging.getLogger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """애플리케이션 라이프사이클 관리."""
    setup_logging()
    logger.info(f"Starting {settings.service_name}")
    yield
    logger.info(f"Shutting down {settings.service_name}")
    await close_clients()


def create_app() -> FastAPI:
    """FastAPI 애플리케이션을 생성합니다."""
    app = FastAPI(
        title="Disposal API",
        description="Waste photo classification and nearby disposal lookup",
        version=settings.service_version,
        docs_url="/api/v1/disposal/docs",
        openapi_url="/api/v1/disposal/openapi.json",
        redoc_url="/api/v1/disposal/redoc",
        lifespan=lifespan,
    )

    # CORS 미들웨어 추가
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    register_exception_handlers(app)

    # 라우터 등록
    app.include_router(health_router)
    app.include_router(legacy_router)
    app.include_router(disposal_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "disposal.main:app",
        host="0.0.0.0",
        port=3000,
        reload=settings.environment == "development",
    )
