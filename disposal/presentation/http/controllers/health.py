"""Health Check Controller."""

from fastapi import APIRouter

from disposal.setup.config import get_settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict:
    """서비스 헬스 체크."""
    settings = get_settings()
    return {
        "status": "healthy",
        "service": settings.service_name,
        "version": settings.service_version,
    }


@router.get("/ping")
async def ping() -> dict:
    """Ping."""
    return {"pong": True}
