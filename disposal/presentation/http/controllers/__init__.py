"""HTTP Controllers."""

from disposal.presentation.http.controllers.disposal import legacy_router
from disposal.presentation.http.controllers.disposal import router as disposal_router
from disposal.presentation.http.controllers.health import router as health_router

__all__ = ["disposal_router", "health_router", "legacy_router"]
