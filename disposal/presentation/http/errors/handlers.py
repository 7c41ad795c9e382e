"""Exception Handlers.

애플리케이션 예외를 HTTP 응답 ({"error", "code"})으로 변환합니다.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from disposal.application.common.exceptions import (
    DEFAULT_FAILURE_MESSAGE,
    ApplicationError,
    ImageTooLargeError,
    ServiceUnavailableError,
    UpstreamError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str, code: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message, "code": code})


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        first = errors[0] if errors else {}
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = first.get("msg", "Invalid request body")
        if location:
            message = f"{location}: {message}"
        return _error(400, message, "INVALID_REQUEST")

    @app.exception_handler(ImageTooLargeError)
    async def image_too_large_handler(request: Request, exc: ImageTooLargeError):
        return _error(413, exc.message, "IMAGE_TOO_LARGE")

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        return _error(400, exc.message, "VALIDATION_ERROR")

    @app.exception_handler(ServiceUnavailableError)
    async def service_unavailable_handler(request: Request, exc: ServiceUnavailableError):
        return _error(503, exc.message, "SERVICE_UNAVAILABLE")

    @app.exception_handler(UpstreamError)
    async def upstream_error_handler(request: Request, exc: UpstreamError):
        return _error(500, exc.message, "CLASSIFICATION_FAILED")

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return _error(400, exc.message, "APPLICATION_ERROR")

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error", extra={"path": request.url.path})
        return _error(500, DEFAULT_FAILURE_MESSAGE, "INTERNAL_ERROR")
