"""Application Exceptions."""

from disposal.application.common.exceptions.base import ApplicationError
from disposal.application.common.exceptions.upstream import (
    DEFAULT_FAILURE_MESSAGE,
    ClassificationFailedError,
    LabelDetectionError,
    ServiceUnavailableError,
    UpstreamError,
)
from disposal.application.common.exceptions.validation import (
    ImageDataRequiredError,
    ImageTooLargeError,
    UserLocationRequiredError,
    ValidationError,
)

__all__ = [
    "DEFAULT_FAILURE_MESSAGE",
    "ApplicationError",
    "ClassificationFailedError",
    "ImageDataRequiredError",
    "ImageTooLargeError",
    "LabelDetectionError",
    "ServiceUnavailableError",
    "UpstreamError",
    "UserLocationRequiredError",
    "ValidationError",
]
