"""HTTP Schemas."""

from disposal.presentation.http.schemas.disposal import (
    CategoryEntry,
    ClassifyWasteBody,
    ClassifyWasteResponse,
    DisposalLocationEntry,
    ErrorResponse,
    UserLocationPayload,
)

__all__ = [
    "CategoryEntry",
    "ClassifyWasteBody",
    "ClassifyWasteResponse",
    "DisposalLocationEntry",
    "ErrorResponse",
    "UserLocationPayload",
]
