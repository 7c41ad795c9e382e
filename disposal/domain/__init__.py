"""Disposal Domain Layer."""

from disposal.domain.enums import WasteCategory
from disposal.domain.value_objects import (
    NOT_AVAILABLE_RATING,
    ClassificationResult,
    Coordinate,
    DisposalLocation,
)

__all__ = [
    "NOT_AVAILABLE_RATING",
    "ClassificationResult",
    "Coordinate",
    "DisposalLocation",
    "WasteCategory",
]
