"""Domain Value Objects."""

from disposal.domain.value_objects.classification_result import ClassificationResult
from disposal.domain.value_objects.coordinate import Coordinate
from disposal.domain.value_objects.disposal_location import (
    NOT_AVAILABLE_RATING,
    DisposalLocation,
)

__all__ = [
    "NOT_AVAILABLE_RATING",
    "ClassificationResult",
    "Coordinate",
    "DisposalLocation",
]
