"""Application Services."""

from disposal.application.classify.services.waste_classifier import (
    CATEGORY_KEYWORDS,
    WasteClassifierService,
)

__all__ = ["CATEGORY_KEYWORDS", "WasteClassifierService"]
