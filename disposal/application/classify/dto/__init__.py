"""Application DTOs."""

from disposal.application.classify.dto.classify_request import ClassifyWasteRequest

__all__ = ["ClassifyWasteRequest"]
