"""Waste Classification Application Layer."""

from disposal.application.classify.commands import ClassifyWasteCommand
from disposal.application.classify.dto import ClassifyWasteRequest
from disposal.application.classify.queries import FindDisposalLocationsQuery
from disposal.application.classify.services import WasteClassifierService

__all__ = [
    "ClassifyWasteCommand",
    "ClassifyWasteRequest",
    "FindDisposalLocationsQuery",
    "WasteClassifierService",
]
