"""Application Ports."""

from disposal.application.ports.label_detector import LabelAnnotationDTO, LabelDetectorPort
from disposal.application.ports.places_client import (
    PLACES_STATUS_OK,
    NearbySearchResponse,
    PlaceDTO,
    PlacesClientPort,
)

__all__ = [
    "PLACES_STATUS_OK",
    "LabelAnnotationDTO",
    "LabelDetectorPort",
    "NearbySearchResponse",
    "PlaceDTO",
    "PlacesClientPort",
]
