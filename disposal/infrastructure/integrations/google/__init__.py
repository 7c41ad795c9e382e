"""Google API Integrations."""

from disposal.infrastructure.integrations.google.places_client import GooglePlacesHttpClient
from disposal.infrastructure.integrations.google.vision_client import GoogleVisionHttpClient

__all__ = ["GooglePlacesHttpClient", "GoogleVisionHttpClient"]
