"""Setup Module."""

from disposal.setup.config import Settings, get_settings
from disposal.setup.dependencies import (
    get_classify_waste_command,
    get_label_detector,
    get_places_client,
)

__all__ = [
    "Settings",
    "get_settings",
    "get_classify_waste_command",
    "get_label_detector",
    "get_places_client",
]
