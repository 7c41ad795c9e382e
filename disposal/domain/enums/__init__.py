"""Domain Enums."""

from disposal.domain.enums.waste_category import WasteCategory

__all__ = ["WasteCategory"]
