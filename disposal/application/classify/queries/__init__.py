"""Application Queries."""

from disposal.application.classify.queries.find_disposal_locations import (
    DEFAULT_SEARCH_KEYWORD,
    DEFAULT_SEARCH_RADIUS,
    MAX_LOCATIONS,
    SEARCH_KEYWORDS,
    FindDisposalLocationsQuery,
)

__all__ = [
    "DEFAULT_SEARCH_KEYWORD",
    "DEFAULT_SEARCH_RADIUS",
    "MAX_LOCATIONS",
    "SEARCH_KEYWORDS",
    "FindDisposalLocationsQuery",
]
