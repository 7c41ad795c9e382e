"""Find Disposal Locations Query.

카테고리에 맞는 주변 배출 시설을 Places API로 검색합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from disposal.domain.enums import WasteCategory
from disposal.domain.value_objects import NOT_AVAILABLE_RATING, Coordinate, DisposalLocation

if TYPE_CHECKING:
    from disposal.application.ports.places_client import PlaceDTO, PlacesClientPort

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_RADIUS = 5000
MAX_LOCATIONS = 3
DEFAULT_SEARCH_KEYWORD = "waste disposal"

SEARCH_KEYWORDS: dict[WasteCategory, str] = {
    WasteCategory.RECYCLABLE: "recycling center",
    WasteCategory.HAZARDOUS: "hazardous waste disposal",
    WasteCategory.DONATABLE: "thrift store OR donation center",
    WasteCategory.ORGANIC: "compost facility",
    WasteCategory.GENERAL: DEFAULT_SEARCH_KEYWORD,
}


class FindDisposalLocationsQuery:
    """주변 배출 시설 조회 Query.

    Places API 실패는 요청 전체를 실패시키지 않습니다.
    상태 코드가 OK가 아니거나 호출 중 예외가 나면 빈 목록을 반환합니다.
    Places 클라이언트가 없으면 (API 키 미설정) 검색 없이 빈 목록을 반환합니다.
    """

    def __init__(
        self,
        places_client: "PlacesClientPort | None",
        radius: int = DEFAULT_SEARCH_RADIUS,
        max_results: int = MAX_LOCATIONS,
    ) -> None:
        self._places = places_client
        self._radius = radius
        self._max_results = max(0, min(max_results, MAX_LOCATIONS))

    @staticmethod
    def keyword_for(category: WasteCategory) -> str:
        """카테고리별 검색 키워드."""
        return SEARCH_KEYWORDS.get(category, DEFAULT_SEARCH_KEYWORD)

    async def execute(
        self,
        category: WasteCategory,
        position: Coordinate,
    ) -> list[DisposalLocation]:
        """카테고리와 좌표로 주변 시설을 조회합니다.

        Args:
            category: 분류된 폐기물 카테고리
            position: 사용자 좌표

        Returns:
            DisposalLocation 목록 (Places 관련도 순, 최대 3개)
        """
        keyword = self.keyword_for(category)
        logger.info(
            "Fetching nearby locations",
            extra={
                "waste_type": category.value,
                "keyword": keyword,
                "latitude": position.latitude,
                "longitude": position.longitude,
            },
        )

        if self._places is None:
            logger.warning(
                "Places client not configured, skipping nearby search",
                extra={"keyword": keyword},
            )
            return []

        try:
            response = await self._places.search_nearby(
                latitude=position.latitude,
                longitude=position.longitude,
                radius=self._radius,
                keyword=keyword,
            )
        except Exception as e:
            logger.error(
                "Places nearby search failed",
                extra={"keyword": keyword, "error": str(e)},
            )
            return []

        if not response.is_ok:
            logger.warning(
                "Places API returned non-OK status",
                extra={
                    "keyword": keyword,
                    "status": response.status,
                    "error_message": response.error_message,
                },
            )
            return []

        locations = [self._to_location(place) for place in response.places[: self._max_results]]

        logger.info(
            "Nearby locations mapped",
            extra={"keyword": keyword, "results_count": len(locations)},
        )
        return locations

    @staticmethod
    def _to_location(place: "PlaceDTO") -> DisposalLocation:
        rating = place.rating if place.rating is not None else NOT_AVAILABLE_RATING
        return DisposalLocation(name=place.name, address=place.vicinity, rating=rating)
