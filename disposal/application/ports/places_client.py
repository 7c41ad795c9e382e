"""Places Client Port.

주변 장소 검색 API와의 통신을 위한 포트 인터페이스.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

PLACES_STATUS_OK = "OK"


@dataclass(frozen=True)
class PlaceDTO:
    """장소 DTO."""

    name: str
    vicinity: str
    rating: float | None = None


@dataclass
class NearbySearchResponse:
    """주변 검색 응답.

    status가 "OK"가 아니면 결과가 없는 것으로 취급합니다.
    """

    status: str
    places: list[PlaceDTO] = field(default_factory=list)
    error_message: str | None = None

    @property
    def is_ok(self) -> bool:
        return self.status == PLACES_STATUS_OK


class PlacesClientPort(ABC):
    """주변 장소 검색 포트."""

    @abstractmethod
    async def search_nearby(
        self,
        latitude: float,
        longitude: float,
        radius: int,
        keyword: str,
    ) -> NearbySearchResponse:
        """좌표 주변에서 키워드로 장소를 검색합니다."""
        ...

    async def close(self) -> None:
        """리소스 정리."""
        return None
