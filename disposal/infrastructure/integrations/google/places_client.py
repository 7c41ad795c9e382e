"""Google Places HTTP 클라이언트.

Places API (Nearby Search)의 HTTP 구현체.
- 주변 검색: GET /nearbysearch/json
- 인증: key={API_KEY}
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from disposal.application.ports.places_client import (
    NearbySearchResponse,
    PlaceDTO,
    PlacesClientPort,
)

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0
DEFAULT_BASE_URL = "https://maps.googleapis.com/maps/api/place"


class GooglePlacesHttpClient(PlacesClientPort):
    """Google Places HTTP 클라이언트."""

    def __init__(
        self,
        api_key: str,
        timeout: float = DEFAULT_TIMEOUT,
        base_url: str = DEFAULT_BASE_URL,
    ) -> None:
        self._api_key = api_key
        self._timeout = timeout
        self._base_url = base_url
        self._client: httpx.AsyncClient | None = None
        self._lock = asyncio.Lock()

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            async with self._lock:
                if self._client is None:
                    self._client = httpx.AsyncClient(
                        base_url=self._base_url,
                        timeout=self._timeout,
                    )
        return self._client

    async def search_nearby(
        self,
        latitude: float,
        longitude: float,
        radius: int,
        keyword: str,
    ) -> NearbySearchResponse:
        """좌표 주변 키워드 검색."""
        client = await self._get_client()

        params: dict[str, Any] = {
            "location": f"{latitude},{longitude}",
            "radius": radius,
            "keyword": keyword,
            "key": self._api_key,
        }

        try:
            response = await client.get("/nearbysearch/json", params=params)
            response.raise_for_status()
            data = response.json()
            return self._parse_response(data)
        except httpx.HTTPStatusError as e:
            logger.error(
                "Places API HTTP error",
                extra={"status_code": e.response.status_code, "keyword": keyword},
            )
            raise
        except httpx.TimeoutException:
            logger.error("Places API timeout", extra={"keyword": keyword})
            raise
        except Exception as e:
            logger.error("Places nearby search failed", extra={"keyword": keyword, "error": str(e)})
            raise

    def _parse_response(self, data: dict[str, Any]) -> NearbySearchResponse:
        places = [
            PlaceDTO(
                name=result.get("name", ""),
                vicinity=result.get("vicinity", ""),
                rating=result.get("rating"),
            )
            for result in data.get("results", [])
        ]
        return NearbySearchResponse(
            status=data.get("status", ""),
            places=places,
            error_message=data.get("error_message") or None,
        )

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None
