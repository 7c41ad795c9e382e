"""Dependency Injection for FastAPI."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends

from disposal.application.classify import ClassifyWasteCommand, FindDisposalLocationsQuery
from disposal.application.ports import LabelDetectorPort, PlacesClientPort
from disposal.setup.config import get_settings

logger = logging.getLogger(__name__)

_label_detector: LabelDetectorPort | None = None
_places_client: PlacesClientPort | None = None


def get_label_detector() -> LabelDetectorPort | None:
    """Vision Client 싱글톤을 반환합니다."""
    global _label_detector  # noqa: PLW0603
    if _label_detector is None:
        settings = get_settings()
        if settings.google_vision_api_key:
            from disposal.infrastructure.integrations.google import GoogleVisionHttpClient

            _label_detector = GoogleVisionHttpClient(
                api_key=settings.google_vision_api_key.get_secret_value(),
                timeout=settings.vision_api_timeout,
                base_url=settings.vision_api_base_url,
                max_results=settings.vision_max_results,
            )
            logger.info("Google Vision HTTP client created")
        else:
            logger.warning("GOOGLE_VISION_API_KEY not set, classification disabled")
    return _label_detector


def get_places_client() -> PlacesClientPort | None:
    """Places Client 싱글톤을 반환합니다."""
    global _places_client  # noqa: PLW0603
    if _places_client is None:
        settings = get_settings()
        if settings.google_maps_api_key:
            from disposal.infrastructure.integrations.google import GooglePlacesHttpClient

            _places_client = GooglePlacesHttpClient(
                api_key=settings.google_maps_api_key.get_secret_value(),
                timeout=settings.places_api_timeout,
                base_url=settings.places_api_base_url,
            )
            logger.info("Google Places HTTP client created")
        else:
            logger.warning("GOOGLE_MAPS_API_KEY not set, location lookup disabled")
    return _places_client


async def close_clients() -> None:
    """생성된 외부 API 클라이언트를 정리합니다."""
    global _label_detector, _places_client  # noqa: PLW0603
    if _label_detector is not None:
        await _label_detector.close()
        _label_detector = None
    if _places_client is not None:
        await _places_client.close()
        _places_client = None


def get_find_locations_query(
    places_client: Annotated[PlacesClientPort | None, Depends(get_places_client)],
) -> FindDisposalLocationsQuery:
    """FindDisposalLocationsQuery를 주입합니다.

    Places 키가 없으면 None 클라이언트로 생성되어 빈 시설 목록을 반환합니다.
    """
    settings = get_settings()
    return FindDisposalLocationsQuery(
        places_client=places_client,
        radius=settings.places_search_radius,
        max_results=settings.max_locations,
    )


def get_classify_waste_command(
    label_detector: Annotated[LabelDetectorPort | None, Depends(get_label_detector)],
    locations_query: Annotated[FindDisposalLocationsQuery, Depends(get_find_locations_query)],
) -> ClassifyWasteCommand:
    """ClassifyWasteCommand를 주입합니다.

    Vision 키 누락은 요청 검증 이후 Command에서 503으로 처리합니다.
    """
    return ClassifyWasteCommand(
        label_detector=label_detector,
        locations_query=locations_query,
        max_image_length=get_settings().max_image_base64_length,
    )


ClassifyWasteCommandDep = Annotated[ClassifyWasteCommand, Depends(get_classify_waste_command)]
