"""Test fixtures for disposal tests."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from disposal.application.ports import LabelAnnotationDTO, NearbySearchResponse, PlaceDTO


@pytest.fixture
def sample_places() -> list[PlaceDTO]:
    """테스트용 Places 결과 (관련도 순)."""
    return [
        PlaceDTO(name="GreenCycle Recycling", vicinity="100 Main St, Springfield", rating=4.6),
        PlaceDTO(name="City Recycling Depot", vicinity="22 Oak Ave, Springfield", rating=3.9),
        PlaceDTO(name="EcoDrop Center", vicinity="9 Elm Rd, Springfield"),
        PlaceDTO(name="Metro Scrap Yard", vicinity="400 Industrial Way", rating=4.1),
        PlaceDTO(name="Bottle Return Kiosk", vicinity="1 Market Sq", rating=4.8),
    ]


@pytest.fixture
def ok_response(sample_places: list[PlaceDTO]) -> NearbySearchResponse:
    """status=OK 응답."""
    return NearbySearchResponse(status="OK", places=sample_places)


@pytest.fixture
def mock_places_client(ok_response: NearbySearchResponse) -> AsyncMock:
    """PlacesClientPort mock."""
    client = AsyncMock()
    client.search_nearby = AsyncMock(return_value=ok_response)
    return client


@pytest.fixture
def mock_label_detector() -> AsyncMock:
    """LabelDetectorPort mock."""
    detector = AsyncMock()
    detector.detect_labels = AsyncMock(
        return_value=[
            LabelAnnotationDTO(description="Plastic Bottle", score=0.97),
            LabelAnnotationDTO(description="Cap", score=0.81),
        ]
    )
    return detector
