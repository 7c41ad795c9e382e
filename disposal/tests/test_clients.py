"""Google HTTP Client 단위 테스트."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from disposal.application.common.exceptions import LabelDetectionError
from disposal.infrastructure.integrations.google import (
    GooglePlacesHttpClient,
    GoogleVisionHttpClient,
)


def _response(data: object, status_code: int = 200) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.is_error = status_code >= 400
    response.json.return_value = data
    response.raise_for_status = MagicMock()
    return response


@pytest.fixture
def vision_client() -> GoogleVisionHttpClient:
    """테스트용 Vision 클라이언트."""
    return GoogleVisionHttpClient(api_key="test-vision-key", timeout=5.0)


@pytest.fixture
def places_client() -> GooglePlacesHttpClient:
    """테스트용 Places 클라이언트."""
    return GooglePlacesHttpClient(api_key="test-maps-key", timeout=5.0)


class TestGoogleVisionHttpClient:
    """GoogleVisionHttpClient 테스트."""

    @pytest.mark.asyncio
    async def test_detect_labels_success(self, vision_client: GoogleVisionHttpClient):
        """라벨 감지 성공."""
        mock_http_client = AsyncMock()
        mock_http_client.post.return_value = _response(
            {
                "responses": [
                    {
                        "labelAnnotations": [
                            {"mid": "/m/04dr76w", "description": "Bottle", "score": 0.95},
                            {"mid": "/m/05z87", "description": "Plastic", "score": 0.9},
                        ]
                    }
                ]
            }
        )

        with patch.object(vision_client, "_get_client", return_value=mock_http_client):
            labels = await vision_client.detect_labels("aW1hZ2U=")

        assert [label.description for label in labels] == ["Bottle", "Plastic"]
        assert labels[0].score == 0.95

        path = mock_http_client.post.call_args.args[0]
        payload = mock_http_client.post.call_args.kwargs["json"]
        assert path == "/images:annotate"
        assert payload["requests"][0]["image"] == {"content": "aW1hZ2U="}
        assert payload["requests"][0]["features"] == [{"type": "LABEL_DETECTION"}]

    @pytest.mark.asyncio
    async def test_detect_labels_max_results(self):
        """maxResults 설정."""
        client = GoogleVisionHttpClient(api_key="k", max_results=5)
        mock_http_client = AsyncMock()
        mock_http_client.post.return_value = _response({"responses": [{}]})

        with patch.object(client, "_get_client", return_value=mock_http_client):
            labels = await client.detect_labels("aW1hZ2U=")

        assert labels == []
        payload = mock_http_client.post.call_args.kwargs["json"]
        assert payload["requests"][0]["features"][0]["maxResults"] == 5

    @pytest.mark.asyncio
    async def test_detect_labels_empty_responses(self, vision_client: GoogleVisionHttpClient):
        """responses가 비어 있으면 빈 목록."""
        mock_http_client = AsyncMock()
        mock_http_client.post.return_value = _response({})

        with patch.object(vision_client, "_get_client", return_value=mock_http_client):
            assert await vision_client.detect_labels("aW1hZ2U=") == []

    @pytest.mark.asyncio
    async def test_detect_labels_annotate_error(self, vision_client: GoogleVisionHttpClient):
        """응답 내 error는 LabelDetectionError."""
        mock_http_client = AsyncMock()
        mock_http_client.post.return_value = _response(
            {"responses": [{"error": {"code": 3, "message": "Bad image data."}}]}
        )

        with patch.object(vision_client, "_get_client", return_value=mock_http_client):
            with pytest.raises(LabelDetectionError) as exc_info:
                await vision_client.detect_labels("bm90LWFuLWltYWdl")

        assert exc_info.value.message == "Bad image data."

    @pytest.mark.asyncio
    async def test_detect_labels_http_error(self, vision_client: GoogleVisionHttpClient):
        """HTTP 오류는 Google 에러 메시지로 LabelDetectionError."""
        mock_http_client = AsyncMock()
        mock_http_client.post.return_value = _response(
            {"error": {"code": 403, "message": "API key not valid.", "status": "PERMISSION_DENIED"}},
            status_code=403,
        )

        with patch.object(vision_client, "_get_client", return_value=mock_http_client):
            with pytest.raises(LabelDetectionError) as exc_info:
                await vision_client.detect_labels("aW1hZ2U=")

        assert exc_info.value.message == "API key not valid."

    @pytest.mark.asyncio
    async def test_detect_labels_http_error_without_body(
        self, vision_client: GoogleVisionHttpClient
    ):
        """본문이 JSON이 아니면 상태 코드 메시지."""
        response = _response(None, status_code=502)
        response.json.side_effect = ValueError("not json")
        mock_http_client = AsyncMock()
        mock_http_client.post.return_value = response

        with patch.object(vision_client, "_get_client", return_value=mock_http_client):
            with pytest.raises(LabelDetectionError) as exc_info:
                await vision_client.detect_labels("aW1hZ2U=")

        assert exc_info.value.message == "Vision API HTTP 502"

    @pytest.mark.asyncio
    async def test_detect_labels_timeout(self, vision_client: GoogleVisionHttpClient):
        """타임아웃은 그대로 전파."""
        mock_http_client = AsyncMock()
        mock_http_client.post.side_effect = httpx.ReadTimeout("timed out")

        with patch.object(vision_client, "_get_client", return_value=mock_http_client):
            with pytest.raises(httpx.TimeoutException):
                await vision_client.detect_labels("aW1hZ2U=")

    @pytest.mark.asyncio
    async def test_close(self, vision_client: GoogleVisionHttpClient):
        """close 후 클라이언트 재생성."""
        http_client = await vision_client._get_client()
        assert isinstance(http_client, httpx.AsyncClient)
        assert http_client.params["key"] == "test-vision-key"

        await vision_client.close()
        assert vision_client._client is None


class TestGooglePlacesHttpClient:
    """GooglePlacesHttpClient 테스트."""

    @pytest.mark.asyncio
    async def test_search_nearby_success(self, places_client: GooglePlacesHttpClient):
        """주변 검색 성공."""
        mock_http_client = AsyncMock()
        mock_http_client.get.return_value = _response(
            {
                "status": "OK",
                "results": [
                    {
                        "name": "GreenCycle Recycling",
                        "vicinity": "100 Main St",
                        "rating": 4.6,
                        "place_id": "abc",
                    },
                    {"name": "EcoDrop Center", "vicinity": "9 Elm Rd"},
                ],
            }
        )

        with patch.object(places_client, "_get_client", return_value=mock_http_client):
            result = await places_client.search_nearby(
                latitude=37.0, longitude=-122.0, radius=5000, keyword="recycling center"
            )

        assert result.is_ok
        assert [p.name for p in result.places] == ["GreenCycle Recycling", "EcoDrop Center"]
        assert result.places[0].vicinity == "100 Main St"
        assert result.places[0].rating == 4.6
        assert result.places[1].rating is None

        params = mock_http_client.get.call_args.kwargs["params"]
        assert params == {
            "location": "37.0,-122.0",
            "radius": 5000,
            "keyword": "recycling center",
            "key": "test-maps-key",
        }

    @pytest.mark.asyncio
    async def test_search_nearby_non_ok_status(self, places_client: GooglePlacesHttpClient):
        """status != OK 는 예외 없이 그대로 반환."""
        mock_http_client = AsyncMock()
        mock_http_client.get.return_value = _response(
            {"status": "REQUEST_DENIED", "results": [], "error_message": "Invalid key"}
        )

        with patch.object(places_client, "_get_client", return_value=mock_http_client):
            result = await places_client.search_nearby(
                latitude=1.0, longitude=2.0, radius=5000, keyword="waste disposal"
            )

        assert result.is_ok is False
        assert result.status == "REQUEST_DENIED"
        assert result.error_message == "Invalid key"

    @pytest.mark.asyncio
    async def test_search_nearby_http_error(self, places_client: GooglePlacesHttpClient):
        """HTTP 오류는 전파 (Query에서 흡수)."""
        request = httpx.Request("GET", "https://maps.googleapis.com/maps/api/place/nearbysearch/json")
        error_response = httpx.Response(500, request=request)
        response = _response({})
        response.raise_for_status.side_effect = httpx.HTTPStatusError(
            "server error", request=request, response=error_response
        )
        mock_http_client = AsyncMock()
        mock_http_client.get.return_value = response

        with patch.object(places_client, "_get_client", return_value=mock_http_client):
            with pytest.raises(httpx.HTTPStatusError):
                await places_client.search_nearby(
                    latitude=1.0, longitude=2.0, radius=5000, keyword="compost facility"
                )
