"""Google Cloud Vision HTTP 클라이언트.

Vision API의 HTTP 구현체.
- 라벨 감지: POST /v1/images:annotate (features: LABEL_DETECTION)
- 인증: ?key={API_KEY}
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from disposal.application.common.exceptions import LabelDetectionError
from disposal.application.ports.label_detector import LabelAnnotationDTO, LabelDetectorPort

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0
DEFAULT_BASE_URL = "https://vision.googleapis.com/v1"


class GoogleVisionHttpClient(LabelDetectorPort):
    """Google Cloud Vision HTTP 클라이언트."""

    def __init__(
        self,
        api_key: str,
        timeout: float = DEFAULT_TIMEOUT,
        base_url: str = DEFAULT_BASE_URL,
        max_results: int | None = None,
    ) -> None:
        self._api_key = api_key
        self._timeout = timeout
        self._base_url = base_url
        self._max_results = max_results
        self._client: httpx.AsyncClient | None = None
        self._lock = asyncio.Lock()

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            async with self._lock:
                if self._client is None:
                    self._client = httpx.AsyncClient(
                        base_url=self._base_url,
                        params={"key": self._api_key},
                        timeout=self._timeout,
                    )
        return self._client

    async def detect_labels(self, image_content: str) -> list[LabelAnnotationDTO]:
        """이미지 라벨 감지."""
        client = await self._get_client()

        feature: dict[str, Any] = {"type": "LABEL_DETECTION"}
        if self._max_results is not None:
            feature["maxResults"] = self._max_results
        payload = {
            "requests": [
                {
                    "image": {"content": image_content},
                    "features": [feature],
                }
            ]
        }

        try:
            response = await client.post("/images:annotate", json=payload)
        except httpx.TimeoutException:
            logger.error("Vision API timeout")
            raise
        except httpx.HTTPError as e:
            logger.error("Vision API request failed", extra={"error": str(e)})
            raise

        data = self._safe_json(response)
        if response.is_error:
            message = self._error_message(data) or f"Vision API HTTP {response.status_code}"
            logger.error(
                "Vision API HTTP error",
                extra={"status_code": response.status_code, "error_message": message},
            )
            raise LabelDetectionError(message)

        return self._parse_response(data)

    def _parse_response(self, data: dict[str, Any]) -> list[LabelAnnotationDTO]:
        responses = data.get("responses") or [{}]
        result = responses[0]

        message = self._error_message(result)
        if message:
            logger.error("Vision API annotate error", extra={"error_message": message})
            raise LabelDetectionError(message)

        return [
            LabelAnnotationDTO(
                description=annotation["description"],
                score=annotation.get("score"),
            )
            for annotation in result.get("labelAnnotations", [])
        ]

    @staticmethod
    def _error_message(data: dict[str, Any]) -> str | None:
        error = data.get("error")
        if isinstance(error, dict):
            return error.get("message") or None
        return None

    @staticmethod
    def _safe_json(response: httpx.Response) -> dict[str, Any]:
        try:
            data = response.json()
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {}

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None
