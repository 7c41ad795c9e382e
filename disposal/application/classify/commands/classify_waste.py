"""Classify Waste Command.

Workflow:
    1. 요청 검증 (이미지, 좌표) - 실패 시 외부 호출 없음
    2. Vision 라벨 감지
    3. 라벨 소문자 정규화 → 카테고리 분류
    4. 주변 시설 조회
    5. ClassificationResult 조립
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from disposal.application.classify.dto import ClassifyWasteRequest
from disposal.application.classify.services import WasteClassifierService
from disposal.application.common.exceptions import (
    ClassificationFailedError,
    ImageDataRequiredError,
    ImageTooLargeError,
    ServiceUnavailableError,
    UserLocationRequiredError,
)
from disposal.domain.value_objects import ClassificationResult, Coordinate

if TYPE_CHECKING:
    from disposal.application.classify.queries import FindDisposalLocationsQuery
    from disposal.application.ports.label_detector import LabelDetectorPort

logger = logging.getLogger(__name__)


class ClassifyWasteCommand:
    """폐기물 사진 분류 Command.

    요청 검증은 API 키 확인보다 먼저 수행합니다.
    라벨 감지 실패는 ClassificationFailedError로 전파하고,
    시설 조회 실패는 FindDisposalLocationsQuery 내부에서 빈 목록으로 흡수됩니다.
    """

    def __init__(
        self,
        label_detector: "LabelDetectorPort | None",
        locations_query: "FindDisposalLocationsQuery",
        max_image_length: int | None = None,
    ) -> None:
        self._label_detector = label_detector
        self._locations_query = locations_query
        self._max_image_length = max_image_length

    async def execute(self, request: ClassifyWasteRequest) -> ClassificationResult:
        """분류 요청을 실행합니다.

        Raises:
            ImageDataRequiredError: 이미지 누락
            UserLocationRequiredError: lat/lng 누락
            ImageTooLargeError: 이미지 크기 초과
            ServiceUnavailableError: Vision API 키 미설정
            ClassificationFailedError: 라벨 감지 실패
        """
        image_content, position = self._validate(request)
        if self._label_detector is None:
            raise ServiceUnavailableError("Google Vision")

        try:
            annotations = await self._label_detector.detect_labels(image_content)
            labels = tuple(annotation.description.lower() for annotation in annotations)
            scores = [annotation.score for annotation in annotations]
        except Exception as e:
            logger.error("Label detection failed", extra={"error": str(e)})
            raise ClassificationFailedError(getattr(e, "message", None) or str(e)) from e

        logger.info(
            "Vision labels detected",
            extra={"labels": list(labels), "label_scores": scores},
        )

        category = WasteClassifierService.classify(labels)
        locations = await self._locations_query.execute(category, position)

        return ClassificationResult(
            labels=labels,
            category=category,
            locations=tuple(locations),
        )

    def _validate(self, request: ClassifyWasteRequest) -> tuple[str, Coordinate]:
        if not request.image_base64:
            raise ImageDataRequiredError()
        if request.latitude is None or request.longitude is None:
            raise UserLocationRequiredError()
        size = len(request.image_base64)
        if self._max_image_length is not None and size > self._max_image_length:
            raise ImageTooLargeError(size=size, limit=self._max_image_length)
        return request.image_base64, Coordinate(
            latitude=request.latitude,
            longitude=request.longitude,
        )
