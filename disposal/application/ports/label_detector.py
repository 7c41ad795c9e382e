"""Label Detector Port.

이미지 라벨링 서비스 (Google Cloud Vision 등)와의 통신을 위한 포트 인터페이스.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class LabelAnnotationDTO:
    """라벨 어노테이션 DTO."""

    description: str
    score: float | None = None


class LabelDetectorPort(ABC):
    """이미지 라벨 감지 포트."""

    @abstractmethod
    async def detect_labels(self, image_content: str) -> list[LabelAnnotationDTO]:
        """이미지에서 라벨을 감지합니다.

        Args:
            image_content: base64 인코딩된 이미지

        Returns:
            신뢰도 순으로 정렬된 라벨 목록

        Raises:
            LabelDetectionError: 제공자가 오류를 반환한 경우
        """
        ...

    async def close(self) -> None:
        """리소스 정리."""
        return None
