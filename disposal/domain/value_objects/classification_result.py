"""Classification Result Value Object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from disposal.domain.enums import WasteCategory
from disposal.domain.value_objects.disposal_location import DisposalLocation


@dataclass(frozen=True, slots=True)
class ClassificationResult:
    """요청 1건의 최종 분류 결과.

    Attributes:
        labels: 소문자로 정규화된 라벨 (Vision 응답 순서 유지)
        category: 분류된 폐기물 카테고리
        locations: 주변 시설 (최대 3개)
    """

    labels: tuple[str, ...]
    category: WasteCategory
    locations: tuple[DisposalLocation, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리로 변환 (API 응답용)."""
        return {
            "labels": list(self.labels),
            "wasteType": self.category.value,
            "locations": [location.to_dict() for location in self.locations],
        }
