"""Waste Classifier Service.

Vision 라벨을 기반으로 폐기물 카테고리를 분류합니다.
Port 의존성이 없는 순수 로직입니다.
"""

from __future__ import annotations

from typing import Sequence

from disposal.domain.enums import WasteCategory

# 순서가 곧 우선순위 (한 라벨이 여러 카테고리에 걸리면 앞쪽이 이김)
CATEGORY_KEYWORDS: tuple[tuple[WasteCategory, tuple[str, ...]], ...] = (
    (
        WasteCategory.RECYCLABLE,
        ("plastic bottle", "bottle", "can", "paper", "plastic", "glass", "metal"),
    ),
    (WasteCategory.HAZARDOUS, ("battery", "electronics", "chemical", "paint")),
    (WasteCategory.DONATABLE, ("clothes", "furniture", "book")),
    (WasteCategory.ORGANIC, ("food", "organic")),
)


class WasteClassifierService:
    """폐기물 분류 서비스."""

    @staticmethod
    def classify(labels: Sequence[str]) -> WasteCategory:
        """라벨 목록을 카테고리로 분류합니다.

        키워드를 부분 문자열로 포함하는 첫 번째 라벨이 결과를 결정합니다.
        대소문자를 구분하므로 호출 측에서 소문자로 정규화해야 합니다.

        Args:
            labels: Vision 라벨 (신뢰도 순)

        Returns:
            매칭되는 카테고리, 없으면 GENERAL
        """
        for label in labels:
            category = WasteClassifierService._match_label(label)
            if category is not None:
                return category
        return WasteCategory.GENERAL

    @staticmethod
    def _match_label(label: str) -> WasteCategory | None:
        for category, keywords in CATEGORY_KEYWORDS:
            if any(keyword in label for keyword in keywords):
                return category
        return None
