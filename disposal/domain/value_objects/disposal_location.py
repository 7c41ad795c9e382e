"""Disposal Location Value Object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

NOT_AVAILABLE_RATING = "N/A"


@dataclass(frozen=True, slots=True)
class DisposalLocation:
    """주변 배출/처리 시설.

    Attributes:
        name: 시설명
        address: 간략 주소 (Places vicinity)
        rating: 평점, 없으면 "N/A"
    """

    name: str
    address: str
    rating: float | str = NOT_AVAILABLE_RATING

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리로 변환 (API 응답용)."""
        return {"name": self.name, "address": self.address, "rating": self.rating}
