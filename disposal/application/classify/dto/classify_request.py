"""Classify Waste Request DTO."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ClassifyWasteRequest:
    """분류 요청 DTO.

    필드 누락 여부는 ClassifyWasteCommand에서 검증합니다.
    """

    image_base64: str | None
    latitude: float | None
    longitude: float | None
