"""Coordinate Value Object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Coordinate:
    """사용자 위치 좌표.

    범위 검증은 하지 않습니다. 값의 존재 여부만 요청 단계에서 확인합니다.
    """

    latitude: float
    longitude: float
