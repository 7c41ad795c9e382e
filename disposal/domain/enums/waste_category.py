"""Waste Category Enum."""

from enum import Enum


class WasteCategory(str, Enum):
    """폐기물 분류 카테고리.

    값은 API 응답의 wasteType 문자열로 그대로 노출됩니다.
    """

    RECYCLABLE = "Recyclable"
    HAZARDOUS = "Hazardous"
    DONATABLE = "Donatable"
    ORGANIC = "Organic"
    GENERAL = "General Waste"
