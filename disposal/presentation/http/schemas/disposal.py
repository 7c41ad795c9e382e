"""Disposal HTTP Schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class UserLocationPayload(BaseModel):
    """사용자 위치 스키마.

    필드 누락은 422가 아닌 400으로 응답해야 하므로 Optional로 받고
    ClassifyWasteCommand에서 검증합니다.
    """

    lat: float | None = None
    lng: float | None = None


class ClassifyWasteBody(BaseModel):
    """분류 요청 스키마."""

    model_config = ConfigDict(populate_by_name=True)

    image_base64: str | None = Field(
        default=None,
        alias="imageBase64",
        description="base64 인코딩된 이미지",
    )
    user_location: UserLocationPayload | None = Field(
        default=None,
        alias="userLocation",
        description="사용자 위치 (lat, lng)",
    )


class DisposalLocationEntry(BaseModel):
    """주변 시설 응답 스키마."""

    name: str
    address: str
    rating: float | str = Field(description='평점 또는 "N/A"')


class ClassifyWasteResponse(BaseModel):
    """분류 응답 스키마."""

    model_config = ConfigDict(populate_by_name=True)

    labels: list[str]
    waste_type: str = Field(alias="wasteType")
    locations: list[DisposalLocationEntry] = Field(max_length=3)


class CategoryEntry(BaseModel):
    """카테고리 스키마."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    search_keyword: str = Field(alias="searchKeyword")
    label_keywords: list[str] = Field(alias="labelKeywords")


class ErrorResponse(BaseModel):
    """에러 응답 스키마."""

    error: str
    code: str
