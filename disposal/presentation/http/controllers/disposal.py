"""Disposal Controller.

- POST /api/v1/disposal/classify: 사진 분류 + 주변 시설 조회
- POST /classify-waste: 기존 클라이언트 호환 경로
- GET /api/v1/disposal/categories: 카테고리 목록
"""

from __future__ import annotations

from fastapi import APIRouter

from disposal.application.classify import ClassifyWasteRequest, FindDisposalLocationsQuery
from disposal.application.classify.services import CATEGORY_KEYWORDS
from disposal.domain.enums import WasteCategory
from disposal.presentation.http.schemas import (
    CategoryEntry,
    ClassifyWasteBody,
    ClassifyWasteResponse,
    DisposalLocationEntry,
    ErrorResponse,
)
from disposal.setup.dependencies import ClassifyWasteCommandDep

router = APIRouter(prefix="/disposal", tags=["disposal"])
legacy_router = APIRouter(tags=["disposal"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "이미지 또는 위치 누락"},
    413: {"model": ErrorResponse, "description": "이미지 크기 초과"},
    500: {"model": ErrorResponse, "description": "분류 실패"},
    503: {"model": ErrorResponse, "description": "Google API 키 미설정"},
}


@legacy_router.post(
    "/classify-waste",
    response_model=ClassifyWasteResponse,
    responses=ERROR_RESPONSES,
    summary="Classify waste (legacy path)",
)
@router.post(
    "/classify",
    response_model=ClassifyWasteResponse,
    responses=ERROR_RESPONSES,
    summary="Classify waste photo and find nearby disposal locations",
)
async def classify_waste(
    payload: ClassifyWasteBody,
    command: ClassifyWasteCommandDep,
) -> ClassifyWasteResponse:
    """사진을 분류하고 주변 배출 시설을 반환합니다."""
    location = payload.user_location
    request = ClassifyWasteRequest(
        image_base64=payload.image_base64,
        latitude=location.lat if location else None,
        longitude=location.lng if location else None,
    )

    result = await command.execute(request)

    return ClassifyWasteResponse(
        labels=list(result.labels),
        waste_type=result.category.value,
        locations=[
            DisposalLocationEntry(name=loc.name, address=loc.address, rating=loc.rating)
            for loc in result.locations
        ],
    )


@router.get(
    "/categories",
    response_model=list[CategoryEntry],
    summary="Supported waste categories",
)
def get_categories() -> list[CategoryEntry]:
    """지원하는 폐기물 카테고리 목록을 반환합니다."""
    label_keywords = dict(CATEGORY_KEYWORDS)
    return [
        CategoryEntry(
            name=category.value,
            search_keyword=FindDisposalLocationsQuery.keyword_for(category),
            label_keywords=list(label_keywords.get(category, ())),
        )
        for category in WasteCategory
    ]
