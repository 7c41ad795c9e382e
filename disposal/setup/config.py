"""Disposal Service Configuration.

외부화 원칙:
- API Key → SecretStr (로깅 마스킹), 클라이언트 생성 시 주입
- CORS origins → env (콤마 구분)
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CORS_ORIGINS = "http://localhost:5173,https://localhost:5173"

# 기존 서버와 동일한 JSON body 제한 (10mb)
DEFAULT_MAX_IMAGE_BASE64_LENGTH = 10 * 1024 * 1024


class Settings(BaseSettings):
    """Disposal 서비스 설정."""

    # === Service Identity ===
    service_name: str = Field("disposal-api", description="Service name")
    service_version: str = Field("1.0.0", description="Service version")
    environment: str = Field("development", description="Environment (development, staging, prod)")
    log_level: str = Field("INFO", description="Root log level")

    # === Google API Keys (SecretStr로 로깅 마스킹) ===
    google_vision_api_key: SecretStr | None = Field(
        None,
        validation_alias=AliasChoices("GOOGLE_VISION_API_KEY", "DISPOSAL_GOOGLE_VISION_API_KEY"),
        description="Google Cloud Vision API key",
    )
    google_maps_api_key: SecretStr | None = Field(
        None,
        validation_alias=AliasChoices("GOOGLE_MAPS_API_KEY", "DISPOSAL_GOOGLE_MAPS_API_KEY"),
        description="Google Maps (Places) API key",
    )

    # === Vision API ===
    vision_api_base_url: str = Field("https://vision.googleapis.com/v1")
    vision_api_timeout: float = Field(30.0, gt=0, description="Vision API timeout (seconds)")
    vision_max_results: int | None = Field(
        None,
        ge=1,
        description="LABEL_DETECTION maxResults (미지정 시 Vision 기본값)",
    )

    # === Places API ===
    places_api_base_url: str = Field("https://maps.googleapis.com/maps/api/place")
    places_api_timeout: float = Field(10.0, gt=0, description="Places API timeout (seconds)")
    places_search_radius: int = Field(5000, ge=1, le=50000, description="Search radius (meters)")
    max_locations: int = Field(3, ge=0, le=3, description="Max locations in response")

    # === Request Limits ===
    max_image_base64_length: int = Field(
        DEFAULT_MAX_IMAGE_BASE64_LENGTH,
        ge=1,
        description="imageBase64 최대 길이 (문자 수)",
    )

    # === CORS (env 외부화) ===
    cors_origins_str: str = Field(
        DEFAULT_CORS_ORIGINS,
        description="Allowed CORS origins (콤마 구분)",
    )

    @property
    def cors_origins(self) -> list[str]:
        """CORS origins 파싱."""
        return [o.strip() for o in self.cors_origins_str.split(",") if o.strip()]

    model_config = SettingsConfigDict(
        env_prefix="DISPOSAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """캐시된 Settings 인스턴스 반환."""
    return Settings()
