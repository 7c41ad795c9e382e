"""외부 서비스 관련 예외."""

from disposal.application.common.exceptions.base import ApplicationError

DEFAULT_FAILURE_MESSAGE = "Failed to classify image"


class UpstreamError(ApplicationError):
    """외부 서비스 호출 실패."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or DEFAULT_FAILURE_MESSAGE)


class LabelDetectionError(UpstreamError):
    """Vision API가 오류를 반환함."""


class ClassificationFailedError(UpstreamError):
    """라벨 추출 단계 실패. 요청 전체가 실패합니다."""


class ServiceUnavailableError(ApplicationError):
    """외부 API 키가 설정되지 않아 서비스를 사용할 수 없음."""

    def __init__(self, provider: str) -> None:
        self.provider = provider
        super().__init__(f"{provider} API key not configured")
