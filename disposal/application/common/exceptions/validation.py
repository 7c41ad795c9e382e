"""검증 관련 예외."""

from disposal.application.common.exceptions.base import ApplicationError


class ValidationError(ApplicationError):
    """요청 필드 누락/형식 오류. 외부 호출 전에 발생합니다."""

    def __init__(self, message: str = "Invalid request") -> None:
        super().__init__(message)


class ImageDataRequiredError(ValidationError):
    """이미지 데이터 누락."""

    def __init__(self) -> None:
        super().__init__("No image data provided")


class UserLocationRequiredError(ValidationError):
    """사용자 위치 (lat, lng) 누락."""

    def __init__(self) -> None:
        super().__init__("User location (lat, lng) is required")


class ImageTooLargeError(ValidationError):
    """이미지 페이로드 크기 초과."""

    def __init__(self, size: int, limit: int) -> None:
        self.size = size
        self.limit = limit
        super().__init__(f"Image payload too large: {size} > {limit} characters")
