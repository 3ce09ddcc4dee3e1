"""Error taxonomy shared by the image client and the error classifier."""
from enum import Enum


class ErrorCategory(str, Enum):
    """User-facing failure categories for one generation request."""

    missing_credential = "missing_credential"
    no_image_in_response = "no_image_in_response"
    quota_exceeded = "quota_exceeded"
    invalid_credential = "invalid_credential"
    rate_limited = "rate_limited"
    network_error = "network_error"
    unknown = "unknown"


ERROR_MESSAGES: dict[ErrorCategory, str] = {
    ErrorCategory.missing_credential: "API 키가 필요합니다. 설정에서 API 키를 입력해주세요.",
    ErrorCategory.no_image_in_response: "이미지 데이터를 찾을 수 없습니다.",
    ErrorCategory.quota_exceeded: (
        "⚠️ API 할당량 초과: Gemini API의 무료 사용량을 초과했습니다. "
        "잠시 후 다시 시도하거나, Google AI Studio에서 사용량을 확인하세요."
    ),
    ErrorCategory.invalid_credential: (
        "🔑 API 키 오류: API 키가 유효하지 않습니다. "
        "오른쪽 상단에서 올바른 API 키를 입력해주세요."
    ),
    ErrorCategory.rate_limited: "⏱️ 요청 제한: 너무 많은 요청을 보냈습니다. 잠시 후 다시 시도해주세요.",
    ErrorCategory.network_error: "🌐 네트워크 오류: 인터넷 연결을 확인해주세요.",
    ErrorCategory.unknown: "오류: {message}",
}

GENERIC_FAILURE_MESSAGE = "실루엣 생성에 실패했습니다."


class SilhouetteError(Exception):
    """Base class for failures raised locally by the image client."""

    category: ErrorCategory = ErrorCategory.unknown

    def __init__(self, message: str | None = None) -> None:
        self.user_message = message or ERROR_MESSAGES[self.category]
        super().__init__(self.user_message)


class MissingCredentialError(SilhouetteError):
    """No API key was passed and no ambient key is configured."""

    category = ErrorCategory.missing_credential


class NoImageInResponseError(SilhouetteError):
    """The upstream response carried no inline image part."""

    category = ErrorCategory.no_image_in_response
