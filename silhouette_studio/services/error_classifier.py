"""Map raw upstream failures to user-facing error categories."""
from typing import Union

from pydantic import BaseModel

from silhouette_studio.core.errors import (
    ERROR_MESSAGES,
    GENERIC_FAILURE_MESSAGE,
    ErrorCategory,
)

# Evaluated top to bottom; first rule with a matching keyword wins.
CLASSIFICATION_RULES: list[tuple[tuple[str, ...], ErrorCategory]] = [
    (("quota", "exceeded", "resource_exhausted"), ErrorCategory.quota_exceeded),
    (("api key", "invalid", "unauthorized"), ErrorCategory.invalid_credential),
    (("rate limit",), ErrorCategory.rate_limited),
    (("network", "fetch"), ErrorCategory.network_error),
]


class ClassifiedError(BaseModel):
    """Category plus the message shown to the user."""

    category: ErrorCategory
    message: str


def _raw_message(error: Union[BaseException, str, None]) -> str:
    if error is None:
        return ""
    if isinstance(error, BaseException):
        return str(error) or type(error).__name__
    return error


def classify_error(error: Union[BaseException, str, None]) -> ClassifiedError:
    """Classify an upstream failure by keyword search over its message.

    Never raises. Unknown failures echo the raw message so users can
    report it.
    """
    raw = _raw_message(error)
    lowered = raw.lower()
    for keywords, category in CLASSIFICATION_RULES:
        if any(keyword in lowered for keyword in keywords):
            return ClassifiedError(category=category, message=ERROR_MESSAGES[category])

    if not raw.strip():
        return ClassifiedError(category=ErrorCategory.unknown, message=GENERIC_FAILURE_MESSAGE)
    return ClassifiedError(
        category=ErrorCategory.unknown,
        message=ERROR_MESSAGES[ErrorCategory.unknown].format(message=raw),
    )
