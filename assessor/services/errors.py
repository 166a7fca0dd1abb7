from __future__ import annotations

from dataclasses import dataclass

from assessor.ai.types import TextGenerationError

ERROR_SUGGESTIONS: dict[str, str] = {
    "VALIDATION_ERROR": "Please check your input and ensure all required fields are provided correctly.",
    "API_KEY_MISSING": "Enhanced analysis is not available. Using standard assessment algorithm.",
    "RATE_LIMIT": "You have exceeded the rate limit. Please wait a moment before trying again.",
    "TIMEOUT": "Try breaking your content into smaller sections or use a more concise version.",
    "EXTERNAL_SERVICE_ERROR": "The insight service is temporarily unavailable. Please try again shortly.",
    "UNKNOWN_ERROR": "An unexpected error occurred. Please try again or contact support if the issue persists.",
}

_DEFAULT_MESSAGES: dict[str, str] = {
    "API_KEY_MISSING": "OpenAI API key not configured for enhanced analysis",
    "RATE_LIMIT": "Rate limit exceeded. Please try again later.",
    "TIMEOUT": "Assessment timed out. Please try with shorter content.",
    "EXTERNAL_SERVICE_ERROR": "Insight service request failed",
    "UNKNOWN_ERROR": "Assessment processing failed",
}


def suggestion_for(code: str) -> str:
    return ERROR_SUGGESTIONS.get(code, ERROR_SUGGESTIONS["UNKNOWN_ERROR"])


class AssessmentError(RuntimeError):
    code = "UNKNOWN_ERROR"
    status_code = 500

    def __init__(self, message: str, *, suggestion: str | None = None):
        super().__init__(message)
        self.message = message
        self.suggestion = suggestion or suggestion_for(self.code)


class AssessmentValidationError(AssessmentError):
    code = "VALIDATION_ERROR"
    status_code = 400


class InsightConfigurationError(AssessmentError):
    code = "API_KEY_MISSING"
    status_code = 503


@dataclass(frozen=True)
class ClassifiedError:
    code: str
    status_code: int
    message: str
    suggestion: str


def classify_error(exc: BaseException) -> ClassifiedError:
    """Map any exception onto the public error taxonomy."""
    if isinstance(exc, AssessmentError):
        return ClassifiedError(exc.code, exc.status_code, exc.message, exc.suggestion)
    if isinstance(exc, TextGenerationError):
        return ClassifiedError(
            exc.code,
            exc.status_code,
            _DEFAULT_MESSAGES.get(exc.code, str(exc)),
            suggestion_for(exc.code),
        )
    return ClassifiedError(
        "UNKNOWN_ERROR",
        500,
        _DEFAULT_MESSAGES["UNKNOWN_ERROR"],
        suggestion_for("UNKNOWN_ERROR"),
    )
