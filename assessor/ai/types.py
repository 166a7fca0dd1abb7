from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class TextGenerationRequest:
    system_prompt: str
    user_prompt: str
    max_tokens: int = 1500
    temperature: float = 0.3
    json_response: bool = True


@dataclass(frozen=True)
class TextGenerationResponse:
    text: str
    prompt_tokens: int = 0
    completion_tokens: int = 0
    model: str = ""

    @property
    def total_tokens(self) -> int:
        return self.prompt_tokens + self.completion_tokens


class TextGenerationError(RuntimeError):
    code = "EXTERNAL_SERVICE_ERROR"
    status_code = 502

    def __init__(self, message: str, *, provider: str = "openai"):
        super().__init__(message)
        self.provider = provider


class TextGenerationTimeout(TextGenerationError):
    code = "TIMEOUT"
    status_code = 504


class TextGenerationRateLimited(TextGenerationError):
    code = "RATE_LIMIT"
    status_code = 429


class TextGenerationClient(Protocol):
    async def complete(self, request: TextGenerationRequest) -> TextGenerationResponse: ...
