from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

import openai
from openai import AsyncOpenAI

from assessor.ai.types import (
    TextGenerationError,
    TextGenerationRateLimited,
    TextGenerationRequest,
    TextGenerationResponse,
    TextGenerationTimeout,
)

logger = logging.getLogger(__name__)


class OpenAIProvider:
    def __init__(
        self,
        model: str,
        api_key: str,
        base_url: Optional[str] = None,
        timeout_s: float = 30.0,
        max_retries: int = 2,
        call_timeout_s: float = 45.0,
        client: Any = None,
    ):
        key = (api_key or "").strip()
        if not key and client is None:
            raise TextGenerationError("OPENAI_API_KEY is missing")

        self._model = model
        self._call_timeout_s = call_timeout_s
        self._client = client or AsyncOpenAI(
            api_key=key,
            base_url=base_url or None,
            timeout=timeout_s,
            max_retries=max_retries,
        )

    @property
    def model(self) -> str:
        return self._model

    async def complete(self, request: TextGenerationRequest) -> TextGenerationResponse:
        create_kwargs: dict[str, Any] = {
            "model": self._model,
            "messages": [
                {"role": "system", "content": request.system_prompt},
                {"role": "user", "content": request.user_prompt},
            ],
            "temperature": request.temperature,
            "max_tokens": request.max_tokens,
        }
        if request.json_response:
            create_kwargs["response_format"] = {"type": "json_object"}

        try:
            response = await asyncio.wait_for(
                self._client.chat.completions.create(**create_kwargs),
                timeout=self._call_timeout_s,
            )
        except asyncio.TimeoutError as exc:
            raise TextGenerationTimeout(f"completion exceeded {self._call_timeout_s}s") from exc
        except openai.APITimeoutError as exc:
            raise TextGenerationTimeout(str(exc)) from exc
        except openai.RateLimitError as exc:
            raise TextGenerationRateLimited(str(exc)) from exc
        except openai.OpenAIError as exc:
            raise TextGenerationError(f"{type(exc).__name__}: {exc}") from exc

        content = response.choices[0].message.content if response.choices else ""
        usage = getattr(response, "usage", None)
        return TextGenerationResponse(
            text=content or "",
            prompt_tokens=int(getattr(usage, "prompt_tokens", 0) or 0),
            completion_tokens=int(getattr(usage, "completion_tokens", 0) or 0),
            model=getattr(response, "model", None) or self._model,
        )
