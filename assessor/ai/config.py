from dataclasses import dataclass

from assessor.core.config import Settings


@dataclass(frozen=True)
class AIConfig:
    provider: str
    model: str
    api_key: str | None
    base_url: str | None
    timeout_s: float
    max_retries: int
    call_timeout_s: float


def load_ai_config(settings: Settings) -> AIConfig:
    return AIConfig(
        provider="openai",
        model=settings.ai_model,
        api_key=(settings.openai_api_key or "").strip() or None,
        base_url=settings.openai_base_url,
        timeout_s=settings.openai_timeout_s,
        max_retries=settings.openai_max_retries,
        call_timeout_s=settings.insights_call_timeout_s,
    )
