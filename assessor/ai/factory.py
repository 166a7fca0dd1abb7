import logging

from assessor.ai.config import load_ai_config
from assessor.ai.providers.openai_provider import OpenAIProvider
from assessor.ai.types import TextGenerationClient
from assessor.core.config import Settings

logger = logging.getLogger(__name__)


def get_text_generation_client(settings: Settings) -> TextGenerationClient | None:
    """Return a configured client, or None when insights are disabled or the key is missing."""
    if not settings.insights_configured:
        logger.info("text_generation_client_unavailable reason=missing_or_disabled_key")
        return None

    cfg = load_ai_config(settings)
    if cfg.provider == "openai":
        return OpenAIProvider(
            model=cfg.model,
            api_key=cfg.api_key or "",
            base_url=cfg.base_url,
            timeout_s=cfg.timeout_s,
            max_retries=cfg.max_retries,
            call_timeout_s=cfg.call_timeout_s,
        )

    raise ValueError(f"Unsupported AI_PROVIDER='{cfg.provider}'")
