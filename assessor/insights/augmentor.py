from __future__ import annotations

import hashlib
import json
import logging
from dataclasses import dataclass

from assessor.ai.types import (
    TextGenerationClient,
    TextGenerationError,
    TextGenerationRequest,
)
from assessor.core.scoring_config import get_scoring_value
from assessor.schemas.assessment import AssessmentInput, AssessmentResult
from assessor.schemas.features import DetailedFeatures
from assessor.schemas.insights import AIInsights
from assessor.services.errors import InsightConfigurationError

from .batcher import RequestBatcher
from .cache import InsightCache
from .fallback import synthesize_insights
from .parser import parse_insights
from .prompts import SYSTEM_PROMPT, build_user_prompt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _InsightJob:
    key: str
    assessment: AssessmentResult
    features: DetailedFeatures
    fallback: AIInsights


def insight_cache_key(features: DetailedFeatures, content_length: int) -> str:
    material = json.dumps(
        [
            features.job_title,
            features.years_experience,
            features.management_level.value,
            features.technical_skills[:3],
            content_length,
        ],
        separators=(",", ":"),
    )
    return hashlib.sha256(material.encode("utf-8")).hexdigest()


class InsightAugmentor:
    def __init__(
        self,
        client: TextGenerationClient | None,
        *,
        cache: InsightCache | None = None,
        batch_size: int | None = None,
        debounce_s: float | None = None,
    ) -> None:
        if client is None:
            raise InsightConfigurationError("A text-generation client is required for insight augmentation.")
        self._client = client
        self._cache = cache or InsightCache(
            max_entries=int(get_scoring_value("insights.cache.max_entries", 100)),
            ttl_seconds=float(get_scoring_value("insights.cache.ttl_seconds", 3600)),
        )
        if batch_size is None:
            batch_size = int(get_scoring_value("insights.batch.size", 5))
        if debounce_s is None:
            debounce_s = float(get_scoring_value("insights.batch.debounce_ms", 100)) / 1000
        self._batcher: RequestBatcher[_InsightJob, AIInsights] = RequestBatcher(
            self._dispatch,
            batch_size=batch_size,
            debounce_s=debounce_s,
        )
        self._max_tokens = int(get_scoring_value("insights.max_tokens", 1500))
        self._temperature = float(get_scoring_value("insights.temperature", 0.3))
        self._input_price = float(get_scoring_value("insights.pricing.input_per_token", 0.0))
        self._output_price = float(get_scoring_value("insights.pricing.output_per_token", 0.0))

        self.request_count = 0
        self.cache_hits = 0
        self.cache_misses = 0
        self.total_tokens = 0
        self.total_cost = 0.0
        self.fallback_count = 0

    @property
    def cache(self) -> InsightCache:
        return self._cache

    @property
    def batcher(self) -> RequestBatcher[_InsightJob, AIInsights]:
        return self._batcher

    @property
    def cache_hit_rate(self) -> float:
        lookups = self.cache_hits + self.cache_misses
        return self.cache_hits / lookups if lookups else 0.0

    async def augment(
        self,
        assessment_input: AssessmentInput,
        base_assessment: AssessmentResult,
        features: DetailedFeatures,
    ) -> AIInsights:
        self.request_count += 1
        key = insight_cache_key(features, len(assessment_input.content))

        cached = self._cache.get(key)
        if cached is not None:
            self.cache_hits += 1
            logger.info("insight_cache_hit key=%s", key[:12])
            return cached
        self.cache_misses += 1

        fallback = synthesize_insights(features, base_assessment)
        job = _InsightJob(key=key, assessment=base_assessment, features=features, fallback=fallback)
        try:
            insights = await self._batcher.submit(job)
        except TextGenerationError as exc:
            self.fallback_count += 1
            logger.warning(
                "insight_generation_failed code=%s key=%s error=%s",
                exc.code,
                key[:12],
                exc,
            )
            return fallback
        except Exception as exc:  # noqa: BLE001 - an unusable model reply must not fail the assessment
            self.fallback_count += 1
            logger.warning(
                "insight_processing_failed key=%s error=%s: %s",
                key[:12],
                type(exc).__name__,
                exc,
            )
            return fallback

        if insights.source == "synthetic":
            self.fallback_count += 1
        else:
            self._cache.set(key, insights)
        return insights

    async def _dispatch(self, job: _InsightJob) -> AIInsights:
        request = TextGenerationRequest(
            system_prompt=SYSTEM_PROMPT,
            user_prompt=build_user_prompt(job.assessment, job.features),
            max_tokens=self._max_tokens,
            temperature=self._temperature,
        )
        try:
            response = await self._client.complete(request)
        except TextGenerationError:
            raise
        except Exception as exc:  # noqa: BLE001 - any client failure degrades to fallback insights
            raise TextGenerationError(f"{type(exc).__name__}: {exc}") from exc

        cost = response.prompt_tokens * self._input_price + response.completion_tokens * self._output_price
        self.total_tokens += response.total_tokens
        self.total_cost += cost
        logger.info(
            json.dumps(
                {
                    "event": "insight_generation",
                    "model": response.model,
                    "prompt_tokens": response.prompt_tokens,
                    "completion_tokens": response.completion_tokens,
                    "cost_usd": round(cost, 6),
                }
            )
        )
        return parse_insights(response.text, job.fallback)

    async def aclose(self) -> None:
        await self._batcher.aclose()
