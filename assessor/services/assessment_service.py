from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import Any

from pydantic import ValidationError

from assessor.ai.factory import get_text_generation_client
from assessor.core.config import Settings
from assessor.features import extract_detailed_features, extract_features
from assessor.insights import InsightAugmentor
from assessor.matching import OccupationMatcher
from assessor.schemas.assessment import (
    AssessmentInput,
    AssessmentNotice,
    AssessmentResult,
    EngineMetrics,
    EnhancedAssessmentResult,
)
from assessor.scoring import build_citations, build_recommendations, score
from assessor.taxonomy import OccupationCatalogProvider, get_default_occupation_catalog

from .enhanced import (
    build_roadmap,
    enhanced_confidence,
    identify_protective_factors,
    identify_specific_risks,
)
from .errors import AssessmentValidationError, InsightConfigurationError

logger = logging.getLogger(__name__)


def validate_input(payload: Any) -> AssessmentInput:
    """Build an AssessmentInput, reporting the first failing field as a validation error."""
    if isinstance(payload, AssessmentInput):
        return payload
    if not isinstance(payload, dict):
        raise AssessmentValidationError("Request body must be a JSON object")
    try:
        return AssessmentInput.model_validate(payload)
    except ValidationError as exc:
        errors = exc.errors()
        first = errors[0] if errors else {}
        ctx_error = (first.get("ctx") or {}).get("error")
        message = str(ctx_error) if ctx_error else first.get("msg", "Invalid assessment input")
        raise AssessmentValidationError(message) from exc


class AssessmentEngine:
    """Runs the scoring pipeline and, when configured, the insight augmentation layer."""

    def __init__(
        self,
        catalog: OccupationCatalogProvider,
        augmentor: InsightAugmentor | None = None,
        *,
        current_year: int | None = None,
    ) -> None:
        self._matcher = OccupationMatcher(catalog)
        self._augmentor = augmentor
        self._current_year = current_year
        self.request_count = 0

    @property
    def enhanced_available(self) -> bool:
        return self._augmentor is not None

    @property
    def augmentor(self) -> InsightAugmentor | None:
        return self._augmentor

    def assess_base(self, assessment_input: AssessmentInput) -> AssessmentResult:
        features = extract_features(
            assessment_input.content,
            location=assessment_input.location,
            experience_level=assessment_input.experience_level,
        )
        occupations = self._matcher.match(assessment_input.content)
        index = score(features, matched_occupations=len(occupations), current_year=self._current_year)
        return AssessmentResult(
            vulnerability_index=index,
            occupations=occupations,
            recommendations=build_recommendations(
                index.overall,
                index.risk_level,
                features,
                assessment_input.subject_type,
            ),
            citations=build_citations(),
            generated_at=datetime.now(timezone.utc),
        )

    async def assess(self, assessment_input: AssessmentInput) -> AssessmentResult | EnhancedAssessmentResult:
        started = time.perf_counter()
        self.request_count += 1
        base = self.assess_base(assessment_input)

        if not assessment_input.enhanced:
            result: AssessmentResult = base
        elif self._augmentor is None:
            missing = InsightConfigurationError("OpenAI API key not configured for enhanced analysis")
            result = base.model_copy(
                update={
                    "notice": AssessmentNotice(
                        code=missing.code,
                        message=missing.message,
                        suggestion=missing.suggestion,
                    )
                }
            )
        else:
            result = await self._enhance(assessment_input, base)

        logger.info(
            "assessment_completed subject=%s content_len=%s overall=%s risk=%s enhanced=%s latency_ms=%s",
            assessment_input.subject_type.value,
            len(assessment_input.content),
            result.vulnerability_index.overall,
            result.vulnerability_index.risk_level.value,
            result.enhanced_analysis,
            int((time.perf_counter() - started) * 1000),
        )
        return result

    async def _enhance(self, assessment_input: AssessmentInput, base: AssessmentResult) -> EnhancedAssessmentResult:
        detailed = extract_detailed_features(assessment_input.content)
        insights = await self._augmentor.augment(assessment_input, base, detailed)
        return EnhancedAssessmentResult(
            vulnerability_index=base.vulnerability_index,
            occupations=base.occupations,
            recommendations=base.recommendations,
            citations=base.citations,
            generated_at=base.generated_at,
            ai_insights=insights,
            specific_risk_factors=identify_specific_risks(detailed, base.vulnerability_index),
            protective_factors=identify_protective_factors(detailed, insights),
            customized_roadmap=build_roadmap(insights),
            confidence_score=enhanced_confidence(base, detailed, insights),
            detailed_features=detailed,
        )

    def get_metrics(self) -> EngineMetrics:
        augmentor = self._augmentor
        if augmentor is None:
            return EngineMetrics(request_count=self.request_count, enhanced_available=False)
        return EngineMetrics(
            request_count=self.request_count,
            cache_hit_rate=augmentor.cache_hit_rate,
            total_tokens=augmentor.total_tokens,
            total_cost=augmentor.total_cost,
            cache_size=len(augmentor.cache),
            queue_size=augmentor.batcher.queue_size,
            cache_hits=augmentor.cache_hits,
            cache_misses=augmentor.cache_misses,
            batches_dispatched=augmentor.batcher.batches_dispatched,
            fallback_count=augmentor.fallback_count,
            enhanced_available=True,
        )

    async def aclose(self) -> None:
        if self._augmentor is not None:
            await self._augmentor.aclose()


def build_assessment_engine(
    settings: Settings,
    *,
    catalog: OccupationCatalogProvider | None = None,
) -> AssessmentEngine:
    client = get_text_generation_client(settings)
    augmentor = InsightAugmentor(client) if client is not None else None
    if augmentor is None:
        logger.warning("assessment_engine_base_only reason=insights_not_configured")
    engine = AssessmentEngine(catalog or get_default_occupation_catalog(), augmentor)
    logger.info("assessment_engine_ready enhanced=%s model=%s", engine.enhanced_available, settings.ai_model)
    return engine
