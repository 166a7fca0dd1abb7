from __future__ import annotations

import json
import logging
import re
from typing import Any

from pydantic import TypeAdapter, ValidationError

from assessor.schemas.insights import (
    INSIGHT_FIELDS,
    AdaptationStrategies,
    AIInsights,
    IndustryContext,
    InsightSource,
    ResearchCitation,
    TaskImpact,
    UniqueStrength,
)

logger = logging.getLogger(__name__)

_FIELD_ADAPTERS: dict[str, TypeAdapter] = {
    "task_specific_impacts": TypeAdapter(list[TaskImpact]),
    "unique_strengths": TypeAdapter(list[UniqueStrength]),
    "adaptation_strategies": TypeAdapter(AdaptationStrategies),
    "industry_context": TypeAdapter(IndustryContext),
    "research_citations": TypeAdapter(list[ResearchCitation]),
}

_FENCE_RE = re.compile(r"```(?:json)?\s*(.*?)```", re.IGNORECASE | re.DOTALL)
_TRAILING_COMMA_RE = re.compile(r",\s*([}\]])")
_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")
_DECODER = json.JSONDecoder()


def _snake(key: str) -> str:
    return _CAMEL_RE.sub("_", key).lower()


def normalize_keys(value: Any) -> Any:
    if isinstance(value, dict):
        return {(_snake(k) if isinstance(k, str) else k): normalize_keys(v) for k, v in value.items()}
    if isinstance(value, list):
        return [normalize_keys(item) for item in value]
    return value


def _load_object(text: str) -> dict[str, Any] | None:
    try:
        parsed = json.loads(text)
    except (ValueError, TypeError, RecursionError):
        return None
    return parsed if isinstance(parsed, dict) else None


def repair_json(text: str) -> str:
    """Strip code fences and surrounding prose, then drop trailing commas."""
    candidate = text.strip()
    fenced = _FENCE_RE.search(candidate)
    if fenced:
        candidate = fenced.group(1).strip()
    start = candidate.find("{")
    end = candidate.rfind("}")
    if start != -1 and end > start:
        candidate = candidate[start : end + 1]
    return _TRAILING_COMMA_RE.sub(r"\1", candidate)


def _key_patterns(field: str) -> tuple[str, ...]:
    parts = field.split("_")
    camel = parts[0] + "".join(part.capitalize() for part in parts[1:])
    return (field, camel) if camel != field else (field,)


def extract_fields(text: str) -> dict[str, Any]:
    """Recover individual top-level values from text that does not parse as a whole."""
    recovered: dict[str, Any] = {}
    for field in INSIGHT_FIELDS:
        for key in _key_patterns(field):
            match = re.search(rf'"{re.escape(key)}"\s*:\s*', text)
            if not match:
                continue
            try:
                value, _ = _DECODER.raw_decode(text, match.end())
            except (ValueError, RecursionError):
                continue
            recovered[field] = value
            break
    return recovered


def _validated_fields(payload: dict[str, Any]) -> dict[str, Any]:
    normalized = normalize_keys(payload)
    valid: dict[str, Any] = {}
    for field, adapter in _FIELD_ADAPTERS.items():
        if field not in normalized or normalized[field] is None:
            continue
        try:
            valid[field] = adapter.validate_python(normalized[field])
        except ValidationError:
            logger.debug("insight_field_invalid field=%s", field)
    return valid


def _merge(valid: dict[str, Any], fallback: AIInsights, source: InsightSource) -> AIInsights:
    values = {field: valid.get(field, getattr(fallback, field)) for field in INSIGHT_FIELDS}
    return AIInsights(**values, source=source)


def parse_insights(text: str, fallback: AIInsights) -> AIInsights:
    """Parse model output in layers: strict JSON, repaired JSON, per-field recovery, fallback.

    Fields that are missing or fail validation are taken from ``fallback``; a
    result with any such gap is tagged ``partial``.
    """
    layers: tuple[tuple[InsightSource, Any], ...] = (
        ("model", lambda: _load_object(text)),
        ("repaired", lambda: _load_object(repair_json(text))),
        ("partial", lambda: extract_fields(repair_json(text)) or extract_fields(text) or None),
    )

    for source, load in layers:
        payload = load() if text and text.strip() else None
        if payload is None:
            continue
        valid = _validated_fields(payload)
        if not valid:
            continue
        resolved: InsightSource = source if len(valid) == len(INSIGHT_FIELDS) else "partial"
        logger.info(
            "insights_parsed source=%s fields=%s/%s",
            resolved,
            len(valid),
            len(INSIGHT_FIELDS),
        )
        return _merge(valid, fallback, resolved)

    logger.warning("insights_unparseable length=%s", len(text or ""))
    return fallback.model_copy(update={"source": "synthetic"})
