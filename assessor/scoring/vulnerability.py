"""Weighted-formula vulnerability scoring.

final = base_vulnerability * time_factor * adoption_rate * (1 - protection) * 100

Base vulnerability combines AI applicability, task automation probability,
routine intensity and the non-physical share of work. The time factor shrinks
as the 2045 adoption horizon approaches faster in mature industries, adoption
follows current industry uptake, and protection comes from education, skills,
location and income.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from assessor.schemas.assessment import VulnerabilityBreakdown, VulnerabilityIndex
from assessor.schemas.features import FeatureRecord, SkillRatings
from assessor.taxonomy.categories import EducationLevel, LocationClass, RiskLevel
from assessor.taxonomy.tables import (
    AI_APPLICABILITY_SCORES,
    AUTOMATION_PROBABILITIES,
    AUTOMATION_REFERENCE_BY_OCCUPATION,
    DEFAULT_AI_APPLICABILITY,
    DEFAULT_AUTOMATION_PROBABILITY,
    DEFAULT_AUTOMATION_REFERENCE,
    DEFAULT_INDUSTRY_ADOPTION,
    EDUCATION_FACTORS,
    GEOGRAPHIC_FACTORS,
    INCOME_FACTORS,
    INDUSTRY_ADOPTION,
)

from .timeline import build_timeline

ADOPTION_HORIZON_YEAR = 2045
MATURITY_ACCELERATION_YEARS = 5
# Keeps the time factor finite once the horizon year is reached.
MIN_YEARS_TO_HORIZON = 1.0

RISK_THRESHOLDS: tuple[tuple[float, RiskLevel], ...] = (
    (35.0, RiskLevel.CRITICAL),
    (15.0, RiskLevel.HIGH),
    (5.0, RiskLevel.MEDIUM),
)

BASE_CONFIDENCE = 70
MAX_CONFIDENCE = 95


@dataclass(frozen=True)
class ProtectionFactors:
    education: float
    skill: float
    geographic: float
    income: float

    @property
    def total(self) -> float:
        return self.education * 0.4 + self.skill * 0.3 + self.geographic * 0.15 + self.income * 0.15


@dataclass(frozen=True)
class ScoreComponents:
    ai_applicability: float
    automation_probability: float
    routine_index: float
    base_vulnerability: float
    time_factor: float
    adoption_rate: float
    protection: ProtectionFactors
    final_score: float


def _clamp(value: float, lower: float = 0.0, upper: float = 100.0) -> float:
    return max(lower, min(upper, value))


def routine_index(routine_percentage: float) -> float:
    if routine_percentage > 60:
        return 80 + (routine_percentage - 60) * 0.5
    if routine_percentage > 30:
        return 40 + (routine_percentage - 30) * 1.33
    return routine_percentage * 1.33


def automation_probability(features: FeatureRecord) -> float:
    """Probability in [0, 1] for the occupation's reference job."""
    reference = AUTOMATION_REFERENCE_BY_OCCUPATION.get(features.occupation_type, DEFAULT_AUTOMATION_REFERENCE)
    return AUTOMATION_PROBABILITIES.get(reference, DEFAULT_AUTOMATION_PROBABILITY) / 100


def skill_factor(skills: SkillRatings) -> float:
    if skills.social_intelligence > 6:
        factor = 0.9
    elif skills.social_intelligence > 4:
        factor = 0.5
    else:
        factor = 0.2

    if skills.creativity > 5.5:
        factor += 0.8
    elif skills.creativity > 3.5:
        factor += 0.4
    else:
        factor += 0.1

    if skills.problem_solving > 5:
        factor += 0.7
    elif skills.problem_solving > 3:
        factor += 0.4
    else:
        factor += 0.2

    return factor / 3


def protection_factors(features: FeatureRecord) -> ProtectionFactors:
    return ProtectionFactors(
        education=EDUCATION_FACTORS.get(features.education_level, 0.0),
        skill=skill_factor(features.skills),
        geographic=GEOGRAPHIC_FACTORS.get(features.location_class, 0.0),
        income=INCOME_FACTORS.get(features.income_bracket, 0.0),
    )


def time_factor(features: FeatureRecord, current_year: int) -> float:
    adoption = INDUSTRY_ADOPTION.get(features.industry, DEFAULT_INDUSTRY_ADOPTION)
    years = ADOPTION_HORIZON_YEAR - current_year + adoption.maturity_score * MATURITY_ACCELERATION_YEARS
    return 1 / max(MIN_YEARS_TO_HORIZON, years)


def determine_risk_level(score: float) -> RiskLevel:
    for threshold, level in RISK_THRESHOLDS:
        if score >= threshold:
            return level
    return RiskLevel.LOW


def score_breakdown(features: FeatureRecord, *, current_year: int | None = None) -> ScoreComponents:
    year = current_year if current_year is not None else datetime.now(timezone.utc).year

    applicability = AI_APPLICABILITY_SCORES.get(features.occupation_type, DEFAULT_AI_APPLICABILITY)
    probability = automation_probability(features)
    routine = routine_index(features.task_composition.routine)
    base = (
        0.4 * applicability
        + 0.3 * probability * 100
        + 0.2 * routine
        + 0.1 * (100 - features.task_composition.physical)
    )

    factor = time_factor(features, year)
    adoption = INDUSTRY_ADOPTION.get(features.industry, DEFAULT_INDUSTRY_ADOPTION).adoption_rate
    protection = protection_factors(features)
    final = _clamp(base * factor * adoption * (1 - protection.total) * 100)

    return ScoreComponents(
        ai_applicability=applicability,
        automation_probability=probability,
        routine_index=routine,
        base_vulnerability=base,
        time_factor=factor,
        adoption_rate=adoption,
        protection=protection,
        final_score=final,
    )


def calculate_confidence(features: FeatureRecord, matched_occupations: int) -> int:
    confidence = float(BASE_CONFIDENCE)
    if features.education_level != EducationLevel.fallback():
        confidence += 5
    if features.location_class != LocationClass.fallback():
        confidence += 5
    if matched_occupations > 0:
        confidence += 10
    adoption = INDUSTRY_ADOPTION.get(features.industry)
    if adoption is not None:
        confidence += adoption.maturity_score * 10
    return round(min(MAX_CONFIDENCE, confidence))


def score(
    features: FeatureRecord,
    *,
    matched_occupations: int = 0,
    current_year: int | None = None,
) -> VulnerabilityIndex:
    components = score_breakdown(features, current_year=current_year)
    overall = round(components.final_score, 1)
    risk_level = determine_risk_level(overall)

    breakdown = VulnerabilityBreakdown(
        automation=round(_clamp(components.automation_probability * 100)),
        skill_transfer=round(_clamp(100 - components.protection.skill * 100)),
        geographic=round(_clamp(100 - components.protection.geographic * 100)),
        demographic=round(_clamp(features.demographic_risk_multiplier * 100)),
    )

    return VulnerabilityIndex(
        overall=overall,
        breakdown=breakdown,
        risk_level=risk_level,
        time_to_impact=round(12 / components.time_factor),
        confidence=calculate_confidence(features, matched_occupations),
        timeline=build_timeline(risk_level),
    )
