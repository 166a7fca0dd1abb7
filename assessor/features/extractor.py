from __future__ import annotations

from typing import TypeVar

from assessor.schemas.features import FeatureRecord, SkillRatings, TaskComposition
from assessor.taxonomy.categories import (
    EducationLevel,
    ExperienceLevel,
    IncomeBracket,
    Industry,
    LocationClass,
    OccupationType,
)
from assessor.taxonomy.tables import AGE_RISK_MULTIPLIERS, BASE_DEMOGRAPHIC_RISK

# Tables are scanned in declared order; the first category with a hit wins.
_OCCUPATION_KEYWORDS: dict[OccupationType, tuple[str, ...]] = {
    OccupationType.ADMINISTRATIVE_CLERICAL: ("admin", "clerical", "assistant", "coordinator", "office"),
    OccupationType.SALES_MARKETING: ("sales", "marketing", "business development", "account"),
    OccupationType.SOFTWARE_DEVELOPMENT: ("developer", "programmer", "software", "engineer", "coding"),
    OccupationType.CUSTOMER_SERVICE: ("customer", "support", "service", "help desk"),
    OccupationType.DATA_ANALYSIS: ("data", "analyst", "analytics", "insights", "reporting"),
    OccupationType.HEALTHCARE_DIRECT: ("nurse", "doctor", "medical", "patient", "healthcare"),
    OccupationType.PHYSICAL_TRADES: ("plumber", "electrician", "mechanic", "construction", "carpenter"),
    OccupationType.EDUCATION: ("teacher", "instructor", "professor", "educator", "training"),
}

_INDUSTRY_KEYWORDS: dict[Industry, tuple[str, ...]] = {
    Industry.IT_TECHNOLOGY: ("tech", "software", "it", "digital", "cloud"),
    Industry.HEALTHCARE: ("health", "medical", "hospital", "clinic", "patient"),
    Industry.FINANCE: ("finance", "banking", "investment", "accounting"),
    Industry.EDUCATION: ("education", "school", "university", "learning"),
    Industry.MANUFACTURING: ("manufacturing", "production", "factory", "assembly"),
    Industry.MARKETING_SALES: ("marketing", "sales", "advertising", "brand"),
}

_EDUCATION_KEYWORDS: tuple[tuple[EducationLevel, tuple[str, ...]], ...] = (
    (EducationLevel.MASTERS_PHD, ("phd", "doctorate")),
    (EducationLevel.MASTERS_PHD, ("master", "mba")),
    (EducationLevel.BACHELORS, ("bachelor", "degree")),
    (EducationLevel.SOME_COLLEGE, ("associate", "college")),
    (EducationLevel.HIGH_SCHOOL, ("high school", "diploma")),
)

_LOCATION_KEYWORDS: tuple[tuple[LocationClass, tuple[str, ...]], ...] = (
    (LocationClass.MAJOR_TECH_HUB, ("san francisco", "seattle", "austin")),
    (LocationClass.LARGE_URBAN, ("new york", "los angeles", "chicago")),
    (LocationClass.MID_URBAN, ("city",)),
    (LocationClass.SMALL_URBAN, ("town",)),
    (LocationClass.RURAL, ("rural",)),
)

_HIGH_INCOME_OCCUPATIONS = frozenset(
    {OccupationType.SOFTWARE_DEVELOPMENT, OccupationType.DATA_ANALYSIS, OccupationType.MANAGEMENT}
)
_LOW_INCOME_OCCUPATIONS = frozenset({OccupationType.CUSTOMER_SERVICE, OccupationType.ADMINISTRATIVE_CLERICAL})

# (component, trigger keywords, points)
_TASK_SIGNALS: tuple[tuple[str, tuple[str, ...], float], ...] = (
    ("routine", ("repetitive", "routine"), 30),
    ("routine", ("data entry", "filing"), 20),
    ("creative", ("design", "create"), 30),
    ("creative", ("innovate", "develop"), 20),
    ("social", ("team", "collaborate"), 30),
    ("social", ("customer", "client"), 20),
    ("physical", ("physical", "manual"), 40),
    ("physical", ("operate", "equipment"), 20),
    ("analytical", ("analyze", "research"), 30),
    ("analytical", ("problem", "solve"), 20),
)

_SKILL_BASE = 5.0
_SKILL_MAX = 10.0
_SKILL_SIGNALS: tuple[tuple[str, tuple[str, ...], float], ...] = (
    ("social_intelligence", ("leadership", "manage"), 2),
    ("social_intelligence", ("negotiate", "communicate"), 1),
    ("creativity", ("creative", "innovate"), 2),
    ("creativity", ("design", "develop"), 1),
    ("problem_solving", ("problem", "solve"), 2),
    ("problem_solving", ("analyze", "strategic"), 1),
)

_T = TypeVar("_T")


def _contains_any(text: str, keywords: tuple[str, ...]) -> bool:
    return any(keyword in text for keyword in keywords)


def _first_match(text: str, table, default: _T) -> _T:
    items = table.items() if isinstance(table, dict) else table
    for category, keywords in items:
        if _contains_any(text, keywords):
            return category
    return default


def detect_occupation_type(content: str) -> OccupationType:
    return _first_match(content.lower(), _OCCUPATION_KEYWORDS, OccupationType.fallback())


def detect_industry(content: str) -> Industry:
    return _first_match(content.lower(), _INDUSTRY_KEYWORDS, Industry.fallback())


def detect_education_level(content: str) -> EducationLevel:
    return _first_match(content.lower(), _EDUCATION_KEYWORDS, EducationLevel.fallback())


def detect_location_class(location: str | None) -> LocationClass:
    return _first_match((location or "").lower(), _LOCATION_KEYWORDS, LocationClass.fallback())


def estimate_income_bracket(content: str, occupation_type: OccupationType) -> IncomeBracket:
    if occupation_type in _HIGH_INCOME_OCCUPATIONS:
        return IncomeBracket.OVER_120K
    if occupation_type in _LOW_INCOME_OCCUPATIONS:
        return IncomeBracket.FROM_30K_TO_60K

    lowered = content.lower()
    if _contains_any(lowered, ("senior", "director")):
        return IncomeBracket.OVER_120K
    if _contains_any(lowered, ("entry", "junior")):
        return IncomeBracket.FROM_30K_TO_60K
    return IncomeBracket.fallback()


def analyze_task_composition(content: str) -> TaskComposition:
    """Accumulate task-cluster points, rescaling proportionally when the sum exceeds 100."""
    lowered = content.lower()
    points = {"routine": 0.0, "creative": 0.0, "social": 0.0, "physical": 0.0, "analytical": 0.0}
    for component, keywords, value in _TASK_SIGNALS:
        if _contains_any(lowered, keywords):
            points[component] += value

    total = sum(points.values())
    if total > 100:
        scale = 100 / total
        points = {component: value * scale for component, value in points.items()}
    return TaskComposition(**points)


def assess_skills(content: str) -> SkillRatings:
    lowered = content.lower()
    ratings = {"social_intelligence": _SKILL_BASE, "creativity": _SKILL_BASE, "problem_solving": _SKILL_BASE}
    for skill, keywords, increment in _SKILL_SIGNALS:
        if _contains_any(lowered, keywords):
            ratings[skill] += increment
    return SkillRatings(**{skill: min(_SKILL_MAX, value) for skill, value in ratings.items()})


def assess_demographic_risk(content: str) -> float:
    lowered = content.lower()
    risk = BASE_DEMOGRAPHIC_RISK
    if _contains_any(lowered, ("recent grad", "entry level")):
        risk *= AGE_RISK_MULTIPLIERS["16_24"]
    elif _contains_any(lowered, ("senior", "20+ years")):
        risk *= AGE_RISK_MULTIPLIERS["55_plus"]
    return risk


def detect_experience_level(content: str) -> ExperienceLevel:
    lowered = content.lower()
    if _contains_any(lowered, ("senior", "lead", "director")):
        return ExperienceLevel.SENIOR
    if _contains_any(lowered, ("junior", "entry", "graduate")):
        return ExperienceLevel.ENTRY
    return ExperienceLevel.fallback()


def extract_features(
    content: str,
    *,
    location: str | None = None,
    experience_level: ExperienceLevel | None = None,
) -> FeatureRecord:
    text = content or ""
    occupation_type = detect_occupation_type(text)
    return FeatureRecord(
        occupation_type=occupation_type,
        industry=detect_industry(text),
        education_level=detect_education_level(text),
        location_class=detect_location_class(location),
        income_bracket=estimate_income_bracket(text, occupation_type),
        task_composition=analyze_task_composition(text),
        skills=assess_skills(text),
        demographic_risk_multiplier=assess_demographic_risk(text),
        experience_level=experience_level or detect_experience_level(text),
    )
