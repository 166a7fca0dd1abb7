from __future__ import annotations

import logging

from assessor.core.scoring_config import get_scoring_value
from assessor.schemas.occupations import (
    AIImpactScore,
    MatchedOccupation,
    OccupationProfile,
    ScoredWorkActivity,
    WorkActivity,
)
from assessor.taxonomy.provider import OccupationCatalogProvider
from assessor.taxonomy.research import (
    HIGH_AUGMENTATION_ACTIVITIES,
    HIGH_AUTOMATION_ACTIVITIES,
    HIGHEST_IMPACT_OCCUPATIONS,
    LOWEST_IMPACT_OCCUPATIONS,
)

logger = logging.getLogger(__name__)

_HIGH_RISK_KEYWORDS = (
    "data entry", "process", "routine", "administrative", "clerical",
    "calculate", "record", "file", "sort", "categorize",
)
_LOW_RISK_KEYWORDS = (
    "physical", "manual", "interpersonal", "supervise", "lead",
    "negotiate", "counsel", "mentor", "coordinate",
)
_AUGMENTATION_KEYWORDS = (
    "analyze", "research", "write", "communicate", "decide",
    "create", "design", "plan", "solve", "evaluate",
)
_COMPLEXITY_KEYWORDS = (
    "complex", "strategic", "advanced", "expert", "professional",
    "specialized", "technical", "analytical", "creative",
)

_INDUSTRY_LABELS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Technology", ("software", "computer", "programmer", "developer", "it", "tech", "data", "systems")),
    ("Healthcare", ("health", "medical", "nurse", "doctor", "patient", "clinical", "therapy", "dental")),
    ("Education", ("teacher", "education", "instructor", "professor", "school", "academic", "student")),
    ("Financial Services", ("finance", "bank", "accounting", "investment", "insurance", "credit", "loan")),
    ("Manufacturing", ("manufacturing", "production", "assembly", "factory", "industrial", "quality")),
    ("Retail", ("retail", "sales", "customer", "store", "merchandise", "cashier", "service")),
    ("Government", ("government", "public", "federal", "state", "municipal", "policy", "regulation")),
    ("Legal", ("legal", "law", "attorney", "court", "justice", "compliance", "paralegal")),
    ("Transportation", ("transportation", "driver", "pilot", "logistics", "shipping", "delivery")),
    ("Construction", ("construction", "building", "contractor", "electrical", "plumbing", "carpentry")),
)
DEFAULT_INDUSTRY_LABEL = "Professional Services"

_NO_ACTIVITY_SCORE = AIImpactScore(
    automation=30,
    augmentation=50,
    overall=40,
    confidence=60,
    study_basis=["general-estimates"],
    time_to_impact=48,
)


def _count_hits(text: str, keywords: tuple[str, ...]) -> int:
    return sum(1 for keyword in keywords if keyword in text)


def _names_any(text: str, names: tuple[str, ...]) -> bool:
    return any(name.lower() in text for name in names)


def _clamp(value: float, lower: float = 0.0, upper: float = 100.0) -> float:
    return max(lower, min(upper, value))


def _activity_text(activity: WorkActivity) -> str:
    return f"{activity.title} {activity.description}".lower()


def automation_risk(activity: WorkActivity) -> float:
    text = _activity_text(activity)
    risk = 40.0
    risk += _count_hits(text, _HIGH_RISK_KEYWORDS) * 15
    risk -= _count_hits(text, _LOW_RISK_KEYWORDS) * 10
    if _names_any(text, HIGH_AUTOMATION_ACTIVITIES):
        risk += 20
    return _clamp(risk)


def augmentation_potential(activity: WorkActivity) -> float:
    text = _activity_text(activity)
    potential = 50.0 + _count_hits(text, _AUGMENTATION_KEYWORDS) * 12
    if _names_any(text, HIGH_AUGMENTATION_ACTIVITIES):
        potential += 25
    return _clamp(potential)


def complexity(activity: WorkActivity) -> float:
    return min(5.0, 2 + _count_hits(_activity_text(activity), _COMPLEXITY_KEYWORDS) * 0.5)


def determine_industry_label(profile: OccupationProfile) -> str:
    text = f"{profile.title} {profile.description}".lower()
    for label, keywords in _INDUSTRY_LABELS:
        if any(keyword in text for keyword in keywords):
            return label
    return DEFAULT_INDUSTRY_LABEL


def calculate_ai_impact_score(activities: list[ScoredWorkActivity], title: str) -> AIImpactScore:
    if not activities:
        return _NO_ACTIVITY_SCORE.model_copy(deep=True)

    total_importance = sum(activity.importance for activity in activities)
    if total_importance <= 0:
        return _NO_ACTIVITY_SCORE.model_copy(deep=True)

    weighted_automation = sum(a.automation_risk * a.importance for a in activities) / total_importance
    weighted_augmentation = sum(a.augmentation_potential * a.importance for a in activities) / total_importance
    overall = round(weighted_automation * 0.4 + weighted_augmentation * 0.6)

    lowered_title = title.lower()
    confidence = 70
    if _names_any(lowered_title, HIGHEST_IMPACT_OCCUPATIONS):
        confidence += 20
    if _names_any(lowered_title, LOWEST_IMPACT_OCCUPATIONS):
        confidence += 15

    if overall >= 70:
        time_to_impact = 18
    elif overall >= 50:
        time_to_impact = 24
    elif overall <= 30:
        time_to_impact = 60
    else:
        time_to_impact = 36

    study_basis = ["microsoft-2024", "onet-29.3"]
    if confidence >= 85:
        study_basis.extend(["goldman-sachs-2023", "mckinsey-2025"])

    return AIImpactScore(
        automation=round(weighted_automation),
        augmentation=round(weighted_augmentation),
        overall=overall,
        confidence=min(95, confidence),
        study_basis=study_basis,
        time_to_impact=time_to_impact,
    )


class OccupationMatcher:
    """Scores catalog occupations against free text and attaches per-occupation AI impact."""

    def __init__(self, catalog: OccupationCatalogProvider) -> None:
        self._catalog = catalog

    def match_score(self, content: str, profile: OccupationProfile) -> float:
        lowered = (content or "").lower()
        if not lowered.strip():
            return 0.0

        weights = get_scoring_value("matching.weights", {}) or {}
        min_word_length = int(get_scoring_value("matching.description_min_word_length", 4))

        title_words = profile.title.lower().split()
        title_hits = sum(1 for word in title_words if word in lowered)
        score = (title_hits / max(1, len(title_words))) * float(weights.get("title", 0.3))

        description_words = profile.description.lower().split()
        description_hits = sum(
            1 for word in description_words if len(word) >= min_word_length and word in lowered
        )
        score += (description_hits / max(1, len(description_words))) * float(weights.get("description", 0.2))

        skill_hits = sum(1 for skill in profile.skills if skill.lower() in lowered)
        score += (skill_hits / max(1, len(profile.skills))) * float(weights.get("skills", 0.3))

        knowledge_hits = sum(1 for item in profile.knowledge if item.lower() in lowered)
        score += (knowledge_hits / max(1, len(profile.knowledge))) * float(weights.get("knowledge", 0.2))

        return min(1.0, score)

    def score_work_activities(self, profile: OccupationProfile) -> list[ScoredWorkActivity]:
        scored: list[ScoredWorkActivity] = []
        for ref in profile.work_activity_refs:
            activity = self._catalog.work_activity(ref.id)
            if activity is None:
                logger.debug("work_activity_missing occupation=%s activity=%s", profile.code, ref.id)
                continue
            scored.append(
                ScoredWorkActivity(
                    id=activity.id,
                    title=activity.title,
                    description=activity.description,
                    importance=ref.importance,
                    level=ref.level,
                    frequency=ref.frequency,
                    automation_risk=automation_risk(activity),
                    augmentation_potential=augmentation_potential(activity),
                    complexity=complexity(activity),
                )
            )
        return scored

    def _build_match(self, profile: OccupationProfile, score: float) -> MatchedOccupation:
        activities = self.score_work_activities(profile)
        return MatchedOccupation(
            code=profile.code,
            title=profile.title,
            description=profile.description,
            job_zone=profile.job_zone,
            work_activities=activities,
            tasks=list(profile.tasks),
            skills=list(profile.skills),
            knowledge=list(profile.knowledge),
            abilities=list(profile.abilities),
            education=profile.education.model_copy(),
            interests=list(profile.interests),
            work_values=list(profile.work_values),
            wages=profile.wages.model_copy(),
            employment=profile.employment,
            outlook=profile.outlook,
            ai_impact_score=calculate_ai_impact_score(activities, profile.title),
            industry=determine_industry_label(profile),
            match_score=round(score * 100),
        )

    def match(self, content: str, limit: int | None = None) -> list[MatchedOccupation]:
        if limit is None:
            limit = int(get_scoring_value("matching.default_limit", 5))
        if limit <= 0:
            return []
        threshold = float(get_scoring_value("matching.min_score", 0.2))

        candidates: list[tuple[float, OccupationProfile]] = []
        for profile in self._catalog.occupations():
            score = self.match_score(content, profile)
            if score > threshold:
                candidates.append((score, profile))

        # stable sort keeps catalog order among equal scores
        candidates.sort(key=lambda item: item[0], reverse=True)
        matches = [self._build_match(profile, score) for score, profile in candidates[:limit]]
        logger.info(
            "occupation_match candidates=%s returned=%s top=%s",
            len(candidates),
            len(matches),
            matches[0].code if matches else None,
        )
        return matches
