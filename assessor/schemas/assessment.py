from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from assessor.taxonomy.categories import ExperienceLevel, RiskLevel, SubjectType

from .features import DetailedFeatures
from .insights import AIInsights
from .occupations import MatchedOccupation

MIN_CONTENT_LENGTH = 50
MAX_CONTENT_LENGTH = 50_000
MAX_LOCATION_LENGTH = 100


class AssessmentInput(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    content: str = Field(default="", validate_default=True)
    subject_type: SubjectType = Field(
        default=None,
        validate_default=True,
        validation_alias=AliasChoices("type", "userType", "subject_type"),
    )
    location: str | None = None
    experience_level: ExperienceLevel | None = Field(
        default=None,
        validation_alias=AliasChoices("experienceLevel", "experience_level"),
    )
    enhanced: bool = True

    @field_validator("content", mode="before")
    @classmethod
    def _validate_content(cls, value: Any) -> str:
        if not value or not isinstance(value, str):
            raise ValueError("Content is required and must be a string")
        if len(value) < MIN_CONTENT_LENGTH:
            raise ValueError(
                f"Content must be at least {MIN_CONTENT_LENGTH} characters long for meaningful analysis"
            )
        if len(value) > MAX_CONTENT_LENGTH:
            raise ValueError("Content must be less than 50,000 characters")
        if len(value.strip()) < MIN_CONTENT_LENGTH:
            raise ValueError("Content appears to be empty or insufficient")
        return value

    @field_validator("subject_type", mode="before")
    @classmethod
    def _validate_subject_type(cls, value: Any) -> str:
        if isinstance(value, SubjectType):
            return value
        if not isinstance(value, str) or value not in {item.value for item in SubjectType}:
            raise ValueError('Type must be either "individual" or "business"')
        return value

    @field_validator("location", mode="before")
    @classmethod
    def _normalize_location(cls, value: Any) -> str | None:
        if not isinstance(value, str):
            return None
        trimmed = value.strip()[:MAX_LOCATION_LENGTH]
        return trimmed or None

    @field_validator("experience_level", mode="before")
    @classmethod
    def _normalize_experience_level(cls, value: Any) -> str | None:
        if isinstance(value, ExperienceLevel):
            return value
        if isinstance(value, str) and value in {item.value for item in ExperienceLevel}:
            return value
        return None


class TimelinePeriod(BaseModel):
    period: str
    likelihood: int = Field(ge=0, le=100)
    description: str
    impact: str


class Timeline(BaseModel):
    short_term: list[TimelinePeriod] = Field(default_factory=list)
    medium_term: list[TimelinePeriod] = Field(default_factory=list)
    long_term: list[TimelinePeriod] = Field(default_factory=list)


class VulnerabilityBreakdown(BaseModel):
    automation: int = Field(ge=0, le=100)
    skill_transfer: int = Field(ge=0, le=100)
    geographic: int = Field(ge=0, le=100)
    demographic: int = Field(ge=0, le=100)


class VulnerabilityIndex(BaseModel):
    model_config = ConfigDict(frozen=True)

    overall: float = Field(ge=0.0, le=100.0)
    breakdown: VulnerabilityBreakdown
    risk_level: RiskLevel
    time_to_impact: int = Field(description="Months until significant impact.")
    confidence: int = Field(ge=0, le=100)
    timeline: Timeline


class AssessmentNotice(BaseModel):
    code: str
    message: str
    suggestion: str


class AssessmentResult(BaseModel):
    vulnerability_index: VulnerabilityIndex
    occupations: list[MatchedOccupation] = Field(default_factory=list, max_length=5)
    recommendations: list[str] = Field(default_factory=list)
    citations: list[str] = Field(default_factory=list)
    generated_at: datetime
    enhanced_analysis: bool = False
    notice: AssessmentNotice | None = None


class RoadmapPhase(BaseModel):
    phase: str
    timeline: str
    actions: list[str] = Field(default_factory=list)
    expected_outcome: str


class EnhancedAssessmentResult(AssessmentResult):
    enhanced_analysis: bool = True
    ai_insights: AIInsights
    specific_risk_factors: list[str] = Field(default_factory=list)
    protective_factors: list[str] = Field(default_factory=list)
    customized_roadmap: list[RoadmapPhase] = Field(default_factory=list)
    confidence_score: int = Field(ge=0, le=100)
    detailed_features: DetailedFeatures


class EngineMetrics(BaseModel):
    request_count: int = 0
    cache_hit_rate: float = Field(default=0.0, ge=0.0, le=1.0)
    total_tokens: int = 0
    total_cost: float = 0.0
    cache_size: int = 0
    queue_size: int = 0
    cache_hits: int = 0
    cache_misses: int = 0
    batches_dispatched: int = 0
    fallback_count: int = 0
    enhanced_available: bool = False
