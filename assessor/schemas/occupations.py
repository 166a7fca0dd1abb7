from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class WorkActivity(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str


class WorkActivityRef(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    importance: float = 3.0
    level: float = 3.0
    frequency: float = 3.0


class WageStats(BaseModel):
    median: int = 0
    percentile25: int = 0
    percentile75: int = 0


class EducationRequirement(BaseModel):
    level: str = ""
    category: str = ""


class OccupationProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    title: str
    description: str
    job_zone: int = Field(default=3, ge=1, le=5)
    tasks: list[str] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    knowledge: list[str] = Field(default_factory=list)
    abilities: list[str] = Field(default_factory=list)
    education: EducationRequirement = Field(default_factory=EducationRequirement)
    interests: list[str] = Field(default_factory=list)
    work_values: list[str] = Field(default_factory=list)
    wages: WageStats = Field(default_factory=WageStats)
    employment: int = 0
    outlook: str = ""
    work_activity_refs: list[WorkActivityRef] = Field(default_factory=list)


class ScoredWorkActivity(BaseModel):
    id: str
    title: str
    description: str
    importance: float
    level: float
    frequency: float
    automation_risk: float = Field(ge=0.0, le=100.0)
    augmentation_potential: float = Field(ge=0.0, le=100.0)
    complexity: float = Field(ge=0.0, le=5.0)


class AIImpactScore(BaseModel):
    automation: int = Field(ge=0, le=100)
    augmentation: int = Field(ge=0, le=100)
    overall: int = Field(ge=0, le=100)
    confidence: int = Field(ge=0, le=100)
    study_basis: list[str] = Field(default_factory=list)
    time_to_impact: int = Field(description="Months until significant impact.")


class MatchedOccupation(BaseModel):
    code: str
    title: str
    description: str
    job_zone: int
    work_activities: list[ScoredWorkActivity] = Field(default_factory=list)
    tasks: list[str] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    knowledge: list[str] = Field(default_factory=list)
    abilities: list[str] = Field(default_factory=list)
    education: EducationRequirement = Field(default_factory=EducationRequirement)
    interests: list[str] = Field(default_factory=list)
    work_values: list[str] = Field(default_factory=list)
    wages: WageStats = Field(default_factory=WageStats)
    employment: int = 0
    outlook: str = ""
    ai_impact_score: AIImpactScore
    industry: str
    match_score: int = Field(ge=0, le=100)
