from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from assessor.taxonomy.categories import (
    EducationLevel,
    ExperienceLevel,
    IncomeBracket,
    Industry,
    LocationClass,
    ManagementLevel,
    OccupationType,
)


class TaskComposition(BaseModel):
    model_config = ConfigDict(frozen=True)

    routine: float = Field(default=0.0, ge=0.0, le=100.0)
    creative: float = Field(default=0.0, ge=0.0, le=100.0)
    social: float = Field(default=0.0, ge=0.0, le=100.0)
    physical: float = Field(default=0.0, ge=0.0, le=100.0)
    analytical: float = Field(default=0.0, ge=0.0, le=100.0)

    @property
    def total(self) -> float:
        return self.routine + self.creative + self.social + self.physical + self.analytical


class SkillRatings(BaseModel):
    model_config = ConfigDict(frozen=True)

    social_intelligence: float = Field(default=5.0, ge=0.0, le=10.0)
    creativity: float = Field(default=5.0, ge=0.0, le=10.0)
    problem_solving: float = Field(default=5.0, ge=0.0, le=10.0)


class FeatureRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    occupation_type: OccupationType = OccupationType.fallback()
    industry: Industry = Industry.fallback()
    education_level: EducationLevel = EducationLevel.fallback()
    location_class: LocationClass = LocationClass.fallback()
    income_bracket: IncomeBracket = IncomeBracket.fallback()
    task_composition: TaskComposition = Field(default_factory=TaskComposition)
    skills: SkillRatings = Field(default_factory=SkillRatings)
    demographic_risk_multiplier: float = Field(default=0.5, ge=0.0)
    experience_level: ExperienceLevel = ExperienceLevel.fallback()


class DetailedFeatures(BaseModel):
    model_config = ConfigDict(frozen=True)

    job_title: str = "Professional"
    years_experience: int = Field(default=3, ge=0)
    technical_skills: list[str] = Field(default_factory=list)
    software_tools: list[str] = Field(default_factory=list)
    management_level: ManagementLevel = ManagementLevel.fallback()
    specific_activities: list[str] = Field(default_factory=list)
    industry_keywords: list[str] = Field(default_factory=list)
    education_label: str = "Bachelors"
    certifications: list[str] = Field(default_factory=list)
