from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

InsightSource = Literal["model", "repaired", "partial", "synthetic"]


class TaskImpact(BaseModel):
    task: str = ""
    current_method: str = ""
    ai_method: str = ""
    impact_percentage: float = Field(default=0.0, ge=0.0, le=100.0)
    timeframe: str = ""
    mitigation: str = ""


class UniqueStrength(BaseModel):
    strength: str
    why_it_matters: str = ""
    how_to_leverage: str = ""


class AdaptationStrategies(BaseModel):
    immediate: list[str] = Field(default_factory=list)
    short_term: list[str] = Field(default_factory=list)
    long_term: list[str] = Field(default_factory=list)


class IndustryContext(BaseModel):
    trend: str = ""
    competitive_advantage: str = ""
    emerging_roles: list[str] = Field(default_factory=list)


class ResearchCitation(BaseModel):
    finding: str
    source: str = ""
    relevance: str = ""


class AIInsights(BaseModel):
    task_specific_impacts: list[TaskImpact] = Field(default_factory=list)
    unique_strengths: list[UniqueStrength] = Field(default_factory=list)
    adaptation_strategies: AdaptationStrategies = Field(default_factory=AdaptationStrategies)
    industry_context: IndustryContext = Field(default_factory=IndustryContext)
    research_citations: list[ResearchCitation] = Field(default_factory=list)
    source: InsightSource = "model"


INSIGHT_FIELDS: tuple[str, ...] = (
    "task_specific_impacts",
    "unique_strengths",
    "adaptation_strategies",
    "industry_context",
    "research_citations",
)
