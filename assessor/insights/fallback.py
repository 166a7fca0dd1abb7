"""Deterministic insights used when the model is unavailable or returns unusable fields."""

from __future__ import annotations

from assessor.schemas.assessment import AssessmentResult
from assessor.schemas.features import DetailedFeatures
from assessor.schemas.insights import (
    AdaptationStrategies,
    AIInsights,
    IndustryContext,
    ResearchCitation,
    TaskImpact,
    UniqueStrength,
)
from assessor.taxonomy.categories import ManagementLevel


def default_task_impacts(features: DetailedFeatures) -> list[TaskImpact]:
    return [
        TaskImpact(
            task=task,
            current_method="Manual process",
            ai_method="AI-assisted automation",
            impact_percentage=40,
            timeframe="12-24 months",
            mitigation="Develop oversight and quality control expertise",
        )
        for task in features.specific_activities[:3]
    ]


def default_strengths(features: DetailedFeatures) -> list[UniqueStrength]:
    strengths: list[UniqueStrength] = []
    if features.management_level != ManagementLevel.INDIVIDUAL:
        strengths.append(
            UniqueStrength(
                strength="Leadership and team management",
                why_it_matters="AI cannot replace human leadership and empathy",
                how_to_leverage="Focus on strategic decisions and team development",
            )
        )
    if features.years_experience > 5:
        strengths.append(
            UniqueStrength(
                strength="Deep domain expertise",
                why_it_matters="Contextual knowledge AI lacks",
                how_to_leverage="Become AI trainer and quality validator in your domain",
            )
        )
    strengths.append(
        UniqueStrength(
            strength="Human creativity and intuition",
            why_it_matters="AI follows patterns, humans create new ones",
            how_to_leverage="Focus on innovative problem-solving and creative solutions",
        )
    )
    return strengths


def default_strategies() -> AdaptationStrategies:
    return AdaptationStrategies(
        immediate=[
            "Learn to use ChatGPT, Claude, or Copilot for your daily tasks",
            "Document your unique expertise and decision-making process",
            "Start building an AI tool portfolio",
        ],
        short_term=[
            "Complete AI certification relevant to your field",
            "Lead an AI pilot project in your organization",
            "Network with AI professionals in your industry",
        ],
        long_term=[
            "Position yourself as an AI-human collaboration expert",
            "Develop new service offerings around AI implementation",
            "Create intellectual property leveraging AI tools",
        ],
    )


def default_industry_context() -> IndustryContext:
    return IndustryContext(
        trend="Rapid AI adoption accelerating across all industries",
        competitive_advantage="Early adopters gaining 20-30% productivity advantages",
        emerging_roles=[
            "AI Implementation Specialist",
            "Human-AI Collaboration Designer",
            "AI Ethics and Governance Lead",
        ],
    )


def default_citations(assessment: AssessmentResult) -> list[ResearchCitation]:
    return [
        ResearchCitation(
            finding=f"{assessment.vulnerability_index.overall}% AI automation risk",
            source="Microsoft Research (2024)",
            relevance="Based on 200,000 AI conversation analysis",
        ),
        ResearchCitation(
            finding="33% wage premium for AI-skilled workers",
            source="PwC AI Jobs Barometer (2025)",
            relevance="Indicates value of AI upskilling",
        ),
        ResearchCitation(
            finding="13% of workforce needs career change by 2030",
            source="McKinsey Future of Work (2025)",
            relevance="Timeline for career adaptation",
        ),
    ]


def synthesize_insights(features: DetailedFeatures, assessment: AssessmentResult) -> AIInsights:
    return AIInsights(
        task_specific_impacts=default_task_impacts(features),
        unique_strengths=default_strengths(features),
        adaptation_strategies=default_strategies(),
        industry_context=default_industry_context(),
        research_citations=default_citations(assessment),
        source="synthetic",
    )
