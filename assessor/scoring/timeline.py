from __future__ import annotations

from assessor.schemas.assessment import Timeline, TimelinePeriod
from assessor.schemas.features import FeatureRecord
from assessor.taxonomy.categories import Industry, RiskLevel, SubjectType
from assessor.taxonomy.research import RESEARCH_CITATIONS

MAX_RECOMMENDATIONS = 8

# period, description, impact, likelihood by tier (critical, high, other)
_SHORT_TERM = (
    ("6-12 months", "Initial AI tool adoption begins in your role",
     "Workflow adjustments and learning curve", (85, 65, 40)),
    ("12-18 months", "AI becomes standard in industry practices",
     "Skill requirements begin shifting", (90, 75, 50)),
)
_MEDIUM_TERM = (
    ("2-3 years", "Significant role transformation underway",
     "Major responsibilities evolve or transfer to AI", (95, 85, 60)),
    ("3-4 years", "Industry reaches AI integration maturity",
     "New role definitions and career paths emerge", (98, 90, 70)),
)
# Long-term likelihood does not vary with the risk tier.
_LONG_TERM = (
    ("5-7 years", "Complete human-AI collaboration model established",
     "Fundamental industry transformation complete", (95, 95, 95)),
)

_TIER_RECOMMENDATIONS: dict[RiskLevel, tuple[str, str, str]] = {
    RiskLevel.CRITICAL: (
        "IMMEDIATE ACTION REQUIRED: Begin career transition planning within 3-6 months",
        "Focus on developing AI-complementary skills that cannot be automated",
        "Consider pivoting to AI oversight, quality assurance, or human-AI collaboration roles",
    ),
    RiskLevel.HIGH: (
        "PROACTIVE ADAPTATION NEEDED: Start upskilling within 12 months",
        "Develop expertise in AI tool management and prompt engineering",
        "Build unique human skills: creativity, empathy, complex reasoning",
    ),
    RiskLevel.MEDIUM: (
        "STRATEGIC POSITIONING: Plan career evolution over 2-3 years",
        "Become an AI implementation leader in your organization",
        "Develop hybrid expertise combining domain knowledge with AI literacy",
    ),
    RiskLevel.LOW: (
        "MAINTAIN ADVANTAGE: Leverage AI as a productivity multiplier",
        "Focus on high-level strategy and human-centric responsibilities",
        "Mentor others through AI transformation",
    ),
}

_INDUSTRY_RECOMMENDATIONS: dict[Industry, str] = {
    Industry.IT_TECHNOLOGY: "Specialize in AI ethics, system architecture, or AI safety",
    Industry.HEALTHCARE: "Focus on patient care coordination and AI-assisted diagnostics",
    Industry.FINANCE: "Develop expertise in AI governance and algorithmic risk management",
    Industry.EDUCATION: "Become expert in personalized AI-enhanced learning design",
    Industry.MANUFACTURING: "Master human-robot collaboration and AI quality control",
}

_BUSINESS_RECOMMENDATIONS = (
    "Conduct organization-wide AI readiness assessment",
    "Develop comprehensive employee reskilling programs",
    "Establish AI governance and ethical use frameworks",
)


def _likelihood(risk_level: RiskLevel, values: tuple[int, int, int]) -> int:
    critical, high, other = values
    if risk_level == RiskLevel.CRITICAL:
        return critical
    if risk_level == RiskLevel.HIGH:
        return high
    # low shares the medium constants
    return other


def _periods(risk_level: RiskLevel, rows) -> list[TimelinePeriod]:
    return [
        TimelinePeriod(
            period=period,
            likelihood=_likelihood(risk_level, values),
            description=description,
            impact=impact,
        )
        for period, description, impact, values in rows
    ]


def build_timeline(risk_level: RiskLevel) -> Timeline:
    return Timeline(
        short_term=_periods(risk_level, _SHORT_TERM),
        medium_term=_periods(risk_level, _MEDIUM_TERM),
        long_term=_periods(risk_level, _LONG_TERM),
    )


def build_recommendations(
    score: float,
    risk_level: RiskLevel,
    features: FeatureRecord,
    subject_type: SubjectType,
) -> list[str]:
    """Tier actions first, then skill gaps, industry advice and business items; at most eight."""
    recommendations = list(_TIER_RECOMMENDATIONS[risk_level])

    skills = features.skills
    if skills.social_intelligence < 6:
        recommendations.append("Develop interpersonal and leadership skills - these remain uniquely human")
    if skills.creativity < 5:
        recommendations.append("Enhance creative problem-solving abilities through design thinking training")
    if skills.problem_solving < 5:
        recommendations.append("Build complex analytical and strategic thinking capabilities")

    industry_item = _INDUSTRY_RECOMMENDATIONS.get(features.industry)
    if industry_item:
        recommendations.append(industry_item)

    if subject_type == SubjectType.BUSINESS:
        recommendations.extend(_BUSINESS_RECOMMENDATIONS)

    return recommendations[:MAX_RECOMMENDATIONS]


def build_citations() -> list[str]:
    return list(RESEARCH_CITATIONS)
