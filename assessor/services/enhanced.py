from __future__ import annotations

from assessor.schemas.assessment import AssessmentResult, RoadmapPhase, VulnerabilityIndex
from assessor.schemas.features import DetailedFeatures
from assessor.schemas.insights import AIInsights
from assessor.taxonomy.categories import ManagementLevel

MAX_PROTECTIVE_FACTORS = 6
MAX_ENHANCED_CONFIDENCE = 95

_ROUTINE_ACTIVITY_MARKERS = ("data entry", "routine", "repetitive")
_CUSTOMER_FACING_INDUSTRIES = ("retail", "customer service")

# phase, timeline, default actions, expected outcome
_ROADMAP_PHASES = (
    (
        "Immediate",
        "0-6 months",
        (
            "Master AI tools relevant to your role",
            "Document unique value you provide",
            "Join AI-focused professional communities",
        ),
        "Position as AI-enabled professional, not AI-replaceable",
    ),
    (
        "Short-term",
        "6-18 months",
        (
            "Develop AI prompt engineering expertise",
            "Lead AI implementation projects",
            "Build cross-functional skills",
        ),
        "Become go-to person for AI integration in your domain",
    ),
    (
        "Long-term",
        "18+ months",
        (
            "Transition to AI-augmented role design",
            "Develop AI strategy expertise",
            "Create new hybrid role opportunities",
        ),
        "Secure position in AI-transformed industry landscape",
    ),
)


def identify_specific_risks(features: DetailedFeatures, vulnerability: VulnerabilityIndex) -> list[str]:
    risks: list[str] = []
    automation = vulnerability.breakdown.automation
    if automation > 70:
        risks.append(f"High automation risk: {automation}% of core tasks can be automated")
    if len(features.technical_skills) < 3:
        risks.append("Limited technical skills may accelerate displacement timeline")
    if any(
        marker in activity.lower()
        for activity in features.specific_activities
        for marker in _ROUTINE_ACTIVITY_MARKERS
    ):
        risks.append("Routine task components highly vulnerable to AI automation")
    if any(keyword in features.industry_keywords for keyword in _CUSTOMER_FACING_INDUSTRIES):
        risks.append("Industry experiencing rapid AI adoption in customer-facing roles")
    if features.years_experience < 3:
        risks.append("Early career stage increases vulnerability to AI displacement")
    return risks


def identify_protective_factors(features: DetailedFeatures, insights: AIInsights) -> list[str]:
    factors: list[str] = []
    if features.management_level != ManagementLevel.INDIVIDUAL:
        factors.append(f"{features.management_level.value} role provides human leadership advantage")
    if len(features.technical_skills) > 5:
        factors.append("Strong technical portfolio enables AI tool mastery")
    if features.certifications:
        factors.append(f"Specialized certifications ({len(features.certifications)}) create expertise moat")
    if features.years_experience > 10:
        factors.append("Deep domain expertise difficult for AI to replicate")
    factors.extend(strength.strength for strength in insights.unique_strengths)
    return factors[:MAX_PROTECTIVE_FACTORS]


def build_roadmap(insights: AIInsights) -> list[RoadmapPhase]:
    strategies = insights.adaptation_strategies
    chosen = (strategies.immediate, strategies.short_term, strategies.long_term)
    return [
        RoadmapPhase(
            phase=phase,
            timeline=timeline,
            actions=list(actions or defaults),
            expected_outcome=outcome,
        )
        for (phase, timeline, defaults, outcome), actions in zip(_ROADMAP_PHASES, chosen)
    ]


def enhanced_confidence(assessment: AssessmentResult, features: DetailedFeatures, insights: AIInsights) -> int:
    confidence = assessment.vulnerability_index.confidence
    if features.job_title != "Professional":
        confidence += 5
    if len(features.technical_skills) > 3:
        confidence += 3
    if features.certifications:
        confidence += 2
    if len(insights.research_citations) > 3:
        confidence += 5
    return min(MAX_ENHANCED_CONFIDENCE, confidence)
