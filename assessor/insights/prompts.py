from __future__ import annotations

from assessor.schemas.assessment import AssessmentResult
from assessor.schemas.features import DetailedFeatures

SYSTEM_PROMPT = """You are an expert AI impact analyst with access to:
- Microsoft Research: 200,000 AI conversation analysis showing occupation-specific impacts
- Goldman Sachs: 300M jobs affected globally, $7T economic impact projections
- McKinsey: 60-70% task automation potential, 13% workforce transitions by 2030
- PwC: 33% wage premium for AI-skilled workers
- O*NET: Comprehensive occupation and task data

Analyze the specific role and provide detailed, nuanced insights that go beyond generic advice.
Focus on concrete, actionable intelligence specific to this person's situation.
Respond with a single JSON object only."""

RESPONSE_SHAPE = """{
  "task_specific_impacts": [{"task": str, "current_method": str, "ai_method": str,
    "impact_percentage": number 0-100, "timeframe": str, "mitigation": str}],
  "unique_strengths": [{"strength": str, "why_it_matters": str, "how_to_leverage": str}],
  "adaptation_strategies": {"immediate": [str], "short_term": [str], "long_term": [str]},
  "industry_context": {"trend": str, "competitive_advantage": str, "emerging_roles": [str]},
  "research_citations": [{"finding": str, "source": str, "relevance": str}]
}"""


def _join(values: list[str], default: str) -> str:
    return ", ".join(values) if values else default


def build_user_prompt(assessment: AssessmentResult, features: DetailedFeatures) -> str:
    index = assessment.vulnerability_index
    industry = assessment.occupations[0].industry if assessment.occupations else "General"
    activities = "\n".join(f"- {activity}" for activity in features.specific_activities) or "- Not specified"

    return f"""Analyze this specific role for AI impact:

JOB DETAILS:
- Title: {features.job_title or "Not specified"}
- Experience: {features.years_experience} years
- Industry: {industry}
- Technical Skills: {_join(features.technical_skills, "Various")}
- Tools Used: {_join(features.software_tools, "Standard")}
- Management Level: {features.management_level.value}

VALIDATED ASSESSMENT RESULTS:
- Overall AI Risk: {index.overall}%
- Automation Risk: {index.breakdown.automation}%
- Time to Impact: {index.time_to_impact} months
- Risk Level: {index.risk_level.value}

SPECIFIC ACTIVITIES MENTIONED:
{activities}

Provide a detailed JSON response with exactly these keys:
{RESPONSE_SHAPE}

1. task_specific_impacts: for each major task, explain exactly how AI will change it
2. unique_strengths: 3-4 unique advantages this person has that AI cannot replicate
3. adaptation_strategies: specific actions for immediate (0-6mo), short (6-18mo) and long-term (18+mo)
4. industry_context: trends, competitive advantages and emerging roles in their industry
5. research_citations: specific data points from the research that apply to this role

Be specific, actionable, and reference actual research findings. Avoid generic advice."""
