from .assessment import (
    AssessmentInput,
    AssessmentNotice,
    AssessmentResult,
    EngineMetrics,
    EnhancedAssessmentResult,
    RoadmapPhase,
    Timeline,
    TimelinePeriod,
    VulnerabilityBreakdown,
    VulnerabilityIndex,
)
from .features import DetailedFeatures, FeatureRecord, SkillRatings, TaskComposition
from .insights import (
    AdaptationStrategies,
    AIInsights,
    IndustryContext,
    ResearchCitation,
    TaskImpact,
    UniqueStrength,
)
from .occupations import (
    AIImpactScore,
    MatchedOccupation,
    OccupationProfile,
    ScoredWorkActivity,
    WorkActivity,
    WorkActivityRef,
)

__all__ = [
    "AssessmentInput",
    "AssessmentNotice",
    "AssessmentResult",
    "EnhancedAssessmentResult",
    "EngineMetrics",
    "RoadmapPhase",
    "Timeline",
    "TimelinePeriod",
    "VulnerabilityBreakdown",
    "VulnerabilityIndex",
    "FeatureRecord",
    "DetailedFeatures",
    "SkillRatings",
    "TaskComposition",
    "AIInsights",
    "AdaptationStrategies",
    "IndustryContext",
    "ResearchCitation",
    "TaskImpact",
    "UniqueStrength",
    "AIImpactScore",
    "MatchedOccupation",
    "OccupationProfile",
    "ScoredWorkActivity",
    "WorkActivity",
    "WorkActivityRef",
]
