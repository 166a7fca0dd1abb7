from .timeline import build_citations, build_recommendations, build_timeline
from .vulnerability import determine_risk_level, score, score_breakdown

__all__ = [
    "build_citations",
    "build_recommendations",
    "build_timeline",
    "determine_risk_level",
    "score",
    "score_breakdown",
]
