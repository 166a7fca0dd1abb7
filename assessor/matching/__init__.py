from .occupation_matcher import OccupationMatcher, calculate_ai_impact_score

__all__ = ["OccupationMatcher", "calculate_ai_impact_score"]
