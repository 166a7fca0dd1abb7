import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from assessor.schemas import FeatureRecord, SkillRatings  # noqa: E402
from assessor.scoring import build_citations, build_recommendations, build_timeline  # noqa: E402
from assessor.taxonomy import Industry, RiskLevel, SubjectType  # noqa: E402


def _likelihoods(timeline):
    return (
        [period.likelihood for period in timeline.short_term],
        [period.likelihood for period in timeline.medium_term],
        [period.likelihood for period in timeline.long_term],
    )


class TimelineTests(unittest.TestCase):
    def test_likelihoods_by_tier(self):
        self.assertEqual(_likelihoods(build_timeline(RiskLevel.CRITICAL)), ([85, 90], [95, 98], [95]))
        self.assertEqual(_likelihoods(build_timeline(RiskLevel.HIGH)), ([65, 75], [85, 90], [95]))
        self.assertEqual(_likelihoods(build_timeline(RiskLevel.MEDIUM)), ([40, 50], [60, 70], [95]))

    def test_low_tier_reuses_medium_likelihoods(self):
        self.assertEqual(build_timeline(RiskLevel.LOW), build_timeline(RiskLevel.MEDIUM))

    def test_periods_are_labelled(self):
        timeline = build_timeline(RiskLevel.HIGH)
        self.assertEqual([p.period for p in timeline.short_term], ["6-12 months", "12-18 months"])
        self.assertEqual([p.period for p in timeline.medium_term], ["2-3 years", "3-4 years"])
        self.assertEqual(timeline.long_term[0].period, "5-7 years")


class RecommendationTests(unittest.TestCase):
    def test_tier_items_come_first(self):
        features = FeatureRecord(
            industry=Industry.SERVICE_OPERATIONS,
            skills=SkillRatings(social_intelligence=8, creativity=8, problem_solving=8),
        )
        items = build_recommendations(40.0, RiskLevel.CRITICAL, features, SubjectType.INDIVIDUAL)
        self.assertEqual(len(items), 3)
        self.assertTrue(items[0].startswith("IMMEDIATE ACTION REQUIRED"))

    def test_skill_gaps_and_industry_are_appended(self):
        features = FeatureRecord(
            industry=Industry.HEALTHCARE,
            skills=SkillRatings(social_intelligence=5, creativity=4, problem_solving=4),
        )
        items = build_recommendations(2.0, RiskLevel.LOW, features, SubjectType.INDIVIDUAL)
        self.assertEqual(len(items), 7)
        self.assertTrue(items[0].startswith("MAINTAIN ADVANTAGE"))
        self.assertIn("interpersonal", items[3])
        self.assertIn("creative", items[4])
        self.assertIn("analytical", items[5])
        self.assertIn("patient care", items[6])

    def test_business_list_is_truncated_to_eight(self):
        features = FeatureRecord(
            industry=Industry.IT_TECHNOLOGY,
            skills=SkillRatings(social_intelligence=3, creativity=3, problem_solving=3),
        )
        items = build_recommendations(20.0, RiskLevel.HIGH, features, SubjectType.BUSINESS)
        self.assertEqual(len(items), 8)
        self.assertEqual(items[-1], "Conduct organization-wide AI readiness assessment")

    def test_citations(self):
        citations = build_citations()
        self.assertEqual(len(citations), 7)
        citations.append("mutated")
        self.assertEqual(len(build_citations()), 7)


if __name__ == "__main__":
    unittest.main()
