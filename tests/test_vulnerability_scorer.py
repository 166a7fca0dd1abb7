import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from assessor.features import extract_features  # noqa: E402
from assessor.schemas import FeatureRecord, SkillRatings, TaskComposition  # noqa: E402
from assessor.scoring import determine_risk_level, score, score_breakdown  # noqa: E402
from assessor.scoring.vulnerability import routine_index, skill_factor  # noqa: E402
from assessor.taxonomy import (  # noqa: E402
    EducationLevel,
    IncomeBracket,
    Industry,
    LocationClass,
    OccupationType,
    RiskLevel,
)

YEAR = 2026
ADMIN_TEXT = "Entry-level administrative assistant performing data entry and filing, repetitive tasks, no degree"
NURSE_TEXT = (
    "Registered nurse with 12 years of experience providing direct patient care and physical assessments"
)


class RiskLevelTests(unittest.TestCase):
    def test_threshold_boundaries(self):
        self.assertEqual(determine_risk_level(35), RiskLevel.CRITICAL)
        self.assertEqual(determine_risk_level(34.9), RiskLevel.HIGH)
        self.assertEqual(determine_risk_level(15), RiskLevel.HIGH)
        self.assertEqual(determine_risk_level(5), RiskLevel.MEDIUM)
        self.assertEqual(determine_risk_level(4.9), RiskLevel.LOW)
        self.assertEqual(determine_risk_level(0), RiskLevel.LOW)


class ComponentTests(unittest.TestCase):
    def test_routine_index_tiers(self):
        self.assertAlmostEqual(routine_index(80), 90)
        self.assertAlmostEqual(routine_index(50), 66.6)
        self.assertAlmostEqual(routine_index(30), 39.9)
        self.assertAlmostEqual(routine_index(0), 0)

    def test_skill_factor_bands(self):
        self.assertAlmostEqual(skill_factor(SkillRatings()), (0.5 + 0.4 + 0.4) / 3)
        self.assertAlmostEqual(
            skill_factor(SkillRatings(social_intelligence=8, creativity=8, problem_solving=8)),
            (0.9 + 0.8 + 0.7) / 3,
        )
        self.assertAlmostEqual(
            skill_factor(SkillRatings(social_intelligence=1, creativity=1, problem_solving=1)),
            (0.2 + 0.1 + 0.2) / 3,
        )

    def test_breakdown_matches_formula(self):
        features = extract_features(ADMIN_TEXT)
        components = score_breakdown(features, current_year=YEAR)
        self.assertAlmostEqual(components.base_vulnerability, 0.4 * 44 + 0.3 * 96 + 0.2 * 66.6 + 0.1 * 100)
        self.assertAlmostEqual(components.time_factor, 1 / (2045 - YEAR + 0.8 * 5))
        self.assertAlmostEqual(components.adoption_rate, 0.71 * 1.15 * 0.22)
        expected = (
            components.base_vulnerability
            * components.time_factor
            * components.adoption_rate
            * (1 - components.protection.total)
            * 100
        )
        self.assertAlmostEqual(components.final_score, expected)


class ScoreTests(unittest.TestCase):
    def test_administrative_scenario_is_high_or_critical(self):
        index = score(extract_features(ADMIN_TEXT), current_year=YEAR)
        self.assertIn(index.risk_level, {RiskLevel.HIGH, RiskLevel.CRITICAL})
        self.assertEqual(index.breakdown.automation, 96)
        self.assertEqual(index.time_to_impact, 276)

    def test_nurse_scenario_is_low(self):
        index = score(extract_features(NURSE_TEXT), current_year=YEAR)
        self.assertEqual(index.risk_level, RiskLevel.LOW)
        self.assertEqual(index.breakdown.automation, 1)

    def test_risk_level_follows_overall(self):
        for text in (ADMIN_TEXT, NURSE_TEXT, "Software engineer building cloud services"):
            index = score(extract_features(text), current_year=YEAR)
            self.assertEqual(index.risk_level, determine_risk_level(index.overall))

    def test_scores_clamp_when_horizon_is_reached(self):
        index = score(extract_features(ADMIN_TEXT), current_year=2060)
        self.assertEqual(index.overall, 100)
        self.assertEqual(index.risk_level, RiskLevel.CRITICAL)
        for value in index.breakdown.model_dump().values():
            self.assertTrue(0 <= value <= 100)

    def test_identical_features_score_identically(self):
        features = extract_features(ADMIN_TEXT)
        self.assertEqual(score(features, current_year=YEAR), score(features, current_year=YEAR))

    def test_confidence_bonuses(self):
        plain = FeatureRecord(industry=Industry.SERVICE_OPERATIONS)
        self.assertEqual(score(plain, current_year=YEAR).confidence, 76)

        rich = FeatureRecord(
            occupation_type=OccupationType.SOFTWARE_DEVELOPMENT,
            industry=Industry.IT_TECHNOLOGY,
            education_level=EducationLevel.MASTERS_PHD,
            location_class=LocationClass.MAJOR_TECH_HUB,
            income_bracket=IncomeBracket.OVER_120K,
            task_composition=TaskComposition(creative=50, analytical=50),
        )
        self.assertEqual(score(rich, matched_occupations=2, current_year=YEAR).confidence, 95)

    def test_timeline_attached_for_risk_level(self):
        index = score(extract_features(ADMIN_TEXT), current_year=YEAR)
        self.assertEqual(len(index.timeline.short_term), 2)
        self.assertEqual(len(index.timeline.medium_term), 2)
        self.assertEqual(index.timeline.long_term[0].likelihood, 95)


if __name__ == "__main__":
    unittest.main()
