import asyncio
import json
import sys
import unittest
from pathlib import Path
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from assessor.ai.types import TextGenerationResponse, TextGenerationTimeout  # noqa: E402
from assessor.features import extract_detailed_features  # noqa: E402
from assessor.insights import InsightAugmentor, InsightCache, insight_cache_key  # noqa: E402
from assessor.schemas import DetailedFeatures  # noqa: E402
from assessor.services.assessment_service import AssessmentEngine, validate_input  # noqa: E402
from assessor.services.errors import InsightConfigurationError  # noqa: E402
from assessor.taxonomy import get_default_occupation_catalog  # noqa: E402

CONTENT = (
    "Senior accountant with 8 years of experience. Responsible for month-end close, "
    "reconciliations and reporting in Excel and SQL."
)

MODEL_OUTPUT = json.dumps(
    {
        "taskSpecificImpacts": [{"task": "Reconciliations", "impactPercentage": 70}],
        "uniqueStrengths": [{"strength": "Client judgement"}],
        "adaptationStrategies": {"immediate": ["Automate reconciliations"], "shortTerm": [], "longTerm": []},
        "industryContext": {"trend": "Finance adopts AI quickly", "emergingRoles": ["AI Controller"]},
        "researchCitations": [{"finding": "f", "source": "s", "relevance": "r"}],
    }
)


class FakeClient:
    def __init__(self, text=MODEL_OUTPUT, error=None):
        self.text = text
        self.error = error
        self.calls = []

    async def complete(self, request):
        self.calls.append(request)
        if self.error is not None:
            raise self.error
        return TextGenerationResponse(text=self.text, prompt_tokens=100, completion_tokens=50, model="fake-model")


class InsightAugmentorTests(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.assessment_input = validate_input({"content": CONTENT, "type": "individual"})
        engine = AssessmentEngine(get_default_occupation_catalog(), current_year=2026)
        self.base = engine.assess_base(self.assessment_input)
        self.features = extract_detailed_features(CONTENT)

    def _augmentor(self, client):
        return InsightAugmentor(client, cache=InsightCache(), batch_size=1, debounce_s=0)

    async def test_model_insights_are_parsed_and_cached(self):
        client = FakeClient()
        augmentor = self._augmentor(client)

        first = await augmentor.augment(self.assessment_input, self.base, self.features)
        second = await augmentor.augment(self.assessment_input, self.base, self.features)

        self.assertEqual(first.source, "model")
        self.assertEqual(first.task_specific_impacts[0].task, "Reconciliations")
        self.assertIs(first, second)
        self.assertEqual(len(client.calls), 1)
        self.assertEqual(augmentor.cache_hits, 1)
        self.assertEqual(augmentor.cache_misses, 1)
        self.assertEqual(augmentor.cache_hit_rate, 0.5)
        self.assertEqual(augmentor.request_count, 2)

    async def test_token_and_cost_accounting(self):
        augmentor = self._augmentor(FakeClient())
        await augmentor.augment(self.assessment_input, self.base, self.features)
        self.assertEqual(augmentor.total_tokens, 150)
        self.assertAlmostEqual(augmentor.total_cost, 100 * 0.00000015 + 50 * 0.0000006)

    async def test_request_carries_prompt_and_settings(self):
        client = FakeClient()
        await self._augmentor(client).augment(self.assessment_input, self.base, self.features)
        request = client.calls[0]
        self.assertEqual(request.max_tokens, 1500)
        self.assertTrue(request.json_response)
        self.assertIn(self.features.job_title, request.user_prompt)

    async def test_client_failure_returns_uncached_fallback(self):
        client = FakeClient(error=RuntimeError("connection reset"))
        augmentor = self._augmentor(client)

        insights = await augmentor.augment(self.assessment_input, self.base, self.features)

        self.assertEqual(insights.source, "synthetic")
        self.assertTrue(insights.unique_strengths)
        self.assertEqual(augmentor.fallback_count, 1)
        self.assertEqual(len(augmentor.cache), 0)
        # once in the batch, once on the individual retry
        self.assertEqual(len(client.calls), 2)

    async def test_typed_failure_is_absorbed(self):
        augmentor = self._augmentor(FakeClient(error=TextGenerationTimeout("slow")))
        insights = await augmentor.augment(self.assessment_input, self.base, self.features)
        self.assertEqual(insights.source, "synthetic")

    async def test_unparseable_output_is_not_cached(self):
        augmentor = self._augmentor(FakeClient(text="Sorry, no JSON today."))
        insights = await augmentor.augment(self.assessment_input, self.base, self.features)
        self.assertEqual(insights.source, "synthetic")
        self.assertEqual(augmentor.fallback_count, 1)
        self.assertNotIn(insight_cache_key(self.features, len(CONTENT)), augmentor.cache)

    def test_client_is_required(self):
        with self.assertRaises(InsightConfigurationError):
            InsightAugmentor(None)

    async def test_deeply_nested_reply_degrades_to_fallback(self):
        augmentor = self._augmentor(FakeClient(text="[" * 5000 + "]" * 5000))
        insights = await augmentor.augment(self.assessment_input, self.base, self.features)
        self.assertEqual(insights.source, "synthetic")
        self.assertEqual(augmentor.fallback_count, 1)
        self.assertEqual(len(augmentor.cache), 0)

    async def test_unexpected_processing_error_degrades_to_fallback(self):
        augmentor = self._augmentor(FakeClient())
        with patch("assessor.insights.augmentor.parse_insights", side_effect=RecursionError("too deep")):
            insights = await augmentor.augment(self.assessment_input, self.base, self.features)
        self.assertEqual(insights.source, "synthetic")
        self.assertEqual(augmentor.fallback_count, 1)
        self.assertEqual(len(augmentor.cache), 0)


class TitleEchoClient:
    """Answers each prompt with insights naming the job title it was asked about."""

    def __init__(self, titles):
        self.titles = titles
        self.calls = 0

    async def complete(self, request):
        self.calls += 1
        title = next(title for title in self.titles if f"Title: {title}" in request.user_prompt)
        payload = json.loads(MODEL_OUTPUT)
        payload["industryContext"]["trend"] = f"Trend for {title}"
        return TextGenerationResponse(text=json.dumps(payload), prompt_tokens=10, completion_tokens=10, model="fake-model")


class ConcurrentAugmentationTests(unittest.IsolatedAsyncioTestCase):
    async def test_distinct_requests_in_one_window_share_a_batch(self):
        assessment_input = validate_input({"content": CONTENT, "type": "individual"})
        base = AssessmentEngine(get_default_occupation_catalog(), current_year=2026).assess_base(assessment_input)
        clerk = DetailedFeatures(job_title="Payroll Clerk", years_experience=2)
        engineer = DetailedFeatures(job_title="Data Engineer", years_experience=9)
        client = TitleEchoClient([clerk.job_title, engineer.job_title])
        augmentor = InsightAugmentor(client, cache=InsightCache(), batch_size=5, debounce_s=0.05)

        first, second = await asyncio.gather(
            augmentor.augment(assessment_input, base, clerk),
            augmentor.augment(assessment_input, base, engineer),
        )

        self.assertEqual(list(augmentor.batcher.batch_sizes), [2])
        self.assertEqual(client.calls, 2)
        self.assertEqual(first.industry_context.trend, "Trend for Payroll Clerk")
        self.assertEqual(second.industry_context.trend, "Trend for Data Engineer")
        self.assertEqual(len(augmentor.cache), 2)
        await augmentor.aclose()


class CacheKeyTests(unittest.TestCase):
    def test_key_depends_on_features_and_length(self):
        features = extract_detailed_features(CONTENT)
        key = insight_cache_key(features, 120)
        self.assertEqual(key, insight_cache_key(features, 120))
        self.assertNotEqual(key, insight_cache_key(features, 121))
        self.assertEqual(len(key), 64)


if __name__ == "__main__":
    unittest.main()
