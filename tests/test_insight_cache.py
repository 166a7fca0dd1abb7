import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from assessor.insights import InsightCache  # noqa: E402
from assessor.schemas import AIInsights, IndustryContext  # noqa: E402


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


def _insights(trend: str) -> AIInsights:
    return AIInsights(industry_context=IndustryContext(trend=trend))


class InsightCacheTests(unittest.TestCase):
    def setUp(self):
        self.clock = FakeClock()
        self.cache = InsightCache(max_entries=3, ttl_seconds=60, clock=self.clock)

    def test_get_returns_stored_object(self):
        data = _insights("a")
        self.cache.set("k", data)
        self.assertIs(self.cache.get("k"), data)
        self.assertIsNone(self.cache.get("missing"))

    def test_entries_expire_after_ttl(self):
        self.cache.set("k", _insights("a"))
        self.clock.now += 59.9
        self.assertIsNotNone(self.cache.get("k"))
        self.clock.now += 0.1
        self.assertIsNone(self.cache.get("k"))
        self.assertNotIn("k", self.cache)

    def test_full_cache_evicts_oldest_insertion(self):
        for key in ("a", "b", "c"):
            self.cache.set(key, _insights(key))
            self.clock.now += 1
        # reading does not refresh position
        self.cache.get("a")
        self.cache.set("d", _insights("d"))
        self.assertEqual(len(self.cache), 3)
        self.assertNotIn("a", self.cache)
        for key in ("b", "c", "d"):
            self.assertIn(key, self.cache)

    def test_overwrite_counts_as_new_insertion(self):
        for key in ("a", "b", "c"):
            self.cache.set(key, _insights(key))
        self.cache.set("a", _insights("a2"))
        self.cache.set("d", _insights("d"))
        self.assertIn("a", self.cache)
        self.assertNotIn("b", self.cache)
        self.assertEqual(self.cache.get("a").industry_context.trend, "a2")

    def test_full_cache_drops_expired_entries_before_evicting(self):
        self.cache.set("stale", _insights("stale"))
        self.clock.now += 61
        self.cache.set("b", _insights("b"))
        self.cache.set("c", _insights("c"))
        self.cache.set("d", _insights("d"))
        self.assertNotIn("stale", self.cache)
        for key in ("b", "c", "d"):
            self.assertIn(key, self.cache)

    def test_purge_expired(self):
        self.cache.set("old", _insights("old"))
        self.clock.now += 30
        self.cache.set("new", _insights("new"))
        self.clock.now += 40
        self.assertEqual(self.cache.purge_expired(), 1)
        self.assertEqual(len(self.cache), 1)
        self.assertIn("new", self.cache)

    def test_clear_and_validation(self):
        self.cache.set("a", _insights("a"))
        self.cache.clear()
        self.assertEqual(len(self.cache), 0)
        with self.assertRaises(ValueError):
            InsightCache(max_entries=0)


if __name__ == "__main__":
    unittest.main()
