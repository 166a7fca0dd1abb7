import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from assessor.taxonomy import (  # noqa: E402
    IncomeBracket,
    Industry,
    LocalOccupationCatalog,
    OccupationType,
    get_default_occupation_catalog,
)
from assessor.taxonomy.tables import INDUSTRY_ADOPTION  # noqa: E402


class TaxonomyTests(unittest.TestCase):
    def test_catalog_loads_and_every_activity_reference_resolves(self):
        catalog = LocalOccupationCatalog()
        occupations = catalog.occupations()
        self.assertGreaterEqual(len(occupations), 10)
        for profile in occupations:
            for ref in profile.work_activity_refs:
                self.assertIsNotNone(catalog.work_activity(ref.id), f"{profile.code} -> {ref.id}")

    def test_default_catalog_is_shared(self):
        self.assertIs(get_default_occupation_catalog(), get_default_occupation_catalog())

    def test_missing_catalog_file_fails_loudly(self):
        with self.assertRaises(RuntimeError):
            LocalOccupationCatalog(occupations_path="/nonexistent/occupations.json")

    def test_declared_fallbacks(self):
        self.assertEqual(OccupationType.fallback(), OccupationType.ADMINISTRATIVE_CLERICAL)
        self.assertEqual(Industry.fallback(), Industry.SERVICE_OPERATIONS)
        self.assertEqual(IncomeBracket.fallback().value, "60k_120k")

    def test_adoption_rate_is_product_of_components(self):
        adoption = INDUSTRY_ADOPTION[Industry.IT_TECHNOLOGY]
        self.assertAlmostEqual(adoption.adoption_rate, 0.71 * 1.15 * 0.22)


if __name__ == "__main__":
    unittest.main()
