from functools import lru_cache

from .categories import (
    EducationLevel,
    ExperienceLevel,
    IncomeBracket,
    Industry,
    LocationClass,
    ManagementLevel,
    OccupationType,
    RiskLevel,
    SubjectType,
)
from .occupation_catalog import LocalOccupationCatalog
from .provider import OccupationCatalogProvider


@lru_cache(maxsize=1)
def get_default_occupation_catalog() -> OccupationCatalogProvider:
    return LocalOccupationCatalog()


__all__ = [
    "EducationLevel",
    "ExperienceLevel",
    "IncomeBracket",
    "Industry",
    "LocationClass",
    "ManagementLevel",
    "OccupationType",
    "RiskLevel",
    "SubjectType",
    "LocalOccupationCatalog",
    "OccupationCatalogProvider",
    "get_default_occupation_catalog",
]
