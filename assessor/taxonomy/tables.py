"""Static research lookup tables keyed by the category enums.

Sources: Microsoft Research (2024) AI applicability, Frey & Osborne task
automation probabilities, McKinsey/BCG industry adoption (2024), Federal
Reserve/Treasury education risk, OECD/Brookings geographic readiness and
Bain/Fed income data.
"""

from __future__ import annotations

from dataclasses import dataclass

from .categories import (
    EducationLevel,
    IncomeBracket,
    Industry,
    LocationClass,
    OccupationType,
)

AI_APPLICABILITY_SCORES: dict[OccupationType, float] = {
    OccupationType.ADMINISTRATIVE_CLERICAL: 44,
    OccupationType.SALES_MARKETING: 46,
    OccupationType.TECHNICAL_WRITING: 38,
    OccupationType.DATA_ANALYSIS: 36,
    OccupationType.SOFTWARE_DEVELOPMENT: 35,
    OccupationType.PHYSICAL_TRADES: 2,
    OccupationType.HEALTHCARE_DIRECT: 2,
    OccupationType.EDUCATION: 18,
    OccupationType.FINANCE_ACCOUNTING: 40,
    OccupationType.CUSTOMER_SERVICE: 44,
    OccupationType.MANAGEMENT: 27,
    OccupationType.CREATIVE_DESIGN: 30,
    OccupationType.LEGAL: 33,
    OccupationType.HR_RECRUITING: 41,
    OccupationType.RESEARCH_SCIENCE: 39,
}
DEFAULT_AI_APPLICABILITY = 30.0

# Percent probability per reference occupation.
AUTOMATION_PROBABILITIES: dict[str, float] = {
    "bookkeeping_accounting": 98,
    "data_entry": 99,
    "administrative_support": 96,
    "telemarketing": 99,
    "retail_sales": 92,
    "customer_service": 85,
    "technical_writing": 89,
    "registered_nurses": 0.9,
    "elementary_teachers": 0.4,
    "software_developers": 4,
    "plumbers": 2.1,
    "electricians": 1.5,
    "physicians": 0.4,
    "lawyers": 3.5,
    "managers": 9,
}
DEFAULT_AUTOMATION_REFERENCE = "administrative_support"
DEFAULT_AUTOMATION_PROBABILITY = 50.0

AUTOMATION_REFERENCE_BY_OCCUPATION: dict[OccupationType, str] = {
    OccupationType.ADMINISTRATIVE_CLERICAL: "administrative_support",
    OccupationType.SALES_MARKETING: "retail_sales",
    OccupationType.SOFTWARE_DEVELOPMENT: "software_developers",
    OccupationType.CUSTOMER_SERVICE: "customer_service",
    OccupationType.DATA_ANALYSIS: "bookkeeping_accounting",
    OccupationType.HEALTHCARE_DIRECT: "registered_nurses",
    OccupationType.PHYSICAL_TRADES: "plumbers",
    OccupationType.EDUCATION: "elementary_teachers",
}


@dataclass(frozen=True)
class IndustryAdoption:
    current: float
    growth_factor: float
    value_creation: float
    maturity_score: float

    @property
    def adoption_rate(self) -> float:
        return self.current * self.growth_factor * self.value_creation


INDUSTRY_ADOPTION: dict[Industry, IndustryAdoption] = {
    Industry.MARKETING_SALES: IndustryAdoption(0.78, 1.15, 0.22, 0.8),
    Industry.IT_TECHNOLOGY: IndustryAdoption(0.71, 1.15, 0.22, 0.8),
    Industry.SERVICE_OPERATIONS: IndustryAdoption(0.65, 1.15, 0.22, 0.6),
    Industry.MANUFACTURING: IndustryAdoption(0.45, 1.15, 0.22, 0.6),
    Industry.HEALTHCARE: IndustryAdoption(0.52, 1.15, 0.22, 0.4),
    Industry.CONSTRUCTION: IndustryAdoption(0.35, 1.15, 0.22, 0.2),
    Industry.EDUCATION: IndustryAdoption(0.48, 1.15, 0.22, 0.4),
    Industry.FINANCE: IndustryAdoption(0.68, 1.15, 0.22, 0.8),
    Industry.LEGAL: IndustryAdoption(0.42, 1.15, 0.22, 0.5),
    Industry.GOVERNMENT: IndustryAdoption(0.38, 1.15, 0.22, 0.3),
}
DEFAULT_INDUSTRY_ADOPTION = IndustryAdoption(0.5, 1.15, 0.22, 0.5)

EDUCATION_FACTORS: dict[EducationLevel, float] = {
    EducationLevel.NO_HIGH_SCHOOL: 0.00,
    EducationLevel.HIGH_SCHOOL: 0.05,
    EducationLevel.SOME_COLLEGE: 0.20,
    EducationLevel.BACHELORS: 0.70,
    EducationLevel.MASTERS_PHD: 0.85,
}

GEOGRAPHIC_FACTORS: dict[LocationClass, float] = {
    LocationClass.MAJOR_TECH_HUB: 0.7,
    LocationClass.LARGE_URBAN: 0.5,
    LocationClass.MID_URBAN: 0.3,
    LocationClass.SMALL_URBAN: 0.2,
    LocationClass.RURAL: 0.1,
}

INCOME_FACTORS: dict[IncomeBracket, float] = {
    IncomeBracket.UNDER_30K: 0.1,
    IncomeBracket.FROM_30K_TO_60K: 0.2,
    IncomeBracket.FROM_60K_TO_120K: 0.5,
    IncomeBracket.OVER_120K: 0.9,
}

BASE_DEMOGRAPHIC_RISK = 0.5
AGE_RISK_MULTIPLIERS: dict[str, float] = {
    "16_24": 1.3,
    "25_34": 1.1,
    "35_54": 1.0,
    "55_plus": 1.15,
}
