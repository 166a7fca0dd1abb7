from __future__ import annotations

from enum import Enum


class OccupationType(str, Enum):
    ADMINISTRATIVE_CLERICAL = "administrative_clerical"
    SALES_MARKETING = "sales_marketing"
    TECHNICAL_WRITING = "technical_writing"
    DATA_ANALYSIS = "data_analysis"
    SOFTWARE_DEVELOPMENT = "software_development"
    PHYSICAL_TRADES = "physical_trades"
    HEALTHCARE_DIRECT = "healthcare_direct"
    EDUCATION = "education"
    FINANCE_ACCOUNTING = "finance_accounting"
    CUSTOMER_SERVICE = "customer_service"
    MANAGEMENT = "management"
    CREATIVE_DESIGN = "creative_design"
    LEGAL = "legal"
    HR_RECRUITING = "hr_recruiting"
    RESEARCH_SCIENCE = "research_science"

    @classmethod
    def fallback(cls) -> "OccupationType":
        return cls.ADMINISTRATIVE_CLERICAL


class Industry(str, Enum):
    MARKETING_SALES = "marketing_sales"
    IT_TECHNOLOGY = "it_technology"
    SERVICE_OPERATIONS = "service_operations"
    MANUFACTURING = "manufacturing"
    HEALTHCARE = "healthcare"
    CONSTRUCTION = "construction"
    EDUCATION = "education"
    FINANCE = "finance"
    LEGAL = "legal"
    GOVERNMENT = "government"

    @classmethod
    def fallback(cls) -> "Industry":
        return cls.SERVICE_OPERATIONS


class EducationLevel(str, Enum):
    NO_HIGH_SCHOOL = "no_high_school"
    HIGH_SCHOOL = "high_school"
    SOME_COLLEGE = "some_college"
    BACHELORS = "bachelors"
    MASTERS_PHD = "masters_phd"

    @classmethod
    def fallback(cls) -> "EducationLevel":
        return cls.BACHELORS


class LocationClass(str, Enum):
    MAJOR_TECH_HUB = "major_tech_hub"
    LARGE_URBAN = "large_urban"
    MID_URBAN = "mid_urban"
    SMALL_URBAN = "small_urban"
    RURAL = "rural"

    @classmethod
    def fallback(cls) -> "LocationClass":
        return cls.MID_URBAN


class IncomeBracket(str, Enum):
    UNDER_30K = "under_30k"
    FROM_30K_TO_60K = "30k_60k"
    FROM_60K_TO_120K = "60k_120k"
    OVER_120K = "over_120k"

    @classmethod
    def fallback(cls) -> "IncomeBracket":
        return cls.FROM_60K_TO_120K


class ExperienceLevel(str, Enum):
    ENTRY = "entry"
    MID = "mid"
    SENIOR = "senior"

    @classmethod
    def fallback(cls) -> "ExperienceLevel":
        return cls.MID


class ManagementLevel(str, Enum):
    INDIVIDUAL = "individual"
    TEAM_LEAD = "team_lead"
    MANAGER = "manager"
    DIRECTOR = "director"
    EXECUTIVE = "executive"

    @classmethod
    def fallback(cls) -> "ManagementLevel":
        return cls.INDIVIDUAL


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class SubjectType(str, Enum):
    INDIVIDUAL = "individual"
    BUSINESS = "business"
