from __future__ import annotations

import re

from assessor.schemas.features import DetailedFeatures
from assessor.taxonomy.categories import ManagementLevel

MAX_ACTIVITIES = 5
MAX_CERTIFICATIONS = 5
DEFAULT_JOB_TITLE = "Professional"
DEFAULT_YEARS_EXPERIENCE = 3

_TITLE_PATTERNS = (
    re.compile(r"(?:current role|position|title)[:.]?\s*([^\n]+)", re.IGNORECASE),
    re.compile(r"(?:working as|work as|employed as)\s+(?:an?\s+)?([^\n]+)", re.IGNORECASE),
    re.compile(r"^([A-Z][^.!?\n]{10,50})$", re.MULTILINE),
)

_YEARS_PATTERNS = (
    re.compile(r"(?<!\d)(\d{1,2})\+?\s*years?\s*(?:of\s*)?experience", re.IGNORECASE),
    re.compile(r"experience[:.]?\s*(\d{1,2})\+?\s*years?", re.IGNORECASE),
    re.compile(r"(?<!\d)(\d{1,2})\s*years?\s*in\s*(?:the\s*)?industry", re.IGNORECASE),
)

# (keywords, estimated years) used when no explicit figure is present
_YEARS_ESTIMATES: tuple[tuple[tuple[str, ...], int], ...] = (
    (("senior", "lead"), 8),
    (("mid", "experienced"), 5),
    (("junior", "entry"), 2),
)

TECHNICAL_SKILLS: tuple[str, ...] = (
    "python", "javascript", "java", "c++", "sql", "react", "node.js",
    "machine learning", "data analysis", "cloud computing", "devops",
    "agile", "scrum", "git", "docker", "kubernetes", "aws", "azure",
    "tableau", "power bi", "excel", "statistical analysis", "project management",
)

SOFTWARE_TOOLS: tuple[str, ...] = (
    "salesforce", "sap", "oracle", "microsoft office", "google workspace",
    "jira", "confluence", "slack", "zoom", "photoshop", "autocad",
    "solidworks", "matlab", "spss", "quickbooks", "hubspot",
)

INDUSTRY_KEYWORDS: tuple[str, ...] = (
    "technology", "healthcare", "finance", "education", "manufacturing",
    "retail", "consulting", "legal", "construction", "hospitality",
    "automotive", "aerospace", "energy", "pharmaceutical", "media",
)

_MANAGEMENT_KEYWORDS: tuple[tuple[ManagementLevel, tuple[str, ...]], ...] = (
    (ManagementLevel.EXECUTIVE, ("ceo", "cto", "vp")),
    (ManagementLevel.DIRECTOR, ("director",)),
    (ManagementLevel.MANAGER, ("manager", "head of")),
    (ManagementLevel.TEAM_LEAD, ("lead", "supervisor")),
)

_EDUCATION_LABELS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("PhD", ("phd", "doctorate")),
    ("Masters", ("master", "mba")),
    ("Bachelors", ("bachelor",)),
    ("Associates", ("associate",)),
)
DEFAULT_EDUCATION_LABEL = "Bachelors"

_ACTIVITY_PATTERNS = (
    re.compile(r"[•\-*]\s*([A-Z][^.!?\n]{20,100})"),
    re.compile(r"(?:responsible for|duties include|tasks?:)\s*([^.!?\n]+)", re.IGNORECASE),
)

_CERTIFICATION_PATTERNS = (
    re.compile(r"certified\s+([^\n,]+)", re.IGNORECASE),
    re.compile(r"certifications?[:.]?\s*([^\n]+)", re.IGNORECASE),
    re.compile(r"(?:pmp|cpa|cfa|cissp|ccna|aws|azure|gcp)\s*(?:certified)?", re.IGNORECASE),
)


def extract_job_title(content: str) -> str:
    for pattern in _TITLE_PATTERNS:
        match = pattern.search(content)
        if match:
            title = match.group(1).strip()
            if title:
                return title
    return DEFAULT_JOB_TITLE


def extract_years_experience(content: str) -> int:
    for pattern in _YEARS_PATTERNS:
        match = pattern.search(content)
        if match:
            return int(match.group(1))

    lowered = content.lower()
    for keywords, years in _YEARS_ESTIMATES:
        if any(keyword in lowered for keyword in keywords):
            return years
    return DEFAULT_YEARS_EXPERIENCE


def _vocabulary_hits(lowered: str, vocabulary: tuple[str, ...]) -> list[str]:
    return [term for term in vocabulary if term in lowered]


def detect_management_level(content: str) -> ManagementLevel:
    lowered = content.lower()
    for level, keywords in _MANAGEMENT_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return level
    return ManagementLevel.fallback()


def extract_specific_activities(content: str) -> list[str]:
    """Bullet lines and "responsible for" clauses, in document order per pattern."""
    activities: list[str] = []
    for pattern in _ACTIVITY_PATTERNS:
        for match in pattern.finditer(content):
            if len(activities) >= MAX_ACTIVITIES:
                return activities
            activities.append(match.group(1).strip())
    return activities


def extract_education_label(content: str) -> str:
    lowered = content.lower()
    for label, keywords in _EDUCATION_LABELS:
        if any(keyword in lowered for keyword in keywords):
            return label
    return DEFAULT_EDUCATION_LABEL


def extract_certifications(content: str) -> list[str]:
    certifications: list[str] = []
    for pattern in _CERTIFICATION_PATTERNS:
        certifications.extend(match.group(0).strip() for match in pattern.finditer(content))
    return certifications[:MAX_CERTIFICATIONS]


def extract_detailed_features(content: str) -> DetailedFeatures:
    text = content or ""
    lowered = text.lower()
    return DetailedFeatures(
        job_title=extract_job_title(text),
        years_experience=extract_years_experience(text),
        technical_skills=_vocabulary_hits(lowered, TECHNICAL_SKILLS),
        software_tools=_vocabulary_hits(lowered, SOFTWARE_TOOLS),
        management_level=detect_management_level(text),
        specific_activities=extract_specific_activities(text),
        industry_keywords=_vocabulary_hits(lowered, INDUSTRY_KEYWORDS),
        education_label=extract_education_label(text),
        certifications=extract_certifications(text),
    )
