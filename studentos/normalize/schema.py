from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any


class IncomeBand(str, Enum):
    UNDER_25K = "under_25k"
    FROM_25K_TO_50K = "25k_50k"
    FROM_50K_TO_75K = "50k_75k"
    FROM_75K_TO_100K = "75k_100k"
    FROM_100K_TO_150K = "100k_150k"
    OVER_150K = "over_150k"

    @property
    def estimated_income(self) -> int:
        return _ESTIMATED_INCOME[self]

    @classmethod
    def parse(cls, value: Any) -> IncomeBand | None:
        if value is None:
            return None
        if isinstance(value, IncomeBand):
            return value
        text = str(value).strip().lower()
        if not text:
            return None
        try:
            return cls(text)
        except ValueError:
            allowed = ", ".join(band.value for band in cls)
            raise ValueError(f"Unknown income band '{value}' (expected one of: {allowed}).") from None


# Midpoint estimates; over_150k has no upper edge.
_ESTIMATED_INCOME: dict[IncomeBand, int] = {
    IncomeBand.UNDER_25K: 20_000,
    IncomeBand.FROM_25K_TO_50K: 37_500,
    IncomeBand.FROM_50K_TO_75K: 62_500,
    IncomeBand.FROM_75K_TO_100K: 87_500,
    IncomeBand.FROM_100K_TO_150K: 125_000,
    IncomeBand.OVER_150K: 200_000,
}


class Competitiveness(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    EXTREMELY_HIGH = "extremely_high"

    @property
    def rank(self) -> int:
        return _COMPETITIVENESS_RANK[self]

    @classmethod
    def parse(cls, value: Any) -> Competitiveness:
        if isinstance(value, Competitiveness):
            return value
        text = str(value or "").strip().lower().replace("-", "_").replace(" ", "_")
        text = _COMPETITIVENESS_ALIASES.get(text, text)
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"Unknown competitiveness '{value}'.") from None


_COMPETITIVENESS_RANK: dict[Competitiveness, int] = {
    Competitiveness.LOW: 1,
    Competitiveness.MEDIUM: 2,
    Competitiveness.HIGH: 3,
    Competitiveness.EXTREMELY_HIGH: 4,
}

_COMPETITIVENESS_ALIASES = {"moderate": "medium", "very_high": "extremely_high"}

_ACTIVITY_SPLIT_PATTERN = re.compile(r"[,;\n]+")


def split_activities(value: Any) -> list[str]:
    """Turn free-text or list-shaped extracurriculars into trimmed entries."""

    if value is None:
        return []
    if isinstance(value, str):
        parts = _ACTIVITY_SPLIT_PATTERN.split(value)
    else:
        parts = [str(item) for item in value if item is not None]
    return [part.strip() for part in parts if part.strip()]


@dataclass(slots=True)
class StudentProfile:
    student_id: str | None = None
    gpa: float | None = None
    sat_score: int | None = None
    act_score: int | None = None
    intended_majors: list[str] = field(default_factory=list)
    grade_level: str | None = None
    ethnicity: str | None = None
    gender: str | None = None
    income_band: IncomeBand | None = None
    need_based_aid: bool = False
    extracurriculars: list[str] = field(default_factory=list)
    state: str | None = None

    def __post_init__(self) -> None:
        # Free-text fields arrive as plain strings from forms and fixtures.
        if isinstance(self.extracurriculars, str):
            self.extracurriculars = split_activities(self.extracurriculars)
        if isinstance(self.intended_majors, str):
            major = self.intended_majors.strip()
            self.intended_majors = [major] if major else []

    @property
    def estimated_income(self) -> int | None:
        if self.income_band is None:
            return None
        return self.income_band.estimated_income

    @property
    def demographic_tags(self) -> list[str]:
        tags: list[str] = []
        for value in (self.ethnicity, self.gender):
            if value and value.strip():
                tags.append(value.strip().lower().replace("_", " "))
        return tags


@dataclass(slots=True)
class ScholarshipListing:
    listing_id: str
    title: str
    provider: str | None
    amount: int
    deadline: date
    gpa_min: float | None = None
    sat_min: int | None = None
    act_min: int | None = None
    income_min: int | None = None
    income_max: int | None = None
    majors: list[str] = field(default_factory=list)
    demographics: list[str] = field(default_factory=list)
    activities: list[str] = field(default_factory=list)
    states: list[str] = field(default_factory=list)
    grade_levels: list[str] = field(default_factory=list)
    competitiveness: Competitiveness = Competitiveness.MEDIUM
    is_local: bool = False
    tags: frozenset[str] = frozenset()
    description: str | None = None
    application_url: str | None = None
    requirements: list[str] = field(default_factory=list)
    estimated_applicants: int | None = None
    is_recurring: bool | None = None

    @property
    def has_income_band(self) -> bool:
        return self.income_min is not None or self.income_max is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "listing_id": self.listing_id,
            "title": self.title,
            "provider": self.provider,
            "amount": self.amount,
            "deadline": self.deadline.isoformat(),
            "gpa_min": self.gpa_min,
            "sat_min": self.sat_min,
            "act_min": self.act_min,
            "income_min": self.income_min,
            "income_max": self.income_max,
            "majors": list(self.majors),
            "demographics": list(self.demographics),
            "activities": list(self.activities),
            "states": list(self.states),
            "grade_levels": list(self.grade_levels),
            "competitiveness": self.competitiveness.value,
            "is_local": self.is_local,
            "tags": sorted(self.tags),
            "description": self.description,
            "application_url": self.application_url,
            "requirements": list(self.requirements),
            "estimated_applicants": self.estimated_applicants,
            "is_recurring": self.is_recurring,
        }


@dataclass(frozen=True, slots=True)
class MatchResult:
    listing: ScholarshipListing
    score: int
    reasons: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "listing": self.listing.to_dict(),
            "score": self.score,
            "reasons": list(self.reasons),
        }
