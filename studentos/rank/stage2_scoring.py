from __future__ import annotations

from typing import Iterable

from studentos.normalize.schema import Competitiveness, MatchResult, ScholarshipListing, StudentProfile
from studentos.rank.stage1_eligibility import demographic_match, income_within_band, substring_match
from studentos.rank.weights import MAX_SCORE, MatchWeights

REASON_GPA = "GPA meets the scholarship minimum"
REASON_GRADE_LEVEL = "Grade level eligible"
REASON_MAJOR = "Major aligns with scholarship focus"
REASON_FINANCIAL_NEED = "Financial need criteria met"
REASON_DEMOGRAPHIC = "Demographic eligibility confirmed"
REASON_ACTIVITY = "Extracurricular activities align"
REASON_LOW_COMPETITION = "Lower competition increases success chances"
REASON_MEDIUM_COMPETITION = "Moderate competition"
REASON_LOCAL = "Local scholarship with geographic advantage"


def _grade_level_match(profile: StudentProfile, listing: ScholarshipListing) -> bool:
    if profile.grade_level is None:
        return False
    grade = profile.grade_level.strip().lower()
    return any(level.strip().lower() == grade for level in listing.grade_levels)


def score_listing(
    profile: StudentProfile,
    listing: ScholarshipListing,
    weights: MatchWeights | None = None,
) -> tuple[int, list[str]]:
    """Points in [0, 100] plus one fixed reason per satisfied criterion.

    Criteria the listing does not constrain contribute nothing; the caller is
    expected to have passed the pair through the eligibility filter first.
    """

    active = weights or MatchWeights.baseline()
    points = 0
    reasons: list[str] = []

    if listing.gpa_min is not None and profile.gpa is not None and profile.gpa >= listing.gpa_min:
        points += active.gpa
        reasons.append(REASON_GPA)

    if listing.grade_levels and _grade_level_match(profile, listing):
        points += active.grade_level
        reasons.append(REASON_GRADE_LEVEL)

    if listing.majors and substring_match(profile.intended_majors, listing.majors):
        points += active.major
        reasons.append(REASON_MAJOR)

    if listing.has_income_band and income_within_band(profile, listing):
        points += active.financial_need
        reasons.append(REASON_FINANCIAL_NEED)

    if listing.demographics and demographic_match(profile, listing):
        points += active.demographic
        reasons.append(REASON_DEMOGRAPHIC)

    if listing.activities and substring_match(profile.extracurriculars, listing.activities):
        points += active.activity
        reasons.append(REASON_ACTIVITY)

    if listing.competitiveness is Competitiveness.LOW:
        points += active.low_competition
        reasons.append(REASON_LOW_COMPETITION)
    elif listing.competitiveness is Competitiveness.MEDIUM:
        points += active.medium_competition
        reasons.append(REASON_MEDIUM_COMPETITION)

    if listing.is_local:
        points += active.local
        reasons.append(REASON_LOCAL)

    return max(0, min(MAX_SCORE, points)), reasons


def score_stage2(
    eligible: Iterable[ScholarshipListing],
    profile: StudentProfile,
    weights: MatchWeights | None = None,
) -> list[MatchResult]:
    active = weights or MatchWeights.baseline()
    results: list[MatchResult] = []
    for listing in eligible:
        points, reasons = score_listing(profile, listing, active)
        results.append(MatchResult(listing=listing, score=points, reasons=tuple(reasons)))
    return results
