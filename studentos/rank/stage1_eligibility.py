from __future__ import annotations

import re
from typing import Callable, Iterable

from studentos.normalize.schema import ScholarshipListing, StudentProfile

ANY_DEMOGRAPHIC = "any"


def _normalize_text(value: str | None) -> str | None:
    if value is None:
        return None
    normalized = " ".join(value.strip().lower().replace("_", " ").split())
    return normalized or None


def _normalize_list(values: Iterable[str | None]) -> list[str]:
    return [item for item in (_normalize_text(value) for value in values) if item]


def substring_match(left: Iterable[str], right: Iterable[str]) -> bool:
    """Case-insensitive match where either side may contain the other."""

    left_values = _normalize_list(left)
    right_values = _normalize_list(right)
    return any(a in b or b in a for a in left_values for b in right_values)


def demographic_match(profile: StudentProfile, listing: ScholarshipListing) -> bool:
    allowed = _normalize_list(listing.demographics)
    if ANY_DEMOGRAPHIC in allowed:
        return True
    profile_tags = _normalize_list(profile.demographic_tags)
    # Whole-word containment so that "male" never matches "female".
    return any(
        re.search(rf"\b{re.escape(tag)}\b", profile_tag)
        for tag in allowed
        for profile_tag in profile_tags
    )


def income_within_band(profile: StudentProfile, listing: ScholarshipListing) -> bool:
    income = profile.estimated_income
    if income is None:
        return False
    if listing.income_max is not None and income > listing.income_max:
        return False
    if listing.income_min is not None and income < listing.income_min:
        return False
    return True


def _gpa_ok(profile: StudentProfile, listing: ScholarshipListing) -> bool:
    if listing.gpa_min is None:
        return True
    return profile.gpa is not None and profile.gpa >= listing.gpa_min


def _test_score_present(profile: StudentProfile, listing: ScholarshipListing) -> bool:
    if listing.sat_min is None and listing.act_min is None:
        return True
    return (listing.sat_min is not None and profile.sat_score is not None) or (
        listing.act_min is not None and profile.act_score is not None
    )


def _test_score_ok(profile: StudentProfile, listing: ScholarshipListing) -> bool:
    if listing.sat_min is None and listing.act_min is None:
        return True
    sat_ok = (
        listing.sat_min is not None
        and profile.sat_score is not None
        and profile.sat_score >= listing.sat_min
    )
    act_ok = (
        listing.act_min is not None
        and profile.act_score is not None
        and profile.act_score >= listing.act_min
    )
    return sat_ok or act_ok


def _income_max_ok(profile: StudentProfile, listing: ScholarshipListing) -> bool:
    if listing.income_max is None:
        return True
    income = profile.estimated_income
    return income is not None and income <= listing.income_max


def _income_min_ok(profile: StudentProfile, listing: ScholarshipListing) -> bool:
    if listing.income_min is None:
        return True
    income = profile.estimated_income
    return income is not None and income >= listing.income_min


def _demographics_ok(profile: StudentProfile, listing: ScholarshipListing) -> bool:
    if not listing.demographics:
        return True
    return demographic_match(profile, listing)


def _major_ok(profile: StudentProfile, listing: ScholarshipListing) -> bool:
    if not listing.majors:
        return True
    return substring_match(profile.intended_majors, listing.majors)


def _activities_ok(profile: StudentProfile, listing: ScholarshipListing) -> bool:
    if not listing.activities:
        return True
    return substring_match(profile.extracurriculars, listing.activities)


def _state_ok(profile: StudentProfile, listing: ScholarshipListing) -> bool:
    allowed = _normalize_list(listing.states)
    if not allowed:
        return True
    return _normalize_text(profile.state) in allowed


_Rule = Callable[[StudentProfile, ScholarshipListing], bool]

# Evaluated in order; a test-score listing without any named score reports
# TEST_SCORE_MISSING rather than TEST_SCORE_BELOW_MIN.
ELIGIBILITY_RULES: tuple[tuple[str, _Rule], ...] = (
    ("GPA_BELOW_MIN", _gpa_ok),
    ("TEST_SCORE_MISSING", _test_score_present),
    ("TEST_SCORE_BELOW_MIN", _test_score_ok),
    ("INCOME_ABOVE_MAX", _income_max_ok),
    ("INCOME_BELOW_MIN", _income_min_ok),
    ("DEMOGRAPHIC_MISMATCH", _demographics_ok),
    ("MAJOR_NOT_ALLOWED", _major_ok),
    ("ACTIVITY_MISSING", _activities_ok),
    ("STATE_NOT_ALLOWED", _state_ok),
)


def is_eligible(profile: StudentProfile, listing: ScholarshipListing) -> bool:
    return all(rule(profile, listing) for _, rule in ELIGIBILITY_RULES)


def eligibility_reasons(profile: StudentProfile, listing: ScholarshipListing) -> list[str]:
    reasons: list[str] = []
    for code, rule in ELIGIBILITY_RULES:
        if code == "TEST_SCORE_BELOW_MIN" and "TEST_SCORE_MISSING" in reasons:
            continue
        if not rule(profile, listing):
            reasons.append(code)
    return reasons


def apply_eligibility_filter(
    listings: Iterable[ScholarshipListing], profile: StudentProfile
) -> tuple[list[ScholarshipListing], list[tuple[ScholarshipListing, list[str]]]]:
    eligible: list[ScholarshipListing] = []
    ineligible: list[tuple[ScholarshipListing, list[str]]] = []
    for listing in listings:
        reasons = eligibility_reasons(profile, listing)
        if reasons:
            ineligible.append((listing, reasons))
        else:
            eligible.append(listing)
    return eligible, ineligible
