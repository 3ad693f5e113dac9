from __future__ import annotations

import math
from dataclasses import replace
from datetime import date, datetime
from typing import Any, Mapping

import pandas as pd

from studentos.errors import InvalidListingDataError
from studentos.normalize.canonical_id import generate_listing_id
from studentos.normalize.schema import (
    Competitiveness,
    IncomeBand,
    ScholarshipListing,
    StudentProfile,
    split_activities,
)

# Keys that may be nested under an "eligibility" mapping in feed records.
ELIGIBILITY_KEYS = (
    "gpa_min",
    "sat_min",
    "act_min",
    "income_min",
    "income_max",
    "majors",
    "demographics",
    "activities",
    "states",
    "grade_levels",
)


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (list, tuple, set, frozenset, dict)) or hasattr(value, "shape"):
        return False
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def _coerce_text(value: Any) -> str | None:
    if _is_missing(value):
        return None
    text = str(value).strip()
    return text or None


def _coerce_list(value: Any) -> list[str]:
    if _is_missing(value):
        return []
    if hasattr(value, "tolist") and not isinstance(value, str):
        value = value.tolist()
    if isinstance(value, str):
        cleaned = value.strip()
        return [cleaned] if cleaned else []
    if isinstance(value, (list, tuple, set, frozenset)):
        items = [_coerce_text(item) for item in value]
        return [item for item in items if item]
    text = _coerce_text(value)
    return [text] if text else []


def _coerce_float(value: Any) -> float | None:
    if _is_missing(value):
        return None
    try:
        numeric = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(numeric):
        return None
    return numeric


def _coerce_int(value: Any) -> int | None:
    numeric = _coerce_float(value)
    if numeric is None:
        return None
    return int(round(numeric))


def _coerce_bool(value: Any) -> bool | None:
    if _is_missing(value):
        return None
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "y"}
    return bool(value)


def coerce_deadline(value: Any) -> date | None:
    """Accept ISO strings, dates, datetimes and pandas timestamps."""

    if _is_missing(value):
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if not text:
        return None
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        pass
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        return None


def _flatten_eligibility(record: Mapping[str, Any]) -> dict[str, Any]:
    flat = dict(record)
    nested = record.get("eligibility")
    if isinstance(nested, Mapping):
        for key in ELIGIBILITY_KEYS:
            if key in nested and _is_missing(flat.get(key)):
                flat[key] = nested[key]
    flat.pop("eligibility", None)
    return flat


def listing_from_record(record: Mapping[str, Any]) -> ScholarshipListing:
    """Build a typed listing from a raw seed, file or feed record."""

    flat = _flatten_eligibility(record)
    raw_id = _coerce_text(flat.get("listing_id")) or _coerce_text(flat.get("id"))
    label = raw_id or _coerce_text(flat.get("title")) or "<unnamed>"

    title = _coerce_text(flat.get("title"))
    if title is None:
        raise InvalidListingDataError(
            f"Listing '{label}' is missing a title.", listing_id=raw_id, field="title"
        )

    amount = _coerce_float(flat.get("amount"))
    if amount is None:
        raise InvalidListingDataError(
            f"Listing '{label}' is missing a numeric amount.", listing_id=raw_id, field="amount"
        )
    if amount < 0:
        raise InvalidListingDataError(
            f"Listing '{label}' has a negative amount.", listing_id=raw_id, field="amount"
        )

    deadline = coerce_deadline(flat.get("deadline"))
    if deadline is None:
        raise InvalidListingDataError(
            f"Listing '{label}' is missing a valid ISO deadline.", listing_id=raw_id, field="deadline"
        )

    competitiveness_value = flat.get("competitiveness")
    try:
        competitiveness = (
            Competitiveness.MEDIUM
            if _is_missing(competitiveness_value)
            else Competitiveness.parse(competitiveness_value)
        )
    except ValueError as exc:
        raise InvalidListingDataError(
            f"Listing '{label}': {exc}", listing_id=raw_id, field="competitiveness"
        ) from exc

    provider = _coerce_text(flat.get("provider"))
    application_url = _coerce_text(flat.get("application_url"))
    listing_id = raw_id or generate_listing_id(
        title=title,
        provider=provider,
        amount=amount,
        deadline=deadline,
        application_url=application_url,
    )

    return ScholarshipListing(
        listing_id=listing_id,
        title=title,
        provider=provider,
        amount=int(round(amount)),
        deadline=deadline,
        gpa_min=_coerce_float(flat.get("gpa_min")),
        sat_min=_coerce_int(flat.get("sat_min")),
        act_min=_coerce_int(flat.get("act_min")),
        income_min=_coerce_int(flat.get("income_min")),
        income_max=_coerce_int(flat.get("income_max")),
        majors=_coerce_list(flat.get("majors")),
        demographics=_coerce_list(flat.get("demographics")),
        activities=_coerce_list(flat.get("activities")),
        states=_coerce_list(flat.get("states")),
        grade_levels=_coerce_list(flat.get("grade_levels")),
        competitiveness=competitiveness,
        is_local=bool(_coerce_bool(flat.get("is_local"))),
        tags=frozenset(_coerce_list(flat.get("tags"))),
        description=_coerce_text(flat.get("description")),
        application_url=application_url,
        requirements=_coerce_list(flat.get("requirements")),
        estimated_applicants=_coerce_int(flat.get("estimated_applicants")),
        is_recurring=_coerce_bool(flat.get("is_recurring")),
    )


def validate_listing(listing: ScholarshipListing) -> ScholarshipListing:
    """Re-check mandatory fields on a directly built listing and return a normalized copy."""

    label = listing.listing_id or listing.title or "<unnamed>"
    if not (listing.title or "").strip():
        raise InvalidListingDataError(
            f"Listing '{label}' is missing a title.", listing_id=listing.listing_id, field="title"
        )
    if not isinstance(listing.amount, (int, float)) or isinstance(listing.amount, bool) or listing.amount < 0:
        raise InvalidListingDataError(
            f"Listing '{label}' has an invalid amount.", listing_id=listing.listing_id, field="amount"
        )
    if not isinstance(listing.deadline, date):
        raise InvalidListingDataError(
            f"Listing '{label}' is missing a valid deadline.",
            listing_id=listing.listing_id,
            field="deadline",
        )

    try:
        competitiveness = Competitiveness.parse(listing.competitiveness)
    except ValueError as exc:
        raise InvalidListingDataError(
            f"Listing '{label}': {exc}", listing_id=listing.listing_id, field="competitiveness"
        ) from exc

    tags = listing.tags
    if not isinstance(tags, frozenset):
        if isinstance(tags, (str, list, tuple, set)) or tags is None:
            tags = frozenset(_coerce_list(tags))
        else:
            raise InvalidListingDataError(
                f"Listing '{label}' has unusable tags.", listing_id=listing.listing_id, field="tags"
            )

    return replace(
        listing,
        competitiveness=competitiveness,
        tags=tags,
        majors=_coerce_list(listing.majors),
        demographics=_coerce_list(listing.demographics),
        activities=_coerce_list(listing.activities),
        states=_coerce_list(listing.states),
        grade_levels=_coerce_list(listing.grade_levels),
    )


def coerce_listing(record: ScholarshipListing | Mapping[str, Any]) -> ScholarshipListing:
    if isinstance(record, ScholarshipListing):
        return validate_listing(record)
    if isinstance(record, Mapping):
        return listing_from_record(record)
    raise InvalidListingDataError(f"Unsupported listing record type: {type(record).__name__}.")


def profile_from_mapping(payload: Mapping[str, Any]) -> StudentProfile:
    """Build a profile from a stored or submitted profile form."""

    majors = _coerce_list(payload.get("intended_majors"))
    if not majors:
        majors = _coerce_list(payload.get("intended_major"))

    gpa = _coerce_float(payload.get("gpa"))
    if gpa is not None and not 0.0 <= gpa <= 4.0:
        raise ValueError(f"Profile gpa must be between 0.0 and 4.0 (received {gpa}).")

    extracurriculars = payload.get("extracurriculars")
    if _is_missing(extracurriculars):
        extracurriculars = payload.get("extracurricular_activities")

    grade_level = _coerce_text(payload.get("grade_level"))
    return StudentProfile(
        student_id=_coerce_text(payload.get("student_id")),
        gpa=gpa,
        sat_score=_coerce_int(payload.get("sat_score")),
        act_score=_coerce_int(payload.get("act_score")),
        intended_majors=majors,
        grade_level=grade_level,
        ethnicity=_coerce_text(payload.get("ethnicity")),
        gender=_coerce_text(payload.get("gender")),
        income_band=IncomeBand.parse(_coerce_text(payload.get("income_band"))),
        need_based_aid=bool(_coerce_bool(payload.get("need_based_aid"))),
        extracurriculars=split_activities(None if _is_missing(extracurriculars) else extracurriculars),
        state=_coerce_text(payload.get("state")),
    )
