"""Scholarship eligibility, scoring, ranking and recommendations for StudentOS profiles."""

from studentos.errors import InvalidListingDataError, MatchingError, ProfileRequiredError
from studentos.normalize.schema import (
    Competitiveness,
    IncomeBand,
    MatchResult,
    ScholarshipListing,
    StudentProfile,
)
from studentos.pipeline import MatchReport, match_listings, run_matching

__all__ = [
    "Competitiveness",
    "IncomeBand",
    "InvalidListingDataError",
    "MatchReport",
    "MatchResult",
    "MatchingError",
    "ProfileRequiredError",
    "ScholarshipListing",
    "StudentProfile",
    "match_listings",
    "run_matching",
]
