"""Typed profile/listing models and raw-record normalization."""

from studentos.normalize.canonical_id import generate_listing_id
from studentos.normalize.records import coerce_listing, listing_from_record, profile_from_mapping, validate_listing
from studentos.normalize.schema import (
    Competitiveness,
    IncomeBand,
    MatchResult,
    ScholarshipListing,
    StudentProfile,
)

__all__ = [
    "Competitiveness",
    "IncomeBand",
    "MatchResult",
    "ScholarshipListing",
    "StudentProfile",
    "coerce_listing",
    "generate_listing_id",
    "listing_from_record",
    "profile_from_mapping",
    "validate_listing",
]
