from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable

from studentos.errors import InvalidListingDataError, ProfileRequiredError
from studentos.listings.base import ListingRecord, ListingRepository
from studentos.normalize.records import coerce_listing
from studentos.normalize.schema import MatchResult, ScholarshipListing, StudentProfile
from studentos.rank.recommendations import summarize
from studentos.rank.stage1_eligibility import apply_eligibility_filter
from studentos.rank.stage2_scoring import score_stage2
from studentos.rank.stage3_rerank import rank_matches
from studentos.rank.weights import MAX_SCORE, MatchWeights

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class MatchReport:
    matches: list[MatchResult]
    recommendations: list[str]
    skipped: list[str] = field(default_factory=list)
    ineligible_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "matches": [match.to_dict() for match in self.matches],
            "recommendations": list(self.recommendations),
            "skipped": list(self.skipped),
            "ineligible_count": self.ineligible_count,
        }


def load_valid_listings(records: Iterable[ListingRecord]) -> tuple[list[ScholarshipListing], list[str]]:
    """Coerce records into listings, skipping the ones that fail validation."""

    listings: list[ScholarshipListing] = []
    skipped: list[str] = []
    for index, record in enumerate(records):
        try:
            listings.append(coerce_listing(record))
        except InvalidListingDataError as exc:
            label = exc.listing_id or f"record[{index}]"
            logger.warning("Skipping invalid listing %s: %s", label, exc)
            skipped.append(label)
    return listings, skipped


def match_listings(
    profile: StudentProfile | None,
    records: Iterable[ListingRecord],
    *,
    weights: MatchWeights | None = None,
    min_score: int = 0,
) -> MatchReport:
    if profile is None:
        raise ProfileRequiredError()
    if min_score < 0 or min_score > MAX_SCORE:
        raise ValueError(f"min_score must be between 0 and {MAX_SCORE}.")

    listings, skipped = load_valid_listings(records)
    eligible, ineligible = apply_eligibility_filter(listings, profile)
    scored = [match for match in score_stage2(eligible, profile, weights) if match.score >= min_score]
    ranked = rank_matches(scored)

    logger.info(
        "Matched student=%s listings=%d eligible=%d kept=%d skipped=%d",
        profile.student_id or "-",
        len(listings),
        len(eligible),
        len(ranked),
        len(skipped),
    )
    return MatchReport(
        matches=ranked,
        recommendations=summarize(ranked),
        skipped=skipped,
        ineligible_count=len(ineligible),
    )


def run_matching(
    profile: StudentProfile | None,
    repository: ListingRepository,
    *,
    weights: MatchWeights | None = None,
    min_score: int = 0,
) -> MatchReport:
    # Checked before touching the repository so a missing profile never triggers a fetch.
    if profile is None:
        raise ProfileRequiredError()
    logger.info("Reading listings from %s repository", repository.name)
    return match_listings(profile, repository.iter_records(), weights=weights, min_score=min_score)
