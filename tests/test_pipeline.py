from __future__ import annotations

import logging
from datetime import date
from typing import Iterator

import pytest

from studentos.errors import ProfileRequiredError
from studentos.listings.base import InMemoryListingRepository, ListingRecord, ListingRepository
from studentos.listings.seed import SeedListingRepository
from studentos.normalize.schema import IncomeBand, ScholarshipListing, StudentProfile
from studentos.pipeline import match_listings, run_matching
from studentos.rank.recommendations import FALLBACK_RECOMMENDATION
from studentos.rank.stage1_eligibility import is_eligible


def _profile() -> StudentProfile:
    return StudentProfile(
        student_id="stu-ca-cs",
        gpa=3.8,
        sat_score=1400,
        intended_majors=["Computer Science"],
        grade_level="12",
        ethnicity="Hispanic",
        gender="female",
        income_band=IncomeBand.FROM_50K_TO_75K,
        extracurriculars=["Volunteering at animal shelter", "Robotics team captain"],
        state="CA",
    )


class _ExplodingRepository(ListingRepository):
    def iter_records(self) -> Iterator[ListingRecord]:
        raise AssertionError("repository should not be read")


def test_missing_profile_is_a_hard_stop() -> None:
    with pytest.raises(ProfileRequiredError):
        run_matching(None, _ExplodingRepository())
    with pytest.raises(ProfileRequiredError):
        match_listings(None, [])


def test_empty_listing_set_returns_only_the_fallback() -> None:
    report = run_matching(_profile(), InMemoryListingRepository([]))

    assert report.matches == []
    assert report.recommendations == [FALLBACK_RECOMMENDATION]


def test_seed_catalogue_ranking_for_california_cs_student() -> None:
    report = run_matching(_profile(), SeedListingRepository())

    assert [(match.listing.listing_id, match.score) for match in report.matches] == [
        ("amazon-future-engineer-2025", 70),
        ("society-women-engineers-2025", 60),
        ("burger-king-scholars-2025", 55),
        ("jack-kent-cooke-2025", 55),
        ("coca-cola-scholars-2025", 50),
        ("hispanic-scholarship-fund-2025", 35),
        ("rotary-club-local-scholarship-2025", 28),
        ("national-merit-scholarship-2025", 25),
    ]
    assert report.ineligible_count == 5
    assert report.recommendations == [
        "Your top match is Amazon Future Engineer Scholarship with 70% compatibility. Apply early!",
        "Found 1 local scholarships with better odds - these are often overlooked by other students.",
        "6 scholarships specifically target your academic interests.",
        "1 scholarships have lower competition - focus on these for better success rates.",
    ]
    assert all(is_eligible(_profile(), match.listing) for match in report.matches)


def test_min_score_drops_weak_matches_before_summary() -> None:
    report = run_matching(_profile(), SeedListingRepository(), min_score=30)

    assert min(match.score for match in report.matches) >= 30
    assert len(report.matches) == 6
    assert not any("local scholarships" in line for line in report.recommendations)

    with pytest.raises(ValueError):
        run_matching(_profile(), SeedListingRepository(), min_score=101)


def test_invalid_listings_are_skipped_with_a_warning(caplog: pytest.LogCaptureFixture) -> None:
    records = [
        {"listing_id": "no-deadline", "title": "Broken", "amount": 500},
        {"listing_id": "ok", "title": "Valid", "amount": 500, "deadline": "2026-03-01", "gpa_min": 3.0},
        ScholarshipListing(listing_id="blank", title=" ", provider=None, amount=10, deadline=date(2026, 1, 1)),
    ]

    with caplog.at_level(logging.WARNING, logger="studentos.pipeline"):
        report = match_listings(_profile(), records)

    assert [match.listing.listing_id for match in report.matches] == ["ok"]
    assert report.skipped == ["no-deadline", "blank"]
    assert "Skipping invalid listing no-deadline" in caplog.text


def test_ineligible_listings_never_reach_output() -> None:
    records = [
        {"listing_id": "gpa-gate", "title": "Gate", "amount": 1000, "deadline": "2026-03-01", "gpa_min": 3.9,
         "competitiveness": "low", "is_local": True},
        {"listing_id": "open", "title": "Open", "amount": 1000, "deadline": "2026-03-01"},
    ]

    report = match_listings(_profile(), records)

    assert [match.listing.listing_id for match in report.matches] == ["open"]
    assert report.ineligible_count == 1


def test_report_to_dict_is_presentation_ready() -> None:
    report = match_listings(
        _profile(),
        [{"listing_id": "open", "title": "Open", "amount": 1000, "deadline": "2026-03-01", "competitiveness": "low"}],
    )

    payload = report.to_dict()

    assert payload["matches"][0]["score"] == 10
    assert payload["matches"][0]["reasons"] == ["Lower competition increases success chances"]
    assert payload["matches"][0]["listing"]["deadline"] == "2026-03-01"
    assert payload["recommendations"][0].startswith("Your top match is Open")


def test_directly_built_listings_are_normalized_or_skipped_without_stopping_the_batch() -> None:
    records = [
        {"listing_id": "ok", "title": "Valid", "amount": 500, "deadline": "2026-03-01", "gpa_min": 3.0},
        ScholarshipListing(
            listing_id="loose",
            title="Loose",
            provider=None,
            amount=100,
            deadline=date(2026, 2, 1),
            competitiveness="low",  # type: ignore[arg-type]
            tags=["STEM"],  # type: ignore[arg-type]
        ),
        ScholarshipListing(
            listing_id="fierce",
            title="Fierce",
            provider=None,
            amount=100,
            deadline=date(2026, 2, 1),
            competitiveness="fierce",  # type: ignore[arg-type]
        ),
    ]

    report = match_listings(_profile(), records)

    assert [(match.listing.listing_id, match.score) for match in report.matches] == [("ok", 30), ("loose", 10)]
    assert report.skipped == ["fierce"]
    assert "1 scholarships specifically target your academic interests." in report.recommendations
    assert "1 scholarships have lower competition - focus on these for better success rates." in report.recommendations


def test_run_matching_logs_the_repository_it_reads(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="studentos.pipeline"):
        run_matching(_profile(), SeedListingRepository())

    assert "Reading listings from seed repository" in caplog.text
