from __future__ import annotations

from datetime import date

from studentos.normalize.schema import Competitiveness, MatchResult, ScholarshipListing
from studentos.rank.recommendations import FALLBACK_RECOMMENDATION, format_amount, summarize


def _match(
    title: str,
    score: int,
    *,
    competitiveness: Competitiveness = Competitiveness.HIGH,
    is_local: bool = False,
    tags: frozenset[str] = frozenset(),
) -> MatchResult:
    listing = ScholarshipListing(
        listing_id=title.lower().replace(" ", "-"),
        title=title,
        provider=None,
        amount=2500,
        deadline=date(2026, 2, 28),
        competitiveness=competitiveness,
        is_local=is_local,
        tags=tags,
    )
    return MatchResult(listing=listing, score=score)


def test_summarize_empty_matches_returns_single_fallback() -> None:
    assert summarize([]) == [FALLBACK_RECOMMENDATION]


def test_summarize_emits_rules_in_fixed_order() -> None:
    ranked = [
        _match(
            "Local Rotary Club Scholarships",
            58,
            competitiveness=Competitiveness.LOW,
            is_local=True,
            tags=frozenset({"local", "merit"}),
        ),
        _match("STEM Futures Award", 45, competitiveness=Competitiveness.MEDIUM, tags=frozenset({"STEM"})),
        _match("General Award", 30),
    ]

    assert summarize(ranked) == [
        "Your top match is Local Rotary Club Scholarships with 58% compatibility. Apply early!",
        "Found 1 local scholarships with better odds - these are often overlooked by other students.",
        "2 scholarships specifically target your academic interests.",
        "1 scholarships have lower competition - focus on these for better success rates.",
    ]


def test_summarize_only_names_top_match_when_no_other_rule_applies() -> None:
    ranked = [_match("General Award", 40, tags=frozenset({"need-based", "stem"}))]

    assert summarize(ranked) == ["Your top match is General Award with 40% compatibility. Apply early!"]


def test_format_amount_handles_missing_and_invalid_values() -> None:
    assert format_amount(None) == "Unknown"
    assert format_amount("n/a") == "Unknown"
    assert format_amount(20000) == "$20,000"
    assert format_amount(-5) == "$0"
