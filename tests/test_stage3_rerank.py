from __future__ import annotations

from datetime import date

from studentos.normalize.schema import Competitiveness, MatchResult, ScholarshipListing
from studentos.rank.stage3_rerank import rank_matches


def _match(listing_id: str, score: int, competitiveness: Competitiveness) -> MatchResult:
    listing = ScholarshipListing(
        listing_id=listing_id,
        title=f"{listing_id} scholarship",
        provider=None,
        amount=1000,
        deadline=date(2026, 3, 1),
        competitiveness=competitiveness,
    )
    return MatchResult(listing=listing, score=score)


def _ids(matches: list[MatchResult]) -> list[str]:
    return [match.listing.listing_id for match in matches]


def test_rank_orders_by_score_descending() -> None:
    matches = [
        _match("low-score", 30, Competitiveness.HIGH),
        _match("high-score", 90, Competitiveness.HIGH),
        _match("mid-score", 60, Competitiveness.HIGH),
    ]

    assert _ids(rank_matches(matches)) == ["high-score", "mid-score", "low-score"]


def test_near_tie_prefers_lower_competitiveness() -> None:
    matches = [
        _match("high-82", 82, Competitiveness.HIGH),
        _match("low-85", 85, Competitiveness.LOW),
    ]
    assert _ids(rank_matches(matches)) == ["low-85", "high-82"]

    flipped = [
        _match("high-85", 85, Competitiveness.HIGH),
        _match("low-82", 82, Competitiveness.LOW),
    ]
    assert _ids(rank_matches(flipped)) == ["low-82", "high-85"]


def test_gap_of_five_or_more_keeps_score_order() -> None:
    matches = [
        _match("low-80", 80, Competitiveness.LOW),
        _match("extreme-85", 85, Competitiveness.EXTREMELY_HIGH),
        _match("low-84", 84, Competitiveness.LOW),
        _match("extreme-90", 90, Competitiveness.EXTREMELY_HIGH),
    ]

    ranked = _ids(rank_matches(matches[:2]))
    assert ranked == ["extreme-85", "low-80"]
    assert _ids(rank_matches(matches[2:])) == ["extreme-90", "low-84"]


def test_near_tie_with_same_competitiveness_prefers_higher_score() -> None:
    matches = [
        _match("medium-80", 80, Competitiveness.MEDIUM),
        _match("medium-83", 83, Competitiveness.MEDIUM),
    ]

    assert _ids(rank_matches(matches)) == ["medium-83", "medium-80"]


def test_equal_score_and_competitiveness_preserve_input_order() -> None:
    first = _match("first", 70, Competitiveness.MEDIUM)
    second = _match("second", 70, Competitiveness.MEDIUM)
    other = _match("other", 95, Competitiveness.HIGH)

    assert _ids(rank_matches([first, second, other])) == ["other", "first", "second"]
    assert _ids(rank_matches([second, other, first])) == ["other", "second", "first"]


def test_rank_is_deterministic_and_does_not_mutate_input() -> None:
    matches = [
        _match("a", 55, Competitiveness.EXTREMELY_HIGH),
        _match("b", 55, Competitiveness.MEDIUM),
        _match("c", 70, Competitiveness.HIGH),
        _match("d", 28, Competitiveness.LOW),
        _match("e", 25, Competitiveness.EXTREMELY_HIGH),
        _match("f", 60, Competitiveness.MEDIUM),
    ]
    snapshot = list(matches)

    first = rank_matches(matches)
    second = rank_matches(matches)

    assert first == second
    assert matches == snapshot
    assert _ids(first) == ["c", "f", "b", "a", "d", "e"]
    assert rank_matches([]) == []
