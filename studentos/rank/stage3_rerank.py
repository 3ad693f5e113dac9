from __future__ import annotations

from functools import cmp_to_key
from typing import Iterable

from studentos.normalize.schema import MatchResult

# Scores closer than this are treated as a near-tie.
TIE_WINDOW = 5


def _compare(left: MatchResult, right: MatchResult) -> int:
    if abs(left.score - right.score) < TIE_WINDOW:
        competitiveness_delta = left.listing.competitiveness.rank - right.listing.competitiveness.rank
        if competitiveness_delta:
            return competitiveness_delta
    return right.score - left.score


def rank_matches(matches: Iterable[MatchResult]) -> list[MatchResult]:
    """Score descending; near-ties go to the less competitive listing.

    `sorted` is stable, so matches with equal score and equal competitiveness
    keep their input order.
    """

    return sorted(matches, key=cmp_to_key(_compare))
