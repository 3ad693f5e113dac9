from __future__ import annotations

from typing import Any, Sequence

from studentos.normalize.schema import Competitiveness, MatchResult

FALLBACK_RECOMMENDATION = (
    "Consider updating your profile with more activities and achievements "
    "to find better scholarship matches."
)
INTEREST_TAGS = frozenset({"STEM", "merit"})


def summarize(ranked: Sequence[MatchResult]) -> list[str]:
    if not ranked:
        return [FALLBACK_RECOMMENDATION]

    recommendations: list[str] = []
    top = ranked[0]
    recommendations.append(
        f"Your top match is {top.listing.title} with {top.score}% compatibility. Apply early!"
    )

    local_count = sum(1 for match in ranked if match.listing.is_local)
    if local_count:
        recommendations.append(
            f"Found {local_count} local scholarships with better odds - "
            "these are often overlooked by other students."
        )

    interest_count = sum(1 for match in ranked if match.listing.tags & INTEREST_TAGS)
    if interest_count:
        recommendations.append(
            f"{interest_count} scholarships specifically target your academic interests."
        )

    low_count = sum(1 for match in ranked if match.listing.competitiveness is Competitiveness.LOW)
    if low_count:
        recommendations.append(
            f"{low_count} scholarships have lower competition - focus on these for better success rates."
        )

    return recommendations


def format_amount(amount: Any) -> str:
    if amount is None:
        return "Unknown"
    try:
        value = float(amount)
    except (TypeError, ValueError):
        return "Unknown"
    return f"${max(value, 0.0):,.0f}"
