"""Filter, score, rank and summarize scholarship matches."""

from studentos.rank.recommendations import FALLBACK_RECOMMENDATION, format_amount, summarize
from studentos.rank.stage1_eligibility import apply_eligibility_filter, eligibility_reasons, is_eligible
from studentos.rank.stage2_scoring import score_listing, score_stage2
from studentos.rank.stage3_rerank import TIE_WINDOW, rank_matches
from studentos.rank.weights import MatchWeights, load_weights

__all__ = [
    "FALLBACK_RECOMMENDATION",
    "MatchWeights",
    "TIE_WINDOW",
    "apply_eligibility_filter",
    "eligibility_reasons",
    "format_amount",
    "is_eligible",
    "load_weights",
    "rank_matches",
    "score_listing",
    "score_stage2",
    "summarize",
]
