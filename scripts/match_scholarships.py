from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from studentos.errors import ProfileRequiredError
from studentos.io.match_store import MatchStore
from studentos.listings import (
    FeedListingRepository,
    FileListingRepository,
    ListingRepository,
    SeedListingRepository,
)
from studentos.normalize.records import profile_from_mapping
from studentos.normalize.schema import StudentProfile
from studentos.pipeline import MatchReport, run_matching
from studentos.rank.recommendations import format_amount
from studentos.rank.weights import MatchWeights, load_weights

logger = logging.getLogger("match_scholarships")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Match a student profile against scholarship listings.")
    parser.add_argument("--profile", type=Path, default=None, help="Student profile JSON file.")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--listings", type=Path, default=None, help="Listing file (.json or .parquet).")
    source.add_argument("--feed-url", type=str, default=None, help="JSON scholarship feed URL.")
    parser.add_argument("--weights", type=Path, default=None, help="JSON file overriding match weights.")
    parser.add_argument("--min-score", type=int, default=0)
    parser.add_argument("--top", type=int, default=10, help="Number of matches to print.")
    parser.add_argument("--store", type=Path, default=None, help="Parquet match store to upsert into.")
    parser.add_argument("--output", type=Path, default=None, help="Write the full report as JSON.")
    return parser.parse_args(argv)


def _load_profile(path: Path | None) -> StudentProfile | None:
    if path is None:
        return None
    if not path.exists():
        raise FileNotFoundError(f"Profile file not found: {path}")
    payload = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        raise ValueError(f"Profile file {path.name} must hold a JSON object.")
    return profile_from_mapping(payload)


def build_repository(args: argparse.Namespace) -> ListingRepository:
    if args.listings is not None:
        return FileListingRepository(args.listings)
    if args.feed_url:
        return FeedListingRepository(args.feed_url)
    return SeedListingRepository()


def _print_report(report: MatchReport, *, top: int) -> None:
    if not report.matches:
        print("No eligible scholarships found.")
    for position, match in enumerate(report.matches[:top], start=1):
        listing = match.listing
        print(
            f"{position:>2}. {listing.title} ({format_amount(listing.amount)}, "
            f"due {listing.deadline.isoformat()}) score={match.score} "
            f"competitiveness={listing.competitiveness.value}"
        )
        for reason in match.reasons:
            print(f"      - {reason}")
    print()
    for line in report.recommendations:
        print(f"* {line}")


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    weights = load_weights(args.weights) if args.weights is not None else MatchWeights.baseline()
    profile = _load_profile(args.profile)

    try:
        report = run_matching(
            profile,
            build_repository(args),
            weights=weights,
            min_score=args.min_score,
        )
    except ProfileRequiredError as exc:
        logger.error("%s Complete your profile and pass it with --profile.", exc)
        return 2

    _print_report(report, top=args.top)

    if args.store is not None:
        if not profile.student_id:
            logger.warning("Profile has no student_id; skipping match store upsert.")
        else:
            written = MatchStore(args.store).upsert(profile.student_id, report.matches, replace_student=True)
            logger.info("Upserted %d matches into %s", written, args.store)

    if args.output is not None:
        payload: dict[str, Any] = {"weights": weights.to_dict(), **report.to_dict()}
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
        logger.info("Wrote report: %s", args.output)
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    raise SystemExit(main())
