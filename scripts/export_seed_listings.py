from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from studentos.listings.files import write_listing_frame
from studentos.listings.seed import SeedListingRepository
from studentos.normalize.records import listing_from_record


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Export the built-in seed catalogue as flat listing records.")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("data/listings/seed_listings.json"),
        help="Output path (.json or .parquet).",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    records = [listing_from_record(record).to_dict() for record in SeedListingRepository().iter_records()]
    output_path = write_listing_frame(records, args.output)
    print(f"Wrote {len(records)} listings: {output_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
