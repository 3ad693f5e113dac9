from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterator

import pandas as pd

from studentos.listings.base import ListingRecord, ListingRepository

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".json", ".parquet")


def read_listing_frame(path: Path) -> pd.DataFrame:
    if not path.exists():
        raise FileNotFoundError(f"Listing file not found: {path}")

    suffix = path.suffix.lower()
    if suffix == ".parquet":
        return pd.read_parquet(path)
    if suffix == ".json":
        # Deadlines stay as text; records.coerce_deadline parses them.
        return pd.read_json(path, orient="records", convert_dates=False, dtype=False)

    raise ValueError(f"Unsupported listing format '{path.suffix}'. Use .json or .parquet")


def _frame_records(df: pd.DataFrame) -> list[dict[str, Any]]:
    if df.empty:
        return []
    return df.astype(object).where(pd.notna(df), None).to_dict(orient="records")


class FileListingRepository(ListingRepository):
    name = "file"

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def iter_records(self) -> Iterator[ListingRecord]:
        df = read_listing_frame(self.path)
        logger.info("Loaded %d listing records from %s", len(df), self.path)
        yield from _frame_records(df)


def write_listing_frame(records: list[dict[str, Any]], output_path: Path) -> Path:
    """Write listing records to .json or .parquet, e.g. to export the seed catalogue."""

    suffix = output_path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ValueError(f"Unsupported listing format '{output_path.suffix}'. Use .json or .parquet")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    df = pd.DataFrame(records)
    if suffix == ".parquet":
        df.to_parquet(output_path, index=False, engine="pyarrow")
    else:
        df.to_json(output_path, orient="records", indent=2, force_ascii=False)
    return output_path
