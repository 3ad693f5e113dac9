from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path
from typing import Iterable
from uuid import uuid4

import pandas as pd

from studentos.normalize.schema import MatchResult

STORE_COLUMNS = [
    "student_id",
    "listing_id",
    "rank",
    "score",
    "reasons",
    "title",
    "provider",
    "amount",
    "deadline",
    "competitiveness",
    "is_local",
    "computed_at",
]
KEY_COLUMNS = ["student_id", "listing_id"]


def _format_utc_iso_z(timestamp: datetime) -> str:
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=UTC)
    return timestamp.astimezone(UTC).strftime("%Y-%m-%dT%H:%M:%SZ")


def write_parquet_atomic(df: pd.DataFrame, output_path: Path) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    temp_path = output_path.parent / f"{output_path.name}.{uuid4().hex}.tmp"
    try:
        df.to_parquet(temp_path, index=False, engine="pyarrow")
        temp_path.replace(output_path)
    finally:
        if temp_path.exists():
            temp_path.unlink()


def matches_to_frame(
    student_id: str,
    matches: Iterable[MatchResult],
    *,
    computed_at: datetime | None = None,
) -> pd.DataFrame:
    stamp = _format_utc_iso_z(computed_at or datetime.now(tz=UTC))
    rows = [
        {
            "student_id": student_id,
            "listing_id": match.listing.listing_id,
            "rank": position,
            "score": match.score,
            "reasons": list(match.reasons),
            "title": match.listing.title,
            "provider": match.listing.provider,
            "amount": match.listing.amount,
            "deadline": match.listing.deadline.isoformat(),
            "competitiveness": match.listing.competitiveness.value,
            "is_local": match.listing.is_local,
            "computed_at": stamp,
        }
        for position, match in enumerate(matches, start=1)
    ]
    return pd.DataFrame(rows, columns=STORE_COLUMNS)


class MatchStore:
    """Parquet-backed cache of computed matches, upserted per (student_id, listing_id)."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def _read_all(self) -> pd.DataFrame:
        if not self.path.exists():
            return pd.DataFrame(columns=STORE_COLUMNS)
        df = pd.read_parquet(self.path)
        # pyarrow hands list columns back as numpy arrays.
        df["reasons"] = df["reasons"].map(lambda value: [] if value is None else [str(item) for item in value])
        return df

    def upsert(
        self,
        student_id: str,
        matches: Iterable[MatchResult],
        *,
        computed_at: datetime | None = None,
        replace_student: bool = False,
    ) -> int:
        """Write matches for one student.

        Rows are keyed by (student_id, listing_id). Without `replace_student`, rows for
        listings absent from `matches` keep their earlier rank, so ranks may repeat.
        """

        if not student_id:
            raise ValueError("MatchStore.upsert requires a student_id.")

        incoming = matches_to_frame(student_id, matches, computed_at=computed_at)
        if incoming["listing_id"].duplicated().any():
            raise ValueError("Duplicate listing_id values in a single upsert.")

        existing = self._read_all()
        if replace_student and not existing.empty:
            existing = existing[existing["student_id"] != student_id]
        if not existing.empty:
            incoming_keys = set(zip(incoming["student_id"], incoming["listing_id"]))
            replaced = [key in incoming_keys for key in zip(existing["student_id"], existing["listing_id"])]
            existing = existing[[not flag for flag in replaced]]

        frames = [frame for frame in (existing, incoming) if not frame.empty]
        combined = pd.concat(frames, ignore_index=True) if frames else incoming
        combined = combined.sort_values(
            by=["student_id", "rank", "listing_id"], kind="mergesort"
        ).reset_index(drop=True)
        write_parquet_atomic(combined[STORE_COLUMNS], self.path)
        return len(incoming)

    def load(self, student_id: str) -> pd.DataFrame:
        df = self._read_all()
        if df.empty:
            return df
        rows = df[df["student_id"] == student_id]
        return rows.sort_values(by=["rank", "listing_id"], kind="mergesort").reset_index(drop=True)
