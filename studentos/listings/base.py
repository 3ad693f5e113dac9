from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Iterable, Iterator, Mapping

from studentos.normalize.schema import ScholarshipListing

logger = logging.getLogger(__name__)

ListingRecord = ScholarshipListing | Mapping[str, Any]


class ListingRepository(ABC):
    """Read-only source of scholarship listing records."""

    name: str = "listings"

    @abstractmethod
    def iter_records(self) -> Iterator[ListingRecord]:
        """Yield raw listing records; validation happens downstream."""


def _record_id(record: ListingRecord) -> str | None:
    if isinstance(record, ScholarshipListing):
        return record.listing_id
    value = record.get("listing_id") or record.get("id")
    if value is None:
        return None
    return str(value).strip() or None


class InMemoryListingRepository(ListingRepository):
    name = "memory"

    def __init__(self, records: Iterable[ListingRecord]) -> None:
        self._records: list[ListingRecord] = []
        seen: set[str] = set()
        for record in records:
            record_id = _record_id(record)
            if record_id is not None:
                if record_id in seen:
                    logger.info("Dropping duplicate listing id=%s", record_id)
                    continue
                seen.add(record_id)
            self._records.append(record)

    def __len__(self) -> int:
        return len(self._records)

    def iter_records(self) -> Iterator[ListingRecord]:
        return iter(list(self._records))
