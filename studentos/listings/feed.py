from __future__ import annotations

import logging
from typing import Any, Iterator, Mapping, Protocol

from studentos.listings.base import ListingRecord, ListingRepository
from studentos.listings.http import FeedHttpClient

logger = logging.getLogger(__name__)


class JsonClient(Protocol):
    def get_json(self, url: str, *, params: dict[str, Any] | None = None) -> Any: ...


def extract_feed_items(payload: Any) -> list[Mapping[str, Any]]:
    """Accept a bare list or an object wrapping a `scholarships` list."""

    if isinstance(payload, Mapping):
        payload = payload.get("scholarships")
    if not isinstance(payload, list):
        raise ValueError("Scholarship feed must be a JSON list or an object with a 'scholarships' list.")

    items: list[Mapping[str, Any]] = []
    for index, item in enumerate(payload):
        if isinstance(item, Mapping):
            items.append(item)
        else:
            logger.warning("Skipping non-object feed item at index %d", index)
    return items


class FeedListingRepository(ListingRepository):
    name = "feed"

    def __init__(
        self,
        url: str,
        *,
        http_client: JsonClient | None = None,
        params: dict[str, Any] | None = None,
    ) -> None:
        self.url = url
        self.params = params
        self._http_client = http_client

    def iter_records(self) -> Iterator[ListingRecord]:
        if self._http_client is not None:
            payload = self._http_client.get_json(self.url, params=self.params)
        else:
            with FeedHttpClient() as client:
                payload = client.get_json(self.url, params=self.params)
        items = extract_feed_items(payload)
        logger.info("Fetched %d listing records from %s", len(items), self.url)
        yield from items
