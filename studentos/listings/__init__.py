"""Listing repositories: in-memory fixtures, seed catalogue, files and JSON feeds."""

from studentos.listings.base import InMemoryListingRepository, ListingRecord, ListingRepository
from studentos.listings.feed import FeedListingRepository
from studentos.listings.files import FileListingRepository
from studentos.listings.http import FeedHttpClient
from studentos.listings.seed import SEED_LISTINGS, SeedListingRepository

__all__ = [
    "FeedHttpClient",
    "FeedListingRepository",
    "FileListingRepository",
    "InMemoryListingRepository",
    "ListingRecord",
    "ListingRepository",
    "SEED_LISTINGS",
    "SeedListingRepository",
]
