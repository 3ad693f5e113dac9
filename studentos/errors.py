from __future__ import annotations


class MatchingError(Exception):
    """Base class for scholarship matching failures."""


class ProfileRequiredError(MatchingError):
    def __init__(self, message: str = "A student profile is required to match scholarships.") -> None:
        super().__init__(message)


class InvalidListingDataError(MatchingError):
    """Raised when a listing record is missing a mandatory field or holds an unusable value."""

    def __init__(self, message: str, *, listing_id: str | None = None, field: str | None = None) -> None:
        super().__init__(message)
        self.listing_id = listing_id
        self.field = field
