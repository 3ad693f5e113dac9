from __future__ import annotations

from datetime import date, datetime

from studentos.normalize.canonical_id import generate_listing_id

BASE = {
    "title": "Future Leaders Scholarship",
    "provider": "Acme Foundation",
    "amount": 5000,
    "deadline": date(2026, 3, 1),
    "application_url": "https://www.example.org/scholarships/future-leaders",
}


def test_generate_listing_id_is_stable_for_same_input() -> None:
    assert generate_listing_id(**BASE) == generate_listing_id(**BASE)


def test_generate_listing_id_ignores_formatting_noise() -> None:
    noisy = {
        **BASE,
        "title": "  future   LEADERS scholarship ",
        "deadline": "2026-03-01",
        "application_url": "https://example.org/apply",
    }

    assert generate_listing_id(**noisy) == generate_listing_id(**BASE)
    assert generate_listing_id(**{**BASE, "deadline": datetime(2026, 3, 1, 9, 30)}) == generate_listing_id(
        **BASE
    )


def test_generate_listing_id_changes_when_identity_fields_change() -> None:
    original = generate_listing_id(**BASE)

    assert generate_listing_id(**{**BASE, "title": "Global Leaders Scholarship"}) != original
    assert generate_listing_id(**{**BASE, "deadline": date(2026, 4, 1)}) != original
    assert generate_listing_id(**{**BASE, "amount": 7500}) != original
