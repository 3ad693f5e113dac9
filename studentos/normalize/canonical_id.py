from __future__ import annotations

import hashlib
from datetime import date, datetime
from typing import Optional
from urllib.parse import urlparse


def _normalize_text(value: Optional[str]) -> str:
    if value is None:
        return ""
    return " ".join(value.strip().lower().split())


def _normalize_amount(value: Optional[float]) -> str:
    if value is None:
        return ""
    return f"{float(value):.2f}"


def _normalize_deadline(value: Optional[date | datetime | str]) -> str:
    if value is None:
        return ""
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()

    cleaned = value.strip()
    try:
        return date.fromisoformat(cleaned[:10]).isoformat()
    except ValueError:
        return cleaned.lower()


def _normalize_url_domain(application_url: Optional[str]) -> str:
    if not application_url:
        return ""

    host = urlparse(application_url.strip()).netloc.lower()
    if host.startswith("www."):
        host = host[4:]
    return host


def generate_listing_id(
    *,
    title: str,
    provider: Optional[str],
    amount: Optional[float],
    deadline: Optional[date | datetime | str],
    application_url: Optional[str],
) -> str:
    """Deterministic listing_id for feeds that do not carry their own identifier."""

    payload = "|".join(
        [
            _normalize_text(title),
            _normalize_text(provider),
            _normalize_amount(amount),
            _normalize_deadline(deadline),
            _normalize_url_domain(application_url),
        ]
    )
    return hashlib.sha1(payload.encode("utf-8")).hexdigest()
