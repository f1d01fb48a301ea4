"""Client-side free-text filtering."""

from __future__ import annotations

from typing import Optional, Sequence

from bizdir.models import Business


def normalize_query(query: Optional[str]) -> str:
    return (query or "").strip().casefold()


def haystack(business: Business) -> str:
    """Case-folded text searched by the filter; no description adds nothing."""
    parts = [business.name, business.category, business.location, business.description or ""]
    return " ".join(parts).casefold()


def matches(business: Business, query: Optional[str]) -> bool:
    needle = normalize_query(query)
    return not needle or needle in haystack(business)


def filter_businesses(items: Sequence[Business], query: Optional[str]) -> Sequence[Business]:
    """Return the businesses whose text contains `query`.

    A blank query returns `items` itself. Order is always preserved.
    """
    needle = normalize_query(query)
    if not needle:
        return items
    return [b for b in items if needle in haystack(b)]
