from __future__ import annotations

import re

from .models import Restaurant, SortMode

_LEADING_NUMBER_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

SORT_LABELS: dict[SortMode, str] = {
    SortMode.relevance: "Relevance",
    SortMode.rating: "Rating",
    SortMode.diet_match: "Diet match",
    SortMode.distance: "Distance",
    SortMode.price_low_high: "Price: low to high",
    SortMode.price_high_low: "Price: high to low",
}


def rating_value(rating: str | None) -> float:
    """Leading number of a rating string ("4.5/5" -> 4.5); 0 when absent or unreadable."""
    if not rating:
        return 0.0
    match = _LEADING_NUMBER_RE.match(rating)
    return float(match.group(1)) if match else 0.0


def _name_key(r: Restaurant) -> str:
    return r.name.casefold()


def sort_restaurants(restaurants: list[Restaurant], mode: SortMode | str) -> list[Restaurant]:
    """
    Return a new list ordered by ``mode``. The input is never mutated.

    There is no distance or price data in a recommendation, so the distance
    and price modes order by name only.
    """
    mode = SortMode(mode)
    if mode is SortMode.rating:
        return sorted(restaurants, key=lambda r: rating_value(r.rating), reverse=True)
    if mode is SortMode.diet_match:
        return sorted(restaurants, key=lambda r: len(r.description), reverse=True)
    if mode in (SortMode.distance, SortMode.price_low_high):
        return sorted(restaurants, key=_name_key)
    if mode is SortMode.price_high_low:
        return sorted(restaurants, key=_name_key, reverse=True)
    return list(restaurants)
