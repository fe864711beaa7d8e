from __future__ import annotations

QUICK_PREFS: list[str] = [
    "Vegan",
    "Vegetarian",
    "Gluten-free",
    "Halal",
    "Kosher",
    "Keto",
    "Paleo",
    "Dairy-free",
    "Nut-free",
    "Low-carb",
    "Organic",
    "Raw",
]

MAX_SUGGESTIONS = 6


def tokenize(diet_prefs: str) -> list[str]:
    """Split the free-form preference box on commas, dropping blanks."""
    return [t.strip() for t in diet_prefs.split(",") if t.strip()]


def is_active(diet_prefs: str, label: str) -> bool:
    lower = label.lower()
    return any(t.lower() == lower for t in tokenize(diet_prefs))


def toggle_preference(diet_prefs: str, label: str) -> str:
    """
    Add ``label`` (lower-cased) when absent, drop every matching token when present.

    Matching is case-insensitive, so toggling the same label twice gives back
    the original token list.
    """
    tokens = tokenize(diet_prefs)
    lower = label.lower()
    if is_active(diet_prefs, label):
        return ", ".join(t for t in tokens if t.lower() != lower)
    return ", ".join([*tokens, lower])


def suggestions(diet_prefs: str, limit: int = MAX_SUGGESTIONS) -> list[str]:
    """Quick labels containing the whole typed text that are not yet active."""
    if not diet_prefs:
        return []
    typed = diet_prefs.lower()
    matches = [
        pref
        for pref in QUICK_PREFS
        if typed in pref.lower() and not is_active(diet_prefs, pref)
    ]
    return matches[:limit]
