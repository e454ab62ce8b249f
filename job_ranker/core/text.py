"""
Free-text helpers shared by title and location matching.
"""

from typing import Optional


def normalize(value: Optional[str]) -> str:
    """Trim and lowercase. Missing values normalize to the empty string."""
    if not isinstance(value, str):
        return ""
    return value.strip().lower()


def contains(haystack: str, needle: str) -> bool:
    """Containment on already-normalized text. An empty needle never matches."""
    return bool(needle) and needle in haystack


def overlaps(first: str, second: str) -> bool:
    """True if either normalized string contains the other."""
    return contains(first, second) or contains(second, first)
