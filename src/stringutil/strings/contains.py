"""Substring containment."""

__all__ = ["contains"]

from typing import Any


def contains(subject: str, needle: Any) -> bool:
    """Check if subject contains needle, compared by its string form."""
    return str(needle) in subject
