"""Check for any of several needles."""

__all__ = ["contains_any"]

from collections.abc import Iterable
from typing import Any

from .contains import contains


def contains_any(subject: str, needles: Iterable[Any]) -> bool:
    """Check if subject contains at least one needle. No needles matches."""
    needles = list(needles)
    if not needles:
        return True
    return any(contains(subject=subject, needle=needle) for needle in needles)
