"""Check for all of several needles."""

__all__ = ["contains_all"]

from collections.abc import Iterable
from typing import Any

from .contains import contains


def contains_all(subject: str, needles: Iterable[Any]) -> bool:
    """Check if subject contains every needle."""
    return all(contains(subject=subject, needle=needle) for needle in needles)
