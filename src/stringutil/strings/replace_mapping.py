"""Replace strings according to a mapping."""

__all__ = ["replace_mapping"]

from collections.abc import Mapping

from .replace_one import replace_one


def replace_mapping(subject: str, mapping: Mapping[str, str]) -> str:
    """Replace each key by its value, one pass per key in iteration order."""
    for search, replacement in mapping.items():
        subject = replace_one(subject=subject, search=search, replacement=replacement)
    return subject
