"""Remove a trailing suffix."""

__all__ = ["remove_suffix"]

from .ends_with import ends_with


def remove_suffix(subject: str, suffix: str) -> str:
    """Remove suffix once from the end of subject, if present."""
    if not ends_with(subject=subject, suffix=suffix):
        return subject
    return subject[: len(subject) - len(suffix)]
