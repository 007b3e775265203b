"""Remove a leading prefix."""

__all__ = ["remove_prefix"]

from .starts_with import starts_with


def remove_prefix(subject: str, prefix: str) -> str:
    """Remove prefix once from the start of subject, if present."""
    if not starts_with(subject=subject, prefix=prefix):
        return subject
    return subject[len(prefix) :]
