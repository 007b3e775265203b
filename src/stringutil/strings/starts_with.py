"""Check string prefix."""

__all__ = ["starts_with"]


def starts_with(subject: str, prefix: str) -> bool:
    """Check if subject starts with prefix. Empty prefix always matches."""
    return subject[: len(prefix)] == prefix
