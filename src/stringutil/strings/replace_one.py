"""Replace a single search string."""

__all__ = ["replace_one"]


def replace_one(subject: str, search: str, replacement: str) -> str:
    """Replace every occurrence of search by replacement."""
    if not search:
        return subject
    return subject.replace(search, replacement)
