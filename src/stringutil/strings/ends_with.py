"""Check string suffix."""

__all__ = ["ends_with"]


def ends_with(subject: str, suffix: str) -> bool:
    """
    Check if subject ends with suffix.

    The last occurrence of suffix must start exactly where the tail of
    subject begins. Empty suffix always matches.

    Example:
        >>> ends_with("this is a test string", "string")
        True
        >>> ends_with("this is a test string", "test")
        False
    """
    expected_position = len(subject) - len(suffix)
    if expected_position < 0:
        return False
    return subject.rfind(suffix) == expected_position
