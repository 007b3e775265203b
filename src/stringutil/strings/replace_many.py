"""Replace several needles by one value."""

__all__ = ["replace_many"]

from collections.abc import Sequence

from .replace_one import replace_one


def replace_many(subject: str, needles: Sequence[str], replacement: str) -> str:
    """
    Replace every needle by replacement, one pass per needle in order.

    Each pass works on the output of the previous one, so replacement
    text can be matched by a later needle.
    """
    for needle in needles:
        subject = replace_one(subject=subject, search=needle, replacement=replacement)
    return subject
