"""Search and replace with three calling conventions."""

__all__ = ["replace"]

from collections.abc import Iterable, Mapping, Set
from typing import Optional, Union

from loguru import logger

from .replace_many import replace_many
from .replace_mapping import replace_mapping
from .replace_one import replace_one


def _reject(error: Exception) -> Exception:
    """Log a rejected call shape and hand the error back for raising."""
    logger.debug("Rejected replace() call: {}", error)
    return error


def _check_strings(values: Iterable, role: str) -> None:
    """Raise TypeError unless every value is a string."""
    for value in values:
        if not isinstance(value, str):
            kind = type(value).__name__
            raise _reject(TypeError(f"Every {role} must be a string, got {kind}"))


def replace(
    subject: str,
    search_or_mapping: Union[str, Iterable[str], Mapping[str, str]],
    replacement: Optional[str] = None,
) -> str:
    """
    Replace occurrences of search_or_mapping in subject.

    Call shapes:
        replace(subject, "search", "replacement")
        replace(subject, ["first", "second"], "replacement")
        replace(subject, {"first": "last", "hello": "world"})

    Needles and mapping keys are applied one after another, in order;
    each pass works on the output of the previous one.

    Raises:
        ValueError: if the arguments do not form one of the shapes above
        TypeError: if an argument has an unsupported type, or needles
            are given as an unordered set
    """
    if replacement is not None and not isinstance(replacement, str):
        kind = type(replacement).__name__
        raise _reject(TypeError(f"Replacement must be a string, got {kind}"))

    if isinstance(search_or_mapping, str):
        if replacement is None:
            raise _reject(ValueError("A search string requires a replacement value"))
        logger.debug("replace(): single search string")
        return replace_one(
            subject=subject,
            search=search_or_mapping,
            replacement=replacement,
        )

    if isinstance(search_or_mapping, Mapping):
        if replacement is not None:
            raise _reject(
                ValueError("A mapping carries its own replacements; omit replacement")
            )
        _check_strings(search_or_mapping.keys(), role="mapping key")
        _check_strings(search_or_mapping.values(), role="mapping value")
        logger.debug("replace(): mapping of {} keys", len(search_or_mapping))
        return replace_mapping(subject=subject, mapping=search_or_mapping)

    if isinstance(search_or_mapping, Set):
        kind = type(search_or_mapping).__name__
        raise _reject(
            TypeError(f"Needles must be given in a fixed order, got unordered {kind}")
        )

    if isinstance(search_or_mapping, Iterable):
        if replacement is None:
            raise _reject(ValueError("A list of needles requires a replacement value"))
        needles = list(search_or_mapping)
        _check_strings(needles, role="needle")
        logger.debug("replace(): {} needles to one replacement", len(needles))
        return replace_many(subject=subject, needles=needles, replacement=replacement)

    raise _reject(
        TypeError(
            "Expected a search string, a collection of needles or a mapping, "
            f"got {type(search_or_mapping).__name__}"
        )
    )
