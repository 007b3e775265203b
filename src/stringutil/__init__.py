"""
stringutil - Small, stateless string helpers.

This package is organized into focused subpackages:

- strings/  Pure string functions (loguru for debug records only)
            - checks: starts_with, ends_with, contains, contains_any,
              contains_all
            - removal: remove_prefix, remove_suffix
            - replacement: replace, replace_one, replace_many,
              replace_mapping

Logging is disabled by default; enable it with:
    from loguru import logger
    logger.enable("stringutil")

Usage:
    from stringutil import starts_with, remove_prefix, replace
    from stringutil.strings import replace_mapping
"""

__version__ = "0.0.1"

from loguru import logger

from stringutil.strings import (
    contains,
    contains_all,
    contains_any,
    ends_with,
    remove_prefix,
    remove_suffix,
    replace,
    replace_many,
    replace_mapping,
    replace_one,
    starts_with,
)

logger.disable("stringutil")

__all__ = [
    "__version__",
    # strings.checks
    "starts_with",
    "ends_with",
    "contains",
    "contains_any",
    "contains_all",
    # strings.removal
    "remove_prefix",
    "remove_suffix",
    # strings.replacement
    "replace",
    "replace_one",
    "replace_many",
    "replace_mapping",
]
