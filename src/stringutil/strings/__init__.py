"""
String inspection and transformation - pure functions, no shared state.

Prefix/suffix checks, substring containment, prefix/suffix removal
and search/replace.
"""

from .contains import contains
from .contains_all import contains_all
from .contains_any import contains_any
from .ends_with import ends_with
from .remove_prefix import remove_prefix
from .remove_suffix import remove_suffix
from .replace import replace
from .replace_many import replace_many
from .replace_mapping import replace_mapping
from .replace_one import replace_one
from .starts_with import starts_with

__all__ = [
    # checks
    "starts_with",
    "ends_with",
    "contains",
    "contains_any",
    "contains_all",
    # removal
    "remove_prefix",
    "remove_suffix",
    # replacement
    "replace",
    "replace_one",
    "replace_many",
    "replace_mapping",
]
