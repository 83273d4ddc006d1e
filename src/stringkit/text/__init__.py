"""
Text utilities subpackage - no external dependencies besides loguru.

Pure functions for suffixes, classification, replacement, CSV escaping
and casing.
"""

from stringkit.text.casing import (
    Culture,
    INVARIANT,
    resolve_culture,
    fold_upper,
    to_lower,
)

from stringkit.text.suffix import append_missing

from stringkit.text.classify import is_alphanumeric

from stringkit.text.replace import (
    replace_case_insensitive,
    estimate_capacity,
)

from stringkit.text.csv_safe import (
    to_csv_safe,
    to_csv_row,
)

from stringkit.text.trim import to_lower_trimmed

__all__ = [
    # casing
    "Culture",
    "INVARIANT",
    "resolve_culture",
    "fold_upper",
    "to_lower",
    # suffix
    "append_missing",
    # classify
    "is_alphanumeric",
    # replace
    "replace_case_insensitive",
    "estimate_capacity",
    # csv_safe
    "to_csv_safe",
    "to_csv_row",
    # trim
    "to_lower_trimmed",
]
