"""
Case-insensitive substring replacement.

Matching runs on case-folded copies of the text and the pattern; the output
is assembled from the original text, so casing outside the matched regions
is preserved exactly.
"""

__all__ = [
    "replace_case_insensitive",
    "estimate_capacity",
]

import math
from typing import List, Optional, Union

from loguru import logger

from ..errors import require_not_empty, require_not_none
from .casing import Culture, fold_upper


def estimate_capacity(value_length: int, old_length: int, new_length: int) -> int:
    """
    Estimate the length of a replacement result.

    Assumes every old_length-sized slice of the text matches. Exact or high
    when new_length >= old_length, and never below value_length otherwise.
    Informational only: replace_case_insensitive grows past it as needed.

    Example:
        >>> estimate_capacity(11, 5, 5)
        11
        >>> estimate_capacity(4, 2, 3)
        6
    """
    if old_length <= 0:
        raise ValueError("old_length must be positive")
    growth = math.ceil(value_length / old_length) * (new_length - old_length)
    return value_length + max(0, growth)


def replace_case_insensitive(
    value: str,
    old_value: str,
    new_value: Optional[str] = None,
    culture: Union[Culture, str, None] = None,
) -> str:
    """
    Replace every occurrence of old_value in value, ignoring case.

    Occurrences are found left to right and never overlap. A None new_value
    deletes the occurrences.

    Args:
        value: Text to search
        old_value: Non-empty pattern to replace
        new_value: Replacement text (None means "")
        culture: Casing rules for the comparison (default: invariant)

    Returns:
        New text with replacements applied, or value itself if nothing matched

    Raises:
        InvalidArgumentError: value is None, or old_value is None or empty

    Example:
        >>> replace_case_insensitive("Hello World", "WORLD", "there")
        'Hello there'
        >>> replace_case_insensitive("aaaa", "aa", "b")
        'bb'
    """
    require_not_none(value, "value")
    require_not_empty(old_value, "old_value")
    if new_value is None:
        new_value = ""

    folded_value = fold_upper(value, culture)
    folded_pattern = fold_upper(old_value, culture)
    step = len(old_value)

    parts: List[str] = []
    cursor = 0
    matches = 0
    position = folded_value.find(folded_pattern, cursor)
    while position != -1:
        parts.append(value[cursor:position])
        parts.append(new_value)
        cursor = position + step
        matches += 1
        position = folded_value.find(folded_pattern, cursor)

    if matches == 0:
        return value

    parts.append(value[cursor:])
    logger.debug("Replaced {} occurrence(s) of {!r}", matches, old_value)
    return "".join(parts)
