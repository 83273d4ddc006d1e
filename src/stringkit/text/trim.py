"""Lowercase and trim."""

__all__ = ["to_lower_trimmed"]

from typing import Union

from ..errors import require_not_none
from .casing import Culture, to_lower


def to_lower_trimmed(value: str, culture: Union[Culture, str, None] = None) -> str:
    """Lowercase value under culture, then strip leading and trailing whitespace."""
    require_not_none(value, "value")
    return to_lower(value, culture).strip()
