"""ASCII alphanumeric check."""

__all__ = ["is_alphanumeric"]

import re

from ..errors import require_not_none

_NON_ALPHANUMERIC = re.compile(r"[^a-zA-Z0-9]")


def is_alphanumeric(value: str) -> bool:
    """True if every character is an ASCII letter or digit. Empty text is alphanumeric."""
    require_not_none(value, "value")
    return _NON_ALPHANUMERIC.search(value) is None
