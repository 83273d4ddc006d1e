"""Append a suffix when missing."""

__all__ = ["append_missing"]

from ..errors import require_not_none


def append_missing(value: str, suffix: str) -> str:
    """
    Append suffix to value unless value already ends with it.

    The comparison is ordinal (case-sensitive) and takes no culture: casing
    rules never make a suffix count as present. An empty suffix always
    returns value unchanged.

    Args:
        value: Base text
        suffix: Text the result must end with

    Returns:
        value itself if it already ends with suffix, else value + suffix

    Example:
        >>> append_missing("data/raw", "/")
        'data/raw/'
        >>> append_missing("report.csv", ".csv")
        'report.csv'
    """
    require_not_none(value, "value")
    require_not_none(suffix, "suffix")
    if value.endswith(suffix):
        return value
    return value + suffix
