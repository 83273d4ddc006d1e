"""
CSV field escaping - no external dependencies.

A value is quoted when it contains a comma, a double quote or a line break,
or when it starts or ends with a space. Double quotes inside the value are
doubled.
"""

__all__ = [
    "to_csv_safe",
    "to_csv_row",
]

from typing import Iterable

from ..config import CONFIG
from ..errors import InvalidArgumentError, require_not_none


def _needs_quoting(value: str) -> bool:
    return (
        "," in value
        or '"' in value
        or CONFIG["csv_line_separator"] in value
        or "\n" in value
        or value[0] == " "
        or value[-1] == " "
    )


def to_csv_safe(value: str) -> str:
    """
    Make a value safe to write as one field of a CSV record.

    Args:
        value: Field value

    Returns:
        The value, quoted and with inner quotes doubled when needed

    Example:
        >>> to_csv_safe("plain")
        'plain'
        >>> to_csv_safe("a,b")
        '"a,b"'
        >>> to_csv_safe('a "b" c')
        '"a ""b"" c"'
    """
    require_not_none(value, "value")
    if not value:
        return value

    if not _needs_quoting(value):
        return value
    return '"' + value.replace('"', '""') + '"'


def to_csv_row(values: Iterable[str]) -> str:
    """
    Join values into one CSV record, escaping each with to_csv_safe.

    Example:
        >>> to_csv_row(["id", "name, first", ""])
        'id,"name, first",'
    """
    require_not_none(values, "values")
    fields = []
    for index, value in enumerate(values):
        if value is None:
            raise InvalidArgumentError("values", f"values[{index}] is required")
        fields.append(to_csv_safe(value))
    return ",".join(fields)
