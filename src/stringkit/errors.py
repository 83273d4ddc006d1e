"""
Argument validation - no external dependencies.

Every public operation checks its arguments up front and raises
InvalidArgumentError before producing any output.
"""

__all__ = [
    "InvalidArgumentError",
    "require_not_none",
    "require_not_empty",
]

from typing import Any, Optional, TypeVar

T = TypeVar("T")


class InvalidArgumentError(ValueError):
    """Raised when a required argument is absent or unusable."""

    def __init__(self, argument: str, message: Optional[str] = None):
        self.argument = argument
        super().__init__(message or f"{argument} is required")


def require_not_none(value: Optional[T], name: str) -> T:
    """
    Return value, or raise if it is None.

    Args:
        value: Argument to check
        name: Parameter name reported in the error

    Returns:
        The value itself

    Example:
        >>> require_not_none("abc", "value")
        'abc'
        >>> require_not_none(None, "value")
        Traceback (most recent call last):
        ...
        stringkit.errors.InvalidArgumentError: value is required
    """
    if value is None:
        raise InvalidArgumentError(name)
    return value


def require_not_empty(value: Any, name: str) -> Any:
    """Return value, or raise if it is None or empty."""
    require_not_none(value, name)
    if len(value) == 0:
        raise InvalidArgumentError(name, f"{name} must not be empty")
    return value
