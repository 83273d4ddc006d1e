"""
Culture-aware casing - no external dependencies.

Casing rules are passed explicitly as a Culture instead of being read from
process locale, so results are reproducible. The invariant culture uses
Python's Unicode case mapping; Turkic cultures add the dotted and dotless
i mappings.
"""

__all__ = [
    "Culture",
    "INVARIANT",
    "resolve_culture",
    "fold_upper",
    "to_lower",
]

from dataclasses import dataclass
from typing import Union

from ..config import CONFIG

_TURKIC_LANGUAGES = frozenset({"tr", "az"})

# Mappings applied before str.upper() / str.lower()
_TURKIC_UPPER = str.maketrans({"i": "İ"})
_TURKIC_LOWER = str.maketrans({"I": "ı", "İ": "i"})


@dataclass(frozen=True)
class Culture:
    """Named casing rules, e.g. "invariant", "en-US" or "tr-TR"."""

    name: str = "invariant"

    @property
    def language(self) -> str:
        """Lowercase language part of the name ("tr" for "tr-TR")."""
        return self.name.replace("_", "-").split("-")[0].lower()

    @property
    def is_turkic(self) -> bool:
        return self.language in _TURKIC_LANGUAGES


INVARIANT = Culture()


def resolve_culture(culture: Union[Culture, str, None] = None) -> Culture:
    """
    Turn a culture argument into a Culture.

    Args:
        culture: A Culture, a culture name, or None for the configured default

    Returns:
        Culture instance

    Example:
        >>> resolve_culture("tr-TR").language
        'tr'
        >>> resolve_culture(None) == INVARIANT
        True
    """
    if culture is None:
        culture = CONFIG["default_culture"]
    if isinstance(culture, Culture):
        return culture
    return Culture(str(culture))


def _upper_char(char: str) -> str:
    upper = char.upper()
    return upper if len(upper) == 1 else char


def fold_upper(text: str, culture: Union[Culture, str, None] = None) -> str:
    """
    Uppercase text one code point at a time, for comparisons.

    A character whose uppercase form spans several code points ("ß" -> "SS")
    is kept as is, so the result always has the length of the input and an
    index into one is an index into the other.

    Example:
        >>> fold_upper("straße")
        'STRAßE'
        >>> fold_upper("istanbul", "tr")
        'İSTANBUL'
    """
    culture = resolve_culture(culture)
    if culture.is_turkic:
        text = text.translate(_TURKIC_UPPER)
    folded = text.upper()
    # Uppercase mappings only ever expand, so equal length means 1:1
    if len(folded) == len(text):
        return folded
    return "".join(_upper_char(char) for char in text)


def to_lower(text: str, culture: Union[Culture, str, None] = None) -> str:
    """Lowercase text under the casing rules of culture."""
    culture = resolve_culture(culture)
    if culture.is_turkic:
        text = text.translate(_TURKIC_LOWER)
    return text.lower()
