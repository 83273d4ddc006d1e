"""
Word pluralization backed by one shared inflect engine.

The engine is built on the first pluralize() call and reused for the life
of the process. Pass a different SharedResource, or use
PLURALIZER.override(...), to substitute the engine.
"""

__all__ = [
    "Pluralizer",
    "InflectPluralizer",
    "PLURALIZER",
    "create_pluralizer",
    "pluralize",
]

from typing import Optional, Protocol, Union

import inflect
from loguru import logger

from ..config import CONFIG
from ..errors import InvalidArgumentError, require_not_none
from ..text.casing import Culture, resolve_culture
from .shared import SharedResource

_SUPPORTED_LANGUAGES = frozenset({"en"})


class Pluralizer(Protocol):
    """Anything that maps a singular word to its plural form."""

    def pluralize(self, word: str) -> str: ...


class InflectPluralizer:
    """English pluralizer wrapping inflect.engine."""

    def __init__(self, culture: Union[Culture, str, None] = "en"):
        self.culture = resolve_culture(culture)
        if self.culture.language not in _SUPPORTED_LANGUAGES:
            raise InvalidArgumentError(
                "culture",
                f"pluralization is not available for {self.culture.name}",
            )
        self._engine = inflect.engine()
        logger.debug("Created inflect engine for culture {}", self.culture.name)

    def pluralize(self, word: str) -> str:
        # inflect cannot split blank text into words
        if not word.strip():
            return word
        return self._engine.plural(word)


def create_pluralizer() -> Pluralizer:
    """Build the default pluralizer for CONFIG["plural_language"]."""
    return InflectPluralizer(CONFIG["plural_language"])


PLURALIZER: SharedResource[Pluralizer] = SharedResource(
    create_pluralizer, name="pluralizer"
)


def pluralize(
    word: str,
    resource: Optional[SharedResource[Pluralizer]] = None,
) -> str:
    """
    Return the plural form of word.

    Args:
        word: Singular word
        resource: Shared pluralizer to use (default: PLURALIZER)

    Returns:
        Plural form as produced by the pluralizer

    Example:
        >>> pluralize("child")
        'children'
    """
    require_not_none(word, "word")
    if resource is None:
        resource = PLURALIZER
    return resource.get().pluralize(word)
