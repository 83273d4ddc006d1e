"""
Pluralization subpackage - requires inflect.

A lazily built, shared pluralizer and the holder that guards it.
"""

from stringkit.plural.shared import SharedResource

from stringkit.plural.pluralizer import (
    Pluralizer,
    InflectPluralizer,
    PLURALIZER,
    create_pluralizer,
    pluralize,
)

__all__ = [
    # shared
    "SharedResource",
    # pluralizer
    "Pluralizer",
    "InflectPluralizer",
    "PLURALIZER",
    "create_pluralizer",
    "pluralize",
]
