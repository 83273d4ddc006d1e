"""
stringkit - Small, stateless string utilities.

This package is organized into focused subpackages:

- text/     Pure text utilities
            - suffix: append_missing
            - classify: is_alphanumeric
            - replace: replace_case_insensitive
            - csv_safe: to_csv_safe, to_csv_row
            - trim: to_lower_trimmed
            - casing: Culture, fold_upper, to_lower

- codec/    Text <-> bytes (codecs only)
            - encodings: to_bytes, to_ascii_bytes, to_unicode_bytes,
              to_utf8_bytes, from_bytes

- plural/   Pluralization (requires inflect)
            - pluralizer: pluralize, PLURALIZER
            - shared: SharedResource

Errors are reported as InvalidArgumentError (a ValueError). Library
defaults live in stringkit.config.CONFIG.

Logging goes through loguru and is disabled for this package by default;
call ``logger.enable("stringkit")`` to see it.

Usage:
    from stringkit import replace_case_insensitive, to_csv_safe, pluralize
    from stringkit.codec import to_bytes, from_bytes
"""

__version__ = "0.1.0"

from loguru import logger

from stringkit.errors import InvalidArgumentError

from stringkit.text import (
    Culture,
    append_missing,
    is_alphanumeric,
    replace_case_insensitive,
    to_csv_safe,
    to_csv_row,
    to_lower_trimmed,
)

from stringkit.codec import (
    to_bytes,
    to_ascii_bytes,
    to_unicode_bytes,
    to_utf8_bytes,
    from_bytes,
)

from stringkit.plural import (
    PLURALIZER,
    SharedResource,
    pluralize,
)

logger.disable("stringkit")

__all__ = [
    "__version__",
    # errors
    "InvalidArgumentError",
    # text
    "Culture",
    "append_missing",
    "is_alphanumeric",
    "replace_case_insensitive",
    "to_csv_safe",
    "to_csv_row",
    "to_lower_trimmed",
    # codec
    "to_bytes",
    "to_ascii_bytes",
    "to_unicode_bytes",
    "to_utf8_bytes",
    "from_bytes",
    # plural
    "PLURALIZER",
    "SharedResource",
    "pluralize",
]
