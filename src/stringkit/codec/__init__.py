"""
Codec subpackage - no external dependencies.

Conversion between text and bytes in named encodings.
"""

from stringkit.codec.encodings import (
    ASCII,
    UNICODE,
    UTF8,
    to_bytes,
    to_ascii_bytes,
    to_unicode_bytes,
    to_utf8_bytes,
    from_bytes,
)

__all__ = [
    "ASCII",
    "UNICODE",
    "UTF8",
    "to_bytes",
    "to_ascii_bytes",
    "to_unicode_bytes",
    "to_utf8_bytes",
    "from_bytes",
]
