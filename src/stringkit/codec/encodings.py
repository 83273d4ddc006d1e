"""
Text <-> bytes conversion in a named encoding - no external dependencies.

Encodings are named by any codec registered with the `codecs` module.
The fixed variants cover ASCII, UTF-16 (little-endian, no byte order mark)
and UTF-8.
"""

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

import codecs
from typing import Optional

from ..config import CONFIG
from ..errors import InvalidArgumentError, require_not_none

ASCII = "ascii"
UNICODE = "utf-16-le"
UTF8 = "utf-8"


def _lookup(encoding: str) -> codecs.CodecInfo:
    require_not_none(encoding, "encoding")
    try:
        return codecs.lookup(encoding)
    except LookupError as e:
        raise InvalidArgumentError("encoding", f"unknown encoding: {encoding}") from e


def to_bytes(value: str, encoding: str, errors: Optional[str] = None) -> bytes:
    """
    Encode text with the named encoding.

    Args:
        value: Text to encode
        encoding: Codec name, e.g. "ascii", "utf-16-le", "utf-8", "latin-1"
        errors: Codec error policy (default: CONFIG["encode_errors"])

    Returns:
        Encoded bytes

    Raises:
        InvalidArgumentError: value or encoding is None, or encoding is unknown

    Example:
        >>> to_bytes("héllo", "ascii")
        b'h?llo'
    """
    require_not_none(value, "value")
    codec = _lookup(encoding)
    encoded, _ = codec.encode(value, errors or CONFIG["encode_errors"])
    return encoded


def to_ascii_bytes(value: str) -> bytes:
    """Encode text as ASCII; other characters become "?"."""
    return to_bytes(value, ASCII)


def to_unicode_bytes(value: str) -> bytes:
    """Encode text as UTF-16 little-endian without a byte order mark."""
    return to_bytes(value, UNICODE)


def to_utf8_bytes(value: str) -> bytes:
    """Encode text as UTF-8."""
    return to_bytes(value, UTF8)


def from_bytes(data: bytes, encoding: str, errors: Optional[str] = None) -> str:
    """
    Decode bytes produced by to_bytes with the same encoding.

    Example:
        >>> from_bytes(to_unicode_bytes("día"), UNICODE)
        'día'
    """
    require_not_none(data, "data")
    codec = _lookup(encoding)
    decoded, _ = codec.decode(data, errors or CONFIG["decode_errors"])
    return decoded
