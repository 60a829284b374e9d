"""Byte string types and their text encoding."""

from .base import ByteStringModel
from .byte_string import ByteString
from .constants import CANONICAL_HEX_PATTERN, HEX_PATTERN, HEX_PREFIX
from .exceptions import (
    ByteStringError,
    ByteStringValueError,
    HexDecodeError,
    MissingPrefixError,
    ShapeError,
)
from .serialization import BYTE_STRING_ADAPTER, from_json, raise_byte_string_error, to_json

__all__ = [
    # Core types
    "ByteString",
    "ByteStringModel",
    # Encoding
    "HEX_PREFIX",
    "HEX_PATTERN",
    "CANONICAL_HEX_PATTERN",
    "BYTE_STRING_ADAPTER",
    "to_json",
    "from_json",
    "raise_byte_string_error",
    # Exceptions
    "ByteStringError",
    "ByteStringValueError",
    "MissingPrefixError",
    "HexDecodeError",
    "ShapeError",
]
