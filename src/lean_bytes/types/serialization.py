"""
JSON helpers for byte strings.

These go through pydantic, the same path a model field takes, and translate
its validation errors back into the byte string error types.
"""

from __future__ import annotations

from collections.abc import Container
from typing import Any

from pydantic import TypeAdapter, ValidationError

from .byte_string import ByteString
from .exceptions import ByteStringValueError, ShapeError

BYTE_STRING_ADAPTER: TypeAdapter[ByteString] = TypeAdapter(ByteString)
"""Pydantic adapter for standalone (non-model) byte string values."""

_SHAPE_ERROR_TYPES = frozenset({"string_type"})
"""Pydantic error types meaning the JSON value was not a string."""


def to_json(value: Any) -> str:
    """
    Encode a byte string as a JSON document.

    Any bytes-like value is accepted and encoded as a `ByteString`.

    Returns:
        A JSON string literal, e.g. `"0xdeadbeef"` including the quotes.
    """
    if not isinstance(value, ByteString):
        value = ByteString(value)
    return BYTE_STRING_ADAPTER.dump_json(value).decode()


def from_json(text: str | bytes) -> ByteString:
    """
    Decode a JSON document holding a single encoded byte string.

    Raises:
        ShapeError: If the JSON value is not a string.
        MissingPrefixError: If the string lacks the `0x` prefix.
        HexDecodeError: If the payload is not valid hex.
        ValidationError: If `text` is not valid JSON.
    """
    try:
        return BYTE_STRING_ADAPTER.validate_json(text)
    except ValidationError as exc:
        raise_byte_string_error(exc)
        raise


def raise_byte_string_error(
    exc: ValidationError, fields: Container[str | int] | None = None
) -> None:
    """
    Raise the first byte string error wrapped by `exc`, if there is one.

    Args:
        exc: The pydantic failure to inspect.
        fields: When given, only errors located at one of these top-level
            field names are considered. Other failures are left to the caller.
    """
    for error in exc.errors():
        loc = error["loc"]
        if fields is not None and (not loc or loc[0] not in fields):
            continue
        if error["type"] in _SHAPE_ERROR_TYPES:
            value = error.get("input")
            raise ShapeError("str", type(value).__name__, value) from exc
        cause = error.get("ctx", {}).get("error")
        if isinstance(cause, ByteStringValueError):
            raise cause from exc
