"""
Variable-length raw byte string with a canonical hex text encoding.

On the wire a `ByteString` is a single text value: `"0x"` followed by two
lowercase hex digits per byte, in buffer order. The empty buffer is `"0x"`.

Decoding is permissive about letter case (`"0xDEADBEEF"` is accepted) while
encoding always yields the lowercase canonical form.
"""

from __future__ import annotations

import binascii
import logging
from typing import Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import CoreSchema, core_schema
from typing_extensions import Self

from .constants import HEX_PATTERN, HEX_PREFIX
from .exceptions import HexDecodeError, MissingPrefixError, ShapeError, display_value

logger = logging.getLogger(__name__)


class ByteString(bytes):
    """
    An owned, immutable sequence of raw bytes.

    Inherits from `bytes`, so equality, hashing and ordering are by content
    and agree with plain `bytes` values of the same content.
    """

    __slots__ = ()

    def __new__(cls, value: Any = b"") -> Self:
        """
        Build a byte string holding exactly the bytes of `value`.

        Args:
            value: A bytes-like object or an iterable of ints in [0, 255].

        Raises:
            TypeError: If `value` is text or a bare integer.
        """
        # `bytes(n)` would allocate `n` zero bytes and `bytes(s)` needs an encoding.
        if isinstance(value, str):
            raise TypeError(
                f"{cls.__name__} cannot be built from str; "
                f"use {cls.__name__}.deserialize_from_string() for hex text"
            )
        if isinstance(value, int):
            raise TypeError(f"{cls.__name__} cannot be built from int")
        return super().__new__(cls, value)

    @classmethod
    def empty(cls) -> Self:
        """Create a byte string with no content."""
        return cls(b"")

    @property
    def data(self) -> bytes:
        """The content as a plain `bytes` object."""
        return bytes(self)

    def to_hex(self) -> str:
        """
        Encode to the canonical text form.

        Returns:
            `"0x"` followed by two lowercase hex digits per byte.
        """
        return HEX_PREFIX + bytes.hex(self)

    @classmethod
    def deserialize_from_string(cls, value: str) -> Self:
        """
        Decode the text form produced by `to_hex`.

        Both upper and lower case hex digits are accepted. The prefix itself
        is case-sensitive.

        Args:
            value: Text of the form `0x` followed by an even number of hex digits.

        Raises:
            ShapeError: If `value` is not a `str`.
            MissingPrefixError: If `value` does not start with `0x`.
            HexDecodeError: If the payload has odd length or a non-hex character.
        """
        if not isinstance(value, str):
            raise ShapeError("str", type(value).__name__, value)
        if not value.startswith(HEX_PREFIX):
            logger.debug("Rejected byte string without 0x prefix: %s", display_value(value))
            raise MissingPrefixError(value)

        payload = value[len(HEX_PREFIX) :]
        if not payload:
            return cls.empty()

        # Unlike `bytes.fromhex`, this rejects embedded whitespace.
        try:
            decoded = binascii.unhexlify(payload)
        except ValueError as exc:
            logger.debug("Rejected byte string with invalid hex payload: %s", exc)
            raise HexDecodeError(value, str(exc)) from exc
        return cls(decoded)

    from_hex = deserialize_from_string

    @classmethod
    def from_json_value(cls, value: Any) -> Self:
        """
        Decode a value taken from a parsed JSON document.

        Raises:
            ShapeError: If `value` is not a string.
            MissingPrefixError: See `deserialize_from_string`.
            HexDecodeError: See `deserialize_from_string`.
        """
        return cls.deserialize_from_string(value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        """
        Hook into Pydantic's validation system.

        1. JSON input must be a string, which is decoded from hex.
        2. Python input may also be an existing instance or a raw byte buffer.
        3. Serialization always emits the canonical hex string.
        """
        # Strict so that numbers or raw bytes are never coerced into text.
        from_text_schema = core_schema.chain_schema(
            [
                core_schema.str_schema(strict=True),
                core_schema.no_info_plain_validator_function(cls.deserialize_from_string),
            ]
        )

        from_bytes_schema = core_schema.chain_schema(
            [
                # Text is not a byte buffer, so bad hex never falls through to here.
                core_schema.is_instance_schema((bytes, bytearray, memoryview)),
                core_schema.no_info_plain_validator_function(cls),
            ]
        )

        return core_schema.json_or_python_schema(
            json_schema=from_text_schema,
            python_schema=core_schema.union_schema(
                [
                    core_schema.is_instance_schema(cls),
                    from_text_schema,
                    from_bytes_schema,
                ]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda x: x.to_hex(), return_schema=core_schema.str_schema()
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        """Describe the wire form as a pattern-constrained string."""
        return {
            "type": "string",
            "pattern": HEX_PATTERN,
            "description": "0x-prefixed hex encoding of raw bytes",
        }

    def __str__(self) -> str:
        """Return the canonical hex text form."""
        return self.to_hex()

    def __repr__(self) -> str:
        """Return a string representation of the byte string."""
        return f"{type(self).__name__}({self.to_hex()})"
