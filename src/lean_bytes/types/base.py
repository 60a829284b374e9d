"""Strict pydantic base model for records that carry byte strings."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel
from typing_extensions import Self

from .byte_string import ByteString
from .serialization import raise_byte_string_error


class ByteStringModel(BaseModel):
    """
    A strict, immutable record whose `ByteString` fields travel as `0x` hex text.

    Field names are camelCased on the wire, so `call_data` is sent as `callData`.
    Unknown fields are refused.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_default=True,
        extra="forbid",
        frozen=True,
        strict=True,
    )

    @classmethod
    def byte_string_fields(cls) -> tuple[str, ...]:
        """Names of the fields annotated as `ByteString`."""
        return tuple(
            name for name, info in cls.model_fields.items() if info.annotation is ByteString
        )

    @classmethod
    def _byte_string_locations(cls) -> frozenset[str]:
        """Field names and wire aliases under which byte string errors are reported."""
        locations: set[str] = set()
        for name in cls.byte_string_fields():
            locations.add(name)
            alias = cls.model_fields[name].alias
            if alias is not None:
                locations.add(alias)
        return frozenset(locations)

    def to_json(self) -> str:
        """Encode the record as a JSON object with camelCase keys."""
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_json(cls, text: str | bytes) -> Self:
        """
        Decode a record from its JSON form.

        A malformed byte string field surfaces as the typed byte string error.
        Every other failure propagates as pydantic's `ValidationError`.

        Raises:
            ShapeError: If a byte string field holds a non-string JSON value.
            MissingPrefixError: If a byte string field lacks the `0x` prefix.
            HexDecodeError: If a byte string field's payload is not valid hex.
            ValidationError: For any other invalid input.
        """
        try:
            return cls.model_validate_json(text)
        except ValidationError as exc:
            raise_byte_string_error(exc, cls._byte_string_locations())
            raise
