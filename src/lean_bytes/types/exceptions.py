"""Exception hierarchy for the byte string types."""

from __future__ import annotations

from typing import Any

from lean_bytes.config import MAX_ERROR_VALUE_LENGTH


def display_value(value: Any) -> str:
    """Render an offending value for an error or log message, truncated in prod."""
    value_repr = repr(value)
    limit = MAX_ERROR_VALUE_LENGTH
    if limit is not None and len(value_repr) > limit:
        value_repr = value_repr[: limit - 3] + "..."
    return value_repr


class ByteStringError(Exception):
    """
    Base exception for all byte string errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class ByteStringValueError(ByteStringError, ValueError):
    """
    Base class for value-related errors.

    Raised when a text value has the right shape but cannot be decoded.
    """


class MissingPrefixError(ByteStringValueError):
    """
    Raised when an encoded byte string does not start with `0x`.

    Covers strings that are too short to hold the prefix as well as
    strings with any other leading characters.

    Attributes:
        value: The rejected text.
    """

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid value {display_value(value)}: expected 0x prefix")


class HexDecodeError(ByteStringValueError):
    """
    Raised when the payload after the `0x` prefix is not valid hex.

    Attributes:
        value: The rejected text.
        reason: The diagnostic reported by the hex decoder.
    """

    def __init__(self, value: str, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid hex: {reason}")


class ShapeError(ByteStringError, TypeError):
    """
    Raised when a deserialized value is not a text string at all.

    Attributes:
        expected_type: The type that was expected.
        actual_type: The actual type of the value.
        value: The value that was rejected.
    """

    def __init__(
        self,
        expected_type: str,
        actual_type: str,
        value: Any = None,
    ) -> None:
        self.expected_type = expected_type
        self.actual_type = actual_type
        self.value = value

        msg = f"Expected {expected_type}, got {actual_type}"
        if value is not None:
            msg = f"{msg}: {display_value(value)}"

        super().__init__(msg)
