"""Raw byte strings with a canonical `0x`-prefixed hex text encoding."""

from .types import ByteString

__all__ = ["ByteString"]
