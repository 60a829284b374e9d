"""Constants of the textual byte string encoding."""

HEX_PREFIX = "0x"
"""Prefix carried by every encoded byte string."""

HEX_PATTERN = r"^0x([0-9a-fA-F]{2})*$"
"""Regular expression matched by every accepted encoded byte string."""

CANONICAL_HEX_PATTERN = r"^0x([0-9a-f]{2})*$"
"""Regular expression matched by every string the encoder produces."""
