"""
Global configuration for the byte string types.

This module contains environment-specific settings that apply across the package.
"""

import os

_SUPPORTED_LEAN_BYTES_ENVS: list[str] = ["prod", "test"]

LEAN_BYTES_ENV = os.environ.get("LEAN_BYTES_ENV", "prod").lower()
"""The environment flag ('prod' or 'test'). Defaults to 'prod'."""

if LEAN_BYTES_ENV not in _SUPPORTED_LEAN_BYTES_ENVS:
    raise ValueError(
        f"Invalid LEAN_BYTES_ENV environment variable: '{LEAN_BYTES_ENV}'. "
        f"Supported values: {_SUPPORTED_LEAN_BYTES_ENVS}"
    )

MAX_ERROR_VALUE_LENGTH: int | None = 50 if LEAN_BYTES_ENV == "prod" else None
"""
Maximum length of an offending value quoted in an error message.

`None` disables truncation, which is what the test environment wants.
"""
