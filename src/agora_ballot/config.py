"""
Global configuration for the ballot record codecs.

This module contains environment-specific settings read once at import.
"""

import os

_SUPPORTED_AGORA_ENVS: list[str] = ["prod", "test"]

_SUPPORTED_LOG_LEVELS: list[str] = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]

AGORA_ENV = os.environ.get("AGORA_ENV", "prod").lower()
"""The environment flag ('prod' or 'test'). Defaults to 'prod'."""

if AGORA_ENV not in _SUPPORTED_AGORA_ENVS:
    raise ValueError(
        f"Invalid AGORA_ENV environment variable: '{AGORA_ENV}'. "
        f"Supported values: {_SUPPORTED_AGORA_ENVS}"
    )

AGORA_LOG_LEVEL = os.environ.get(
    "AGORA_LOG_LEVEL", "DEBUG" if AGORA_ENV == "test" else "INFO"
).upper()
"""Log level used by the command line entry point."""

if AGORA_LOG_LEVEL not in _SUPPORTED_LOG_LEVELS:
    raise ValueError(
        f"Invalid AGORA_LOG_LEVEL environment variable: '{AGORA_LOG_LEVEL}'. "
        f"Supported values: {_SUPPORTED_LOG_LEVELS}"
    )
