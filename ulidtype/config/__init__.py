"""
Centralized configuration package for ulidtype.

This package provides a single source of truth for the environment settings
and fixed constants used by the codec and the column type.
"""

from .constants import (
  STORAGE_BINARY,
  STORAGE_FORMATS,
  STORAGE_UUID,
  ULID_RAW_LENGTH,
  ULID_TEXT_LENGTH,
  UUID_TEXT_LENGTH,
)
from .env import EnvConfig, env

__all__ = [
  # Environment exports
  "EnvConfig",
  "STORAGE_BINARY",
  "STORAGE_FORMATS",
  "STORAGE_UUID",
  # Layout exports
  "ULID_RAW_LENGTH",
  "ULID_TEXT_LENGTH",
  "UUID_TEXT_LENGTH",
  "env",
]
