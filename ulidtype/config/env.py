"""
Centralized environment variable configuration.

This module provides a single source of truth for the environment variables
read by ulidtype, with type conversions, validation, and default values.
"""

import os

from .constants import STORAGE_BINARY, STORAGE_FORMATS, STORAGE_UUID


# ==========================================================================
# HELPER FUNCTIONS FOR TYPE-SAFE ENVIRONMENT VARIABLE ACCESS
# ==========================================================================


def get_int_env(key: str, default: int) -> int:
  """
  Get an integer environment variable with safe type conversion.

  Args:
      key: Environment variable name
      default: Default value if not set or invalid

  Returns:
      Integer value from environment or default
  """
  try:
    return int(os.getenv(key, str(default)))
  except (ValueError, TypeError):
    # Use print instead of logger to avoid circular import
    print(f"Warning: Invalid {key} value, using default: {default}")
    return default


def get_bool_env(key: str, default: bool = False) -> bool:
  """
  Get a boolean environment variable.

  Args:
      key: Environment variable name
      default: Default value if not set

  Returns:
      Boolean value from environment or default
  """
  value = os.getenv(key, str(default)).lower()
  return value in ("true", "1", "yes", "on")


def get_str_env(key: str, default: str = "") -> str:
  """
  Get a string environment variable.

  Args:
      key: Environment variable name
      default: Default value if not set

  Returns:
      String value from environment or default
  """
  return os.getenv(key, default)


def get_choice_env(key: str, choices: tuple[str, ...], default: str) -> str:
  """
  Get a string environment variable restricted to a set of choices.

  Unknown values fall back to the default with a printed warning.
  """
  value = get_str_env(key, default).strip().lower()
  if value not in choices:
    print(f"Warning: Invalid {key} value, using default: {default}")
    return default
  return value


# ==========================================================================
# MAIN CONFIGURATION CLASS
# ==========================================================================


class EnvConfig:
  """
  Centralized environment variable configuration.

  Variables are organized into logical groups for easier maintenance.
  All variables use type-safe helper functions for consistent behavior.
  """

  # ==========================================================================
  # CORE SETTINGS
  # ==========================================================================

  # Environment and debugging
  ENVIRONMENT = get_str_env("ENVIRONMENT", "dev")
  DEBUG = get_bool_env("DEBUG", False)
  LOG_LEVEL = get_str_env("LOG_LEVEL", "")

  # ==========================================================================
  # COLUMN TYPE SETTINGS
  # ==========================================================================

  # Storage used by ULIDType when no explicit storage is passed:
  # "uuid" stores a native UUID column, "binary" stores 16 raw bytes.
  ULID_STORAGE = get_choice_env("ULID_STORAGE", STORAGE_FORMATS, STORAGE_UUID)

  @classmethod
  def is_development(cls) -> bool:
    """Check if running in development environment."""
    return cls.ENVIRONMENT.lower() in ["dev", "development", "local"]

  @classmethod
  def is_production(cls) -> bool:
    """Check if running in production environment."""
    return cls.ENVIRONMENT.lower() in ["prod", "production"]

  @classmethod
  def is_test(cls) -> bool:
    """Check if running in test environment."""
    return cls.ENVIRONMENT.lower() in ["test", "testing"]

  @classmethod
  def uses_binary_storage(cls) -> bool:
    """Check if ULID columns default to raw 16-byte storage."""
    return cls.ULID_STORAGE == STORAGE_BINARY


env = EnvConfig()
