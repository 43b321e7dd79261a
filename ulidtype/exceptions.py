"""
Custom Exception Types for ulidtype.

This module provides the exception hierarchy used by the ULID codec and the
column type built on top of it. Each exception carries an error code and a
details dictionary so callers can log or serialize failures without parsing
messages.
"""

from typing import Optional, Dict, Any
from datetime import datetime, timezone


class ULIDError(Exception):
  """
  Base exception for all ulidtype errors.

  Attributes:
      message: Human-readable error message
      error_code: Application-specific error code for categorization
      details: Additional error context and metadata
      timestamp: When the error occurred
  """

  def __init__(
    self,
    message: str,
    error_code: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None,
  ):
    super().__init__(message)
    self.message = message
    self.error_code = error_code or self.__class__.__name__
    self.details = details or {}
    self.timestamp = datetime.now(timezone.utc).isoformat()

  def to_dict(self) -> Dict[str, Any]:
    """Convert exception to dictionary for API responses."""
    return {
      "error": self.error_code,
      "message": self.message,
      "details": self.details,
      "timestamp": self.timestamp,
    }


# ============================================================================
# Codec Exceptions
# ============================================================================


class DecodeError(ULIDError, ValueError):
  """Base exception for malformed ULID, UUID or raw input."""

  pass


class InvalidLengthError(DecodeError):
  """Raised when input has the wrong length for its declared form."""

  def __init__(self, form: str, expected: int, actual: int):
    super().__init__(
      f"Invalid {form} length: expected {expected}, got {actual}",
      error_code="INVALID_LENGTH",
      details={"form": form, "expected": expected, "actual": actual},
    )


class InvalidCharacterError(DecodeError):
  """Raised when input contains a symbol outside the alphabet or hex digits."""

  def __init__(self, form: str, character: str, position: int):
    super().__init__(
      f"Invalid {form} character {character!r} at position {position}",
      error_code="INVALID_CHARACTER",
      details={"form": form, "character": character, "position": position},
    )


class InvalidFormatError(DecodeError):
  """Raised when UUID text does not follow the 8-4-4-4-12 hyphen layout."""

  def __init__(self, value: str, position: int):
    super().__init__(
      f"Invalid UUID format: expected '-' at position {position}",
      error_code="INVALID_FORMAT",
      details={"value": value[:36], "position": position},
    )


# ============================================================================
# Casting Exceptions
# ============================================================================


class ULIDCastError(ULIDError, ValueError):
  """Raised by strict casts when a value cannot be turned into a ULID."""

  def __init__(self, value: Any, type_name: str = "ULID"):
    preview = repr(value)
    if len(preview) > 100:
      preview = preview[:100] + "..."
    super().__init__(
      f"Cannot cast {preview} to {type_name}",
      error_code="CAST_ERROR",
      details={"value": preview, "type": type_name},
    )
    self.value = value
    self.type_name = type_name
