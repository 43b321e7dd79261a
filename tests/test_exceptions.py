"""
Test custom exceptions module.

Checks the error hierarchy, error codes and serialized details.
"""

from ulidtype.exceptions import (
  DecodeError,
  InvalidCharacterError,
  InvalidFormatError,
  InvalidLengthError,
  ULIDCastError,
  ULIDError,
)


class TestBaseException:
  """Test the base ULIDError class."""

  def test_base_exception_creation(self):
    error = ULIDError(
      message="Test error",
      error_code="TEST_ERROR",
      details={"key": "value"},
    )

    assert error.message == "Test error"
    assert error.error_code == "TEST_ERROR"
    assert error.details == {"key": "value"}
    assert error.timestamp is not None

  def test_default_error_code_is_class_name(self):
    assert ULIDError("boom").error_code == "ULIDError"

  def test_base_exception_to_dict(self):
    error = ULIDError(message="Test error", details={"key": "value"})

    error_dict = error.to_dict()
    assert error_dict["error"] == "ULIDError"
    assert error_dict["message"] == "Test error"
    assert error_dict["details"] == {"key": "value"}
    assert "timestamp" in error_dict


class TestDecodeErrors:
  """Test codec error types."""

  def test_hierarchy(self):
    for error_cls in (InvalidLengthError, InvalidCharacterError, InvalidFormatError):
      assert issubclass(error_cls, DecodeError)
      assert issubclass(error_cls, ValueError)
      assert issubclass(error_cls, ULIDError)

  def test_invalid_length(self):
    error = InvalidLengthError("ULID text", 26, 25)

    assert error.error_code == "INVALID_LENGTH"
    assert error.details == {"form": "ULID text", "expected": 26, "actual": 25}
    assert "expected 26, got 25" in str(error)

  def test_invalid_character(self):
    error = InvalidCharacterError("ULID text", "U", 3)

    assert error.error_code == "INVALID_CHARACTER"
    assert error.details["character"] == "U"
    assert error.details["position"] == 3

  def test_invalid_format(self):
    error = InvalidFormatError("015fc23c+6c49-d172-88ec-85736ac39116", 8)

    assert error.error_code == "INVALID_FORMAT"
    assert error.details["position"] == 8


class TestCastError:
  """Test the strict cast error."""

  def test_identifies_value_and_type(self):
    error = ULIDCastError("bogus", "ULID")

    assert error.error_code == "CAST_ERROR"
    assert error.value == "bogus"
    assert error.details == {"value": "'bogus'", "type": "ULID"}
    assert str(error) == "Cannot cast 'bogus' to ULID"

  def test_truncates_long_values(self):
    error = ULIDCastError("x" * 500)

    assert len(error.details["value"]) == 103
    assert error.value == "x" * 500
