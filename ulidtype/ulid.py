"""
ULID (Universally Unique Lexicographically Sortable Identifier) utilities.

A ULID is 128 bits: a 48-bit millisecond timestamp followed by 80 bits of
randomness. It travels in three interchangeable forms:

- raw: 16 bytes, big-endian
- text: 26 Crockford Base32 characters, e.g. "01BZ13RV29T5S8HV45EDNC748P"
- uuid: 36-character hyphenated hex, e.g. "015fc23c-6c49-d172-88ec-85736ac39116"

Text sorts lexicographically in creation-time order, which keeps B-tree
indexes append-mostly.

The cast/dump/load/autogenerate hooks are the contract used by the
SQLAlchemy column type in ulidtype.types. Malformed input makes them return
None rather than raise; cast_strict is the raising variant.
"""

import secrets
import time
import uuid
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Optional, Union

from .codec import (
  CROCKFORD_ALPHABET,
  decode_base32,
  decode_uuid_hex,
  encode_base32,
  encode_uuid_hex,
)
from .codec.alphabet import BASE32_DECODE_TABLE, INVALID
from .config.constants import (
  RANDOMNESS_BYTE_LENGTH,
  TIMESTAMP_BYTE_LENGTH,
  TIMESTAMP_MASK,
  ULID_RAW_LENGTH,
  ULID_TEXT_LENGTH,
  UUID_TEXT_LENGTH,
)
from .exceptions import DecodeError, ULIDCastError
from .logger import codec_logger, log_error, log_rejection

ULIDValue = Union[str, bytes, bytearray, memoryview, uuid.UUID]

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class ULIDShape(str, Enum):
  """Recognized shapes of ULID input."""

  TEXT = "text"
  UUID = "uuid"
  RAW = "raw"
  UNKNOWN = "unknown"


def classify(value: object) -> ULIDShape:
  """
  Classify a value by type and length.

  - str or bytes of 26 characters: TEXT
  - str or bytes of 36 characters, or a uuid.UUID: UUID
  - bytes of length 16: RAW

  Anything else is UNKNOWN. Only shape is checked, not content.
  """
  if isinstance(value, uuid.UUID):
    return ULIDShape.UUID
  if isinstance(value, (bytes, bytearray, memoryview)):
    size = len(value)
    if size == ULID_RAW_LENGTH:
      return ULIDShape.RAW
  elif isinstance(value, str):
    size = len(value)
  else:
    return ULIDShape.UNKNOWN

  if size == ULID_TEXT_LENGTH:
    return ULIDShape.TEXT
  if size == UUID_TEXT_LENGTH:
    return ULIDShape.UUID
  return ULIDShape.UNKNOWN


def _as_str(value: ULIDValue) -> str:
  if isinstance(value, uuid.UUID):
    return str(value)
  if isinstance(value, str):
    return value
  return bytes(value).decode("latin-1")


def _to_raw(value: ULIDValue, shape: ULIDShape) -> bytes:
  """Normalize any recognized shape to raw bytes. Raises DecodeError."""
  if shape is ULIDShape.TEXT:
    return decode_base32(value)
  if shape is ULIDShape.UUID:
    if isinstance(value, uuid.UUID):
      return value.bytes
    return decode_uuid_hex(value)
  if shape is ULIDShape.RAW:
    return bytes(value)
  raise DecodeError(
    f"Unrecognized ULID input of type {type(value).__name__}",
    error_code="INVALID_LENGTH",
    details={"type": type(value).__name__},
  )


# ============================================================================
# Generation
# ============================================================================


def crockford_alphabet() -> str:
  """Return the 32-symbol Crockford Base32 alphabet."""
  return CROCKFORD_ALPHABET


def _now_ms() -> int:
  return time.time_ns() // 1_000_000


def generate_raw(timestamp_ms: Optional[int] = None) -> bytes:
  """
  Generate a raw 16-byte ULID.

  Args:
      timestamp_ms: Unix time in milliseconds; defaults to the current time.
          Only the low 48 bits are kept.

  Returns:
      6 timestamp bytes followed by 10 bytes from the system CSPRNG
  """
  if timestamp_ms is None:
    timestamp_ms = _now_ms()
  timestamp = (int(timestamp_ms) & TIMESTAMP_MASK).to_bytes(
    TIMESTAMP_BYTE_LENGTH, "big"
  )
  return timestamp + secrets.token_bytes(RANDOMNESS_BYTE_LENGTH)


def generate(timestamp_ms: Optional[int] = None) -> str:
  """
  Generate a Crockford Base32 encoded ULID.

  Args:
      timestamp_ms: Unix time in milliseconds; defaults to the current time

  Returns:
      A 26-character ULID string.
      Example: "01ARYZ6S41TSV4RRFFQ69G5FAV"
  """
  return encode_base32(generate_raw(timestamp_ms))


def generate_uuid(timestamp_ms: Optional[int] = None) -> str:
  """
  Generate a ULID rendered in UUID hex form.

  Returns:
      A 36-character lowercase UUID string.
      Example: "01563df3-6481-957d-ce2c-3796c6ba474f"
  """
  return encode_uuid_hex(generate_raw(timestamp_ms))


# ============================================================================
# Validation and conversion
# ============================================================================


def is_valid(text: object) -> bool:
  """
  Check that text is 26 characters, all from the Crockford alphabet.

  Character-level check only; upper-case symbols are required.
  """
  if isinstance(text, str):
    codes = [ord(ch) for ch in text]
  elif isinstance(text, (bytes, bytearray, memoryview)):
    codes = bytes(text)
  else:
    return False
  if len(codes) != ULID_TEXT_LENGTH:
    return False
  return all(code < 256 and BASE32_DECODE_TABLE[code] != INVALID for code in codes)


def to_uuid(value: ULIDValue) -> Optional[str]:
  """
  Convert ULID text or raw bytes to UUID hex form.

  Returns:
      The 36-character UUID string, or None if the value is not a ULID
  """
  shape = classify(value)
  try:
    if shape is ULIDShape.TEXT:
      return encode_uuid_hex(decode_base32(value))
    if shape is ULIDShape.RAW:
      return encode_uuid_hex(value)
  except DecodeError as e:
    log_rejection(codec_logger, e, "to_uuid", shape.value)
  return None


def from_uuid(value: ULIDValue) -> Optional[str]:
  """
  Convert UUID hex text to ULID text.

  Returns:
      The 26-character ULID string, or None if the value is not a UUID
  """
  shape = classify(value)
  if shape is not ULIDShape.UUID:
    return None
  try:
    return encode_base32(_to_raw(value, shape))
  except DecodeError as e:
    log_rejection(codec_logger, e, "from_uuid", shape.value)
    return None


def extract_timestamp(value: ULIDValue) -> Optional[int]:
  """
  Extract the millisecond timestamp from a ULID in any of its forms.

  Args:
      value: ULID text, UUID text or raw bytes

  Returns:
      Unix timestamp in milliseconds if valid, None otherwise
  """
  shape = classify(value)
  try:
    raw = _to_raw(value, shape)
  except DecodeError as e:
    log_rejection(codec_logger, e, "extract_timestamp", shape.value)
    return None
  return int.from_bytes(raw[:TIMESTAMP_BYTE_LENGTH], "big")


def extract_datetime(value: ULIDValue) -> Optional[datetime]:
  """Extract the ULID timestamp as an aware UTC datetime."""
  timestamp_ms = extract_timestamp(value)
  if timestamp_ms is None:
    return None
  return _EPOCH + timedelta(milliseconds=timestamp_ms)


# ============================================================================
# Column type hooks
# ============================================================================


def cast(value: object) -> Optional[str]:
  """
  Cast application input to ULID text.

  ULID text is validated and returned unchanged; UUID text is validated and
  converted. Any other input yields None.
  """
  shape = classify(value)
  if shape is ULIDShape.TEXT:
    return _as_str(value) if is_valid(value) else None
  if shape is ULIDShape.UUID:
    try:
      return encode_base32(_to_raw(value, shape))
    except DecodeError as e:
      log_rejection(codec_logger, e, "cast", shape.value)
      return None
  # RAW and UNKNOWN are not castable
  return None


def cast_strict(value: object, type_name: str = "ULID") -> str:
  """
  Same as cast() but raises on invalid input.

  Raises:
      ULIDCastError: identifying the offending value and expected type
  """
  result = cast(value)
  if result is None:
    error = ULIDCastError(value, type_name)
    log_error(codec_logger, error, "ulid", "cast_strict", metadata=error.details)
    raise error
  return result


def dump(value: object) -> Optional[bytes]:
  """
  Convert ULID text or UUID text into the 16-byte storage form.

  Returns:
      Raw bytes, or None if the value cannot be dumped
  """
  shape = classify(value)
  if shape in (ULIDShape.TEXT, ULIDShape.UUID):
    try:
      return _to_raw(value, shape)
    except DecodeError as e:
      log_rejection(codec_logger, e, "dump", shape.value)
      return None
  # Raw bytes are already in storage form but are not accepted as input
  return None


def load(value: object) -> Optional[str]:
  """
  Convert the 16-byte storage form back into ULID text.

  Returns:
      ULID text, or None if the value is not 16 bytes
  """
  if classify(value) is not ULIDShape.RAW:
    return None
  return encode_base32(value)


def autogenerate() -> str:
  """Default value factory for ULID columns."""
  return generate()
