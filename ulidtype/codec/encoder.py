"""
Encoder for raw ULIDs.

Renders the 16-byte raw form either as Crockford Base32 text or as a
hyphenated UUID hex string.
"""

from ..config.constants import (
  BASE32_BITS_PER_SYMBOL,
  UUID_GROUP_BOUNDARIES,
  ULID_RAW_LENGTH,
  ULID_TEXT_LENGTH,
)
from ..exceptions import InvalidLengthError
from .alphabet import CROCKFORD_ALPHABET, HEX_DIGITS

_SYMBOL_MASK = (1 << BASE32_BITS_PER_SYMBOL) - 1


def _raw_bytes(raw: bytes) -> bytes:
  if not isinstance(raw, (bytes, bytearray, memoryview)):
    raise TypeError(f"Expected bytes, got {type(raw).__name__}")
  raw = bytes(raw)
  if len(raw) != ULID_RAW_LENGTH:
    raise InvalidLengthError("raw ULID", ULID_RAW_LENGTH, len(raw))
  return raw


def encode_base32(raw: bytes) -> str:
  """
  Encode a raw ULID as 26 Crockford Base32 characters.

  The 128-bit value is treated as a 130-bit number with two leading zero
  bits, so the first character is always in the range 0-7.

  Returns:
      26-character ULID text
      Example: "01BZ13RV29T5S8HV45EDNC748P"

  Raises:
      InvalidLengthError: raw is not exactly 16 bytes
  """
  value = int.from_bytes(_raw_bytes(raw), "big")
  return "".join(
    CROCKFORD_ALPHABET[(value >> (BASE32_BITS_PER_SYMBOL * shift)) & _SYMBOL_MASK]
    for shift in range(ULID_TEXT_LENGTH - 1, -1, -1)
  )


def encode_uuid_hex(raw: bytes) -> str:
  """
  Encode a raw ULID as a lowercase 8-4-4-4-12 UUID string.

  Raises:
      InvalidLengthError: raw is not exactly 16 bytes
  """
  parts = []
  for index, byte in enumerate(_raw_bytes(raw)):
    if index in UUID_GROUP_BOUNDARIES:
      parts.append("-")
    parts.append(HEX_DIGITS[byte >> 4])
    parts.append(HEX_DIGITS[byte & 0x0F])
  return "".join(parts)
