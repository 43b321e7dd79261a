"""
Decoder for ULID text and UUID hex representations.

Both decoders return the 16-byte raw form and raise a DecodeError subclass
on the first problem found in the input.
"""

from ..config.constants import (
  BASE32_BITS_PER_SYMBOL,
  ULID_BIT_SIZE,
  ULID_RAW_LENGTH,
  ULID_TEXT_LENGTH,
  UUID_HYPHEN_POSITIONS,
  UUID_TEXT_LENGTH,
)
from ..exceptions import InvalidCharacterError, InvalidFormatError, InvalidLengthError
from .alphabet import BASE32_DECODE_TABLE, HEX_DECODE_TABLE, INVALID

_RAW_MASK = (1 << ULID_BIT_SIZE) - 1
_HYPHEN = ord("-")


def _codes(text: str | bytes) -> bytes | list[int]:
  if isinstance(text, (bytes, bytearray, memoryview)):
    return bytes(text)
  if isinstance(text, str):
    # Non-latin-1 characters can never match a table entry.
    return [ord(ch) if ord(ch) < 256 else INVALID for ch in text]
  raise TypeError(f"Expected str or bytes, got {type(text).__name__}")


def _char_at(text: str | bytes, position: int) -> str:
  if isinstance(text, str):
    return text[position]
  return chr(bytes(text)[position])


def decode_base32(text: str | bytes) -> bytes:
  """
  Decode a 26-character Crockford Base32 ULID into its raw form.

  The 26 symbols carry 130 bits; the two leading bits are padding and are
  dropped, so every alphabet-valid 26-character string decodes.

  Args:
      text: ULID text (str or ASCII bytes)

  Returns:
      16 raw bytes, big-endian

  Raises:
      InvalidLengthError: text is not exactly 26 characters
      InvalidCharacterError: a character is not in the alphabet
  """
  codes = _codes(text)
  if len(codes) != ULID_TEXT_LENGTH:
    raise InvalidLengthError("ULID text", ULID_TEXT_LENGTH, len(codes))

  acc = 0
  for position, code in enumerate(codes):
    value = BASE32_DECODE_TABLE[code]
    if value == INVALID:
      raise InvalidCharacterError("ULID text", _char_at(text, position), position)
    acc = (acc << BASE32_BITS_PER_SYMBOL) | value

  return (acc & _RAW_MASK).to_bytes(ULID_RAW_LENGTH, "big")


def decode_uuid_hex(text: str | bytes) -> bytes:
  """
  Decode a hyphenated 8-4-4-4-12 UUID hex string into 16 raw bytes.

  Hex digits are accepted in either case.

  Raises:
      InvalidLengthError: text is not exactly 36 characters
      InvalidFormatError: a hyphen is missing from its fixed position
      InvalidCharacterError: a non-hyphen character is not a hex digit
  """
  codes = _codes(text)
  if len(codes) != UUID_TEXT_LENGTH:
    raise InvalidLengthError("UUID text", UUID_TEXT_LENGTH, len(codes))

  nibbles = []
  for position, code in enumerate(codes):
    if position in UUID_HYPHEN_POSITIONS:
      if code != _HYPHEN:
        raise InvalidFormatError(
          text if isinstance(text, str) else bytes(text).decode("latin-1"), position
        )
      continue
    value = HEX_DECODE_TABLE[code]
    if value == INVALID:
      raise InvalidCharacterError("UUID text", _char_at(text, position), position)
    nibbles.append(value)

  return bytes((high << 4) | low for high, low in zip(nibbles[0::2], nibbles[1::2]))
