"""Crockford Base32 and UUID hex codec for raw ULIDs."""

from .alphabet import (
  CROCKFORD_ALPHABET,
  HEX_DIGITS,
  hex_to_value,
  symbol_to_value,
  value_to_symbol,
)
from .decoder import decode_base32, decode_uuid_hex
from .encoder import encode_base32, encode_uuid_hex

__all__ = [
  "CROCKFORD_ALPHABET",
  "HEX_DIGITS",
  "decode_base32",
  "decode_uuid_hex",
  "encode_base32",
  "encode_uuid_hex",
  "hex_to_value",
  "symbol_to_value",
  "value_to_symbol",
]
