"""
Crockford Base32 alphabet and hex digit lookup tables.

Both tables are 256-entry tuples indexed by byte value and built once at
import. Entries that do not belong to the alphabet hold INVALID.
"""

CROCKFORD_ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
HEX_DIGITS = "0123456789abcdef"

INVALID = 0xFF


def _build_table(pairs) -> tuple[int, ...]:
  table = [INVALID] * 256
  for symbol, value in pairs:
    table[ord(symbol)] = value
  return tuple(table)


BASE32_DECODE_TABLE = _build_table(
  (symbol, value) for value, symbol in enumerate(CROCKFORD_ALPHABET)
)

HEX_DECODE_TABLE = _build_table(
  [(symbol, value) for value, symbol in enumerate(HEX_DIGITS)]
  + [(symbol.upper(), value) for value, symbol in enumerate(HEX_DIGITS) if value > 9]
)


def _ordinal(symbol) -> int | None:
  if isinstance(symbol, int):
    return symbol if 0 <= symbol < 256 else None
  if isinstance(symbol, str) and len(symbol) == 1:
    code = ord(symbol)
    return code if code < 256 else None
  return None


def symbol_to_value(symbol: str | int) -> int | None:
  """
  Look up the 5-bit value of a Base32 symbol.

  Args:
      symbol: A single character or a byte value

  Returns:
      The value 0-31, or None if the symbol is not in the alphabet
  """
  code = _ordinal(symbol)
  if code is None:
    return None
  value = BASE32_DECODE_TABLE[code]
  return None if value == INVALID else value


def value_to_symbol(value: int) -> str:
  """Return the Base32 symbol for a 5-bit value."""
  if not 0 <= value < 32:
    raise ValueError(f"Base32 digit out of range: {value}")
  return CROCKFORD_ALPHABET[value]


def hex_to_value(symbol: str | int) -> int | None:
  """Look up the 4-bit value of a hex digit (case-insensitive)."""
  code = _ordinal(symbol)
  if code is None:
    return None
  value = HEX_DECODE_TABLE[code]
  return None if value == INVALID else value
