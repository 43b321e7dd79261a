"""Tests for the Crockford Base32 alphabet and hex lookup tables."""

import pytest

from ulidtype.codec.alphabet import (
  BASE32_DECODE_TABLE,
  CROCKFORD_ALPHABET,
  HEX_DECODE_TABLE,
  INVALID,
  hex_to_value,
  symbol_to_value,
  value_to_symbol,
)


class TestAlphabet:
  """Test the alphabet definition."""

  def test_alphabet_has_32_unique_symbols(self):
    assert len(CROCKFORD_ALPHABET) == 32
    assert len(set(CROCKFORD_ALPHABET)) == 32

  def test_alphabet_excludes_ambiguous_letters(self):
    for letter in "ILOU":
      assert letter not in CROCKFORD_ALPHABET

  def test_alphabet_is_sorted(self):
    """Symbol order must match digit order for sortable text."""
    assert list(CROCKFORD_ALPHABET) == sorted(CROCKFORD_ALPHABET)


class TestSymbolLookup:
  """Test forward and inverse lookups."""

  def test_every_symbol_round_trips(self):
    for value, symbol in enumerate(CROCKFORD_ALPHABET):
      assert symbol_to_value(symbol) == value
      assert symbol_to_value(ord(symbol)) == value
      assert value_to_symbol(value) == symbol

  @pytest.mark.parametrize("symbol", ["I", "L", "O", "U", "i", "a", "$", "-", " ", "é"])
  def test_symbols_outside_alphabet(self, symbol):
    assert symbol_to_value(symbol) is None

  def test_invalid_symbol_inputs(self):
    assert symbol_to_value("") is None
    assert symbol_to_value("AB") is None
    assert symbol_to_value(256) is None
    assert symbol_to_value(-1) is None

  @pytest.mark.parametrize("value", [-1, 32, 100])
  def test_value_to_symbol_out_of_range(self, value):
    with pytest.raises(ValueError):
      value_to_symbol(value)

  def test_decode_table_size_and_sentinel(self):
    assert len(BASE32_DECODE_TABLE) == 256
    assert sum(1 for entry in BASE32_DECODE_TABLE if entry != INVALID) == 32


class TestHexLookup:
  """Test hex digit lookup used by the UUID form."""

  def test_hex_digits_both_cases(self):
    assert hex_to_value("0") == 0
    assert hex_to_value("9") == 9
    assert hex_to_value("a") == 10
    assert hex_to_value("F") == 15
    assert hex_to_value(ord("c")) == 12

  @pytest.mark.parametrize("symbol", ["g", "G", "z", "-", " "])
  def test_non_hex_digits(self, symbol):
    assert hex_to_value(symbol) is None

  def test_hex_table_has_22_entries(self):
    assert len(HEX_DECODE_TABLE) == 256
    assert sum(1 for entry in HEX_DECODE_TABLE if entry != INVALID) == 22
