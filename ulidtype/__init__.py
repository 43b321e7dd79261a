"""ULID codec and SQLAlchemy column type."""

# Codec
from .codec import (
  CROCKFORD_ALPHABET,
  decode_base32,
  decode_uuid_hex,
  encode_base32,
  encode_uuid_hex,
)

# Exceptions
from .exceptions import (
  DecodeError,
  InvalidCharacterError,
  InvalidFormatError,
  InvalidLengthError,
  ULIDCastError,
  ULIDError,
)

# Logging (opt-in)
from .logger import setup_logging

# Column type
from .types import ULIDType, ulid_column

# ULID utilities
from .ulid import (
  ULIDShape,
  autogenerate,
  cast,
  cast_strict,
  classify,
  crockford_alphabet,
  dump,
  extract_datetime,
  extract_timestamp,
  from_uuid,
  generate,
  generate_raw,
  generate_uuid,
  is_valid,
  load,
  to_uuid,
)

__version__ = "0.4.0"

__all__ = [
  "CROCKFORD_ALPHABET",
  "DecodeError",
  "InvalidCharacterError",
  "InvalidFormatError",
  "InvalidLengthError",
  "ULIDCastError",
  "ULIDError",
  "ULIDShape",
  # Column type
  "ULIDType",
  "autogenerate",
  "cast",
  "cast_strict",
  "classify",
  "crockford_alphabet",
  # Codec
  "decode_base32",
  "decode_uuid_hex",
  "dump",
  "encode_base32",
  "encode_uuid_hex",
  "extract_datetime",
  "extract_timestamp",
  "from_uuid",
  # ULID utilities
  "generate",
  "generate_raw",
  "generate_uuid",
  "is_valid",
  "load",
  "setup_logging",
  "to_uuid",
  "ulid_column",
]
