"""
Static constants configuration.

Fixed sizes and layout of the three ULID representations, plus the storage
formats understood by the column type. None of these change with the
environment.
"""

# =============================================================================
# ULID LAYOUT
# =============================================================================

# Raw form
ULID_RAW_LENGTH = 16  # bytes
ULID_BIT_SIZE = 128
TIMESTAMP_BIT_SIZE = 48
TIMESTAMP_BYTE_LENGTH = 6
RANDOMNESS_BYTE_LENGTH = 10
TIMESTAMP_MASK = (1 << TIMESTAMP_BIT_SIZE) - 1

# Crockford Base32 text form
ULID_TEXT_LENGTH = 26  # characters
BASE32_BITS_PER_SYMBOL = 5
BASE32_PADDING_BITS = 2  # 26 * 5 = 130 = 128 + 2

# UUID text form
UUID_TEXT_LENGTH = 36  # characters
UUID_HYPHEN_POSITIONS = (8, 13, 18, 23)
UUID_GROUP_BOUNDARIES = (4, 6, 8, 10)  # byte offsets followed by a hyphen

# =============================================================================
# COLUMN STORAGE
# =============================================================================

STORAGE_UUID = "uuid"
STORAGE_BINARY = "binary"
STORAGE_FORMATS = (STORAGE_UUID, STORAGE_BINARY)
