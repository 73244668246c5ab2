"""Default configuration constants for daeadset."""

# Length in bytes of the identifier stamped on ciphertexts of non-raw keys:
# one start byte followed by a 4-byte big-endian key id.
NON_RAW_PREFIX_SIZE = 5

# Raw keys stamp nothing
RAW_PREFIX = b""

# Identifier start bytes per output prefix type
TINK_START_BYTE = 0x01
LEGACY_START_BYTE = 0x00

# Key ids are unsigned 32-bit integers
MAX_KEY_ID = 0xFFFFFFFF
