"""Ciphertext output prefixes for daeadset.

A non-raw key stamps every ciphertext it produces with a 5-byte identifier:

    identifier = start_byte || key_id (4 bytes, big-endian)

TINK keys use start byte 0x01, LEGACY and CRUNCHY keys use 0x00. RAW keys
stamp nothing and can only be found by trial decryption.
"""

from __future__ import annotations

from ..constants import LEGACY_START_BYTE, MAX_KEY_ID, RAW_PREFIX, TINK_START_BYTE
from ..types import OutputPrefixType


def output_prefix(key_id: int, prefix_type: OutputPrefixType) -> bytes:
    """Compute the identifier a key stamps on its ciphertexts.

    Args:
        key_id: The key id, an unsigned 32-bit integer.
        prefix_type: The key's output prefix type.

    Returns:
        The identifier bytes, empty for RAW keys.

    Raises:
        ValueError: If the key id is out of range or the prefix type is unknown.
    """
    prefix_type = OutputPrefixType(prefix_type)
    if prefix_type is OutputPrefixType.RAW:
        return RAW_PREFIX

    if isinstance(key_id, bool) or not isinstance(key_id, int):
        raise ValueError(f"Key id must be an integer, got {type(key_id).__name__}")
    if not 0 <= key_id <= MAX_KEY_ID:
        raise ValueError(f"Key id out of range: {key_id}, expected 0..{MAX_KEY_ID}")

    if prefix_type is OutputPrefixType.TINK:
        start_byte = TINK_START_BYTE
    else:
        # LEGACY and CRUNCHY share a format
        start_byte = LEGACY_START_BYTE
    return bytes([start_byte]) + key_id.to_bytes(4, "big")
