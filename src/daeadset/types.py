"""Type definitions for daeadset."""

from __future__ import annotations

from enum import Enum
from typing import Protocol, Union, runtime_checkable

# Anything the primitives accept as input bytes
BytesLike = Union[bytes, bytearray, memoryview]


class OutputPrefixType(str, Enum):
    """How a key turns its key id into the identifier it stamps on ciphertexts."""

    TINK = "tink"
    LEGACY = "legacy"
    CRUNCHY = "crunchy"
    RAW = "raw"


@runtime_checkable
class DeterministicAead(Protocol):
    """Deterministic authenticated encryption with associated data.

    Encrypting the same plaintext and associated data under the same key always
    yields the same ciphertext. Implementations must be safe to call
    concurrently from several threads.
    """

    def encrypt(self, plaintext: bytes, associated_data: bytes) -> bytes:
        """Encrypt ``plaintext`` bound to ``associated_data``."""
        ...

    def decrypt(self, ciphertext: bytes, associated_data: bytes) -> bytes:
        """Decrypt ``ciphertext``, raising if it is not authentic."""
        ...
