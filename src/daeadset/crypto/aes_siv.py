"""AES-SIV deterministic AEAD (RFC 5297) for daeadset."""

from __future__ import annotations

import os

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESSIV

from ..errors import DecryptionFailed, PrimitiveError
from ..types import BytesLike
from .constants import AES_SIV_KEY_SIZE, AES_SIV_KEY_SIZES, SIV_SIZE
from .utils import ensure_bytes


class AesSiv:
    """AES-SIV with one associated data component.

    Output is the 16-byte synthetic IV followed by the CTR ciphertext, so
    ciphertexts are exactly 16 bytes longer than their plaintexts.

    Empty plaintext and empty associated data are both accepted.

    Attributes:
        key_size: The total key size in bytes (32, 48 or 64).
    """

    def __init__(self, key: bytes) -> None:
        key = ensure_bytes(key)
        if len(key) not in AES_SIV_KEY_SIZES:
            raise PrimitiveError(
                f"Invalid AES-SIV key size: {len(key)} bytes, expected one of {AES_SIV_KEY_SIZES}"
            )
        try:
            self._aead = AESSIV(key)
        except ValueError as e:
            raise PrimitiveError(f"Invalid AES-SIV key: {e}") from e
        self.key_size = len(key)

    @classmethod
    def generate(cls, key_size: int = AES_SIV_KEY_SIZE) -> AesSiv:
        """Create an instance with a fresh random key.

        Args:
            key_size: The key size in bytes.

        Returns:
            A new AesSiv instance.
        """
        return cls(os.urandom(key_size))

    def encrypt(self, plaintext: BytesLike | None, associated_data: BytesLike | None) -> bytes:
        """Encrypt deterministically.

        Args:
            plaintext: The plaintext, may be empty.
            associated_data: Data authenticated but not encrypted, may be empty.

        Returns:
            The synthetic IV followed by the ciphertext.

        Raises:
            PrimitiveError: If the cipher backend fails.
        """
        plaintext = ensure_bytes(plaintext)
        associated_data = ensure_bytes(associated_data)
        try:
            return self._aead.encrypt(plaintext, [associated_data])
        except Exception as e:
            raise PrimitiveError(f"AES-SIV encryption failed: {e}") from e

    def decrypt(self, ciphertext: BytesLike, associated_data: BytesLike | None) -> bytes:
        """Decrypt and verify.

        Args:
            ciphertext: The synthetic IV followed by the ciphertext.
            associated_data: The associated data used at encryption time.

        Returns:
            The plaintext.

        Raises:
            DecryptionFailed: If the ciphertext is truncated or not authentic.
            PrimitiveError: If the cipher backend fails.
        """
        ciphertext = ensure_bytes(ciphertext)
        associated_data = ensure_bytes(associated_data)
        if len(ciphertext) < SIV_SIZE:
            raise DecryptionFailed("ciphertext too short")

        try:
            return self._aead.decrypt(ciphertext, [associated_data])
        except InvalidTag as e:
            raise DecryptionFailed("invalid ciphertext") from e
        except Exception as e:
            raise PrimitiveError(f"AES-SIV decryption failed: {e}") from e
