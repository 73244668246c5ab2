"""Deterministic AEAD over a key set: encrypt with the primary, decrypt with any key."""

from __future__ import annotations

import logging

from .crypto.utils import ensure_bytes, require_bytes
from .errors import ConfigError, DecryptionFailed
from .keyset import KeyEntry, KeySet
from .types import BytesLike

logger = logging.getLogger("daeadset")


class KeySetDeterministicAead:
    """Deterministic AEAD backed by every key of a key set.

    Encryption always uses the primary key and prefixes the result with the
    primary's identifier. Decryption first tries the keys whose identifier
    matches the ciphertext prefix, then every raw key on the whole ciphertext.

    Instances hold no mutable state and may be shared between threads, as long
    as the underlying primitives can be.
    """

    def __init__(self, keyset: KeySet, prefix_size: int | None = None) -> None:
        """Wrap a key set.

        Args:
            keyset: A validated key set.
            prefix_size: Identifier length; defaults to the key set's.

        Raises:
            ConfigError: If ``keyset`` is not a KeySet or ``prefix_size`` disagrees with it.
        """
        _validate(keyset, prefix_size)
        self._keyset = keyset
        self._prefix_size = keyset.prefix_size

    @property
    def prefix_size(self) -> int:
        """Length in bytes of the identifier prefix on non-raw ciphertexts."""
        return self._prefix_size

    def encrypt(self, plaintext: BytesLike | None, associated_data: BytesLike | None) -> bytes:
        """Encrypt with the primary key.

        Args:
            plaintext: The plaintext, None is treated as empty.
            associated_data: The associated data, None is treated as empty.

        Returns:
            The primary's identifier followed by the primitive's ciphertext.

        Raises:
            Exception: Whatever the primary's primitive raises, unchanged.
        """
        plaintext = ensure_bytes(plaintext)
        associated_data = ensure_bytes(associated_data)

        primary = self._keyset.primary()
        ciphertext = primary.primitive.encrypt(plaintext, associated_data)
        return primary.identifier + ciphertext

    def decrypt(self, ciphertext: BytesLike, associated_data: BytesLike | None) -> bytes:
        """Decrypt with the first key that accepts the ciphertext.

        Args:
            ciphertext: The ciphertext, identifier prefix included.
            associated_data: The associated data, None is treated as empty.

        Returns:
            The plaintext.

        Raises:
            DecryptionFailed: If no key decrypts the ciphertext.
            TypeError: If ``ciphertext`` is not bytes-like.
        """
        # The ciphertext is used as given: its prefix selects the key
        ciphertext = require_bytes(ciphertext)
        associated_data = ensure_bytes(associated_data)

        if len(ciphertext) > self._prefix_size:
            identifier = ciphertext[: self._prefix_size]
            payload = ciphertext[self._prefix_size :]
            plaintext = _try_entries(self._keyset.lookup(identifier), payload, associated_data)
            if plaintext is not None:
                return plaintext
            logger.debug("No key matching the ciphertext prefix decrypted it")

        plaintext = _try_entries(self._keyset.raw_entries(), ciphertext, associated_data)
        if plaintext is not None:
            return plaintext

        logger.debug("Decryption failed with every candidate key")
        raise DecryptionFailed("decryption failed")

    def __repr__(self) -> str:
        return f"KeySetDeterministicAead({self._keyset!r})"


def wrap(keyset: KeySet, prefix_size: int | None = None) -> KeySetDeterministicAead:
    """Turn a key set into a single deterministic AEAD.

    Args:
        keyset: A validated key set.
        prefix_size: Identifier length; defaults to the key set's.

    Returns:
        A deterministic AEAD that encrypts with the primary and decrypts with any key.

    Raises:
        ConfigError: If the key set cannot be wrapped.
    """
    return KeySetDeterministicAead(keyset, prefix_size=prefix_size)


def _validate(keyset: KeySet, prefix_size: int | None) -> None:
    """Validate a key set before wrapping it."""
    if not isinstance(keyset, KeySet):
        raise ConfigError(f"Expected KeySet, got {type(keyset).__name__}")
    if prefix_size is not None and prefix_size != keyset.prefix_size:
        raise ConfigError(
            f"Prefix size {prefix_size} does not match key set prefix size {keyset.prefix_size}"
        )


def _try_entries(
    entries: tuple[KeyEntry, ...], ciphertext: bytes, associated_data: bytes
) -> bytes | None:
    """Return the plaintext from the first entry that decrypts, or None."""
    for entry in entries:
        try:
            return entry.primitive.decrypt(ciphertext, associated_data)
        except Exception:
            # Wrong key or corrupt payload, try the next one
            continue
    return None
