"""Error hierarchy for daeadset."""

from __future__ import annotations


class DaeadSetError(Exception):
    """Base exception for all daeadset errors."""

    pass


class ConfigError(DaeadSetError):
    """Key set or wrapper construction invariant violated.

    Raised at construction time only. A wrapper is never built from a key set
    that failed validation.
    """

    pass


class PrimitiveError(DaeadSetError):
    """Internal failure of a deterministic AEAD primitive.

    Covers problems that are not about the ciphertext itself, such as a key of
    the wrong size or a backend failure.
    """

    pass


class DecryptionFailed(DaeadSetError):
    """Ciphertext could not be decrypted.

    CRITICAL: This error is deliberately uninformative. It never says which key
    was tried, how many keys were tried, or why the attempt failed.
    """

    pass
