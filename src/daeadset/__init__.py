"""daeadset.

Key-rotation-aware deterministic authenticated encryption: a set of
deterministic AEAD keys behaves like a single key. New ciphertexts are always
produced by the primary key and carry its identifier, while ciphertexts from
any key still in the set keep decrypting.

Example:
    ```python
    from daeadset import AesSiv, KeyEntry, KeySet, OutputPrefixType, wrap

    old = KeyEntry.from_key_id(AesSiv.generate(), 1)
    new = KeyEntry.from_key_id(AesSiv.generate(), 2)

    daead = wrap(KeySet.build([old, new], primary_index=1))
    ciphertext = daead.encrypt(b"alice@example.com", b"users.email")
    assert daead.decrypt(ciphertext, b"users.email") == b"alice@example.com"
    ```
"""

from .constants import (
    LEGACY_START_BYTE,
    MAX_KEY_ID,
    NON_RAW_PREFIX_SIZE,
    RAW_PREFIX,
    TINK_START_BYTE,
)
from .crypto import AesSiv, output_prefix
from .errors import ConfigError, DaeadSetError, DecryptionFailed, PrimitiveError
from .keyset import KeyEntry, KeySet
from .types import DeterministicAead, OutputPrefixType
from .wrapper import KeySetDeterministicAead, wrap

__version__ = "0.1.0"

__all__ = [
    # Main classes
    "KeySet",
    "KeyEntry",
    "KeySetDeterministicAead",
    "wrap",
    # Primitives
    "AesSiv",
    "DeterministicAead",
    "OutputPrefixType",
    "output_prefix",
    # Constants
    "NON_RAW_PREFIX_SIZE",
    "RAW_PREFIX",
    "TINK_START_BYTE",
    "LEGACY_START_BYTE",
    "MAX_KEY_ID",
    # Errors
    "DaeadSetError",
    "ConfigError",
    "PrimitiveError",
    "DecryptionFailed",
    # Version
    "__version__",
]
