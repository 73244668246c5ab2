"""Cryptographic building blocks for daeadset."""

from .aes_siv import AesSiv
from .constants import AES_SIV_KEY_SIZE, AES_SIV_KEY_SIZES, SIV_SIZE
from .format import output_prefix
from .utils import ensure_bytes, require_bytes

__all__ = [
    "AES_SIV_KEY_SIZE",
    "AES_SIV_KEY_SIZES",
    "SIV_SIZE",
    "AesSiv",
    "ensure_bytes",
    "output_prefix",
    "require_bytes",
]
