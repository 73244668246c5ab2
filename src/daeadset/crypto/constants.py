"""Cryptographic constants for daeadset."""

# Synthetic IV (the S2V output) prepended to every AES-SIV ciphertext
SIV_SIZE = 16

# AES-SIV key sizes: two AES keys of 128, 192 or 256 bits each
AES_SIV_KEY_SIZES = (32, 48, 64)

# Default key size, AES-256-SIV
AES_SIV_KEY_SIZE = 64
