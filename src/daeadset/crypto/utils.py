"""Byte handling utilities for daeadset."""

from __future__ import annotations

from ..types import BytesLike


def ensure_bytes(data: BytesLike | None) -> bytes:
    """Normalize an optional buffer to ``bytes``.

    ``None`` becomes an empty buffer so primitives never see a missing
    argument. Any other bytes-like value is copied into ``bytes`` unchanged.

    Args:
        data: The buffer to normalize, or None.

    Returns:
        The buffer as bytes.

    Raises:
        TypeError: If ``data`` is not bytes-like (for example a ``str``).
    """
    if data is None:
        return b""
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"Expected bytes-like object, got {type(data).__name__}")


def require_bytes(data: BytesLike) -> bytes:
    """Copy a bytes-like value into ``bytes``, rejecting everything else.

    Unlike :func:`ensure_bytes`, ``None`` is not accepted. Integers are
    rejected rather than turned into zero-filled buffers.

    Args:
        data: The buffer to convert.

    Returns:
        The buffer as bytes.

    Raises:
        TypeError: If ``data`` is not bytes-like.
    """
    if data is None:
        raise TypeError("Expected bytes-like object, got NoneType")
    return ensure_bytes(data)
