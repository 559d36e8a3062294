"""Byte-wise bit operations applied to raw RGB pixel buffers."""

from __future__ import annotations

from collections.abc import Callable
from operator import and_, or_, xor

_BYTE = 0xFF


def _combine(data: bytes, mask: bytes, op: Callable[[int, int], int]) -> bytes:
    if len(data) != len(mask):
        raise ValueError(
            f"data and mask differ in length ({len(data)} != {len(mask)})"
        )
    return bytes(op(a, b) for a, b in zip(data, mask))


def xor_bytes(data: bytes, mask: bytes) -> bytes:
    """Return the byte-wise XOR of ``data`` and ``mask``."""
    return _combine(data, mask, xor)


def or_bytes(data: bytes, mask: bytes) -> bytes:
    """Return the byte-wise OR of ``data`` and ``mask``."""
    return _combine(data, mask, or_)


def and_bytes(data: bytes, mask: bytes) -> bytes:
    """Return the byte-wise AND of ``data`` and ``mask``."""
    return _combine(data, mask, and_)


def _check_shift(n: int) -> None:
    if not 0 <= n <= 8:
        raise ValueError(f"rotation must be between 0 and 8 bits, got {n}")


def rotate_left(data: bytes, n: int) -> bytes:
    """Rotate every byte of ``data`` left by ``n`` bits."""
    _check_shift(n)
    return bytes(((b << n) | (b >> (8 - n))) & _BYTE for b in data)


def rotate_right(data: bytes, n: int) -> bytes:
    """Rotate every byte of ``data`` right by ``n`` bits."""
    _check_shift(n)
    return bytes(((b >> n) | (b << (8 - n))) & _BYTE for b in data)