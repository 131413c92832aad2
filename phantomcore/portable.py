"""Bit alignment, byte-order and four-character-code helpers."""

from __future__ import annotations

import sys

_U16_MASK = 0xFFFF
_U32_MASK = 0xFFFFFFFF


def align(value: int, alignment: int) -> int:
    """Round ``value`` up to a multiple of ``alignment``, which must be a power of two."""
    if alignment <= 0 or alignment & (alignment - 1):
        raise ValueError(f"alignment must be a positive power of two, got {alignment}")
    return (value + (alignment - 1)) & ~(alignment - 1)


def _fourcc(text: str) -> int:
    code = 0
    for byte in text.encode("ascii"):
        code = code * 256 + byte
    return code


def fourcc_i32(text: str) -> int:
    """Pack ASCII ``text`` big-endian into a signed 32-bit integer."""
    code = _fourcc(text) & _U32_MASK
    return code - (1 << 32) if code & 0x80000000 else code


def fourcc_u32(text: str) -> int:
    """Pack ASCII ``text`` big-endian into an unsigned 32-bit integer."""
    return _fourcc(text) & _U32_MASK


def fourcc_u16(text: str) -> int:
    """Pack ASCII ``text`` big-endian into an unsigned 16-bit integer."""
    return _fourcc(text) & _U16_MASK


def to_native_unsigned(value: int, size: int) -> int:
    """Read an unsigned integer whose in-memory bytes are in network order."""
    return int.from_bytes(value.to_bytes(size, sys.byteorder), "big")


def to_network_unsigned(value: int, size: int) -> int:
    """Return the integer whose in-memory bytes hold ``value`` in network order."""
    return int.from_bytes(value.to_bytes(size, "big"), sys.byteorder)