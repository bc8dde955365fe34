"""MurmurHash3 (x86, 32-bit, seed 0) as used to identify syscalls."""

from __future__ import annotations

import struct

_MASK = 0xFFFFFFFF
_C1 = 0xCC9E2D51
_C2 = 0x1B873593


def _rotl(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (32 - shift))) & _MASK


def _pre_mix(block: int) -> int:
    return (_rotl((block * _C1) & _MASK, 15) * _C2) & _MASK


def murmur3_32(buf: str | bytes) -> int:
    """Return the 32-bit MurmurHash3 of ``buf`` (text is hashed as UTF-8)."""
    data = buf.encode("utf-8") if isinstance(buf, str) else bytes(buf)
    aligned = len(data) - len(data) % 4

    h = 0
    for (block,) in struct.iter_unpack("<I", data[:aligned]):
        h ^= _pre_mix(block)
        h = _rotl(h, 13)
        h = (h * 5 + 0xE6546B64) & _MASK

    tail = data[aligned:]
    if tail:
        h ^= _pre_mix(int.from_bytes(tail, "little"))

    h ^= len(data) & _MASK
    h ^= h >> 16
    h = (h * 0x85EBCA6B) & _MASK
    h ^= h >> 13
    h = (h * 0xC2B2AE35) & _MASK
    h ^= h >> 16
    return h