from __future__ import annotations

from collections.abc import Iterator


def clamp_u32(x: int) -> int:
    return x & 0xFFFFFFFF


def _code_units(s: str) -> Iterator[int]:
    # UTF-16 code units, so astral characters hash as their surrogate pair
    # exactly like a browser's charCodeAt() walk.
    for ch in s:
        cp = ord(ch)
        if cp > 0xFFFF:
            cp -= 0x10000
            yield 0xD800 | (cp >> 10)
            yield 0xDC00 | (cp & 0x3FF)
        else:
            yield cp


def seed_to_u32(s: str) -> int:
    # djb2: h * 33 + c, wrapped to 32 bits.
    h = 5381
    for c in _code_units(s):
        h = ((h << 5) + h + c) & 0xFFFFFFFF
    return h


def mix_u32(h: int) -> int:
    # Fixed finalizer; constants must not change or rounds stop agreeing.
    h = clamp_u32(h)
    h ^= h >> 17
    h = (h * 0xED5AD4BB) & 0xFFFFFFFF
    h ^= h >> 11
    h = (h * 0xAC4C1B51) & 0xFFFFFFFF
    h ^= h >> 15
    h = (h * 0x31848BAB) & 0xFFFFFFFF
    h ^= h >> 14
    return h


def seeded_random(s: str) -> float:
    """Deterministic float in [0, 1) for a string seed."""
    return mix_u32(seed_to_u32(s)) / 4294967296.0
