from __future__ import annotations

"""Bit-level geohash primitives.

Both axes are subdivided independently and the resulting bit sequences are
interleaved with longitude leading, so bit 0 of every hash is a longitude bit.
"""

import math
from functools import reduce
from itertools import chain, zip_longest
from typing import NamedTuple, Sequence

ALPHABET = "0123456789bcdefghjkmnpqrstuvwxyz"

# Both directions derive from ALPHABET so they cannot drift apart.
_ENCODE_TABLE: tuple[str, ...] = tuple(ALPHABET)
_DECODE_MAP: dict[str, int] = {c: i for i, c in enumerate(ALPHABET)}

BITS_PER_CHAR = 5
MIN_PRECISION = 1
MAX_PRECISION = 12


class Interval(NamedTuple):
    min: float
    mid: float
    max: float


LATITUDE_RANGE = Interval(-90.0, 0.0, 90.0)
LONGITUDE_RANGE = Interval(-180.0, 0.0, 180.0)


def axis_bits(precision: int) -> tuple[int, int]:
    """Return (lat_bits, lon_bits) for a hash of `precision` characters."""

    total = precision * BITS_PER_CHAR
    return total // 2, math.ceil(total / 2)


def rounding_digits(bit_count: int) -> int:
    # Each bit halves the interval; ~0.3 decimal digits per bit.
    return bit_count * 3 // 10


def narrow(interval: Interval, bit: int) -> Interval:
    lo, mid, hi = interval
    if bit:
        return Interval(mid, (mid + hi) / 2.0, hi)
    return Interval(lo, (lo + mid) / 2.0, mid)


def subdivide(value: float, interval: Interval, bit_count: int) -> list[int]:
    """Emit `bit_count` bits locating `value` inside `interval`, MSB first."""

    def _step(
        state: tuple[Interval, list[int]], _: int
    ) -> tuple[Interval, list[int]]:
        current, bits = state
        bit = 0 if value <= current.mid else 1
        bits.append(bit)
        return narrow(current, bit), bits

    _, bits = reduce(_step, range(bit_count), (interval, []))
    return bits


def replay(bits: Sequence[int], interval: Interval) -> Interval:
    """Narrow `interval` by each bit in order; the inverse of `subdivide`."""

    return reduce(narrow, bits, interval)


def interleave(lon_bits: Sequence[int], lat_bits: Sequence[int]) -> list[int]:
    pairs = zip_longest(lon_bits, lat_bits)
    return [b for b in chain.from_iterable(pairs) if b is not None]


def deinterleave(bits: Sequence[int]) -> tuple[list[int], list[int]]:
    """Split combined bits into (lat_bits, lon_bits)."""

    return list(bits[1::2]), list(bits[0::2])


def bits_to_chars(bits: Sequence[int]) -> str:
    out: list[str] = []
    for start in range(0, len(bits), BITS_PER_CHAR):
        group = bits[start : start + BITS_PER_CHAR]
        value = 0
        for b in group:
            value = (value << 1) | b
        out.append(_ENCODE_TABLE[value])
    return "".join(out)


def chars_to_bits(geohash: str) -> list[int]:
    bits: list[int] = []
    for c in geohash:
        value = _DECODE_MAP[c]
        bits.extend((value >> shift) & 1 for shift in range(BITS_PER_CHAR - 1, -1, -1))
    return bits


def is_alphabet_char(c: str) -> bool:
    return c in _DECODE_MAP
