"""Classic bit-manipulation exercises."""

from __future__ import annotations

import operator
from functools import reduce
from itertools import combinations
from typing import Iterable

_WORD_BITS = 32
_WORD_MASK = (1 << _WORD_BITS) - 1


def _popcount32(n: int) -> int:
    return bin(n & _WORD_MASK).count("1")


def range_bitwise_and(left: int, right: int) -> int:
    """AND ``left`` with every integer after it and below ``right``."""
    return reduce(operator.and_, range(left + 1, right), left)


def longest_run_of_ones(n: int) -> int:
    """Length of the longest run of consecutive 1 bits in ``n``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return max((len(run) for run in format(n, "b").split("0")), default=0)


def hamming_distance(x: int, y: int) -> int:
    """Number of bit positions (in 32-bit words) where ``x`` and ``y`` differ."""
    return _popcount32(x ^ y)


def is_power_of_four(n: int) -> bool:
    """Tell whether ``n`` is a power of four within a 32-bit word."""
    if n <= 0 or n & (n - 1):
        return False
    return n & 0x55555555 == n


def sort_by_bits(values: Iterable[int]) -> list[int]:
    """Sort by number of 1 bits, then by value."""
    return sorted(values, key=lambda v: (_popcount32(v), v))


def unique_number(values: Iterable[int]) -> int:
    """Return the one value that appears an odd number of times."""
    return reduce(operator.xor, values, 0)


def unique_pair(values: Iterable[int]) -> tuple[int, int]:
    """Return the two values that appear once when all others appear twice.

    The value with the distinguishing bit set comes first.
    """
    items = list(values)
    combined = unique_number(items)
    if combined == 0:
        raise ValueError("no two distinct unpaired values")
    mask = combined & -combined
    with_bit = unique_number(v for v in items if v & mask)
    without_bit = unique_number(v for v in items if not v & mask)
    return with_bit, without_bit


def unique_among_triples(values: Iterable[int]) -> int:
    """Return the value that appears once when all others appear three times."""
    counts = [0] * _WORD_BITS
    for value in values:
        for bit in range(_WORD_BITS):
            if value & (1 << bit):
                counts[bit] += 1
    result = sum(1 << bit for bit, count in enumerate(counts) if count % 3)
    if result >> (_WORD_BITS - 1):
        result -= 1 << _WORD_BITS
    return result


def total_hamming_distance(values: Iterable[int]) -> int:
    """Sum of the Hamming distances over all pairs of values."""
    return sum(hamming_distance(a, b) for a, b in combinations(list(values), 2))