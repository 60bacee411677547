"""Single-bit and small-field operations on integers."""

from __future__ import annotations

import sys
from typing import Sequence

_WORD_MASK = 0xFFFFFFFF


def get_ith_bit(n: int, i: int) -> int:
    """Return the bit of ``n`` at position ``i`` (0 or 1)."""
    shifted = n >> i
    return shifted & 1


def set_ith_bit(n: int, i: int) -> int:
    """Return ``n`` with bit ``i`` set to 1."""
    return n | (1 << i)


def clear_ith_bit(n: int, i: int) -> int:
    """Return ``n`` with bit ``i`` set to 0."""
    return n & ~(1 << i)


def update_ith_bit(n: int, i: int, v: int) -> int:
    """Return ``n`` with bit ``i`` replaced by ``v``."""
    return clear_ith_bit(n, i) | (v << i)


def toggle_ith_bit(n: int, i: int) -> int:
    """Return ``n`` with bit ``i`` flipped."""
    return n ^ (1 << i)


def clear_last_i_bits(n: int, i: int) -> int:
    """Return ``n`` with its ``i`` lowest bits cleared."""
    return n & (-1 << i)


def clear_bits_in_range(n: int, i: int, j: int) -> int:
    """Return ``n`` with bits ``i`` through ``j`` (inclusive) cleared."""
    above = ~0 << (j + 1)
    below = (1 << i) - 1
    return n & (above | below)


def count_set_bits(n: int) -> int:
    """Count the 1 bits of ``n`` by shifting; non-positive values give 0."""
    count = 0
    while n > 0:
        count += n & 1
        n >>= 1
    return count


def count_set_bits_fast(n: int) -> int:
    """Count 1 bits by clearing the lowest one at a time.

    Negative values are counted in their 32-bit two's-complement form.
    """
    if n < 0:
        n &= _WORD_MASK
    count = 0
    while n:
        n &= n - 1
        count += 1
    return count


def is_power_of_two(n: int) -> bool:
    """Tell whether ``n`` is a positive power of two."""
    return n > 0 and n & (n - 1) == 0


def is_odd(n: int) -> bool:
    """Tell whether ``n`` is odd."""
    return n & 1 == 1


def is_even(n: int) -> bool:
    """Tell whether ``n`` is even."""
    return n & 1 == 0


def swap_numbers(a: int, b: int) -> tuple[int, int]:
    """Return the two values exchanged, using XOR."""
    a ^= b
    b ^= a
    a ^= b
    return a, b


def multiply_by_power_of_2(n: int, k: int) -> int:
    """Return ``n * 2**k``."""
    return n << k


def divide_by_power_of_2(n: int, k: int) -> int:
    """Return ``n // 2**k`` (arithmetic shift)."""
    return n >> k


def get_lowest_set_bit(n: int) -> int:
    """Return the value of the lowest 1 bit of ``n``."""
    return n & -n


def turn_off_rightmost_bit(n: int) -> int:
    """Return ``n`` with its lowest 1 bit cleared."""
    return n & (n - 1)


def extract_bits(n: int, p: int, k: int) -> int:
    """Return the ``k`` bits of ``n`` starting at position ``p``."""
    return (n >> p) & ((1 << k) - 1)


def convert_to_binary(n: int) -> int:
    """Return a decimal integer whose digits spell ``n`` in binary."""
    result = 0
    place = 1
    while n > 0:
        result += place * (n & 1)
        place *= 10
        n >>= 1
    return result


def convert_to_decimal(binary: int) -> int:
    """Read the decimal digits of ``binary`` as base-2 digits."""
    result = 0
    place = 1
    while binary > 0:
        binary, digit = divmod(binary, 10)
        result += place * digit
        place *= 2
    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Print a short demonstration of the bit operations."""
    del argv
    rule = "=" * 43
    n = 13
    lines = [
        rule,
        "      BITWISE OPERATIONS DEMONSTRATION",
        rule,
        "",
        f"Starting number: {n} ({n:b} in binary)",
        "",
        f"1. get_ith_bit({n}, 2) = {get_ith_bit(n, 2)}",
        f"2. set_ith_bit({n}, 1) = {set_ith_bit(n, 1)}",
        f"3. clear_ith_bit({n}, 2) = {clear_ith_bit(n, 2)}",
        f"4. toggle_ith_bit({n}, 0) = {toggle_ith_bit(n, 0)}",
        f"5. count_set_bits({n}) = {count_set_bits(n)}",
        f"6. is_power_of_two(8) = {str(is_power_of_two(8)).lower()}",
        f"   is_power_of_two(13) = {str(is_power_of_two(13)).lower()}",
        f"7. is_odd({n}) = {str(is_odd(n)).lower()}",
        f"8. {n} * 4 (<<2) = {multiply_by_power_of_2(n, 2)}",
        f"   {n} / 2 (>>1) = {divide_by_power_of_2(n, 1)}",
    ]
    a, b = 5, 10
    lines.append(f"9. Before swap: a={a}, b={b}")
    a, b = swap_numbers(a, b)
    lines.append(f"   After swap: a={a}, b={b}")
    lines.append("")
    lines.append(rule)
    sys.stdout.write("\n".join(lines) + "\n")
    return 0