"""Enumerating subsets of a sequence through bit masks."""

from __future__ import annotations

import sys
from typing import Iterator, Sequence, TypeVar, Union

T = TypeVar("T")


def _check_mask(mask: int, length: int) -> None:
    if mask < 0:
        raise ValueError("mask must be non-negative")
    if mask.bit_length() > length:
        raise ValueError(
            f"mask {mask:#b} selects positions beyond a sequence of length {length}"
        )


def overlay(items: Sequence[T], mask: int) -> Union[str, list[T]]:
    """Return the items whose positions are set in ``mask``, lowest bit first.

    A string gives a string; any other sequence gives a list.
    """
    _check_mask(mask, len(items))
    picked = [item for position, item in enumerate(items) if mask >> position & 1]
    if isinstance(items, str):
        return "".join(picked)
    return picked


def masked_overlay(values: Sequence[int], mask: int) -> list[int]:
    """Lay ``mask`` over ``values``: kept values where a bit is set, 0 elsewhere.

    The result has one entry per bit up to the highest set bit of ``mask``.
    """
    _check_mask(mask, len(values))
    return [
        value if mask >> position & 1 else 0
        for position, value in zip(range(mask.bit_length()), values)
    ]


def subsets(items: Sequence[T]) -> Iterator[Union[str, list[T]]]:
    """Yield every subset of ``items`` in the order of their masks."""
    if not isinstance(items, str):
        items = list(items)
    for mask in range(1 << len(items)):
        yield overlay(items, mask)


def masked_overlays(values: Sequence[int]) -> Iterator[list[int]]:
    """Yield the masked overlay of ``values`` for every possible mask."""
    values = list(values)
    for mask in range(1 << len(values)):
        yield masked_overlay(values, mask)


def main(argv: Sequence[str] | None = None) -> int:
    """Print every subset of a word, one per line.

    The word is the first argument, or else the first token on standard input.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        word = args[0]
    else:
        tokens = sys.stdin.read().split()
        word = tokens[0] if tokens else ""
    for subset in subsets(word):
        print(subset)
    return 0