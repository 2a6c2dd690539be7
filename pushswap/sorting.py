"""Sorting stack ``a`` using only the stack operations."""

from __future__ import annotations

from pushswap.stacks import Stacks


def radix_sort(stacks: Stacks) -> None:
    """Sort ``a`` with a binary radix sort.

    The values in ``a`` must be the ranks ``0 .. n-1`` of the original
    input, as produced by :func:`pushswap.compression.compress`.
    """
    size = len(stacks.a)
    max_bits = max(size - 1, 0).bit_length()
    for bit in range(max_bits):
        for _ in range(size):
            if (stacks.a[0] >> bit) & 1 == 0:
                stacks.pb()
            else:
                stacks.ra()
        while stacks.b:
            stacks.pa()


def _sort_3(stacks: Stacks) -> None:
    first, second, third = stacks.a[0], stacks.a[1], stacks.a[2]
    if first > second and second < third and first < third:
        stacks.sa()
    elif first > second and second > third:
        stacks.sa()
        stacks.rra()
    elif first > second and second < third and first > third:
        stacks.ra()
    elif first < second and second > third and first < third:
        stacks.sa()
        stacks.ra()
    elif first < second and second > third and first > third:
        stacks.rra()


def _sort_4(stacks: Stacks) -> None:
    min_pos = stacks.min_position()
    if min_pos == 1:
        stacks.ra()
    elif min_pos == 2:
        stacks.ra()
        stacks.ra()
    elif min_pos == 3:
        stacks.rra()
    stacks.pb()
    _sort_3(stacks)
    stacks.pa()


def _sort_5(stacks: Stacks) -> None:
    min_pos = stacks.min_position()
    if min_pos == 1:
        stacks.ra()
    elif min_pos == 2:
        stacks.ra()
        stacks.ra()
    elif min_pos == 3:
        stacks.rra()
        stacks.rra()
    elif min_pos == 4:
        stacks.rra()
    stacks.pb()
    _sort_4(stacks)
    stacks.pa()


def sort_small(stacks: Stacks) -> None:
    """Sort ``a`` when it holds at most five values.

    Two values are always swapped, so ``a`` is expected to be unsorted.
    """
    size = len(stacks.a)
    if size == 2:
        stacks.sa()
    elif size == 3:
        _sort_3(stacks)
    elif size == 4:
        _sort_4(stacks)
    elif size == 5:
        _sort_5(stacks)