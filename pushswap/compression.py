"""Replacing values by their ranks."""

from __future__ import annotations

from collections.abc import Sequence


def compress(values: Sequence[int]) -> list[int]:
    """Return each value's index in the sorted order of all values.

    Equal values share the index of their first occurrence in sorted order.
    """
    first_index: dict[int, int] = {}
    for index, value in enumerate(sorted(values)):
        first_index.setdefault(value, index)
    return [first_index[value] for value in values]