import itertools
import random

import pytest

from pushswap.compression import compress
from pushswap.sorting import radix_sort, sort_small
from pushswap.stacks import Stacks


def _replay(values, operations):
    stacks = Stacks(values)
    for operation in operations:
        getattr(stacks, operation)()
    return stacks


@pytest.mark.parametrize("size", [2, 3, 4, 5])
def test_sort_small_sorts_every_permutation(size):
    for perm in itertools.permutations(range(size)):
        if list(perm) == sorted(perm):
            continue
        stacks = Stacks(perm)
        sort_small(stacks)
        assert list(stacks.a) == sorted(perm)
        assert not stacks.b


@pytest.mark.parametrize(
    "values, expected",
    [
        ([2, 1], ["sa"]),
        ([2, 1, 3], ["sa"]),
        ([3, 2, 1], ["sa", "rra"]),
        ([3, 1, 2], ["ra"]),
        ([1, 3, 2], ["sa", "ra"]),
        ([2, 3, 1], ["rra"]),
    ],
)
def test_sort_small_operations_for_short_stacks(values, expected):
    stacks = Stacks(values)
    sort_small(stacks)
    assert stacks.operations == expected


def test_sort_small_with_negative_values():
    stacks = Stacks([5, -3, 0, 12, -7])
    sort_small(stacks)
    assert list(stacks.a) == [-7, -3, 0, 5, 12]


def test_sort_small_operations_replay_to_sorted():
    values = [4, 2, 5, 1, 3]
    stacks = Stacks(values)
    sort_small(stacks)
    replayed = _replay(values, stacks.operations)
    assert list(replayed.a) == sorted(values)


def test_sort_small_leaves_single_value_alone():
    stacks = Stacks([7])
    sort_small(stacks)
    assert list(stacks.a) == [7]
    assert stacks.operations == []


@pytest.mark.parametrize("size", [6, 7, 8, 16, 50, 100])
def test_radix_sort_sorts_ranks(size):
    rng = random.Random(size)
    ranks = list(range(size))
    rng.shuffle(ranks)
    stacks = Stacks(ranks)
    radix_sort(stacks)
    assert list(stacks.a) == list(range(size))
    assert not stacks.b


def test_radix_sort_pushes_balance():
    ranks = compress([40, -2, 9, 100, 3, 17, 0])
    stacks = Stacks(ranks)
    radix_sort(stacks)
    assert stacks.operations.count("pa") == stacks.operations.count("pb")
    assert set(stacks.operations) <= {"pa", "pb", "ra"}


def test_radix_sort_operations_replay_on_original_values():
    values = [40, -2, 9, 100, 3, 17, 0]
    stacks = Stacks(compress(values))
    radix_sort(stacks)
    replayed = _replay(values, stacks.operations)
    assert list(replayed.a) == sorted(values)