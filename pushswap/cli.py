"""Command line entry point: print the operations that sort the arguments."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.compression import compress
from pushswap.parsing import PushSwapError, is_sorted, parse_args
from pushswap.sorting import radix_sort, sort_small
from pushswap.stacks import Stacks


def solve(values: Sequence[int]) -> list[str]:
    """Return the operations that sort ``values`` into ascending order."""
    if is_sorted(values):
        return []
    if len(values) <= 5:
        stacks = Stacks(values)
        sort_small(stacks)
    else:
        stacks = Stacks(compress(values))
        radix_sort(stacks)
    return stacks.operations


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_args(args)
    except PushSwapError:
        sys.stderr.write("Error\n")
        return 1
    for operation in solve(values):
        sys.stdout.write(operation + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())