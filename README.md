# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a
limited set of operations. The program prints the sequence of operations
that sorts stack `a` into ascending order, with the smallest value on top.

## Operations

| Operation | Effect |
|-----------|--------|
| `sa`  | swap the top two elements of `a` |
| `pa`  | move the top of `b` onto `a` |
| `pb`  | move the top of `a` onto `b` |
| `ra`  | rotate `a` up: the top element goes to the bottom |
| `rra` | rotate `a` down: the bottom element goes to the top |

An operation that cannot apply (pushing from an empty stack, rotating or
swapping fewer than two elements) does nothing and is not recorded.

## Usage

Install the package, then pass the numbers as arguments. The first argument
is the top of the stack.

```
$ push-swap 2 1 3
sa
$ push-swap 3 2 1
sa
rra
```

- With no arguments, nothing is printed.
- Input that is already sorted prints nothing.
- Up to five numbers are sorted with a fixed sequence of moves; larger
  inputs are replaced by their ranks and sorted with a binary radix sort.
- Each argument must be a plain integer in the 32-bit signed range, with an
  optional leading `+` or `-` and no whitespace. An invalid argument or a
  repeated value prints `Error` to standard error and exits with status 1.

## Library use

```python
from pushswap.cli import solve
from pushswap.parsing import parse_args, PushSwapError

values = parse_args(["4", "-1", "7"])
print(solve(values))  # ['sa']
```

- `pushswap.parsing` provides `parse_int`, `parse_args`, `has_duplicates`,
  `is_sorted` and the `PushSwapError` exception (a `ValueError`).
- `pushswap.stacks.Stacks` holds the two stacks as `a` and `b`, applies the
  operations `pa`, `pb`, `ra`, `rra` and `sa`, records each applied
  operation in `operations`, and reports `min_position()` of stack `a`.
- `pushswap.sorting` provides `sort_small` and `radix_sort`, which sort a
  `Stacks` in place.
- `pushswap.compression.compress` turns values into their ranks.
- `pushswap.cli.main(argv=None)` runs the command and returns its exit
  status.

## What it does not do

There is no checker: the package produces operation lists but does not read
a list of operations back and verify it. Only the five operations above are
used; `sb`, `ss`, `rb`, `rr`, `rrb` and `rrr` are not provided.

## Tests

```
pip install -e .[test]
pytest
```