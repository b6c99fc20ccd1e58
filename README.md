# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a fixed
set of operations. It prints each operation it uses, one per line.

## Operations

| Name  | Effect                                          |
|-------|-------------------------------------------------|
| `sa`  | swap the top two elements of `a`                |
| `pa`  | move the top of `b` onto `a`                    |
| `pb`  | move the top of `a` onto `b`                    |
| `ra`  | rotate `a` up: the top goes to the bottom       |
| `rra` | rotate `a` down: the bottom goes to the top     |

These are the operations the sorting routines use. `Stacks` also supports
the `b` and combined forms (`sb`, `ss`, `rb`, `rr`, `rrb`, `rrr`).

Up to five numbers are sorted with hand-written sequences. Larger inputs use
a binary radix sort on the rank of each number.

## Installation

```
pip install .
```

## Command line

```
push-swap 3 2 1
push-swap "4 67 3" 87 23
```

The numbers can be separate arguments or several per argument, separated by
whitespace. Input that is already sorted prints nothing and exits with
status 0.

If the input has anything other than integers, has a duplicate, or has a
value outside the 32-bit signed range, `Error` is written to standard error
and the exit status is 255. With no arguments, nothing is printed and the
exit status is also 255.

The same command is available as `python -m pushswap.cli`.

## Library

```python
from pushswap.cli import solve, rank

rank([42, -7, 10])       # [2, 0, 1]
ops = solve([3, 2, 1])   # list of operation names, such as ["ra", "sa"]
```

- `pushswap.stacks.Stacks` holds the two stacks (`a` and `b`, top at the
  left), applies the operations (`swap`, `push`, `rotate`,
  `reverse_rotate`) and records each one in `operations`. `is_sorted()` is
  true when `b` is empty and `a` holds 0, 1, 2, ... from the top.
- `pushswap.parsing` reads the arguments: `parse_args` returns the list of
  integers or raises `ArgumentError`; `check_args`, `has_duplicates`,
  `parse_number` and `skip_number` are the steps it uses.
- `pushswap.sorting` has the sorting routines: `little_sort`, `radix_sort`,
  `sort_three`, `sort_four`, `sort_five` and `is_run_sorted`. They work on a
  `Stacks` whose `a` holds ranks 0 to n-1.

## What it does not do

There is no checker: the package produces operation lists but has no
command that reads operations from input and verifies that they sort a
given list.

## Tests

```
pip install ".[test]"
pytest
```