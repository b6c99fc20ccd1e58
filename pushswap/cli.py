"""Command line: print the operations that sort the given integers."""

import sys
from collections.abc import Sequence

from pushswap.parsing import ArgumentError, parse_args
from pushswap.sorting import little_sort, radix_sort
from pushswap.stacks import Stacks

__all__ = ["rank", "solve", "main"]

_ERROR_STATUS = 255


def rank(values: Sequence[int]) -> list[int]:
    """Replace each value by its position in sorted order, starting at 0."""
    ranks = [0] * len(values)
    order = sorted(range(len(values)), key=values.__getitem__)
    for position, original in enumerate(order):
        ranks[original] = position
    return ranks


def solve(values: Sequence[int]) -> list[str]:
    """Return the operations that sort ``values``, top of the stack first."""
    stacks = Stacks(rank(values))
    if stacks.is_sorted():
        return []
    if len(stacks.a) <= 5:
        little_sort(stacks)
    else:
        radix_sort(stacks)
    return stacks.operations


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line; report bad input with ``Error``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return _ERROR_STATUS
    try:
        values = parse_args(args)
    except ArgumentError:
        sys.stderr.write("Error\n")
        return _ERROR_STATUS
    for operation in solve(values):
        sys.stdout.write(operation + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())