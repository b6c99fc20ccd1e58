"""Strategies that sort stack ``a`` of a :class:`Stacks` holding ranks."""

from collections.abc import Iterable
from itertools import pairwise

from pushswap.stacks import Stacks

__all__ = [
    "is_run_sorted",
    "sort_three",
    "sort_four",
    "sort_five",
    "little_sort",
    "radix_sort",
]


def is_run_sorted(items: Iterable[int]) -> bool:
    """True if the items never decrease from first to last."""
    return all(left <= right for left, right in pairwise(items))


def sort_three(stacks: Stacks, smaller: int, median: int, greater: int) -> None:
    """Sort the three ranks on stack ``a``, given which rank is which.

    Stack ``a`` is expected to hold exactly these three ranks, not already in
    order.
    """
    a = stacks.a
    top, second = a[0], a[1]
    if top == greater:
        stacks.rotate("a")
        if second != smaller:
            stacks.swap("a")
    elif top == median:
        if second == smaller:
            stacks.swap("a")
        else:
            stacks.reverse_rotate("a")
    elif top == smaller:
        stacks.swap("a")
        stacks.rotate("a")


def sort_four(stacks: Stacks) -> None:
    """Sort stack ``a`` when it holds the ranks 0 to 3."""
    top = stacks.a[0]
    if top == 0:
        stacks.push("b")
        sort_three(stacks, 1, 2, 3)
        stacks.push("a")
    elif top == 1:
        stacks.push("b")
        if not is_run_sorted(stacks.a):
            sort_three(stacks, 0, 2, 3)
        stacks.push("a")
        stacks.swap("a")
    elif top == 2:
        stacks.swap("a")
        sort_four(stacks)
    elif top == 3:
        stacks.push("b")
        if not is_run_sorted(stacks.a):
            sort_three(stacks, 0, 1, 2)
        stacks.push("a")
        stacks.rotate("a")


def _push_rank_to_b(stacks: Stacks, rank: int) -> None:
    """Bring ``rank`` to the top of ``a`` by the shortest route, then push it."""
    position = list(stacks.a).index(rank)
    size = len(stacks.a)
    if position == 1:
        stacks.swap("a")
    elif position == 2:
        stacks.rotate("a")
        stacks.rotate("a")
    elif position > 2:
        for _ in range(size - position):
            stacks.reverse_rotate("a")
    stacks.push("b")


def sort_five(stacks: Stacks) -> None:
    """Sort stack ``a`` when it holds the ranks 0 to 4."""
    _push_rank_to_b(stacks, 0)
    _push_rank_to_b(stacks, 1)
    if not is_run_sorted(stacks.a):
        sort_three(stacks, 2, 3, 4)
    stacks.push("a")
    stacks.push("a")


def little_sort(stacks: Stacks) -> None:
    """Sort two to five ranks on ``a`` with a hand-picked sequence."""
    size = len(stacks.a)
    if size == 2:
        if stacks.a[0] > stacks.a[1]:
            stacks.rotate("a")
    elif size == 3:
        sort_three(stacks, 0, 1, 2)
    elif size == 4:
        sort_four(stacks)
    elif size == 5:
        sort_five(stacks)


def radix_sort(stacks: Stacks) -> None:
    """Sort the ranks on ``a`` bit by bit, least significant first, using ``b``."""
    size = len(stacks.a)
    max_bits = (size - 1).bit_length()
    for bit in range(max_bits):
        for _ in range(size):
            if (stacks.a[0] >> bit) & 1:
                stacks.rotate("a")
            else:
                stacks.push("b")
        while stacks.b:
            stacks.push("a")