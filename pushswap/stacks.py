"""The two stacks of the puzzle and the operations allowed on them."""

from collections import deque
from collections.abc import Iterable

__all__ = ["Stacks"]


class Stacks:
    """Stacks ``a`` and ``b``, with every operation applied recorded by name.

    The left end of each deque is the top of that stack. Stack ``a`` starts
    with ``items`` (top first) and stack ``b`` starts empty.
    """

    def __init__(self, items: Iterable[int]) -> None:
        self.a: deque[int] = deque(items)
        self.b: deque[int] = deque()
        self.operations: list[str] = []

    def _select(self, which: str, both: str) -> tuple[deque[int], ...]:
        if which == "a":
            return (self.a,)
        if which == "b":
            return (self.b,)
        if which == both:
            return (self.a, self.b)
        raise ValueError(f"unknown stack selector {which!r}")

    @staticmethod
    def _require_items(stacks: tuple[deque[int], ...]) -> None:
        if any(not stack for stack in stacks):
            raise IndexError("operation on an empty stack")

    def rotate(self, which: str) -> None:
        """Move the top element to the bottom: ``ra``, ``rb`` or ``rr``."""
        stacks = self._select(which, "r")
        self._require_items(stacks)
        for stack in stacks:
            stack.rotate(-1)
        self.operations.append(f"r{which}")

    def reverse_rotate(self, which: str) -> None:
        """Move the bottom element to the top: ``rra``, ``rrb`` or ``rrr``."""
        stacks = self._select(which, "r")
        self._require_items(stacks)
        for stack in stacks:
            stack.rotate(1)
        self.operations.append(f"rr{which}")

    def push(self, target: str) -> None:
        """Move the top of the other stack onto ``target``: ``pa`` or ``pb``."""
        if target == "a":
            source, destination = self.b, self.a
        elif target == "b":
            source, destination = self.a, self.b
        else:
            raise ValueError(f"unknown stack selector {target!r}")
        if not source:
            raise IndexError("push from an empty stack")
        destination.appendleft(source.popleft())
        self.operations.append(f"p{target}")

    def swap(self, which: str) -> None:
        """Exchange the two top elements: ``sa``, ``sb`` or ``ss``.

        A stack holding a single element is left as it is.
        """
        stacks = self._select(which, "s")
        self._require_items(stacks)
        for stack in stacks:
            if len(stack) >= 2:
                first = stack.popleft()
                second = stack.popleft()
                stack.appendleft(first)
                stack.appendleft(second)
        self.operations.append(f"s{which}")

    def is_sorted(self) -> bool:
        """True when ``b`` is empty and ``a`` holds 0, 1, 2, ... from the top."""
        return not self.b and all(
            value == position for position, value in enumerate(self.a)
        )