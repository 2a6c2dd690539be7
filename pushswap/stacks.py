"""The two stacks and the operations allowed on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


class Stacks:
    """Stacks ``a`` and ``b``; the top of each is its first element.

    Every operation that changes a stack appends its name to
    ``operations``. An operation that cannot apply does nothing and is
    not recorded.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.operations: list[str] = []

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        if not self.b:
            return
        self.a.appendleft(self.b.popleft())
        self.operations.append("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        if not self.a:
            return
        self.b.appendleft(self.a.popleft())
        self.operations.append("pb")

    def ra(self) -> None:
        """Rotate ``a`` so its top goes to the bottom."""
        if len(self.a) < 2:
            return
        self.a.rotate(-1)
        self.operations.append("ra")

    def rra(self) -> None:
        """Rotate ``a`` so its bottom comes to the top."""
        if len(self.a) < 2:
            return
        self.a.rotate(1)
        self.operations.append("rra")

    def sa(self) -> None:
        """Swap the two top elements of ``a``."""
        if len(self.a) < 2:
            return
        self.a[0], self.a[1] = self.a[1], self.a[0]
        self.operations.append("sa")

    def min_position(self) -> int:
        """Return the position from the top of the smallest value in ``a``."""
        if not self.a:
            raise ValueError("stack a is empty")
        return min(range(len(self.a)), key=self.a.__getitem__)