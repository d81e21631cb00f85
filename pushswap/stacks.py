"""The two push-swap stacks and the moves that rearrange them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import pairwise
from typing import TextIO

from .output import putendl


@dataclass
class Node:
    """One element of a stack: its value and its rank among all values."""

    value: int
    index: int = 0


class Stack:
    """A stack of nodes; iteration runs from the top down."""

    def __init__(self, nodes: Iterable[Node] = ()) -> None:
        self._nodes: deque[Node] = deque(nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"Stack({list(self._nodes)!r})"

    def values(self) -> list[int]:
        """Return the values from top to bottom."""
        return [node.value for node in self._nodes]

    def indices(self) -> list[int]:
        """Return the ranks from top to bottom."""
        return [node.index for node in self._nodes]

    def is_sorted(self) -> bool:
        """True when the ranks never decrease from top to bottom."""
        return all(upper.index <= lower.index for upper, lower in pairwise(self._nodes))

    def max_index(self) -> int:
        """Return the largest rank in the stack, or 0 if there is none larger."""
        return max([0, *self.indices()])

    def _swap(self) -> bool:
        if len(self._nodes) < 2:
            return False
        first = self._nodes.popleft()
        second = self._nodes.popleft()
        self._nodes.appendleft(first)
        self._nodes.appendleft(second)
        return True

    def _rotate(self, steps: int) -> bool:
        if len(self._nodes) < 2:
            return False
        self._nodes.rotate(steps)
        return True

    def _push_onto(self, other: Stack) -> bool:
        if not self._nodes:
            return False
        other._nodes.appendleft(self._nodes.popleft())
        return True


class PushSwap:
    """Stacks ``a`` and ``b`` with the push-swap moves.

    Each move that changes a stack writes its name on a line of ``output``
    (standard output by default) and is recorded in ``moves``. A move that has
    nothing to act on does nothing and writes nothing.
    """

    def __init__(self, values: Iterable[int] = (), output: TextIO | None = None) -> None:
        self.a = Stack(Node(value) for value in values)
        self.b = Stack()
        self.moves: list[str] = []
        self._output = output

    def _emit(self, name: str) -> None:
        self.moves.append(name)
        putendl(name, self._output)

    def sa(self) -> None:
        """Swap the top two elements of ``a``."""
        if self.a._swap():
            self._emit("sa")

    def sb(self) -> None:
        """Swap the top two elements of ``b``."""
        if self.b._swap():
            self._emit("sb")

    def ss(self) -> None:
        """Do ``sa`` and ``sb``, then announce ``ss``."""
        self.sa()
        self.sb()
        self._emit("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        if self.b._push_onto(self.a):
            self._emit("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        if self.a._push_onto(self.b):
            self._emit("pb")

    def ra(self) -> None:
        """Rotate ``a``: its top goes to the bottom."""
        if self.a._rotate(-1):
            self._emit("ra")

    def rb(self) -> None:
        """Rotate ``b``: its top goes to the bottom."""
        if self.b._rotate(-1):
            self._emit("rb")

    def rr(self) -> None:
        """Do ``ra`` and ``rb``, then announce ``rr``."""
        self.ra()
        self.rb()
        self._emit("rr")

    def rra(self) -> None:
        """Reverse-rotate ``a``: its bottom comes to the top."""
        if self.a._rotate(1):
            self._emit("rra")

    def rrb(self) -> None:
        """Reverse-rotate ``b``: its bottom comes to the top."""
        if self.b._rotate(1):
            self._emit("rrb")

    def rrr(self) -> None:
        """Do ``rra`` and ``rrb``, then announce ``rrr``."""
        self.rra()
        self.rrb()
        self._emit("rrr")