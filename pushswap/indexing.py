"""Replace values by their rank so that the sort works on 0..n-1."""

from __future__ import annotations

from collections.abc import Iterable

from .stacks import Stack


def rank(values: Iterable[int]) -> list[int]:
    """Return, for each value, its position in the sorted list of all values.

    Equal values share the position of their first occurrence in sorted order.
    """
    values = list(values)
    first: dict[int, int] = {}
    for pos, value in enumerate(sorted(values)):
        first.setdefault(value, pos)
    return [first[value] for value in values]


def assign_index(stack: Stack) -> None:
    """Set each node's index to the rank of its value within the stack."""
    for node, position in zip(stack, rank(stack.values())):
        node.index = position