"""Sorting strategies for the push-swap stacks: hand-made cases up to five, k-sort beyond."""

from __future__ import annotations

import io
import math
from collections.abc import Iterable

from .indexing import assign_index
from .stacks import PushSwap


def isqrt(n: int) -> int:
    """Return the integer square root of ``n``; 0 for negative ``n``."""
    return math.isqrt(n) if n > 0 else 0


def sort_two(ps: PushSwap) -> None:
    """Sort a two-element stack ``a``."""
    first, second = ps.a.indices()[:2]
    if first > second:
        ps.sa()


def sort_three(ps: PushSwap) -> None:
    """Sort a three-element stack ``a`` with at most two moves."""
    n1, n2, n3 = ps.a.indices()[:3]
    if n1 > n2 and n2 < n3 and n1 < n3:
        ps.sa()
    elif n1 > n2 and n2 > n3:
        ps.sa()
        ps.rra()
    elif n1 > n2 and n2 < n3 and n1 > n3:
        ps.ra()
    elif n1 < n2 and n2 > n3 and n1 < n3:
        ps.sa()
        ps.ra()
    elif n1 < n2 and n2 > n3 and n1 > n3:
        ps.rra()


def sort_four(ps: PushSwap) -> None:
    """Sort a four-element stack ``a``."""
    push_min_to_b(ps, 1)
    sort_three(ps)
    if len(ps.b):
        ps.pa()


def sort_five(ps: PushSwap) -> None:
    """Sort a five-element stack ``a``."""
    push_min_to_b(ps, 2)
    sort_three(ps)
    for _ in range(2):
        if len(ps.b):
            ps.pa()


def _position(indices: list[int], index: int) -> int | None:
    return next((pos for pos, value in enumerate(indices) if value == index), None)


def move_index_to_top(ps: PushSwap, index: int) -> None:
    """Rotate ``a`` the shorter way until the node ranked ``index`` is on top.

    Nothing happens when no node has that rank.
    """
    pos = _position(ps.a.indices(), index)
    if pos is None:
        return
    rotate = ps.ra if pos <= len(ps.a) // 2 else ps.rra
    while next(iter(ps.a)).index != index:
        rotate()


def push_min_to_b(ps: PushSwap, count: int) -> None:
    """Push the ``count`` lowest-ranked nodes of ``a`` onto ``b``, lowest first."""
    for _ in range(count):
        if not len(ps.a):
            raise ValueError("stack a is empty")
        move_index_to_top(ps, min(ps.a.indices()))
        ps.pb()


def ksort_push_to_b(ps: PushSwap, range_: int) -> None:
    """Move every node of ``a`` to ``b`` in rough rank order, using a window of ``range_``."""
    pushed = 0
    while len(ps.a):
        top = next(iter(ps.a)).index
        if top <= pushed:
            ps.pb()
            pushed += 1
        elif top <= pushed + range_:
            ps.pb()
            ps.rb()
            pushed += 1
        else:
            ps.ra()


def ksort_push_back_to_a(ps: PushSwap) -> None:
    """Bring nodes back from ``b`` to ``a``, highest rank first, rotating the shorter way."""
    target = len(ps.b) - 1
    while len(ps.b):
        pos = _position(ps.b.indices(), target)
        if pos is None:
            raise ValueError(f"rank {target} is not in stack b")
        rotate = ps.rb if pos <= len(ps.b) // 2 else ps.rrb
        while next(iter(ps.b)).index != target:
            rotate()
        ps.pa()
        target -= 1


def k_sort(ps: PushSwap) -> None:
    """Sort ``a`` of any size through ``b`` with a window of about 1.4 times its square root."""
    range_ = isqrt(len(ps.a)) * 14 // 10
    ksort_push_to_b(ps, range_)
    ksort_push_back_to_a(ps)


def sort_controller(ps: PushSwap) -> None:
    """Sort ``a`` with the strategy suited to its size."""
    size = len(ps.a)
    if size <= 1:
        return
    if size == 2:
        sort_two(ps)
    elif size == 3:
        sort_three(ps)
    elif size == 4:
        sort_four(ps)
    elif size == 5:
        sort_five(ps)
    else:
        k_sort(ps)


def solve(values: Iterable[int]) -> list[str]:
    """Return the moves that sort ``values``; an already sorted input needs none.

    Raises ValueError when a value is repeated.
    """
    values = list(values)
    if len(set(values)) != len(values):
        raise ValueError("values must be distinct")
    ps = PushSwap(values, io.StringIO())
    assign_index(ps.a)
    if ps.a.is_sorted():
        return []
    sort_controller(ps)
    return ps.moves