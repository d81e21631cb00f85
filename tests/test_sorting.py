import io
import itertools
import random

import pytest

from pushswap.indexing import assign_index
from pushswap.sorting import (
    isqrt,
    k_sort,
    ksort_push_back_to_a,
    ksort_push_to_b,
    move_index_to_top,
    push_min_to_b,
    solve,
    sort_controller,
    sort_five,
    sort_four,
    sort_three,
    sort_two,
)
from pushswap.stacks import PushSwap


def make(values):
    ps = PushSwap(values, io.StringIO())
    assign_index(ps.a)
    return ps


def replay(values, moves):
    ps = PushSwap(values, io.StringIO())
    for name in moves:
        getattr(ps, name)()
    return ps


@pytest.mark.parametrize("n", range(0, 200))
def test_isqrt_bounds(n):
    r = isqrt(n)
    assert r * r <= n < (r + 1) * (r + 1)


def test_isqrt_negative():
    assert isqrt(-5) == 0


def test_sort_two():
    ps = make([5, 1])
    sort_two(ps)
    assert ps.a.values() == [1, 5]
    assert ps.moves == ["sa"]


def test_sort_two_already_sorted():
    ps = make([1, 5])
    sort_two(ps)
    assert ps.moves == []


@pytest.mark.parametrize("perm", list(itertools.permutations([10, 20, 30])))
def test_sort_three_all_permutations(perm):
    ps = make(perm)
    sort_three(ps)
    assert ps.a.values() == [10, 20, 30]
    assert len(ps.moves) <= 2


def test_sort_three_single_swap():
    ps = make([2, 1, 3])
    sort_three(ps)
    assert ps.moves == ["sa"]


@pytest.mark.parametrize("perm", list(itertools.permutations([4, -1, 7, 0])))
def test_sort_four_all_permutations(perm):
    ps = make(perm)
    sort_four(ps)
    assert ps.a.values() == sorted(perm)
    assert len(ps.b) == 0


@pytest.mark.parametrize("perm", list(itertools.permutations([3, 1, 4, 5, 9])))
def test_sort_five_all_permutations(perm):
    ps = make(perm)
    sort_five(ps)
    assert ps.a.values() == sorted(perm)
    assert len(ps.b) == 0


@pytest.mark.parametrize("target", range(6))
def test_move_index_to_top(target):
    values = [8, 3, 6, 1, 9, 2]
    ps = make(values)
    move_index_to_top(ps, target)
    assert ps.a.indices()[0] == target
    assert sorted(ps.a.values()) == sorted(values)
    assert set(ps.moves) <= {"ra", "rra"}


def test_move_index_to_top_missing_index():
    values = [8, 3, 6]
    ps = make(values)
    move_index_to_top(ps, 42)
    assert ps.moves == []
    assert ps.a.values() == values


def test_push_min_to_b():
    values = [8, 3, 6, 1, 9, 2]
    ps = make(values)
    push_min_to_b(ps, 2)
    assert ps.b.values() == sorted(values)[:2][::-1]
    assert sorted(ps.a.values()) == sorted(values)[2:]


def test_push_min_to_b_empty():
    ps = make([])
    with pytest.raises(ValueError):
        push_min_to_b(ps, 1)


def test_ksort_phases():
    rng = random.Random(7)
    values = rng.sample(range(-500, 500), 40)
    ps = make(values)
    ksort_push_to_b(ps, isqrt(40) * 14 // 10)
    assert len(ps.a) == 0
    assert sorted(ps.b.values()) == sorted(values)
    ksort_push_back_to_a(ps)
    assert ps.a.values() == sorted(values)
    assert len(ps.b) == 0


@pytest.mark.parametrize("seed", range(5))
def test_k_sort_random(seed):
    rng = random.Random(seed)
    values = rng.sample(range(-10000, 10000), 100)
    ps = make(values)
    k_sort(ps)
    assert ps.a.values() == sorted(values)
    assert len(ps.b) == 0


def test_sort_controller_single_element():
    ps = make([42])
    sort_controller(ps)
    assert ps.moves == []
    assert ps.a.values() == [42]


@pytest.mark.parametrize("size", [2, 3, 4, 5, 6, 7, 20, 100])
def test_solve_replays_to_sorted(size):
    rng = random.Random(size)
    values = rng.sample(range(-1000, 1000), size)
    moves = solve(values)
    ps = replay(values, moves)
    assert ps.a.values() == sorted(values)
    assert len(ps.b) == 0


def test_solve_sorted_input_needs_no_moves():
    assert solve([1, 2, 3, 4, 5, 6, 7]) == []


def test_solve_empty():
    assert solve([]) == []


def test_solve_rejects_duplicates():
    with pytest.raises(ValueError):
        solve([3, 1, 3])


def test_moves_are_written_to_output():
    sink = io.StringIO()
    ps = PushSwap([5, 2, 9, 1, 7, 3], sink)
    assign_index(ps.a)
    sort_controller(ps)
    assert sink.getvalue() == "".join(f"{name}\n" for name in ps.moves)
    assert ps.a.values() == [1, 2, 3, 5, 7, 9]