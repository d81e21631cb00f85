import io

import pytest

from pushswap.stacks import Node, PushSwap, Stack


def make(values):
    out = io.StringIO()
    return PushSwap(values, output=out), out


def test_initial_state():
    vals = [5, 8, 1]
    ps, out = make(vals)
    assert ps.a.values() == vals
    assert ps.b.values() == []
    assert len(ps.a) == len(vals)
    assert out.getvalue() == ""


def test_sa_swaps_top_two():
    vals = [5, 8, 1]
    ps, out = make(vals)
    ps.sa()
    assert ps.a.values() == [vals[1], vals[0], vals[2]]
    assert out.getvalue() == "sa\n"
    assert ps.moves == ["sa"]


def test_sa_twice_is_identity():
    vals = [4, 9, 2, 7]
    ps, _ = make(vals)
    ps.sa()
    ps.sa()
    assert ps.a.values() == vals


def test_sa_single_element_does_nothing():
    ps, out = make([4])
    ps.sa()
    assert ps.a.values() == [4]
    assert out.getvalue() == ""
    assert ps.moves == []


def test_pb_moves_top_to_b():
    vals = [3, 6, 9]
    ps, out = make(vals)
    ps.pb()
    assert ps.a.values() == vals[1:]
    assert ps.b.values() == vals[:1]
    assert out.getvalue() == "pb\n"


def test_pb_pa_round_trip():
    vals = [3, 6, 9]
    ps, out = make(vals)
    ps.pb()
    ps.pb()
    ps.pa()
    ps.pa()
    assert ps.a.values() == vals
    assert len(ps.b) == 0
    assert out.getvalue() == "pb\npb\npa\npa\n"


def test_pa_with_empty_b_does_nothing():
    vals = [1, 2]
    ps, out = make(vals)
    ps.pa()
    assert ps.a.values() == vals
    assert out.getvalue() == ""


def test_pb_with_empty_a_does_nothing():
    ps, out = make([])
    ps.pb()
    assert len(ps.b) == 0
    assert ps.moves == []


def test_ra_moves_top_to_bottom():
    vals = [10, 20, 30, 40]
    ps, out = make(vals)
    ps.ra()
    assert ps.a.values() == vals[1:] + vals[:1]
    assert out.getvalue() == "ra\n"


def test_rra_moves_bottom_to_top():
    vals = [10, 20, 30, 40]
    ps, out = make(vals)
    ps.rra()
    assert ps.a.values() == vals[-1:] + vals[:-1]
    assert out.getvalue() == "rra\n"


def test_ra_rra_round_trip():
    vals = [7, 1, 5, 3, 2]
    ps, _ = make(vals)
    ps.ra()
    ps.ra()
    ps.rra()
    ps.rra()
    assert ps.a.values() == vals


def test_full_rotation_is_identity():
    vals = [7, 1, 5, 3, 2]
    ps, _ = make(vals)
    for _ in vals:
        ps.ra()
    assert ps.a.values() == vals
    assert ps.moves == ["ra"] * len(vals)


def test_b_moves():
    vals = [1, 2, 3]
    ps, out = make(vals)
    for _ in vals:
        ps.pb()
    before = ps.b.values()
    ps.sb()
    assert ps.b.values() == [before[1], before[0], before[2]]
    ps.sb()
    ps.rb()
    assert ps.b.values() == before[1:] + before[:1]
    ps.rrb()
    assert ps.b.values() == before
    assert out.getvalue() == "pb\npb\npb\nsb\nsb\nrb\nrrb\n"


def test_rr_announces_each_part():
    vals = [1, 2, 3, 4]
    ps, out = make(vals)
    ps.pb()
    ps.pb()
    ps.rr()
    assert out.getvalue() == "pb\npb\nra\nrb\nrr\n"


def test_rr_with_short_b():
    ps, out = make([1, 2, 3])
    ps.rr()
    assert out.getvalue() == "ra\nrr\n"


def test_ss_and_rrr_announce_each_part():
    vals = [1, 2, 3, 4]
    ps, out = make(vals)
    ps.pb()
    ps.pb()
    out.seek(0)
    out.truncate()
    ps.ss()
    ps.rrr()
    assert out.getvalue() == "sa\nsb\nss\nrra\nrrb\nrrr\n"


def test_default_output_is_stdout(capsys):
    ps = PushSwap([2, 1])
    ps.sa()
    assert capsys.readouterr().out == "sa\n"


def test_stack_iteration_and_indices():
    nodes = [Node(10, 2), Node(20, 0), Node(30, 1)]
    stack = Stack(nodes)
    assert list(stack) == nodes
    assert stack.values() == [10, 20, 30]
    assert stack.indices() == [2, 0, 1]


@pytest.mark.parametrize(
    "indices, expected",
    [([], True), ([0], True), ([0, 1, 2], True), ([1, 0, 2], False), ([0, 2, 1], False)],
)
def test_is_sorted(indices, expected):
    stack = Stack(Node(i, i) for i in indices)
    assert stack.is_sorted() is expected


def test_max_index():
    assert Stack([Node(1, 3), Node(2, 1), Node(3, 2)]).max_index() == 3
    assert Stack().max_index() == 0