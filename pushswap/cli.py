"""Command line: print the moves that sort the given integers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .indexing import assign_index
from .output import putstr
from .parsing import ParseError, parse_args
from .sorting import sort_controller
from .stacks import PushSwap


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the numbers in ``argv``, print the sorting moves and return the exit status.

    Invalid input prints ``Error`` on standard error and returns 1.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_args(args)
    except ParseError:
        putstr("Error\n", sys.stderr)
        return 1
    ps = PushSwap(values, sys.stdout)
    assign_index(ps.a)
    if ps.a.is_sorted():
        return 0
    sort_controller(ps)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())