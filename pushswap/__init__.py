"""Sort integers with two stacks and a limited set of moves, plus small text and buffer helpers."""

__version__ = "1.0.0"