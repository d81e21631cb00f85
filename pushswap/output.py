"""Formatted output: a small printf and helpers that write characters, strings and numbers."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO

_UINT_MASK = (1 << 32) - 1
_POINTER_MASK = (1 << 64) - 1
_ARG_CONVERSIONS = frozenset("cspiduxX")


def _to_int32(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, wrapping on overflow."""
    value &= _UINT_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _to_char(value: int | str) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    return chr(value & 0xFF)


def _convert(conv: str, values: Iterator[Any]) -> str:
    if conv not in _ARG_CONVERSIONS:
        return conv
    try:
        value = next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{conv}") from None
    if conv == "c":
        return _to_char(value)
    if conv == "s":
        return "(null)" if value is None else str(value)
    if conv == "p":
        address = int(value) & _POINTER_MASK
        return "(nil)" if address == 0 else "0x" + format(address, "x")
    if conv in "id":
        return str(_to_int32(int(value)))
    if conv == "u":
        return str(int(value) & _UINT_MASK)
    return format(int(value) & _UINT_MASK, conv)


def format_string(fmt: str, *args: Any) -> str:
    """Expand the conversions in ``fmt`` with ``args`` and return the result.

    Supported conversions are %c, %s, %p, %d, %i, %u, %x and %X. Any other
    character after ``%`` is emitted as is, so ``%%`` yields ``%``. A lone
    ``%`` at the end of ``fmt`` produces nothing.
    """
    values = iter(args)
    chars = iter(fmt)
    parts: list[str] = []
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            continue
        conv = next(chars, None)
        if conv is None:
            break
        parts.append(_convert(conv, values))
    return "".join(parts)


def _target(stream: TextIO | None) -> TextIO:
    return stream if stream is not None else sys.stdout


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write ``fmt`` formatted with ``args`` to ``stream`` and return the characters written."""
    text = format_string(fmt, *args)
    _target(stream).write(text)
    return len(text)


def putchar(c: int | str, stream: TextIO | None = None) -> None:
    """Write one character; an int code is truncated to a byte."""
    _target(stream).write(_to_char(c))


def putstr(s: str, stream: TextIO | None = None) -> None:
    """Write a string."""
    if s is None:
        raise TypeError("putstr needs a string")
    _target(stream).write(s)


def putendl(s: str, stream: TextIO | None = None) -> None:
    """Write a string followed by a newline."""
    putstr(s, stream)
    _target(stream).write("\n")


def putnbr(n: int, stream: TextIO | None = None) -> None:
    """Write ``n`` as a signed 32-bit decimal integer."""
    _target(stream).write(str(_to_int32(int(n))))