"""Byte-buffer helpers: fill, search, compare and copy."""

from __future__ import annotations

from collections.abc import Sequence


def _check_count(n: int, *buffers: Sequence[int]) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to ``c`` (truncated to a byte)."""
    _check_count(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    return memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(buf: Sequence[int], c: int, n: int) -> int | None:
    """Return the offset of the first byte equal to ``c`` in the first ``n`` bytes.

    ``c`` is truncated to a byte. None is returned when there is no match.
    """
    _check_count(n, buf)
    target = c & 0xFF
    return next((pos for pos, byte in enumerate(buf[:n]) if byte == target), None)


def memcmp(s1: Sequence[int], s2: Sequence[int], n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference of the first pair of differing bytes, or 0.
    """
    _check_count(n, s1, s2)
    return next((a - b for a, b in zip(s1[:n], s2[:n]) if a != b), 0)


def memcpy(dst: bytearray, src: Sequence[int], n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dst``."""
    _check_count(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dst``.

    The regions may overlap; the result is as if the source were copied first.
    """
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if src + n > len(buf) or dst + n > len(buf):
        raise ValueError("move runs past the end of the buffer")
    if n and dst != src:
        buf[dst:dst + n] = bytes(buf[src:src + n])
    return buf