"""String helpers: search, slicing, joining, trimming, splitting and bounded copies."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import zip_longest
from typing import Any


def _char(c: int | str) -> str:
    """Return ``c`` as a one-character string; an int code is truncated to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c & 0xFF)


def _check_size(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(int(n))


def strchr(s: str, c: int | str) -> int | None:
    """Return the offset of the first ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    target = _char(c)
    pos = s.find(target)
    if pos >= 0:
        return pos
    return len(s) if target == "\0" else None


def strrchr(s: str, c: int | str) -> int | None:
    """Return the offset of the last ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    target = _char(c)
    if target == "\0":
        return len(s)
    pos = s.rfind(target)
    return pos if pos >= 0 else None


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from offset ``start``.

    A start at or past the end yields the empty string.
    """
    _check_size("start", start)
    _check_size("length", length)
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove every leading and trailing character of ``s`` that is in ``charset``."""
    return s.strip(charset) if charset else s


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the single character ``sep``, dropping empty words."""
    sep = _char(sep)
    return [word for word in s.split(sep) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return a string built from ``f(index, char)`` for each character of ``s``."""
    return "".join(f(pos, ch) for pos, ch in enumerate(s))


def striteri(
    s: MutableSequence[Any] | None, f: Callable[[int, Any], Any]
) -> MutableSequence[Any] | None:
    """Call ``f(index, item)`` on each item of ``s`` and update it in place.

    A result other than None replaces the item. ``s`` must be mutable, such as a
    list of characters or a bytearray; None is passed through untouched.
    """
    if s is None:
        return None
    if isinstance(s, (str, bytes)):
        raise TypeError("striteri needs a mutable sequence")
    for pos, item in enumerate(list(s)):
        replacement = f(pos, item)
        if replacement is not None:
            s[pos] = replacement
    return s


def strnstr(big: str, little: str, length: int) -> int | None:
    """Return the offset of ``little`` within the first ``length`` characters of ``big``.

    An empty ``little`` is found at offset 0. None is returned when there is no match.
    """
    _check_size("length", length)
    if not little:
        return 0
    pos = big[:length].find(little)
    return pos if pos >= 0 else None


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the first pair of differing character codes, the
    end of a string counting as code 0, or 0 when they match.
    """
    _check_size("n", n)
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue="\0"):
        ca, cb = ord(a), ord(b)
        if ca != cb or ca == 0:
            return ca - cb
    return 0


def strlcpy(dst: str, src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the resulting contents and the length of ``src``. With a size of 0
    the destination is left as it was.
    """
    _check_size("size", size)
    if size == 0:
        return dst, len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters, terminator included.

    Returns the resulting contents and the length the full result would have had.
    When ``dst`` already fills the buffer it is left as it was and the length
    reported is ``size`` plus the length of ``src``.
    """
    _check_size("size", size)
    dst_len = len(dst)
    src_len = len(src)
    if dst_len >= size:
        return dst, size + src_len
    room = size - dst_len
    if src_len < room:
        return dst + src, dst_len + src_len
    return dst + src[:room - 1], dst_len + src_len