"""Searching and comparing NUL-terminated text."""

from __future__ import annotations

from itertools import chain, islice

_NUL = "\0"


def _terminated(s: str) -> str:
    end = s.find(_NUL)
    return s if end < 0 else s[:end]


def _as_char(c: int | str) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return c
    return chr(c & 0xFF)


def c_length(s: str) -> int:
    """Length of the text up to its first NUL character."""
    return len(_terminated(s))


def find_char(s: str, c: int | str) -> int | None:
    """Index of the first occurrence of ``c``; NUL matches the terminator."""
    text = _terminated(s)
    ch = _as_char(c)
    if ch == _NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def rfind_char(s: str, c: int | str) -> int | None:
    """Index of the last occurrence of ``c``; NUL matches the terminator."""
    text = _terminated(s)
    ch = _as_char(c)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def find_bounded(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0.
    """
    target = _terminated(needle)
    if not target:
        return 0
    index = _terminated(haystack)[: max(length, 0)].find(target)
    return None if index < 0 else index


def _units(s: str | bytes) -> bytes:
    data = s.encode("utf-8") if isinstance(s, str) else bytes(s)
    end = data.find(b"\0")
    return data if end < 0 else data[:end]


def compare_n(s1: str | bytes, s2: str | bytes, n: int) -> int:
    """Compare at most ``n`` bytes as unsigned values.

    Returns the difference of the first differing bytes, or 0 when the
    compared prefixes are equal.
    """
    a = chain(_units(s1), [0])
    b = chain(_units(s2), [0])
    for x, y in islice(zip(a, b), max(n, 0)):
        if x != y:
            return x - y
        if x == 0:
            break
    return 0