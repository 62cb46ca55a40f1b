"""String building, slicing and splitting on NUL-terminated text."""

from __future__ import annotations

from typing import Callable, MutableSequence, Sequence

from sigtalk.search import c_length


def _text(s: str) -> str:
    if not isinstance(s, str):
        raise TypeError(f"expected str, got {type(s).__name__}")
    return s[: c_length(s)]


def _check_size(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from index ``start``.

    A start at or past the end of the text yields an empty string.
    """
    _check_size("start", start)
    _check_size("length", length)
    text = _text(s)
    if start >= len(text):
        return ""
    return text[start : start + length]


def join(s1: str, s2: str) -> str:
    """Concatenate two texts."""
    return _text(s1) + _text(s2)


def duplicate(s: str) -> str:
    """Return a copy of the text up to its terminator."""
    return _text(s)


def trim(s: str, charset: str) -> str:
    """Strip every leading and trailing character that appears in ``charset``."""
    text = _text(s)
    chars = _text(charset)
    if not chars:
        return text
    return text.lstrip(chars).rstrip(chars)


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the single character ``sep``, dropping empty words."""
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in _text(s).split(sep) if word]


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the text that fits and the full length of ``src``.
    """
    _check_size("size", size)
    text = _text(src)
    copied = text[: size - 1] if size else ""
    return copied, len(text)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full result would have
    needed; when ``dst`` already fills the buffer that length is
    ``size + len(src)``.
    """
    _check_size("size", size)
    head = _text(dst)
    tail = _text(src)
    room = max(size - len(head) - 1, 0)
    result = head + tail[:room]
    if len(head) >= size:
        return result, size + len(tail)
    return result, len(head) + len(tail)


def map_indexed(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new text from ``f(index, char)`` applied to every character."""
    mapped = "".join(f(index, ch) for index, ch in enumerate(_text(s)))
    return mapped[: c_length(mapped)]


def iter_indexed(
    s: Sequence[str] | MutableSequence[str], f: Callable[[int, str], None]
) -> None:
    """Call ``f(index, char)`` for every character of ``s`` in order."""
    items = _text(s) if isinstance(s, str) else s
    for index, ch in enumerate(items):
        if ch == "\0":
            break
        f(index, ch)