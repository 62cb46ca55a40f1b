"""Writing characters, text and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO

from sigtalk.numconv import itoa
from sigtalk.search import c_length


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: TextIO | None = None) -> None:
    """Write a single character to ``stream`` (standard output by default)."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError("expected a single character")
    _target(stream).write(c)


def put_str(s: str, stream: TextIO | None = None) -> None:
    """Write ``s`` up to its first NUL character."""
    _target(stream).write(s[: c_length(s)])


def put_line(s: str, stream: TextIO | None = None) -> None:
    """Write ``s`` followed by a newline."""
    out = _target(stream)
    put_str(s, out)
    put_char("\n", out)


def put_number(n: int, stream: TextIO | None = None) -> None:
    """Write a 32-bit signed integer in decimal."""
    _target(stream).write(itoa(n))