"""A small printf: %c %s %p %d %i %u %x %X and %% conversions."""

from __future__ import annotations

import operator
import sys
from typing import Any, Callable, Iterator

from sigtalk.search import c_length

_UINT32 = 0xFFFFFFFF
_UINT64 = 0xFFFFFFFFFFFFFFFF


def _signed32(value: int) -> int:
    value &= _UINT32
    return value - (1 << 32) if value & 0x80000000 else value


def _integer(value: Any) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(
            f"integer conversion needs an int, got {type(value).__name__}"
        ) from None


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c needs a single character")
        return value
    return chr(_integer(value) & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s needs a str, got {type(value).__name__}")
    return value[: c_length(value)]


def _pointer(value: Any) -> str:
    address = 0 if value is None else _integer(value) & _UINT64
    return "0x" + format(address, "x")


def _convert(spec: str, take: Callable[[], Any]) -> str:
    if spec == "c":
        return _char(take())
    if spec == "s":
        return _string(take())
    if spec == "p":
        return _pointer(take())
    if spec in ("d", "i"):
        return str(_signed32(_integer(take())))
    if spec == "u":
        return str(_integer(take()) & _UINT32)
    if spec in ("x", "X"):
        return format(_integer(take()) & _UINT32, spec)
    if spec == "%":
        return "%"
    return ""


def format_string(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args`` and return the resulting text.

    Unknown conversions produce nothing and consume no argument; a lone
    ``%`` at the end of the format is dropped.
    """
    values: Iterator[Any] = iter(args)

    def take() -> Any:
        try:
            return next(values)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    parts: list[str] = []
    chars = iter(fmt[: c_length(fmt)])
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        parts.append(_convert(spec, take))
    return "".join(parts)


def printf(fmt: str, *args: Any) -> int:
    """Write the expanded format to standard output; return its length."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)