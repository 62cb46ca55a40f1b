"""Conversions between decimal text and 32-bit signed integers."""

from __future__ import annotations

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_SPACES = " \f\n\r\t\v"


def _wrap32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value > INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the C library does.

    Leading whitespace is skipped, one optional sign is taken, then digits are
    read until the first non-digit.  Text without digits yields 0.  The result
    wraps around like a 32-bit int.
    """
    rest = text.lstrip(_SPACES)
    negative = False
    if rest[:1] in ("+", "-"):
        negative = rest[0] == "-"
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    number = _wrap32(int("".join(digits))) if digits else 0
    return _wrap32(-number if negative else number)


def itoa(n: int) -> str:
    """Render a 32-bit signed integer as decimal text."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit int")
    return str(n)