"""Bit encoding of messages sent one signal per bit, least significant first."""

from __future__ import annotations

from typing import Iterator

BITS_PER_CHAR = 8
TERMINATOR = b"\n"


def char_to_bits(c: int | str) -> tuple[int, ...]:
    """The eight bits of a byte, least significant first."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        code = ord(c)
        if code > 0xFF:
            raise ValueError("character does not fit in one byte")
    else:
        code = c & 0xFF
    return tuple((code >> shift) & 1 for shift in range(BITS_PER_CHAR))


def message_to_bits(message: str | bytes) -> Iterator[int]:
    """Every bit of ``message`` followed by the newline terminator."""
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    for byte in data + TERMINATOR:
        yield from char_to_bits(byte)


class BitDecoder:
    """Collects bits, least significant first, into bytes."""

    def __init__(self) -> None:
        self._count = 0
        self._value = 0

    def feed(self, bit: int | bool) -> int | None:
        """Add one bit; return the finished byte after every eighth bit."""
        if bit:
            self._value |= 1 << self._count
        self._count += 1
        if self._count < BITS_PER_CHAR:
            return None
        value = self._value
        self._count = 0
        self._value = 0
        return value