"""Byte-buffer filling, copying, searching and comparing."""

from __future__ import annotations


def _check_range(name: str, n: int, limit: int) -> None:
    if n < 0:
        raise ValueError(f"{name} must not be negative")
    if n > limit:
        raise IndexError(f"{name} {n} exceeds buffer length {limit}")


def memset(buf: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buf`` with ``value`` (taken modulo 256)."""
    _check_range("length", length, len(buf))
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def bzero(buf: bytearray, length: int) -> None:
    """Zero the first ``length`` bytes of ``buf``."""
    memset(buf, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Allocate a zeroed buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memcpy(dst: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dst``."""
    _check_range("n", n, min(len(dst), len(src)))
    dst[:n] = src[:n]
    return dst


def memmove(buf: bytearray, dst_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy ``n`` bytes within ``buf``; overlapping regions are handled."""
    if dst_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    _check_range("n", n, len(buf) - max(dst_offset, src_offset))
    buf[dst_offset : dst_offset + n] = bytes(buf[src_offset : src_offset + n])
    return buf


def memchr(buf: bytes | bytearray, c: int, n: int) -> int | None:
    """Index of the first byte equal to ``c`` within the first ``n`` bytes."""
    _check_range("n", n, len(buf))
    index = buf.find(c & 0xFF, 0, n)
    return None if index < 0 else index


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Difference of the first differing bytes in the first ``n``, else 0."""
    _check_range("n", n, min(len(a), len(b)))
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0