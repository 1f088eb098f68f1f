"""Byte-buffer operations: fill, search, compare, copy and allocate."""

from __future__ import annotations

import sys
from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
Readable = Union[bytes, bytearray, memoryview]

__all__ = [
    "SIZE_MAX",
    "memset",
    "bzero",
    "memchr",
    "memcmp",
    "memcpy",
    "memmove",
    "calloc",
]

SIZE_MAX = sys.maxsize * 2 + 1
"""Largest value of the platform's unsigned size type."""


def _check_count(n: int, available: int, what: str) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if n > available:
        raise ValueError(f"byte count {n} exceeds the {available} bytes of {what}")


def memset(buf: Buffer, c: int, n: int) -> Buffer:
    """Set the first *n* bytes of *buf* to the low byte of *c* and return *buf*."""
    _check_count(n, len(buf), "the buffer")
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: Buffer, n: int) -> None:
    """Zero the first *n* bytes of *buf*."""
    memset(buf, 0, n)


def memchr(data: Readable, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to the low byte of *c*
    within the first *n* bytes of *data*, or None."""
    _check_count(n, len(data), "the data")
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: Readable, b: Readable, n: int) -> int:
    """Compare the first *n* bytes of *a* and *b*.

    Returns the difference between the first pair of differing bytes,
    or 0 if they are all equal.
    """
    _check_count(n, len(a), "the first operand")
    _check_count(n, len(b), "the second operand")
    return next((x - y for x, y in zip(a[:n], b[:n]) if x != y), 0)


def memcpy(dst: Optional[Buffer], src: Optional[Readable], n: int) -> Optional[Buffer]:
    """Copy the first *n* bytes of *src* to the start of *dst* and return *dst*.

    When both *dst* and *src* are None, None is returned.
    """
    if dst is None and src is None:
        return None
    if dst is None or src is None:
        raise TypeError("memcpy needs both a destination and a source")
    _check_count(n, len(src), "the source")
    _check_count(n, len(dst), "the destination")
    dst[:n] = src[:n]
    return dst


def memmove(buf: Buffer, dst: int, src: int, n: int) -> Buffer:
    """Copy *n* bytes inside *buf* from offset *src* to offset *dst*.

    The regions may overlap; the bytes are copied as they were before the
    move. Returns *buf*.
    """
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    size = len(buf)
    if src + n > size or dst + n > size:
        raise ValueError(f"moving {n} bytes from {src} to {dst} overruns a buffer of {size} bytes")
    buf[dst:dst + n] = bytes(buf[src:src + n])
    return buf


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of *count* elements of *size* bytes.

    Raises OverflowError when the total would not fit the platform's size type.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == SIZE_MAX or size == SIZE_MAX:
        raise OverflowError("count or size is at the size limit")
    total = count * size
    if total > SIZE_MAX:
        raise OverflowError(f"{count} * {size} bytes overflows the size type")
    return bytearray(total)