"""Write characters, strings and numbers to a file descriptor or binary stream.

The target is either an integer file descriptor or an object with a
``write`` method that accepts bytes. Text is encoded as UTF-8.
"""

from __future__ import annotations

import os
from typing import BinaryIO, Optional, Union

from .cstrings import strlen

Target = Union[int, BinaryIO]
CString = Union[str, bytes, bytearray]

__all__ = ["put_char", "put_str", "put_endl", "put_nbr"]

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _write(fd: Target, data: bytes) -> None:
    if isinstance(fd, bool):
        raise TypeError("file descriptor must be an int or a binary stream")
    if isinstance(fd, int):
        view = memoryview(data)
        while view:
            view = view[os.write(fd, view):]
    else:
        fd.write(data)


def _encode(s: CString) -> bytes:
    return s.encode("utf-8") if isinstance(s, str) else bytes(s)


def put_char(c: Union[int, str], fd: Target) -> None:
    """Write one character: a one-character str, or the low byte of an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        data = c.encode("utf-8")
    elif isinstance(c, int) and not isinstance(c, bool):
        data = bytes([c & 0xFF])
    else:
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    _write(fd, data)


def put_str(s: Optional[CString], fd: Target) -> None:
    """Write *s* up to its terminator; None writes nothing."""
    if s is None:
        return
    _write(fd, _encode(s[:strlen(s)]))


def put_endl(s: Optional[CString], fd: Target) -> None:
    """Write *s* followed by a newline; None writes nothing."""
    if s is None:
        return
    put_str(s, fd)
    _write(fd, b"\n")


def put_nbr(n: int, fd: Target) -> None:
    """Write the decimal form of a 32-bit signed integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit a 32-bit signed int")
    _write(fd, str(n).encode("ascii"))