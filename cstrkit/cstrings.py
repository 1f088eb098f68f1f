"""NUL-terminated string operations.

Read-only arguments may be ``str``, ``bytes`` or ``bytearray``; a string ends
at its first NUL character, or at its end if it has none. Positions are
returned as indexes, and ``None`` stands for "not found". The bounded copy
functions ``strlcpy`` and ``strlcat`` write into a ``bytearray``.
"""

from __future__ import annotations

from itertools import chain, islice, repeat, takewhile
from typing import Iterator, Optional, Union

from .chars import isdigit

CString = Union[str, bytes, bytearray]
ByteString = Union[bytes, bytearray]
CharLike = Union[int, str]

__all__ = [
    "strlen",
    "strchr",
    "strrchr",
    "strncmp",
    "strnstr",
    "strlcpy",
    "strlcat",
    "strdup",
    "atoi",
]

_LLONG_MAX = 2**63 - 1
_WHITESPACE = " \t\n\v\f\r"


def strlen(s: CString) -> int:
    """Return the number of characters before the first NUL."""
    index = s.find("\0" if isinstance(s, str) else b"\0")
    return len(s) if index < 0 else index


def _target(c: CharLike) -> int:
    """Return the code searched for: a character's code point, or the low byte of an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return c & 0xFF


def _needle(s: CString, code: int) -> Union[str, bytes, None]:
    if isinstance(s, str):
        return chr(code)
    return bytes([code]) if code <= 0xFF else None


def strchr(s: CString, c: CharLike) -> Optional[int]:
    """Return the index of the first *c* in *s*, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    code = _target(c)
    end = strlen(s)
    if code == 0:
        return end
    needle = _needle(s, code)
    if needle is None:
        return None
    index = s.find(needle, 0, end)
    return None if index < 0 else index


def strrchr(s: CString, c: CharLike) -> Optional[int]:
    """Return the index of the last *c* in *s*, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    code = _target(c)
    end = strlen(s)
    if code == 0:
        return end
    needle = _needle(s, code)
    if needle is None:
        return None
    index = s.rfind(needle, 0, end)
    return None if index < 0 else index


def _codes(s: CString) -> Iterator[int]:
    """Yield the character codes of *s* up to its terminator, then zeros forever."""
    text = s[:strlen(s)]
    codes = map(ord, text) if isinstance(text, str) else iter(text)
    return chain(codes, repeat(0))


def strncmp(s1: CString, s2: CString, n: int) -> int:
    """Compare at most *n* characters of *s1* and *s2*.

    Returns the difference of the first pair of differing codes, or 0.
    """
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    for x, y in islice(zip(_codes(s1), _codes(s2)), n):
        if x != y or x == 0:
            return x - y
    return 0


def strnstr(haystack: CString, needle: CString, length: int) -> Optional[int]:
    """Return the index of *needle* within the first *length* characters of
    *haystack*, or None. An empty needle is found at index 0."""
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    needle = needle[:strlen(needle)]
    if not needle:
        return 0
    if length == 0:
        return None
    window = haystack[:min(length, strlen(haystack))]
    index = window.find(needle)
    return None if index < 0 else index


def _check_dst(dst: bytearray, src: ByteString, dstsize: int) -> None:
    if not isinstance(dst, bytearray):
        raise TypeError(f"destination must be a bytearray, got {type(dst).__name__}")
    if not isinstance(src, (bytes, bytearray)):
        raise TypeError(f"source must be bytes, got {type(src).__name__}")
    if dstsize < 0:
        raise ValueError(f"destination size must not be negative, got {dstsize}")
    if dstsize > len(dst):
        raise ValueError(f"destination size {dstsize} exceeds the {len(dst)} bytes of the buffer")


def strlcpy(dst: bytearray, src: ByteString, dstsize: int) -> int:
    """Copy *src* into *dst*, writing at most *dstsize* bytes including the NUL.

    Returns the length of *src*; a result of *dstsize* or more means the
    copy was truncated.
    """
    _check_dst(dst, src, dstsize)
    src_len = strlen(src)
    if dstsize > 0:
        count = min(src_len, dstsize - 1)
        dst[:count] = src[:count]
        dst[count] = 0
    return src_len


def strlcat(dst: bytearray, src: ByteString, dstsize: int) -> int:
    """Append *src* to the string in *dst*, keeping the whole within *dstsize*
    bytes including the NUL.

    Returns the length the string would have had without truncation; if the
    existing string already fills *dstsize*, returns ``len(src) + dstsize``.
    """
    _check_dst(dst, src, dstsize)
    src_len = strlen(src)
    if dstsize == 0:
        return src_len
    dst_len = strlen(dst)
    if dst_len >= dstsize:
        return src_len + dstsize
    count = min(src_len, dstsize - dst_len - 1)
    dst[dst_len:dst_len + count] = src[:count]
    dst[dst_len + count] = 0
    return dst_len + src_len


def strdup(s: CString) -> CString:
    """Return a new copy of *s* up to its terminator."""
    return s[:strlen(s)]


def _to_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def atoi(text: CString) -> int:
    """Parse a decimal integer the way the C conversion does.

    Leading whitespace is skipped, one optional sign is read, then digits up
    to the first non-digit. Reading stops once the magnitude passes a tenth
    of the largest 64-bit value, and the result is reduced to a 32-bit
    signed int.
    """
    if isinstance(text, (bytes, bytearray)):
        text = text.decode("latin-1")
    rest = text[:strlen(text)].lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for digit in takewhile(isdigit, rest):
        if value > _LLONG_MAX // 10:
            break
        value = value * 10 + int(digit)
    return _to_int32(sign * value)