"""String building: substrings, joining, trimming, splitting and mapping.

Inputs may be ``str``, ``bytes`` or ``bytearray`` and end at their first NUL
character. A ``None`` string argument gives ``None`` back.
"""

from __future__ import annotations

from itertools import count
from typing import Callable, List, MutableSequence, Optional, Union

from .cstrings import strlen

CString = Union[str, bytes, bytearray]
CharLike = Union[int, str]

__all__ = [
    "substr",
    "strjoin",
    "strtrim",
    "split",
    "itoa",
    "strmapi",
    "striteri",
]

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _terminated(s: CString) -> CString:
    """Return *s* cut at its first NUL."""
    return s[:strlen(s)]


def _check_same_kind(a: CString, b: CString) -> None:
    if isinstance(a, str) != isinstance(b, str):
        raise TypeError("cannot mix str with bytes-like strings")


def substr(s: Optional[CString], start: int, length: int) -> Optional[CString]:
    """Return at most *length* characters of *s* from index *start*.

    A *start* at or past the end of the string gives an empty string.
    """
    if s is None:
        return None
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    text = _terminated(s)
    if start >= len(text):
        return text[:0]
    return text[start:start + length]


def strjoin(s1: Optional[CString], s2: Optional[CString]) -> Optional[CString]:
    """Return *s1* followed by *s2*; None if either is None."""
    if s1 is None or s2 is None:
        return None
    _check_same_kind(s1, s2)
    return _terminated(s1) + _terminated(s2)


def strtrim(s: Optional[CString], charset: Optional[CString]) -> Optional[CString]:
    """Remove every leading and trailing character of *s* that is in *charset*."""
    if s is None or charset is None:
        return None
    _check_same_kind(s, charset)
    return _terminated(s).strip(_terminated(charset))


def _separator(s: CString, sep: CharLike) -> CString:
    if isinstance(sep, str):
        if len(sep) != 1:
            raise ValueError(f"expected a single character, got {len(sep)} characters")
        if isinstance(s, str):
            return sep
        if ord(sep) > 0xFF:
            raise ValueError(f"separator {sep!r} does not fit in a byte")
        return bytes([ord(sep)])
    if isinstance(sep, bool) or not isinstance(sep, int):
        raise TypeError(f"expected an int or a one-character str, got {type(sep).__name__}")
    code = sep & 0xFF
    return chr(code) if isinstance(s, str) else bytes([code])


def split(s: Optional[CString], sep: CharLike) -> Optional[List[CString]]:
    """Split *s* on the character *sep*, dropping empty pieces."""
    if s is None:
        return None
    return [word for word in _terminated(s).split(_separator(s, sep)) if word]


def itoa(n: int) -> str:
    """Return the decimal form of a 32-bit signed integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit a 32-bit signed int")
    return str(n)


def strmapi(
    s: Optional[CString],
    f: Optional[Callable[[int, CharLike], CharLike]],
) -> Optional[CString]:
    """Return a new string whose character *i* is ``f(i, s[i])``.

    For bytes-like input *f* receives and returns byte values and the
    result is ``bytes``.
    """
    if s is None or f is None:
        return None
    text = _terminated(s)
    if isinstance(text, str):
        return "".join(f(i, ch) for i, ch in enumerate(text))
    return bytes(f(i, byte) for i, byte in enumerate(text))


def striteri(
    chars: Optional[MutableSequence],
    f: Optional[Callable[[int, MutableSequence], object]],
) -> None:
    """Call ``f(i, chars)`` for each index up to the terminator.

    *f* may change *chars* in place; the terminator is looked for again
    before every call.
    """
    if chars is None or f is None:
        return
    nul = 0 if isinstance(chars, (bytearray, memoryview)) else "\0"
    for i in count():
        if i >= len(chars) or chars[i] == nul:
            break
        f(i, chars)