"""ASCII character classification and case conversion.

Each function accepts either an integer character code or a one-character
string. Predicates return a bool; the case converters return a value of the
same kind they were given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]

__all__ = [
    "isalpha",
    "isdigit",
    "isalnum",
    "isascii",
    "isprint",
    "toupper",
    "tolower",
]

_CASE_OFFSET = ord("a") - ord("A")


def _code(c: CharLike) -> int:
    """Return the integer code of *c*."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return c


def _is_lower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def _is_upper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def isalpha(c: CharLike) -> bool:
    """True for the ASCII letters a-z and A-Z."""
    code = _code(c)
    return _is_lower(code) or _is_upper(code)


def isdigit(c: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: CharLike) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def isprint(c: CharLike) -> bool:
    """True for printable ASCII, space (32) through tilde (126)."""
    return 32 <= _code(c) <= 126


def _convert(c: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(c, str) else code


def toupper(c: CharLike) -> CharLike:
    """Map an ASCII lowercase letter to uppercase; anything else is unchanged."""
    code = _code(c)
    if _is_lower(code):
        code -= _CASE_OFFSET
    return _convert(c, code)


def tolower(c: CharLike) -> CharLike:
    """Map an ASCII uppercase letter to lowercase; anything else is unchanged."""
    code = _code(c)
    if _is_upper(code):
        code += _CASE_OFFSET
    return _convert(c, code)