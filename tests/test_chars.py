import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from cstrkit.chars import (
    isalnum,
    isalpha,
    isascii,
    isdigit,
    isprint,
    tolower,
    toupper,
)

codes = st.integers(min_value=-300, max_value=600)


def test_source_examples():
    assert isalnum("a") is True
    assert isalpha("1") is False
    assert isdigit("1") is True
    assert isprint(49) is True
    assert tolower("A") == "a"
    assert toupper("a") == "A"


def test_isascii_boundaries():
    assert isascii(0) is True
    assert isascii(127) is True
    assert isascii(128) is False
    assert isascii(-1) is False


@given(codes)
def test_isalnum_is_alpha_or_digit(code):
    assert isalnum(code) == (isalpha(code) or isdigit(code))


@given(st.integers(min_value=0, max_value=127))
def test_classification_matches_ascii_sets(code):
    ch = chr(code)
    assert isalpha(code) == (ch in string.ascii_letters)
    assert isdigit(code) == (ch in string.digits)
    assert isprint(code) == (ch in string.printable and ch not in "\t\n\r\x0b\x0c")


@given(st.integers(min_value=128, max_value=1000))
def test_non_ascii_is_never_classified(code):
    assert not isalpha(code)
    assert not isdigit(code)
    assert not isprint(code)
    assert not isascii(code)


@pytest.mark.parametrize("lower, upper", zip(string.ascii_lowercase, string.ascii_uppercase))
def test_case_conversion_letters(lower, upper):
    assert toupper(lower) == upper
    assert tolower(upper) == lower
    assert toupper(ord(lower)) == ord(upper)
    assert tolower(ord(upper)) == ord(lower)


@given(codes)
def test_case_conversion_leaves_non_letters(code):
    if not isalpha(code):
        assert toupper(code) == code
        assert tolower(code) == code


@given(codes)
def test_case_conversion_round_trip(code):
    assert tolower(toupper(code)) == tolower(code)
    assert toupper(tolower(code)) == toupper(code)


def test_string_in_string_out():
    assert toupper("7") == "7"
    assert tolower("z") == "z"


def test_rejects_long_string():
    with pytest.raises(ValueError):
        isalpha("ab")


def test_rejects_empty_string():
    with pytest.raises(ValueError):
        toupper("")


def test_rejects_other_types():
    with pytest.raises(TypeError):
        isdigit(1.5)