import pytest
from hypothesis import given
from hypothesis import strategies as st

from cstrkit.memory import (
    SIZE_MAX,
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_memset_returns_buffer_and_fills():
    buf = bytearray(20)
    result = memset(buf, 7, 12)
    assert result is buf
    assert buf == bytes([7]) * 12 + bytes(8)


@given(st.binary(max_size=64), st.integers(min_value=-1000, max_value=1000), st.data())
def test_memset_uses_low_byte(data, c, draw):
    n = draw.draw(st.integers(min_value=0, max_value=len(data)))
    buf = bytearray(data)
    memset(buf, c, n)
    assert set(buf[:n]) <= {c & 0xFF}
    assert buf[n:] == data[n:]


def test_memset_rejects_overrun():
    with pytest.raises(ValueError):
        memset(bytearray(3), 0, 4)


def test_memset_rejects_negative():
    with pytest.raises(ValueError):
        memset(bytearray(3), 0, -1)


def test_bzero_source_example():
    buf = bytearray(b"Hola Mundo!")
    assert bzero(buf, 5) is None
    assert buf == bytes(5) + b"Mundo!"


def test_memchr_source_example():
    assert memchr(b"cursus", ord("r"), 6) == 2


def test_memchr_domain_example():
    data = b"someone@example.com"
    at = memchr(data, ord("@"), len(data))
    assert data[at + 1:] == b"example.com"


def test_memchr_respects_limit():
    data = b"cursus"
    assert memchr(data, ord("s"), 3) is None
    assert memchr(data, ord("s"), 4) == data.index(b"s")


@given(st.binary(max_size=64), st.integers(min_value=0, max_value=255))
def test_memchr_finds_first_match(data, c):
    found = memchr(data, c, len(data))
    if c in data:
        assert found == data.index(c)
    else:
        assert found is None


def test_memchr_truncates_search_byte():
    data = b"abc"
    assert memchr(data, ord("b") + 256, 3) == memchr(data, ord("b"), 3)


def test_memcmp_source_examples():
    assert memcmp(b"Hola Mundo\0", b"Hola Mundo\0", 11) == 0
    assert memcmp(b"Hola Mundo\0", b"Hola Mundo!", 11) == 0 - ord("!")


@given(st.binary(max_size=32), st.binary(max_size=32))
def test_memcmp_sign_matches_ordering(a, b):
    n = min(len(a), len(b))
    result = memcmp(a, b, n)
    if a[:n] == b[:n]:
        assert result == 0
    elif a[:n] < b[:n]:
        assert result < 0
    else:
        assert result > 0


@given(st.binary(max_size=32))
def test_memcmp_zero_length_is_equal(a):
    assert memcmp(a, b"", 0) == 0


def test_memcmp_rejects_overrun():
    with pytest.raises(ValueError):
        memcmp(b"ab", b"abc", 3)


def test_memcpy_source_examples():
    src = b"a,bcdefghijklmnopqrstuvwxyz\0"
    dst = bytearray(28)
    assert memcpy(dst, src, 28) is dst
    assert dst == src
    dst2 = bytearray(10)
    memcpy(dst2, src[8:], 9)
    assert dst2[:9] == src[8:17]


def test_memcpy_both_none():
    assert memcpy(None, None, 5) is None


def test_memcpy_one_none_raises():
    with pytest.raises(TypeError):
        memcpy(bytearray(3), None, 1)


@given(st.binary(max_size=32), st.data())
def test_memcpy_copies_prefix(src, draw):
    n = draw.draw(st.integers(min_value=0, max_value=len(src)))
    dst = bytearray(b"\xff" * len(src))
    memcpy(dst, src, n)
    assert dst[:n] == src[:n]
    assert dst[n:] == b"\xff" * (len(src) - n)


def test_memcpy_rejects_short_destination():
    with pytest.raises(ValueError):
        memcpy(bytearray(2), b"abc", 3)


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdefghij")
    assert memmove(buf, 2, 0, 5) is buf
    assert buf == b"ababcdehij"


@given(st.binary(min_size=1, max_size=40), st.data())
def test_memmove_preserves_source_bytes(data, draw):
    size = len(data)
    n = draw.draw(st.integers(min_value=0, max_value=size))
    src = draw.draw(st.integers(min_value=0, max_value=size - n))
    dst = draw.draw(st.integers(min_value=0, max_value=size - n))
    buf = bytearray(data)
    memmove(buf, dst, src, n)
    assert buf[dst:dst + n] == data[src:src + n]
    assert buf[:dst] == data[:dst]
    assert buf[dst + n:] == data[dst + n:]


def test_memmove_rejects_overrun():
    with pytest.raises(ValueError):
        memmove(bytearray(5), 3, 0, 3)


def test_memmove_rejects_negative_offset():
    with pytest.raises(ValueError):
        memmove(bytearray(5), -1, 0, 1)


@given(st.integers(min_value=0, max_value=64), st.integers(min_value=0, max_value=16))
def test_calloc_is_zeroed(count, size):
    buf = calloc(count, size)
    assert len(buf) == count * size
    assert not any(buf)


def test_calloc_overflow():
    with pytest.raises(OverflowError):
        calloc(SIZE_MAX // 2 + 1, 2)


def test_calloc_size_limit():
    with pytest.raises(OverflowError):
        calloc(1, SIZE_MAX)
    with pytest.raises(OverflowError):
        calloc(SIZE_MAX, 0)


def test_calloc_rejects_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)