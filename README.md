# cstrkit

Small, dependency-free helpers for characters, byte buffers, strings and
singly linked lists. They keep the rules of the classic C string and memory
routines (the same results, limits and edge cases) but take Python `str`,
`bytes`, `bytearray` and `int` values instead of raw pointers. Positions are
returned as indexes, and `None` means "not found".

Strings passed to the string functions end at their first NUL character
(`"\0"` or `b"\0"`), or at their end if they have none.

## Installation

```
pip install cstrkit
```

To run the test suite:

```
pip install "cstrkit[test]"
pytest
```

## Modules

### `cstrkit.chars`

`isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`, `toupper`, `tolower`.
Each takes an integer character code or a one-character string. The
predicates return a `bool`. The case converters return the same kind of value
they were given and change only the ASCII letters.

### `cstrkit.memory`

Operations on byte buffers:

- `memset(buf, c, n)` sets the first `n` bytes to the low byte of `c` and
  returns `buf`. `bzero(buf, n)` sets them to zero.
- `memchr(data, c, n)` returns the index of the first matching byte, or `None`.
- `memcmp(a, b, n)` returns the difference of the first differing bytes, or `0`.
- `memcpy(dst, src, n)` copies `n` bytes and returns `dst`. It returns `None`
  when both arguments are `None`.
- `memmove(buf, dst, src, n)` copies `n` bytes inside one buffer, from offset
  `src` to offset `dst`. The two regions may overlap.
- `calloc(count, size)` returns a zero-filled `bytearray`. It raises
  `OverflowError` when the total would not fit the platform size type
  (`SIZE_MAX`).

A byte count that is negative or runs past a buffer raises `ValueError`.

### `cstrkit.cstrings`

- `strlen`, `strdup`.
- `strchr` and `strrchr` return an index. Searching for NUL returns `strlen(s)`.
- `strncmp(s1, s2, n)` compares at most `n` characters.
- `strnstr(haystack, needle, length)` searches within the first `length`
  characters of `haystack`.
- `strlcpy(dst, src, dstsize)` and `strlcat(dst, src, dstsize)` write into a
  `bytearray` and return the length the result would have had without
  truncation.
- `atoi(text)` skips leading whitespace and reads one optional sign, then the
  digits. The result is reduced to a 32-bit signed int.

### `cstrkit.text`

- `substr(s, start, length)`, `strjoin(s1, s2)` and `strtrim(s, charset)` build
  new strings.
- `split(s, sep)` splits on one character and drops empty pieces.
- `itoa(n)` returns the decimal form of a 32-bit signed int.
- `strmapi(s, f)` builds a new string from `f(i, s[i])`.
- `striteri(chars, f)` calls `f(i, chars)` for each index, so `f` can change a
  mutable sequence in place.

A `None` string argument gives `None` back.

### `cstrkit.output`

`put_char`, `put_str`, `put_endl` and `put_nbr` write to an integer file
descriptor or to a binary stream that has a `write` method. Text is encoded
as UTF-8. `put_str` and `put_endl` write nothing for `None`. `put_nbr` accepts
32-bit signed ints only.

### `cstrkit.linked`

`LinkedList` is a singly linked list of `Node` objects, each holding
`content` and `next`. It offers:

- `push_front`, `push_back` and `last`, which return nodes.
- `pop_front`, which raises `IndexError` on an empty list.
- `clear`.
- `for_each`.
- `map`, which returns a new list.
- `len()` and iteration over the contents.

`pop_front`, `clear` and `map` accept an optional `delete` callback, which
receives each content that is dropped.

## Examples

```python
from cstrkit.cstrings import atoi, strchr, strncmp
from cstrkit.text import itoa, split, strtrim
from cstrkit.memory import memmove
from cstrkit.linked import LinkedList

atoi("   -42abc")            # -42
itoa(-2147483648)            # "-2147483648"
split(" a,,b,c ", ",")       # [" a", "b", "c "]
strtrim("xxhixx", "x")       # "hi"
strncmp("abc", "abd", 2)     # 0
strchr("CURSUS42", "U")      # 1

buf = bytearray(b"abcdef")
memmove(buf, 2, 0, 3)        # bytearray(b"ababcf")

items = LinkedList(["one", "two"])
items.push_back("three")
len(items)                   # 3
list(items.map(str.upper))   # ["ONE", "TWO", "THREE"]
```

The output helpers write to a file descriptor or a binary stream:

```python
import io
import sys
from cstrkit.output import put_endl, put_nbr

put_nbr(-123, sys.stdout.fileno())
put_endl("", sys.stdout.fileno())

stream = io.BytesIO()
put_endl("hello", stream)    # stream.getvalue() == b"hello\n"
```

## What it does not do

cstrkit is a library only. It has no command-line program. It does not manage
memory on its own: buffers are ordinary Python `bytearray` objects.