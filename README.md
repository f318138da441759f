# libft

A small library of character, memory, string and output helpers in the
style of the classic C runtime, with Python semantics. Functions return
indexes, new values or `None` instead of pointers. They raise `ValueError`,
`TypeError` or `OverflowError` for bad input.

Text arguments may be `str` or bytes-like objects. As with C strings, only
the part before the first NUL character counts as the string.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install .[test]
```

## Modules

### `libft.chars`

ASCII classification and case conversion. Each function takes a character
code (`int`) or a one-character `str`.

- `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print` return `bool`.
- `to_upper` and `to_lower` change ASCII letters only. They return the same
  form they were given.

```python
from libft.chars import is_alpha, to_upper

is_alpha(ord("a"))   # True
to_upper(ord("a"))   # 65
to_upper("a")        # "A"
```

### `libft.memory`

Operations on byte buffers such as `bytearray`:

- `memset(buffer, value, length)` fills the first bytes of the buffer with
  the low byte of `value`.
- `bzero(buffer, length)` sets the first bytes to zero.
- `calloc(count, size)` returns a zero-filled `bytearray`. It raises
  `OverflowError` when the total size does not fit in 64 bits.
- `memchr(data, value, size)` returns the index of a byte, or `None`.
- `memcmp(first, second, size)` returns the difference of the first pair of
  differing bytes, or `0`.
- `memcpy(dest, src, size)` copies bytes to the start of `dest`.
- `memmove(buffer, dest, src, size)` moves bytes within one buffer from
  offset `src` to offset `dest`. Overlapping regions are handled correctly.

A size that is negative or larger than the buffer raises `ValueError`.

```python
from libft.memory import calloc, memset

buf = calloc(4, 2)           # bytearray of eight zero bytes
memset(buf, ord("x"), 3)     # bytearray(b"xxx\x00\x00\x00\x00\x00")
```

### `libft.strings`

- `strlen`, `strdup`
- `strchr`, `strrchr` return an index or `None`. Searching for NUL finds
  the terminator.
- `strncmp(s1, s2, n)` compares at most `n` characters.
- `strnstr(haystack, needle, length)` finds `needle` within the first
  `length` characters.
- `strlcpy(dest, src, dstsize)` and `strlcat(dest, src, dstsize)` write into
  a `bytearray` and return the length the full result would have.
- `atoi(s)` parses the way C's `atoi` does and wraps the result to a 32-bit
  signed integer.
- `itoa(n)` returns the decimal text of an integer.

```python
from libft.strings import atoi, itoa, strnstr

atoi("   -42abc")                     # -42
itoa(-2147483648)                     # "-2147483648"
strnstr("Hello, world!", "orld", 13)  # 8
```

### `libft.text`

- `substr(s, start, length)` returns part of `s`.
- `strjoin(s1, s2)` joins two strings.
- `strtrim(s, charset)` removes the characters of `charset` from both ends
  of `s`.
- `split(s, sep)` splits on one character and drops empty fields.
- `strmapi(s, func)` builds a new string from `func(index, char)`.
- `striteri(buffer, func)` calls `func(index, value)` on each element of a
  mutable buffer before the first NUL. A result other than `None` is stored
  back in place.

```python
from libft.text import split, strtrim

split("salut comment ca-va ?", " ")  # ["salut", "comment", "ca-va", "?"]
strtrim("xxhixx", "x")               # "hi"
```

### `libft.output`

- `putchar_fd`, `putstr_fd`, `putendl_fd` and `putnbr_fd` write to a file
  descriptor.
- `str` text is written as UTF-8.
- A negative file descriptor writes nothing.
- `None` as a string writes nothing.

```python
from libft.output import putendl_fd, putnbr_fd

putendl_fd("hello", 1)
putnbr_fd(-123, 1)
```

## Scope

This is a library only. It has no command-line tool, and it keeps no state
between calls.