"""NUL-terminated string primitives: length, search, compare, copy and conversion.

Text may be given as ``str`` or as a bytes-like object. As with C strings,
only the part before the first NUL character counts as the string.
The copy helpers ``strlcpy`` and ``strlcat`` write into a ``bytearray``.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Optional, Union

from libft.chars import is_digit

Text = Union[str, bytes, bytearray, memoryview]

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
    "itoa",
]

_INT_BITS = 32


def _c_string(s: Text) -> Union[str, bytes]:
    """Return the part of *s* before its first NUL."""
    if isinstance(s, str):
        end = s.find("\0")
        return s if end < 0 else s[:end]
    data = bytes(s)
    end = data.find(0)
    return data if end < 0 else data[:end]


def _codes(text: Union[str, bytes]) -> list[int]:
    return [ord(ch) for ch in text] if isinstance(text, str) else list(text)


def _char_code(c: Union[int, str]) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c & 0xFF
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _needle(text: Union[str, bytes], code: int) -> Optional[Union[str, bytes]]:
    if isinstance(text, str):
        return chr(code)
    return bytes([code]) if code < 256 else None


def _as_bytes(data: Text) -> bytes:
    if isinstance(data, str):
        raise TypeError("expected a bytes-like object, got str")
    return bytes(data)


def strlen(s: Text) -> int:
    """Return the number of characters before the first NUL."""
    return len(_c_string(s))


def strchr(s: Text, c: Union[int, str]) -> Optional[int]:
    """Return the index of the first occurrence of *c* in *s*, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _c_string(s)
    code = _char_code(c)
    if code == 0:
        return len(text)
    needle = _needle(text, code)
    if needle is None:
        return None
    index = text.find(needle)
    return None if index < 0 else index


def strrchr(s: Text, c: Union[int, str]) -> Optional[int]:
    """Return the index of the last occurrence of *c* in *s*, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _c_string(s)
    code = _char_code(c)
    if code == 0:
        return len(text)
    needle = _needle(text, code)
    if needle is None:
        return None
    index = text.rfind(needle)
    return None if index < 0 else index


def strncmp(s1: Text, s2: Text, n: int) -> int:
    """Compare at most *n* characters of two strings.

    Returns the difference of the first pair of differing character codes,
    or 0 when the compared parts are equal.
    """
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    first = _codes(_c_string(s1))
    second = _codes(_c_string(s2))
    for a, b in islice(zip_longest(first, second, fillvalue=0), n):
        if a != b:
            return a - b
    return 0


def strnstr(haystack: Text, needle: Text, length: int) -> Optional[int]:
    """Find *needle* wholly within the first *length* characters of *haystack*.

    Returns the index of the match, 0 for an empty needle, or None.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    text = _c_string(haystack)
    pattern = _c_string(needle)
    if not pattern:
        return 0
    if isinstance(text, str) != isinstance(pattern, str):
        raise TypeError("haystack and needle must both be str or both be bytes")
    index = text[:length].find(pattern)
    return None if index < 0 else index


def strlcpy(dest: bytearray, src: Text, dstsize: int) -> int:
    """Copy *src* into *dest*, writing at most *dstsize* bytes including the NUL.

    Returns the length of *src*; a result of *dstsize* or more means truncation.
    """
    source = _c_string(_as_bytes(src))
    if dstsize < 0:
        raise ValueError(f"dstsize must not be negative, got {dstsize}")
    if dstsize == 0:
        return len(source)
    if dstsize > len(dest):
        raise ValueError(f"dstsize {dstsize} exceeds the {len(dest)} bytes of the destination")
    count = min(len(source), dstsize - 1)
    dest[:count] = source[:count]
    dest[count] = 0
    return len(source)


def strlcat(dest: bytearray, src: Text, dstsize: int) -> int:
    """Append *src* to the string in *dest*, the whole taking at most *dstsize* bytes.

    Returns the length the full result would have had; when *dstsize* is not
    beyond the current string in *dest*, nothing is written and the result is
    ``strlen(src) + dstsize``.
    """
    source = _c_string(_as_bytes(src))
    if dstsize < 0:
        raise ValueError(f"dstsize must not be negative, got {dstsize}")
    current = strlen(dest)
    if dstsize <= current:
        return len(source) + dstsize
    if dstsize > len(dest):
        raise ValueError(f"dstsize {dstsize} exceeds the {len(dest)} bytes of the destination")
    count = min(len(source), dstsize - 1 - current)
    dest[current:current + count] = source[:count]
    dest[current + count] = 0
    return current + len(source)


def strdup(s: Text) -> Text:
    """Return a fresh copy of the string part of *s*, of the same kind."""
    text = _c_string(s)
    if isinstance(s, bytearray):
        return bytearray(text)
    return text


def atoi(s: Text) -> int:
    """Parse a decimal integer the way C's atoi does.

    Leading blanks (space, tab to carriage return) are skipped, one optional
    sign is read, then digits up to the first non-digit. Values wrap to a
    32-bit signed integer.
    """
    codes = iter(_codes(_c_string(s)))
    code = next(codes, 0)
    while code == 32 or 9 <= code <= 13:
        code = next(codes, 0)
    sign = 1
    if code in (ord("-"), ord("+")):
        if code == ord("-"):
            sign = -1
        code = next(codes, 0)
    result = 0
    while code and is_digit(code):
        result = result * 10 + (code - ord("0"))
        code = next(codes, 0)
    half = 1 << (_INT_BITS - 1)
    return (result * sign + half) % (1 << _INT_BITS) - half


def itoa(n: int) -> str:
    """Return the decimal representation of the integer *n*."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)