"""Building new strings: substrings, joining, trimming, splitting and mapping.

Text may be given as ``str`` or as a bytes-like object. As with C strings,
only the part before the first NUL character counts as the string.
"""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Union

from libft.strings import strdup

Text = Union[str, bytes, bytearray, memoryview]

__all__ = [
    "substr",
    "strjoin",
    "strtrim",
    "split",
    "strmapi",
    "striteri",
]


def _text(s: Optional[Text]) -> Union[str, bytes, bytearray]:
    """Return the string part of *s*, refusing a missing string."""
    if s is None:
        raise TypeError("expected a string, got None")
    return strdup(s)


def _same_kind(first, second) -> None:
    if isinstance(first, str) != isinstance(second, str):
        raise TypeError("arguments must both be str or both be bytes")


def _separator(text, sep: Union[int, str, bytes]) -> Union[str, bytes]:
    if isinstance(text, str):
        if not isinstance(sep, str) or len(sep) != 1:
            raise ValueError(f"expected a single character separator, got {sep!r}")
        return sep
    if isinstance(sep, int) and not isinstance(sep, bool):
        return bytes([sep & 0xFF])
    if isinstance(sep, (bytes, bytearray)) and len(sep) == 1:
        return bytes(sep)
    raise ValueError(f"expected a single byte separator, got {sep!r}")


def substr(s: Text, start: int, length: int):
    """Return at most *length* characters of *s* beginning at *start*.

    A start at or beyond the end of the string gives an empty string.
    """
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    text = _text(s)
    return text[start:start + length]


def strjoin(s1: Text, s2: Text):
    """Return a new string made of *s1* followed by *s2*."""
    first = _text(s1)
    second = _text(s2)
    _same_kind(first, second)
    return first + second


def strtrim(s: Text, charset: Text):
    """Return *s* without the characters of *charset* at its start and end."""
    text = _text(s)
    chars = _text(charset)
    _same_kind(text, chars)
    return text.strip(chars)


def split(s: Text, sep: Union[int, str, bytes]) -> list:
    """Split *s* on the single character *sep*, dropping empty fields."""
    text = _text(s)
    delimiter = _separator(text, sep)
    return [part for part in text.split(delimiter) if part]


def strmapi(s: Text, func: Callable[[int, object], object]):
    """Return a new string whose characters are ``func(index, char)``.

    For ``str`` input *func* receives and returns characters; for bytes it
    receives and returns byte values.
    """
    text = _text(s)
    if isinstance(text, str):
        return "".join(func(index, ch) for index, ch in enumerate(text))
    return bytes(func(index, value) for index, value in enumerate(text))


def striteri(buffer: MutableSequence, func: Callable[[int, object], object]) -> None:
    """Call ``func(index, value)`` on each element of *buffer* before the first NUL.

    A result other than None is stored back at that index, so the buffer is
    changed in place.
    """
    for index, value in enumerate(buffer):
        if value == 0 or value == "\0":
            break
        replacement = func(index, value)
        if replacement is not None:
            buffer[index] = replacement