"""Writing characters, strings and numbers to a file descriptor.

A negative file descriptor is ignored: nothing is written.
"""

from __future__ import annotations

import os
from typing import Optional, Union

from libft.strings import strdup

__all__ = [
    "putchar_fd",
    "putstr_fd",
    "putendl_fd",
    "putnbr_fd",
]


def _write(fd: int, data: bytes) -> None:
    if fd < 0:
        return
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def _encode(text) -> bytes:
    return text.encode("utf-8") if isinstance(text, str) else bytes(text)


def putchar_fd(c: Union[int, str], fd: int) -> None:
    """Write one character to *fd*; an int is written as its low byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        data = c.encode("utf-8")
    elif isinstance(c, int) and not isinstance(c, bool):
        data = bytes([c & 0xFF])
    else:
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    _write(fd, data)


def putstr_fd(s: Optional[Union[str, bytes, bytearray]], fd: int) -> None:
    """Write the string part of *s* to *fd*; None writes nothing."""
    if s is None:
        return
    _write(fd, _encode(strdup(s)))


def putendl_fd(s: Optional[Union[str, bytes, bytearray]], fd: int) -> None:
    """Write *s* followed by a newline to *fd*; None writes nothing."""
    if fd < 0 or s is None:
        return
    putstr_fd(s, fd)
    putchar_fd("\n", fd)


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal representation of the integer *n* to *fd*."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    _write(fd, str(n).encode("ascii"))