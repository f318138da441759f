"""Byte buffer primitives: fill, allocate, search, compare and copy."""

from __future__ import annotations

from typing import Optional

__all__ = [
    "memset",
    "bzero",
    "calloc",
    "memchr",
    "memcmp",
    "memcpy",
    "memmove",
]

_SIZE_MAX = 2**64 - 1


def _check_size(size: int, available: int, what: str) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size > available:
        raise ValueError(f"size {size} exceeds the {available} bytes of {what}")


def memset(buffer, value: int, length: int):
    """Fill the first *length* bytes of *buffer* with the low byte of *value*.

    Returns *buffer*.
    """
    _check_size(length, len(buffer), "the buffer")
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer, length: int) -> None:
    """Set the first *length* bytes of *buffer* to zero."""
    memset(buffer, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled bytearray of *count* elements of *size* bytes.

    Raises OverflowError when the total size does not fit a 64-bit size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    total = count * size
    if total > _SIZE_MAX:
        raise OverflowError(f"{count} * {size} bytes overflows the addressable size")
    return bytearray(total)


def memchr(data, value: int, size: int) -> Optional[int]:
    """Return the index of the first byte equal to the low byte of *value*.

    Only the first *size* bytes are searched; None means not found.
    """
    _check_size(size, len(data), "the data")
    index = bytes(data[:size]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first, second, size: int) -> int:
    """Compare the first *size* bytes of two buffers as unsigned values.

    Returns the difference of the first pair of differing bytes, or 0.
    """
    _check_size(size, len(first), "the first buffer")
    _check_size(size, len(second), "the second buffer")
    for a, b in zip(bytes(first[:size]), bytes(second[:size])):
        if a != b:
            return a - b
    return 0


def memcpy(dest, src, size: int):
    """Copy the first *size* bytes of *src* to the start of *dest*; return *dest*."""
    _check_size(size, len(src), "the source")
    _check_size(size, len(dest), "the destination")
    dest[:size] = bytes(src[:size])
    return dest


def memmove(buffer, dest: int, src: int, size: int):
    """Move *size* bytes within *buffer* from offset *src* to offset *dest*.

    Overlapping regions are handled correctly. Returns *buffer*.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_size(size, len(buffer) - src, "the buffer after the source offset")
    _check_size(size, len(buffer) - dest, "the buffer after the destination offset")
    buffer[dest:dest + size] = bytes(buffer[src:src + size])
    return buffer