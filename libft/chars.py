"""ASCII character classification and case conversion.

Every function accepts either a character code (``int``) or a
one-character string. Classification follows the plain ASCII rules:
nothing outside the 7-bit range is a letter, digit or printable.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]

__all__ = [
    "is_alpha",
    "is_digit",
    "is_alnum",
    "is_ascii",
    "is_print",
    "to_upper",
    "to_lower",
]


def _code(c: CharLike) -> int:
    """Return the character code of *c*, validating its form."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return int(c)
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def is_alpha(c: CharLike) -> bool:
    """True if *c* is an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: CharLike) -> bool:
    """True if *c* is an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True if *c* is an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True if *c* lies in the 7-bit ASCII range 0..127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True if *c* is a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def _shift(c: CharLike, low: str, high: str, delta: int) -> CharLike:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += delta
    return chr(code) if isinstance(c, str) else code


def to_upper(c: CharLike) -> CharLike:
    """Map an ASCII lowercase letter to uppercase; anything else is returned as is.

    The result has the same form (``int`` or ``str``) as the argument.
    """
    return _shift(c, "a", "z", -32)


def to_lower(c: CharLike) -> CharLike:
    """Map an ASCII uppercase letter to lowercase; anything else is returned as is.

    The result has the same form (``int`` or ``str``) as the argument.
    """
    return _shift(c, "A", "Z", 32)