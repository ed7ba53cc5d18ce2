"""ASCII character classification and case conversion."""

from __future__ import annotations

from typing import Union

Char = Union[str, int]

_LOWER = range(ord("a"), ord("z") + 1)
_UPPER = range(ord("A"), ord("Z") + 1)
_DIGITS = range(ord("0"), ord("9") + 1)
_CASE_OFFSET = ord("a") - ord("A")


def _code(c: Char) -> int:
    """Return the integer code of a one-character string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int) and not isinstance(c, bool):
        return c
    raise TypeError(f"expected a character or an int, got {type(c).__name__}")


def _like(original: Char, code: int) -> Char:
    """Return ``code`` in the same form as ``original``."""
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: Char) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return code in _LOWER or code in _UPPER


def is_digit(c: Char) -> bool:
    """True for an ASCII decimal digit."""
    return _code(c) in _DIGITS


def is_alnum(c: Char) -> bool:
    """True for an ASCII letter or digit."""
    return is_digit(c) or is_alpha(c)


def is_ascii(c: Char) -> bool:
    """True for a code in the range 0..127."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """True for a printable ASCII character (space through tilde)."""
    return 32 <= _code(c) <= 126


def to_upper(c: Char) -> Char:
    """Map an ASCII lowercase letter to uppercase; leave anything else alone."""
    code = _code(c)
    if code in _LOWER:
        code -= _CASE_OFFSET
    return _like(c, code)


def to_lower(c: Char) -> Char:
    """Map an ASCII uppercase letter to lowercase; leave anything else alone."""
    code = _code(c)
    if code in _UPPER:
        code += _CASE_OFFSET
    return _like(c, code)