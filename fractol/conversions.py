"""Integer parsing and formatting, and small output helpers."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from fractol.chars import is_digit

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_WHITESPACE = " \t\n\v\f\r"


def _check_int(n: int) -> int:
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return n


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace and one optional sign are skipped; parsing stops at the
    first non-digit.  When the magnitude grows past the 32-bit maximum the
    result is -1 for a positive number and 0 for a negative one.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    number = 0
    for ch in rest:
        if not is_digit(ch):
            break
        number = number * 10 + (ord(ch) - ord("0"))
        if number > INT_MAX:
            return -1 if sign == 1 else 0
    return sign * number


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    return str(_check_int(n))


def _target(file: Optional[TextIO]) -> TextIO:
    return sys.stdout if file is None else file


def put_str(text: Optional[str], file: Optional[TextIO] = None) -> None:
    """Write ``text`` to ``file``; nothing is written for ``None``."""
    if text is None:
        return
    _target(file).write(text)


def put_endl(text: Optional[str], file: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline; nothing is written for ``None``."""
    if text is None:
        return
    out = _target(file)
    out.write(text)
    out.write("\n")


def put_nbr(n: int, file: Optional[TextIO] = None) -> None:
    """Write the decimal text of a 32-bit signed integer."""
    _target(file).write(itoa(n))