"""A small printf: %c %s %d %i %u %x %X %p and %%."""

from __future__ import annotations

import sys
from typing import Any, Callable, Dict, Iterator, Optional, TextIO

_UINT_MASK = 0xFFFFFFFF
_PTR_MASK = 0xFFFFFFFFFFFFFFFF
_NULL_TEXT = "(null)"


def _as_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int, got {type(value).__name__}")
    return value


def _to_int32(value: Any) -> int:
    n = _as_int(value) & _UINT_MASK
    return n - (1 << 32) if n & 0x80000000 else n


def _conv_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    return chr(_as_int(value) & 0xFF)


def _conv_str(value: Optional[str]) -> str:
    if value is None:
        return _NULL_TEXT
    if not isinstance(value, str):
        raise TypeError(f"expected a str, got {type(value).__name__}")
    return value


def _conv_signed(value: Any) -> str:
    return str(_to_int32(value))


def _conv_unsigned(value: Any) -> str:
    return str(_as_int(value) & _UINT_MASK)


def _conv_hex_lower(value: Any) -> str:
    return format(_as_int(value) & _UINT_MASK, "x")


def _conv_hex_upper(value: Any) -> str:
    return format(_as_int(value) & _UINT_MASK, "X")


def _conv_pointer(value: Any) -> str:
    address = 0 if value is None else _as_int(value) & _PTR_MASK
    return "0x" + format(address, "x")


_CONVERSIONS: Dict[str, Callable[[Any], str]] = {
    "c": _conv_char,
    "s": _conv_str,
    "d": _conv_signed,
    "i": _conv_signed,
    "u": _conv_unsigned,
    "x": _conv_hex_lower,
    "X": _conv_hex_upper,
    "p": _conv_pointer,
}


def _next_arg(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for '%{spec}'") from None


def format_string(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args``.

    Unknown specifiers are kept as written, ``%%`` gives a percent sign, and a
    format ending in a lone ``%`` raises ``ValueError``.
    """
    values = iter(args)
    chars = iter(fmt)
    parts = []
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format ends with an incomplete '%' specifier")
        conversion = _CONVERSIONS.get(spec)
        if conversion is not None:
            parts.append(conversion(_next_arg(values, spec)))
        elif spec == "%":
            parts.append("%")
        else:
            parts.append("%" + spec)
    return "".join(parts)


def printf(fmt: str, *args: Any, file: Optional[TextIO] = None) -> int:
    """Write the expansion of ``fmt`` to ``file`` (stdout by default).

    Returns the number of characters written.
    """
    text = format_string(fmt, *args)
    (sys.stdout if file is None else file).write(text)
    return len(text)