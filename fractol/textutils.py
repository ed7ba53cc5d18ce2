"""String helpers: splitting, trimming, bounded copying, comparison and search."""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, List, Optional, Tuple

_NUL = "\0"


def _check_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _check_size(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def _words(text: str, sep: str) -> List[str]:
    return [word for word in text.split(_check_char(sep)) if word]


def count_words(text: str, sep: str) -> int:
    """Count the non-empty runs of ``text`` that lie between ``sep`` characters."""
    return len(_words(text, sep))


def split(text: str, sep: str) -> List[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    return _words(text, sep)


def trim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start at or past the end of the text gives an empty string.
    """
    _check_size(start, "start")
    _check_size(length, "length")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns zero when they match, otherwise the code difference of the first
    differing pair; the end of a shorter string counts as code zero.
    """
    _check_size(n, "n")
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int:
    """Find ``needle`` lying wholly within the first ``length`` characters.

    Returns its index, 0 for an empty needle, or -1 when it is not there.
    """
    _check_size(length, "length")
    if not needle:
        return 0
    if length == 0:
        return -1
    return haystack[:length].find(needle)


def find_char(text: str, c: str) -> int:
    """Index of the first ``c`` in ``text``; a NUL matches the end; -1 if absent."""
    if _check_char(c) == _NUL:
        return len(text)
    return text.find(c)


def rfind_char(text: str, c: str) -> int:
    """Index of the last ``c`` in ``text``; a NUL matches the end; -1 if absent."""
    if _check_char(c) == _NUL:
        return len(text)
    return text.rfind(c)


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text and the full length of ``src``.
    """
    _check_size(size, "size")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full result would have had;
    when ``dst`` already fills the buffer it is left alone and the length
    reported is ``size + len(src)``.
    """
    _check_size(size, "size")
    if size <= len(dst):
        return dst, size + len(src)
    space = size - len(dst) - 1
    return dst + src[:space], len(dst) + len(src)


def join(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """Concatenate two strings; a missing one is treated as absent."""
    if s1 is None and s2 is None:
        return None
    if s1 is None:
        return s2
    if s2 is None:
        return s1
    return s1 + s2


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` applied to each character."""
    return "".join(func(i, ch) for i, ch in enumerate(text))