"""Command-line argument parsing for the fractal viewer."""

from __future__ import annotations

from typing import Sequence

from fractol.chars import is_digit
from fractol.fractal import Fractal, FractalType
from fractol.textutils import strncmp

_WHITESPACE = " \t\n\v\f\r"

_REAL_OUT_OF_RANGE = "Real part value must be between -2.0 and 2.0"
_IMAGINARY_OUT_OF_RANGE = "Imaginary part value must be between -1.5 and 1.5"
_USAGE = (
    "-----------------------------------------------\n"
    "-                                             -\n"
    "-    Allowed arguments are :                  -\n"
    "-                                             -\n"
    "-         ./fractol mandelbrot               -\n"
    "-         ./fractol julia <real> <imaginary>  -\n"
    "-                                             -\n"
    "-----------------------------------------------\n"
)


class ArgumentError(ValueError):
    """Raised for command-line arguments that cannot be used."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


def str_to_double(text: str) -> float:
    """Parse a leading decimal number such as ``-0.75``; stops at the first bad character."""
    rest = text.lstrip(_WHITESPACE)
    sign = 1.0
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1.0
        rest = rest[1:]
    result = 0.0
    position = 0
    while position < len(rest) and is_digit(rest[position]):
        result = result * 10.0 + (ord(rest[position]) - ord("0"))
        position += 1
    if rest[position:position + 1] == ".":
        fraction = 1.0
        for ch in rest[position + 1:]:
            if not is_digit(ch):
                break
            fraction *= 10.0
            result += (ord(ch) - ord("0")) / fraction
    return result * sign


def str_equals(s1: str, s2: str) -> bool:
    """True when both strings are identical."""
    return strncmp(s1, s2, max(len(s1), len(s2))) == 0


def parse_arguments(argv: Sequence[str]) -> Fractal:
    """Build a fractal from the arguments that follow the program name."""
    args = list(argv)
    if len(args) == 1 and str_equals("mandelbrot", args[0]):
        return Fractal(type=FractalType.MANDELBROT, name=args[0])
    if len(args) == 3 and str_equals("julia", args[0]):
        real = str_to_double(args[1])
        if real > 2.0 or real < -2.0:
            raise ArgumentError(_REAL_OUT_OF_RANGE)
        imag = str_to_double(args[2])
        if imag > 1.5 or imag < -1.5:
            raise ArgumentError(_IMAGINARY_OUT_OF_RANGE)
        return Fractal(
            type=FractalType.JULIA,
            name=args[0],
            julia_real=real,
            julia_imag=imag,
        )
    raise ArgumentError(_USAGE)