"""Escape-time computation and colouring for Mandelbrot and Julia sets."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import List

WIDTH = 800
HEIGHT = 600
MAX_ITERATIONS = 60

DEFAULT_ZOOM = 0.25
ZOOM_FACTOR = 1.2
MOVE_STEP = 0.1

SCROLL_UP = 4
SCROLL_DOWN = 5

_ESCAPE_RADIUS_SQUARED = 4.0


class FractalType(enum.Enum):
    """The kinds of fractal that can be drawn."""

    MANDELBROT = "mandelbrot"
    JULIA = "julia"


def calculate_color(iterations: int) -> int:
    """Map an iteration count to a 0xRRGGBB colour; points inside the set are black."""
    if iterations == MAX_ITERATIONS:
        return 0x000000
    t = iterations / MAX_ITERATIONS
    r = int(9 * (1 - t) * t * t * t * 255)
    g = int(15 * (1 - t) * (1 - t) * t * t * 255)
    b = int(8.5 * (1 - t) * (1 - t) * (1 - t) * t * 255)
    return (r << 16) | (g << 8) | b


@dataclass
class Fractal:
    """A fractal view: its kind, Julia constant, zoom and image size."""

    type: FractalType = FractalType.MANDELBROT
    name: str = "mandelbrot"
    julia_real: float = 0.0
    julia_imag: float = 0.0
    zoom: float = DEFAULT_ZOOM
    width: int = WIDTH
    height: int = HEIGHT
    max_real: float = 2.0
    min_real: float = -2.0
    max_imag: float = 1.5
    min_imag: float = -1.5

    def map_x(self, x: int) -> float:
        """Real coordinate of pixel column ``x``."""
        return (x - self.width / 2.0) / (self.zoom * self.width)

    def map_y(self, y: int) -> float:
        """Imaginary coordinate of pixel row ``y``."""
        return (y - self.height / 2.0) / (self.zoom * self.height)

    def _start(self, x: int, y: int) -> tuple[complex, complex]:
        point = complex(self.map_x(x), self.map_y(y))
        if self.type is FractalType.MANDELBROT:
            return 0j, point
        return point, complex(self.julia_real, self.julia_imag)

    def iterations_at(self, x: int, y: int) -> int:
        """Number of iterations before the orbit of pixel (x, y) escapes."""
        z, c = self._start(x, y)
        zr, zi = z.real, z.imag
        cr, ci = c.real, c.imag
        iterations = 0
        while iterations < MAX_ITERATIONS:
            zr, zi = zr * zr - zi * zi + cr, 2 * zr * zi + ci
            if zr * zr + zi * zi > _ESCAPE_RADIUS_SQUARED:
                break
            iterations += 1
        return iterations

    def zoom_in(self) -> None:
        """Magnify the view by one zoom step."""
        self.zoom *= ZOOM_FACTOR

    def zoom_out(self) -> None:
        """Shrink the view by one zoom step."""
        self.zoom /= ZOOM_FACTOR

    def handle_scroll(self, button: int) -> None:
        """Apply a mouse button: scroll up zooms in, scroll down zooms out."""
        if button == SCROLL_UP:
            self.zoom_in()
        elif button == SCROLL_DOWN:
            self.zoom_out()

    def render(self) -> List[List[int]]:
        """Compute the whole image as rows of 0xRRGGBB colours."""
        return [
            [calculate_color(self.iterations_at(x, y)) for x in range(self.width)]
            for y in range(self.height)
        ]