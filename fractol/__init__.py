"""Mandelbrot and Julia set viewer, with small text and formatting helpers."""

__version__ = "1.0.0"

__all__ = ["__version__"]