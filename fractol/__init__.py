"""Mandelbrot and Julia set explorer with a Tk window and rendering helpers."""

__version__ = "1.0.0"