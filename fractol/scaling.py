"""Coordinate scaling between the pixel grid and the complex plane."""

from __future__ import annotations

WIDTH = 200
HEIGHT = 200


def norm(value: float, old_min: float, old_max: float) -> float:
    """Return where ``value`` lies between ``old_min`` and ``old_max`` as a fraction."""
    return (value - old_min) / (old_max - old_min)


def map_range(norm_value: float, new_min: float, new_max: float) -> float:
    """Map a fraction back onto the range ``new_min`` to ``new_max``."""
    return new_min + norm_value * (new_max - new_min)


def square(z: complex) -> complex:
    """Return ``z`` squared."""
    return complex(z.real * z.real - z.imag * z.imag, 2 * z.real * z.imag)


def pixel_to_complex(
    x: float, y: float, zoom: float, shift_x: float, shift_y: float
) -> complex:
    """Return the point of the complex plane shown at window pixel ``(x, y)``.

    The window centre maps to ``shift_x + shift_y*i``; at zoom 1 a quarter of
    the window spans one unit.
    """
    real = (x - WIDTH / 2.0) / (WIDTH / 4.0) * zoom + shift_x
    imag = (y - HEIGHT / 2.0) / (HEIGHT / 4.0) * zoom + shift_y
    return complex(real, imag)