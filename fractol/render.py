"""Escape-time colouring of Mandelbrot and Julia sets."""

from __future__ import annotations

from enum import IntEnum

from fractol.scaling import HEIGHT, WIDTH, map_range, norm, pixel_to_complex, square
from fractol.view import FractalView


class Color(IntEnum):
    """Named 0xRRGGBB colours."""

    BLACK = 0x000000
    WHITE = 0xFFFFFF
    RED = 0xE50000
    GREEN = 0x00CC00
    BLUE = 0x0033CC
    MAGENTA_BURST = 0xD100D1
    LIME_SHOCK = 0xBFFF00
    NEON_ORANGE = 0xFF4500
    PSYCHEDELIC_PURPLE = 0x800080
    AQUA_DREAM = 0x00FFFF
    HOT_PINK = 0xFF1493
    ELECTRIC_BLUE = 0x1E90FF
    LAVA_RED = 0xFF2400
    ULTRA_VIOLET = 0x9400D3
    CYBER_YELLOW = 0xFFD700
    DEEP_TEAL = 0x008080
    RADIANT_TURQUOISE = 0x40E0D0
    BURNING_GOLD = 0xFFA500
    TOXIC_GREEN = 0x39FF14
    MIDNIGHT_BLUE = 0x191970
    SHOCKING_PURPLE = 0x9932CC


def pixel_color(view: FractalView, x: int, y: int) -> int:
    """Return the colour of window pixel ``(x, y)`` for ``view``.

    Points that escape are shaded from white towards ultra violet by how soon
    they escape; points that never escape are burning gold.
    """
    z = pixel_to_complex(x, y, view.zoom, view.shift_x, view.shift_y)
    c = complex(view.julia_x, view.julia_y) if view.name == "julia" else z
    for i in range(view.iterations):
        z = square(z) + c
        if abs(z) > view.escape_value:
            return int(map_range(norm(i, 0, view.iterations), Color.WHITE, Color.ULTRA_VIOLET))
    return int(Color.BURNING_GOLD)


def render(view: FractalView) -> list[list[int]]:
    """Return the image of ``view`` as ``HEIGHT`` rows of ``WIDTH`` colours.

    Row ``r``, column ``c`` holds the colour of window coordinates
    ``(c + 1, r + 1)``.
    """
    return [
        [pixel_color(view, x, y) for x in range(1, WIDTH + 1)]
        for y in range(1, HEIGHT + 1)
    ]