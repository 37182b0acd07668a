"""The state of a fractal view and how keys and the mouse change it."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from fractol.scaling import pixel_to_complex


class Key(IntEnum):
    """X11 key symbols the view responds to."""

    ESCAPE = 0xFF1B
    LEFT = 0xFF51
    UP = 0xFF52
    RIGHT = 0xFF53
    DOWN = 0xFF54
    PLUS = 0x2B
    MINUS = 0x2D
    KP_ADD = 0xFFAB
    KP_SUBTRACT = 0xFFAD
    A = 0x61
    D = 0x64
    S = 0x73
    W = 0x77


class MouseButton(IntEnum):
    """X11 pointer buttons; 4 and 5 are the wheel."""

    LEFT = 1
    MIDDLE = 2
    RIGHT = 3
    WHEEL_UP = 4
    WHEEL_DOWN = 5


class CloseRequested(Exception):
    """Raised when the user asks to close the view."""


_ZOOM_STEP = 1.1
_JULIA_STEP = 0.25


@dataclass
class FractalView:
    """Which fractal is shown, and where, how deep and how close."""

    name: str
    escape_value: float = 4.0
    iterations: int = 42
    shift_x: float = 0.0
    shift_y: float = 0.0
    zoom: float = 1.0
    julia_x: float = 0.0
    julia_y: float = 0.0

    def is_julia(self) -> bool:
        """True when the view shows a Julia set."""
        return self.name.startswith("julia")

    def handle_key(self, key: int) -> None:
        """Apply a key press; Escape raises :class:`CloseRequested`."""
        if key == Key.ESCAPE:
            raise CloseRequested("escape pressed")
        if key == Key.LEFT:
            self.shift_x -= self.zoom
        elif key == Key.RIGHT:
            self.shift_x += self.zoom
        elif key == Key.UP:
            self.shift_y -= self.zoom
        elif key == Key.DOWN:
            self.shift_y += self.zoom
        elif key in (Key.PLUS, Key.KP_ADD):
            self.iterations = int(self.iterations * _ZOOM_STEP + 1)
        elif key in (Key.MINUS, Key.KP_SUBTRACT):
            self.iterations = int(self.iterations / _ZOOM_STEP)
        if self.is_julia():
            self._move_julia(key)

    def _move_julia(self, key: int) -> None:
        step = _JULIA_STEP * self.zoom
        if key == Key.W:
            self.julia_x += step
        elif key == Key.S:
            self.julia_x -= step
        elif key == Key.A:
            self.julia_y += step
        elif key == Key.D:
            self.julia_y -= step

    def handle_mouse(self, button: int, x: int, y: int) -> bool:
        """Zoom with the wheel around pixel ``(x, y)``.

        The point under the cursor stays put. Returns whether the view changed.
        """
        if button == MouseButton.WHEEL_DOWN:
            factor = _ZOOM_STEP
        elif button == MouseButton.WHEEL_UP:
            factor = 1 / _ZOOM_STEP
        else:
            return False
        anchor = pixel_to_complex(x, y, self.zoom, self.shift_x, self.shift_y)
        self.zoom *= factor
        offset = pixel_to_complex(x, y, self.zoom, 0.0, 0.0)
        self.shift_x = anchor.real - offset.real
        self.shift_y = anchor.imag - offset.imag
        return True