"""Command line entry point and the window that shows a fractal."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from fractol.numbers import INT_MAX, INT_MIN, atodbl
from fractol.render import render
from fractol.scaling import HEIGHT, WIDTH
from fractol.view import CloseRequested, FractalView

_USAGE = (
    "Wrong arguments\n"
    "Expected:\n"
    "fractol mandelbrot\n"
    "fractol julia n1 n2\n"
    "Note: n1 and n2 are expected to be decimal."
)
_INVALID_NUMBER = "Invalid number. Expected format: \u00b1X.Y"
_INVALID_ARGUMENT = "Error: Invalid argument."
_OUT_OF_RANGE = "Error: Argument out of range."


class UsageError(Exception):
    """The command line does not name a fractal the program can show."""


class _DisplayError(RuntimeError):
    """No window could be opened."""


def is_valid_zero(text: str | None) -> bool:
    """True when ``text`` spells zero as ``0`` or ``0.0``."""
    return text in ("0", "0.0")


def check_decimal(text: str) -> str:
    """Return ``text`` if it is a plain decimal such as ``-1.25``.

    One leading sign and one decimal point are allowed; anything else raises
    :class:`UsageError`.
    """
    seen_point = False
    seen_sign = False
    for position, ch in enumerate(text):
        if "0" <= ch <= "9":
            continue
        if ch == "." and not seen_point:
            seen_point = True
        elif ch in "+-" and not seen_sign and position == 0:
            seen_sign = True
        else:
            raise UsageError(_INVALID_NUMBER)
    return text


def _julia_view(real_text: str, imag_text: str) -> FractalView:
    julia_x = atodbl(real_text)
    julia_y = atodbl(imag_text)
    if (julia_x == 0 and not is_valid_zero(real_text)) or (
        julia_y == 0 and not is_valid_zero(imag_text)
    ):
        raise UsageError(_INVALID_ARGUMENT)
    check_decimal(real_text)
    check_decimal(imag_text)
    for value in (julia_x, julia_y):
        if not INT_MIN <= value <= INT_MAX:
            raise UsageError(_OUT_OF_RANGE)
    return FractalView("julia", julia_x=julia_x, julia_y=julia_y)


def parse_arguments(argv: Sequence[str]) -> FractalView:
    """Build the initial view from the command-line arguments (program name excluded)."""
    args = list(argv)
    if len(args) == 1 and args[0] == "mandelbrot":
        return FractalView("mandelbrot")
    if len(args) == 3 and args[0] == "julia":
        return _julia_view(args[1], args[2])
    raise UsageError(_USAGE)


class FractalWindow:
    """A window showing a fractal view, redrawn on every key and wheel event."""

    def __init__(self, view: FractalView) -> None:
        import tkinter

        self.view = view
        try:
            self._root = tkinter.Tk()
        except tkinter.TclError as exc:
            raise _DisplayError(f"cannot open a window: {exc}") from exc
        self._root.title(view.name)
        self._root.resizable(False, False)
        self._canvas = tkinter.Canvas(
            self._root, width=WIDTH, height=HEIGHT, highlightthickness=0
        )
        self._canvas.pack()
        self._image = tkinter.PhotoImage(master=self._root, width=WIDTH, height=HEIGHT)
        self._canvas.create_image(0, 0, image=self._image, anchor="nw")
        self._root.bind("<KeyPress>", self._on_key)
        self._root.bind("<ButtonPress>", self._on_button)
        self._root.protocol("WM_DELETE_WINDOW", self._close)

    def redraw(self) -> None:
        """Render the view and show it."""
        rows = render(self.view)
        data = " ".join(
            "{" + " ".join(f"#{color & 0xFFFFFF:06x}" for color in row) + "}"
            for row in rows
        )
        self._image.put(data, to=(0, 0))

    def run(self) -> None:
        """Draw the view and process events until the window is closed."""
        self.redraw()
        self._root.mainloop()

    def _on_key(self, event) -> None:
        try:
            self.view.handle_key(event.keysym_num)
        except CloseRequested:
            self._close()
            return
        self.redraw()

    def _on_button(self, event) -> None:
        if self.view.handle_mouse(event.num, event.x, event.y):
            self.redraw()

    def _close(self) -> None:
        self._root.destroy()


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the arguments, open the window and run until it closes."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        view = parse_arguments(argv)
    except UsageError as exc:
        print(exc, file=sys.stderr)
        return 1
    try:
        window = FractalWindow(view)
    except _DisplayError as exc:
        print(exc, file=sys.stderr)
        return 1
    window.run()
    return 0