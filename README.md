# fractol

An interactive viewer for the Mandelbrot set and Julia sets. Each pixel of a
200 × 200 window is iterated as a complex number. Points that escape are
shaded on a gradient from white to ultra violet according to how quickly they
escape. Points that stay bounded are drawn in gold.

The window is drawn with `tkinter` from the standard library, so a Python
build with Tk support and a display are needed to run it. The rendering code
itself needs neither.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Running

Draw the Mandelbrot set:

```
fractol mandelbrot
```

Draw a Julia set for the constant `c = n1 + n2·i`:

```
fractol julia -0.8 0.156
```

Both `n1` and `n2` must be plain decimal numbers of the form `±X.Y`. That
means an optional leading sign, digits, and at most one decimal point. A value
that reads as zero must be written `0` or `0.0`. Anything else, or a value
outside the range of a 32-bit integer, is rejected with an error message and
exit status 1. Any other arguments print a usage summary and exit with status
1. If no window can be opened, the command also exits with status 1.

## Controls

| Input                    | Effect                                             |
|--------------------------|----------------------------------------------------|
| Arrow keys               | Pan the view, by an amount scaled with the zoom    |
| `+` / keypad `+`         | Raise the iteration limit (more detail)            |
| `-` / keypad `-`         | Lower the iteration limit                          |
| Mouse wheel              | Zoom in or out, keeping the point under the cursor |
| `w` / `s`                | Julia only: move the constant's real part          |
| `a` / `d`                | Julia only: move the constant's imaginary part     |
| `Escape`                 | Close the window                                   |

The view starts at zoom 1.0, centred on the origin, with 42 iterations and an
escape radius of 4.

## Using the library

You can use the rendering pieces without opening a window:

```python
from fractol.view import FractalView, Key, MouseButton
from fractol.render import pixel_color, render

view = FractalView("mandelbrot")
view.handle_key(Key.RIGHT)
view.handle_mouse(MouseButton.WHEEL_UP, 100, 100)
colour = pixel_color(view, 100, 100)   # 0xRRGGBB integer
image = render(view)                   # 200 rows of 200 colours
```

- `fractol.view.FractalView` holds the view state. `handle_key` and
  `handle_mouse` apply the same navigation as the window. On `Key.ESCAPE`,
  `handle_key` raises `CloseRequested`.
- `fractol.render` provides `pixel_color`, `render` and the `Color` palette.
- `fractol.scaling` provides `norm`, `map_range`, `square` and
  `pixel_to_complex`, plus the `WIDTH` and `HEIGHT` of the window.
- `fractol.app` provides `parse_arguments`, `check_decimal`, `is_valid_zero`,
  `UsageError`, `FractalWindow` and `main`.

The package also includes small helper modules:

- `fractol.strings`: C-style string operations on Python strings.
- `fractol.chars`: ASCII character classification and case conversion.
- `fractol.numbers`: `atodbl`, `atoi`, `atol` and `itoa`.
- `fractol.output`: writing characters, strings and numbers to text streams.
- `fractol.memory`: operations on `bytearray` buffers.
- `fractol.linkedlist`: a singly linked list, with `Node` and `LinkedList`.

## Limitations

The window has a fixed size of 200 × 200 pixels. Images can't be saved to a
file, and the only colour scheme is the built-in one.