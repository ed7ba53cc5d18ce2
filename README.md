# fractol

A viewer for the Mandelbrot set and Julia sets. The image is 800×600 pixels.
Each pixel is coloured by how many iterations its point takes to escape, up
to 60. Points that never escape are drawn black.

## Installation

```
pip install .
```

The window is built with Tkinter from the standard library. You need a Python
build that includes Tk support. The package has no other dependencies.

## Usage

To draw the Mandelbrot set:

```
fractol mandelbrot
```

To draw the Julia set for the constant `c = real + imaginary·i`:

```
fractol julia -0.8 0.156
```

The numbers are read as plain decimals, such as `-0.75` or `+1.5`. Reading
stops at the first character that is not part of the number. Exponents such as
`1e-3` are not understood.

The command prints a message and exits with status 1 in these cases:

- the real part is outside -2.0 to 2.0;
- the imaginary part is outside -1.5 to 1.5;
- any other arguments are given. The command then prints a usage box.

It also exits with status 1 if no window can be opened. When the window is
closed it exits with status 0.

### Controls

- **Mouse wheel up:** zoom in by a factor of 1.2. The image is redrawn.
- **Mouse wheel down:** zoom out by a factor of 1.2. The image is redrawn.
- **Other mouse buttons:** redraw the image at the current zoom.
- **Esc, or closing the window:** quit.

Zooming is always about the centre of the image.

### What the viewer does not do

- There is no panning. The arrow keys do nothing.
- The number of iterations is fixed at 60.
- Images cannot be saved.
- The whole image is computed in pure Python on each redraw, so every zoom step takes a noticeable moment.

## Using the library

You can use the fractal model without opening a window:

```python
from fractol.fractal import Fractal, FractalType, calculate_color

fractal = Fractal(FractalType.JULIA, name="julia", julia_real=-0.8, julia_imag=0.156)
n = fractal.iterations_at(400, 300)   # escape count for pixel (400, 300)
colour = calculate_color(n)           # 0xRRGGBB, black for n == 60
fractal.zoom_in()
rows = fractal.render()               # list of rows of 0xRRGGBB colours
```

The modules:

- **`fractol.fractal`**
  - `FractalType` has the members `MANDELBROT` and `JULIA`.
  - `Fractal` has `map_x` and `map_y`, `iterations_at`, `zoom_in` and `zoom_out`.
  - `Fractal.handle_scroll(button)` zooms in for button 4 and zooms out for button 5.
  - `Fractal.render()` computes the whole image.
  - `calculate_color(iterations)` turns an escape count into a colour.
- **`fractol.arguments`**
  - `parse_arguments(argv)` turns the arguments that follow the program name into a `Fractal`. It raises `ArgumentError`, a `ValueError`, for invalid input.
  - `str_to_double(text)` parses a decimal number.
  - `str_equals(s1, s2)` compares two strings for equality.
- **`fractol.viewer`**
  - `Viewer(fractal, root)` shows a fractal in a Tk root window. It has `redraw`, `on_key`, `on_scroll` and `close`.
  - `main(argv=None)` is the entry point of the `fractol` command.
- **`fractol.printf`**
  - `format_string(fmt, *args)` expands `%c %s %d %i %u %x %X %p` and `%%`. Unknown specifiers are kept as written. A trailing lone `%` raises `ValueError`.
  - `printf(fmt, *args, file=None)` writes the result and returns its length.
- **`fractol.textutils`**
  - `count_words` and `split`
  - `trim` and `substr`
  - `strncmp` and `strnstr`
  - `find_char` and `rfind_char`
  - `strlcpy` and `strlcat`: these return the text and the length the full result would have had.
  - `join` and `map_indexed`
- **`fractol.conversions`**
  - `atoi(text)` parses a leading integer. A value past the 32-bit range gives -1 if positive and 0 if negative.
  - `itoa(n)` formats a 32-bit integer. It raises `OverflowError` outside that range.
  - `put_str`, `put_endl` and `put_nbr` write to a file, or to stdout by default.
- **`fractol.chars`**
  - `is_alpha`, `is_digit`, `is_alnum`, `is_ascii` and `is_print` classify ASCII characters.
  - `to_upper` and `to_lower` change case.
  - All of these accept a one-character string or an int code.

## Running the tests

```
pip install ".[test]"
pytest
```