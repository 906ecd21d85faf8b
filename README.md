# fractview

An interactive viewer for the Mandelbrot set and Julia sets. It draws in an
800×800 window. Each pixel is shaded by how quickly its orbit escapes. A pixel
whose orbit never escapes within the iteration limit is black. The faster an
orbit escapes, the closer its pixel is to black; orbits that escape later are
shaded towards white.

The package also contains a small reader for XPM images. The reader includes
the standard X11 colour-name table.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

Draw the Mandelbrot set:

```
fractview mandelbrot
```

Draw a Julia set. The constant is `c = x + y·i`, and any part that is left out
is `0`:

```
fractview julia
fractview julia -0.8
fractview julia -0.8 0.156
```

Each parameter must be a plain decimal number, made of these parts in order:

- optional leading whitespace
- an optional sign
- digits
- an optional fractional part

For example, `-0.70176` and `.5` are both accepted.

The command exits with status 1 in two cases:

- A wrong fractal name or a wrong number of arguments prints the usage text.
- A parameter that is not a number prints `not a number: ...` to standard error.

## Controls

| Input                          | Effect                                      |
|--------------------------------|---------------------------------------------|
| Arrow keys                     | Pan the view (the step shrinks as you zoom) |
| `+` or `=` / `-` (also keypad) | Raise / lower the iteration limit by 10     |
| Mouse wheel up                 | Multiply the zoom factor by 1.25            |
| Mouse wheel down               | Divide the zoom factor by 1.25              |
| Escape, or the window close box | Quit                                       |

## Library use

Each part can be used on its own:

```python
from fractview.fractal import make_julia, make_mandelbrot, render
from fractview.numbers import str_to_double, is_valid
from fractview.colornames import lookup_color
from fractview.xpm import parse_xpm_text, load_xpm

view = make_julia("-0.8", "0.156")  # parameters are decimal strings
pixels = render(view, 200, 200)     # rows of 0xRRGGBB colours
view.pixel_color(10, 20)            # colour of a single pixel

str_to_double("  -1.5abc")          # -1.5, stops at the first non-number character
is_valid("1.5x")                    # False

lookup_color("SteelBlue")           # 0x4682b4, case does not matter
image = load_xpm("icon.xpm")        # XpmImage with width, height and pixels
```

`make_julia` raises `ValueError` if a parameter is not a valid number.

### Controls module

`fractview.controls` provides two functions:

- `handle_key` applies a `Key` to a `View`. It returns `False` when the key is Escape.
- `handle_mouse` applies a `MouseButton` to a `View`.

Because of this, any event source can drive a view.

### XPM reader

The reader handles the following:

- Colour values written as `#rrggbb`.
- Colour values given as X11 colour names.
- `None`, which becomes the pixel value `0xFF000000`.
- C comments, which are stripped before parsing.

The reader does not handle these cases:

- Unknown colour names give black.
- Malformed data raises `XpmError`, which is a subclass of `ValueError`.

## What it does not do

The XPM reader only decodes images into pixel values. The viewer does not
display XPM images.