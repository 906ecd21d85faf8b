"""Escape-time colouring of the Mandelbrot and Julia sets."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace

from .numbers import is_valid, scale_val, str_to_double

WIDTH = 800
HEIGHT = 800

BLACK = 0x000000
WHITE = 0xFFFFFF


class FractalKind(enum.Enum):
    MANDELBROT = "mandelbrot"
    JULIA = "julia"


@dataclass
class View:
    """The fractal being shown and how the plane is mapped onto the window."""

    kind: FractalKind
    julia_x: float = 0.0
    julia_y: float = 0.0
    escape_value: float = 4.0
    iterations: int = 50
    shift_x: float = 0.0
    shift_y: float = 0.0
    zoom: float = 1.0
    width: int = WIDTH
    height: int = HEIGHT

    @property
    def name(self) -> str:
        return self.kind.value

    def to_plane(self, x: float, y: float) -> complex:
        """Map pixel coordinates onto the complex plane."""
        real = scale_val(x, -2, 2, 0, self.width) * self.zoom + self.shift_x
        imag = scale_val(y, 2, -2, 0, self.height) * self.zoom + self.shift_y
        return complex(real, imag)

    def pixel_color(self, x: int, y: int) -> int:
        """Colour of the pixel at (x, y) as 0xRRGGBB."""
        if self.kind is FractalKind.MANDELBROT:
            return mandelbrot_color(x, y, self)
        return julia_color(x, y, self)


def make_mandelbrot() -> View:
    return View(kind=FractalKind.MANDELBROT)


def make_julia(x: str, y: str) -> View:
    """Build a Julia view for the constant ``x + yi`` given as decimal strings."""
    for text in (x, y):
        if not is_valid(text):
            raise ValueError(f"not a number: {text!r}")
    return View(kind=FractalKind.JULIA, julia_x=str_to_double(x), julia_y=str_to_double(y))


def escape_color(z: complex, c: complex, view: View) -> int:
    """Iterate z = z*z + c and colour by how soon it escapes; black if it never does."""
    for i in range(view.iterations):
        z = z * z + c
        if z.real * z.real + z.imag * z.imag > view.escape_value:
            return int(scale_val(i, BLACK, WHITE, 0, view.iterations))
    return BLACK


def mandelbrot_color(x: int, y: int, view: View) -> int:
    return escape_color(0j, view.to_plane(x, y), view)


def julia_color(x: int, y: int, view: View) -> int:
    return escape_color(view.to_plane(x, y), complex(view.julia_x, view.julia_y), view)


def render(view: View, width: int | None = None, height: int | None = None) -> list[list[int]]:
    """Render the view as rows of 0xRRGGBB colours at the given size."""
    sized = replace(
        view,
        width=view.width if width is None else width,
        height=view.height if height is None else height,
    )
    return [
        [sized.pixel_color(x, y) for x in range(sized.width)]
        for y in range(sized.height)
    ]