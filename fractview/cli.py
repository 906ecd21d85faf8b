"""Command line entry point and interactive viewer window."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .controls import Key, handle_key, handle_mouse
from .fractal import View, make_julia, make_mandelbrot, render

USAGE = (
    "For Mandelbrot set, type : mandelbrot\n"
    "For Julia set, type julia OR julia x OR julia x y\n"
)


class UsageError(Exception):
    """The command line does not name a known fractal."""


def parse_args(args: Sequence[str]) -> View:
    """Build the initial view from the arguments after the program name."""
    if len(args) == 1 and args[0] == "mandelbrot":
        return make_mandelbrot()
    if 1 <= len(args) <= 3 and args[0] == "julia":
        x = args[1] if len(args) > 1 else "0"
        y = args[2] if len(args) > 2 else "0"
        return make_julia(x, y)
    raise UsageError(USAGE)


def _to_surface(pygame, rows: list[list[int]]):
    height = len(rows)
    width = len(rows[0]) if rows else 0
    data = b"".join(color.to_bytes(3, "big") for row in rows for color in row)
    return pygame.image.frombuffer(data, (width, height), "RGB")


def _run(view: View) -> int:
    import pygame

    key_map = {
        pygame.K_ESCAPE: Key.ESCAPE,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_UP: Key.UP,
        pygame.K_DOWN: Key.DOWN,
        pygame.K_EQUALS: Key.PLUS,
        pygame.K_PLUS: Key.PLUS,
        pygame.K_KP_PLUS: Key.PLUS,
        pygame.K_MINUS: Key.MINUS,
        pygame.K_KP_MINUS: Key.MINUS,
    }
    pygame.init()
    try:
        screen = pygame.display.set_mode((view.width, view.height))
        pygame.display.set_caption(view.name)

        def draw() -> None:
            screen.blit(_to_surface(pygame, render(view)), (0, 0))
            pygame.display.flip()

        draw()
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return 0
            if event.type == pygame.KEYDOWN:
                key = key_map.get(event.key)
                if key is not None and not handle_key(view, key):
                    return 0
                draw()
            elif event.type == pygame.MOUSEBUTTONDOWN:
                handle_mouse(view, event.button)
                draw()
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        view = parse_args(args)
    except UsageError as exc:
        sys.stdout.write(str(exc))
        return 1
    except ValueError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    return _run(view)


if __name__ == "__main__":
    sys.exit(main())