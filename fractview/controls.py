"""Keyboard and mouse handling for an interactive view."""

from __future__ import annotations

import enum

from .fractal import View

_PAN_STEP = 0.5
_ZOOM_FACTOR = 1.25
_ITERATION_STEP = 10


class Key(enum.IntEnum):
    MINUS = 27
    PLUS = 24
    ESCAPE = 53
    LEFT = 123
    RIGHT = 124
    DOWN = 125
    UP = 126


class MouseButton(enum.IntEnum):
    SCROLL_UP = 4
    SCROLL_DOWN = 5


def handle_key(view: View, key: int) -> bool:
    """Apply a key press to ``view``; return False when the viewer should close."""
    step = _PAN_STEP * view.zoom
    if key == Key.ESCAPE:
        return False
    if key == Key.LEFT:
        view.shift_x += step
    elif key == Key.RIGHT:
        view.shift_x -= step
    elif key == Key.UP:
        view.shift_y -= step
    elif key == Key.DOWN:
        view.shift_y += step
    elif key == Key.PLUS:
        view.iterations += _ITERATION_STEP
    elif key == Key.MINUS:
        view.iterations -= _ITERATION_STEP
    return True


def handle_mouse(view: View, button: int) -> None:
    """Apply a mouse button (wheel) event to ``view``'s zoom."""
    if button == MouseButton.SCROLL_UP:
        view.zoom *= _ZOOM_FACTOR
    elif button == MouseButton.SCROLL_DOWN:
        view.zoom /= _ZOOM_FACTOR