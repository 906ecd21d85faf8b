from dataclasses import replace

import pytest

from fractview.controls import Key, MouseButton, handle_key, handle_mouse
from fractview.fractal import make_mandelbrot


def test_escape_requests_close():
    view = make_mandelbrot()
    assert handle_key(view, Key.ESCAPE) is False


def test_left_and_right_pan_horizontally():
    view = make_mandelbrot()
    assert handle_key(view, Key.LEFT) is True
    assert view.shift_x == pytest.approx(0.5)
    handle_key(view, Key.RIGHT)
    assert view.shift_x == pytest.approx(0.0)
    handle_key(view, Key.RIGHT)
    assert view.shift_x == pytest.approx(-0.5)


def test_up_and_down_pan_vertically():
    view = make_mandelbrot()
    handle_key(view, Key.UP)
    assert view.shift_y == pytest.approx(-0.5)
    handle_key(view, Key.DOWN)
    assert view.shift_y == pytest.approx(0.0)


def test_pan_step_follows_zoom():
    view = make_mandelbrot()
    view.zoom = 0.2
    handle_key(view, Key.LEFT)
    assert view.shift_x == pytest.approx(0.5 * 0.2)


def test_plus_and_minus_change_iterations():
    view = make_mandelbrot()
    handle_key(view, Key.PLUS)
    assert view.iterations == 60
    handle_key(view, Key.MINUS)
    handle_key(view, Key.MINUS)
    assert view.iterations == 40


def test_unknown_key_changes_nothing():
    view = make_mandelbrot()
    before = replace(view)
    assert handle_key(view, 0) is True
    assert view == before


def test_scroll_zoom_round_trip():
    view = make_mandelbrot()
    handle_mouse(view, MouseButton.SCROLL_UP)
    assert view.zoom == pytest.approx(1.25)
    handle_mouse(view, MouseButton.SCROLL_DOWN)
    assert view.zoom == pytest.approx(1.0)


def test_scroll_down_shrinks_zoom():
    view = make_mandelbrot()
    handle_mouse(view, MouseButton.SCROLL_DOWN)
    assert view.zoom < 1.0


def test_other_buttons_leave_zoom():
    view = make_mandelbrot()
    handle_mouse(view, 1)
    assert view.zoom == 1.0