import pytest

from fractview.cli import UsageError, main, parse_args
from fractview.fractal import FractalKind


def test_mandelbrot_argument():
    view = parse_args(["mandelbrot"])
    assert view.kind is FractalKind.MANDELBROT


def test_julia_defaults_to_origin():
    view = parse_args(["julia"])
    assert view.kind is FractalKind.JULIA
    assert (view.julia_x, view.julia_y) == (0.0, 0.0)


def test_julia_with_one_coordinate():
    view = parse_args(["julia", "0.3"])
    assert view.julia_x == pytest.approx(0.3)
    assert view.julia_y == 0.0


def test_julia_with_two_coordinates():
    view = parse_args(["julia", "-0.8", "0.156"])
    assert view.julia_x == pytest.approx(-0.8)
    assert view.julia_y == pytest.approx(0.156)


@pytest.mark.parametrize(
    "args",
    [
        [],
        ["foo"],
        ["mandelbrot", "1"],
        ["julia", "1", "2", "3"],
        ["Mandelbrot"],
        ["mandelbrotx"],
    ],
)
def test_usage_errors(args):
    with pytest.raises(UsageError):
        parse_args(args)


def test_bad_julia_number():
    with pytest.raises(ValueError):
        parse_args(["julia", "abc"])


def test_main_prints_usage(capsys):
    assert main([]) == 1
    out = capsys.readouterr().out
    assert "mandelbrot" in out
    assert "julia x y" in out


def test_main_rejects_bad_number(capsys):
    assert main(["julia", "1", "x"]) == 1
    assert capsys.readouterr().out == ""