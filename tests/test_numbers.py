import pytest

from fractview.numbers import is_valid, scale_val, str_to_double


@pytest.mark.parametrize(
    ("num", "expected"),
    [(0, -2.0), (800, 2.0), (400, 0.0)],
)
def test_scale_val_maps_pixel_range_onto_plane(num, expected):
    assert scale_val(num, -2, 2, 0, 800) == pytest.approx(expected)


def test_scale_val_inverted_range():
    assert scale_val(0, 2, -2, 0, 800) == pytest.approx(2.0)
    assert scale_val(800, 2, -2, 0, 800) == pytest.approx(-2.0)


def test_scale_val_round_trip():
    there = scale_val(123.0, -2, 2, 0, 800)
    back = scale_val(there, 0, 800, -2, 2)
    assert back == pytest.approx(123.0)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("0", 0.0),
        ("-0.8", -0.8),
        ("  +0.25", 0.25),
        ("\t12", 12.0),
        ("3.", 3.0),
        (".5", 0.5),
    ],
)
def test_str_to_double_parses(text, expected):
    assert str_to_double(text) == pytest.approx(expected)


def test_str_to_double_stops_at_garbage():
    assert str_to_double("12abc") == pytest.approx(12.0)
    assert str_to_double("abc") == 0.0


def test_str_to_double_sign_symmetry():
    assert str_to_double("-1.75") == -str_to_double("1.75")


@pytest.mark.parametrize("text", ["1.5", " +3", "-0.156", "", "-", ".", "42"])
def test_is_valid_accepts(text):
    assert is_valid(text) is True


@pytest.mark.parametrize("text", ["abc", "1.5.3", "1e5", "0.3x", "--1", "1 "])
def test_is_valid_rejects(text):
    assert is_valid(text) is False