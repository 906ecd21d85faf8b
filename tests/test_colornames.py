import pytest

from fractview.colornames import COLORS, lookup_color


def test_plain_name():
    assert lookup_color("snow") == 0xfffafa


def test_none_is_transparent():
    assert lookup_color("none") == -1


def test_first_duplicate_wins():
    assert lookup_color("dark slate") == 0x2f4f4f
    assert lookup_color("light goldenrod") == 0xfafad2


@pytest.mark.parametrize("name", ["SNOW", "Snow", "sNoW"])
def test_case_insensitive(name):
    assert lookup_color(name) == lookup_color("snow")


def test_spaced_and_joined_names_agree():
    assert lookup_color("alice blue") == lookup_color("aliceblue")
    assert lookup_color("Navy Blue") == lookup_color("navy")


@pytest.mark.parametrize("level", [0, 1, 37, 50, 99, 100])
def test_gray_and_grey_agree(level):
    assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")


def test_gray_extremes_match_black_and_white():
    assert lookup_color("gray0") == lookup_color("black")
    assert lookup_color("gray100") == lookup_color("white")


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        lookup_color("not a colour")


def test_empty_name_raises():
    with pytest.raises(KeyError):
        lookup_color("")


def test_all_values_are_rgb_or_transparent():
    assert all(value == -1 or 0 <= value <= 0xFFFFFF for value in COLORS.values())
    assert [name for name, value in COLORS.items() if value == -1] == ["none"]


def test_table_is_read_only():
    with pytest.raises(TypeError):
        COLORS["snow"] = 0  # type: ignore[index]
    assert lookup_color("snow") == 0xfffafa