import pytest

from fractview.xpm import (
    TRANSPARENT,
    XpmError,
    XpmImage,
    load_xpm,
    parse_xpm,
    parse_xpm_text,
    quoted_lines,
    strip_comments,
    text_to_rgb,
)

SAMPLE = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"3 2 2 1",
"r c #ff0000",
". c None",
// pixels
"r.r",
".r."
};
"""


def test_text_to_rgb_hex():
    assert text_to_rgb("#ff0000", None) == 0xFF0000


def test_text_to_rgb_hex_ignores_end():
    assert text_to_rgb("#0000ff", "ignored") == 0x0000FF


def test_text_to_rgb_invalid_hex_is_zero():
    assert text_to_rgb("#zz", None) == 0


def test_text_to_rgb_name_case_insensitive():
    assert text_to_rgb("RED", None) == 0xFF0000


def test_text_to_rgb_joins_end():
    assert text_to_rgb("light", "Blue") == 0xADD8E6


def test_text_to_rgb_none_is_minus_one():
    assert text_to_rgb("None", None) == -1


def test_text_to_rgb_unknown_name_is_zero():
    assert text_to_rgb("nosuchcolour", None) == 0


def test_strip_comments_block():
    text = "/* hi */x"
    result = strip_comments(text)
    assert result == " " * 8 + "x"


def test_strip_comments_line_blanks_newline():
    text = "// c\nx"
    assert strip_comments(text) == " " * 5 + "x"


def test_strip_comments_keeps_quoted():
    text = '"/* kept */" "// kept"'
    assert strip_comments(text) == text


def test_strip_comments_preserves_length():
    assert len(strip_comments(SAMPLE)) == len(SAMPLE)
    assert "/*" not in strip_comments(SAMPLE)


def test_quoted_lines():
    text = 'static char *x[] = {"ab", "cd"};'
    assert list(quoted_lines(text)) == ["ab", "cd"]


def test_quoted_lines_unterminated():
    assert list(quoted_lines('"ab" "cd')) == ["ab"]


def test_parse_xpm_basic():
    image = parse_xpm(["2 2 2 1", "a c #ff0000", "b c None", "ab", "ba"])
    assert image == XpmImage(
        width=2,
        height=2,
        pixels=[[0xFF0000, TRANSPARENT], [TRANSPARENT, 0xFF0000]],
    )


def test_parse_xpm_short_keys_last_definition_wins():
    image = parse_xpm(["1 1 2 1", "a c red", "a c blue", "a"])
    assert image.pixels == [[0x0000FF]]


def test_parse_xpm_long_keys_first_definition_wins():
    image = parse_xpm(["1 1 2 3", "abc c red", "abc c blue", "abc"])
    assert image.pixels == [[0xFF0000]]


def test_parse_xpm_unknown_pixel_key_is_black():
    image = parse_xpm(["1 1 1 1", "a c red", "z"])
    assert image.pixels == [[0]]


def test_parse_xpm_name_followed_by_other_key():
    image = parse_xpm(["1 1 1 1", "a c red s label", "a"])
    assert image.pixels == [[0]]


@pytest.mark.parametrize(
    "lines",
    [
        ["0 1 1 1", "a c red", "a"],
        ["1 1 1"],
        ["1 1 1 1", "a s red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c red", "a"],
        ["2 1 1 1", "a c red", "a"],
        [],
    ],
)
def test_parse_xpm_errors(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_parse_xpm_text_file_contents():
    image = parse_xpm_text(SAMPLE)
    assert (image.width, image.height) == (3, 2)
    assert image.pixels[0] == [0xFF0000, TRANSPARENT, 0xFF0000]
    assert image.pixels[1] == [TRANSPARENT, 0xFF0000, TRANSPARENT]


def test_load_xpm_matches_text_parse(tmp_path):
    path = tmp_path / "sample.xpm"
    path.write_text(SAMPLE, encoding="latin-1")
    assert load_xpm(path) == parse_xpm_text(SAMPLE)


def test_load_xpm_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_xpm(tmp_path / "absent.xpm")