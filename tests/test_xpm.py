import pytest

from wiremap.xpm import (
    XpmError,
    color_key,
    parse_xpm,
    quoted_lines,
    strip_comments,
    text_rgb,
    xpm_from_data,
    xpm_from_file,
)

SAMPLE_FILE = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"3 2 2 1",
"  c None",
". c #00FF00", // green
" . ",
"...",
};
"""


def test_strip_comments_blanks_comments_and_keeps_length():
    text = 'a /* x */ "b" // c\n"d"'
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "/*" not in result and "//" not in result
    assert list(quoted_lines(result)) == ["b", "d"]


def test_strip_comments_leaves_quoted_markers():
    text = '"/* not a comment */" "//x"'
    assert strip_comments(text) == text


def test_quoted_lines_ignores_unterminated_quote():
    assert list(quoted_lines('"one", "two", "thr')) == ["one", "two"]


def test_text_rgb_values():
    assert text_rgb("#FF0000", None) == 0xFF0000
    assert text_rgb("RED", None) == 0xFF0000
    assert text_rgb("None", None) == -1
    assert text_rgb("light", "blue") == 0xADD8E6


def test_text_rgb_unknown_name_is_zero():
    assert text_rgb("nosuchcolour", None) == 0
    assert text_rgb("red", "s") == 0


def test_color_key_single_char_and_distinct():
    assert color_key("a") == ord("a")
    assert color_key("ab") != color_key("ba")
    assert len({color_key(code) for code in ["aa", "ab", "ba", "bb", "a ", " a"]}) == 6


def test_parse_xpm_pixels():
    image = parse_xpm(["2 2 2 1", "r c red", "n c None", "rn", "nr"])
    assert (image.width, image.height) == (2, 2)
    assert image.get_pixel(0, 0) == 0xFF0000
    assert image.get_pixel(1, 0) == 0xFF000000
    assert image.get_pixel(0, 1) == 0xFF000000
    assert image.get_pixel(1, 1) == 0xFF0000


def test_parse_xpm_unknown_code_is_black():
    image = parse_xpm(["1 1 1 1", "a c red", "z"])
    assert image.get_pixel(0, 0) == 0


def test_parse_xpm_two_char_codes_last_definition_wins():
    image = parse_xpm(["1 1 2 2", "aa c red", "aa c #00FF00", "aa"])
    assert image.get_pixel(0, 0) == 0x00FF00


def test_parse_xpm_long_codes_first_definition_wins():
    image = parse_xpm(["1 1 2 3", "aaa c red", "aaa c #00FF00", "aaa"])
    assert image.get_pixel(0, 0) == 0xFF0000


def test_xpm_from_data_matches_parse():
    lines = ["2 1 2 1", "x c white", "o c black", "xo"]
    image = xpm_from_data(lines)
    assert image.get_pixel(0, 0) == text_rgb("white", None)
    assert image.get_pixel(1, 0) == text_rgb("black", None)


def test_xpm_from_file(tmp_path):
    path = tmp_path / "open.xpm"
    path.write_text(SAMPLE_FILE)
    image = xpm_from_file(path)
    assert (image.width, image.height) == (3, 2)
    assert [image.get_pixel(x, 0) for x in range(3)] == [0xFF000000, 0xFF00, 0xFF000000]
    assert [image.get_pixel(x, 1) for x in range(3)] == [0xFF00] * 3


def test_xpm_from_file_missing(tmp_path):
    with pytest.raises(OSError):
        xpm_from_file(tmp_path / "absent.xpm")


@pytest.mark.parametrize(
    "lines",
    [
        [],
        ["2 2 1"],
        ["0 2 1 1", "a c red", "aa", "aa"],
        ["2 2 1 1", "a red", "aa", "aa"],
        ["2 2 1 1", "a c", "aa", "aa"],
        ["2 2 2 1", "a c red"],
        ["2 2 1 1", "a c red", "aa"],
        ["2 2 1 1", "a c red", "a", "aa"],
    ],
)
def test_parse_xpm_errors(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)