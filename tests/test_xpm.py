import itertools

import pytest

from xpmkit.colors import lookup_color
from xpmkit.xpm import (
    XpmError,
    XpmImage,
    color_key,
    extract_quoted_lines,
    load_xpm,
    parse_xpm,
    parse_xpm_text,
    strip_comments,
    text_to_rgb,
)

SAMPLE = [
    "3 2 3 1",
    "r c #FF0000",
    ". c None",
    "b c blue",
    "r.b",
    "bbr",
]

SAMPLE_FILE = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"3 2 3 1",
"r c #FF0000",
". c None",
"b c blue",
// pixels
"r.b",
"bbr"
};
"""


def test_parse_dimensions():
    image = parse_xpm(SAMPLE)
    assert (image.width, image.height) == (3, 2)
    assert len(image.pixels) == 6


def test_parse_pixels():
    image = parse_xpm(SAMPLE)
    assert image.pixel(0, 0) == 0xFF0000
    assert image.pixel(1, 0) == 0xFF000000
    assert image.pixel(2, 0) == lookup_color("blue")
    assert image.pixel(2, 1) == 0xFF0000


def test_parse_text_equals_parse_lines():
    assert parse_xpm_text(SAMPLE_FILE) == parse_xpm(SAMPLE)


def test_load_file(tmp_path):
    path = tmp_path / "sample.xpm"
    path.write_text(SAMPLE_FILE, encoding="latin-1")
    assert load_xpm(path) == parse_xpm(SAMPLE)


def test_load_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_xpm(tmp_path / "absent.xpm")


def test_two_char_codes_and_two_word_names():
    image = parse_xpm(["2 1 2 2", "aa c dark red", "bb c #00ff00", "aabb"])
    assert image.pixels == (0x8B0000, 0x00FF00)


def test_single_char_duplicate_last_definition_wins():
    image = parse_xpm(["1 1 2 1", "x c #000001", "x c #000002", "x"])
    assert image.pixels == (0x000002,)


def test_wide_code_duplicate_first_definition_wins():
    image = parse_xpm(["1 1 2 3", "xyz c #000001", "xyz c #000002", "xyz"])
    assert image.pixels == (0x000001,)


def test_unknown_code_is_zero():
    image = parse_xpm(["1 1 1 3", "abc c #123456", "zzz"])
    assert image.pixels == (0,)


@pytest.mark.parametrize(
    "lines",
    [
        [],
        ["3 2 1"],
        ["0 1 1 1", "a c red", "a"],
        ["1 1 1 1", "a red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 1 1 1", "a c red"],
        ["2 1 1 1", "a c red", "a"],
        ["1 1 2 1", "a c red"],
    ],
)
def test_malformed_data_raises(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_pixel_out_of_range():
    image = parse_xpm(SAMPLE)
    with pytest.raises(IndexError):
        image.pixel(3, 0)


def test_image_size_mismatch_rejected():
    with pytest.raises(ValueError):
        XpmImage(2, 2, (0, 0, 0))


def test_color_key_distinct_for_distinct_codes():
    codes = ["".join(p) for p in itertools.product("ab.#", repeat=2)]
    assert len({color_key(code) for code in codes}) == len(codes)


def test_color_key_of_empty_code():
    assert color_key("") == 0


def test_text_to_rgb_hex():
    assert text_to_rgb("#00ff00", None) == 0x00FF00
    assert text_to_rgb("#123456", "ignored") == 0x123456


def test_text_to_rgb_hex_without_digits():
    assert text_to_rgb("#", None) == 0
    assert text_to_rgb("#zz", None) == 0


def test_text_to_rgb_hex_wraps_to_int():
    assert text_to_rgb("#FFFFFFFF", None) == -1


def test_text_to_rgb_names():
    assert text_to_rgb("Red", None) == 0xFF0000
    assert text_to_rgb("dark", "red") == 0x8B0000
    assert text_to_rgb("none", None) == -1
    assert text_to_rgb("nosuchcolour", None) == 0


def test_strip_comments_preserves_length_and_quotes():
    text = 'a /* hi */ "q /* k */" // x\nb'
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "hi" not in result
    assert '"q /* k */"' in result
    assert result.endswith(" b")
    assert "\n" not in result


def test_extract_quoted_lines():
    text = 'static char *x[] = { "ab", "c d", "" };'
    assert list(extract_quoted_lines(text)) == ["ab", "c d", ""]


def test_extract_quoted_lines_unterminated():
    assert list(extract_quoted_lines('"one" "two')) == ["one"]