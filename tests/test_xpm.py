import pytest

from cubed.colors import lookup_color
from cubed.xpm import (
    XpmError,
    find,
    find_outside_quotes,
    parse_color,
    split_words,
    strip_comments,
    xpm_file_to_image,
    xpm_to_image,
)


def test_split_words_on_spaces_and_tabs():
    assert split_words("  a\tb  c ") == ["a", "b", "c"]


def test_split_words_empty():
    assert split_words(" \t ") == []


def test_find_first_occurrence():
    assert find("abcabc", "bc", 6) == 1


def test_find_needle_longer_than_limit():
    assert find("abcabc", "abc", 2) == -1


def test_find_missing():
    assert find("abcabc", "x", 6) == -1


def test_find_empty_needle_rejected():
    with pytest.raises(ValueError):
        find("abc", "", 3)


def test_find_outside_quotes_skips_quoted_text():
    text = '"ab" ab'
    assert find_outside_quotes(text, "ab", len(text)) == text.rindex("ab")


def test_find_outside_quotes_only_quoted():
    text = '"/*"'
    assert find_outside_quotes(text, "/*", len(text)) == -1


def test_strip_block_comment():
    text = 'x /* c */ "a"'
    result = strip_comments(text)
    assert result == text.replace("/* c */", " " * len("/* c */"))


def test_strip_line_comment_blanks_newline():
    text = "a // b\nc"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "b" not in result
    assert "\n" not in result
    assert result.startswith("a") and result.endswith("c")


def test_strip_keeps_comment_inside_quotes():
    text = '"a/*b*/"'
    assert strip_comments(text) == text


def test_parse_color_hex():
    assert parse_color("#00ff00", None) == 0x00FF00


def test_parse_color_two_word_name():
    assert parse_color("light", "goldenrod") == 0xFAFAD2
    assert parse_color("LIGHT", "Goldenrod") == 0xFAFAD2


def test_parse_color_named_and_none():
    assert parse_color("red") == lookup_color("red")
    assert parse_color("None") == -1


def test_parse_color_unknown_is_black():
    assert parse_color("nosuchcolour") == 0


def test_xpm_to_image_basic():
    image = xpm_to_image(["2 2 2 1", "a c #FF0000", "b c None", "ab", "ba"])
    assert (image.width, image.height) == (2, 2)
    assert image.get_pixel(0, 0) == 0xFF0000
    assert image.get_pixel(1, 0) == 0xFF000000
    assert image.get_pixel(0, 1) == 0xFF000000
    assert image.get_pixel(1, 1) == 0xFF0000


def test_xpm_two_chars_per_pixel_named_colour():
    image = xpm_to_image(["1 1 1 2", "ab c light goldenrod", "ab"])
    assert image.get_pixel(0, 0) == parse_color("light", "goldenrod")


def test_short_codes_later_definition_wins():
    image = xpm_to_image(["1 1 2 1", "a c #000001", "a c #000002", "a"])
    assert image.get_pixel(0, 0) == 0x000002


def test_long_codes_first_definition_wins():
    image = xpm_to_image(["1 1 2 3", "abc c #000001", "abc c #000002", "abc"])
    assert image.get_pixel(0, 0) == 0x000001


def test_unknown_pixel_code_is_black():
    image = xpm_to_image(["1 1 1 1", "a c #0000FF", "z"])
    assert image.get_pixel(0, 0) == 0


@pytest.mark.parametrize(
    "lines",
    [
        ["1 1"],
        ["0 1 1 1", "a c red", "a"],
        ["-2 1 1 1", "a c red", "aa"],
        ["1 1 1 1", "a s red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["2 2 1 1", "a c red", "aa"],
        ["2 1 1 1", "a c red", "a"],
        [],
    ],
)
def test_invalid_data_raises(lines):
    with pytest.raises(XpmError):
        xpm_to_image(lines)


def test_xpm_file_to_image(tmp_path):
    source = (
        "/* XPM */\n"
        "static char *test[] = {\n"
        "/* columns rows colors chars-per-pixel */\n"
        '"2 1 2 1",\n'
        '"  c black",\n'
        '". c #0000FF",\n'
        '" ."\n'
        "};\n"
    )
    path = tmp_path / "test.xpm"
    path.write_text(source, encoding="latin-1")
    image = xpm_file_to_image(path)
    assert (image.width, image.height) == (2, 1)
    assert image.get_pixel(0, 0) == lookup_color("black")
    assert image.get_pixel(1, 0) == 0x0000FF


def test_xpm_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        xpm_file_to_image(tmp_path / "absent.xpm")