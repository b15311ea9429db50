import pytest

from cubed.colors import good_color, lookup_color, mask_shifts

RGB565 = (0xF800, 0x07E0, 0x001F)
RGB888 = (0xFF0000, 0x00FF00, 0x0000FF)


def test_lookup_basic_names():
    assert lookup_color("red") == 0xFF0000
    assert lookup_color("navy") == 0x80
    assert lookup_color("lightgoldenrodyellow") == 0xFAFAD2


def test_lookup_is_case_insensitive():
    assert lookup_color("RED") == lookup_color("red")
    assert lookup_color("Ghost White") == 0xF8F8FF


def test_lookup_first_entry_wins_for_duplicates():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_lookup_none_is_transparent():
    assert lookup_color("none") == -1


def test_lookup_unknown_raises():
    with pytest.raises(KeyError):
        lookup_color("not a colour")


@pytest.mark.parametrize("number", [0, 1, 50, 99, 100])
def test_gray_and_grey_agree(number):
    assert lookup_color(f"gray{number}") == lookup_color(f"grey{number}")


def test_gray_extremes_match_black_and_white():
    assert lookup_color("gray0") == lookup_color("black")
    assert lookup_color("grey100") == lookup_color("white")


def test_gray_levels_are_neutral_and_increasing():
    values = [lookup_color(f"gray{n}") for n in range(101)]
    assert values == sorted(values)
    for value in values:
        level = value & 0xFF
        assert value == level | (level << 8) | (level << 16)


def test_numbered_variant_one_matches_base():
    assert lookup_color("snow1") == lookup_color("snow")
    assert lookup_color("red1") == lookup_color("red")
    assert lookup_color("blue4") == lookup_color("darkblue")


@pytest.mark.parametrize("masks", [RGB565, RGB888, (0x7C00, 0x03E0, 0x001F)])
def test_mask_shifts_rebuild_masks(masks):
    shifts = mask_shifts(*masks)
    assert len(shifts) == 6
    rebuilt = tuple(((1 << shifts[i + 1]) - 1) << shifts[i] for i in (0, 2, 4))
    assert rebuilt == masks


def test_mask_shifts_zero_mask_raises():
    with pytest.raises(ValueError):
        mask_shifts(0, 0xFF00, 0xFF)


@pytest.mark.parametrize("color", [0, 0x123456, 0xFFFFFF, 0xFF0000])
def test_deep_visual_keeps_colour(color):
    assert good_color(color, 24, mask_shifts(*RGB565)) == color
    assert good_color(color, 32, mask_shifts(*RGB565)) == color


@pytest.mark.parametrize("color", [0, 0x123456, 0xABCDEF, 0xFFFFFF, 0x00FF00])
def test_shallow_visual_with_888_layout_round_trips(color):
    assert good_color(color, 16, mask_shifts(*RGB888)) == color


def test_565_pure_channels_fill_their_masks():
    shifts = mask_shifts(*RGB565)
    assert good_color(lookup_color("red"), 16, shifts) == RGB565[0]
    assert good_color(lookup_color("green"), 16, shifts) == RGB565[1]
    assert good_color(lookup_color("blue"), 16, shifts) == RGB565[2]
    assert good_color(lookup_color("black"), 16, shifts) == 0
    assert good_color(lookup_color("white"), 16, shifts) == sum(RGB565)