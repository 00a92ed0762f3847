import pytest

from xpmkit.colors import color_names, lookup_color


@pytest.mark.parametrize(
    "name, value",
    [
        ("snow", 0xFFFAFA),
        ("white", 0xFFFFFF),
        ("black", 0x0),
        ("navy", 0x80),
        ("gray50", 0x7F7F7F),
        ("lightgoldenrodyellow", 0xFAFAD2),
        ("lightgreen", 0x90EE90),
    ],
)
def test_known_values(name, value):
    assert lookup_color(name) == value


def test_lookup_ignores_case():
    assert lookup_color("SNOW") == lookup_color("snow")
    assert lookup_color("Ghost White") == 0xF8F8FF


def test_none_is_transparent_marker():
    assert lookup_color("none") == -1
    assert lookup_color("None") == -1


def test_first_entry_wins_for_duplicates():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        lookup_color("not a colour")


def test_names_are_unique_and_ordered():
    names = color_names()
    assert len(names) == len(set(names))
    assert names[0] == "snow"
    assert names[-1] == "none"


def test_every_name_resolves_to_a_valid_value():
    for name in color_names():
        value = lookup_color(name)
        assert value == -1 or 0 <= value <= 0xFFFFFF


def test_gray_and_grey_agree():
    for level in range(101):
        assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")