import pytest

from fdfview.colornames import COLOR_NAMES, lookup_color


@pytest.mark.parametrize(
    "name, expected",
    [
        ("snow", 0xFFFAFA),
        ("red", 0xFF0000),
        ("black", 0x0),
        ("navy", 0x80),
        ("gray50", 0x7F7F7F),
        ("ghost white", 0xF8F8FF),
        ("lightgreen", 0x90EE90),
    ],
)
def test_lookup_known_names(name, expected):
    assert lookup_color(name) == expected


def test_lookup_ignores_case():
    assert lookup_color("RED") == lookup_color("red")
    assert lookup_color("Ghost White") == 0xF8F8FF


def test_none_is_transparent_marker():
    assert lookup_color("none") == -1
    assert lookup_color("NONE") == -1


def test_first_duplicate_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_gray_and_grey_spellings_agree():
    for level in range(101):
        assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        lookup_color("not a colour")


def test_name_is_not_trimmed():
    with pytest.raises(KeyError):
        lookup_color(" red")


def test_values_fit_in_24_bits():
    for name, value in COLOR_NAMES.items():
        if name == "none":
            assert value == -1
        else:
            assert 0 <= value <= 0xFFFFFF


def test_mapping_agrees_with_lookup_and_is_read_only():
    for name, value in COLOR_NAMES.items():
        assert name == name.lower()
        assert lookup_color(name.upper()) == value
    with pytest.raises(TypeError):
        COLOR_NAMES["red"] = 0  # type: ignore[index]
    assert lookup_color("red") == 0xFF0000