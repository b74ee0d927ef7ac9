import pytest

from fdfview.color import Color, edge_color, rgba


def test_flat_edge_is_blue():
    assert edge_color(0, 0) == Color(20, 118, 254, 0)


@pytest.mark.parametrize("z, z1", [(-1, 5), (5, -1), (-3, -3), (0.5, 0.5)])
def test_sunken_edges_are_blue(z, z1):
    assert edge_color(z, z1) == Color(20, 118, 254, 0)


def test_high_edge_clamps_to_minimum_green():
    assert edge_color(0, 1000) == Color(0, 50, 0, 0)
    assert edge_color(1000, 0) == Color(0, 50, 0, 0)


def test_raised_edges_are_pure_green():
    for z, z1 in [(0, 10), (10, 0), (3, 7), (7, 3)]:
        color = edge_color(z, z1)
        assert color.r == 0 and color.b == 0 and color.a == 0
        assert 50 <= color.g <= 254


def test_second_height_wins_when_both_raised():
    assert edge_color(3, 100) == edge_color(0, 100)


def test_green_darkens_with_height():
    greens = [edge_color(0, h).g for h in (1, 20, 100, 200)]
    assert greens == sorted(greens, reverse=True)
    assert len(set(greens)) == len(greens)


def test_green_is_integer_for_fractional_height():
    assert isinstance(edge_color(0, 10.5).g, int)
    assert edge_color(0, 10.5).g == edge_color(0, 10.9).g


def test_rgba_channel_positions():
    value = rgba(1, 2, 3, 4)
    assert (value >> 24) & 0xFF == 4
    assert (value >> 16) & 0xFF == 1
    assert (value >> 8) & 0xFF == 2
    assert value & 0xFF == 3


def test_rgba_black_is_zero():
    assert rgba(0, 0, 0, 0) == 0


def test_pack_matches_rgba():
    color = Color(20, 118, 254, 0)
    assert color.pack() == rgba(20, 118, 254, 0)


def test_pack_default_alpha():
    assert Color(10, 20, 30).pack() == rgba(10, 20, 30, 0)