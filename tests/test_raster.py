import pytest

from fdfview.color import Color, edge_color
from fdfview.raster import Image, bresenham, draw_line, overlay_lines, render
from fdfview.scene import Key, Scene, Vertex


def test_new_image_is_blank():
    image = Image(4, 3)
    assert image.data == bytearray(4 * 3 * 4)
    assert image.pixel(2, 1) == Color(0, 0, 0, 0)


def test_set_pixel_round_trip_and_byte_order():
    image = Image(4, 3)
    color = Color(20, 118, 254, 0)
    image.set_pixel(1, 2, color)
    assert image.pixel(1, 2) == color
    offset = 1 * 4 + 2 * image.size_line
    assert bytes(image.data[offset : offset + 4]) == bytes((254, 118, 20, 0))


@pytest.mark.parametrize("x, y", [(-1, 0), (4, 0), (0, 3)])
def test_pixel_outside_raises(x, y):
    image = Image(4, 3)
    with pytest.raises(IndexError):
        image.set_pixel(x, y, Color(1, 2, 3))


def test_image_size_must_be_positive():
    with pytest.raises(ValueError):
        Image(0, 5)


@pytest.mark.parametrize(
    "start, end", [((0, 0), (7, 3)), ((5, 9), (1, 0)), ((3, 3), (3, -4)), ((2, 2), (2, 2))]
)
def test_bresenham_is_connected_between_endpoints(start, end):
    points = list(bresenham(*start, *end))
    assert points[0] == start
    assert points[-1] == end
    for (ax, ay), (bx, by) in zip(points, points[1:]):
        assert abs(ax - bx) <= 1 and abs(ay - by) <= 1
        assert (ax, ay) != (bx, by)


def test_bresenham_horizontal_line_length():
    points = list(bresenham(2, 5, 9, 5))
    assert points == [(x, 5) for x in range(2, 10)]


def test_draw_line_skips_when_both_ends_outside():
    image = Image(10, 10)
    blank = Color(0, 0, 0, 0)
    draw_line(image, Vertex(-5, -5, 0), Vertex(20, 30, 0), Color(1, 2, 3))
    painted = [
        (x, y) for x in range(10) for y in range(10) if image.pixel(x, y) != blank
    ]
    assert painted == []


def test_draw_line_leaves_border_untouched():
    image = Image(10, 10)
    color = Color(20, 118, 254)
    draw_line(image, Vertex(0, 5, 0), Vertex(5, 5, 0), color)
    assert image.pixel(0, 5) == Color(0, 0, 0, 0)
    assert all(image.pixel(x, 5) == color for x in range(1, 6))


def test_render_draws_flat_edges_in_flat_colour():
    scene = Scene([["0", "0"], ["0", "0"]], width=200, height=200)
    scene.center()
    scene.project(0)
    image = render(scene)
    a = scene.display[0][0]
    b = scene.display[0][1]
    mid_x = (int(a.x) + int(b.x)) // 2
    assert image.pixel(mid_x, int(a.y)) == edge_color(0, 0)
    assert image.pixel(1, 1) == Color(0, 0, 0, 0)


def test_render_has_window_size():
    scene = Scene([["0", "1"], ["1", "0"]], width=120, height=80)
    image = render(scene)
    assert (image.width, image.height) == (120, 80)


def test_overlay_reports_angles_and_map_size():
    scene = Scene([["0"] * 3 for _ in range(2)])
    scene.handle_key(Key.NUMPAD_4)
    lines = overlay_lines(scene)
    assert lines[0] == (50, 10, "--COMMANDS--")
    assert (50, 220, str(int(scene.angle_y))) in lines
    assert lines[-1] == (120, 280, str(scene.columns * scene.rows))