import pytest

from fdfview.scene import Key, Scene, Vertex, build_map, get_angle


def flat_grid(rows=3, cols=4):
    return [["0"] * cols for _ in range(rows)]


def hill_grid():
    return [
        ["0", "0", "0"],
        ["0", "5", "0"],
        ["0", "0", "0"],
    ]


def display_coords(scene):
    return [(p.x, p.y) for row in scene.display for p in row]


def test_build_map_reads_leading_integer_of_cell():
    grid = [["0", "3,0xFF0000"], ["x", "-2"]]
    result = build_map(grid)
    assert result[0][0] == Vertex(0, 0, 0)
    assert result[0][1].z == build_map([["3"]])[0][0].z
    assert result[1][0].z == 0
    assert result[1][1].z == -build_map([["2"]])[0][0].z


def test_build_map_spacing_is_uniform():
    result = build_map(flat_grid(2, 3))
    xs = [p.x for p in result[0]]
    assert xs[1] - xs[0] == xs[2] - xs[1]
    assert result[1][0].y - result[0][0].y == xs[1] - xs[0]


def test_get_angle_wraps_below_zero():
    assert get_angle(Key.NUMPAD_4, 0) == 359


def test_get_angle_wraps_at_full_turn():
    assert get_angle(Key.NUMPAD_6, 359) == 0


def test_get_angle_ignores_other_keys():
    assert get_angle(Key.LEFT, 42.5) == 42.5


def test_get_angle_increment_then_decrement_is_identity():
    assert get_angle(Key.NUMPAD_9, get_angle(Key.NUMPAD_7, 10)) == 10


@pytest.mark.parametrize("grid", [[], [[]], [["0", "0"], ["0"]]])
def test_scene_rejects_bad_grids(grid):
    with pytest.raises(ValueError):
        Scene(grid)


def test_projection_without_rotation_keeps_positions():
    scene = Scene(flat_grid())
    scene.project(0)
    expected = [(p.x, p.y) for row in scene.origin for p in row]
    assert display_coords(scene) == pytest.approx(expected)


def test_arrow_key_shifts_display_by_speed():
    scene = Scene(hill_grid())
    scene.project(0)
    before = display_coords(scene)
    assert scene.handle_key(Key.RIGHT) is True
    after = display_coords(scene)
    for (bx, by), (ax, ay) in zip(before, after):
        assert ax == pytest.approx(bx + scene.speed)
        assert ay == pytest.approx(by)


def test_up_key_moves_display_upwards():
    scene = Scene(hill_grid())
    scene.project(0)
    before = display_coords(scene)
    scene.handle_key(Key.UP)
    for (_, by), (_, ay) in zip(before, display_coords(scene)):
        assert ay == pytest.approx(by - scene.speed)


def test_rotate_and_back_restores_display():
    scene = Scene(hill_grid())
    scene.project(0)
    before = display_coords(scene)
    scene.handle_key(Key.NUMPAD_7)
    assert display_coords(scene) != pytest.approx(before)
    scene.handle_key(Key.NUMPAD_9)
    assert scene.angle_z == 0
    assert display_coords(scene) == pytest.approx(before)


def test_full_turn_returns_angle_to_zero():
    scene = Scene(flat_grid(2, 2))
    for _ in range(360):
        scene.handle_key(Key.NUMPAD_2)
    assert scene.angle_x == 0


def test_scale_in_and_out_restores_origin():
    scene = Scene(hill_grid())
    original = [(p.x, p.y, p.z) for row in scene.origin for p in row]
    scene.scale(Key.ZOOM_IN)
    doubled = [(p.x, p.y, p.z) for row in scene.origin for p in row]
    assert doubled == [(2 * x, 2 * y, 2 * z) for x, y, z in original]
    scene.scale(Key.ZOOM_OUT)
    assert [(p.x, p.y, p.z) for row in scene.origin for p in row] == original


def test_modify_z_only_touches_raised_points():
    scene = Scene(hill_grid())
    peak = scene.origin[1][1].z
    assert scene.modify_z(Key.NUMPAD_1) is True
    assert scene.origin[1][1].z == pytest.approx(peak + 10.01)
    assert scene.origin[0][0].z == 0
    scene.handle_key(Key.NUMPAD_3)
    assert scene.origin[1][1].z == pytest.approx(peak)


def test_modify_z_ignores_other_keys():
    scene = Scene(hill_grid())
    assert scene.modify_z(Key.LEFT) is False


def test_unhandled_key_changes_nothing():
    scene = Scene(hill_grid())
    scene.project(0)
    before = display_coords(scene)
    assert scene.handle_key(0) is False
    assert display_coords(scene) == before


def test_escape_exits(capsys):
    scene = Scene(flat_grid())
    with pytest.raises(SystemExit):
        scene.handle_key(Key.ESCAPE)
    assert "EXIT PROGRAM." in capsys.readouterr().out


def test_center_puts_map_in_middle_of_window():
    scene = Scene(flat_grid(5, 7), width=400, height=300)
    scene.center()
    scene.project(0)
    xs = [p.x for row in scene.display for p in row]
    ys = [p.y for row in scene.display for p in row]
    assert (min(xs) + max(xs)) / 2 == pytest.approx(scene.width / 2)
    assert (min(ys) + max(ys)) / 2 == pytest.approx(scene.height / 2)


def test_center_shrinks_oversized_map():
    scene = Scene(flat_grid(6, 6), width=10, height=10)
    scene.center()
    assert scene.ox * 2 <= scene.width or scene.oy * 2 <= scene.height


def test_mouse_zoom_in_doubles_map():
    scene = Scene(hill_grid())
    before = scene.origin[2][2].x
    assert scene.handle_mouse(Key.ZOOM_IN, 10, 10) is True
    assert scene.origin[2][2].x == 2 * before


def test_mouse_other_button_is_ignored():
    scene = Scene(hill_grid())
    assert scene.handle_mouse(1, 10, 10) is False