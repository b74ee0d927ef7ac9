"""The wireframe scene: height map, view state, projection and input handling."""

from __future__ import annotations

import enum
import math
import re
from dataclasses import dataclass

__all__ = ["Key", "Vertex", "Scene", "build_map", "get_angle"]

_SPACING = 20
_HEIGHT_FACTOR = 2
_Z_STEP = 10.01
_THETA = 1
_DEFAULT_WIDTH = 2300
_DEFAULT_HEIGHT = 1300

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class Key(enum.IntEnum):
    """Key and mouse button codes understood by the scene."""

    ZOOM_IN = 4
    ZOOM_OUT = 5
    ESCAPE = 53
    NUMPAD_1 = 83
    NUMPAD_2 = 84
    NUMPAD_3 = 85
    NUMPAD_4 = 86
    NUMPAD_6 = 88
    NUMPAD_7 = 89
    NUMPAD_8 = 91
    NUMPAD_9 = 92
    LEFT = 123
    RIGHT = 124
    DOWN = 125
    UP = 126


_DECREMENT_KEYS = frozenset({Key.NUMPAD_4, Key.NUMPAD_8, Key.NUMPAD_9})
_INCREMENT_KEYS = frozenset({Key.NUMPAD_6, Key.NUMPAD_2, Key.NUMPAD_7})
_ARROW_KEYS = frozenset({Key.LEFT, Key.RIGHT, Key.DOWN, Key.UP})

# Attribute holding each axis angle, and the keys that turn it.
_ROTATIONS = (
    ("angle_z", frozenset({Key.NUMPAD_7, Key.NUMPAD_9})),
    ("angle_x", frozenset({Key.NUMPAD_2, Key.NUMPAD_8})),
    ("angle_y", frozenset({Key.NUMPAD_4, Key.NUMPAD_6})),
)


@dataclass
class Vertex:
    """A point in map space."""

    x: float
    y: float
    z: float


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _trunc_half(value: int) -> int:
    return value // 2 if value >= 0 else -((-value) // 2)


def build_map(grid: list[list[str]]) -> list[list[Vertex]]:
    """Turn a grid of height cells into rows of evenly spaced vertices."""
    return [
        [
            Vertex(j * _SPACING, i * _SPACING, _leading_int(cell) * _HEIGHT_FACTOR)
            for j, cell in enumerate(row)
        ]
        for i, row in enumerate(grid)
    ]


def get_angle(key: int, angle: float) -> float:
    """Return ``angle`` turned one degree by ``key``, wrapped into [0, 360)."""
    if key in _DECREMENT_KEYS:
        angle -= _THETA
    if key in _INCREMENT_KEYS:
        angle += _THETA
    if angle >= 360:
        return 0
    if angle < 0:
        return 360 - _THETA
    return angle


class Scene:
    """A height map together with the view that projects it onto a window."""

    def __init__(
        self,
        grid: list[list[str]],
        width: int = _DEFAULT_WIDTH,
        height: int = _DEFAULT_HEIGHT,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("window size must be positive")
        if not grid or not grid[0]:
            raise ValueError("map is empty")
        columns = len(grid[0])
        if any(len(row) != columns for row in grid):
            raise ValueError("map rows differ in width")
        self.width = width
        self.height = height
        self.columns = columns
        self.rows = len(grid)
        self.origin = build_map(grid)
        self.display = build_map(grid)
        self.ox = 0.0
        self.oy = 0.0
        self.move_x = 0.0
        self.move_y = 0.0
        self.speed = 15
        self.angle_x = 0.0
        self.angle_y = 0.0
        self.angle_z = 0.0

    def _origin_points(self):
        for row in self.origin:
            yield from row

    def update_origins(self) -> None:
        """Recompute the centre of rotation from the map's extent."""
        first = self.origin[0][0]
        self.ox = (self.origin[0][self.columns - 1].x - first.x) / 2
        self.oy = (self.origin[self.rows - 1][0].y - first.y) / 2

    def scale(self, key: int) -> None:
        """Double the map for ``ZOOM_IN``, halve it for ``ZOOM_OUT``."""
        if key == Key.ZOOM_IN:
            factor = 2.0
        elif key == Key.ZOOM_OUT:
            factor = 0.5
        else:
            return
        for point in self._origin_points():
            point.x *= factor
            point.y *= factor
            point.z *= factor

    def project(self, key: int = 0) -> None:
        """Apply an arrow-key move, then rotate every point into display space."""
        if key == Key.LEFT:
            self.move_x -= self.speed
        if key == Key.RIGHT:
            self.move_x += self.speed
        if key == Key.DOWN:
            self.move_y += self.speed
        if key == Key.UP:
            self.move_y -= self.speed
        self.update_origins()
        ay, ax, az = (math.radians(a) for a in (self.angle_y, self.angle_x, self.angle_z))
        cy, sy = math.cos(ay), math.sin(ay)
        cx, sx = math.cos(ax), math.sin(ax)
        cz, sz = math.cos(az), math.sin(az)
        for origin_row, display_row in zip(self.origin, self.display):
            for o, d in zip(origin_row, display_row):
                px = o.x - self.ox
                x1 = px * cy - o.z * sy
                y1 = o.y - self.oy
                z1 = px * sy + o.z * cy
                vy = y1 * cx + z1 * sx
                d.x = x1 * cz + vy * sz + self.ox + self.move_x
                d.y = -x1 * sz + vy * cz + self.oy + self.move_y
                d.z = z1

    def modify_z(self, key: int) -> bool:
        """Raise or lower every non-flat point; return whether anything ran."""
        if key not in (Key.NUMPAD_1, Key.NUMPAD_3):
            return False
        step = _Z_STEP if key == Key.NUMPAD_1 else -_Z_STEP
        for point in self._origin_points():
            if point.z != 0:
                point.z += step
        self.project(key)
        return True

    def center(self) -> None:
        """Shrink the map until it fits, then move it to the window centre."""
        self.update_origins()
        while self.ox * 2 > self.width and self.oy * 2 > self.height:
            self.scale(Key.ZOOM_OUT)
            self.update_origins()
        self.move_x = self.width // 2 - self.ox
        self.move_y = self.height // 2 - self.oy

    def handle_key(self, key: int) -> bool:
        """React to a key press; return whether the view was reprojected.

        ``ESCAPE`` prints a farewell and raises :class:`SystemExit`.
        """
        key = int(key)
        changed = self.modify_z(key)
        for attribute, keys in _ROTATIONS:
            if key in keys:
                setattr(self, attribute, get_angle(key, getattr(self, attribute)))
                self.project(key)
                changed = True
        if key == Key.ESCAPE:
            print("EXIT PROGRAM.")
            raise SystemExit(0)
        if key in _ARROW_KEYS:
            self.project(key)
            changed = True
        return changed

    def handle_mouse(self, button: int, x: int, y: int) -> bool:
        """Zoom around the pointer on wheel buttons; return whether it changed."""
        if button == Key.ZOOM_IN:
            self.scale(button)
            self.move_x -= x - int(self.move_x)
            self.move_y -= y - int(self.move_y)
        elif button == Key.ZOOM_OUT:
            self.scale(button)
            self.move_x += _trunc_half(x - int(self.move_x))
            self.move_y += _trunc_half(y - int(self.move_y))
        else:
            return False
        self.project(button)
        return True