"""Rasterising the projected wireframe into a pixel buffer."""

from __future__ import annotations

from typing import Iterator

from .color import Color, edge_color, rgba

__all__ = ["Image", "TEXT_COLOR", "bresenham", "draw_line", "render", "overlay_lines"]

TEXT_COLOR = rgba(254, 254, 254, 0)


class Image:
    """A 32-bit BGRA pixel buffer."""

    bpp = 32

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("image size must be positive")
        self.width = width
        self.height = height
        self.size_line = width * (self.bpp // 8)
        self.data = bytearray(self.size_line * height)

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside image")
        return x * (self.bpp // 8) + y * self.size_line

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        """Store ``color`` at ``(x, y)``."""
        i = self._offset(x, y)
        self.data[i : i + 4] = bytes(
            (color.b & 0xFF, color.g & 0xFF, color.r & 0xFF, color.a & 0xFF)
        )

    def pixel(self, x: int, y: int) -> Color:
        """Return the colour stored at ``(x, y)``."""
        i = self._offset(x, y)
        b, g, r, a = self.data[i : i + 4]
        return Color(r, g, b, a)


def _trunc_half(value: int) -> int:
    return value // 2 if value >= 0 else -((-value) // 2)


def bresenham(x0: int, y0: int, x1: int, y1: int) -> Iterator[tuple[int, int]]:
    """Yield the integer points of the segment from ``(x0, y0)`` to ``(x1, y1)``."""
    dx = abs(x1 - x0)
    dy = abs(y0 - y1)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = _trunc_half(dx if dx > dy else -dy)
    x, y = x0, y0
    while True:
        yield x, y
        if x == x1 and y == y1:
            return
        e2 = err
        if e2 > -dx:
            err -= dy
            x += sx
        if e2 < dy:
            err += dx
            y += sy


def draw_line(image: Image, start, end, color: Color) -> None:
    """Draw the segment between two points that have ``x`` and ``y``.

    Nothing is drawn when both ends lie outside the image; pixels on
    the image border are left untouched.
    """
    x0, y0 = int(start.x), int(start.y)
    x1, y1 = int(end.x), int(end.y)
    w, h = image.width, image.height

    def outside(x: int, y: int) -> bool:
        return x < 0 or x > w or y < 0 or y > h

    if outside(x0, y0) and outside(x1, y1):
        return
    for x, y in bresenham(x0, y0, x1, y1):
        if 0 < x < w and 0 < y < h:
            image.set_pixel(x, y, color)


def render(scene) -> Image:
    """Draw every edge of the scene's projected map into a new image."""
    image = Image(scene.width, scene.height)
    display, origin = scene.display, scene.origin
    for i, row in enumerate(display):
        for j, point in enumerate(row):
            if j + 1 < len(row):
                color = edge_color(origin[i][j].z, origin[i][j + 1].z)
                draw_line(image, point, row[j + 1], color)
            if i + 1 < len(display):
                color = edge_color(origin[i][j].z, origin[i + 1][j].z)
                draw_line(image, point, display[i + 1][j], color)
    return image


def overlay_lines(scene) -> list[tuple[int, int, str]]:
    """Help and status text as ``(x, y, text)``, drawn in :data:`TEXT_COLOR`."""
    return [
        (50, 10, "--COMMANDS--"),
        (10, 40, "numpad 4,6 rotate on Y"),
        (10, 70, "numpad 2,8 rotate on X"),
        (10, 100, "numpad 7,9 rotate on Z"),
        (10, 130, "numpad 1,3 to extrude"),
        (10, 160, "mouse wheel to zoom"),
        (10, 190, "X : "),
        (50, 190, str(int(scene.angle_x))),
        (10, 220, "Y : "),
        (50, 220, str(int(scene.angle_y))),
        (10, 250, "Z : "),
        (50, 250, str(int(scene.angle_z))),
        (10, 280, "Map size : "),
        (120, 280, str(scene.columns * scene.rows)),
    ]