"""Edge colouring by height and packing of colours into pixel values."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Color", "edge_color", "rgba"]

_MIN_GREEN = 50
_MAX_GREEN = 254


@dataclass
class Color:
    """An RGBA colour with 0-255 channels."""

    r: int
    g: int
    b: int
    a: int = 0

    def pack(self) -> int:
        """Return the colour as a 0xAARRGGBB integer."""
        return rgba(self.r, self.g, self.b, self.a)


def rgba(r: int, g: int, b: int, a: int) -> int:
    """Pack channels into a single 0xAARRGGBB integer."""
    return (a << 24) + (r << 16) + (g << 8) + b


def _green_for(height: float) -> int:
    green = _MAX_GREEN - height
    return int(green) if green >= _MIN_GREEN else _MIN_GREEN


def edge_color(z: float, z1: float) -> Color:
    """Colour for an edge between points at heights ``z`` and ``z1``.

    Flat or sunken edges are blue; raised ones are green, darker the
    higher they go.
    """
    if z >= 0 and z1 >= 1:
        return Color(0, _green_for(z1), 0, 0)
    if z >= 1 and z1 >= 0:
        return Color(0, _green_for(z), 0, 0)
    return Color(20, 118, 254, 0)